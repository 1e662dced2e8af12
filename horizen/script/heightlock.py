"""Matchers for the replay-protected output scripts of Horizen.

Horizen appends ``<32-byte block hash> <block height> OP_CHECKBLOCKATHEIGHT`` to the
standard p2pkh and p2sh scripts. The standard grammar does not know this suffix, so the
owner hash is recovered here by comparing bytes at fixed offsets. The block hash and height
values are not checked, only their position.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


OP_CHECKBLOCKATHEIGHT = 0xb4


@dataclass(frozen=True)
class HeightLockLayout:

    name: str
    opcodes: Dict[int, int]  # offset -> expected byte, negative offsets count from the end
    min_length: int  # exclusive, the height field has a variable length
    hash_start: int
    hash_end: int

    def match(self, script: bytes) -> Optional[bytes]:
        # min_length covers every positive offset, so the indexing below is always in bounds
        if len(script) <= self.min_length:
            return None
        for offset, opcode in self.opcodes.items():
            if script[offset] != opcode:
                return None
        return bytes(script[self.hash_start: self.hash_end])


# OP_DUP OP_HASH160 <20> OP_EQUALVERIFY OP_CHECKSIG <32> <height> OP_CHECKBLOCKATHEIGHT
P2PKH_HEIGHT_LOCK = HeightLockLayout(
    name="p2pkh_height_lock",
    opcodes={0: 0x76, 1: 0xa9, 2: 0x14, 23: 0x88, 24: 0xac, 25: 0x20, -1: OP_CHECKBLOCKATHEIGHT},
    min_length=59,
    hash_start=3,
    hash_end=23,
)

# OP_HASH160 <20> OP_EQUAL <32> <height> OP_CHECKBLOCKATHEIGHT
P2SH_HEIGHT_LOCK = HeightLockLayout(
    name="p2sh_height_lock",
    opcodes={0: 0xa9, 1: 0x14, 22: 0x87, 23: 0x20, -1: OP_CHECKBLOCKATHEIGHT},
    min_length=57,
    hash_start=2,
    hash_end=22,
)

HEIGHT_LOCK_LAYOUTS = (P2PKH_HEIGHT_LOCK, P2SH_HEIGHT_LOCK)  # tried in this order


def match_height_lock(script: bytes) -> Optional[Tuple[str, bytes]]:
    for layout in HEIGHT_LOCK_LAYOUTS:
        hash_ = layout.match(script)
        if hash_ is not None:
            return layout.name, hash_
    return None
