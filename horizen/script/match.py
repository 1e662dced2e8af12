from enum import Enum
from dataclasses import dataclass, field
from typing import List

from horizen.account import is_pk, is_pkh, is_compressed_pk, is_sh, is_wsh, to_address, to_segwit_address
from horizen.errors import ScriptParseError, UnrecognizedScriptError
from horizen.hash_methods import hash160
from horizen.networks import NetworkParams
from horizen.script.decode import parse_script


MAX_DATA_CARRIER_SIZE = 80  # largest payload accepted in a standard null-data output


class ScriptClass(Enum):

    P2PK = "p2pk"
    P2PKH = "p2pkh"
    P2SH = "p2sh"
    MULTISIG = "multisig"
    P2WPKH = "p2wpkh"
    P2WSH = "p2wsh"
    NULL_DATA = "nulldata"


@dataclass
class ScriptResolution:

    script_class: ScriptClass
    addresses: List[str] = field(default_factory=list)


def small_int(token) -> int:
    # value of OP_0 / OP_1..OP_16, None for anything else
    if token[0] != "op":
        return None
    if token[1] == b"\x00":
        return 0
    if 0x51 <= token[1][0] <= 0x60:
        return token[1][0] - 0x50
    return None


def is_p2pk(tokens: list):
    if len(tokens) != 2:
        return False
    if (tokens[0][0] != "data") or (tokens[1] != ("op", b"\xac")):
        return False
    return is_pk(tokens[0][1]) or is_compressed_pk(tokens[0][1])


def is_p2pkh(tokens: list):
    if len(tokens) != 5:
        return False
    if ((tokens[0] != ("op", b"v")) or (tokens[1] != ("op", b"\xa9")) or (tokens[2][0] != "data")
            or (tokens[3] != ("op", b"\x88")) or (tokens[4] != ("op", b"\xac"))):
        return False
    return is_pkh(tokens[2][1])


def is_p2sh(tokens: list):
    if len(tokens) != 3:
        return False
    if (tokens[0] != ("op", b"\xa9")) or (tokens[1][0] != "data") or (tokens[2] != ("op", b"\x87")):
        return False
    return is_sh(tokens[1][1])


def is_multisig(tokens: list):
    """OP_m <pubkey>... OP_n OP_CHECKMULTISIG, with n equal to the number of keys."""
    if len(tokens) < 4:
        return False
    if tokens[-1] != ("op", b"\xae"):
        return False
    m, n = small_int(tokens[0]), small_int(tokens[-2])
    if not m or not n or m > n:
        return False
    keys = tokens[1:-2]
    if len(keys) != n:
        return False
    return all(key[0] == "data" and (is_pk(key[1]) or is_compressed_pk(key[1])) for key in keys)


def is_p2wpkh(tokens: list):
    if len(tokens) != 2:
        return False
    if (tokens[0] != ("op", b"\x00")) or (tokens[1][0] != "data"):
        return False
    return is_pkh(tokens[1][1])


def is_p2wsh(tokens: list):
    if len(tokens) != 2:
        return False
    if (tokens[0] != ("op", b"\x00")) or (tokens[1][0] != "data"):
        return False
    return is_wsh(tokens[1][1])


def is_null_data(tokens: list):
    if len(tokens) == 0 or tokens[0] != ("op", b"\x6a"):
        return False
    if len(tokens) == 1:
        return True
    if len(tokens) != 2:
        return False
    if tokens[1][0] == "data":
        return len(tokens[1][1]) <= MAX_DATA_CARRIER_SIZE
    return small_int(tokens[1]) is not None


def resolve_script(script: bytes, params: NetworkParams) -> ScriptResolution:
    """Classify a locking script with the standard script grammar.

    Returns the script class and the textual addresses embedded in the script, in
    script order. Raises UnrecognizedScriptError for malformed and non-standard scripts.
    """
    try:
        tokens = parse_script(script)
    except ScriptParseError as e:
        raise UnrecognizedScriptError(script=script.hex(), reason=e.msg) from e

    if is_p2pkh(tokens):
        return ScriptResolution(ScriptClass.P2PKH, [to_address(tokens[2][1], params.pubkey_hash_addr_id)])
    elif is_p2sh(tokens):
        return ScriptResolution(ScriptClass.P2SH, [to_address(tokens[1][1], params.script_hash_addr_id)])
    elif is_p2pk(tokens):
        return ScriptResolution(ScriptClass.P2PK, [to_address(hash160(tokens[0][1]), params.pubkey_hash_addr_id)])
    elif is_multisig(tokens):
        return ScriptResolution(ScriptClass.MULTISIG, [to_address(hash160(key[1]), params.pubkey_hash_addr_id)
                                                       for key in tokens[1:-2]])
    elif is_p2wpkh(tokens):
        return ScriptResolution(ScriptClass.P2WPKH, [to_segwit_address(tokens[1][1], params.bech32_hrp)])
    elif is_p2wsh(tokens):
        return ScriptResolution(ScriptClass.P2WSH, [to_segwit_address(tokens[1][1], params.bech32_hrp)])
    elif is_null_data(tokens):
        return ScriptResolution(ScriptClass.NULL_DATA)
    else:
        raise UnrecognizedScriptError(script=script.hex(), reason="non-standard script")
