import base58
import bech32


def is_pk(data: bytes) -> bool:
    return (data[0:1] == b"\x04") and len(data) == 65


def is_compressed_pk(data: bytes) -> bool:
    return (data[0:1] == b"\x02" or data[0:1] == b"\x03") and len(data) == 33


def is_pkh(data: bytes) -> bool:
    return len(data) == 20


def is_sh(data: bytes) -> bool:
    return len(data) == 20


def is_wsh(data: bytes) -> bool:
    return len(data) == 32


def to_address(data: bytes, version: bytes) -> str:
    """Base58check encoding of a hash behind a (possibly multi-byte) version prefix.
    Horizen uses two-byte prefixes, e.g. 0x2089 for "zn..." addresses."""
    return base58.b58encode_check(bytes(version) + bytes(data)).decode("utf-8")


def to_segwit_address(data: bytes, hrp: str, witver: int = 0) -> str:
    address = bech32.encode(hrp=hrp, witver=witver, witprog=[int(e) for e in bytearray(data)])
    if address is None:
        raise ValueError(f"Invalid witness program of length {len(data)}")
    return address
