import hashlib
from Crypto.Hash import RIPEMD160


def hash160(data: bytes) -> bytes:
    # hash committed to by p2pkh / p2sh scripts
    return RIPEMD160.RIPEMD160Hash(hashlib.sha256(data).digest()).digest()
