import pytest

from horizen.networks import get_chain_params


PUBKEY = bytes.fromhex("0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798")
PUBKEY_HASH = bytes.fromhex("751e76e8199196d454941c45d1b3a323f1433bd6")  # hash160(PUBKEY)
BLOCK_HASH = bytes.fromhex("00000001cf4e27ce1dd8028408ed0a48edd445ba388170c9468ba0d42fff3052")


def p2pkh_height_lock(hash_: bytes, height: bytes = b"\x03\xa0\x86\x01") -> bytes:
    return b"\x76\xa9\x14" + hash_ + b"\x88\xac\x20" + BLOCK_HASH + height + b"\xb4"


def p2sh_height_lock(hash_: bytes, height: bytes = b"\x03\xa0\x86\x01") -> bytes:
    return b"\xa9\x14" + hash_ + b"\x87\x20" + BLOCK_HASH + height + b"\xb4"


@pytest.fixture
def mainnet():
    return get_chain_params("main")


@pytest.fixture
def testnet():
    return get_chain_params("test")


@pytest.fixture
def pkh_lock():
    return p2pkh_height_lock


@pytest.fixture
def sh_lock():
    return p2sh_height_lock
