import base58
import pytest

from horizen.account import is_pk, is_compressed_pk, to_address, to_segwit_address
from horizen.hash_methods import hash160

from conftest import PUBKEY, PUBKEY_HASH


def test_hash160():
    assert hash160(PUBKEY) == PUBKEY_HASH


def test_public_keys():
    assert is_compressed_pk(PUBKEY)
    assert not is_pk(PUBKEY)
    assert is_pk(b"\x04" + bytes(64))
    assert not is_compressed_pk(b"\x05" + bytes(32))


@pytest.mark.parametrize("version, prefix", [(b"\x20\x89", "zn"), (b"\x20\x96", "zs"),
                                             (b"\x20\x98", "zt"), (b"\x20\x92", "zr")])
def test_to_address_prefix(version, prefix):
    address = to_address(PUBKEY_HASH, version)
    assert address.startswith(prefix)
    assert base58.b58decode_check(address) == version + PUBKEY_HASH


def test_to_segwit_address():
    assert to_segwit_address(PUBKEY_HASH, "bc") == "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"
    with pytest.raises(ValueError):
        to_segwit_address(b"\x00", "bc")


def test_to_address_single_byte_version():
    assert to_address(PUBKEY_HASH, b"\x00") == "1BgGZ9tcN4rm9KBzDn7KprQz87SZ26SAMH"
