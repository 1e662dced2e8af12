import pytest

from horizen.script.nulldata import null_data_payload


def test_payload():
    assert null_data_payload(b"\x6a\x04test") == b"test"
    assert null_data_payload(b"\x6a\x4c\x03abc") == b"abc"


@pytest.mark.parametrize("script", [b"\x6a", b"\x6a\x51", b"", b"\x76\xa9", b"\x6a\x05ab",
                                    b"\x6a\x01\x01\x01\x02", b"\x6a\x04test\x51"])
def test_no_payload(script):
    assert null_data_payload(script) is None
