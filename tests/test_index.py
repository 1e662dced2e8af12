import logging

from horizen.index import index_outputs
from horizen.models.vout import Vout

from conftest import PUBKEY_HASH, p2pkh_height_lock, p2sh_height_lock


def test_index_outputs(mainnet, caplog):
    vouts = [
        Vout(n=0, value=5, script_hex=p2pkh_height_lock(PUBKEY_HASH).hex(), tx_hash="t1"),
        Vout(n=1, value=7, script_hex=p2sh_height_lock(PUBKEY_HASH).hex(), tx_hash="t1"),
        Vout(n=0, value=1, script_hex="6a0474657374", tx_hash="t2"),
        Vout(n=1, value=0, script_hex="zz", tx_hash="t2"),
        Vout(n=2, value=0, script_hex="ff", tx_hash="t2"),
    ]
    with caplog.at_level(logging.WARNING, logger="horizen.index"):
        owners, failures = index_outputs(vouts, mainnet)

    # both height-locked outputs carry the same hash, hence the same descriptor
    assert set(owners) == {PUBKEY_HASH, b"test"}
    assert owners[PUBKEY_HASH].outputs == 2
    assert owners[PUBKEY_HASH].value == 12
    assert owners[PUBKEY_HASH].first_seen == 0
    assert owners[b"test"].first_seen == 2

    assert [vout.n for vout, _ in failures] == [1, 2]
    assert "tx t2, n 1" in caplog.text


def test_index_outputs_values_share_one_unit(mainnet):
    script_hex = p2pkh_height_lock(PUBKEY_HASH).hex()
    vouts = [Vout.from_dict({"n": 0, "value": 1.5, "scriptPubKey": {"hex": script_hex}}, tx_hash="t1"),
             Vout.from_dict({"n": 1, "valueSat": 150000000, "scriptPubKey": {"hex": script_hex}}, tx_hash="t1")]
    owners, failures = index_outputs(vouts, mainnet)
    assert failures == []
    assert owners[PUBKEY_HASH].value == 300000000
