from decimal import Decimal
from typing import List, Optional

from horizen.descriptor import get_addr_desc_from_vout
from horizen.networks import NetworkParams
from horizen.script.decode import decode_hex_script


ZATOSHIS_PER_ZEN = 100_000_000


def value_in_zatoshis(d: dict) -> int:
    # integer amounts when the node reports them, otherwise the decimal ZEN amount converted
    for key in ("valueZat", "valueSat"):
        if d.get(key) is not None:
            return int(d[key])
    return int(round(Decimal(str(d.get("value", 0))) * ZATOSHIS_PER_ZEN))


class Vout(object):

    def __init__(self, n: int, value: int, script_hex: str, addresses: Optional[List[str]] = None,
                 tx_hash: str = None):

        self.tx_hash = tx_hash  # transaction in which the output was created
        self.n = n  # position in the output list
        self.value = value  # in zatoshis
        self.script_hex = script_hex  # locking script, hex encoded
        self.addresses = addresses if addresses is not None else []  # as reported by the node, informative only

    @classmethod
    def from_dict(cls, d: dict, tx_hash: str = None):
        script_pub_key = d.get("scriptPubKey", {})
        return cls(n=d["n"],
                   value=value_in_zatoshis(d),
                   script_hex=script_pub_key.get("hex", ""),
                   addresses=script_pub_key.get("addresses"),
                   tx_hash=tx_hash if tx_hash is not None else d.get("txid"))

    @property
    def script(self) -> bytes:
        return decode_hex_script(self.script_hex)

    def addr_desc(self, params: NetworkParams) -> bytes:
        return get_addr_desc_from_vout(self, params)

    def __repr__(self):
        return f"Vout --- tx {self.tx_hash} --- n {self.n} --- value {self.value} --- script {self.script_hex}"
