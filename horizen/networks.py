import os
import logging
import yaml

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict


logger = logging.getLogger(__name__)

path_networks = os.path.join(os.path.dirname(os.path.abspath(__file__)), "networks.yaml")


@dataclass(frozen=True)
class NetworkParams:

    name: str
    magic: int
    pubkey_hash_addr_id: bytes
    script_hash_addr_id: bytes
    bech32_hrp: str

    @classmethod
    def from_dict(cls, name: str, d: dict):
        return cls(name=name,
                   magic=int(d["magic"]),
                   pubkey_hash_addr_id=bytes.fromhex(d["pubkey_hash_addr_id"]),
                   script_hash_addr_id=bytes.fromhex(d["script_hash_addr_id"]),
                   bech32_hrp=d["bech32_hrp"])


@lru_cache(maxsize=None)
def load_networks(path: str = path_networks) -> Dict[str, NetworkParams]:
    with open(path, "r") as f:
        config = yaml.load(f, Loader=yaml.FullLoader)
    return {name: NetworkParams.from_dict(name, d) for name, d in config.items()}


def get_chain_params(chain: str) -> NetworkParams:
    # "test" selects the testnet, any other name falls back to the mainnet
    networks = load_networks()
    if chain == "test":
        return networks["test"]
    if chain != "main":
        logger.warning(f"Unknown chain '{chain}', using the mainnet parameters")
    return networks["main"]
