import logging

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from tqdm import tqdm

from horizen.errors import HorizenScriptError
from horizen.models.vout import Vout
from horizen.networks import NetworkParams


logger = logging.getLogger(__name__)


@dataclass
class Owner:

    addr_desc: bytes
    outputs: int = field(default=0)
    value: int = field(default=0)
    first_seen: int = field(default=None)  # index of the first output paying this owner


def index_outputs(vouts: Iterable[Vout], params: NetworkParams,
                  progress: bool = False) -> Tuple[Dict[bytes, Owner], List[Tuple[Vout, HorizenScriptError]]]:
    """Group outputs by address descriptor. Outputs whose descriptor cannot be extracted are
    returned apart with their error, extraction is deterministic so they are not retried."""
    owners, failures = dict(), list()
    for position, vout in enumerate(tqdm(vouts, disable=not progress)):
        try:
            addr_desc = vout.addr_desc(params)
        except HorizenScriptError as e:
            logger.warning(f"Impossible to decode the script of vout (tx {vout.tx_hash}, n {vout.n}): "
                           f"{vout.script_hex}, error: {e}")
            failures.append((vout, e))
            continue
        if addr_desc not in owners:
            owners[addr_desc] = Owner(addr_desc=addr_desc, first_seen=position)
        owner = owners[addr_desc]
        owner.outputs += 1
        owner.value += vout.value
    return owners, failures
