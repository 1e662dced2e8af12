import os
import json
import logging
import yaml

from tabulate import tabulate

from horizen.index import index_outputs
from horizen.models.vout import Vout
from horizen.networks import get_chain_params


def load_vouts(path: str):
    # a JSON list of decoded transactions, as returned by getrawtransaction with verbose=1
    with open(path, "r") as f:
        transactions = json.load(f)
    return [Vout.from_dict(d, tx_hash=tx["txid"]) for tx in transactions for d in tx.get("vout", [])]


def owners_table(owners: dict, limit: int = None):
    rows = sorted(owners.values(), key=lambda owner: (-owner.outputs, owner.first_seen))
    rows = rows[:limit] if limit is not None else rows
    return tabulate([{"addr_desc": owner.addr_desc.hex(),
                      "outputs": owner.outputs,
                      "value": owner.value,
                      "first_seen": owner.first_seen} for owner in rows],
                    headers="keys", tablefmt="psql", showindex="never")


if __name__ == "__main__":

    path_config = os.path.join(os.path.dirname(__file__), "conf.yaml")
    with open(path_config, "r") as f:
        config = yaml.load(f, Loader=yaml.FullLoader)

    logging.basicConfig(level=config.get("log_level", "INFO"),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    params = get_chain_params(config["network"])
    vouts = load_vouts(config["transactions"])

    print(f"\n {'-' * 30} \n Indexing {len(vouts)} outputs on the {params.name} network \n")
    owners, failures = index_outputs(vouts, params, progress=True)

    print(owners_table(owners, limit=config.get("limit")))
    print(f"\n {len(owners)} owners, {len(failures)} outputs skipped")
