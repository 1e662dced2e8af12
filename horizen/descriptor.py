"""Address descriptors: the byte identity under which outputs are grouped by owner.

A descriptor comes from exactly one of three sources:

- the addresses found by the standard script grammar, UTF-8 encoded and joined without
  a separator (two different address lists may therefore give the same descriptor);
- the raw 20-byte hash of a height-locked p2pkh / p2sh script;
- the payload of a null-data script.
"""
import logging

from typing import Iterable

from horizen.errors import HorizenScriptError
from horizen.networks import NetworkParams
from horizen.script.decode import decode_hex_script
from horizen.script.heightlock import match_height_lock
from horizen.script.match import ScriptClass, resolve_script
from horizen.script.nulldata import null_data_payload


logger = logging.getLogger(__name__)


def join_addresses(addresses: Iterable[str]) -> bytes:
    return b"".join(address.encode("utf-8") for address in addresses)


def get_addr_desc_from_script(script: bytes, params: NetworkParams) -> bytes:
    try:
        resolution = resolve_script(script, params)
    except HorizenScriptError:
        match = match_height_lock(script)
        if match is not None:
            name, hash_ = match
            logger.debug(f"Script {script.hex()} matched {name}")
            return hash_
        raise  # the resolver's own error

    if resolution.script_class == ScriptClass.NULL_DATA:
        payload = null_data_payload(script)
        if payload is not None:
            return payload

    return join_addresses(resolution.addresses)


def get_addr_desc_from_hex(hex_script: str, params: NetworkParams) -> bytes:
    return get_addr_desc_from_script(decode_hex_script(hex_script), params)


def get_addr_desc_from_vout(vout, params: NetworkParams) -> bytes:
    return get_addr_desc_from_hex(vout.script_hex, params)
