from typing import Optional

from horizen.errors import ScriptParseError
from horizen.script.decode import parse_script


def null_data_payload(script: bytes) -> Optional[bytes]:
    """Data of the single push after OP_RETURN, None when the output carries no such payload."""
    try:
        tokens = parse_script(script)
    except ScriptParseError:
        return None
    if len(tokens) != 2 or tokens[0] != ("op", b"\x6a") or tokens[1][0] != "data":
        return None
    return tokens[1][1]
