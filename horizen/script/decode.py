import os
import binascii
import yaml

from horizen.errors import ScriptDecodeError, ScriptParseError


path_op_codes = os.path.join(os.path.dirname(os.path.abspath(__file__)), "hex2tokens.yaml")
with open(path_op_codes, "r") as f:
    dict_op_codes = yaml.load(f, Loader=yaml.FullLoader)


def decode_hex_script(hex_script: str) -> bytes:
    if not isinstance(hex_script, str):
        raise ScriptDecodeError(script=repr(hex_script), reason=f"expected a string, got {type(hex_script).__name__}")
    try:
        return binascii.unhexlify(hex_script)
    except (binascii.Error, ValueError) as e:
        raise ScriptDecodeError(script=hex_script, reason=str(e)) from e


def _read_push(script: bytes, index: int, size_length: int):
    # returns the pushed data and the position right after it
    start = index + 1 + size_length
    if len(script) < start:
        raise ScriptParseError(reason=f"truncated push length at position {index}")
    size = int.from_bytes(script[index+1: start], byteorder="little") if size_length else script[index]
    if len(script) < start + size:
        raise ScriptParseError(reason=f"push of {size} bytes at position {index} exceeds the script length "
                                      f"{len(script)}")
    return script[start: start+size], start + size


def parse_script(script: bytes):
    index, tokens = 0, []
    while index < len(script):
        next_hex = script[index]
        if 0x01 <= next_hex <= 0x4b:
            data, index = _read_push(script, index, 0)
            tokens.append(("data", data))
        elif next_hex == 0x4c:
            data, index = _read_push(script, index, 1)
            tokens.append(("data", data))
        elif next_hex == 0x4d:
            data, index = _read_push(script, index, 2)
            tokens.append(("data", data))
        elif next_hex == 0x4e:
            data, index = _read_push(script, index, 4)
            tokens.append(("data", data))
        else:
            tokens.append(("op", script[index: index+1]))
            index += 1
    return tokens


def decode_script(script: bytes = None, tokens: list = None, join: bool = False):
    tokens = parse_script(script) if tokens is None else tokens

    def decode_(x):
        if x[0] == "data":
            return x[1].hex()
        else:
            return dict_op_codes.get(x[1][0], f"OP_UNKNOWN_{x[1][0]}")

    tokens = list(map(decode_, tokens))
    return " ".join(tokens) if join else tokens
