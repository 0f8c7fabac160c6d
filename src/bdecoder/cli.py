"""
Command line front end: `bdecoder decode <encoded>`.
"""
import json
import sys

from .decoder import DEFAULT_MAX_DEPTH, decode
from .errors import BencodeDecodeError
from .structure import BencodeType

DECODE = "decode"
USAGE = "Usage: bdecoder decode <bencoded-string>"


def to_jsonable(obj):
    """Turns plain decoded values into JSON-serializable ones."""
    if isinstance(obj, bytes):
        return obj.decode("utf-8", errors="replace")
    if isinstance(obj, list):
        return [to_jsonable(x) for x in obj]
    if isinstance(obj, dict):
        # keys keep invalid bytes as \xNN so distinct keys stay distinct
        return {k.decode("utf-8", errors="backslashreplace"): to_jsonable(v) for k, v in obj.items()}
    return obj


def render(value: BencodeType) -> str:
    """Canonical compact rendering, e.g. ["hello",52,{"test":"ok"}]."""
    return json.dumps(to_jsonable(value.to_python()), separators=(",", ":"), ensure_ascii=False)


def main(argv=None, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    """Runs the CLI and returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    if not args:
        print(USAGE)
        return 1

    command = args[0]
    if command != DECODE:
        print(f"Unknown command: {command}")
        print(USAGE)
        return 1

    if len(args) < 2:
        print("Decode command requires an argument")
        print(USAGE)
        return 1

    try:
        value = decode(args[1], max_depth=max_depth)
    except BencodeDecodeError as e:
        print(f"[Decode] {e.kind}: {e}", file=sys.stderr)
        return 1

    print(render(value))
    return 0


def run():
    sys.exit(main())
