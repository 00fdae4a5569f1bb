#!/usr/bin/env python3
"""
NVRAM store CLI: inspect and edit the accessory store kept in router NVRAM.

Usage:
  python -m nvram_store_cli get <key>
  python -m nvram_store_cli set <key> <value>
  python -m nvram_store_cli delete <key>
  python -m nvram_store_cli keys [suffix]

Options:
  --bin <path>   nvram tool to run (default: nvram, or NVRAM_BIN)
  --memory       Use an empty in-memory NVRAM instead of the tool (dry run)
"""
import argparse
import os
import sys
from pathlib import Path
from typing import Optional

# Allow running from the repo root without installing.
sys.path.insert(0, str(Path(__file__).resolve().parent))

from nvram import DEFAULT_NVRAM_BIN, MemoryNvram, NotFoundError, NvramCommand
from store import BINARY_KEYS, NvramStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="NVRAM store CLI - read/write accessory store entries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  get <key>            Print one value (configHash is printed as hex)
  set <key> <value>    Write one value (configHash takes hex)
  delete <key>         Delete one key
  keys [suffix]        List keys, optionally only those ending with suffix
        """,
    )
    parser.add_argument(
        "--bin",
        default=os.environ.get("NVRAM_BIN", DEFAULT_NVRAM_BIN),
        help="nvram tool path",
    )
    parser.add_argument("--memory", action="store_true", help="Use in-memory NVRAM")
    parser.add_argument("command", nargs="?", choices=["get", "set", "delete", "keys"], help="Command")
    parser.add_argument("args", nargs="*", help="Key and/or value")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    parsed = parser.parse_args(argv)

    cmd = (parsed.command or "").lower()
    args = parsed.args or []

    if not cmd:
        parser.print_help()
        sys.exit(0)

    nvram = MemoryNvram() if parsed.memory else NvramCommand(binary=parsed.bin)
    store = NvramStore(nvram)

    try:
        if cmd == "get":
            if not args:
                print("Usage: get <key>", file=sys.stderr)
                sys.exit(1)
            key = args[0]
            try:
                value = store.get(key)
            except NotFoundError:
                print(f"Key not found: {key}", file=sys.stderr)
                sys.exit(1)
            print(value.hex() if key in BINARY_KEYS else value.decode("utf-8", "replace"))

        elif cmd == "set":
            if len(args) < 2:
                print("Usage: set <key> <value>", file=sys.stderr)
                sys.exit(1)
            key, text = args[0], " ".join(args[1:])
            value = bytes.fromhex(text) if key in BINARY_KEYS else text.encode("utf-8")
            store.set(key, value)
            print(f"Written: {key}")

        elif cmd == "delete":
            if not args:
                print("Usage: delete <key>", file=sys.stderr)
                sys.exit(1)
            store.delete(args[0])
            print(f"Deleted: {args[0]}")

        elif cmd == "keys":
            suffix = args[0] if args else ""
            for key in sorted(store.keys_with_suffix(suffix)):
                print(key)

    except Exception as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
