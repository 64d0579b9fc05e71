"""Command line front end for the SHA-256 implementation.

Usage:
    python sha256_cli.py "message"
    python sha256_cli.py --check <hex digest> "message"

The message argument is encoded as UTF-8 and hashed. Without `--check` the
hex digest is printed to stdout. With `--check`, `OK` or `MISMATCH` is
printed and the exit code tells whether the digests match.
"""

from __future__ import annotations

import argparse
import sys

from errors import MalformedHexInputError
from hexcodec import hex_to_digest
from sha256 import compute_digest, compute_hash_hex


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the SHA-256 digest of a UTF-8 message"
    )
    parser.add_argument(
        "message",
        help="Message to hash (encoded as UTF-8)",
    )
    parser.add_argument(
        "--check",
        metavar="HEX",
        help="Expected 64-character hex digest to compare against",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = _build_parser().parse_args(argv)
    try:
        message_bytes = args.message.encode("utf-8")
    except UnicodeEncodeError as e:
        sys.stderr.write(f"Message is not valid UTF-8 text: {e}\n")
        return 1

    if args.check is None:
        print(compute_hash_hex(message_bytes))
        return 0

    try:
        expected = hex_to_digest(args.check)
    except MalformedHexInputError as e:
        sys.stderr.write(f"Invalid digest '{args.check}': {e}\n")
        return 1

    if compute_digest(message_bytes) == expected:
        print("OK")
        return 0
    print("MISMATCH")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
