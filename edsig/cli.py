"""Command line: create a key pair, sign a message and verify the signature."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from edsig.ed25519 import create_keypair, sign, verify

__all__ = ["sign_verify_demo", "main"]

_DEFAULT_MESSAGE = "ed25519"


def sign_verify_demo(message: bytes | str = _DEFAULT_MESSAGE) -> tuple[bytes, bytes, bool]:
    """Sign a message with a fresh key pair and verify it.

    Returns (public_key, signature, valid).
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    private_key, public_key = create_keypair()
    signature = sign(data, public_key, private_key)
    return public_key, signature, verify(signature, data, public_key)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edsig", description="Sign a message with a fresh key pair and verify it."
    )
    parser.add_argument(
        "message", nargs="?", default=_DEFAULT_MESSAGE, help="message to sign"
    )
    parser.add_argument(
        "--stdin", action="store_true", help="read the message bytes from standard input"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sign-and-verify example; exit status 0 when the signature verifies."""
    args = _parser().parse_args(argv)
    message: bytes | str = sys.stdin.buffer.read() if args.stdin else args.message
    public_key, signature, valid = sign_verify_demo(message)
    print(f"public key: {public_key.hex()}")
    print(f"signature:  {signature.hex()}")
    print("signature valid" if valid else "signature INVALID")
    return 0 if valid else 1