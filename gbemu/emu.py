"""Emulator entry point."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .cart import CartError, load_cart, print_cart_metadata
from .cpu import cpu_init


def emu_run(argv: Sequence[str]) -> int:
    """Run the emulator; ``argv`` holds the program name and the ROM path."""
    if len(argv) < 2:
        print("Usage: emu <rom_file>")
        return -1

    try:
        cart = load_cart(argv[1])
    except CartError as exc:
        print(exc)
        return 1

    print_cart_metadata(cart.metadata)
    cpu_init()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point; ``argv`` excludes the program name."""
    args = sys.argv[1:] if argv is None else list(argv)
    return emu_run(["gbemu", *args])


if __name__ == "__main__":
    raise SystemExit(main())