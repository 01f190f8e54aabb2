"""CPU registers and initial CPU state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class RegPair(IntEnum):
    AF = 0
    BC = 1
    DE = 2
    HL = 3


class Flag(IntEnum):
    ZERO = 0
    SUBTRACT = 1
    HALF_CARRY = 2
    CARRY = 3


_PAIR_NAMES = {
    RegPair.AF: ("a", "f"),
    RegPair.BC: ("b", "c"),
    RegPair.DE: ("d", "e"),
    RegPair.HL: ("h", "l"),
}


def _as_pair(pair: int) -> RegPair:
    try:
        return RegPair(pair)
    except ValueError:
        raise ValueError(f"invalid register pair: {pair!r}") from None


def _flag_mask(flag: int) -> int:
    try:
        return 1 << (7 - Flag(flag))
    except ValueError:
        raise ValueError(f"invalid flag: {flag!r}") from None


@dataclass
class Registers:
    """The 8-bit registers, stack pointer and program counter."""

    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0
    e: int = 0
    f: int = 0
    h: int = 0
    l: int = 0  # noqa: E741
    pc: int = 0
    sp: int = 0

    def get_pair(self, pair: int) -> int:
        """Return the 16-bit value of a register pair."""
        high, low = _PAIR_NAMES[_as_pair(pair)]
        return (getattr(self, high) << 8) | getattr(self, low)

    def set_pair(self, pair: int, value: int) -> None:
        """Store a 16-bit value into a register pair."""
        high, low = _PAIR_NAMES[_as_pair(pair)]
        value &= 0xFFFF
        setattr(self, high, (value >> 8) & 0xFF)
        setattr(self, low, value & 0xFF)

    def get_flag(self, flag: int) -> bool:
        """Return whether a flag in F is set."""
        return bool(self.f & _flag_mask(flag))

    def set_flag(self, flag: int, value: bool) -> None:
        """Set or clear a single flag in F, leaving the other bits alone."""
        mask = _flag_mask(flag)
        self.f = (self.f & ~mask & 0xFF) | (mask if value else 0)


@dataclass
class CpuContext:
    regs: Registers = field(default_factory=Registers)


_context = CpuContext()


def cpu_init(ctx: Optional[CpuContext] = None) -> CpuContext:
    """Put a CPU context (the shared one by default) in its power-up state."""
    if ctx is None:
        ctx = _context
    # Cartridge code starts at 0x100; A is 0x01 on monochrome models.
    ctx.regs.pc = 0x100
    ctx.regs.a = 0x01
    return ctx