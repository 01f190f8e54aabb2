"""Game Boy cartridge header decoding, CPU registers and a command to report a ROM."""

__version__ = "0.1.0"
__all__ = ["bits", "cart", "cpu", "emu"]