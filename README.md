# gbemu

The beginnings of a Game Boy emulator in pure Python. It loads a cartridge
ROM, decodes and prints its header, and puts the CPU registers in their
power-up state.

## Installation

```
pip install .
```

## Command line

```
gbemu path/to/game.gb
```

This prints the cartridge's header, followed by a blank line, and exits with
status 0:

```
Cart title:	CPU_INSTRS (v0)
Licensee:	None (0x0000)
Cart type:	MBC1 (0x01)
ROM size:	64KiB (0x01)
RAM size:	0KiB (0x00)
```

Run with no ROM path, it prints `Usage: emu <rom_file>` and exits with a
non-zero status. If the file cannot be read, or is too short to hold a
header, it prints the error and exits with status 1.

## Library use

```python
from gbemu.cart import load_cart, format_cart_metadata, get_licensee_name
from gbemu.cpu import CpuContext, Flag, RegPair, cpu_init

cart = load_cart("game.gb")
print(cart.metadata.title, cart.rom_size_bytes)
print(format_cart_metadata(cart.metadata))

print(get_licensee_name(0x01, 0))  # "Nintendo"

ctx = CpuContext()
cpu_init(ctx)                      # pc = 0x100, a = 0x01
ctx.regs.set_pair(RegPair.HL, 0xCAFE)
ctx.regs.set_flag(Flag.ZERO, True)
assert ctx.regs.get_pair(RegPair.HL) == 0xCAFE
assert ctx.regs.get_flag(Flag.ZERO)
```

### `gbemu.cart`

- `load_cart(path)` reads a ROM file and returns a `Cart` with `filename`,
  `rom`, `metadata` and `rom_size_bytes`. It raises `CartError` when the file
  cannot be opened or the ROM is too short to hold a header.
- `CartMetadata.from_rom(rom)` decodes the header at 0x100–0x14F. When the old
  licensee code is 0x33 the title is cut to 11 characters; the new licensee
  code and global checksum are read big-endian.
- `format_cart_metadata(metadata)` returns the header as text;
  `print_cart_metadata(metadata)` prints it.
- `get_licensee_name(old_lic_code, new_lic_code)` and
  `lookup_new_licensee_name(code)` resolve publisher names, giving
  `"Unknown Licensee"` for codes not in the tables.
- `get_human_rom_size(code)` turns ROM size codes 0x00–0x08 into `"32KiB"` …
  `"8MiB"`; `get_ram_size_kib(code)` turns RAM size codes 0x00–0x05 into KiB
  (code 0x01 gives -1). Other codes raise `ValueError`.

### `gbemu.cpu`

`Registers` holds `a`–`l`, `pc` and `sp`, with `get_pair`/`set_pair` for the
`RegPair` pairs and `get_flag`/`set_flag` for the `Flag` bits of F. An invalid
pair or flag raises `ValueError`. `cpu_init(ctx=None)` initialises the given
`CpuContext`, or a shared one, and returns it.

### `gbemu.bits`

Small helpers: `bit`, `bit_set`, `between` and `delay` (sleep in
milliseconds).

## What it does not do

No instructions are executed yet: there is no memory map, no display,
no sound and no input handling. The command only reports the cartridge
header.

## Tests

```
pip install .[test]
pytest
```