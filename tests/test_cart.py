import pytest

from gbemu.cart import (
    Cart,
    CartError,
    CartMetadata,
    format_cart_metadata,
    get_human_rom_size,
    get_licensee_name,
    get_ram_size_kib,
    load_cart,
    lookup_new_licensee_name,
    print_cart_metadata,
)


def make_rom(
    title=b"CPU_INSTRS",
    new_licensee=b"\x00\x00",
    sgb_flag=0x00,
    cart_type=0x01,
    rom_size_code=0x01,
    ram_size_code=0x00,
    destination_code=0x00,
    old_licensee_code=0x00,
    version=0x00,
    checksum=0x3B,
    global_checksum=b"\xf5\x30",
    size=0x8000,
):
    rom = bytearray(size)
    rom[0x100:0x104] = b"\x00\xc3\x50\x01"
    rom[0x104:0x134] = bytes(range(48))
    rom[0x134:0x144] = title.ljust(16, b"\0")[:16]
    rom[0x144:0x146] = new_licensee
    rom[0x146] = sgb_flag
    rom[0x147] = cart_type
    rom[0x148] = rom_size_code
    rom[0x149] = ram_size_code
    rom[0x14A] = destination_code
    rom[0x14B] = old_licensee_code
    rom[0x14C] = version
    rom[0x14D] = checksum
    rom[0x14E:0x150] = global_checksum
    return bytes(rom)


@pytest.fixture
def cpu_instrs_path(tmp_path):
    path = tmp_path / "cpu_instrs.gb"
    path.write_bytes(make_rom())
    return path


def test_cart_metadata(cpu_instrs_path):
    cart = load_cart(cpu_instrs_path)
    meta = cart.metadata

    assert meta.title == "CPU_INSTRS"
    assert meta.new_licensee_code == 0x00
    assert meta.sgb_flag == 0x00
    assert meta.cart_type == 0x01
    assert meta.rom_size_code == 0x01
    assert meta.ram_size_code == 0x00
    assert meta.destination_code == 0x00
    assert meta.old_licensee_code == 0x00
    assert meta.version == 0x00
    assert meta.checksum == 0x3B
    assert meta.global_checksum == 0xF530


def test_load_cart_keeps_rom_and_filename(cpu_instrs_path):
    cart = load_cart(cpu_instrs_path)
    assert isinstance(cart, Cart)
    assert cart.filename == str(cpu_instrs_path)
    assert cart.rom == cpu_instrs_path.read_bytes()
    assert cart.rom_size_bytes == len(cart.rom)


def test_logo_and_entry_are_decoded():
    meta = CartMetadata.from_rom(make_rom())
    assert meta.logo == bytes(range(48))
    assert meta.entry == int.from_bytes(b"\x00\xc3\x50\x01", "little")


@pytest.mark.parametrize(
    "code, name",
    [
        (0x00, "None"),
        (0x01, "Nintendo"),
        (0x69, "EA (Electronic Arts)"),
        (0xB9, "Pony Canyon"),
        (0xFF, "LJN"),
    ],
)
def test_get_licensee_name_old_codes(code, name):
    assert get_licensee_name(code, 0xBABE) == name


@pytest.mark.parametrize(
    "code, name",
    [
        ("00", "None"),
        ("01", "Nintendo Research & Development 1"),
        ("78", "THQ"),
        ("DK", "Kodansha"),
    ],
)
def test_get_licensee_name_new_codes(code, name):
    raw_code = (ord(code[0]) << 8) | ord(code[1])
    assert get_licensee_name(0x33, raw_code) == name


def test_lookup_unknown_new_licensee():
    assert lookup_new_licensee_name("ZZ") == "Unknown Licensee"


def test_lookup_known_new_licensee():
    assert lookup_new_licensee_name("9H") == "Bottom Up"


def test_metadata_title_padding(tmp_path):
    path = tmp_path / "new_lic_code.gb"
    path.write_bytes(
        make_rom(
            title=b"COFFEEBREAKABCD\x80",
            new_licensee=b"01",
            old_licensee_code=0x33,
        )
    )
    cart = load_cart(path)
    assert cart.metadata.title == "COFFEEBREAK"
    assert cart.metadata.new_licensee_code == (ord("0") << 8) | ord("1")


def test_title_is_at_most_fifteen_characters():
    title = b"ABCDEFGHIJKLMNOP"
    meta = CartMetadata.from_rom(make_rom(title=title))
    assert meta.title == title[:15].decode()


@pytest.mark.parametrize(
    "code, expected",
    [
        (0x00, "32KiB"),
        (0x01, "64KiB"),
        (0x02, "128KiB"),
        (0x03, "256KiB"),
        (0x04, "512KiB"),
        (0x05, "1MiB"),
        (0x06, "2MiB"),
        (0x07, "4MiB"),
        (0x08, "8MiB"),
    ],
)
def test_get_rom_size(code, expected):
    assert get_human_rom_size(code) == expected


def test_get_rom_size_unsupported_code():
    with pytest.raises(ValueError):
        get_human_rom_size(0x52)


@pytest.mark.parametrize(
    "code, expected",
    [(0x00, 0), (0x01, -1), (0x02, 8), (0x03, 32), (0x04, 128), (0x05, 64)],
)
def test_get_ram_size(code, expected):
    assert get_ram_size_kib(code) == expected


def test_get_ram_size_unsupported_code():
    with pytest.raises(ValueError):
        get_ram_size_kib(0x06)


def test_load_missing_file_raises(tmp_path):
    missing = tmp_path / "missing.gb"
    with pytest.raises(CartError, match="Error opening file"):
        load_cart(missing)


def test_short_rom_raises():
    with pytest.raises(CartError):
        CartMetadata.from_rom(bytes(0x120))


def test_format_cart_metadata():
    meta = CartMetadata.from_rom(make_rom())
    text = format_cart_metadata(meta)
    assert text.splitlines() == [
        "Cart title:\tCPU_INSTRS (v0)",
        "Licensee:\tNone (0x0000)",
        "Cart type:\tMBC1 (0x01)",
        "ROM size:\t64KiB (0x01)",
        "RAM size:\t0KiB (0x00)",
    ]
    assert text.endswith("\n")


def test_print_cart_metadata(capsys):
    meta = CartMetadata.from_rom(make_rom())
    print_cart_metadata(meta)
    assert capsys.readouterr().out == format_cart_metadata(meta) + "\n"