"""Game Boy cartridge loading and header decoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import Union

HEADER_START = 0x100
HEADER_END = 0x150
SEE_NEW_LICENSEE_CODE_FLAG = 0x33
UNKNOWN_LICENSEE = "Unknown Licensee"

_HEADER_FORMAT = "<I48s16s2sBBBBBBBB2s"

ROM_TYPE_NAMES = (
    "ROM ONLY",
    "MBC1",
    "MBC1+RAM",
    "MBC1+RAM+BATTERY",
    "0x04 ???",
    "MBC2",
    "MBC2+BATTERY",
    "0x07 ???",
    "ROM+RAM 1",
    "ROM+RAM+BATTERY 1",
    "0x0A ???",
    "MMM01",
    "MMM01+RAM",
    "MMM01+RAM+BATTERY",
    "0x0E ???",
    "MBC3+TIMER+BATTERY",
    "MBC3+TIMER+RAM+BATTERY 2",
    "MBC3",
    "MBC3+RAM 2",
    "MBC3+RAM+BATTERY 2",
    "0x14 ???",
    "0x15 ???",
    "0x16 ???",
    "0x17 ???",
    "0x18 ???",
    "MBC5",
    "MBC5+RAM",
    "MBC5+RAM+BATTERY",
    "MBC5+RUMBLE",
    "MBC5+RUMBLE+RAM",
    "MBC5+RUMBLE+RAM+BATTERY",
    "0x1F ???",
    "MBC6",
    "0x21 ???",
    "MBC7+SENSOR+RUMBLE+RAM+BATTERY",
)

OLD_LICENSEE_NAMES = {
    0x00: "None",
    0x01: "Nintendo",
    0x08: "Capcom",
    0x09: "HOT-B",
    0x0A: "Jaleco",
    0x0B: "Coconuts Japan",
    0x0C: "Elite Systems",
    0x13: "EA (Electronic Arts)",
    0x18: "Hudson Soft",
    0x19: "ITC Entertainment",
    0x1A: "Yanoman",
    0x1D: "Japan Clary",
    0x1F: "Virgin Games Ltd.",
    0x24: "PCM Complete",
    0x25: "San-X",
    0x28: "Kemco",
    0x29: "SETA Corporation",
    0x30: "Infogrames",
    0x31: "Nintendo",
    0x32: "Bandai",
    0x33: "Indicates that the New licensee code should be used instead.",
    0x34: "Konami",
    0x35: "HectorSoft",
    0x38: "Capcom",
    0x39: "Banpresto",
    0x3C: "Entertainment Interactive (stub)",
    0x3E: "Gremlin",
    0x41: "Ubi Soft",
    0x42: "Atlus",
    0x44: "Malibu Interactive",
    0x46: "Angel",
    0x47: "Spectrum HoloByte",
    0x49: "Irem",
    0x4A: "Virgin Games Ltd.",
    0x4D: "Malibu Interactive",
    0x4F: "U.S. Gold",
    0x50: "Absolute",
    0x51: "Acclaim Entertainment",
    0x52: "Activision",
    0x53: "Sammy USA Corporation",
    0x54: "GameTek",
    0x55: "Park Place",
    0x56: "LJN",
    0x57: "Matchbox",
    0x59: "Milton Bradley Company",
    0x5A: "Mindscape",
    0x5B: "Romstar",
    0x5C: "Naxat Soft",
    0x5D: "Tradewest",
    0x60: "Titus Interactive",
    0x61: "Virgin Games Ltd.",
    0x67: "Ocean Software",
    0x69: "EA (Electronic Arts)",
    0x6E: "Elite Systems",
    0x6F: "Electro Brain",
    0x70: "Infogrames",
    0x71: "Interplay Entertainment",
    0x72: "Broderbund",
    0x73: "Sculptured Software",
    0x75: "The Sales Curve Limited",
    0x78: "THQ",
    0x79: "Accolade1",
    0x7A: "Triffix Entertainment",
    0x7C: "MicroProse",
    0x7F: "Kemco",
    0x80: "Misawa Entertainment",
    0x83: "LOZC G.",
    0x86: "Tokuma Shoten",
    0x8B: "Bullet-Proof Software",
    0x8C: "Vic Tokai Corp.",
    0x8E: "Ape Inc.",
    0x8F: "I’Max",
    0x91: "Chunsoft Co.",
    0x92: "Video System",
    0x93: "Tsubaraya Productions",
    0x95: "Varie",
    0x96: "Yonezawa19/S’Pal",
    0x97: "Kemco",
    0x99: "Arc",
    0x9A: "Nihon Bussan",
    0x9B: "Tecmo",
    0x9C: "Imagineer",
    0x9D: "Banpresto",
    0x9F: "Nova",
    0xA1: "Hori Electric",
    0xA2: "Bandai",
    0xA4: "Konami",
    0xA6: "Kawada",
    0xA7: "Takara",
    0xA9: "Technos Japan",
    0xAA: "Broderbund",
    0xAC: "Toei Animation",
    0xAD: "Toho",
    0xAF: "Namco",
    0xB0: "Acclaim Entertainment",
    0xB1: "ASCII Corporation or Nexsoft",
    0xB2: "Bandai",
    0xB4: "Square Enix",
    0xB6: "HAL Laboratory",
    0xB7: "SNK",
    0xB9: "Pony Canyon",
    0xBA: "Culture Brain",
    0xBB: "Sunsoft",
    0xBD: "Sony Imagesoft",
    0xBF: "Sammy Corporation",
    0xC0: "Taito",
    0xC2: "Kemco",
    0xC3: "Square",
    0xC4: "Tokuma Shoten",
    0xC5: "Data East",
    0xC6: "Tonkin House;",
    0xC8: "Koei",
    0xC9: "UFL",
    0xCA: "Ultra Games",
    0xCB: "VAP, Inc.",
    0xCC: "Use Corporation",
    0xCD: "Meldac",
    0xCE: "Pony Canyon",
    0xCF: "Angel",
    0xD0: "Taito",
    0xD1: "SOFEL (Software Engineering Lab)",
    0xD2: "Quest",
    0xD3: "Sigma Enterprises",
    0xD4: "ASK Kodansha Co.",
    0xD6: "Naxat Soft",
    0xD7: "Copya System",
    0xD9: "Banpresto",
    0xDA: "Tomy",
    0xDB: "LJN",
    0xDD: "Nippon Computer Systems",
    0xDE: "Human Ent.",
    0xDF: "Altron",
    0xE0: "Jaleco",
    0xE1: "Towa Chiki",
    0xE2: "Yutaka # Needs more info",
    0xE3: "Varie",
    0xE5: "Epoch",
    0xE7: "Athena",
    0xE8: "Asmik Ace Entertainment",
    0xE9: "Natsume",
    0xEA: "King Records",
    0xEB: "Atlus",
    0xEC: "Epic/Sony Records",
    0xEE: "IGS",
    0xF0: "A Wave",
    0xF3: "Extreme Entertainment",
    0xFF: "LJN",
}

NEW_LICENSEE_NAMES = {
    "00": "None",
    "01": "Nintendo Research & Development 1",
    "08": "Capcom",
    "13": "EA (Electronic Arts)",
    "18": "Hudson Soft",
    "19": "B-AI",
    "20": "KSS",
    "22": "Planning Office WADA",
    "24": "PCM Complete",
    "25": "San-X",
    "28": "Kemco",
    "29": "SETA Corporation",
    "30": "Viacom",
    "31": "Nintendo",
    "32": "Bandai",
    "33": "Ocean Software/Acclaim Entertainment",
    "34": "Konami",
    "35": "HectorSoft",
    "37": "Taito",
    "38": "Hudson Soft",
    "39": "Banpresto",
    "41": "Ubi Soft",
    "42": "Atlus",
    "44": "Malibu Interactive",
    "46": "Angel",
    "47": "Bullet-Proof Software",
    "49": "Irem",
    "50": "Absolute",
    "51": "Acclaim Entertainment",
    "52": "Activision",
    "53": "Sammy USA Corporation",
    "54": "Konami",
    "55": "Hi Tech Expressions",
    "56": "LJN",
    "57": "Matchbox",
    "58": "Mattel",
    "59": "Milton Bradley Company",
    "60": "Titus Interactive",
    "61": "Virgin Games Ltd.",
    "64": "Lucasfilm Games",
    "67": "Ocean Software",
    "69": "EA (Electronic Arts)",
    "70": "Infogrames",
    "71": "Interplay Entertainment",
    "72": "Broderbund",
    "73": "Sculptured Software",
    "75": "The Sales Curve Limited",
    "78": "THQ",
    "79": "Accolade",
    "80": "Misawa Entertainment",
    "83": "lozc",
    "86": "Tokuma Shoten",
    "87": "Tsukuda Original",
    "91": "Chunsoft Co.",
    "92": "Video System",
    "93": "Ocean Software/Acclaim Entertainment",
    "95": "Varie",
    "96": "Yonezawa/S’Pal",
    "97": "Kaneko",
    "99": "Pack-In-Video",
    "9H": "Bottom Up",
    "A4": "Konami (Yu-Gi-Oh!)",
    "BL": "MTO",
    "DK": "Kodansha",
}

RAM_SIZES_KIB = (0, -1, 8, 32, 128, 64)


class CartError(Exception):
    """Raised when a cartridge cannot be read or decoded."""


@dataclass
class CartMetadata:
    """The decoded cartridge header found at 0x100-0x14F."""

    entry: int
    logo: bytes
    title: str
    new_licensee_code: int
    sgb_flag: int
    cart_type: int
    rom_size_code: int
    ram_size_code: int
    destination_code: int
    old_licensee_code: int
    version: int
    checksum: int
    global_checksum: int

    @classmethod
    def from_rom(cls, rom: bytes) -> "CartMetadata":
        """Decode the header of a full ROM image."""
        if len(rom) < HEADER_END:
            raise CartError(
                f"ROM is {len(rom)} bytes, too short to hold a cartridge header"
            )
        (
            entry,
            logo,
            raw_title,
            new_licensee,
            sgb_flag,
            cart_type,
            rom_size_code,
            ram_size_code,
            destination_code,
            old_licensee_code,
            version,
            checksum,
            global_checksum,
        ) = struct.unpack(_HEADER_FORMAT, rom[HEADER_START:HEADER_END])

        # With a new licensee code the title field shrinks to 11 characters.
        if old_licensee_code == SEE_NEW_LICENSEE_CODE_FLAG:
            raw_title = raw_title[:11]
        title = raw_title[:15].split(b"\0", 1)[0].decode("latin-1")

        return cls(
            entry=entry,
            logo=logo,
            title=title,
            new_licensee_code=int.from_bytes(new_licensee, "big"),
            sgb_flag=sgb_flag,
            cart_type=cart_type,
            rom_size_code=rom_size_code,
            ram_size_code=ram_size_code,
            destination_code=destination_code,
            old_licensee_code=old_licensee_code,
            version=version,
            checksum=checksum,
            global_checksum=int.from_bytes(global_checksum, "big"),
        )


@dataclass
class Cart:
    """A loaded cartridge: its file name, ROM image and decoded header."""

    filename: str
    rom: bytes
    metadata: CartMetadata

    @property
    def rom_size_bytes(self) -> int:
        return len(self.rom)


def load_cart(path: Union[str, "PathLike[str]"]) -> Cart:
    """Read a ROM file and decode its header."""
    filename = str(path)
    try:
        with open(filename, "rb") as rom_file:
            rom = rom_file.read()
    except OSError as exc:
        raise CartError(f"Error opening file: {filename}") from exc
    return Cart(filename=filename, rom=rom, metadata=CartMetadata.from_rom(rom))


def _rom_type_name(cart_type: int) -> str:
    if 0 <= cart_type < len(ROM_TYPE_NAMES):
        return ROM_TYPE_NAMES[cart_type]
    return f"0x{cart_type:02X} ???"


def format_cart_metadata(metadata: CartMetadata) -> str:
    """Render the header as human readable text."""
    licensee_name = get_licensee_name(
        metadata.old_licensee_code, metadata.new_licensee_code
    )
    try:
        rom_size = get_human_rom_size(metadata.rom_size_code)
    except ValueError:
        rom_size = "unknown"
    try:
        ram_size = str(get_ram_size_kib(metadata.ram_size_code))
    except ValueError:
        ram_size = "?"

    return (
        f"Cart title:\t{metadata.title} (v{metadata.version})\n"
        f"Licensee:\t{licensee_name} (0x{metadata.new_licensee_code:04X})\n"
        f"Cart type:\t{_rom_type_name(metadata.cart_type)} "
        f"(0x{metadata.cart_type:02X})\n"
        f"ROM size:\t{rom_size} (0x{metadata.rom_size_code:02X})\n"
        f"RAM size:\t{ram_size}KiB (0x{metadata.ram_size_code:02X})\n"
    )


def print_cart_metadata(metadata: CartMetadata) -> None:
    """Print the formatted header followed by a blank line."""
    print(format_cart_metadata(metadata))


def lookup_new_licensee_name(code: str) -> str:
    """Map a two-character new licensee code to the publisher's name."""
    return NEW_LICENSEE_NAMES.get(code, UNKNOWN_LICENSEE)


def get_licensee_name(old_lic_code: int, new_lic_code: int) -> str:
    """Resolve the publisher's name from the old and new licensee codes."""
    if old_lic_code == SEE_NEW_LICENSEE_CODE_FLAG:
        raw = bytes(((new_lic_code >> 8) & 0xFF, new_lic_code & 0xFF))
        code = raw.split(b"\0", 1)[0].decode("latin-1")
        return lookup_new_licensee_name(code)
    return OLD_LICENSEE_NAMES.get(old_lic_code, UNKNOWN_LICENSEE)


def get_human_rom_size(rom_size_code: int) -> str:
    """Return the ROM size for a header size code, such as ``"64KiB"``."""
    # Codes 0x52-0x54 are left out: no cartridges of those sizes are known.
    if not 0 <= rom_size_code <= 0x08:
        raise ValueError(f"unsupported ROM size code 0x{rom_size_code:02X}")
    rom_size_kib = 32 * (1 << rom_size_code)
    if rom_size_code <= 0x04:
        return f"{rom_size_kib}KiB"
    return f"{rom_size_kib // 1024}MiB"


def get_ram_size_kib(ram_size_code: int) -> int:
    """Return the cartridge RAM size in KiB; code 0x01 is unused and gives -1."""
    if not 0 <= ram_size_code < len(RAM_SIZES_KIB):
        raise ValueError(f"unsupported RAM size code 0x{ram_size_code:02X}")
    return RAM_SIZES_KIB[ram_size_code]