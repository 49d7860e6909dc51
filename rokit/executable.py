"""Find the OS and architecture an executable was built for, from its header."""

from __future__ import annotations

import struct
import sys

from rokit.targets import OS, Arch

# ELF machine numbers
_EM_386 = 3
_EM_ARM = 40
_EM_X86_64 = 62
_EM_AARCH64 = 183

# Mach-O CPU types
_CPU_ARCH_ABI64 = 0x01000000
_CPU_ARCH_ABI64_32 = 0x02000000
_CPU_TYPE_X86 = 7
_CPU_TYPE_ARM = 12
_CPU_TYPE_X86_64 = _CPU_TYPE_X86 | _CPU_ARCH_ABI64
_CPU_TYPE_ARM64 = _CPU_TYPE_ARM | _CPU_ARCH_ABI64
_CPU_TYPE_ARM64_32 = _CPU_TYPE_ARM | _CPU_ARCH_ABI64_32

_MH_MAGIC = 0xFEEDFACE
_MH_MAGIC_64 = 0xFEEDFACF
_FAT_MAGIC = 0xCAFEBABE

# PE / COFF machine numbers
_COFF_MACHINE_X86 = 0x14C
_COFF_MACHINE_ARM = 0x1C0
_COFF_MACHINE_ARMNT = 0x1C4
_COFF_MACHINE_X86_64 = 0x8664
_COFF_MACHINE_ARM64 = 0xAA64

_ELF_MACHINES = {
    _EM_AARCH64: Arch.ARM64,
    _EM_X86_64: Arch.X64,
    _EM_386: Arch.X86,
    _EM_ARM: Arch.ARM32,
}

_MACH_CPU_TYPES = {
    _CPU_TYPE_ARM64: Arch.ARM64,
    _CPU_TYPE_X86_64: Arch.X64,
    _CPU_TYPE_ARM64_32: Arch.ARM32,
    _CPU_TYPE_ARM: Arch.ARM32,
    _CPU_TYPE_X86: Arch.X86,
}

_COFF_MACHINES = {
    _COFF_MACHINE_ARM64: Arch.ARM64,
    _COFF_MACHINE_X86_64: Arch.X64,
    _COFF_MACHINE_ARM: Arch.ARM32,
    _COFF_MACHINE_ARMNT: Arch.ARM32,
    _COFF_MACHINE_X86: Arch.X86,
}


def _parse_elf(data: bytes) -> tuple[OS, Arch] | None:
    if len(data) < 16 or data[:4] != b"\x7fELF":
        return None
    elf_class, encoding = data[4], data[5]
    header_size = {1: 52, 2: 64}.get(elf_class)
    endian = {1: "<", 2: ">"}.get(encoding)
    if header_size is None or endian is None or len(data) < header_size:
        return None
    (machine,) = struct.unpack_from(endian + "H", data, 18)
    arch = _ELF_MACHINES.get(machine)
    return (OS.LINUX, arch) if arch is not None else None


def _parse_mach(data: bytes) -> tuple[OS, Arch] | None:
    if len(data) < 8:
        return None
    (magic_be,) = struct.unpack_from(">I", data, 0)
    if magic_be == _FAT_MAGIC:
        return _parse_fat(data)

    (magic_le,) = struct.unpack_from("<I", data, 0)
    if magic_le in (_MH_MAGIC, _MH_MAGIC_64):
        endian, magic = "<", magic_le
    elif magic_be in (_MH_MAGIC, _MH_MAGIC_64):
        endian, magic = ">", magic_be
    else:
        return None
    header_size = 32 if magic == _MH_MAGIC_64 else 28
    if len(data) < header_size:
        return None
    (cputype,) = struct.unpack_from(endian + "I", data, 4)
    arch = _MACH_CPU_TYPES.get(cputype)
    return (OS.MACOS, arch) if arch is not None else None


def _parse_fat(data: bytes) -> tuple[OS, Arch] | None:
    (count,) = struct.unpack_from(">I", data, 4)
    entry_size = 20
    if len(data) < 8 + count * entry_size:
        return None
    arches = [
        _MACH_CPU_TYPES[cputype]
        for (cputype,) in (
            struct.unpack_from(">I", data, 8 + index * entry_size) for index in range(count)
        )
        if cputype in _MACH_CPU_TYPES
    ]
    # Several architectures (a universal binary) cannot be expressed as one Arch.
    if len(arches) == 1:
        return (OS.MACOS, arches[0])
    return None


def _parse_pe(data: bytes) -> tuple[OS, Arch] | None:
    if len(data) < 0x40 or data[:2] != b"MZ":
        return None
    (pe_offset,) = struct.unpack_from("<I", data, 0x3C)
    if len(data) < pe_offset + 24 or data[pe_offset : pe_offset + 4] != b"PE\0\0":
        return None
    (machine,) = struct.unpack_from("<H", data, pe_offset + 4)
    arch = _COFF_MACHINES.get(machine)
    return (OS.WINDOWS, arch) if arch is not None else None


def _parser_order():
    plat = sys.platform
    if plat == "darwin":
        return (_parse_mach, _parse_elf, _parse_pe)
    if plat in ("win32", "cygwin"):
        return (_parse_pe, _parse_elf, _parse_mach)
    return (_parse_elf, _parse_mach, _parse_pe)


def parse_executable(binary_contents: bytes) -> tuple[OS, Arch] | None:
    """Return the OS and architecture of an ELF, Mach-O or PE executable.

    The host's native format is tried first. Returns None if no format matches.
    """
    data = bytes(binary_contents)
    for parser in _parser_order():
        result = parser(data)
        if result is not None:
            return result
    return None


def detect_os_from_executable(binary_contents: bytes) -> OS | None:
    """Return the OS an executable was built for, or None."""
    result = parse_executable(binary_contents)
    return result[0] if result is not None else None


def detect_arch_from_executable(binary_contents: bytes) -> Arch | None:
    """Return the architecture an executable was built for, or None."""
    result = parse_executable(binary_contents)
    return result[1] if result is not None else None