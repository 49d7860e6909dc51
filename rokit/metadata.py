"""Metadata stored at the end of link executables."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from rokit.errors import RokitError

_TRAILER = b"ROKIT_LINK"
_META_VERSION = 1
_FOOTER_SIZE = 16
_CURRENT_VERSION = "1.0.0"


def _encode_varint(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _decode_varint(data: bytes) -> tuple[int, int] | None:
    value = 0
    for index, byte in enumerate(data[:10]):
        value |= (byte & 0x7F) << (7 * index)
        if not byte & 0x80:
            return value, index + 1
    return None


@dataclass(frozen=True)
class LinkMetadata:
    """Version information appended to a link executable.

    The layout is: contents, metadata bytes, metadata length (4 bytes LE),
    metadata version (2 bytes LE) and a 10 byte trailer.
    """

    version: str

    @classmethod
    def current(cls) -> "LinkMetadata":
        """Return metadata for the running version."""
        return cls(_CURRENT_VERSION)

    def is_current(self) -> bool:
        """Return True if this metadata is for the running version."""
        return self.version == _CURRENT_VERSION

    @classmethod
    def parse_from(cls, contents: bytes) -> "LinkMetadata | None":
        """Read metadata from the end of file contents, or None if absent."""
        data = bytes(contents)
        size = len(data)
        if size < _FOOTER_SIZE or not data.endswith(_TRAILER):
            return None
        meta_len, meta_version = struct.unpack_from("<IH", data, size - _FOOTER_SIZE)
        if size < _FOOTER_SIZE + meta_len or meta_version != _META_VERSION:
            return None
        payload = data[size - _FOOTER_SIZE - meta_len : size - _FOOTER_SIZE]
        decoded = _decode_varint(payload)
        if decoded is None:
            return None
        length, offset = decoded
        raw = payload[offset : offset + length]
        if len(raw) != length:
            return None
        try:
            return cls(raw.decode("utf-8"))
        except UnicodeDecodeError:
            return None

    def append_to(self, contents: bytes) -> bytes:
        """Return the contents with this metadata appended."""
        encoded = self.version.encode("utf-8")
        payload = _encode_varint(len(encoded)) + encoded
        if len(payload) > 0xFFFFFFFF:
            raise RokitError("metadata larger than 4GB is not supported")
        return b"".join(
            (
                bytes(contents),
                payload,
                struct.pack("<IH", len(payload), _META_VERSION),
                _TRAILER,
            )
        )