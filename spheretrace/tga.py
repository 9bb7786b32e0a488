"""Writing uncompressed 24-bit TGA images."""

from __future__ import annotations

import os
import struct

_MAX_DIMENSION = 0xFFFF
_CHANNELS = 3


def encode_tga(width: int, height: int, pixels: bytes) -> bytes:
    """Encode top-down RGB ``pixels`` as an uncompressed true-colour TGA.

    Rows are stored bottom-up and each pixel as BGR, as the format requires.
    """
    if not (1 <= width <= _MAX_DIMENSION and 1 <= height <= _MAX_DIMENSION):
        raise ValueError(f"invalid image size {width}x{height}")
    data = bytes(pixels)
    row_size = width * _CHANNELS
    if len(data) != row_size * height:
        raise ValueError(
            f"expected {row_size * height} bytes of pixel data, got {len(data)}"
        )

    header = struct.pack(
        "<BBBHHBHHHHBB",
        0,  # id length
        0,  # no colour map
        2,  # uncompressed true-colour
        0, 0, 0,  # colour map specification
        0, 0,  # origin
        width,
        height,
        _CHANNELS * 8,
        0,  # no alpha, bottom-left origin
    )

    body = bytearray()
    for start in range(row_size * (height - 1), -1, -row_size):
        row = data[start:start + row_size]
        bgr = bytearray(row_size)
        bgr[0::3] = row[2::3]
        bgr[1::3] = row[1::3]
        bgr[2::3] = row[0::3]
        body += bgr
    return header + bytes(body)


def write_tga(path: str | os.PathLike[str], width: int, height: int, pixels: bytes) -> None:
    """Write ``pixels`` to ``path`` as an uncompressed TGA file."""
    encoded = encode_tga(width, height, pixels)
    with open(path, "wb") as handle:
        handle.write(encoded)