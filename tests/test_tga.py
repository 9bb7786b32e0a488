import pytest

from spheretrace.tga import encode_tga, write_tga

RED = bytes([255, 0, 0])
GREEN = bytes([0, 255, 0])
BLUE = bytes([0, 0, 255])
WHITE = bytes([255, 255, 255])


def test_header_layout():
    data = encode_tga(2, 1, RED + GREEN)
    header = data[:18]
    assert header[0] == 0
    assert header[1] == 0
    assert header[2] == 2
    assert header[3:12] == bytes(9)
    assert int.from_bytes(header[12:14], "little") == 2
    assert int.from_bytes(header[14:16], "little") == 1
    assert header[16] == 24
    assert header[17] == 0


def test_size_matches_dimensions():
    width, height = 5, 3
    data = encode_tga(width, height, bytes(width * height * 3))
    assert len(data) == 18 + width * height * 3


def test_rows_bottom_up_and_bgr():
    pixels = RED + GREEN + BLUE + WHITE  # top row: red, green; bottom: blue, white
    body = encode_tga(2, 2, pixels)[18:]
    assert body[0:3] == BLUE[::-1]
    assert body[3:6] == WHITE
    assert body[6:9] == RED[::-1]
    assert body[9:12] == GREEN[::-1]


def test_wrong_pixel_count_raises():
    with pytest.raises(ValueError):
        encode_tga(2, 2, bytes(11))


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-1, 4), (70000, 1)])
def test_invalid_dimensions_raise(width, height):
    with pytest.raises(ValueError):
        encode_tga(width, height, bytes(max(width * height * 3, 0)))


def test_write_tga_matches_encoding(tmp_path):
    pixels = RED + GREEN + BLUE
    path = tmp_path / "out.tga"
    write_tga(path, 3, 1, pixels)
    assert path.read_bytes() == encode_tga(3, 1, pixels)