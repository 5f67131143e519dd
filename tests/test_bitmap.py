import pytest

from xutilkit.bitmap import Bitmap, BitmapError, parse_bitmap, read_bitmap_file

X11_SAMPLE = (
    "#define test_width 8\n"
    "#define test_height 2\n"
    "#define test_x_hot 1\n"
    "#define test_y_hot 0\n"
    "static unsigned char test_bits[] = {\n"
    "   0xff, 0x01};\n"
)


def test_x11_bitmap_fields():
    bm = parse_bitmap(X11_SAMPLE)
    assert (bm.width, bm.height) == (8, 2)
    assert bm.data == b"\xff\x01"
    assert (bm.x_hot, bm.y_hot) == (1, 0)


def test_hot_spot_absent_is_none():
    text = (
        "#define a_width 8\n#define a_height 1\n"
        "static char a_bits[] = {\n 0x0f };\n"
    )
    bm = parse_bitmap(text)
    assert bm.x_hot is None and bm.y_hot is None
    assert bm.data == b"\x0f"


def test_values_on_declaration_line_are_skipped():
    text = (
        "#define a_width 8\n#define a_height 1\n"
        "static char a_bits[] = { 0xff,\n 0x0f };\n"
    )
    assert parse_bitmap(text).data == b"\x0f"


def test_x10_short_format():
    text = (
        "#define s_width 16\n#define s_height 1\n"
        "static short s_bits[] = {\n 0x1234 };\n"
    )
    assert parse_bitmap(text).data == b"\x34\x12"


def test_x10_padding_drops_high_byte():
    text = (
        "#define s_width 8\n#define s_height 2\n"
        "static short s_bits[] = {\n 0x00ff, 0x0081 };\n"
    )
    bm = parse_bitmap(text)
    assert bm.data == b"\xff\x81"
    assert len(bm.data) == bm.bytes_per_line * bm.height


def test_pixel_lsb_first():
    bm = parse_bitmap(X11_SAMPLE)
    assert bm.pixel(0, 1) is True
    assert bm.pixel(1, 1) is False
    assert all(bm.pixel(x, 0) for x in range(8))


def test_pixel_out_of_range():
    bm = Bitmap(width=8, height=1, data=b"\x00")
    with pytest.raises(IndexError):
        bm.pixel(8, 0)


def test_bytes_input_matches_text_input():
    assert parse_bitmap(X11_SAMPLE.encode()) == parse_bitmap(X11_SAMPLE)


def test_missing_dimensions():
    with pytest.raises(BitmapError):
        parse_bitmap("static char a_bits[] = {\n 0x00 };\n")


def test_no_bits_declaration():
    with pytest.raises(BitmapError):
        parse_bitmap("#define a_width 8\n#define a_height 1\n")


def test_too_little_data():
    text = (
        "#define a_width 8\n#define a_height 3\n"
        "static char a_bits[] = {\n 0x01, 0x02 };\n"
    )
    with pytest.raises(BitmapError):
        parse_bitmap(text)


def test_value_ending_at_end_of_data_is_incomplete():
    text = (
        "#define a_width 8\n#define a_height 1\n"
        "static char a_bits[] = {\n 0x01"
    )
    with pytest.raises(BitmapError):
        parse_bitmap(text)


def test_overlong_line_rejected():
    text = "/* " + "x" * 300 + " */\n" + X11_SAMPLE
    with pytest.raises(BitmapError):
        parse_bitmap(text)


def test_read_bitmap_file(tmp_path):
    path = tmp_path / "sample.xbm"
    path.write_text(X11_SAMPLE)
    assert read_bitmap_file(path) == parse_bitmap(X11_SAMPLE)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_bitmap_file(tmp_path / "absent.xbm")