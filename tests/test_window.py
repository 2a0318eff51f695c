import pytest

from textfile.errors import NotTextFileError
from textfile.window import ByteWindow, ensure_text, trim_window


def test_nul_byte_is_not_text():
    with pytest.raises(NotTextFileError) as exc:
        ensure_text(b"abc\x00def", "blob.bin")
    assert exc.value.code == "ENOTTEXT"
    assert exc.value.path == "blob.bin"


def test_text_without_nul_passes():
    ensure_text("plain\r\ntext é".encode("utf-8"))


def test_trim_start_and_end():
    window = ByteWindow(data=b"03\nln04\nln", start=12)
    trimmed = trim_window(window, True, True)
    assert trimmed.data == b"ln04\n"
    assert trimmed.start == 15
    assert trimmed.end == 20


def test_trim_start_only():
    trimmed = trim_window(ByteWindow(data=b"03\nln04\nln"), True, False)
    assert trimmed.data == b"ln04\nln"


def test_trim_end_only():
    trimmed = trim_window(ByteWindow(data=b"03\nln04\nln"), False, True)
    assert trimmed.data == b"03\nln04\n"


def test_window_without_lf_is_left_alone():
    window = ByteWindow(data=b"no separator here", start=4)
    assert trim_window(window, True, True) is window


def test_single_lf_can_trim_to_empty():
    trimmed = trim_window(ByteWindow(data=b"abc\n"), True, True)
    assert trimmed.is_empty
