import pytest

from textfile.errors import OutOfRangeError
from textfile.ranges import resolve_range


def test_empty_file_short_circuits_for_any_request():
    for offset, length in [(0, 10), (5, 1), (-3, 0)]:
        r = resolve_range(offset, length, 0)
        assert r.is_empty
        assert r.total_length == 0


def test_positive_offset_clips_length_to_file():
    r = resolve_range(90, 50, 100)
    assert (r.start, r.length) == (90, 10)
    assert r.at_file_end
    assert not r.at_file_start


def test_positive_offset_keeps_length_inside_file():
    r = resolve_range(12, 10, 100)
    assert (r.start, r.length, r.end) == (12, 10, 22)
    assert not r.at_file_end


@pytest.mark.parametrize("offset", [99, 100, 250])
def test_offset_at_or_past_last_byte_is_out_of_range(offset):
    with pytest.raises(OutOfRangeError) as exc:
        resolve_range(offset, 1, 100, "text2.txt")
    assert exc.value.code == "EOUTOFRANGE"
    assert exc.value.offset == offset


def test_negative_offset_reads_to_end_and_ignores_length():
    r = resolve_range(-18, 3, 100)
    assert (r.start, r.length) == (82, 18)
    assert r.at_file_end


def test_negative_offset_larger_than_file_starts_at_first_byte():
    r = resolve_range(-500, 0, 100)
    assert (r.start, r.length) == (0, 100)
    assert r.at_file_start and r.at_file_end


def test_negative_length_is_rejected():
    with pytest.raises(ValueError):
        resolve_range(0, -1, 100)
