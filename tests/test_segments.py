import pytest

from hexclock.palette import Color
from hexclock.segments import Scheme, classify, from_bytes, segments, to_bytes


@pytest.mark.parametrize("timestamp", [0, 1, 0xFF, 0x12345678, 1700000000, 0xFFFFFFFF])
def test_bytes_reconstruct_timestamp(timestamp):
    values = to_bytes(timestamp)
    assert len(values) == 4
    assert all(0 <= v <= 0xFF for v in values)
    assert from_bytes(values) == timestamp


def test_bytes_are_big_endian():
    assert to_bytes(0x12345678) == [0x12, 0x34, 0x56, 0x78]
    assert to_bytes(0xFFFFFFFF) == [0xFF, 0xFF, 0xFF, 0xFF]


def test_four_tone_colors():
    assert [classify(p, Scheme.FOUR_TONE) for p in range(4)] == [
        Color.GRAY, Color.GRAY, Color.GREEN, Color.LIGHT_GRAY,
    ]


def test_two_tone_only_low_bytes():
    assert classify(2, Scheme.TWO_TONE) is Color.CYAN
    assert classify(3, Scheme.TWO_TONE) is Color.LIGHT_GRAY
    with pytest.raises(ValueError):
        classify(0, Scheme.TWO_TONE)


def test_segments_pairs():
    assert segments(0x0A0B0C0D) == [
        (Color.GRAY, 0x0A),
        (Color.GRAY, 0x0B),
        (Color.GREEN, 0x0C),
        (Color.LIGHT_GRAY, 0x0D),
    ]
    assert segments(0x0A0B0C0D, Scheme.TWO_TONE) == [
        (Color.CYAN, 0x0C),
        (Color.LIGHT_GRAY, 0x0D),
    ]
