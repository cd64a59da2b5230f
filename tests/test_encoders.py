import pytest
from colorama import Fore, Style

from hexclock.encoders import RenderMode, encode, render
from hexclock.palette import Color
from hexclock.segments import segments


def test_markup_pair():
    assert encode(RenderMode.MARKUP, Color.GRAY, 0x00) == "<fc=#999999>00</fc>"
    assert encode(RenderMode.MARKUP, Color.GREEN, 0xAB) == "<fc=#00ff00>AB</fc>"


def test_plain_pair():
    assert encode(RenderMode.PLAIN, Color.GRAY, 0xFF) == "FF"
    assert encode(RenderMode.PLAIN, Color.GREEN, 0x0A) == "0A"


def test_ansi_pair():
    text = encode(RenderMode.ANSI, Color.GREEN, 0x5C)
    assert text == Fore.GREEN + "5C " + Style.RESET_ALL


def test_epoch_zero_markup_line():
    assert render(RenderMode.MARKUP, segments(0)) == (
        "<fc=#999999>00</fc> <fc=#999999>00</fc> "
        "<fc=#00ff00>00</fc> <fc=#cccccc>00</fc> "
    )


def test_plain_line():
    assert render(RenderMode.PLAIN, segments(0x6553F100)) == "65 53 F1 00"


def test_ansi_line_resets_after_each_pair():
    line = render(RenderMode.ANSI, segments(0x01020304))
    assert line.count(Style.RESET_ALL) == 4
    assert line.startswith(Fore.LIGHTBLACK_EX + "01 ")
    assert line.endswith(Fore.WHITE + "04 " + Style.RESET_ALL)


@pytest.mark.parametrize("mode", list(RenderMode))
def test_encoding_is_repeatable(mode):
    first = encode(mode, Color.CYAN, 0x42)
    assert encode(mode, Color.CYAN, 0x42) == first


@pytest.mark.parametrize("mode", list(RenderMode))
def test_byte_values_survive_every_mode(mode):
    line = render(mode, segments(0xDEADBEEF))
    for digits in ("DE", "AD", "BE", "EF"):
        assert digits in line


def test_mode_tokens():
    assert RenderMode.tokens() == ["xmobar", "term", "color"]
    assert RenderMode("color") is RenderMode.ANSI
    with pytest.raises(ValueError):
        RenderMode("rainbow")
