"""Wrap text in ANSI colour and attribute escape sequences."""

from __future__ import annotations

from typing import Optional

from gridmvc.unit import Color

_INIT = "\x1b["
_END = "m"
_HILIT = "1"
_BLINK = "5"
_RECOVER = "\x1b[0m"


def _sequence(codes: list[str]) -> str:
    return _INIT + ";".join(codes) + _END


def ansi_print(
    text: Optional[str],
    fg: Color = Color.NOCHANGE,
    bg: Color = Color.NOCHANGE,
    hi: bool = False,
    blinking: bool = False,
) -> str:
    """Return text framed by an ANSI sequence for the given colours and attributes."""
    if not text:
        return ""
    codes: list[str] = []
    if hi:
        codes.append(_HILIT)
    if blinking:
        codes.append(_BLINK)
    if fg != Color.NOCHANGE:
        codes.append(f"3{int(fg)}")
    if bg != Color.NOCHANGE:
        codes.append(f"4{int(bg)}")
    return _sequence(codes) + text + _RECOVER


def ansi_style(text: Optional[str], hi: bool = False, blinking: bool = False) -> str:
    """Return text with only highlight and blink attributes applied."""
    if not text:
        return ""
    prefix = ""
    if hi or blinking:
        codes: list[str] = []
        if hi:
            codes.append(_HILIT)
        if blinking:
            codes.append(_BLINK)
        prefix = _sequence(codes)
    return prefix + text + _RECOVER