"""Glyph banner alphabet and superscript digits."""

from __future__ import annotations

GLYPH_ROWS = 5

DIGIT_GLYPHS: dict[str, tuple[str, ...]] = {
    "0": (" ### ", "#   #", "#   #", "#   #", " ### "),
    "1": ("  #  ", " ##  ", "  #  ", "  #  ", " ### "),
    "2": (" ### ", "#   #", "   # ", "  #  ", "#####"),
    "3": (" ### ", "    #", " ### ", "    #", " ### "),
    "4": ("#   #", "#   #", "#####", "    #", "    #"),
    "5": ("#####", "#    ", "#### ", "    #", "#### "),
    "6": (" ### ", "#    ", "#### ", "#   #", " ### "),
    "7": ("#####", "    #", "   # ", "  #  ", "  #  "),
    "8": (" ### ", "#   #", " ### ", "#   #", " ### "),
    "9": (" ### ", "#   #", " ####", "    #", " ### "),
}
MINUS_GLYPH: tuple[str, ...] = ("     ", " --- ", "     ", "     ", "     ")
UNKNOWN_GLYPH: tuple[str, ...] = ("?????",) * GLYPH_ROWS

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def glyph_for(ch: str) -> tuple[str, ...]:
    """Return the stencil rows for one character."""
    if ch == "-":
        return MINUS_GLYPH
    return DIGIT_GLYPHS.get(ch, UNKNOWN_GLYPH)


def render_banner(text: str) -> tuple[str, ...]:
    """Render *text* as five banner rows, one blank column between glyphs."""
    rows: list[list[str]] = [[] for _ in range(GLYPH_ROWS)]
    for ch in text:
        for row, part in zip(rows, glyph_for(ch), strict=True):
            row.append(part)
    return tuple(" ".join(row) for row in rows)


def superscript(value: int | str) -> str:
    """Render an integer exponent with superscript digits (``-1022`` -> ``⁻¹⁰²²``)."""
    return str(value).translate(_SUPERSCRIPTS)
