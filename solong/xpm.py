"""Loading XPM images into 32-bit pixel grids."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator, Optional, Union

from solong.colors import lookup_color

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63

_C_SPACE = "[ \t\n\v\f\r]*"
_HEX_RE = re.compile(_C_SPACE + r"([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_INT_RE = re.compile(_C_SPACE + r"([+-]?[0-9]+)")
_WORD_SPLIT_RE = re.compile(r"[ \t]+")
_QUOTED_RE = re.compile(r'"([^"]*)"')

PathArg = Union[str, "PathLike[str]"]


class XpmError(Exception):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """An image as rows of 0xAARRGGBB values; a set alpha byte means transparent."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        return self.pixels[y][x]

    def to_rgba(self) -> bytes:
        """Return the pixels as RGBA bytes with conventional (opacity) alpha."""
        return bytes(
            channel
            for row in self.pixels
            for value in row
            for channel in (
                (value >> 16) & 0xFF,
                (value >> 8) & 0xFF,
                value & 0xFF,
                255 - ((value >> 24) & 0xFF),
            )
        )


def _find_unquoted(text: str, target: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(target, pos):
            return pos
    return -1


def _blank(text: str, start: int, end: int) -> str:
    end = min(end, len(text))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside quotes with spaces."""
    while (begin := _find_unquoted(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        text = _blank(text, begin, close + 2 if close != -1 else begin + 3)
    while (begin := _find_unquoted(text, "//")) != -1:
        newline = text.find("\n", begin + 2)
        text = _blank(text, begin, newline + 1 if newline != -1 else begin + 2)
    return text


def split_words(line: str) -> list[str]:
    """Split ``line`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SPLIT_RE.split(line) if word]


def _to_int32(value: int) -> int:
    value = max(-(2**63), min(value, 2**63 - 1)) & 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _parse_hex(text: str) -> int:
    match = _HEX_RE.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return _to_int32(-value if sign == "-" else value)


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return _to_int32(int(match.group(1))) if match else 0


def text_to_rgb(name: str, extra: Optional[str] = None) -> int:
    """Turn an XPM colour spec into 0xRRGGBB.

    ``#hex`` is read as hexadecimal. Otherwise ``name`` (joined with ``extra``
    by a space when given) is looked up by name; ``None`` gives -1 and an
    unknown name gives 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_BUFFER]
    color = lookup_color(name)
    return 0 if color is None else color


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == -1 else color & 0xFFFFFFFF


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Parse the XPM strings (header, colour definitions, pixel rows) in order."""
    source = iter(lines)
    header = split_words(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("incomplete XPM header")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header")

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definition")
        if len(line) < cpp:
            raise XpmError("colour definition too short")
        words = split_words(line[cpp:])
        try:
            at = words.index("c")
        except ValueError:
            raise XpmError("colour definition without 'c' key") from None
        if at + 1 >= len(words):
            raise XpmError("colour definition without a colour")
        extra = words[at + 2] if at + 2 < len(words) else None
        rgb = text_to_rgb(words[at + 1], extra)
        key = line[:cpp]
        if cpp <= 2:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < width * cpp:
            raise XpmError("pixel row too short")
        rows.append(
            tuple(
                _pixel_value(colors.get(line[start:start + cpp], 0))
                for start in range(0, width * cpp, cpp)
            )
        )
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Parse the text of an XPM file."""
    return parse_xpm(_QUOTED_RE.findall(strip_comments(text)))


def load_xpm(path: PathArg) -> XpmImage:
    """Read and parse an XPM file."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm_text(text)