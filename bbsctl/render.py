"""Terminal rendering: borderless tables, ANSI colours and JSON output."""

from __future__ import annotations

import json
import re
import unicodedata
from enum import Enum
from typing import Any, Iterable, Sequence

_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")
_TITLE = re.compile(r"(?<![A-Za-z0-9_])([a-z])")
_PADDING_RIGHT = "  "
_RESET = "\x1b[0m"

_colors_enabled = True


class Color(Enum):
    """ANSI attributes used by the command line."""

    BOLD = "1"
    YELLOW = "33"
    HI_RED = "91"
    HI_GREEN = "92"


def set_colors_enabled(enabled: bool) -> None:
    """Turn ANSI colouring on or off for every later call to paint."""
    global _colors_enabled
    _colors_enabled = bool(enabled)


def paint(text: Any, color: Color) -> str:
    """Wrap text in the escape sequence for color, if colours are enabled."""
    text = str(text)
    if not _colors_enabled:
        return text
    return f"\x1b[{color.value}m{text}{_RESET}"


def bold(text: Any) -> str:
    """Return text in bold."""
    return paint(text, Color.BOLD)


def to_json(value: Any) -> str:
    """Format value as indented JSON, escaping HTML-sensitive characters."""
    out = json.dumps(value, indent=2, ensure_ascii=False)
    for char, escaped in (
        ("&", "\\u0026"),
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        out = out.replace(char, escaped)
    return out


def _visible_width(text: str) -> int:
    plain = _ESCAPE.sub("", text)
    width = 0
    for char in plain:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _title(text: str) -> str:
    return _TITLE.sub(lambda match: match.group(1).upper(), text)


def _csv_cell(value: Any) -> str:
    text = str(value)
    if '"' in text or "," in text:
        text = text.replace('"', '\\"').replace(",", "\\,")
        return f'"{text}"'
    return text


class Table:
    """A borderless table in the style of docker's listings."""

    def __init__(self, header: Sequence[Any] | None = None) -> None:
        self._header = list(header) if header else []
        self._rows: list[list[Any]] = []

    def append_row(self, row: Iterable[Any]) -> None:
        """Add one row of cells."""
        self._rows.append(list(row))

    def _numeric_columns(self, count: int) -> list[bool]:
        if not self._rows:
            return [False] * count
        return [
            all(index < len(row) and _is_number(row[index]) for row in self._rows)
            for index in range(count)
        ]

    def render(self) -> str:
        """Render the table as aligned text columns."""
        header = [_title(str(cell)) for cell in self._header]
        body = [[str(cell) for cell in row] for row in self._rows]
        lines = ([header] if header else []) + body
        if not lines:
            return ""

        count = max(len(line) for line in lines)
        lines = [line + [""] * (count - len(line)) for line in lines]
        widths = [
            max(_visible_width(line[index]) for line in lines) for index in range(count)
        ]
        numeric = self._numeric_columns(count)

        rendered = []
        for position, line in enumerate(lines):
            is_header = bool(header) and position == 0
            cells = []
            for cell, width, right in zip(line, widths, numeric):
                fill = " " * (width - _visible_width(cell))
                aligned = fill + cell if right and not is_header else cell + fill
                cells.append(aligned + _PADDING_RIGHT)
            rendered.append("".join(cells))
        return "\n".join(rendered)

    def render_csv(self) -> str:
        """Render the table as comma separated values."""
        lines = ([self._header] if self._header else []) + self._rows
        return "\n".join(",".join(_csv_cell(cell) for cell in line) for line in lines)