from __future__ import annotations

import re

from rich.text import Text

_ROW = re.compile(r"^\W*(\d{3})\W+(.+?)\W*$")


def plain(text: str) -> str:
    """Strip ANSI escape codes from rendered output."""

    return Text.from_ansi(text).plain


def data_rows(text: str) -> list[tuple[int, str]]:
    """Return (code, description) for every table line that starts with a code."""

    rows = []
    for line in plain(text).splitlines():
        match = _ROW.match(line)
        if match:
            rows.append((int(match.group(1)), match.group(2).strip()))
    return rows
