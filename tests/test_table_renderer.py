from __future__ import annotations

from adapters.table_renderer import build_status_table, render
from core.catalogue import entries
from core.config import AppSettings
from core.domain.models import StatusCodeEntry

from .helpers import data_rows, plain


def test_render_is_idempotent() -> None:
    assert render(entries()) == render(entries())


def test_render_lists_every_entry_in_order() -> None:
    rows = data_rows(render(entries()))
    assert rows == [(e.code, e.description) for e in entries()]


def test_render_has_header() -> None:
    lines = [line for line in plain(render(entries())).splitlines() if "Code" in line]
    assert len(lines) == 1
    assert "Description" in lines[0]


def test_render_empty_sequence_is_header_only() -> None:
    out = plain(render([]))
    assert "Code" in out
    assert "Description" in out
    assert data_rows(out) == []


def test_render_keeps_input_order() -> None:
    subset = [
        StatusCodeEntry(code=500, description="Internal Server Error"),
        StatusCodeEntry(code=200, description="OK"),
    ]
    assert [code for code, _ in data_rows(render(subset))] == [500, 200]


def test_render_colors_columns() -> None:
    out = render(entries()[:1])
    assert "\x1b[31m" in out  # red code
    assert "\x1b[32m" in out  # green description


def test_build_status_table_columns_follow_settings() -> None:
    settings = AppSettings(code_style="magenta", description_style="blue", title="HTTP")
    table = build_status_table(entries(), settings=settings)

    assert [c.header for c in table.columns] == ["Code", "Description"]
    assert table.columns[0].style == "magenta"
    assert table.columns[1].style == "blue"
    assert table.row_count == 63
    assert table.title == "HTTP"


def test_render_ignores_process_environment(monkeypatch) -> None:
    expected = render(entries())

    monkeypatch.setenv("HTTP_STATUS_TABLE_WIDTH", "40")
    monkeypatch.setenv("HTTP_STATUS_TABLE_CODE_STYLE", "notacolor")
    monkeypatch.setenv("HTTP_STATUS_TABLE_TITLE", "Changed")

    settings = AppSettings()
    assert (settings.width, settings.code_style, settings.title) == (80, "red", None)
    assert render(entries()) == expected
    assert (431, "Request Header Fields Too Large") in data_rows(expected)


def test_render_without_color_has_no_ansi() -> None:
    out = render(entries(), color=False)
    assert "\x1b[" not in out
    assert data_rows(out) == [(e.code, e.description) for e in entries()]
