"""Render del catálogo como tabla de terminal (Rich).

Por qué está en adapters:
- Bordes y colores son detalles de presentación (Rich), no del dominio.
- El catálogo y sus invariantes se testean sin depender de la terminal.
"""

from __future__ import annotations

import io
from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.models import StatusCodeEntry


def build_status_table(
    entries: Sequence[StatusCodeEntry],
    *,
    settings: AppSettings | None = None,
) -> Table:
    """Crea la tabla Rich Code/Description, una fila por entrada y en orden."""

    settings = settings or AppSettings()

    table = Table(title=settings.title, box=box.SQUARE, border_style=settings.border_style)
    table.add_column("Code", header_style=settings.code_header_style, style=settings.code_style, no_wrap=True)
    table.add_column("Description", header_style=settings.description_header_style, style=settings.description_style)
    for entry in entries:
        table.add_row(Text(str(entry.code)), Text(entry.description))
    return table


def render(
    entries: Sequence[StatusCodeEntry],
    *,
    settings: AppSettings | None = None,
    color: bool = True,
) -> str:
    """Renderiza la tabla a texto.

    Diseño:
    - Función pura: la misma secuencia produce exactamente el mismo texto.
    - Consola en memoria con ancho y sistema de color fijos, así el resultado
      no depende del terminal que ejecuta el proceso.
    - `color=False` no emite ningún código ANSI.
    """

    settings = settings or AppSettings()
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=settings.width,
        force_terminal=True,
        color_system="standard" if color else None,
        legacy_windows=False,
    )
    console.print(build_status_table(entries, settings=settings))
    return buffer.getvalue()
