"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta (rango del código, descripción no vacía) en el
  momento de construir el catálogo, no al renderizar.
- Los modelos congelados hacen que el catálogo sea inmutable de verdad.

Nota:
- Estos modelos describen *qué* es un código de estado, no *cómo* se muestra.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class StatusCodeEntry(BaseModel):
    """Una fila del catálogo: código HTTP y su descripción."""

    model_config = ConfigDict(frozen=True)

    code: int = Field(
        ...,
        ge=100,
        le=599,
        description="Código de estado HTTP de tres dígitos.",
    )
    description: str = Field(
        ...,
        min_length=1,
        description="Resumen legible del significado del código.",
    )
