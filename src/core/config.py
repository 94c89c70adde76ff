"""Configuración del Core.

Por qué aquí:
- Centraliza los estilos de la tabla (pydantic-settings) sin contaminar la CLI.
- El renderer lee los estilos de un único sitio; el catálogo no depende de nada.

Nota: solo hay valores cosméticos y únicamente se fijan por código. La
herramienta no lee variables de entorno ni ficheros `.env`.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la presentación.

    Por qué pydantic-settings:
    - Tipado + validación de los valores que se pasan al construirla.
    - Los defaults reproducen los colores clásicos de la herramienta.
    """

    model_config = SettingsConfigDict(extra="ignore", frozen=True)

    code_style: str = Field(
        default="red",
        min_length=1,
        description="Estilo Rich de las celdas de la columna Code.",
    )
    description_style: str = Field(
        default="green",
        min_length=1,
        description="Estilo Rich de las celdas de la columna Description.",
    )
    code_header_style: str = Field(
        default="cyan",
        min_length=1,
        description="Estilo Rich de la cabecera Code.",
    )
    description_header_style: str = Field(
        default="yellow",
        min_length=1,
        description="Estilo Rich de la cabecera Description.",
    )
    border_style: str | None = Field(
        default=None,
        description="Estilo Rich del borde (None = color por defecto del terminal).",
    )
    title: str | None = Field(
        default=None,
        description="Título opcional encima de la tabla.",
    )
    width: int = Field(
        default=80,
        ge=40,
        le=400,
        description="Ancho (columnas) del lienzo donde se renderiza la tabla.",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Solo kwargs del constructor: el entorno del proceso no cambia la tabla.
        return (init_settings,)
