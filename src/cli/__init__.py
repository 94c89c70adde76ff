"""Capa CLI (Typer + Rich).

Por qué separada:
- Mantiene la impresión y los códigos de salida fuera del Core.
"""
