"""Core: catálogo, modelos de dominio y configuración.

No conoce Rich ni Typer.
"""
