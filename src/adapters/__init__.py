"""Adaptadores de presentación.

Por qué:
- Aíslan Rich (bordes, colores) del catálogo y de la CLI.
"""
