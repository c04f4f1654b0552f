"""Schemer Language Server package.

This package provides:
- A pygls-based Language Server for the Schemer expression language.
- Static buffer analysis (reader diagnostics, primitive signatures) that never evaluates code.
"""

__all__ = [
    "server",
    "analysis",
]
