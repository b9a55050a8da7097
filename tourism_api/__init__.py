"""
Top‑level package for the Tourism API.

This file makes ``tourism_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``tourism_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
