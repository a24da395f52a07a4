"""
Top‑level package for the Jukebox API.

This file makes ``jukebox_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``jukebox_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
