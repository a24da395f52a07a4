"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Domain records live in ``models``, wire formats in
``schemas``, the in‑memory catalog and its filters in ``services``
and the HTTP routes in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
