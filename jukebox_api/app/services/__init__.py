"""
Service layer.

Each service encapsulates the logic for one concern over the
in‑memory data loaded at startup.  Services are plain objects built
once and shared read‑only between requests; API handlers receive them
through the ``Catalog`` dependency.
"""
