"""
Pydantic schema definitions for source documents and API payloads.

Schemas are separated from the in‑memory ``models`` so the wire
format can be validated once at load time and reproduced on output
without leaking Pydantic into the filter engine.
"""
