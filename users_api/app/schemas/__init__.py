"""
Pydantic schema definitions for API payloads.

Schemas are separated from the in-memory store to decouple the API
representation from storage.
"""
