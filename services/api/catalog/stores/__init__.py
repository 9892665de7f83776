"""Data stores for persistence and caching.

Stores handle:
- JSON files: whole-document read/write of the four catalog documents
- Cache: the in-memory snapshot served to every request, flushed after writes

No business logic in stores - that belongs in services.
"""
