"""Ingestion layer.

This package turns raw signal payloads received by the surrounding service
into typed :class:`pyvss.models.Signal` records.
"""

__all__: list[str] = []
