"""Adapters: configuration, logging, in-memory doubles and the Click CLI."""

from __future__ import annotations

__all__: list[str] = []
