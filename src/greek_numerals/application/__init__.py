"""Ports between the numeral CLI and its configuration and logging adapters."""

from __future__ import annotations

from .ports import DisplayConfig, GetConfig, InitLogging, LoadNumeralSettings

__all__ = ["DisplayConfig", "GetConfig", "InitLogging", "LoadNumeralSettings"]
