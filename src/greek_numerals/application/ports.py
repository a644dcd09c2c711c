"""Call signatures the CLI depends on, expressed as callable Protocols.

The CLI never imports an adapter directly; it calls whatever
:class:`~greek_numerals.composition.AppServices` holds. Plain module-level
functions satisfy these Protocols structurally, so production adapters and
in-memory doubles are interchangeable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import NumeralSettings


class GetConfig(Protocol):
    """Return the merged configuration, optionally for a named profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class LoadNumeralSettings(Protocol):
    """Turn the ``[greek_numerals]`` section into validated defaults for ``convert``."""

    def __call__(self, config: Config) -> NumeralSettings: ...


class DisplayConfig(Protocol):
    """Print a configuration, whole or one section of it."""

    def __call__(
        self,
        config: Config,
        *,
        output_format: OutputFormat = ...,
        section: str | None = ...,
        profile: str | None = ...,
    ) -> None: ...


class InitLogging(Protocol):
    """Start the logging runtime from the ``[lib_log_rich]`` section."""

    def __call__(self, config: Config) -> None: ...


__all__ = ["DisplayConfig", "GetConfig", "InitLogging", "LoadNumeralSettings"]
