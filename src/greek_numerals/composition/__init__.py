"""Wire adapters into the services the numeral CLI runs on.

The CLI receives a zero-argument factory through Click's ``obj`` and calls
it once per invocation; :func:`build_production` and :func:`build_testing`
are the two factories.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_numeral_settings
from ..adapters.logging.setup import init_logging
from ..application.ports import DisplayConfig, GetConfig, InitLogging, LoadNumeralSettings


@dataclass(frozen=True, slots=True)
class AppServices:
    """The adapters a CLI invocation may call.

    Tests swap single members with :func:`dataclasses.replace`.
    """

    get_config: GetConfig
    load_numeral_settings: LoadNumeralSettings
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Layered files and environment, real logging, Rich display."""
    return AppServices(
        get_config=get_config,
        load_numeral_settings=load_numeral_settings,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Fresh-install config, no logging runtime, JSON display.

    Settings parsing stays the production parser.
    """
    from ..adapters.memory import display_config_in_memory, get_config_in_memory, init_logging_in_memory

    return replace(
        build_production(),
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = ["AppServices", "build_production", "build_testing", "get_config"]
