"""Start lib_log_rich for the numeral CLI.

The runtime is configured from the ``[lib_log_rich]`` section and the
standard :mod:`logging` module is bridged into it, so command modules keep
using ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from greek_numerals import __init__conf__


class LogSection(BaseModel):
    """The ``[lib_log_rich]`` section.

    Records are tagged with the package name unless ``service`` says
    otherwise. Keys beyond ``service`` and ``environment`` go to
    :class:`lib_log_rich.runtime.RuntimeConfig` untouched.

    Example:
        >>> LogSection.model_validate({"console_level": "DEBUG"}).model_dump()
        {'service': 'greek_numerals', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str = __init__conf__.name
    environment: str = "prod"


def runtime_config_from(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Build the RuntimeConfig for ``config``; a missing section means all defaults."""
    raw: Any = config.get("lib_log_rich", default=None) or {}
    return lib_log_rich.runtime.RuntimeConfig(**LogSection.model_validate(raw).model_dump())


def init_logging(config: Config) -> None:
    """Bring the logging runtime up once per process.

    ``LOG_*`` variables from a ``.env`` file are honoured. A runtime that is
    already running is left alone, whatever ``config`` says.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(runtime_config_from(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LogSection", "init_logging", "runtime_config_from"]
