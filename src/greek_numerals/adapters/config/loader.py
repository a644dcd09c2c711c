"""Read the layered ``greek-numerals`` configuration once per process.

Layers merge as defaults -> app -> host -> user -> dotenv -> env; the
bundled ``defaultconfig.toml`` next to this module is the bottom layer, so
``[greek_numerals]`` always has a ``case`` and a ``format``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import Config, read_config, validate_profile_name

from greek_numerals import __init__conf__

_BUNDLED_DEFAULTS = Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, cached per ``(profile, start_dir)``.

    Args:
        profile: Reads ``profile/<name>/`` below every file layer. Must be a
            plain name: no separators, no ``..``.
        start_dir: Where ``.env`` discovery starts; the working directory
            when omitted.

    Raises:
        ValueError: If ``profile`` is not a safe path segment. Rejections are
            not cached.

    Example:
        >>> get_config()["greek_numerals"]["case"]
        'lower'
    """
    if profile is not None:
        validate_profile_name(profile)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_BUNDLED_DEFAULTS,
        start_dir=start_dir,
    )


__all__ = ["get_config"]
