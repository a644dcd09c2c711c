"""Static package metadata surfaced to CLI commands and configuration paths.

Values mirror ``pyproject.toml`` and are kept in sync by
``tests/test_metadata_sync.py``. The ``LAYEREDCONF_*`` identifiers decide
where lib_layered_config looks for configuration files on each platform.

Contents:
    * Module-level metadata constants.
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name as published on the package index.
name = "greek_numerals"
#: One-line summary used as CLI help title.
title = "Convert integers into ancient Greek alphabetic numerals"
#: Package version; must match pyproject.toml.
version = "1.0.0"
#: Project homepage.
homepage = "https://github.com/greek-numerals/greek_numerals"
#: Primary author.
author = "greek_numerals maintainers"
#: Contact address.
author_email = "maintainers@greek-numerals.invalid"
#: Console script name.
shell_command = "greek-numerals"

#: Vendor segment for macOS/Windows configuration paths.
LAYEREDCONF_VENDOR: str = "greek-numerals"
#: Application segment for macOS/Windows configuration paths.
LAYEREDCONF_APP: str = "Greek Numerals"
#: Slug for Linux XDG configuration paths.
LAYEREDCONF_SLUG: str = "greek-numerals"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greek_numerals:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = ["print_info"]
