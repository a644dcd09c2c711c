"""Console script target: the CLI wired to production services.

Lives at package level so the adapters layer never imports the composition
root.
"""

from __future__ import annotations

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main() -> int:
    """Run ``greek-numerals`` with ``sys.argv`` and return the exit code."""
    return run_cli(services_factory=build_production)


__all__ = ["main"]
