"""Console script entry point (``app-secret-config``).

Lives outside ``adapters`` so it may import the composition root, which the
adapters layer itself must not do.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return the exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
