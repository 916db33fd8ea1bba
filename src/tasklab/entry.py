"""Console script target for the ``tasklab`` command.

Lives at package level so it may import both the composition root and the
CLI adapter without the adapter layer depending on composition.
"""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``tasklab`` with production services and return the exit code."""
    return cli_main(argv, services_factory=build_production)


__all__ = ["main"]
