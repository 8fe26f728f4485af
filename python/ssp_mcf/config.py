"""Configuration for the command-line driver."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DriverConfig:
    """Options applied to every input file the driver processes."""

    # None selects vertex 0 / the last vertex of each graph.
    source: int | None = None
    sink: int | None = None

    # Print the edge cost and capacity matrices before the flow report.
    show_matrices: bool = True

    # Guard against runaway augmentation on malformed residual graphs.
    max_augmentations: int | None = None


__all__ = ["DriverConfig"]
