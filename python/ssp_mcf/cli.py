"""Command-line interface for ssp-mcf."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import DriverConfig
from .io import read_graph
from .logging import get_logger, level_for_flags, set_global_log_level
from .report import format_report

logger = get_logger(__name__)


def solve_file(path: Path, config: DriverConfig) -> str:
    """Read, solve and render a single input file.

    Raises whatever :func:`~ssp_mcf.io.read_graph` or the solver raises; the
    caller decides whether to skip the file.
    """
    graph = read_graph(path)
    logger.info(
        "Loaded %s: %d vertices, %d edges", path, graph.vertex_count, graph.edge_count
    )
    result = graph.solve_min_cost_max_flow(
        config.source, config.sink, max_augmentations=config.max_augmentations
    )
    logger.info(
        "Solved %s: flow %d, cost %d, %d augmentations",
        path,
        result.total_flow,
        graph.flow_cost(),
        result.augmentation_count,
    )
    return format_report(str(path), graph, result, show_matrices=config.show_matrices)


def run(paths: List[Path], config: DriverConfig) -> int:
    """Process every file in order and return the process exit status."""
    failures = 0
    for path in paths:
        try:
            report = solve_file(path, config)
        except ValueError as e:
            # Parse, range, decoding and source/sink errors of this file only.
            logger.error(f"Skipping {path}: {e}")
            failures += 1
            continue
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            failures += 1
            continue
        sys.stdout.write(report)
        sys.stdout.write("\n")
    if failures:
        logger.error(f"{failures} of {len(paths)} input files failed")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``ssp-mcf`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="ssp-mcf",
        description="Compute min-cost max flows with successive shortest paths.",
    )
    parser.add_argument("files", type=Path, nargs="+", help="Edge list input files")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--source", type=int, default=None, help="Source vertex (default: 0)"
    )
    parser.add_argument(
        "--sink", type=int, default=None, help="Sink vertex (default: last vertex)"
    )
    parser.add_argument(
        "--no-matrices",
        action="store_true",
        help="Do not print the edge cost and capacity matrices",
    )
    parser.add_argument(
        "--max-augmentations",
        type=int,
        default=None,
        help="Abort a file after this many augmenting paths",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.max_augmentations is not None and args.max_augmentations < 0:
        parser.error("--max-augmentations must be non-negative")
    if args.source is not None and args.source == args.sink:
        parser.error("--source and --sink must differ")

    set_global_log_level(level_for_flags(verbose=args.verbose, quiet=args.quiet))
    logger.debug("Debug logging enabled")

    config = DriverConfig(
        source=args.source,
        sink=args.sink,
        show_matrices=not args.no_matrices,
        max_augmentations=args.max_augmentations,
    )
    raise SystemExit(run(args.files, config))


if __name__ == "__main__":
    main()
