"""Command line entry point for generating and checking block levels."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .generation import GenerationConfig, generate_blocks, generate_level, load_generation_config, remove_locked
from .gameplay import Level

LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a valid integer") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError("Side length must be positive")
    return number


def create_parser() -> argparse.ArgumentParser:
    # //1.- Global options first, then one subparser per command.
    parser = argparse.ArgumentParser(description="Generate and inspect sliding block levels")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging verbosity",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Generate a random level as JSON")
    generate.add_argument("--side-length", type=_positive_int, default=None, help="Cube side length")
    generate.add_argument("--seed", type=int, default=None, help="Random seed")
    generate.add_argument("--output", default="-", help="Output path (default: stdout)")
    generate.add_argument("--no-prune", action="store_true", help="Keep locked blocks in the output")

    prune = commands.add_parser("prune", help="Remove locked blocks from a level file")
    prune.add_argument("path", help="Level JSON file")
    prune.add_argument("--output", default=None, help="Write the pruned level to this path")
    return parser


def _resolve_config(args: argparse.Namespace) -> GenerationConfig:
    # //2.- Command line values win over BLOCKAWAY_* environment variables.
    base = load_generation_config()
    return GenerationConfig(
        side_length=args.side_length if args.side_length is not None else base.side_length,
        seed=args.seed if args.seed is not None else base.seed,
    )


def _run_generate(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    rng = config.create_random_source()
    if args.no_prune:
        blocks = generate_blocks(config.side_length, rng)
    else:
        blocks = generate_level(config.side_length, rng)
    level = Level(blocks=blocks)
    if args.output == "-":
        sys.stdout.write(level.to_json() + "\n")
    else:
        level.save(args.output)
    return 0


def _run_prune(args: argparse.Namespace) -> int:
    level = Level.load(args.path)
    kept = remove_locked(level.blocks)
    removed = [block for block in level.blocks if block not in kept]
    for block in removed:
        LOGGER.info("Locked: %s", block.to_dict())
    LOGGER.info("%d of %d blocks are locked", len(removed), len(level.blocks))
    if args.output:
        Level(blocks=kept).save(args.output)
    return 0


def run(argv: Sequence[str] | None = None) -> int:
    # //3.- Parse arguments, configure logging, and dispatch to the subcommand.
    parser = create_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="[%(asctime)s] %(levelname)s %(message)s")
    if args.command == "generate":
        return _run_generate(args)
    return _run_prune(args)


if __name__ == "__main__":  # pragma: no cover - exercised by manual runs
    sys.exit(run())
