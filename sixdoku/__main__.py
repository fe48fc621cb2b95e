# Allows running with `python -m sixdoku`
import argparse
import sys
import logging

from .core.config import GameConfig, LOG_LEVELS


def parse_args(argv=None) -> GameConfig:
    """Command-line options layered over the SIXDOKU_* environment settings."""
    base = GameConfig.from_env()
    ap = argparse.ArgumentParser(prog="sixdoku", description="6x6 number placement puzzle")
    ap.add_argument("--givens", type=int, default=base.given_count,
                    help="number of pre-filled cells, 0..36 (default: %(default)s)")
    ap.add_argument("--seed", type=int, default=base.seed,
                    help="random seed for a reproducible puzzle")
    ap.add_argument("--log-level", default=base.log_level, choices=LOG_LEVELS,
                    type=str.upper, help="logging verbosity (default: %(default)s)")
    args = ap.parse_args(argv)
    try:
        return GameConfig(given_count=args.givens, seed=args.seed, log_level=args.log_level)
    except ValueError as e:
        ap.error(str(e))


def run(argv=None) -> int:
    config = parse_args(argv)
    # Imported late so --help works without a display
    from .ui.main_window import main
    return main(config)


if __name__ == "__main__":
    try:
        sys.exit(run())
    except Exception as e:
        logging.getLogger(__name__).exception("Unhandled error")
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)
