"""Command-line interface for the terminal Game of Life."""

import argparse
import sys
import time
from typing import Callable, List, Optional, TextIO

from .. import __version__
from ..core.game import GameOfLife, LifeConfig

# Clear the screen and bring the cursor home
CLEAR_SCREEN = "\x1b[2J\x1b[H"


class CLIGameOfLife:
    """Runs the simulation in a terminal, redrawing every generation."""

    def __init__(
        self,
        config: LifeConfig,
        verbose: bool = False,
        out: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
        game: Optional[GameOfLife] = None,
    ):
        """Initialize CLI interface.

        Args:
            config: Simulation parameters
            verbose: Print configuration and reset reasons
            out: Output stream (stdout by default)
            sleep: Pause function called between generations
            game: Pre-built driver, mainly for tests
        """
        self.config = config
        self.verbose = verbose
        self.out = out if out is not None else sys.stdout
        self.sleep = sleep
        self.game = game if game is not None else GameOfLife(config)

    def render_frame(self, population: Optional[int] = None) -> str:
        """Build one screen: clear sequence, grid and status lines."""
        lines = [self.game.grid.render()]
        lines.extend(self.game.status_lines(population))
        return CLEAR_SCREEN + "\n".join(lines)

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Run the display loop.

        Args:
            max_ticks: Stop after this many generations; loop forever if None

        Returns:
            Number of generations displayed
        """
        if self.verbose:
            self._print_config()

        self.game.start()
        print(self.game.grid.render(), file=self.out)

        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            population = self.game.step()
            # Status reflects the generation just computed, before any reset
            print(self.render_frame(population), file=self.out)

            reason = self.game.check_reset(population)
            if reason and self.verbose:
                print(f"Reset ({reason}), starting run {self.game.runs}", file=self.out)

            self.out.flush()
            ticks += 1
            self.sleep(self.config.refresh_seconds)

        return ticks

    def _print_config(self) -> None:
        c = self.config
        print(f"Grid: {c.size}x{c.size}", file=self.out)
        print(f"Seed: {c.init_lives} lives, {c.init_neighbors} neighbors each", file=self.out)
        print(
            f"Reset after {c.generations_till_reset} generations "
            f"or {c.max_dead_generations} dead generations",
            file=self.out,
        )
        print(f"Refresh rate: {c.refresh_rate}ms", file=self.out)


def non_negative_int(value: str) -> int:
    """argparse type for integers >= 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer")
    if number < 0:
        raise argparse.ArgumentTypeError(f"{number} is not a non-negative integer")
    return number


def neighbor_count(value: str) -> int:
    """argparse type for the seed neighbour spread, in [0, 4)."""
    number = non_negative_int(value)
    if number >= 4:
        raise argparse.ArgumentTypeError(f"{number} is not in 0..4")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    defaults = LifeConfig()
    parser = argparse.ArgumentParser(
        prog="termlife",
        description="Game of life simulation program",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default 60x60 grid, redrawn every 125ms
  termlife

  # Small, fast grid with denser seeds
  termlife --size 30 --init-lives 20 --init-neighbors 3 -r 50

  # Long runs that only reset on stagnation
  termlife -g 100000 -m 25
        """,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "-s",
        "--size",
        type=int,
        default=defaults.size,
        help=f"Grid side length (default: {defaults.size})",
    )

    parser.add_argument(
        "--init-lives",
        type=non_negative_int,
        default=defaults.init_lives,
        help=f"Number of seed points per run (default: {defaults.init_lives})",
    )

    parser.add_argument(
        "--init-neighbors",
        type=neighbor_count,
        default=defaults.init_neighbors,
        help=f"Neighbours made alive around each seed point, 0-3 (default: {defaults.init_neighbors})",
    )

    parser.add_argument(
        "-g",
        "--generations-till-reset",
        type=non_negative_int,
        default=defaults.generations_till_reset,
        help=f"Reseed after this many generations (default: {defaults.generations_till_reset})",
    )

    parser.add_argument(
        "-m",
        "--max-dead-generations",
        type=non_negative_int,
        default=defaults.max_dead_generations,
        help=f"Reseed after this many empty or unchanged generations (default: {defaults.max_dead_generations})",
    )

    parser.add_argument(
        "-r",
        "--refresh-rate",
        type=non_negative_int,
        default=defaults.refresh_rate,
        help=f"Milliseconds between generations (default: {defaults.refresh_rate})",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print the configuration and the reason for each reset",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> LifeConfig:
    """Build the simulation config from parsed arguments."""
    return LifeConfig(
        size=args.size,
        init_lives=args.init_lives,
        init_neighbors=args.init_neighbors,
        generations_till_reset=args.generations_till_reset,
        max_dead_generations=args.max_dead_generations,
        refresh_rate=args.refresh_rate,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        cli = CLIGameOfLife(config_from_args(args), verbose=args.verbose)
        cli.run()
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
