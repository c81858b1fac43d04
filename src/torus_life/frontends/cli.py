"""Command-line interface for the toroidal Game of Life."""

import argparse
import os
import sys
import time
from typing import Tuple

from ..core.grid import TorusGrid
from ..core.game import GameOfLife
from ..core.stream import load_grid, read_grid, write_grid


DEFAULT_INPUT = "sample_input.txt"


class CLIGameOfLife:
    """Command-line interface for evolving a text grid by one generation."""

    def run_step(self, text: str, verbose: bool = False, show_input: bool = False) -> Tuple[TorusGrid, dict]:
        """Parse a text grid and advance it by one generation.

        Args:
            text: Grid text ('*' live, anything else dead)
            verbose: Print progress updates
            show_input: Show the input grid before evolving

        Returns:
            Tuple of (evolved grid, statistics)
        """
        grid = TorusGrid(read_grid(text))
        game = GameOfLife(grid)

        if verbose:
            print(f"Loaded {grid.width}x{grid.height} torus")

        initial_population = game.population

        if show_input:
            print("Input grid:")
            print(grid)
            print()

        start_time = time.time()
        game.step()
        duration = time.time() - start_time

        stats = game.get_statistics()
        stats["initial_population"] = initial_population
        stats["duration_seconds"] = duration

        return grid, stats


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Evolve a Game of Life grid on a torus by one generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format:
  One line per row, '*' for a live cell and any other character for a dead
  cell. Shorter rows are padded with dead cells.

Examples:
  # Evolve the grid in sample_input.txt
  torus-life

  # Evolve another grid and show where it started
  torus-life glider.txt --show-input --verbose
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Grid file to evolve (default: {DEFAULT_INPUT})",
    )

    parser.add_argument("--show-input", action="store_true", help="Show the input grid before the result")

    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    return parser


def print_results(grid: TorusGrid, stats: dict, verbose: bool) -> None:
    """Print the evolved grid, with a summary line when verbose.

    Args:
        grid: Evolved grid
        stats: Statistics from the run
        verbose: Whether to print the summary
    """
    if verbose:
        print(
            "Generation {}: population {} → {}, duration {:.3f}s".format(
                stats["generation"],
                stats["initial_population"],
                stats["population"],
                stats["duration_seconds"],
            )
        )

    print(write_grid(grid))


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if not args.input:
        errors.append("Input path must not be empty")
    elif not os.path.isfile(args.input):
        errors.append(f"Input file '{args.input}' not found")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    if not validate_args(args):
        return 1

    cli = CLIGameOfLife()

    try:
        text = load_grid(args.input)
        if not text:
            print(f"Error: Input file '{args.input}' is empty")
            return 1

        grid, stats = cli.run_step(text, verbose=args.verbose, show_input=args.show_input)
        print_results(grid, stats, args.verbose)

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
