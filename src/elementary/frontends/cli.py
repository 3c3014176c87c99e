"""Command-line interface for elementary cellular automata."""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.automaton import ElementaryAutomaton
from ..core.catalog import RuleCatalog
from ..core.errors import AutomatonError

LIVE_CHAR = "█"
DEAD_CHAR = " "

# (rule, width, generations) for the classic demo runs
DEMO_RUNS = [
    (90, 50, 20),
    (110, 150, 40),
    (60, 100, 60),
]


@dataclass
class RunConfig:
    """Configuration for a single console run."""
    rule_number: int = 90
    width: int = 50
    generations: int = 20
    initial_generation: Optional[List[int]] = None
    live_char: str = LIVE_CHAR
    dead_char: str = DEAD_CHAR
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RunConfig":
        """Build a configuration from parsed command-line arguments.

        Raises:
            ValueError: If the --initial cells cannot be parsed
        """
        initial = parse_initial_generation(args.initial) if args.initial is not None else None
        return cls(
            rule_number=args.rule,
            width=args.width,
            generations=args.generations,
            initial_generation=initial,
            live_char=args.live_char,
            dead_char=args.dead_char,
            verbose=args.verbose,
        )


def render_generation(cells: Sequence[int], live_char: str = LIVE_CHAR, dead_char: str = DEAD_CHAR) -> str:
    """Render one generation as a line of glyphs, left to right."""
    return "".join(live_char if cell else dead_char for cell in cells)


def parse_initial_generation(text: str) -> List[int]:
    """Parse initial cells given as '0010100' or '0,0,1,0,1'.

    Args:
        text: Cell string from the command line

    Returns:
        List of 0/1 values

    Raises:
        ValueError: If the string holds anything other than 0s, 1s and commas
    """
    text = text.strip()
    parts = [part.strip() for part in text.split(",")] if "," in text else list(text)

    if not parts or any(part not in ("0", "1") for part in parts):
        raise ValueError(f"Initial generation must be a string of 0s and 1s, got '{text}'")

    return [int(part) for part in parts]


class CLIElementaryAutomaton:
    """Console driver that steps an automaton and prints each generation."""

    def __init__(self):
        self.rule_catalog = RuleCatalog()

    def run_simulation(
        self,
        rule_number: int,
        width: int,
        generations: int,
        initial_generation: Optional[Sequence[int]] = None,
        live_char: str = LIVE_CHAR,
        dead_char: str = DEAD_CHAR,
        verbose: bool = False,
    ) -> Tuple[int, Dict]:
        """Run an automaton and print one line per generation.

        Args:
            rule_number: Wolfram rule number (0-255)
            width: Number of cells
            generations: Number of steps after the initial generation
            initial_generation: Optional starting cells
            live_char: Glyph for live cells
            dead_char: Glyph for dead cells
            verbose: Print the rule table before running

        Returns:
            Tuple of (generations_run, statistics)

        Raises:
            AutomatonError: If the rule number, width or initial cells are invalid
        """
        print(
            f"Running Elementary Cellular Automaton with Rule {rule_number}, "
            f"Width {width}, for {generations} generations."
        )
        automaton = ElementaryAutomaton(rule_number, width, initial_generation)

        if verbose:
            print(self.rule_catalog.describe(rule_number))
            print(automaton.rule.describe())

        initial_population = automaton.population

        print("Initial Generation:")
        print(automaton.render(live_char, dead_char))

        start_time = time.time()
        for cells in automaton.evolve(generations):
            print(render_generation(cells, live_char, dead_char))
        duration = time.time() - start_time

        print("--- End of Simulation ---")

        stats = {
            "rule": automaton.rule_number,
            "width": automaton.width,
            "initial_population": initial_population,
            "population": automaton.population,
            "density": automaton.density,
            "duration_seconds": duration,
            "generations_per_second": automaton.generation / duration if duration > 0 else 0,
        }
        return automaton.generation, stats

    def run_demo(self, live_char: str = LIVE_CHAR, dead_char: str = DEAD_CHAR) -> None:
        """Replay the classic runs: rules 90, 110 and 60."""
        for rule_number, width, generations in DEMO_RUNS:
            self.run_simulation(rule_number, width, generations, live_char=live_char, dead_char=dead_char)

    def list_rules(self) -> None:
        """List the notable rules in the catalog."""
        print("Notable rules:")
        for number in self.rule_catalog.list_rules():
            print(f"  {self.rule_catalog.describe(number)}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run elementary cellular automata from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rule 90 (Sierpinski triangle), 50 cells, 20 generations
  elementary-cli --rule 90 --width 50 --generations 20

  # Rule 110 from a custom seed, centered in 80 cells
  elementary-cli -r 110 -W 80 -n 40 --initial 1101

  # Plain ASCII output
  elementary-cli -r 30 --live-char '#' --dead-char '.'

  # Classic demo runs (rules 90, 110 and 60)
  elementary-cli --demo

  # List notable rules
  elementary-cli --list-rules
        """,
    )

    parser.add_argument("-r", "--rule", type=int, default=90, help="Wolfram rule number 0-255 (default: 90)")

    parser.add_argument("-W", "--width", type=int, default=50, help="Number of cells (default: 50)")

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=20,
        help="Generations to run after the initial one (default: 20)",
    )

    parser.add_argument(
        "-i",
        "--initial",
        type=str,
        help="Initial cells, e.g. '00100' or '0,0,1,0,0' (default: single live center cell)",
    )

    parser.add_argument("--live-char", type=str, default=LIVE_CHAR, help="Glyph for live cells (default: █)")

    parser.add_argument("--dead-char", type=str, default=DEAD_CHAR, help="Glyph for dead cells (default: space)")

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run the classic demo (rules 90, 110 and 60) and exit",
    )

    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="List notable rules and exit",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print the rule table, run statistics and informational log messages",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if not 0 <= args.rule <= 255:
        errors.append("Rule number must be between 0 and 255")

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if len(args.live_char) != 1:
        errors.append("Live glyph must be a single character")

    if len(args.dead_char) != 1:
        errors.append("Dead glyph must be a single character")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_results(generations_run: int, stats: dict) -> None:
    """Print run statistics.

    Args:
        generations_run: Number of generations stepped
        stats: Statistics dictionary from run_simulation
    """
    print(f"\nRule {stats['rule']} completed {generations_run} generations on {stats['width']} cells")
    print(
        "Population: {} → {} ({:.2%} live), "
        "Duration: {:.3f}s, "
        "Speed: {:.0f} gen/s".format(
            stats["initial_population"],
            stats["population"],
            stats["density"],
            stats["duration_seconds"],
            stats["generations_per_second"],
        )
    )


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr so rendered generations stay clean on stdout."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    configure_logging(args.verbose)

    cli = CLIElementaryAutomaton()

    if args.list_rules:
        cli.list_rules()
        return 0

    if not validate_args(args):
        return 1

    try:
        config = RunConfig.from_args(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    try:
        if args.demo:
            cli.run_demo(live_char=config.live_char, dead_char=config.dead_char)
            return 0

        generations_run, stats = cli.run_simulation(
            rule_number=config.rule_number,
            width=config.width,
            generations=config.generations,
            initial_generation=config.initial_generation,
            live_char=config.live_char,
            dead_char=config.dead_char,
            verbose=config.verbose,
        )

        if config.verbose:
            print_results(generations_run, stats)

        return 0

    except AutomatonError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
