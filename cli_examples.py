#!/usr/bin/env python3
"""
Examples of using the elementary CLI for different scenarios.
"""

import subprocess


def run_cli_command(args):
    """Run a CLI command and capture its output."""
    cmd = ["elementary-cli"] + args
    print(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=10)
        print(result.stdout)
        if result.stderr:
            print(f"Stderr: {result.stderr}")
        print("-" * 50)
        return result.returncode == 0
    except subprocess.TimeoutExpired:
        print("Command timed out")
        return False


def main():
    """Run various CLI examples."""
    print("Elementary Cellular Automata CLI Examples")
    print("=" * 50)

    examples = [
        (["--list-rules"], "List notable rules"),

        (["--rule", "90", "--width", "63", "--generations", "31"],
         "Sierpinski triangle"),

        (["-r", "30", "-W", "79", "-n", "40", "--verbose"],
         "Rule 30 with its rule table and statistics"),

        (["-r", "184", "-W", "40", "-n", "20", "--initial", "1101100111010001", "--live-char", "o", "--dead-char", "."],
         "Traffic flow from a custom seed, centered in 40 cells"),

        (["--demo"], "Classic demo runs"),
    ]

    success_count = 0
    for args, description in examples:
        print(f"\nExample: {description}")
        print("-" * len(f"Example: {description}"))
        if run_cli_command(args):
            success_count += 1
        else:
            print("Failed")

    print(f"\nSummary: {success_count}/{len(examples)} examples completed successfully")


if __name__ == "__main__":
    main()
