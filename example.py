#!/usr/bin/env python3
"""
Example usage of the elementary package.
"""

from elementary import ElementaryAutomaton, RuleCatalog


def run_automaton(rule, width, generations):
    """Step an automaton and print every generation, initial one first."""
    print(f"Running Elementary Cellular Automaton with Rule {rule}, Width {width}, for {generations} generations.")
    ca = ElementaryAutomaton(rule, width)

    print("Initial Generation:")
    print(ca)

    for _ in range(generations):
        ca.next_generation()
        print(ca)

    print(f"Population: {ca.population} ({ca.density:.1%} live)")
    print("--- End of Simulation ---")


def main():
    """Demonstrate programmatic usage of the elementary package."""
    catalog = RuleCatalog()
    for rule in catalog.list_rules():
        print(catalog.describe(rule))
    print()

    # Rule 90: Sierpinski triangle
    run_automaton(90, 50, 20)
    # Rule 110: Turing complete
    run_automaton(110, 150, 40)
    # Rule 60
    run_automaton(60, 100, 60)


if __name__ == "__main__":
    main()
