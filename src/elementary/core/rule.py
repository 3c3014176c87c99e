"""Rule lookup tables for elementary cellular automata."""

from numbers import Integral
from typing import List
import numpy as np

from .errors import InvalidRuleNumber

# Neighborhoods in conventional Wolfram display order
DISPLAY_ORDER = (7, 6, 5, 4, 3, 2, 1, 0)


def validate_rule_number(rule_number: object) -> int:
    """Check that a rule number is an integer in [0, 255].

    Args:
        rule_number: Candidate rule number

    Returns:
        The rule number as a plain int

    Raises:
        InvalidRuleNumber: If the value is not an integer in range
    """
    if isinstance(rule_number, bool) or not isinstance(rule_number, Integral):
        raise InvalidRuleNumber(rule_number)
    if not 0 <= rule_number <= 255:
        raise InvalidRuleNumber(rule_number)
    return int(rule_number)


class RuleTable:
    """The 8-entry lookup table of a Wolfram rule.

    Entry ``v`` holds the next state of a cell whose neighborhood
    (left, middle, right) reads as the 3-bit number ``v``, left being the
    most significant bit. That entry is bit ``v`` of the rule number.
    """

    def __init__(self, rule_number: int) -> None:
        """Decode a rule number.

        Args:
            rule_number: Wolfram code in [0, 255]

        Raises:
            InvalidRuleNumber: If rule_number is out of range
        """
        self._rule_number = validate_rule_number(rule_number)
        table = np.array([(self._rule_number >> v) & 1 for v in range(8)], dtype=np.int8)
        table.setflags(write=False)
        self._table = table

    @property
    def rule_number(self) -> int:
        """Wolfram code this table was decoded from."""
        return self._rule_number

    @property
    def table(self) -> np.ndarray:
        """Read-only array of the 8 outputs, indexed by neighborhood value."""
        return self._table

    def lookup(self, neighborhoods: np.ndarray) -> np.ndarray:
        """Map neighborhood values (0-7) to next states.

        Args:
            neighborhoods: Integer array of neighborhood values

        Returns:
            New int8 array of the same shape with the next states
        """
        return self._table[np.asarray(neighborhoods, dtype=np.intp)]

    def output_for(self, left: int, middle: int, right: int) -> int:
        """Next state of a cell given its neighborhood."""
        return int(self._table[(left << 2) | (middle << 1) | right])

    def to_list(self) -> List[int]:
        return self._table.tolist()

    def describe(self) -> str:
        """Show each neighborhood above its output, highest pattern first.

        Returns:
            Two-line string, e.g. for rule 90::

                111 110 101 100 011 010 001 000
                 0   1   0   1   1   0   1   0
        """
        patterns = " ".join(format(v, "03b") for v in DISPLAY_ORDER)
        outputs = " ".join(f" {self._table[v]} " for v in DISPLAY_ORDER)
        return f"{patterns}\n{outputs}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleTable):
            return False
        return self._rule_number == other._rule_number

    def __hash__(self) -> int:
        return hash(self._rule_number)

    def __repr__(self) -> str:
        return f"RuleTable({self._rule_number})"

    def __str__(self) -> str:
        return f"Rule {self._rule_number}\n{self.describe()}"
