"""Well-known elementary rules and their behavior."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .rule import RuleTable, validate_rule_number


@dataclass(frozen=True)
class NotableRule:
    """A rule worth trying, with a short note on what it produces."""

    number: int
    name: str
    description: str = ""

    def __post_init__(self) -> None:
        validate_rule_number(self.number)

    @property
    def table(self) -> RuleTable:
        return RuleTable(self.number)


class RuleCatalog:
    """Collection of notable rules, keyed by rule number."""

    def __init__(self) -> None:
        self._rules: Dict[int, NotableRule] = {}
        self._load_builtin_rules()

    def _load_builtin_rules(self) -> None:
        self.add_rule(NotableRule(30, "Rule 30", "Chaotic, aperiodic patterns from a single seed"))
        self.add_rule(NotableRule(60, "Rule 60", "Additive rule; a skewed Sierpinski triangle"))
        self.add_rule(NotableRule(90, "Rule 90", "Sierpinski triangle fractal"))
        self.add_rule(NotableRule(110, "Rule 110", "Complex localized structures; Turing complete"))
        self.add_rule(NotableRule(184, "Rule 184", "Traffic flow: 1s are cars, 0s are empty road"))

    def add_rule(self, rule: NotableRule) -> None:
        """Add a rule, replacing any entry with the same number."""
        self._rules[rule.number] = rule

    def get_rule(self, number: int) -> Optional[NotableRule]:
        return self._rules.get(number)

    def list_rules(self) -> List[int]:
        """Rule numbers in ascending order."""
        return sorted(self._rules)

    def describe(self, number: int) -> str:
        """One-line summary of a rule, catalogued or not.

        Args:
            number: Rule number

        Returns:
            Name and description for catalogued rules, otherwise just the name
        """
        rule = self.get_rule(number)
        if rule is None:
            return f"Rule {validate_rule_number(number)}"
        if rule.description:
            return f"{rule.name}: {rule.description}"
        return rule.name

    def __contains__(self, number: object) -> bool:
        return number in self._rules

    def __len__(self) -> int:
        return len(self._rules)
