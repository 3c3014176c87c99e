"""Exceptions raised while constructing an elementary automaton."""


class AutomatonError(ValueError):
    """Base class for invalid automaton parameters."""


class InvalidRuleNumber(AutomatonError):
    """Rule number is not an integer in [0, 255]."""

    def __init__(self, rule_number: object) -> None:
        self.rule_number = rule_number
        super().__init__(f"Rule number must be between 0 and 255, got {rule_number!r}")


class InvalidWidth(AutomatonError):
    """Width is not a positive integer."""

    def __init__(self, width: object) -> None:
        self.width = width
        super().__init__(f"Width must be a positive integer, got {width!r}")


class InvalidGeneration(AutomatonError):
    """Initial generation is not a flat sequence of 0/1 values."""
