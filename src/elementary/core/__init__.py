"""Core elementary cellular automaton logic."""

from .errors import AutomatonError, InvalidRuleNumber, InvalidWidth, InvalidGeneration
from .rule import RuleTable
from .automaton import ElementaryAutomaton
from .catalog import NotableRule, RuleCatalog

__all__ = [
    "AutomatonError",
    "InvalidRuleNumber",
    "InvalidWidth",
    "InvalidGeneration",
    "RuleTable",
    "ElementaryAutomaton",
    "NotableRule",
    "RuleCatalog",
]
