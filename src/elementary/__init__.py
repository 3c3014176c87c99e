"""Elementary (one-dimensional, two-state) cellular automata."""

__version__ = "0.1.0"

from .core.errors import InvalidRuleNumber, InvalidWidth
from .core.rule import RuleTable
from .core.automaton import ElementaryAutomaton
from .core.catalog import RuleCatalog

__all__ = ["ElementaryAutomaton", "RuleTable", "RuleCatalog", "InvalidRuleNumber", "InvalidWidth"]
