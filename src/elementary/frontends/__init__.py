"""Frontend interfaces for elementary cellular automata."""

from .cli import CLIElementaryAutomaton

__all__ = ["CLIElementaryAutomaton"]
