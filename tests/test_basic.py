"""Basic tests for elementary cellular automata package."""

import pytest

from elementary import ElementaryAutomaton, InvalidRuleNumber, InvalidWidth, RuleCatalog, RuleTable


def test_automaton_creation():
    """Test basic automaton creation."""
    ca = ElementaryAutomaton(90, 7)
    assert ca.width == 7
    assert ca.population == 1
    assert ca.current_generation().tolist() == [0, 0, 0, 1, 0, 0, 0]


def test_rule_table():
    """Test rule table decoding."""
    assert len(RuleTable(30).to_list()) == 8


def test_rule_catalog():
    """Test rule catalog has some rules."""
    catalog = RuleCatalog()
    assert 110 in catalog.list_rules()


def test_construction_errors():
    """Test invalid parameters are rejected."""
    with pytest.raises(InvalidRuleNumber):
        ElementaryAutomaton(-1, 10)
    with pytest.raises(InvalidRuleNumber):
        ElementaryAutomaton(256, 10)
    with pytest.raises(InvalidWidth):
        ElementaryAutomaton(90, 0)
    with pytest.raises(InvalidWidth):
        ElementaryAutomaton(90, -5)


def test_sierpinski_step():
    """Test rule 90 spreads a single seed to both neighbors."""
    ca = ElementaryAutomaton(90, 7, [0, 0, 0, 1, 0, 0, 0])
    assert ca.next_generation().tolist() == [0, 0, 1, 0, 1, 0, 0]
