"""Tests for the NotableRule and RuleCatalog classes."""

import pytest

from elementary.core.catalog import NotableRule, RuleCatalog
from elementary.core.errors import InvalidRuleNumber


class TestNotableRule:
    """Test cases for the NotableRule class."""

    def test_initialization(self):
        rule = NotableRule(30, "Rule 30", "Chaotic")

        assert rule.number == 30
        assert rule.name == "Rule 30"
        assert rule.description == "Chaotic"
        assert rule.table.rule_number == 30

    def test_invalid_number(self):
        with pytest.raises(InvalidRuleNumber):
            NotableRule(300, "Too big")


class TestRuleCatalog:
    """Test cases for the RuleCatalog class."""

    def test_builtin_rules(self):
        """The catalog ships the classic rules."""
        catalog = RuleCatalog()

        assert catalog.list_rules() == [30, 60, 90, 110, 184]
        assert len(catalog) == 5
        assert 110 in catalog
        assert 45 not in catalog

    def test_get_rule(self):
        catalog = RuleCatalog()

        rule = catalog.get_rule(90)
        assert rule is not None
        assert "Sierpinski" in rule.description
        assert catalog.get_rule(45) is None

    def test_add_rule(self):
        """Added rules appear in sorted order and can replace builtins."""
        catalog = RuleCatalog()
        catalog.add_rule(NotableRule(45, "Rule 45"))
        catalog.add_rule(NotableRule(90, "Sierpinski", "Replaced"))

        assert catalog.list_rules() == [30, 45, 60, 90, 110, 184]
        assert catalog.get_rule(90).description == "Replaced"

    def test_describe(self):
        catalog = RuleCatalog()
        catalog.add_rule(NotableRule(45, "Rule 45"))

        assert catalog.describe(184).startswith("Rule 184: Traffic flow")
        assert catalog.describe(45) == "Rule 45"
        assert catalog.describe(7) == "Rule 7"

    def test_describe_invalid_number(self):
        with pytest.raises(InvalidRuleNumber):
            RuleCatalog().describe(256)
