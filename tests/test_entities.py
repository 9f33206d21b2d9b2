import unittest
from dataclasses import FrozenInstanceError
from wordcase import cases, lookups
from wordcase.entities import CaseConvention, ConventionRule, WordStyle

class TestConventionData(unittest.TestCase):
    def test_every_convention_has_a_record(self):
        data = lookups.ConventionData()
        self.assertEqual(set(data.names), {c.value for c in CaseConvention})

    def test_separators(self):
        data = lookups.ConventionData()
        self.assertEqual(data.name_to_separator['kebab'], '-')
        self.assertEqual(data.name_to_separator['dot'], '.')
        self.assertEqual(data.name_to_separator['camel'], '')

class TestConventionRule(unittest.TestCase):
    def test_missing_attributes_from_table(self):
        rule = ConventionRule(CaseConvention.CAMEL)
        self.assertEqual(rule.separator, '')
        self.assertEqual(rule.first, WordStyle.LOWER)
        self.assertEqual(rule.rest, WordStyle.CAPITALIZE)

    def test_accepts_value(self):
        rule = ConventionRule('dot')
        self.assertEqual(rule.convention, CaseConvention.DOT)
        self.assertEqual(rule.separator, '.')

    def test_explicit_attributes_win(self):
        rule = ConventionRule('kebab', separator='--', rest='capitalize')
        self.assertEqual(rule.separator, '--')
        self.assertEqual(rule.first, WordStyle.LOWER)
        self.assertEqual(rule.rest, WordStyle.CAPITALIZE)

    def test_unknown_convention(self):
        with self.assertRaises(ValueError):
            ConventionRule('screaming')

    def test_unknown_style(self):
        with self.assertRaises(ValueError):
            ConventionRule('kebab', first='shout')

    def test_rule_is_immutable(self):
        rule = ConventionRule('dot')
        with self.assertRaises(FrozenInstanceError):
            rule.separator = '/'

class TestRuleFor(unittest.TestCase):
    def test_cached_rules_cannot_be_changed(self):
        rule = cases.rule_for('dot')
        with self.assertRaises(FrozenInstanceError):
            rule.separator = '/'
        self.assertEqual(cases.dot_case('hello world'), 'hello.world')

    def test_value_and_enum_give_equal_rules(self):
        self.assertEqual(cases.rule_for('dot'), cases.rule_for(CaseConvention.DOT))
