"""Tests for optional_args argument matching."""

from khoai import optional_args

ORDER = ["int", "bool", "str"]
RULES = {"int": "number", "bool": "boolean", "str": "string"}


class TestOptionalArgs:
    def test_all_arguments(self):
        assert optional_args([1, True, "A"], ORDER, RULES) == {"int": 1, "bool": True, "str": "A"}

    def test_skips_leading_parameters(self):
        assert optional_args([True, "A"], ORDER, RULES) == {"bool": True, "str": "A"}
        assert optional_args([True], ORDER, RULES) == {"bool": True}
        assert optional_args(["A"], ORDER, RULES) == {"str": "A"}

    def test_empty(self):
        assert optional_args([], ORDER, RULES) == {}

    def test_too_many_arguments_zip_by_position(self):
        assert optional_args(["x", "y", "z", "w"], ORDER, RULES) == {"int": "x", "bool": "y", "str": "z"}

    def test_unmatched_falls_back_to_positions(self):
        """One unmatched argument abandons matching for the whole call."""
        assert optional_args(["A", "V"], ORDER, RULES) == {"int": "A", "bool": "V"}
        assert optional_args([1, []], ORDER, RULES) == {"int": 1, "bool": []}
        assert optional_args([True, []], ORDER, RULES) == {"int": True, "bool": []}
        assert optional_args(["A", []], ORDER, RULES) == {"int": "A", "bool": []}
        assert optional_args([[], []], ORDER, RULES) == {"int": [], "bool": []}

    def test_cursor_moves_past_matched_parameter(self):
        order = ["int", "bool", "str", "str2"]
        rules = {"int": "number", "bool": "boolean", "str": "string", "str2": "string"}
        assert optional_args(["A", "V"], order, rules) == {"str": "A", "str2": "V"}

    def test_missing_rule_accepts_anything(self):
        assert optional_args([[1]], ["items", "name"], {"name": "string"}) == {"items": [1]}

    def test_list_of_types(self):
        rules = {"target": ["list", "dict"], "name": "string"}
        assert optional_args(["x"], ["target", "name", "flag"], rules) == {"name": "x"}
        assert optional_args([{}], ["target", "name", "flag"], rules) == {"target": {}}

    def test_predicate(self):
        rules = {"small": lambda value: value < 10, "big": True}
        assert optional_args([50], ["small", "big", "rest"], rules) == {"big": 50}

    def test_falsy_arguments_are_matched(self):
        assert optional_args([0, False], ORDER, RULES) == {"int": 0, "bool": False}

    def test_rules_not_mutated(self):
        rules = {"int": "number"}
        optional_args([1], ORDER, rules)
        assert rules == {"int": "number"}
