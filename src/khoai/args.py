"""optional_args() — flexible-arity signatures by matching argument types.

Given fewer arguments than declared parameters, decide which parameters were
actually passed by matching each argument's content type against a rule per
parameter:

- a content-type string ("number", "string", "list", ...)
- a list/tuple/set of content-type strings
- a predicate callable taking the argument
- True, accepting anything (also the rule for parameters without one)

Matching is all or nothing: as soon as one argument fits no remaining
parameter, the whole call falls back to a positional zip.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, Union

from khoai.coercion import content_type

Rule = Union[bool, str, Sequence[str], Callable[[Any], Any]]


def _accepts(rule: Rule, arg: Any, arg_type: str) -> bool:
    if rule is True:
        return True
    if isinstance(rule, str):
        return rule == arg_type
    if isinstance(rule, (list, tuple, set, frozenset)):
        return arg_type in rule
    if callable(rule):
        return bool(rule(arg))
    return False


def optional_args(
    args: Sequence[Any],
    order: Sequence[str],
    rules: dict[str, Rule] | None = None,
) -> dict[str, Any]:
    """Map received args onto parameter names.

    Usage:
        order = ["int", "bool", "str"]
        rules = {"int": "number", "bool": "boolean", "str": "string"}

        optional_args([1, True, "A"], order, rules)  # {"int": 1, "bool": True, "str": "A"}
        optional_args([True, "A"], order, rules)     # {"bool": True, "str": "A"}
        optional_args(["A"], order, rules)           # {"str": "A"}
        optional_args(["A", "V"], order, rules)      # {"int": "A", "bool": "V"}
    """
    if not args:
        return {}
    if len(args) >= len(order):
        return dict(zip(order, args))

    rules = rules or {}
    arg_rules = [rules.get(name, True) for name in order]
    result: dict[str, Any] = {}
    cursor = 0

    for arg in args:
        arg_type = content_type(arg)
        while cursor < len(order) and not _accepts(arg_rules[cursor], arg, arg_type):
            cursor += 1
        if cursor == len(order):
            # No parameter left for this argument: fall back to positions.
            return dict(zip(order, args))
        result[order[cursor]] = arg
        cursor += 1

    return result
