"""Tests for branch variants and condition entries."""

from __future__ import annotations

from conditional import (
    ConditionEntry,
    Delegate,
    Fixed,
    as_branch,
    delegate,
    otherwise,
    when,
)
from conditional.models.condition import evaluate_predicate


class TestBranch:
    def test_fixed_ignores_value(self):
        assert Fixed("content").render("value") == "content"

    def test_fixed_truthiness_follows_content(self):
        assert not Fixed(None)
        assert not Fixed("")
        assert Fixed("x")

    def test_delegate_receives_value(self):
        assert Delegate(lambda v: v * 2).render(21) == 42

    def test_as_branch_passes_branches_through(self):
        fixed = Fixed("a")
        dlg = Delegate(str)
        assert as_branch(fixed) is fixed
        assert as_branch(dlg) is dlg

    def test_as_branch_never_sniffs_callables(self):
        fn = lambda v: v  # noqa: E731
        branch = as_branch(fn)
        assert isinstance(branch, Fixed)
        assert branch.render("value") is fn

    def test_delegate_decorator(self):
        @delegate
        def greeting(name):
            return f"Hello {name}"

        assert isinstance(greeting, Delegate)
        assert greeting.render("Ada") == "Hello Ada"


class TestConditionEntry:
    def test_fixed_predicate(self):
        assert evaluate_predicate(ConditionEntry(True, "a").predicate, None)
        assert not evaluate_predicate(ConditionEntry(False, "a").predicate, None)
        assert not evaluate_predicate(0, {"x": 1})

    def test_callable_predicate_gets_match(self):
        seen = []
        entry = ConditionEntry(lambda m: seen.append(m) or True, "a")
        assert evaluate_predicate(entry.predicate, {"role": "admin"})
        assert seen == [{"role": "admin"}]

    def test_predicate_result_tested_for_truthiness(self):
        assert evaluate_predicate(lambda m: m["role"], {"role": "admin"})
        assert not evaluate_predicate(lambda m: m["role"], {"role": ""})

    def test_when_and_otherwise(self):
        assert when(False, "x") == ConditionEntry(False, "x")
        assert otherwise("fallback") == ConditionEntry(True, "fallback")
