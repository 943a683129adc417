"""Tests for Maybe.

Covers:
- Fixed children render on truthy data and never see the value
- Delegate children are called with the resolved value
- Falsy data, unresolved data and empty children render nothing
- Awaited data: nothing before completion, content after
- Re-rendering identical input is idempotent
"""

from __future__ import annotations

import asyncio

import pytest
from hypothesis import given

from conditional import Delegate, Fixed, Maybe
from tests.strategies import falsy_values, renderables, truthy_values


class Spy:
    """Branch function that records every value it receives."""

    def __init__(self) -> None:
        self.calls: list = []

    def __call__(self, value):
        self.calls.append(value)
        return ("rendered", value)


class TestMaybeConcrete:
    @given(data=truthy_values, children=renderables)
    def test_fixed_children_on_truthy(self, data, children):
        assert Maybe().render(data, children) is children

    @given(data=falsy_values, children=renderables)
    def test_falsy_data_renders_nothing(self, data, children):
        assert Maybe().render(data, children) is None

    def test_fixed_branch_never_receives_value(self):
        spy = Spy()
        assert Maybe().render("value", Fixed(spy)) is spy
        assert spy.calls == []

    def test_delegate_receives_value(self):
        assert Maybe().render(3, Delegate(lambda v: v * 2)) == 6

    def test_delegate_not_called_for_falsy(self):
        spy = Spy()
        assert Maybe().render("", Delegate(spy)) is None
        assert Maybe().render(None, Delegate(spy)) is None
        assert spy.calls == []

    def test_empty_children_render_nothing(self):
        maybe = Maybe()
        assert maybe.render("value") is None
        assert maybe.render("value", None) is None
        assert maybe.render("value", "") is None
        assert maybe.render("value", Fixed(None)) is None

    def test_plain_callable_is_fixed_content(self):
        fn = lambda v: "called"  # noqa: E731
        assert Maybe().render("value", fn) is fn

    def test_idempotent_rerender(self):
        maybe = Maybe()
        data = {"id": 1}
        spy = Spy()
        first = maybe.render(data, Delegate(spy))
        gen = maybe.resolver.generation
        second = maybe.render(data, Delegate(spy))
        assert first == second == ("rendered", data)
        assert maybe.resolver.generation == gen


class TestMaybeAwaited:
    @pytest.mark.asyncio
    async def test_nothing_then_content(self, updates, future_factory):
        maybe = Maybe(updates)
        fut = future_factory()

        assert maybe.render(fut, "child") is None

        fut.set_result("api call result")
        await maybe.resolver.settle()

        assert updates.count == 1
        assert maybe.render(fut, "child") == "child"

    @pytest.mark.asyncio
    async def test_delegate_with_awaited_value(self, later):
        maybe = Maybe()
        data = later("I am delegated")
        spy = Spy()

        assert maybe.render(data, Delegate(spy)) is None
        assert spy.calls == []

        await maybe.resolver.settle()
        assert maybe.render(data, Delegate(spy)) == ("rendered", "I am delegated")
        assert spy.calls == ["I am delegated"]

    @pytest.mark.asyncio
    async def test_awaited_falsy_renders_nothing(self, future_factory):
        maybe = Maybe()
        fut = future_factory()
        maybe.render(fut, "child")
        fut.set_result("")
        await maybe.resolver.settle()
        assert maybe.render(fut, "child") is None

    @pytest.mark.asyncio
    async def test_empty_children_with_awaited_value(self, future_factory):
        maybe = Maybe()
        fut = future_factory()
        maybe.render(fut, None)
        fut.set_result("value")
        await maybe.resolver.settle()
        assert maybe.render(fut, None) is None

    @pytest.mark.asyncio
    async def test_dispose(self, updates, future_factory):
        maybe = Maybe(updates)
        fut = future_factory()
        maybe.render(fut, "child")
        maybe.dispose()
        fut.set_result("value")
        await asyncio.sleep(0)
        assert updates.count == 0
        assert maybe.resolver.value is None
