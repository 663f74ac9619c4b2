"""
Tests for the type registry.
"""

import pytest

from recorder.core.actions import StandardAction
from recorder.core.errors import UnregisteredActionTypeError
from recorder.core.registry import TypeRegistry
from recorder.tests.helpers import Add


def test_untyped_action_decodes_to_itself():
    """Untyped actions need no decoder."""
    registry = TypeRegistry()
    action = StandardAction("INCREMENT")

    assert registry.decode(action) is action


def test_decode_with_convertible_class():
    """A StandardActionConvertible subclass can be registered directly."""
    registry = TypeRegistry({"Add": Add})

    decoded = registry.decode(StandardAction("Add", {"amount": 5}, is_typed_action=True))

    assert decoded == Add(5)


def test_decode_with_callable():
    """Any callable taking a StandardAction is a decoder."""
    registry = TypeRegistry()
    registry.register("Double", lambda action: ("double", action.payload["n"]))

    assert registry.decode(StandardAction("Double", {"n": 2}, True)) == ("double", 2)


def test_unregistered_typed_action_is_fatal():
    """A typed action without decoder raises instead of being dropped."""
    registry = TypeRegistry({"Add": Add})

    with pytest.raises(UnregisteredActionTypeError):
        registry.decode(StandardAction("Missing", None, is_typed_action=True))


def test_later_type_map_wins():
    """On a repeated tag the later map overrides the earlier one."""
    first = {"T": lambda action: "first", "A": lambda action: "a"}
    second = {"T": lambda action: "second"}

    registry = TypeRegistry(first, second)
    typed = StandardAction("T", None, True)

    assert registry.decode(typed) == "second"
    assert registry.decode(StandardAction("A", None, True)) == "a"
    assert registry.tags() == ["A", "T"]
    assert len(registry) == 2


def test_merge_registry():
    """Merging a registry copies its decoders, other wins."""
    base = TypeRegistry({"T": lambda action: "base"})
    other = TypeRegistry({"T": lambda action: "other", "Add": Add})

    base.merge(other)

    assert "Add" in base
    assert base.decode(StandardAction("T", None, True)) == "other"


def test_register_rejects_non_callable():
    registry = TypeRegistry()

    with pytest.raises(TypeError):
        registry.register("T", 42)
