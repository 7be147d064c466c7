"""Tests for name-based dispatch of generation hooks."""

import pytest

from xsd_explorer.codegen.core.generator import GeneratorError
from xsd_explorer.codegen.core.schema import ComplexType, Element, NodeKind, SimpleType
from xsd_explorer.codegen.dispatch import (
    HandlerRegistry,
    call_by_name,
    find_hook,
    handler_name,
    hook_name,
)


class Receiver:
    """Receiver with a handful of hooks."""

    not_callable = "just a string"

    def __init__(self):
        self.calls = []

    def gen_element(self, node):
        self.calls.append(node.name)
        return f"element {node.name}"

    def gen_simple_type(self, node):
        return GeneratorError(f"cannot render {node.name}")

    def gen_complex_type(self, node):
        raise ValueError("broken hook")

    def gen_nothing(self):
        return None


# =============================================================================
# handler_name
# =============================================================================


class TestHandlerName:
    """Tests for handler_name()."""

    def test_name_from_kind(self):
        """The hook name is the prefix plus the node kind."""
        assert handler_name(Element("order")) == "gen_element"
        assert handler_name(SimpleType("Code")) == "gen_simple_type"
        assert handler_name(ComplexType("Order")) == "gen_complex_type"

    def test_name_from_kind_alone(self):
        """hook_name works from a NodeKind without a node."""
        assert hook_name(NodeKind.ATTRIBUTE_GROUP) == "gen_attribute_group"
        assert handler_name(SimpleType("Code")) == hook_name(NodeKind.SIMPLE_TYPE)


# =============================================================================
# call_by_name
# =============================================================================


class TestCallByName:
    """Tests for call_by_name()."""

    def test_existing_hook_invoked(self):
        """A present hook is called with the arguments."""
        receiver = Receiver()
        result = call_by_name(receiver, "gen_element", Element("order"))
        assert result == "element order"
        assert receiver.calls == ["order"]

    def test_missing_hook_is_skipped(self):
        """A missing hook returns None without raising."""
        assert call_by_name(Receiver(), "gen_attribute_group", Element("x")) is None

    def test_non_callable_attribute_is_skipped(self):
        """Attributes that are not callable count as missing."""
        assert call_by_name(Receiver(), "not_callable") is None

    def test_hook_returning_none_succeeds(self):
        """A hook returning nothing is a success."""
        assert call_by_name(Receiver(), "gen_nothing") is None

    def test_returned_exception_is_raised(self):
        """An exception returned by a hook is propagated as raised."""
        with pytest.raises(GeneratorError, match="cannot render Code"):
            call_by_name(Receiver(), "gen_simple_type", SimpleType("Code"))

    def test_raised_exception_propagates(self):
        """Exceptions raised inside a hook pass through unchanged."""
        with pytest.raises(ValueError, match="broken hook"):
            call_by_name(Receiver(), "gen_complex_type", ComplexType("Order"))


# =============================================================================
# HandlerRegistry
# =============================================================================


class TestHandlerRegistry:
    """Tests for HandlerRegistry."""

    def test_register_and_dispatch(self):
        """Registered handlers are reachable through call_by_name."""
        registry = HandlerRegistry()
        registry.register("gen_element", lambda node: node.name.upper())
        assert call_by_name(registry, "gen_element", Element("order")) == "ORDER"

    def test_register_as_decorator(self):
        """register() works as a decorator and returns the function."""
        registry = HandlerRegistry()

        @registry.register("gen_simple_type")
        def render(node):
            return f"type {node.name}"

        assert render(SimpleType("A")) == "type A"
        assert "gen_simple_type" in registry
        assert call_by_name(registry, "gen_simple_type", SimpleType("B")) == "type B"

    def test_unregistered_name_skipped(self):
        """Names without a handler dispatch to nothing."""
        assert call_by_name(HandlerRegistry(), "gen_group", Element("x")) is None

    def test_unregister(self):
        """unregister() removes a handler; unknown names are ignored."""
        registry = HandlerRegistry()
        registry.register("gen_element", lambda node: "x")
        registry.unregister("gen_element")
        registry.unregister("gen_missing")
        assert "gen_element" not in registry
        assert registry.names() == []

    def test_names_sorted(self):
        """names() lists registered hooks alphabetically."""
        registry = HandlerRegistry()
        registry.register("gen_group", print)
        registry.register("gen_attribute", print)
        assert registry.names() == ["gen_attribute", "gen_group"]

    @pytest.mark.parametrize("name", ["register", "unregister", "names", "get"])
    def test_own_methods_are_not_hooks(self, name):
        """Management methods are never dispatched to as hooks."""
        registry = HandlerRegistry()
        registry.register("gen_element", lambda node: "x")
        assert call_by_name(registry, name, "gen_element") is None
        assert registry.names() == ["gen_element"]

    def test_registered_name_shadowing_method(self):
        """A handler registered under a method name is what gets called."""
        registry = HandlerRegistry()
        registry.register("names", lambda: "handler")
        assert call_by_name(registry, "names") == "handler"

    def test_get(self):
        """get() returns the handler or None."""
        registry = HandlerRegistry()
        registry.register("gen_group", print)
        assert registry.get("gen_group") is print
        assert registry.get("gen_element") is None


class TestFindHook:
    """Tests for find_hook()."""

    def test_method_found(self):
        """Methods of ordinary receivers are hooks."""
        receiver = Receiver()
        assert find_hook(receiver, "gen_element") == receiver.gen_element

    def test_missing_and_non_callable(self):
        """Absent or non-callable attributes give None."""
        assert find_hook(Receiver(), "gen_group") is None
        assert find_hook(Receiver(), "not_callable") is None
