"""Tests for namespace prefix helpers."""

import pytest

from xsd_explorer.codegen.core.qname import get_ns_prefix, trim_ns_prefix


class TestQualifiedNames:
    """Tests for get_ns_prefix() and trim_ns_prefix()."""

    def test_prefixed_name(self):
        """A single colon splits prefix and local part."""
        assert get_ns_prefix("ns:Foo") == "ns"
        assert trim_ns_prefix("ns:Foo") == "Foo"

    def test_unprefixed_name(self):
        """No colon means no prefix."""
        assert get_ns_prefix("Foo") == ""
        assert trim_ns_prefix("Foo") == "Foo"

    def test_two_colons_treated_as_unprefixed(self):
        """Only exactly one colon counts as a prefix separator."""
        assert get_ns_prefix("a:b:c") == ""
        assert trim_ns_prefix("a:b:c") == "a:b:c"

    @pytest.mark.parametrize("name", ["", ":", ":Foo", "ns:"])
    def test_edge_cases_are_total(self, name):
        """Degenerate inputs never raise."""
        prefix = get_ns_prefix(name)
        local = trim_ns_prefix(name)
        assert isinstance(prefix, str)
        assert isinstance(local, str)

    def test_empty_parts(self):
        """Empty prefix or local part are returned as-is."""
        assert get_ns_prefix(":Foo") == ""
        assert trim_ns_prefix(":Foo") == "Foo"
        assert get_ns_prefix("ns:") == "ns"
        assert trim_ns_prefix("ns:") == ""
