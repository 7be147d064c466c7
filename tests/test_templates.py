"""Tests for the Jinja2 template engine wrapper."""

import pytest

from xsd_explorer.codegen.core.templates import (
    TemplateError,
    comment_lines,
    create_template_engine,
    pascal_case,
)


class TestTemplateEngine:
    """Tests for TemplateEngine."""

    def test_builtin_templates(self):
        """Templates passed at construction render with their context."""
        engine = create_template_engine({"alias.j2": "type {{ name }} {{ type }}\n"})
        assert engine.template_exists("alias.j2")
        assert engine.render_template("alias.j2", {"name": "Code", "type": "string"}) == (
            "type Code string\n"
        )

    def test_add_template(self):
        """Templates can be registered after construction."""
        engine = create_template_engine()
        engine.add_template("late.j2", "{{ x }}")
        assert engine.render_template("late.j2", {"x": 1}) == "1"

    def test_missing_template(self):
        """Unknown templates raise TemplateError."""
        engine = create_template_engine()
        assert not engine.template_exists("absent.j2")
        with pytest.raises(TemplateError):
            engine.render_template("absent.j2", {})

    def test_undefined_variable_is_an_error(self):
        """Templates fail loudly on missing context."""
        with pytest.raises(TemplateError):
            create_template_engine().render_string("{{ missing }}", {})

    def test_no_html_escaping(self):
        """Generated source is not HTML-escaped."""
        out = create_template_engine().render_string("{{ t }}", {"t": "List<String>"})
        assert out == "List<String>"

    def test_filters(self):
        """Case and comment filters are available."""
        engine = create_template_engine()
        assert engine.render_string("{{ 'OrderLine'|snake_case }}", {}) == "order_line"
        assert engine.render_string("{{ 'order_line'|pascal_case }}", {}) == "OrderLine"
        assert engine.render_string("{{ text|comment('#') }}", {"text": "a\nb"}) == "# a\n# b"


# =============================================================================
# Template directory
# =============================================================================


class TestTemplateDirectory:
    """Tests for overriding built-in templates from a directory."""

    def test_directory_template_wins(self, tmp_path):
        """A file with the same name replaces the built-in template."""
        (tmp_path / "alias.j2").write_text("alias {{ name }}")
        engine = create_template_engine({"alias.j2": "type {{ name }}"}, tmp_path)
        assert engine.render_template("alias.j2", {"name": "Code"}) == "alias Code"

    def test_builtin_used_when_not_overridden(self, tmp_path):
        """Templates missing from the directory fall back to the built-in ones."""
        engine = create_template_engine({"enum.j2": "enum {{ name }}"}, tmp_path)
        assert engine.render_template("enum.j2", {"name": "Status"}) == "enum Status"

    def test_missing_directory_ignored(self, tmp_path):
        """A directory that does not exist is skipped."""
        engine = create_template_engine({"a.j2": "a"}, tmp_path / "absent")
        assert engine.render_template("a.j2", {}) == "a"


class TestFilterFunctions:
    """Tests for the filter functions used directly."""

    def test_pascal_case(self):
        """Words from any case style are joined capitalized."""
        assert pascal_case("xml-lang") == "XmlLang"
        assert pascal_case("orderLine") == "OrderLine"

    def test_comment_lines_blank_line(self):
        """Blank lines keep a bare marker."""
        assert comment_lines("a\n\nb") == "// a\n//\n// b"
