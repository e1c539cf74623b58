"""Tests for template listing, loading and rendering."""

import shutil
import sys

import pytest

from tests.conftest import write_template

mod = sys.modules["agent_scaffold"]


class TestListTemplates:
    def test_lexical_order_without_blank(self, templates):
        assert mod.list_templates("command") == ["plan", "review"]

    def test_ignores_non_markdown(self, templates):
        (templates / "commands" / "notes.txt").write_text("not a template")
        assert mod.list_templates("command") == ["plan", "review"]

    def test_ignores_reserved_prefix(self, templates):
        write_template(templates, "rule", "_draft", "# Draft\n")
        assert mod.list_templates("rule") == ["base"]

    def test_missing_directory_is_empty(self, templates):
        shutil.rmtree(templates / "skills")
        assert mod.list_templates("skill") == []

    def test_unknown_category(self, templates):
        with pytest.raises(mod.TemplateNotFound):
            mod.list_templates("widget")


class TestLoadTemplate:
    def test_loads_content(self, templates):
        assert mod.load_template("rule", "base") == "# Base\nBe careful.\n"

    def test_missing(self, templates):
        with pytest.raises(mod.TemplateNotFound, match="nope"):
            mod.load_template("rule", "nope")

    def test_blank_from_file(self, templates):
        assert "{{NAME_TITLE}}" in mod.load_blank_template("command")

    def test_blank_falls_back_to_default(self, templates):
        assert mod.load_blank_template("agent") == mod.DEFAULT_TEMPLATES["agent"]

    def test_every_category_has_default(self):
        assert set(mod.DEFAULT_TEMPLATES) == set(mod.CATEGORIES)


class TestRenderTemplate:
    def test_name_variants(self):
        text = "a={{NAME}} b={{name}} c={{NAME_TITLE}}"
        out = mod.render_template(text, mod.template_variables("fooBar"))
        assert out == "a=fooBar b=foobar c=FooBar"

    def test_repeated_tokens(self):
        out = mod.render_template("{{NAME}}/{{NAME}}", {"NAME": "x"})
        assert out == "x/x"

    def test_unknown_tokens_left_verbatim(self):
        out = mod.render_template("{{NAME}} {{VERSION}}", mod.template_variables("deploy"))
        assert out == "deploy {{VERSION}}"

    def test_token_must_match_exactly(self):
        out = mod.render_template("{{ NAME }} {NAME}", mod.template_variables("deploy"))
        assert out == "{{ NAME }} {NAME}"

    def test_empty_name(self):
        assert mod.template_variables("")["NAME_TITLE"] == ""

    def test_substituted_values_are_not_rescanned(self):
        out = mod.render_template("{{NAME}}|{{name}}", mod.template_variables("a{{name}}"))
        assert out == "a{{name}}|a{{name}}"


class TestRulesFileContent:
    def test_mentions_display_name_and_rules_dir(self):
        profile = mod.PlatformProfile(
            platform="cursor", display_name="Cursor", install_type="full",
            root=".cursor", folders={"rule": "rules"},
        )
        text = mod.rules_file_content(profile)
        assert text.startswith("# Cursor Rules\n")
        assert ".cursor/rules/" in text
