"""Tests for the scope table and the scope collector."""

from lynxcss.model.stylesheet import AtRule, Declaration, Rule, Stylesheet
from lynxcss.variables.scope import ScopeTable, collect


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rule(selector: str, *decls: tuple[str, str]) -> Rule:
    return Rule(selector=selector, declarations=[Declaration(p, v) for p, v in decls])


# ---------------------------------------------------------------------------
# collect
# ---------------------------------------------------------------------------


class TestCollect:
    def test_groups_by_selector(self):
        sheet = Stylesheet(nodes=[
            _rule(":root", ("--a", "1px")),
            _rule(".card", ("--a", "2px"), ("--b", "red")),
        ])
        table = collect(sheet)
        assert table.to_dict() == {
            ":root": {"--a": "1px"},
            ".card": {"--a": "2px", "--b": "red"},
        }

    def test_style_declarations_skipped(self):
        sheet = Stylesheet(nodes=[_rule(".a", ("color", "var(--x)"), ("--x", "blue"))])
        assert collect(sheet).to_dict() == {".a": {"--x": "blue"}}

    def test_last_declaration_wins(self):
        sheet = Stylesheet(nodes=[
            _rule(":root", ("--a", "1px"), ("--a", "2px")),
            _rule(":root", ("--a", "3px")),
        ])
        assert collect(sheet).get(":root", "--a") == "3px"

    def test_nested_rule_shares_scope_with_same_selector(self):
        sheet = Stylesheet(nodes=[
            _rule(":root", ("--theme", "blue")),
            AtRule(
                name="media",
                params="(prefers-color-scheme: dark)",
                children=[_rule(":root", ("--theme", "navy"))],
            ),
        ])
        table = collect(sheet)
        assert table.selectors() == [":root"]
        assert table.get(":root", "--theme") == "navy"

    def test_at_rule_declarations_use_at_rule_scope(self):
        sheet = Stylesheet(nodes=[
            AtRule(name="font-face", children=[Declaration("--family", "Inter")]),
        ])
        assert collect(sheet).to_dict() == {"@font-face": {"--family": "Inter"}}

    def test_values_not_validated(self):
        sheet = Stylesheet(nodes=[_rule(".a", ("--weird", "}{ not css"))])
        assert collect(sheet).get(".a", "--weird") == "}{ not css"

    def test_empty_stylesheet(self):
        assert len(collect(Stylesheet())) == 0

    def test_fresh_table_each_call(self):
        sheet = Stylesheet(nodes=[_rule(":root", ("--a", "1px"))])
        first = collect(sheet)
        first.set(":root", "--a", "changed")
        assert collect(sheet).get(":root", "--a") == "1px"


# ---------------------------------------------------------------------------
# ScopeTable.lookup
# ---------------------------------------------------------------------------


class TestLookup:
    def test_own_scope_first(self):
        table = ScopeTable({".other": {"--c": "green"}, ".card": {"--c": "red"}})
        assert table.lookup(".card", "--c") == "red"

    def test_falls_back_to_first_other_scope(self):
        table = ScopeTable({".a": {"--c": "1"}, ".b": {"--c": "2"}, ".x": {}})
        assert table.lookup(".x", "--c") == "1"

    def test_unknown_selector_searches_all_scopes(self):
        table = ScopeTable({":root": {"--c": "blue"}})
        assert table.lookup(".nowhere", "--c") == "blue"

    def test_missing(self):
        table = ScopeTable({":root": {"--c": "blue"}})
        assert table.lookup(":root", "--d") is None

    def test_defines(self):
        table = ScopeTable({":root": {"--c": "blue"}})
        assert table.defines("--c")
        assert not table.defines("--d")

    def test_constructor_copies_input(self):
        source = {":root": {"--c": "blue"}}
        table = ScopeTable(source)
        table.set(":root", "--c", "red")
        assert source[":root"]["--c"] == "blue"
