"""PackageIndexBuilder and DependencyResolver tests."""
from conftest import SCENARIO
from deb_control_parser import DebControlParser
from dependency_resolver import (
    DependencyResolver,
    DependencyToken,
    OrderedSet,
    PackageIndex,
    PackageIndexBuilder,
)


def query(text, name):
    paragraphs = DebControlParser.split_paragraphs(text)
    index = PackageIndexBuilder().build(paragraphs, name)
    return DependencyResolver.resolve(index)


class TestOrderedSet:

    def test_keeps_first_occurrence_order(self):
        assert list(OrderedSet(["b", "a", "b", "c", "a"])) == ["b", "a", "c"]

    def test_membership_and_len(self):
        values = OrderedSet(["x"])
        values.add("y")
        values.add("x")
        assert "y" in values
        assert "z" not in values
        assert len(values) == 2


class TestScenario:

    def test_alpha(self):
        result = query(SCENARIO, "alpha")
        assert result.summary == "short alpha"
        assert result.description == "long alpha text"
        assert result.depends == [
            DependencyToken("beta", True),
            DependencyToken("gamma", False),
        ]
        assert result.dependents == []

    def test_beta(self):
        result = query(SCENARIO, "beta")
        assert result.summary == "short beta"
        assert result.description == ""
        assert result.depends == []
        assert result.dependents == ["alpha"]

    def test_to_dict_shape(self):
        assert query(SCENARIO, "alpha").to_dict() == {
            "summary": "short alpha",
            "description": "long alpha text",
            "depends": [
                {"name": "beta", "found": True},
                {"name": "gamma", "found": False},
            ],
            "dependents": [],
        }


class TestIndexBuilder:

    def test_scans_paragraph_records(self):
        seen = []

        class RecordingParser(DebControlParser):

            @classmethod
            def extract_record(cls, paragraph):
                seen.append(paragraph)
                return super().extract_record(paragraph)

        paragraphs = DebControlParser.split_paragraphs(SCENARIO)
        index = PackageIndexBuilder(RecordingParser()).build(
            paragraphs, "beta")
        assert seen == paragraphs
        assert index.summary == "short beta"
        assert index.dependents == ["alpha"]

    def test_last_duplicate_wins(self):
        text = ("Package: dup\nDescription: first\nDepends: a\n\n"
                "Package: a\n\n"
                "Package: dup\nDescription: second\n extra\nDepends: b\n")
        result = query(text, "dup")
        assert result.summary == "second"
        assert result.description == "extra"
        assert result.depends == [DependencyToken("b", False)]

    def test_dependents_listed_per_paragraph(self):
        text = ("Package: t\n\n"
                "Package: user\nDepends: t\n\n"
                "Package: user\nDepends: other, t (>= 2)\n")
        assert query(text, "t").dependents == ["user", "user"]

    def test_dependents_include_alternatives(self):
        text = "Package: t\n\nPackage: u\nDepends: x | t\n"
        assert query(text, "t").dependents == ["u"]

    def test_target_is_not_its_own_dependent(self):
        text = "Package: t\nDepends: t\n"
        result = query(text, "t")
        assert result.dependents == []
        assert result.depends == [DependencyToken("t", True)]

    def test_substring_is_not_a_dependency(self):
        text = "Package: lib\n\nPackage: u\nDepends: libfoo\n"
        assert query(text, "lib").dependents == []

    def test_unknown_name(self):
        text = "Package: u\nDepends: ghost\n\nPackage: v\n"
        result = query(text, "ghost")
        assert result.summary == ""
        assert result.description == ""
        assert result.depends == []
        assert result.dependents == ["u"]

    def test_unknown_name_without_dependents(self):
        result = query(SCENARIO, "nothing")
        assert result.to_dict() == {
            "summary": "",
            "description": "",
            "depends": [],
            "dependents": [],
        }

    def test_collects_all_names(self):
        paragraphs = DebControlParser.split_paragraphs(SCENARIO + "\n")
        index = PackageIndexBuilder().build(paragraphs, "alpha")
        assert list(index.all_names) == ["alpha", "beta"]


class TestResolver:

    def test_deduplicates_and_resolves_divider(self):
        index = PackageIndex(dependency_tokens=["a", "|", "b", "a", "|", "c"],
                             all_names=OrderedSet(["a", "c"]))
        result = DependencyResolver.resolve(index)
        assert result.depends == [
            DependencyToken("a", True),
            DependencyToken("|", False),
            DependencyToken("b", False),
            DependencyToken("c", True),
        ]

    def test_found_matches_package_names(self):
        text = ("Package: p\nDepends: q (>= 1), r | s, t\n\n"
                "Package: q\n\nPackage: s\n\nPackage: t\n")
        names = {"p", "q", "s", "t"}
        result = query(text, "p")
        assert [token.name for token in result.depends] == [
            "q", "r", "|", "s", "t"
        ]
        for token in result.depends:
            assert token.found == (token.name in names)

    def test_idempotent(self):
        assert query(SCENARIO, "alpha") == query(SCENARIO, "alpha")
