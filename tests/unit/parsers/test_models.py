from collections.abc import Mapping

import pytest

from niml.parsers.models import ParsedDocument


@pytest.fixture
def document() -> ParsedDocument:
    return ParsedDocument({"name": "demo", "db": {"host": "localhost"}})


class TestParsedDocument:
    def test_is_a_mapping(self, document: ParsedDocument) -> None:
        assert isinstance(document, Mapping)
        assert set(document) == {"name", "db"}
        assert document.get("missing") is None

    def test_sections_are_read_only(self, document: ParsedDocument) -> None:
        with pytest.raises(TypeError):
            document["db"]["host"] = "changed"  # type: ignore[index]

    def test_entries_are_read_only(self, document: ParsedDocument) -> None:
        with pytest.raises(TypeError):
            document.entries["name"] = "changed"  # type: ignore[index]

    def test_input_dict_is_copied(self) -> None:
        """Mutating the source dict does not change the document."""
        source = {"db": {"host": "a"}}
        document = ParsedDocument(source)

        source["db"]["host"] = "b"
        source["extra"] = "x"  # type: ignore[assignment]

        assert document.to_dict() == {"db": {"host": "a"}}

    def test_compares_by_value(self, document: ParsedDocument) -> None:
        other = ParsedDocument({"db": {"host": "localhost"}, "name": "demo"})

        assert document == other
        assert document == {"name": "demo", "db": {"host": "localhost"}}
        assert document != ParsedDocument({"name": "demo"})

    def test_section_lookup(self, document: ParsedDocument) -> None:
        assert document.section("db") == {"host": "localhost"}
        assert document.section("name") is None
        assert document.section("missing") is None

    def test_scalars_and_sections_split(self, document: ParsedDocument) -> None:
        assert document.scalars() == {"name": "demo"}
        assert list(document.sections()) == ["db"]

    def test_to_dict_returns_mutable_copy(self, document: ParsedDocument) -> None:
        plain = document.to_dict()
        plain["db"]["host"] = "changed"  # type: ignore[index]

        assert document["db"]["host"] == "localhost"  # type: ignore[index]
