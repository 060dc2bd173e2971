from __future__ import annotations

from checkbox_sort.buffer import Buffer
from checkbox_sort.config import (
    FrontmatterMetadata,
    StaticMetadata,
    coerce_override,
    extract_frontmatter,
)


def make_metadata(*lines: str) -> FrontmatterMetadata:
    return FrontmatterMetadata(Buffer.from_text("\n".join(lines)))


def test_reads_boolean_override() -> None:
    metadata = make_metadata("---", "title: Chores", "checkbox-sort: false", "---", "- [ ] a")

    assert metadata.get_document_override() is False


def test_missing_key_is_absent() -> None:
    metadata = make_metadata("---", "title: Chores", "---", "- [ ] a")

    assert metadata.get_document_override() is None


def test_no_frontmatter_is_absent() -> None:
    metadata = make_metadata("- [ ] a", "---", "checkbox-sort: false", "---")

    assert metadata.get_document_override() is None


def test_unterminated_frontmatter_is_absent() -> None:
    metadata = make_metadata("---", "checkbox-sort: false", "- [ ] a")

    assert metadata.get_document_override() is None


def test_string_value_is_treated_as_absent() -> None:
    metadata = make_metadata("---", 'checkbox-sort: "false"', "---")

    assert metadata.get_document_override() is None


def test_malformed_yaml_is_treated_as_absent() -> None:
    metadata = make_metadata("---", "checkbox-sort: [unclosed", "---")

    assert metadata.get_document_override() is None


def test_extract_frontmatter_requires_mapping() -> None:
    assert extract_frontmatter(["---", "- just", "- a list", "---"]) is None
    assert extract_frontmatter(["---", "a: 1", "---"]) == {"a": 1}
    assert extract_frontmatter([]) is None


def test_coerce_override_accepts_only_booleans() -> None:
    assert coerce_override(True) is True
    assert coerce_override(False) is False
    assert coerce_override(None) is None
    assert coerce_override("true") is None
    assert coerce_override(1) is None


def test_static_metadata_decodes_value() -> None:
    assert StaticMetadata(True).get_document_override() is True
    assert StaticMetadata("on").get_document_override() is None
    assert StaticMetadata().get_document_override() is None
