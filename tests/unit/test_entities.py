"""Unit tests for Entry and Batch entities."""

import pytest

from zipbatch.domain.entities import Batch, Entry


def test_entry_rejects_negative_size() -> None:
    """Negative sizes raise ValueError."""
    with pytest.raises(ValueError, match="non-negative"):
        Entry(name="a.xml", size=-1)


def test_entry_basename_strips_directories() -> None:
    """basename drops the directory part."""
    assert Entry(name="2024/01/nfe.xml", size=1).basename == "nfe.xml"


@pytest.mark.parametrize(
    ("name", "expected"),
    [("a.xml", True), ("dir/B.XML", True), ("c.Xml", True), ("d.xml.bak", False), ("xml", False)],
)
def test_entry_is_xml_case_insensitive(name: str, expected: bool) -> None:
    """is_xml matches the .xml suffix in any case."""
    assert Entry(name=name, size=0).is_xml is expected


def test_batch_count_and_byte_total() -> None:
    """count and byte_total are derived from entries."""
    batch = Batch(index=1, entries=(Entry("a", 3), Entry("b", 4)))
    assert batch.count == 2
    assert batch.byte_total == 7
