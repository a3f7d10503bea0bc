"""Unit tests for identifier allocation and cross-reference resolution."""

from hospital_records.models import Staff
from hospital_records.store import find_by_id, next_id, resolve_display_name


class TestNextId:
    """Test suite for next_id."""

    def test_empty_collection_starts_at_one(self) -> None:
        assert next_id([]) == 1

    def test_count_plus_one(self) -> None:
        """Test allocation is count + 1, not max id + 1."""
        # Arrange - hand-edited collection with a gap in ids
        collection = [
            Staff(id=1, name="A", surname="a", specialty="x"),
            Staff(id=7, name="B", surname="b", specialty="y"),
        ]

        # Act & Assert
        assert next_id(collection) == 3


class TestResolver:
    """Test suite for find_by_id and resolve_display_name."""

    def setup_method(self) -> None:
        self.staff = [
            Staff(id=1, name="Martin", surname="Claude", specialty="Cardiology"),
            Staff(id=2, name="Petit", surname="Anne", specialty="Nurse"),
            Staff(id=2, name="Duplicate", surname="Id", specialty="Nurse"),
        ]

    def test_find_by_id_returns_first_match(self) -> None:
        found = find_by_id(self.staff, 2)

        assert found is not None
        assert found.name == "Petit"

    def test_find_by_id_missing_returns_none(self) -> None:
        assert find_by_id(self.staff, 99) is None

    def test_resolve_display_name(self) -> None:
        assert resolve_display_name(self.staff, 1) == "Martin Claude"

    def test_resolve_dangling_reference_returns_none(self) -> None:
        assert resolve_display_name(self.staff, 42) is None
        assert resolve_display_name([], 1) is None
