from __future__ import annotations

import pytest

from oddments.errors import EmptyInputError, NotFoundError, TooLongError
from oddments.records import Record
from oddments.service import UNCATEGORIZED, CatalogService
from oddments.store import RecordStore


@pytest.fixture()
def service(csv_path):
    return CatalogService(RecordStore(csv_path))


def test_upsert_sanitizes_fields(service):
    rec = service.upsert_item("  id-1 ", "Sky   <Spoon>", "Tools\t", "Scoops; clouds")
    assert rec.fields() == ["id-1", "Sky Spoon", "Tools", "Scoops clouds"]
    assert service.find_all() == [rec]


def test_upsert_enforces_field_limits(service):
    with pytest.raises(TooLongError):
        service.upsert_item("x" * 41, "n", "c", "d")
    with pytest.raises(TooLongError):
        service.upsert_item("id-1", "n", "c", "d" * 201)
    with pytest.raises(EmptyInputError):
        service.upsert_item("id-1", "<>", "c", "d")
    assert service.find_all() == []


def test_delete_returns_sanitized_id(service):
    service.upsert_item("id-1", "Sky Spoon", "Tools", "Scoops clouds")
    assert service.delete_item("  id-1  ") == "id-1"
    assert service.find_all() == []
    with pytest.raises(NotFoundError):
        service.delete_item("id-1")


def test_search_matches_name_or_category_ignoring_case(service):
    service.upsert_item("id-1", "Sky Spoon", "Tools", "Scoops clouds")
    service.upsert_item("id-2", "Echo Jar", "Containers", "Stores spoons")
    service.upsert_item("id-3", "Moon Ladle", "Spoon-like tools", "Long handle")

    assert [r.id for r in service.search("SPOON")] == ["id-1", "id-3"]
    assert [r.id for r in service.search("contain")] == ["id-2"]
    assert service.search("nothing") == []


def test_search_rejects_empty_token(service):
    with pytest.raises(EmptyInputError):
        service.search("   ")


def test_category_tree_groups_in_first_seen_order(csv_path):
    store = RecordStore(csv_path)
    store.save(Record("id-1", "Sky Spoon", "Tools", ""))
    store.save(Record("id-2", "Echo Jar", "Containers", ""))
    store.save(Record("id-3", "Moon Ladle", "Tools", ""))
    store.save(Record("id-4", "Loose Thing", "", ""))
    tree = CatalogService(store).category_tree()

    assert list(tree) == ["Tools", "Containers", UNCATEGORIZED]
    assert [r.id for r in tree["Tools"]] == ["id-1", "id-3"]
    assert [r.id for r in tree[UNCATEGORIZED]] == ["id-4"]


def test_find_by_id(service):
    service.upsert_item("id-1", "Sky Spoon", "Tools", "Scoops clouds")
    assert service.find_by_id(" id-1 ").name == "Sky Spoon"
    assert service.find_by_id("id-9") is None
