"""Unit tests for ReferenceDataService.

Run with: pytest tests/test_reference_service.py -v
"""

import pytest

from sportsevents.domain.errors import NotFoundError, StoreError, ValidationError


class TestCategories:
    def test_create_list_update_delete(self, reference, clock, observer):
        tennis = reference.create_category({"name": "Tennis", "description": "Racket"}, "admin")
        padel = reference.create_category({"name": "Padel"}, "admin")
        assert [c.name for c in reference.list_categories()] == ["Padel", "Tennis"]

        later = clock.advance()
        updated = reference.update_category(padel.id, {"description": "Walls allowed"}, "admin")
        assert updated.name == "Padel"
        assert updated.description == "Walls allowed"
        assert updated.updated_at == later
        assert updated.created_at == padel.created_at

        reference.delete_category(tennis.id, "admin")
        assert [c.id for c in reference.list_categories()] == [padel.id]
        assert {"CREATE_CATEGORY", "UPDATE_CATEGORY", "DELETE_CATEGORY"} <= set(
            observer.actions()
        )

    def test_invalid_category(self, reference):
        with pytest.raises(ValidationError):
            reference.create_category({"name": ""}, "admin")

    def test_update_missing_category(self, reference):
        with pytest.raises(NotFoundError):
            reference.update_category("missing", {"name": "x"}, "admin")


class TestCitiesAndAreas:
    def test_area_copies_city_name(self, reference):
        oslo = reference.create_city({"name": "Oslo", "country": "Norway"}, "admin")
        area = reference.create_area({"name": "Grunerlokka", "city_id": oslo.id}, "admin")
        assert area.city_id == oslo.id
        assert area.city_name == "Oslo"

    def test_area_requires_existing_city(self, reference):
        with pytest.raises(NotFoundError) as excinfo:
            reference.create_area({"name": "Nowhere", "city_id": "missing"}, "admin")
        assert excinfo.value.kind == "City"

    def test_city_rename_does_not_refresh_area(self, reference):
        oslo = reference.create_city({"name": "Oslo", "country": "Norway"}, "admin")
        area = reference.create_area({"name": "Sentrum", "city_id": oslo.id}, "admin")
        reference.update_city(oslo.id, {"name": "Christiania"}, "admin")
        assert reference.list_areas()[0].city_name == "Oslo"
        assert reference.list_areas()[0].id == area.id

    def test_moving_area_recopies_city_name(self, reference):
        oslo = reference.create_city({"name": "Oslo", "country": "Norway"}, "admin")
        bergen = reference.create_city({"name": "Bergen", "country": "Norway"}, "admin")
        area = reference.create_area({"name": "Sentrum", "city_id": oslo.id}, "admin")
        moved = reference.update_area(area.id, {"city_id": bergen.id}, "admin")
        assert moved.city_name == "Bergen"
        renamed = reference.update_area(area.id, {"name": "Centre"}, "admin")
        assert renamed.city_name == "Bergen"

    def test_deleting_city_keeps_areas(self, reference):
        oslo = reference.create_city({"name": "Oslo", "country": "Norway"}, "admin")
        reference.create_area({"name": "Sentrum", "city_id": oslo.id}, "admin")
        reference.delete_city(oslo.id, "admin")
        assert reference.list_cities() == []
        areas = reference.list_areas(city_id=oslo.id)
        assert [a.city_name for a in areas] == ["Oslo"]

    def test_list_areas_by_city(self, reference):
        oslo = reference.create_city({"name": "Oslo", "country": "Norway"}, "admin")
        bergen = reference.create_city({"name": "Bergen", "country": "Norway"}, "admin")
        reference.create_area({"name": "Sentrum", "city_id": oslo.id}, "admin")
        reference.create_area({"name": "Bryggen", "city_id": bergen.id}, "admin")
        assert [a.name for a in reference.list_areas(bergen.id)] == ["Bryggen"]
        assert [a.name for a in reference.list_areas()] == ["Bryggen", "Sentrum"]

    def test_store_failure_is_recorded(self, reference, store, observer):
        store.failing.add("create")
        with pytest.raises(StoreError):
            reference.create_city({"name": "Oslo", "country": "Norway"}, "admin")
        assert "CREATE_CITY_FAILED" in observer.actions()


class TestFailuresAreRecorded:
    def test_invalid_category(self, reference, observer):
        with pytest.raises(ValidationError):
            reference.create_category({"name": " "}, "admin")
        [entry] = observer.entries
        assert entry.action == "CREATE_CATEGORY_FAILED"
        assert entry.context["error"] == "VALIDATION_FAILED"

    def test_missing_city_on_update(self, reference, observer):
        with pytest.raises(NotFoundError):
            reference.update_city("missing", {"name": "x"}, "admin")
        [entry] = observer.entries
        assert entry.action == "UPDATE_CITY_FAILED"
        assert entry.context == {"userId": "admin", "itemId": "missing", "error": "NOT_FOUND"}

    def test_area_for_missing_city(self, reference, observer):
        with pytest.raises(NotFoundError):
            reference.create_area({"name": "Sentrum", "city_id": "missing"}, "admin")
        assert observer.actions() == ["CREATE_AREA_FAILED"]

    @pytest.mark.parametrize(
        "method, action",
        [
            ("list_categories", "FETCH_CATEGORIES_FAILED"),
            ("list_cities", "FETCH_CITIES_FAILED"),
            ("list_areas", "FETCH_AREAS_FAILED"),
        ],
    )
    def test_list_failures(self, reference, store, observer, method, action):
        store.failing.add("query")
        with pytest.raises(StoreError):
            getattr(reference, method)()
        assert observer.actions() == [action]

    def test_delete_failure(self, reference, store, observer):
        store.failing.add("delete")
        with pytest.raises(StoreError):
            reference.delete_area("a1", "admin")
        assert observer.actions() == ["DELETE_AREA_FAILED"]
