"""Tests for category management under /api/v1/admin/categories."""
import pytest

from models.feedback import Feedback
from services.categories import CategoryService
from utils.errors import NotFoundError, ValidationError

CATEGORIES = "/api/v1/admin/categories"


class TestCategoryService:
    def test_create_and_get(self, db):
        service = CategoryService(db)
        created = service.create("  Billing ")

        assert created.name == "Billing"
        assert service.get(created.id).name == "Billing"

    def test_duplicate_name_rejected(self, db):
        service = CategoryService(db)
        service.create("Billing")

        with pytest.raises(ValidationError):
            service.create("Billing")

    def test_name_taken_between_check_and_commit(self, db, monkeypatch):
        service = CategoryService(db)
        service.create("Billing")
        monkeypatch.setattr(CategoryService, "_by_name", lambda self, name: None)

        with pytest.raises(ValidationError):
            service.create("Billing")

        # Session was rolled back and stays usable
        assert [c.name for c in service.list_all()] == ["Billing"]

    def test_rename_collision_at_commit(self, db, monkeypatch):
        service = CategoryService(db)
        service.create("Billing")
        other = service.create("Shipping")
        monkeypatch.setattr(CategoryService, "_by_name", lambda self, name: None)

        with pytest.raises(ValidationError):
            service.update(other.id, "Billing")
        assert service.get(other.id).name == "Shipping"

    def test_blank_name_rejected(self, db):
        with pytest.raises(ValidationError):
            CategoryService(db).create("   ")

    def test_rename_to_existing_name_rejected(self, db):
        service = CategoryService(db)
        service.create("Billing")
        other = service.create("Shipping")

        with pytest.raises(ValidationError):
            service.update(other.id, "Billing")

    def test_rename_to_same_name_allowed(self, db):
        service = CategoryService(db)
        category = service.create("Billing")

        assert service.update(category.id, "Billing").name == "Billing"

    def test_missing_category(self, db):
        service = CategoryService(db)
        with pytest.raises(NotFoundError):
            service.get(1)
        with pytest.raises(NotFoundError):
            service.update(1, "x")
        with pytest.raises(NotFoundError):
            service.delete(1)

    def test_delete_detaches_feedback(self, db, make_feedback):
        service = CategoryService(db)
        category = service.create("Temporary")
        feedback = make_feedback(category=category)

        service.delete(category.id)

        db.expire_all()
        assert db.get(Feedback, feedback.id).category_id is None

    def test_search_by_name(self, db):
        service = CategoryService(db)
        for name in ["Bug Report", "Feature Request", "Debugging", "Usability"]:
            service.create(name)

        page = service.search("BUG", 0, 10)

        assert [c.name for c in page.content] == ["Bug Report", "Debugging"]
        assert page.total_elements == 2

    def test_search_paginates_all_when_blank(self, db):
        service = CategoryService(db)
        for i in range(5):
            service.create(f"Category {i}")

        page = service.search(" ", 1, 2)

        assert [c.name for c in page.content] == ["Category 2", "Category 3"]
        assert page.total_elements == 5
        assert page.total_pages == 3


class TestCategoryEndpoints:
    def test_crud_flow(self, client, admin_headers):
        created = client.post(CATEGORIES, json={"name": "Billing"}, headers=admin_headers)
        assert created.status_code == 201
        category_id = created.json()["id"]

        fetched = client.get(f"{CATEGORIES}/{category_id}", headers=admin_headers)
        assert fetched.json() == {"id": category_id, "name": "Billing"}

        renamed = client.put(f"{CATEGORIES}/{category_id}", json={"name": "Payments"}, headers=admin_headers)
        assert renamed.status_code == 200
        assert renamed.json()["name"] == "Payments"

        assert client.delete(f"{CATEGORIES}/{category_id}", headers=admin_headers).status_code == 204
        assert client.get(f"{CATEGORIES}/{category_id}", headers=admin_headers).status_code == 404

    def test_duplicate_is_400(self, client, admin_headers):
        client.post(CATEGORIES, json={"name": "Billing"}, headers=admin_headers)
        response = client.post(CATEGORIES, json={"name": "Billing"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Category name already exists"

    def test_list_all_and_paged(self, client, admin_headers):
        for name in ["A", "B", "C"]:
            client.post(CATEGORIES, json={"name": name}, headers=admin_headers)

        everything = client.get(f"{CATEGORIES}/all", headers=admin_headers).json()
        assert [c["name"] for c in everything] == ["A", "B", "C"]

        paged = client.get(CATEGORIES, params={"page": 0, "size": 2}, headers=admin_headers).json()
        assert len(paged["content"]) == 2
        assert paged["totalElements"] == 3
        assert paged["totalPages"] == 2

    def test_requires_token(self, client):
        assert client.get(f"{CATEGORIES}/all").status_code == 401

    def test_out_of_range_numbers_are_422(self, client, admin_headers):
        assert client.get(f"{CATEGORIES}/{10**19}", headers=admin_headers).status_code == 422
        assert client.get(CATEGORIES, params={"page": 10**18}, headers=admin_headers).status_code == 422
