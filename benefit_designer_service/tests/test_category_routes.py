"""
Tests for benefit category routes.
"""

import pytest
from fastapi import status

from benefit_designer_service.crud import categories as category_crud
from benefit_designer_service.models import BenefitCategory
from shared.schemas import Role


@pytest.mark.asyncio
async def test_list_filters_by_benefit_type(
    client, db_session, result_factory, category_factory, bearer_factory
):
    db_session.execute.return_value = result_factory(
        values=[
            category_factory(1, "Dental"),
            category_factory(2, "Group Life", applies_to=["group"]),
        ]
    )

    response = await client.get(
        "/api/categories?type=individual", headers=bearer_factory(Role.BENEFIT_DESIGNER)
    )

    assert response.status_code == status.HTTP_200_OK
    assert [c["name"] for c in response.json()] == ["Dental"]
    assert response.json()[0]["appliesTo"] == ["group", "individual"]


@pytest.mark.asyncio
async def test_list_includes_inactive_on_request(client, monkeypatch, service_headers):
    calls = []

    async def fake_list(db, active_only=True, benefit_type=None):
        calls.append((active_only, benefit_type))
        return []

    monkeypatch.setattr(category_crud, "list_categories", fake_list)

    await client.get("/api/categories?active=false", headers=service_headers)
    await client.get("/api/categories", headers=service_headers)

    assert calls == [(False, None), (True, None)]


@pytest.mark.asyncio
async def test_create_category_defaults(client, db_session, service_headers):
    response = await client.post(
        "/api/categories", json={"name": "Vision", "icon": "eye"}, headers=service_headers
    )

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["name"] == "Vision"
    assert body["appliesTo"] == ["group", "individual"]
    assert body["isActive"] is True
    assert body["displayOrder"] == 0
    [added] = [call.args[0] for call in db_session.add.call_args_list]
    assert isinstance(added, BenefitCategory)


@pytest.mark.asyncio
async def test_create_category_without_name_is_400(client, db_session, service_headers):
    response = await client.post(
        "/api/categories", json={"description": "no name"}, headers=service_headers
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "Name is required"}
    db_session.add.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_category_name_is_409(
    client, db_session, result_factory, service_headers
):
    db_session.execute.return_value = result_factory(1)

    response = await client.post("/api/categories", json={"name": "Dental"}, headers=service_headers)

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json() == {"message": "A category with this name already exists"}
    db_session.add.assert_not_called()


@pytest.mark.asyncio
async def test_delete_deactivates(
    client, db_session, result_factory, category_factory, service_headers
):
    category = category_factory()
    db_session.execute.return_value = result_factory(category)

    response = await client.delete("/api/categories/1", headers=service_headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Category deactivated successfully"}
    assert category.is_active is False


@pytest.mark.asyncio
async def test_missing_category_is_404(client, service_headers):
    response = await client.get("/api/categories/42", headers=service_headers)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Category not found"}


@pytest.mark.asyncio
async def test_customer_service_role_is_forbidden(client, bearer_factory):
    response = await client.get("/api/categories", headers=bearer_factory(Role.CUSTOMER_SERVICE))

    assert response.status_code == status.HTTP_403_FORBIDDEN
