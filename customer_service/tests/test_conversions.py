"""
Tests for converting quotes into policies.
"""

import json
import re
from datetime import datetime, timezone

import httpx
import pytest
from fastapi import status

from customer_service.crud.conversions import generate_policy_number
from customer_service.models import (
    ClassCoverage,
    GroupMember,
    GroupPolicy,
    IndividualPolicy,
    IndividualPolicyCoverage,
    PolicyClass,
    PolicyHolder,
)

POLICY_NUMBER = re.compile(r"^POL-\d{8}-[A-Z0-9]{5}$")

INDIVIDUAL_DETAIL = {
    "quote": {"id": 1, "status": "Ready for Sale", "type": "Individual", "applicantId": 4},
    "applicant": {
        "id": 4,
        "firstName": "Grace",
        "lastName": "Hopper",
        "email": "grace@example.com",
        "birthdate": "1985-12-09T00:00:00",
    },
    "coverages": [{"id": 9, "quoteId": 1, "productType": "Life", "details": "100k"}],
}

GROUP_DETAIL = {
    "quote": {"id": 2, "status": "Ready for Sale", "type": "Group", "groupId": 3},
    "group": {"id": 3, "groupName": "Acme Corp"},
    "groupApplicants": [
        {"id": 11, "firstName": "Alan", "lastName": "Turing", "birthdate": "1990-06-23T00:00:00"},
        {"id": 12, "firstName": "Ada", "lastName": "Lovelace", "email": "ada@example.com",
         "birthdate": "1991-12-10T00:00:00"},
    ],
    "coverages": [],
}


def archived(quoting_handler):
    return [
        json.loads(r.content)
        for r in quoting_handler.requests
        if r.method == "PATCH"
    ]


def serve_quote(quoting_handler, quote_id, detail):
    quoting_handler.routes[("GET", f"/api/quotes/{quote_id}")] = httpx.Response(200, json=detail)
    quoting_handler.routes[("PATCH", f"/api/quotes/{quote_id}")] = httpx.Response(
        200, json={**detail["quote"], "status": "Archived"}
    )


def added_objects(db_session):
    """Everything passed to add() or add_all(), in call order."""
    objects = []
    for name, args, _ in db_session.mock_calls:
        if name == "add":
            objects.append(args[0])
        elif name == "add_all":
            objects.extend(args[0])
    return objects


def test_policy_number_format():
    number = generate_policy_number(datetime(2024, 3, 9, 23, 59, tzinfo=timezone.utc))

    assert POLICY_NUMBER.match(number)
    assert number.startswith("POL-20240309-")


@pytest.mark.asyncio
async def test_individual_conversion_creates_policy_and_archives(
    client, db_session, quoting_handler, service_headers
):
    serve_quote(quoting_handler, 1, INDIVIDUAL_DETAIL)

    response = await client.post(
        "/api/convert-quote",
        json={"quoteId": 1, "effectiveDate": "2024-06-01T00:00:00"},
        headers=service_headers,
    )

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["message"] == "Individual quote converted to policy successfully"
    assert POLICY_NUMBER.match(body["policyNumber"])
    assert body["policy"]["policyNumber"] == body["policyNumber"]
    assert body["policy"]["displayName"] == "Grace Hopper"
    assert archived(quoting_handler) == [{"status": "Archived"}]

    objects = added_objects(db_session)
    assert [type(obj) for obj in objects] == [IndividualPolicy, PolicyHolder, IndividualPolicyCoverage]
    assert objects[1].source_applicant_id == 4
    assert objects[2].details == "100k"


@pytest.mark.asyncio
async def test_quote_not_ready_is_400_and_nothing_changes(
    client, db_session, quoting_handler, service_headers
):
    detail = {**INDIVIDUAL_DETAIL, "quote": {**INDIVIDUAL_DETAIL["quote"], "status": "In Progress"}}
    serve_quote(quoting_handler, 1, detail)

    response = await client.post(
        "/api/convert-quote",
        json={"quoteId": 1, "effectiveDate": "2024-06-01T00:00:00"},
        headers=service_headers,
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": 'Quote must be in "Ready for Sale" status to convert'}
    db_session.add.assert_not_called()
    assert archived(quoting_handler) == []


@pytest.mark.asyncio
async def test_missing_effective_date_is_400(client, quoting_handler, service_headers):
    response = await client.post("/api/convert-quote", json={"quoteId": 1}, headers=service_headers)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "Quote ID and effective date are required"}
    assert quoting_handler.requests == []


@pytest.mark.asyncio
async def test_group_conversion_requires_classes(
    client, db_session, quoting_handler, service_headers
):
    serve_quote(quoting_handler, 2, GROUP_DETAIL)

    response = await client.post(
        "/api/convert-quote",
        json={"quoteId": 2, "effectiveDate": "2024-06-01T00:00:00", "classes": []},
        headers=service_headers,
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "message": "Class definitions are required for group policy conversion"
    }
    db_session.add.assert_not_called()


@pytest.mark.asyncio
async def test_group_conversion_places_members_in_classes(
    client, db_session, quoting_handler, service_headers
):
    serve_quote(quoting_handler, 2, GROUP_DETAIL)
    classes = [
        {
            "className": "Engineers",
            "memberIds": [11, 99],
            "coverages": [{"productType": "Dental", "premium": "15.00"}],
        },
        {"className": "Managers", "memberIds": [12]},
    ]

    response = await client.post(
        "/api/convert-quote",
        json={"quoteId": 2, "effectiveDate": "2024-06-01T00:00:00", "classes": classes},
        headers=service_headers,
    )

    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["message"] == "Group quote converted to policy successfully"
    assert body["policy"]["groupName"] == "Acme Corp"
    assert body["policy"]["type"] == "Group"

    objects = added_objects(db_session)
    assert [type(obj) for obj in objects] == [
        GroupPolicy,
        PolicyClass,
        GroupMember,
        ClassCoverage,
        PolicyClass,
        GroupMember,
    ]
    engineers, managers = objects[1], objects[4]
    assert objects[2].class_id == engineers.id
    assert objects[2].source_applicant_id == 11
    # Employees without an email are stored with an empty one
    assert objects[2].email == ""
    assert objects[5].class_id == managers.id
    assert archived(quoting_handler) == [{"status": "Archived"}]


@pytest.mark.asyncio
async def test_failed_archive_fails_the_conversion(
    client, db_session, quoting_handler, service_headers
):
    serve_quote(quoting_handler, 1, INDIVIDUAL_DETAIL)
    quoting_handler.routes[("PATCH", "/api/quotes/1")] = httpx.Response(500, text="down")

    response = await client.post(
        "/api/convert-quote",
        json={"quoteId": 1, "effectiveDate": "2024-06-01T00:00:00"},
        headers=service_headers,
    )

    assert response.status_code == status.HTTP_502_BAD_GATEWAY


@pytest.mark.asyncio
async def test_repeated_member_ids_add_each_employee_once(
    client, db_session, quoting_handler, service_headers
):
    serve_quote(quoting_handler, 2, GROUP_DETAIL)
    classes = [{"className": "Everyone", "memberIds": [12, 12, 11, 12]}]

    response = await client.post(
        "/api/convert-quote",
        json={"quoteId": 2, "effectiveDate": "2024-06-01T00:00:00", "classes": classes},
        headers=service_headers,
    )

    assert response.status_code == status.HTTP_201_CREATED
    members = [obj for obj in added_objects(db_session) if isinstance(obj, GroupMember)]
    # Group order, one row per employee
    assert [m.source_applicant_id for m in members] == [11, 12]
