"""
Tests for policy listing, detail, updates, deletes and direct policy creation.
"""

from datetime import datetime, timezone

import pytest
from fastapi import status

from customer_service.models import (
    ClassCoverage,
    GroupMember,
    GroupPolicy,
    IndividualPolicy,
    IndividualPolicyCoverage,
    PolicyClass,
    PolicyHolder,
    PolicyStatus,
)


def individual_policy(policy_id=1, created_day=1):
    return IndividualPolicy(
        id=policy_id,
        policy_number=f"POL-20240501-IND{policy_id:02d}",
        source_quote_id=10 + policy_id,
        status=PolicyStatus.ACTIVE,
        effective_date=datetime(2024, 6, 1),
        created_at=datetime(2024, 5, created_day, tzinfo=timezone.utc),
    )


def group_policy(policy_id=2, created_day=2):
    return GroupPolicy(
        id=policy_id,
        policy_number=f"POL-20240502-GRP{policy_id:02d}",
        source_quote_id=20 + policy_id,
        source_group_id=3,
        group_name="Acme Corp",
        status=PolicyStatus.ACTIVE,
        effective_date=datetime(2024, 6, 1),
        created_at=datetime(2024, 5, created_day, tzinfo=timezone.utc),
    )


def holder(policy_id=1):
    return PolicyHolder(
        id=7,
        policy_id=policy_id,
        first_name="Grace",
        middle_name="Brewster",
        last_name="Hopper",
        email="grace@example.com",
    )


@pytest.mark.asyncio
async def test_list_policies_tags_and_sorts_newest_first(
    client, db_session, result_factory, service_headers
):
    orphan = individual_policy(policy_id=5, created_day=3)
    db_session.execute.side_effect = [
        result_factory(values=[individual_policy(), orphan]),
        result_factory(values=[group_policy()]),
        result_factory(values=[holder()]),
    ]

    response = await client.get("/api/policies", headers=service_headers)

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert [(p["id"], p["type"], p["displayName"]) for p in body["policies"]] == [
        (5, "Individual", "Unknown"),
        (2, "Group", "Acme Corp"),
        (1, "Individual", "Grace Brewster Hopper"),
    ]
    assert body["counts"] == {"individual": 2, "group": 1, "total": 3}


@pytest.mark.asyncio
async def test_group_policy_detail_flattens_members_and_coverages(
    client, db_session, result_factory, service_headers
):
    policy_class = PolicyClass(id=30, group_policy_id=2, class_name="Managers")
    member = GroupMember(
        id=40, class_id=30, first_name="Alan", last_name="Turing", email="alan@example.com"
    )
    coverage = ClassCoverage(id=50, class_id=30, product_type="Dental", premium="20.00")
    db_session.execute.side_effect = [
        result_factory(None),
        result_factory(group_policy()),
        result_factory(values=[policy_class]),
        result_factory(values=[member]),
        result_factory(values=[coverage]),
    ]

    response = await client.get("/api/policies/2", headers=service_headers)

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["policy"]["type"] == "Group"
    assert [m["id"] for m in body["policyHolders"]] == [40]
    assert [c["productType"] for c in body["policyCoverages"]] == ["Dental"]
    assert body["classes"][0]["className"] == "Managers"
    assert body["classes"][0]["members"][0]["classId"] == 30


@pytest.mark.asyncio
async def test_individual_policy_detail(client, db_session, result_factory, service_headers):
    coverage = IndividualPolicyCoverage(id=60, policy_id=1, product_type="Life")
    db_session.execute.side_effect = [
        result_factory(individual_policy()),
        result_factory(holder()),
        result_factory(values=[coverage]),
    ]

    response = await client.get("/api/policies/1", headers=service_headers)

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["policy"]["displayName"] == "Grace Brewster Hopper"
    assert body["policyHolders"][0]["policyId"] == 1
    assert body["policyCoverages"][0]["productType"] == "Life"
    assert body["classes"] is None


@pytest.mark.asyncio
async def test_unknown_policy_is_404(client, service_headers):
    response = await client.get("/api/policies/404", headers=service_headers)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Policy not found"}


@pytest.mark.asyncio
async def test_update_without_fields_is_400(client, service_headers):
    response = await client.patch("/api/policies/1", json={}, headers=service_headers)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "No fields to update"}


@pytest.mark.asyncio
async def test_update_group_policy_status(client, db_session, result_factory, service_headers):
    policy = group_policy()
    db_session.execute.side_effect = [result_factory(None), result_factory(policy)]

    response = await client.patch(
        "/api/policies/2", json={"status": "Cancelled"}, headers=service_headers
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "Cancelled"
    assert response.json()["type"] == "Group"
    assert policy.status == PolicyStatus.CANCELLED


@pytest.mark.asyncio
async def test_create_individual_policy(client, db_session, service_headers):
    payload = {
        "policyNumber": "POL-20240601-ABCDE",
        "sourceQuoteId": 11,
        "effectiveDate": "2024-06-01T00:00:00",
        "holder": {
            "firstName": "Grace",
            "lastName": "Hopper",
            "email": "grace@example.com",
        },
        "coverages": [{"productType": "Life", "premium": "12.50"}],
    }

    response = await client.post("/api/individual-policies", json=payload, headers=service_headers)

    assert response.status_code == status.HTTP_201_CREATED
    policy = response.json()["policy"]
    assert policy["policyNumber"] == "POL-20240601-ABCDE"
    assert policy["status"] == "Active"
    added = [call.args[0] for call in db_session.add.call_args_list]
    assert [type(obj) for obj in added] == [IndividualPolicy, PolicyHolder]
    [coverages] = [call.args[0] for call in db_session.add_all.call_args_list]
    assert coverages[0].policy_id == added[0].id


@pytest.mark.asyncio
async def test_create_individual_policy_missing_field_is_400(client, db_session, service_headers):
    response = await client.post(
        "/api/individual-policies",
        json={"policyNumber": "POL-20240601-ABCDE", "effectiveDate": "2024-06-01T00:00:00"},
        headers=service_headers,
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "message": "Policy number, source quote ID, and effective date are required"
    }
    db_session.add.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_policy_number_is_409(client, db_session, result_factory, service_headers):
    db_session.execute.return_value = result_factory(1)

    response = await client.post(
        "/api/individual-policies",
        json={
            "policyNumber": "POL-20240601-ABCDE",
            "sourceQuoteId": 11,
            "effectiveDate": "2024-06-01T00:00:00",
        },
        headers=service_headers,
    )

    assert response.status_code == status.HTTP_409_CONFLICT
    db_session.add.assert_not_called()


def deleted_tables(db_session):
    statements = [call.args[0] for call in db_session.execute.await_args_list]
    return [s.table.name for s in statements if s.is_delete]


@pytest.mark.asyncio
async def test_type_picks_group_policy_sharing_an_individual_id(
    client, db_session, result_factory, service_headers
):
    policy = group_policy(policy_id=1)
    db_session.execute.side_effect = [result_factory(policy)]

    response = await client.patch(
        "/api/policies/1?type=Group", json={"status": "Expired"}, headers=service_headers
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["type"] == "Group"
    assert policy.status == PolicyStatus.EXPIRED
    [lookup] = [call.args[0] for call in db_session.execute.await_args_list]
    assert lookup.column_descriptions[0]["entity"] is GroupPolicy


@pytest.mark.asyncio
async def test_individual_policy_by_id(client, db_session, result_factory, service_headers):
    coverage = IndividualPolicyCoverage(id=60, policy_id=1, product_type="Life")
    db_session.execute.side_effect = [
        result_factory(individual_policy()),
        result_factory(holder()),
        result_factory(values=[coverage]),
    ]

    response = await client.get("/api/individual-policies/1", headers=service_headers)

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["policy"]["policyNumber"] == "POL-20240501-IND01"
    assert body["policyHolder"]["firstName"] == "Grace"
    assert [c["productType"] for c in body["coverages"]] == ["Life"]


@pytest.mark.asyncio
async def test_group_policy_by_id_reads_only_group_table(
    client, db_session, result_factory, service_headers
):
    policy_class = PolicyClass(id=30, group_policy_id=1, class_name="Managers")
    db_session.execute.side_effect = [
        result_factory(group_policy(policy_id=1)),
        result_factory(values=[policy_class]),
        result_factory(values=[]),
        result_factory(values=[]),
    ]

    response = await client.get("/api/group-policies/1", headers=service_headers)

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["policy"]["groupName"] == "Acme Corp"
    assert [c["className"] for c in body["classes"]] == ["Managers"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path, message",
    [
        ("/api/individual-policies/9", "Individual policy not found"),
        ("/api/group-policies/9", "Group policy not found"),
        ("/api/policy-holders/9", "Policy holder not found"),
    ],
)
async def test_unknown_ids_are_404(client, service_headers, path, message):
    response = await client.get(path, headers=service_headers)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": message}


@pytest.mark.asyncio
async def test_update_individual_policy(client, db_session, result_factory, service_headers):
    policy = individual_policy()
    db_session.execute.return_value = result_factory(policy)

    response = await client.patch(
        "/api/individual-policies/1",
        json={"expirationDate": "2025-06-01T00:00:00"},
        headers=service_headers,
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["expirationDate"] == "2025-06-01T00:00:00"
    assert policy.expiration_date == datetime(2025, 6, 1)


@pytest.mark.asyncio
async def test_update_group_policy_name(client, db_session, result_factory, service_headers):
    policy = group_policy()
    db_session.execute.return_value = result_factory(policy)

    response = await client.patch(
        "/api/group-policies/2", json={"groupName": "Acme Holdings"}, headers=service_headers
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["groupName"] == "Acme Holdings"


@pytest.mark.asyncio
async def test_delete_individual_policy_removes_children_first(
    client, db_session, result_factory, service_headers
):
    db_session.execute.return_value = result_factory(individual_policy())

    response = await client.delete("/api/individual-policies/1", headers=service_headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Individual policy deleted successfully"}
    assert deleted_tables(db_session) == [
        "policy_holders",
        "individual_policy_coverages",
        "individual_policies",
    ]


@pytest.mark.asyncio
async def test_delete_group_policy_removes_classes_first(
    client, db_session, result_factory, service_headers
):
    db_session.execute.side_effect = [
        result_factory(group_policy()),
        result_factory(values=[30, 31]),
        result_factory(),
        result_factory(),
        result_factory(),
        result_factory(),
    ]

    response = await client.delete("/api/group-policies/2", headers=service_headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Group policy deleted successfully"}
    assert deleted_tables(db_session) == [
        "class_coverages",
        "group_members",
        "policy_classes",
        "group_policies",
    ]


@pytest.mark.asyncio
async def test_delete_unknown_group_policy_deletes_nothing(client, db_session, service_headers):
    response = await client.delete("/api/group-policies/9", headers=service_headers)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert deleted_tables(db_session) == []


@pytest.mark.asyncio
async def test_create_group_policy_with_classes(client, db_session, service_headers):
    payload = {
        "policyNumber": "POL-20240601-GRP01",
        "sourceQuoteId": 22,
        "sourceGroupId": 3,
        "groupName": "Acme Corp",
        "effectiveDate": "2024-06-01T00:00:00",
        "classes": [
            {
                "className": "Engineers",
                "members": [
                    {"firstName": "Alan", "lastName": "Turing", "email": "alan@example.com"}
                ],
                "coverages": [{"productType": "Dental", "premium": "15.00"}],
            }
        ],
    }

    response = await client.post("/api/group-policies", json=payload, headers=service_headers)

    assert response.status_code == status.HTTP_201_CREATED
    policy = response.json()["policy"]
    assert policy["groupName"] == "Acme Corp"
    assert policy["status"] == "Active"
    added = [call.args[0] for call in db_session.add.call_args_list]
    assert [type(obj) for obj in added] == [GroupPolicy, PolicyClass]
    members, coverages = [call.args[0] for call in db_session.add_all.call_args_list]
    assert members[0].class_id == added[1].id
    assert members[0].first_name == "Alan"
    assert coverages[0].product_type == "Dental"


@pytest.mark.asyncio
async def test_create_group_policy_missing_group_name_is_400(client, db_session, service_headers):
    response = await client.post(
        "/api/group-policies",
        json={
            "policyNumber": "POL-20240601-GRP01",
            "sourceQuoteId": 22,
            "effectiveDate": "2024-06-01T00:00:00",
        },
        headers=service_headers,
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "message": "Policy number, source quote ID, group name, and effective date are required"
    }
    db_session.add.assert_not_called()


@pytest.mark.asyncio
async def test_get_policy_holder(client, db_session, result_factory, service_headers):
    db_session.execute.return_value = result_factory(holder())

    response = await client.get("/api/policy-holders/7", headers=service_headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["email"] == "grace@example.com"
    assert response.json()["policyId"] == 1


@pytest.mark.asyncio
async def test_update_policy_holder(client, db_session, result_factory, service_headers):
    person = holder()
    db_session.execute.return_value = result_factory(person)

    response = await client.patch(
        "/api/policy-holders/7",
        json={"email": "g.hopper@example.com", "phoneNumber": "555-0100"},
        headers=service_headers,
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["email"] == "g.hopper@example.com"
    assert person.phone_number == "555-0100"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, message",
    [
        ({}, "No fields to update"),
        ({"lastName": None}, "First name, last name and email cannot be empty"),
    ],
)
async def test_invalid_policy_holder_update_is_400(
    client, db_session, service_headers, payload, message
):
    response = await client.patch("/api/policy-holders/7", json=payload, headers=service_headers)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": message}
    db_session.execute.assert_not_awaited()
