"""
CRUD operations for individual and group policies.

Individual and group policies are numbered independently. The per-kind
functions address one table; the merged lookup takes an optional type and
otherwise tries the individual table first and then the group table.
"""

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import Conflict, InvalidRequest, NotFound

from ..logging_config import logger
from ..models.policy import (
    ClassCoverage,
    GroupMember,
    GroupPolicy,
    IndividualPolicy,
    IndividualPolicyCoverage,
    PolicyClass,
    PolicyHolder,
    PolicyStatus,
)
from ..schemas.policy_schemas import (
    CoverageIn,
    GroupPolicyCreate,
    GroupPolicyUpdate,
    IndividualPolicyCreate,
    PolicyClassIn,
    PolicyHolderIn,
    PolicyHolderUpdate,
    PolicyUpdate,
)

INDIVIDUAL = "Individual"
GROUP = "Group"
UNKNOWN_HOLDER = "Unknown"

# Holder columns that may not be cleared
REQUIRED_HOLDER_FIELDS = ("first_name", "last_name", "email")


def _policy_fields(policy) -> Dict[str, Any]:
    return {
        "id": policy.id,
        "policy_number": policy.policy_number,
        "source_quote_id": policy.source_quote_id,
        "status": policy.status,
        "effective_date": policy.effective_date,
        "expiration_date": policy.expiration_date,
        "created_at": policy.created_at,
    }


def summarize_individual(policy: IndividualPolicy, holder: Optional[PolicyHolder]) -> Dict[str, Any]:
    return {
        **_policy_fields(policy),
        "type": INDIVIDUAL,
        "display_name": holder.full_name if holder else UNKNOWN_HOLDER,
    }


def summarize_group(policy: GroupPolicy) -> Dict[str, Any]:
    return {
        **_policy_fields(policy),
        "type": GROUP,
        "display_name": policy.group_name,
        "source_group_id": policy.source_group_id,
        "group_name": policy.group_name,
    }


def _newest_first(summary: Dict[str, Any]) -> float:
    created_at = summary.get("created_at")
    return -created_at.timestamp() if created_at else 0.0


async def list_individual_policies(db: AsyncSession) -> List[IndividualPolicy]:
    result = await db.execute(select(IndividualPolicy).order_by(IndividualPolicy.id))
    return list(result.scalars().all())


async def list_group_policies(db: AsyncSession) -> List[GroupPolicy]:
    result = await db.execute(select(GroupPolicy).order_by(GroupPolicy.id))
    return list(result.scalars().all())


async def list_policies(db: AsyncSession) -> Dict[str, Any]:
    """
    Every policy of both kinds, newest first, with per-kind counts.

    Individual policies are named after their holder and group policies
    after their group. The two tables are read one after the other because
    an AsyncSession cannot run queries concurrently.
    """
    individual = await list_individual_policies(db)
    group = await list_group_policies(db)

    holders: Dict[int, PolicyHolder] = {}
    if individual:
        result = await db.execute(
            select(PolicyHolder).where(PolicyHolder.policy_id.in_([p.id for p in individual]))
        )
        holders = {holder.policy_id: holder for holder in result.scalars().all()}

    policies = [summarize_individual(p, holders.get(p.id)) for p in individual]
    policies += [summarize_group(p) for p in group]
    policies.sort(key=_newest_first)

    return {
        "policies": policies,
        "counts": {
            "individual": len(individual),
            "group": len(group),
            "total": len(policies),
        },
    }


async def _find_individual(db: AsyncSession, policy_id: int) -> Optional[IndividualPolicy]:
    result = await db.execute(select(IndividualPolicy).where(IndividualPolicy.id == policy_id))
    return result.scalar_one_or_none()


async def _find_group(db: AsyncSession, policy_id: int) -> Optional[GroupPolicy]:
    result = await db.execute(select(GroupPolicy).where(GroupPolicy.id == policy_id))
    return result.scalar_one_or_none()


async def get_individual_policy(db: AsyncSession, policy_id: int) -> IndividualPolicy:
    policy = await _find_individual(db, policy_id)
    if policy is None:
        raise NotFound("Individual policy not found")
    return policy


async def get_group_policy(db: AsyncSession, policy_id: int) -> GroupPolicy:
    policy = await _find_group(db, policy_id)
    if policy is None:
        raise NotFound("Group policy not found")
    return policy


async def find_policy(
    db: AsyncSession, policy_id: int, policy_type: Optional[str] = None
) -> Tuple[str, Any]:
    """
    Find a policy of either kind.

    Args:
        db: Database session
        policy_id: Policy id within its own table
        policy_type: "Individual" or "Group" to search one table only

    Returns:
        The policy type and the policy row

    Raises:
        NotFound: No searched table has the id
    """
    if policy_type != GROUP:
        policy = await _find_individual(db, policy_id)
        if policy is not None:
            return INDIVIDUAL, policy
    if policy_type != INDIVIDUAL:
        policy = await _find_group(db, policy_id)
        if policy is not None:
            return GROUP, policy
    raise NotFound("Policy not found")


async def _holder_of(db: AsyncSession, policy_id: int) -> Optional[PolicyHolder]:
    result = await db.execute(select(PolicyHolder).where(PolicyHolder.policy_id == policy_id))
    return result.scalar_one_or_none()


async def _individual_coverages(db: AsyncSession, policy_id: int) -> List[IndividualPolicyCoverage]:
    result = await db.execute(
        select(IndividualPolicyCoverage).where(IndividualPolicyCoverage.policy_id == policy_id)
    )
    return list(result.scalars().all())


async def _policy_classes(db: AsyncSession, policy_id: int) -> List[Dict[str, Any]]:
    """Classes of a group policy, each with its members and coverages."""
    result = await db.execute(
        select(PolicyClass).where(PolicyClass.group_policy_id == policy_id).order_by(PolicyClass.id)
    )
    classes = []
    for policy_class in result.scalars().all():
        members = await db.execute(select(GroupMember).where(GroupMember.class_id == policy_class.id))
        coverages = await db.execute(
            select(ClassCoverage).where(ClassCoverage.class_id == policy_class.id)
        )
        classes.append(
            {
                "id": policy_class.id,
                "group_policy_id": policy_class.group_policy_id,
                "class_name": policy_class.class_name,
                "description": policy_class.description,
                "created_at": policy_class.created_at,
                "members": list(members.scalars().all()),
                "coverages": list(coverages.scalars().all()),
            }
        )
    return classes


async def get_policy_detail(
    db: AsyncSession, policy_id: int, policy_type: Optional[str] = None
) -> Dict[str, Any]:
    policy_type, policy = await find_policy(db, policy_id, policy_type)

    if policy_type == INDIVIDUAL:
        holder = await _holder_of(db, policy_id)
        return {
            "policy": summarize_individual(policy, holder),
            "policy_holders": [holder] if holder else [],
            "policy_coverages": await _individual_coverages(db, policy_id),
        }

    classes = await _policy_classes(db, policy_id)
    # Flattened for clients that treat both kinds alike
    return {
        "policy": summarize_group(policy),
        "policy_holders": [member for c in classes for member in c["members"]],
        "policy_coverages": [coverage for c in classes for coverage in c["coverages"]],
        "classes": classes,
    }


async def get_individual_policy_detail(db: AsyncSession, policy_id: int) -> Dict[str, Any]:
    policy = await get_individual_policy(db, policy_id)
    return {
        "policy": policy,
        "policy_holder": await _holder_of(db, policy_id),
        "coverages": await _individual_coverages(db, policy_id),
    }


async def get_group_policy_detail(db: AsyncSession, policy_id: int) -> Dict[str, Any]:
    policy = await get_group_policy(db, policy_id)
    return {"policy": policy, "classes": await _policy_classes(db, policy_id)}


async def _apply_changes(db: AsyncSession, row, changes: Dict[str, Any]) -> None:
    for field, value in changes.items():
        setattr(row, field, value)
    await db.flush()
    await db.refresh(row)


def _policy_changes(policy_in: PolicyUpdate) -> Dict[str, Any]:
    changes = policy_in.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise InvalidRequest("No fields to update")
    return changes


async def update_policy(
    db: AsyncSession, policy_id: int, policy_in: PolicyUpdate, policy_type: Optional[str] = None
) -> Dict[str, Any]:
    changes = _policy_changes(policy_in)

    policy_type, policy = await find_policy(db, policy_id, policy_type)
    await _apply_changes(db, policy, changes)

    logger.info(f"Updated {policy_type.lower()} policy {policy_id}: {sorted(changes)}")
    if policy_type == INDIVIDUAL:
        return summarize_individual(policy, await _holder_of(db, policy_id))
    return summarize_group(policy)


async def update_individual_policy(
    db: AsyncSession, policy_id: int, policy_in: PolicyUpdate
) -> IndividualPolicy:
    changes = _policy_changes(policy_in)
    policy = await get_individual_policy(db, policy_id)
    await _apply_changes(db, policy, changes)
    logger.info(f"Updated individual policy {policy_id}: {sorted(changes)}")
    return policy


async def update_group_policy(
    db: AsyncSession, policy_id: int, policy_in: GroupPolicyUpdate
) -> GroupPolicy:
    changes = _policy_changes(policy_in)
    policy = await get_group_policy(db, policy_id)
    await _apply_changes(db, policy, changes)
    logger.info(f"Updated group policy {policy_id}: {sorted(changes)}")
    return policy


async def delete_individual_policy(db: AsyncSession, policy_id: int) -> None:
    """Delete an individual policy after its holder and coverages."""
    await get_individual_policy(db, policy_id)

    await db.execute(delete(PolicyHolder).where(PolicyHolder.policy_id == policy_id))
    await db.execute(
        delete(IndividualPolicyCoverage).where(IndividualPolicyCoverage.policy_id == policy_id)
    )
    await db.execute(delete(IndividualPolicy).where(IndividualPolicy.id == policy_id))

    logger.info(f"Deleted individual policy {policy_id}")


async def delete_group_policy(db: AsyncSession, policy_id: int) -> None:
    """Delete a group policy after its class coverages, members and classes."""
    await get_group_policy(db, policy_id)

    result = await db.execute(select(PolicyClass.id).where(PolicyClass.group_policy_id == policy_id))
    class_ids = list(result.scalars().all())
    if class_ids:
        await db.execute(delete(ClassCoverage).where(ClassCoverage.class_id.in_(class_ids)))
        await db.execute(delete(GroupMember).where(GroupMember.class_id.in_(class_ids)))
    await db.execute(delete(PolicyClass).where(PolicyClass.group_policy_id == policy_id))
    await db.execute(delete(GroupPolicy).where(GroupPolicy.id == policy_id))

    logger.info(f"Deleted group policy {policy_id} and {len(class_ids)} classes")


async def ensure_policy_number_free(db: AsyncSession, policy_number: str) -> None:
    for model in (IndividualPolicy, GroupPolicy):
        result = await db.execute(select(model.id).where(model.policy_number == policy_number))
        if result.scalar_one_or_none() is not None:
            raise Conflict("Policy number already exists")


def build_coverage_rows(model, owner_field: str, owner_id: int, coverages: List[CoverageIn]) -> list:
    return [model(**{owner_field: owner_id}, **coverage.model_dump()) for coverage in coverages]


async def insert_individual_policy(
    db: AsyncSession,
    *,
    policy_number: str,
    source_quote_id: int,
    effective_date,
    expiration_date,
    holder: Optional[PolicyHolderIn],
    coverages: List[CoverageIn],
) -> Tuple[IndividualPolicy, Optional[PolicyHolder]]:
    """Insert an active individual policy with its holder and coverages."""
    policy = IndividualPolicy(
        policy_number=policy_number,
        source_quote_id=source_quote_id,
        effective_date=effective_date,
        expiration_date=expiration_date,
        status=PolicyStatus.ACTIVE,
    )
    db.add(policy)
    await db.flush()
    await db.refresh(policy)

    holder_row = None
    if holder is not None:
        holder_row = PolicyHolder(policy_id=policy.id, **holder.model_dump())
        db.add(holder_row)
    if coverages:
        db.add_all(build_coverage_rows(IndividualPolicyCoverage, "policy_id", policy.id, coverages))
    await db.flush()

    logger.info(f"Created individual policy {policy.id} ({policy_number})")
    return policy, holder_row


async def insert_group_policy(
    db: AsyncSession,
    *,
    policy_number: str,
    source_quote_id: int,
    source_group_id: Optional[int],
    group_name: str,
    effective_date,
    expiration_date,
    classes: List[PolicyClassIn],
) -> GroupPolicy:
    """Insert an active group policy, then each class with its members and coverages."""
    policy = GroupPolicy(
        policy_number=policy_number,
        source_quote_id=source_quote_id,
        source_group_id=source_group_id,
        group_name=group_name,
        effective_date=effective_date,
        expiration_date=expiration_date,
        status=PolicyStatus.ACTIVE,
    )
    db.add(policy)
    await db.flush()
    await db.refresh(policy)

    for class_in in classes:
        policy_class = PolicyClass(
            group_policy_id=policy.id,
            class_name=class_in.class_name,
            description=class_in.description,
        )
        db.add(policy_class)
        await db.flush()
        await db.refresh(policy_class)

        if class_in.members:
            db.add_all(
                [GroupMember(class_id=policy_class.id, **m.model_dump()) for m in class_in.members]
            )
        if class_in.coverages:
            db.add_all(
                build_coverage_rows(ClassCoverage, "class_id", policy_class.id, class_in.coverages)
            )
        await db.flush()

    logger.info(f"Created group policy {policy.id} ({policy_number}) with {len(classes)} classes")
    return policy


async def create_individual_policy(
    db: AsyncSession, policy_in: IndividualPolicyCreate
) -> IndividualPolicy:
    if not (policy_in.policy_number and policy_in.source_quote_id and policy_in.effective_date):
        raise InvalidRequest("Policy number, source quote ID, and effective date are required")
    await ensure_policy_number_free(db, policy_in.policy_number)

    policy, _ = await insert_individual_policy(
        db,
        policy_number=policy_in.policy_number,
        source_quote_id=policy_in.source_quote_id,
        effective_date=policy_in.effective_date,
        expiration_date=policy_in.expiration_date,
        holder=policy_in.holder,
        coverages=policy_in.coverages,
    )
    return policy


async def create_group_policy(db: AsyncSession, policy_in: GroupPolicyCreate) -> GroupPolicy:
    if not (
        policy_in.policy_number
        and policy_in.source_quote_id
        and policy_in.group_name
        and policy_in.effective_date
    ):
        raise InvalidRequest(
            "Policy number, source quote ID, group name, and effective date are required"
        )
    await ensure_policy_number_free(db, policy_in.policy_number)

    return await insert_group_policy(
        db,
        policy_number=policy_in.policy_number,
        source_quote_id=policy_in.source_quote_id,
        source_group_id=policy_in.source_group_id,
        group_name=policy_in.group_name,
        effective_date=policy_in.effective_date,
        expiration_date=policy_in.expiration_date,
        classes=policy_in.classes,
    )


async def get_policy_holder(db: AsyncSession, holder_id: int) -> PolicyHolder:
    result = await db.execute(select(PolicyHolder).where(PolicyHolder.id == holder_id))
    holder = result.scalar_one_or_none()
    if holder is None:
        raise NotFound("Policy holder not found")
    return holder


async def update_policy_holder(
    db: AsyncSession, holder_id: int, holder_in: PolicyHolderUpdate
) -> PolicyHolder:
    """
    Update a policy holder's contact details.

    Raises:
        InvalidRequest: Nothing to change, or a name or email set to null
        NotFound: The holder doesn't exist
    """
    changes = holder_in.model_dump(exclude_unset=True)
    if not changes:
        raise InvalidRequest("No fields to update")
    if any(changes.get(field, "") is None for field in REQUIRED_HOLDER_FIELDS):
        raise InvalidRequest("First name, last name and email cannot be empty")

    holder = await get_policy_holder(db, holder_id)
    await _apply_changes(db, holder, changes)
    logger.info(f"Updated policy holder {holder_id}: {sorted(changes)}")
    return holder
