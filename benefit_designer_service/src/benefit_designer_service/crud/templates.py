"""
CRUD operations for versioned benefit templates.
"""

import uuid
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import InvalidRequest, NotFound

from ..logging_config import logger
from ..models.benefit import BenefitTemplate, BenefitType, TemplateStatus
from ..schemas.template_schemas import TemplateCreate, TemplateUpdate
from .categories import get_category

BENEFIT_TYPES = [t.value for t in BenefitType]
TEMPLATE_STATUSES = [s.value for s in TemplateStatus]


def latest_versions(templates: Iterable[BenefitTemplate]) -> List[BenefitTemplate]:
    """Keep only the highest (major, minor) version of each template UUID."""
    latest: Dict[str, BenefitTemplate] = {}
    for template in templates:
        current = latest.get(template.template_id)
        if current is None or template.version_key > current.version_key:
            latest[template.template_id] = template
    return list(latest.values())


def next_version(template: BenefitTemplate, bump: str) -> Tuple[int, int]:
    if bump == "major":
        return template.major_version + 1, 0
    return template.major_version, template.minor_version + 1


async def list_templates(
    db: AsyncSession,
    benefit_type: Optional[str] = None,
    category_id: Optional[int] = None,
    status: Optional[str] = None,
    latest_only: bool = False,
) -> List[BenefitTemplate]:
    query = select(BenefitTemplate).order_by(BenefitTemplate.created_at.desc())
    if benefit_type:
        if benefit_type not in BENEFIT_TYPES:
            return []
        query = query.where(BenefitTemplate.type == BenefitType(benefit_type))
    if category_id is not None:
        query = query.where(BenefitTemplate.category_id == category_id)
    if status:
        if status not in TEMPLATE_STATUSES:
            return []
        query = query.where(BenefitTemplate.status == TemplateStatus(status))

    result = await db.execute(query)
    templates = list(result.scalars().all())
    return latest_versions(templates) if latest_only else templates


async def get_template(db: AsyncSession, template_db_id: int) -> BenefitTemplate:
    result = await db.execute(select(BenefitTemplate).where(BenefitTemplate.id == template_db_id))
    template = result.scalar_one_or_none()
    if template is None:
        raise NotFound("Template not found")
    return template


async def create_template(db: AsyncSession, template_in: TemplateCreate) -> BenefitTemplate:
    """
    Create version 1.0 of a new template.

    Raises:
        InvalidRequest: Missing fields, unknown type, or a category that
            doesn't offer this type of benefit
        NotFound: The category doesn't exist
    """
    if not (template_in.category_id and template_in.type and template_in.name):
        raise InvalidRequest("categoryId, type, and name are required")
    if template_in.type not in BENEFIT_TYPES:
        raise InvalidRequest('type must be either "group" or "individual"')

    category = await get_category(db, template_in.category_id)
    if not category.supports(template_in.type):
        raise InvalidRequest(
            f'Category "{category.name}" does not support {template_in.type} benefits'
        )

    template = BenefitTemplate(
        template_id=str(uuid.uuid4()),
        category_id=category.id,
        type=BenefitType(template_in.type),
        name=template_in.name,
        description=template_in.description or None,
        version="1.0",
        major_version=1,
        minor_version=0,
        field_schema=template_in.field_schema or {"fields": []},
        default_values=template_in.default_values or {},
        status=template_in.status,
    )
    template.category = category
    db.add(template)
    await db.flush()
    await db.refresh(template)

    logger.info(f"Created template {template.id} ({template.name} v1.0, {template.template_id})")
    return template


async def update_template(
    db: AsyncSession, template_db_id: int, template_in: TemplateUpdate
) -> Tuple[BenefitTemplate, bool]:
    """
    Apply changes to a template.

    Returns:
        The changed draft, or the newly created version, and whether a new
        version was created
    """
    existing = await get_template(db, template_db_id)
    changes = template_in.model_dump(exclude_unset=True, exclude={"version_bump"})

    if existing.status == TemplateStatus.DRAFT:
        for field, value in changes.items():
            setattr(existing, field, value)
        await db.flush()
        await db.refresh(existing)
        return existing, False

    major, minor = next_version(existing, template_in.version_bump)
    if existing.status == TemplateStatus.ACTIVE:
        existing.status = TemplateStatus.ARCHIVED

    def pick(field):
        value = changes.get(field)
        return value if value is not None else getattr(existing, field)

    template = BenefitTemplate(
        template_id=existing.template_id,
        category_id=existing.category_id,
        type=existing.type,
        name=pick("name"),
        description=pick("description"),
        version=f"{major}.{minor}",
        major_version=major,
        minor_version=minor,
        field_schema=pick("field_schema"),
        default_values=pick("default_values"),
        status=changes.get("status") or TemplateStatus.DRAFT,
        created_by=existing.created_by,
    )
    template.category = existing.category
    db.add(template)
    await db.flush()
    await db.refresh(template)

    logger.info(
        f"Template {existing.template_id} moved from v{existing.version} to v{template.version}"
    )
    return template, True


async def set_template_status(
    db: AsyncSession, template_db_id: int, status: Optional[str]
) -> BenefitTemplate:
    """
    Publish, archive or return a template version to draft.

    Activating a version archives every other active version of the same
    template UUID.
    """
    if status not in TEMPLATE_STATUSES:
        raise InvalidRequest("Valid status (draft, active, archived) is required")

    template = await get_template(db, template_db_id)
    new_status = TemplateStatus(status)

    if new_status == TemplateStatus.ACTIVE:
        await db.execute(
            update(BenefitTemplate)
            .where(
                BenefitTemplate.template_id == template.template_id,
                BenefitTemplate.status == TemplateStatus.ACTIVE,
                BenefitTemplate.id != template.id,
            )
            .values(status=TemplateStatus.ARCHIVED)
        )

    template.status = new_status
    await db.flush()
    await db.refresh(template)

    logger.info(f"Template {template_db_id} set to {new_status.value}")
    return template


async def list_template_versions(db: AsyncSession, template_db_id: int) -> Dict[str, object]:
    template = await get_template(db, template_db_id)
    result = await db.execute(
        select(BenefitTemplate)
        .where(BenefitTemplate.template_id == template.template_id)
        .order_by(BenefitTemplate.major_version.desc(), BenefitTemplate.minor_version.desc())
    )
    return {
        "template_id": template.template_id,
        "name": template.name,
        "versions": list(result.scalars().all()),
    }
