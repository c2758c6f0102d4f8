from enum import Enum
from typing import Dict, Iterable, List


class Role(str, Enum):
    QUOTING = "Quoting"
    CUSTOMER_SERVICE = "CustomerService"
    BENEFIT_DESIGNER = "BenefitDesigner"
    ADMIN = "Admin"


# Maps service names to the roles that can access them
SERVICE_ROLE_MAP: Dict[str, List[Role]] = {
    "quoting": [Role.QUOTING, Role.ADMIN],
    "customer-service": [Role.CUSTOMER_SERVICE, Role.ADMIN],
    "benefit-designer": [Role.BENEFIT_DESIGNER, Role.ADMIN],
}


def parse_roles(values: Iterable[str]) -> List[Role]:
    """Keep only recognised role names, preserving order and dropping duplicates."""
    valid = {role.value: role for role in Role}
    roles: List[Role] = []
    for value in values:
        role = valid.get(value)
        if role is not None and role not in roles:
            roles.append(role)
    return roles


def has_required_role(user_roles: Iterable[Role], required_roles: Iterable[Role]) -> bool:
    """True when the two role collections share at least one role."""
    return bool(set(user_roles) & set(required_roles))
