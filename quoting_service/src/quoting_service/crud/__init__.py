from . import applicants, coverages, employee_classes, groups, quote_benefits, quotes

__all__ = [
    "applicants",
    "coverages",
    "employee_classes",
    "groups",
    "quote_benefits",
    "quotes",
]
