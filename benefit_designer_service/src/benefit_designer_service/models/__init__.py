from .benefit import BenefitCategory, BenefitTemplate, BenefitType, TemplateStatus

__all__ = ["BenefitCategory", "BenefitTemplate", "BenefitType", "TemplateStatus"]
