from .benefit_designer_client import BenefitDesignerClient, get_benefit_designer_client

__all__ = ["BenefitDesignerClient", "get_benefit_designer_client"]
