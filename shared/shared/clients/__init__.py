from .service_client import DEFAULT_TIMEOUT_SECONDS, ServiceClient

__all__ = ["DEFAULT_TIMEOUT_SECONDS", "ServiceClient"]
