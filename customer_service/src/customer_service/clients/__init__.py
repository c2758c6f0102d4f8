from .quoting_client import QuotingClient, get_quoting_client

__all__ = ["QuotingClient", "get_quoting_client"]
