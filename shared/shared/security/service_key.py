import hmac
from typing import Optional

SERVICE_KEY_HEADER = "X-Service-Key"


def service_key_matches(presented: Optional[str], expected: Optional[str]) -> bool:
    """Constant-time comparison of a presented key against the configured one."""
    if not presented or not expected:
        return False
    return hmac.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))
