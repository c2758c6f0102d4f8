from __future__ import annotations

from typing import Any, Mapping, Optional

from jose import ExpiredSignatureError, JWTError, jwt


class AuthError(Exception):
    pass


class ExpiredTokenError(AuthError):
    pass


def parse_bearer(
    headers: Mapping[str, str],
    query_params: Optional[Mapping[str, Any]] = None,
    cookies: Optional[Mapping[str, str]] = None,
    cookie_name: Optional[str] = None,
) -> Optional[str]:
    """Parse a Bearer token from HTTP headers, query params or a cookie.

    - Looks for Authorization: Bearer <token>
    - Falls back to query param `token`
    - Then to the named cookie, when one is given
    """
    # headers are case-insensitive in ASGI frameworks but presented as a case-preserving mapping
    auth = headers.get("authorization") or headers.get("Authorization")
    if auth:
        parts = auth.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
    if query_params is not None:
        token = query_params.get("token")  # type: ignore[index]
        if isinstance(token, str) and token:
            return token
    if cookies is not None and cookie_name:
        token = cookies.get(cookie_name)
        if token:
            return token
    return None


def encode_jwt(claims: Mapping[str, Any], *, secret: str, algorithm: str = "HS256") -> str:
    return jwt.encode(dict(claims), secret, algorithm=algorithm)


def decode_jwt(
    token: str,
    *,
    secret: str,
    algorithm: str,
    leeway: int = 0,
) -> dict:
    """Decode and verify a JWT signature and expiry.

    Tokens without an `exp` claim are rejected. Raises ExpiredTokenError
    for expired tokens and AuthError for every other failure.
    """
    options = {
        "verify_signature": True,
        "verify_exp": True,
        "verify_aud": False,
        "verify_iss": False,
        "require_exp": True,
        "leeway": leeway,
    }
    try:
        return jwt.decode(token, secret, algorithms=[algorithm], options=options)
    except ExpiredSignatureError as e:
        raise ExpiredTokenError(str(e))
    except JWTError as e:
        raise AuthError(str(e))
