from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ...domain.errors import InvalidOrExpiredToken

_bearer_scheme = HTTPBearer(auto_error=False)


def require_bearer_token(
    credentials: HTTPAuthorizationCredentials = Depends(_bearer_scheme),
) -> str:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise InvalidOrExpiredToken("Missing bearer token.")
    return credentials.credentials
