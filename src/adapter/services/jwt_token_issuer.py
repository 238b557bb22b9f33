from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt
from pydantic import ValidationError

from src.app.services.token_issuer import ITokenIssuer, SessionClaims


class JwtTokenIssuer(ITokenIssuer):
    """
    Session tokens as signed JWTs (python-jose).

    Args:
        secret: Signing key
        algorithm: JWS algorithm, HS256 by default
        expires_minutes: Lifetime of issued tokens; 0 or less issues tokens
            without an exp claim
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 0):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    def issue(self, claims: SessionClaims) -> str:
        now = datetime.now(UTC)
        payload = {
            "sub": claims.id,
            "email": claims.email,
            "first_name": claims.first_name,
            "last_name": claims.last_name,
            "color": claims.color,
            "is_admin": claims.is_admin,
            "iat": now,
        }
        if self.expires_minutes > 0:
            payload["exp"] = now + timedelta(minutes=self.expires_minutes)
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Optional[SessionClaims]:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError:
            return None

        try:
            return SessionClaims(
                id=payload.get("sub"),
                email=payload.get("email"),
                first_name=payload.get("first_name"),
                last_name=payload.get("last_name"),
                color=payload.get("color"),
                is_admin=payload.get("is_admin"),
            )
        except ValidationError:
            return None
