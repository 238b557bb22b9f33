from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class SessionClaims(BaseModel):
    """Identity asserted by a session token"""

    id: str
    email: str
    first_name: str
    last_name: str
    color: str
    is_admin: bool


class ITokenIssuer(ABC):
    """Signs and verifies session tokens"""

    @abstractmethod
    def issue(self, claims: SessionClaims) -> str:
        """Sign claims into a token string"""
        pass

    @abstractmethod
    def verify(self, token: str) -> Optional[SessionClaims]:
        """Decode a token, None if the signature or expiry check fails"""
        pass
