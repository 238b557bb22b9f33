"""
Session Cookie

Writes and clears the cookie that carries the session token.
"""

from typing import Optional

from fastapi import Request, Response


class SessionCookie:
    """
    Cookie boundary for session tokens.

    The cookie is HttpOnly, Secure and scoped to the whole site. No max-age is
    set; the token's own exp claim bounds the session.
    """

    def __init__(self, name: str):
        self.name = name

    def set(self, response: Response, token: str) -> None:
        response.set_cookie(
            key=self.name,
            value=token,
            httponly=True,
            secure=True,
            path="/",
        )

    def clear(self, response: Response) -> None:
        response.delete_cookie(key=self.name, path="/", secure=True, httponly=True)

    def read(self, request: Request) -> Optional[str]:
        return request.cookies.get(self.name)
