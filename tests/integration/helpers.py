from typing import Optional

from httpx import AsyncClient, Response

from config import ApplicationConfig

COOKIE_NAME = ApplicationConfig.SESSION_COOKIE_NAME

REGISTER_FORM = {
    "email": "a@x.com",
    "firstName": "A",
    "lastName": "B",
    "password": "password123",
    "confirmPassword": "password123",
}


def session_set_cookie(response: Response) -> Optional[str]:
    """Raw Set-Cookie header for the session cookie, if any"""
    for header in response.headers.get_list("set-cookie"):
        if header.startswith(f"{COOKIE_NAME}="):
            return header
    return None


def session_token(response: Response) -> Optional[str]:
    header = session_set_cookie(response)
    if header is None:
        return None
    return header.split(";", 1)[0].split("=", 1)[1].strip('"')


def cookie_header(token: str) -> dict:
    return {"Cookie": f"{COOKIE_NAME}={token}"}


async def register(client: AsyncClient, **overrides) -> Response:
    return await client.post("/auth/register", data={**REGISTER_FORM, **overrides})
