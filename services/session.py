"""Session cookie issuance built on Flask-JWT-Extended."""

from __future__ import annotations

from flask import Response
from flask_jwt_extended import create_access_token, set_access_cookies, unset_jwt_cookies

from config import AuthSettings


class SessionIssuer:
    """Mint signed session tokens and carry them in the ``token`` cookie.

    Tokens are HS256 JWTs signed with ``JWT_SECRET_KEY``. Cookie flags come
    from the ``JWT_COOKIE_*`` settings: always HttpOnly, ``SameSite=Strict``
    and ``Secure`` in production. There is no revocation list, a session
    ends when its ``exp`` claim passes or the client drops the cookie.
    """

    def __init__(self, settings: AuthSettings):
        self.settings = settings

    def issue(self, identity: int | str) -> str:
        """Return a signed token bound to ``identity`` for the session lifetime."""

        return create_access_token(
            identity=str(identity),
            expires_delta=self.settings.session_ttl,
        )

    def attach(self, response: Response, token: str) -> None:
        max_age = int(self.settings.session_ttl.total_seconds())
        set_access_cookies(response, token, max_age=max_age)

    def clear(self, response: Response) -> None:
        unset_jwt_cookies(response)
