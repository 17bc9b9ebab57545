"""Auth oracle that accepts one configured bearer token."""

import hmac

from blog.application.interfaces import AuthOracle


class StaticTokenAuthOracle(AuthOracle):
    """Maps a single shared secret to a fixed user id. An empty token rejects everything."""

    def __init__(self, token: str, user_id: int = 1):
        self._token = token
        self._user_id = user_id

    def verify(self, credential: str) -> int | None:
        if not self._token or not credential:
            return None
        if hmac.compare_digest(credential.encode("utf-8"), self._token.encode("utf-8")):
            return self._user_id
        return None
