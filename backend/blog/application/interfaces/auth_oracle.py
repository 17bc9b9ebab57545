"""Port for bearer-credential verification (token issuance lives elsewhere)."""

from abc import ABC, abstractmethod


class AuthOracle(ABC):

    @abstractmethod
    def verify(self, credential: str) -> int | None:
        """Return the authenticated user id, or None to reject."""
        ...
