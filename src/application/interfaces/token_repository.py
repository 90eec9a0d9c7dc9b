from abc import ABC, abstractmethod

from src.domain.entities.auth_token import AuthToken


class TokenRepository(ABC):
    """Read-only port onto the token table owned by the accounts subsystem."""

    @abstractmethod
    async def get_by_token(self, token: str) -> AuthToken | None:
        ...
