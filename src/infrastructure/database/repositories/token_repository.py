from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.token_repository import TokenRepository
from src.domain.entities.auth_token import AuthToken
from src.infrastructure.database.models import TokenModel


class SqlAlchemyTokenRepository(TokenRepository):
    """SQLAlchemy-backed implementation of TokenRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_token(self, token: str) -> AuthToken | None:
        result = await self._session.execute(
            select(TokenModel).where(TokenModel.token == token).limit(1)
        )
        model = result.scalars().first()
        if model is None:
            return None
        return AuthToken(token=model.token, username=model.username, expiry=model.expiry)
