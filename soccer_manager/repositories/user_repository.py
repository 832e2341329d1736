"""User Repository — account lookups for provisioning and identity checks."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from soccer_manager.core.domain_types import UserId
from soccer_manager.core.entities import User
from soccer_manager.core.errors import ConflictError, UserNotFoundError
from soccer_manager.infrastructure.database import map_db_errors
from soccer_manager.models.user import User as UserModel


def _to_entity(row: UserModel) -> User:
    return User(
        id=UserId(row.id),
        email=row.email,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class UserSqlRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, email: str, password_hash: str) -> User:
        with map_db_errors("users.create"):
            row = UserModel(email=email, password_hash=password_hash)
            self.db.add(row)
            try:
                await self.db.flush()
            except IntegrityError as e:
                raise ConflictError(
                    f"User '{email}' already exists", "USER_ALREADY_EXISTS",
                ) from e
            return _to_entity(row)

    async def get_by_id(self, user_id: UserId) -> User:
        with map_db_errors("users.get_by_id"):
            row = await self.db.get(UserModel, user_id)
        if row is None:
            raise UserNotFoundError(user_id)
        return _to_entity(row)

    async def get_by_email(self, email: str) -> User:
        with map_db_errors("users.get_by_email"):
            result = await self.db.execute(
                select(UserModel).where(UserModel.email == email),
            )
            row = result.scalar_one_or_none()
        if row is None:
            raise UserNotFoundError(email)
        return _to_entity(row)
