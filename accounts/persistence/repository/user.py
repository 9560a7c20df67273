"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import asc, delete, desc, exists, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.application import error
from accounts.domain.model import User
from accounts.domain.repository import Page, PageParameters, UserRepository
from accounts.domain.value import Email, UserId
from accounts.persistence.mappers import row_to_user, user_to_dict
from accounts.persistence.tables import SORTABLE_COLUMNS, users_table

EMAIL_CONSTRAINT = "uq_users_email"


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_repository.find_by_id", user_id=str(user_id)):
            stmt = select(users_table).where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for, compared as stored

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email.value)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def exists_by_id(self, user_id: UserId) -> bool:
        stmt = select(exists().where(users_table.c.id == user_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def exists_by_email(self, email: Email) -> bool:
        stmt = select(exists().where(users_table.c.email == email.value))
        result = await self.session.execute(stmt)
        exists_ = bool(result.scalar())
        logfire.debug("Email existence check", exists=exists_)
        return exists_

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user as stored, with its id

        Raises:
            DuplicateEmailError: If the email belongs to another user
        """
        user_dict = user_to_dict(user)

        if user.id is None:
            stmt = users_table.insert().values(**user_dict).returning(users_table)
        else:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
                .returning(users_table)
            )

        # Savepoint: a constraint error rolls back only this statement
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
                row = result.mappings().first()
        except IntegrityError as e:
            if EMAIL_CONSTRAINT in str(e.orig):
                logfire.warn("Email uniqueness violated on save")
                raise error.duplicate_email(user.email.value) from e
            raise

        if row is None:
            # Update matched nothing; the user was removed concurrently
            raise error.entity_not_found("User", "id", str(user.id), "save")
        return row_to_user(dict(row))

    async def find_all(self, parameters: PageParameters) -> Page[User]:
        """Find one page of users ordered by a whitelisted column."""
        with logfire.span(
            "user_repository.find_all",
            page=parameters.page,
            size=parameters.size,
            order_by=parameters.order_by,
        ):
            count_result = await self.session.execute(
                select(func.count()).select_from(users_table)
            )
            total = count_result.scalar_one()

            column = SORTABLE_COLUMNS[parameters.order_by]
            ordering = desc(column) if parameters.descending else asc(column)
            stmt = (
                select(users_table)
                # id as tie-breaker keeps pages stable
                .order_by(ordering, users_table.c.id)
                .limit(parameters.size)
                .offset(parameters.offset)
            )
            result = await self.session.execute(stmt)
            users = [row_to_user(dict(row)) for row in result.mappings().all()]

            logfire.info("Found users", count=len(users), total=total)
            return Page.build(users, total, parameters)

    async def delete(self, user_id: UserId) -> None:
        """Delete a user (hard delete)."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        await self.session.execute(stmt)
        await self.session.flush()
