"""SQLAlchemy unit of work (adapter for UnitOfWorkProtocol).

Wraps a block of repository writes in a SAVEPOINT on the request session.
Exceptions raised inside the block roll back every write made in it; the
outer request transaction is left usable.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession


class SqlAlchemyUnitOfWork:
    """Transaction scope over a single AsyncSession.

    Usage:
        uow = SqlAlchemyUnitOfWork(session)
        async with uow.begin():
            await account_repo.create(...)
            await profile_repo.create(...)
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[None]:
        async with self._session.begin_nested():
            yield
