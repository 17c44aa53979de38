"""UnitOfWorkProtocol - transaction scope for multi-step writes.

Registration (account + profile + preferences) and reset confirmation
(ticket consumption + password update) run inside ``begin()``: every write in
the block is released together on success and rolled back together when any
step raises.
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol


class UnitOfWorkProtocol(Protocol):
    """Protocol for an explicit transaction scope.

    Implementations:
        - SqlAlchemyUnitOfWork: src/infrastructure/persistence/unit_of_work.py

    Usage:
        async with uow.begin():
            await account_repo.create(...)
            await profile_repo.create(...)
    """

    def begin(self) -> AbstractAsyncContextManager[None]:
        """Open a transaction scope.

        Returns:
            Async context manager; exceptions inside roll the scope back.
        """
        ...
