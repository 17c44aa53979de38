"""Database persistence infrastructure.

- BaseModel / BaseMutableModel: declarative bases
- Database: engine and session management
- SqlAlchemyUnitOfWork: SAVEPOINT transaction scope
- models/, repositories/: table mappings and protocol adapters
"""

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "BaseModel",
    "BaseMutableModel",
    "Database",
    "SqlAlchemyUnitOfWork",
]
