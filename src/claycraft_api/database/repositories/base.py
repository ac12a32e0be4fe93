"""Base repository class for the Clay Craft API."""

from abc import ABC
from abc import abstractmethod
from typing import Any
from typing import Generic
from typing import TypeVar
from uuid import UUID

from asyncpg import Record

from claycraft_api.database.connection import get_db_connection

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """Table-bound repository over the shared asyncpg pool.

    Subclasses write their own SQL and run it through the ``_fetch_*``
    helpers, which convert rows with ``_record_to_model``.
    """

    def __init__(self, table_name: str):
        self.table_name = table_name

    @abstractmethod
    def _record_to_model(self, record: Record) -> T:
        """Convert database record to model instance."""

    async def _fetch_one(self, query: str, *args: Any) -> T | None:
        async with get_db_connection() as connection:
            record = await connection.fetchrow(query, *args)
        return self._record_to_model(record) if record else None

    async def _fetch_many(self, query: str, *args: Any) -> list[T]:
        records = await self._fetch_rows(query, *args)
        return [self._record_to_model(record) for record in records]

    async def _fetch_rows(self, query: str, *args: Any) -> list[Record]:
        """Run a query whose rows do not map onto ``T`` (joins, projections)."""
        async with get_db_connection() as connection:
            return await connection.fetch(query, *args)

    async def _fetch_value(self, query: str, *args: Any) -> Any:
        async with get_db_connection() as connection:
            return await connection.fetchval(query, *args)

    async def get_by_pk(self, pk: UUID) -> T | None:
        """Get a record by primary key."""
        return await self._fetch_one(
            f"SELECT * FROM {self.table_name} WHERE pk = $1",  # nosec B608
            pk,
        )

    async def exists(self, pk: UUID) -> bool:
        """Check if a record exists by primary key."""
        query = f"SELECT EXISTS(SELECT 1 FROM {self.table_name} WHERE pk = $1)"  # nosec B608
        return bool(await self._fetch_value(query, pk))

    async def get_latest(self, limit: int = 100, offset: int = 0) -> list[T]:
        """Get records newest first."""
        query = f"""
            SELECT * FROM {self.table_name}
            ORDER BY created_at DESC
            LIMIT $1 OFFSET $2
        """  # nosec B608
        return await self._fetch_many(query, limit, offset)

    async def count_where(self, where_clause: str, *params: Any) -> int:
        """Count rows matching a parameterized condition."""
        query = f"SELECT COUNT(*) FROM {self.table_name} WHERE {where_clause}"  # nosec B608
        return await self._fetch_value(query, *params) or 0

    async def insert(self, data: dict[str, Any]) -> T:
        """Insert a row and return it."""
        columns = ", ".join(data)
        placeholders = ", ".join(f"${i}" for i in range(1, len(data) + 1))
        query = f"""
            INSERT INTO {self.table_name} ({columns})
            VALUES ({placeholders})
            RETURNING *
        """  # nosec B608

        created = await self._fetch_one(query, *data.values())
        if created is None:
            raise ValueError(f"Failed to create record in {self.table_name}")
        return created

    async def update_fields(self, pk: UUID, data: dict[str, Any]) -> T | None:
        """Set columns on one row and bump ``updated_at``."""
        assignments = [f"{column} = ${i}" for i, column in enumerate(data, start=1)]
        assignments.append("updated_at = NOW()")
        query = f"""
            UPDATE {self.table_name}
            SET {", ".join(assignments)}
            WHERE pk = ${len(data) + 1}
            RETURNING *
        """  # nosec B608
        return await self._fetch_one(query, *data.values(), pk)

    async def find_by(self, **filters: Any) -> list[T]:
        """Find rows by column equality, newest first."""
        conditions = [f"{field} = ${i}" for i, field in enumerate(filters, start=1)]
        query = f"""
            SELECT * FROM {self.table_name}
            WHERE {" AND ".join(conditions)}
            ORDER BY created_at DESC
        """  # nosec B608
        return await self._fetch_many(query, *filters.values())
