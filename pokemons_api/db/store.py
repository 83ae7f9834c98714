"""Query executor for the ``pokemons`` table.

Every call checks a connection out of the engine's pool for the duration of
one statement and gives it back, whatever the outcome. Driver errors and
rejected request bodies are re-raised as :class:`StoreOperationFailed`
carrying the original exception; nothing is retried.
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import MetaData, Table, insert, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from ..errors import InvalidPokemonPayload, StoreOperationFailed

logger = logging.getLogger(__name__)

TABLE_NAME = "pokemons"

SELECT_ALL_SQL = text("SELECT * FROM pokemons")
SELECT_BY_ID_SQL = text("SELECT * FROM pokemons WHERE id = :id")
DELETE_BY_ID_SQL = text("DELETE FROM pokemons WHERE id = :id")

LIST_FAILED = "Error occurred while retrieving pokemons."
GET_FAILED = "Error occurred while retrieving pokemon by id."
CREATE_FAILED = "Error occurred while create new pokemon."
UPDATE_FAILED = "Error occurred while updating pokemon."
DELETE_FAILED = "Error occurred while deleting pokemon."

SCALAR_TYPES = (str, int, float, bool, type(None))

Row = Dict[str, Any]


def validate_payload(payload: Mapping[str, Any], writable: List[str]) -> Dict[str, Any]:
    """Check a request body against the writable columns of the table."""
    if not payload:
        raise InvalidPokemonPayload("Request body must set at least one column.")
    unknown = sorted(k for k in payload if k not in writable)
    if unknown:
        raise InvalidPokemonPayload(
            "Request body names columns that cannot be written.",
            {"columns": unknown, "writable": writable},
        )
    non_scalar = sorted(k for k, v in payload.items() if not isinstance(v, SCALAR_TYPES))
    if non_scalar:
        raise InvalidPokemonPayload(
            "Column values must be scalar (string, number, boolean or null).",
            {"columns": non_scalar},
        )
    return dict(payload)


class PokemonStore:

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._table: Optional[Table] = None

    @asynccontextmanager
    async def _failing_as(self, message: str):
        try:
            yield
        except (SQLAlchemyError, InvalidPokemonPayload) as e:
            logger.error("%s %s: %s", message, type(e).__name__, e)
            raise StoreOperationFailed(message, e) from e

    async def table(self) -> Table:
        """Reflect the live table once; a failed reflection is retried on the next write."""
        if self._table is None:
            async with self.engine.connect() as conn:
                self._table = await conn.run_sync(
                    lambda sync_conn: Table(TABLE_NAME, MetaData(), autoload_with=sync_conn)
                )
            logger.info("Reflected columns of %s: %s", TABLE_NAME, list(self._table.columns.keys()))
        return self._table

    async def writable_columns(self) -> List[str]:
        table = await self.table()
        return [c.name for c in table.columns if not c.primary_key]

    async def list_all(self) -> List[Row]:
        async with self._failing_as(LIST_FAILED):
            async with self.engine.connect() as conn:
                result = await conn.execute(SELECT_ALL_SQL)
                return [dict(row._mapping) for row in result]

    async def get_by_id(self, pokemon_id: int) -> List[Row]:
        async with self._failing_as(GET_FAILED):
            async with self.engine.connect() as conn:
                result = await conn.execute(SELECT_BY_ID_SQL, {"id": pokemon_id})
                return [dict(row._mapping) for row in result]

    async def create(self, payload: Mapping[str, Any]) -> Row:
        async with self._failing_as(CREATE_FAILED):
            values = validate_payload(payload, await self.writable_columns())
            table = await self.table()
            async with self.engine.begin() as conn:
                await conn.execute(insert(table).values(**values))
        return values

    async def update(self, pokemon_id: int, payload: Mapping[str, Any]) -> Dict[str, int]:
        # rowcount is reported, never checked: a missing id is still a success
        async with self._failing_as(UPDATE_FAILED):
            values = validate_payload(payload, await self.writable_columns())
            table = await self.table()
            async with self.engine.begin() as conn:
                result = await conn.execute(
                    update(table).where(table.c.id == pokemon_id).values(**values)
                )
                return {"affected_rows": result.rowcount, "insert_id": result.lastrowid or 0}

    async def delete(self, pokemon_id: int) -> None:
        async with self._failing_as(DELETE_FAILED):
            async with self.engine.begin() as conn:
                await conn.execute(DELETE_BY_ID_SQL, {"id": pokemon_id})
