"""Database access over an aiomysql connection pool."""
import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence

import aiomysql
from fastapi import Request

logger = logging.getLogger(__name__)

PLACEHOLDER = "%s"


class QueryError(Exception):
    """Raised when a query cannot be executed against the data store."""


class Database:
    """
    Executes parameterized queries against MySQL.

    Built once at application startup and closed on shutdown. The pool is
    created lazily, so the service keeps answering (with errors) while the
    database is unreachable.

    Usage:
        db = Database(settings.db_config)
        rows = await db.execute("SELECT * FROM fund_data WHERE ticker = %s", ("ACME",))
    """

    def __init__(self, config: Dict[str, Any], minsize: int = 1, maxsize: int = 10):
        self._config = dict(config)
        self._minsize = minsize
        self._maxsize = maxsize
        self._pool: Optional[aiomysql.Pool] = None
        self._pool_lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def _get_pool(self) -> aiomysql.Pool:
        if self._pool is not None:
            return self._pool
        async with self._pool_lock:
            if self._pool is None:
                try:
                    self._pool = await aiomysql.create_pool(
                        minsize=self._minsize,
                        maxsize=self._maxsize,
                        **self._config
                    )
                except (aiomysql.Error, OSError) as e:
                    raise QueryError(f"Could not connect to database: {e}") from e
                logger.info("Connection pool created (min=%d, max=%d)", self._minsize, self._maxsize)
        return self._pool

    async def connect(self) -> None:
        """Create the pool up front; an unreachable database is logged, not fatal."""
        try:
            await self._get_pool()
        except QueryError as e:
            logger.warning("%s. Queries will fail until it is reachable.", e)

    async def execute(self, query: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """Run a query with bound parameters and return all rows as dicts."""
        params = tuple(params)
        expected = query.count(PLACEHOLDER)
        if expected != len(params):
            raise QueryError(
                f"Query expects {expected} parameter(s), got {len(params)}"
            )

        pool = await self._get_pool()
        try:
            async with pool.acquire() as conn:
                async with conn.cursor(aiomysql.DictCursor) as cursor:
                    await cursor.execute(query, params)
                    rows = await cursor.fetchall()
        except (aiomysql.Error, OSError) as e:
            raise QueryError(f"Database error: {e}") from e
        return list(rows)

    async def close(self) -> None:
        """Close the pool and release all connections."""
        if self._pool is None:
            return
        pool, self._pool = self._pool, None
        pool.close()
        await pool.wait_closed()
        logger.info("Connection pool closed")


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the application's Database."""
    return request.app.state.db
