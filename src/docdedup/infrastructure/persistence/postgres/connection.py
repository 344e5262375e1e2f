"""PostgreSQL async connection pool and database probe."""

from psycopg_pool import AsyncConnectionPool


def create_pool(
    conninfo: str, min_size: int = 2, max_size: int = 10, timeout: float = 10.0
) -> AsyncConnectionPool:
    """Create a closed pool named "docdedup".

    DatabaseLifespanMiddleware opens it at ASGI startup. timeout bounds how
    long a unit of work waits for a free connection before psycopg_pool
    raises PoolTimeout.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        timeout=timeout,
        name="docdedup",
        open=False,
    )


async def check_database(pool: AsyncConnectionPool) -> None:
    """Round-trip a trivial query; raises psycopg errors when unreachable."""
    async with pool.connection() as conn:
        await conn.execute("SELECT 1")
