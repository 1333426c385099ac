"""PostgreSQL change repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from regwatch.domain.entities import Change, ChangeSummary, Regulation

_SUMMARY_COLUMNS = "c.id, r.id, r.title, r.url, c.detected_at, c.reviewed"


class PostgresChangeRepository:
    """Change repository over regulation, snapshot and regulation_change tables."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_detected_between(
        self, start: datetime, end: datetime
    ) -> list[ChangeSummary]:
        """List changes in [start, end], newest first, id as tie-break."""
        cur = await self._conn.execute(
            f"SELECT {_SUMMARY_COLUMNS} "
            "FROM regulation_change c JOIN regulation r ON r.id = c.regulation_id "
            "WHERE c.detected_at >= %s AND c.detected_at <= %s "
            "ORDER BY c.detected_at DESC, c.id ASC",
            (start, end),
        )
        rows = await cur.fetchall()
        return [_summary_from_row(r) for r in rows]

    async def get_by_id(self, change_id: UUID) -> Change | None:
        """Get change with prior/current snapshot content."""
        cur = await self._conn.execute(
            "SELECT c.id, r.id, r.title, r.url, c.detected_at, "
            "COALESCE(ps.content, ''), cs.content, c.reviewed "
            "FROM regulation_change c "
            "JOIN regulation r ON r.id = c.regulation_id "
            "JOIN snapshot cs ON cs.id = c.current_snapshot_id "
            "LEFT JOIN snapshot ps ON ps.id = c.prior_snapshot_id "
            "WHERE c.id = %s",
            (change_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Change(
            id=r[0],
            regulation=Regulation(id=r[1], title=r[2], url=r[3]),
            detected_at=r[4],
            old_content=r[5],
            new_content=r[6],
            reviewed=r[7],
        )

    async def mark_reviewed(self, change_id: UUID) -> bool:
        """Set reviewed flag; no-op on already reviewed rows."""
        cur = await self._conn.execute(
            "UPDATE regulation_change SET reviewed = TRUE, reviewed_at = NOW() "
            "WHERE id = %s AND NOT reviewed",
            (change_id,),
        )
        return cur.rowcount == 1

    async def get_summary(self, change_id: UUID) -> ChangeSummary | None:
        cur = await self._conn.execute(
            f"SELECT {_SUMMARY_COLUMNS} "
            "FROM regulation_change c JOIN regulation r ON r.id = c.regulation_id "
            "WHERE c.id = %s",
            (change_id,),
        )
        r = await cur.fetchone()
        return _summary_from_row(r) if r else None


def _summary_from_row(r: tuple) -> ChangeSummary:
    return ChangeSummary(
        id=r[0],
        regulation_id=r[1],
        regulation_title=r[2],
        regulation_url=r[3],
        detected_at=r[4],
        reviewed=r[5],
    )
