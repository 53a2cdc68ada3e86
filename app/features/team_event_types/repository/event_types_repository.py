"""
Read access to team event types.
"""

from app.db.helpers import fetch_one
from app.features.team_event_types.domain import SchedulingType, TeamEventTypeRecord


class TeamEventTypesRepository:
    """Team-scoped event type lookups."""

    SELECT_COLUMNS = """
        et.id, et."teamId" AS team_id, et.slug, et."schedulingType" AS scheduling_type,
        COALESCE(
            (SELECT array_agg(c."userId" ORDER BY c.id)
             FROM "EventType" c
             WHERE c."parentId" = et.id),
            ARRAY[]::integer[]
        ) AS child_owner_ids
    """

    @classmethod
    def _row_to_record(cls, row: dict | None) -> TeamEventTypeRecord | None:
        if not row:
            return None

        scheduling_type = row.get("scheduling_type")
        return TeamEventTypeRecord(
            id=row["id"],
            team_id=row["team_id"],
            slug=row["slug"],
            scheduling_type=SchedulingType(scheduling_type) if scheduling_type else None,
            child_owner_ids=list(row.get("child_owner_ids") or []),
        )

    @classmethod
    async def find_by_slug(cls, team_id: int, slug: str) -> TeamEventTypeRecord | None:
        query = f"""
            SELECT {cls.SELECT_COLUMNS}
            FROM "EventType" et
            WHERE et."teamId" = %s AND et.slug = %s
        """
        row = await fetch_one(query, (team_id, slug))
        return cls._row_to_record(row)

    @classmethod
    async def get_by_id(cls, team_id: int, event_type_id: int) -> TeamEventTypeRecord | None:
        """Return the team's event type with the owners of its managed children."""

        query = f"""
            SELECT {cls.SELECT_COLUMNS}
            FROM "EventType" et
            WHERE et."teamId" = %s AND et.id = %s
        """
        row = await fetch_one(query, (team_id, event_type_id))
        return cls._row_to_record(row)
