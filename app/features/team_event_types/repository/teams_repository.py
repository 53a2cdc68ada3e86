"""
Read access to teams and team memberships.
"""

from app.db.helpers import fetch_all, fetch_one
from app.features.team_event_types.domain import Team
from app.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)


class TeamsRepository:
    """Team and membership lookups."""

    @classmethod
    async def get_by_id(cls, team_id: int) -> Team | None:
        query = """
            SELECT id, name, "createdByOAuthClientId" AS created_by_oauth_client_id
            FROM "Team"
            WHERE id = %s
        """
        row = await fetch_one(query, (team_id,))
        if not row:
            return None

        return Team(
            id=row["id"],
            name=row.get("name"),
            created_by_oauth_client_id=row.get("created_by_oauth_client_id"),
        )

    @classmethod
    async def get_member_ids(cls, team_id: int) -> list[int]:
        """Ids of every accepted member of the team."""

        query = """
            SELECT m."userId" AS user_id
            FROM "Membership" m
            WHERE m."teamId" = %s AND m.accepted = true
            ORDER BY m."userId"
        """
        rows = await fetch_all(query, (team_id,))
        return [row["user_id"] for row in rows]

    @classmethod
    async def get_managed_member_ids(cls, team_id: int) -> list[int]:
        """
        Ids of accepted members that are platform managed users.

        For platform-created teams this leaves out the OAuth client owner who
        created the team.
        """

        query = """
            SELECT m."userId" AS user_id
            FROM "Membership" m
            JOIN users u ON u.id = m."userId"
            WHERE m."teamId" = %s
              AND m.accepted = true
              AND u."isPlatformManaged" = true
            ORDER BY m."userId"
        """
        rows = await fetch_all(query, (team_id,))
        return [row["user_id"] for row in rows]
