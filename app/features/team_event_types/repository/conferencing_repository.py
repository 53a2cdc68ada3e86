"""
Installed conferencing apps per team.
"""

from app.db.helpers import fetch_one


class ConferencingRepository:
    @classmethod
    async def get_app(cls, app_slug: str) -> dict | None:
        query = """
            SELECT slug, enabled
            FROM "App"
            WHERE slug = %s
        """
        return await fetch_one(query, (app_slug,))

    @classmethod
    async def get_team_credential(cls, team_id: int, app_slug: str) -> dict | None:
        query = """
            SELECT id, "appId" AS app_id, COALESCE(invalid, false) AS invalid
            FROM "Credential"
            WHERE "teamId" = %s AND "appId" = %s
            ORDER BY id
            LIMIT 1
        """
        return await fetch_one(query, (team_id, app_slug))
