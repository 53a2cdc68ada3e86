"""
Calendar connections used to validate event type destination calendars.
"""

from app.db.helpers import fetch_one, fetch_val


class DestinationCalendarsRepository:
    @classmethod
    async def has_connected_calendar(cls, user_id: int, integration: str, external_id: str) -> bool:
        """True when the user has the calendar connected through a valid credential."""

        query = """
            SELECT EXISTS (
                SELECT 1
                FROM "SelectedCalendar" sc
                JOIN "Credential" c ON c.id = sc."credentialId"
                WHERE sc."userId" = %s
                  AND sc.integration = %s
                  AND sc."externalId" = %s
                  AND COALESCE(c.invalid, false) = false
            )
        """
        return bool(await fetch_val(query, (user_id, integration, external_id)))

    @classmethod
    async def get_user_destination_calendar(cls, user_id: int) -> dict | None:
        query = """
            SELECT id, integration, "externalId" AS external_id, "primaryEmail" AS primary_email
            FROM "DestinationCalendar"
            WHERE "userId" = %s
        """
        return await fetch_one(query, (user_id,))
