"""
Member profiles used to build managed event type children.
"""

from collections import defaultdict
from collections.abc import Iterable

from app.db.helpers import fetch_all
from app.features.team_event_types.domain import MemberProfile, OwnedEventType


class UsersRepository:
    @classmethod
    async def find_by_ids_with_event_types(cls, user_ids: Iterable[int]) -> list[MemberProfile]:
        """Load users together with the slugs and parents of the event types they own."""

        ids = list(user_ids)
        if not ids:
            return []

        users_query = """
            SELECT id, name, email
            FROM users
            WHERE id = ANY(%s)
            ORDER BY id
        """
        event_types_query = """
            SELECT "userId" AS user_id, slug, "parentId" AS parent_id
            FROM "EventType"
            WHERE "userId" = ANY(%s)
            ORDER BY "userId", position DESC, id
        """

        users = await fetch_all(users_query, (ids,))
        event_types = await fetch_all(event_types_query, (ids,))

        owned: dict[int, list[OwnedEventType]] = defaultdict(list)
        for row in event_types:
            owned[row["user_id"]].append(
                OwnedEventType(slug=row["slug"], parent_id=row.get("parent_id"))
            )

        return [
            MemberProfile(
                id=row["id"],
                name=row.get("name"),
                email=row["email"],
                event_types=owned.get(row["id"], []),
            )
            for row in users
        ]
