"""
Team membership resolution.
"""

from app.features.team_event_types.domain import TeamNotFound
from app.infrastructure.observability.logging import get_logger

from .interfaces import TeamStore

logger = get_logger(__name__)


class TeamMembershipResolver:
    def __init__(self, team_store: TeamStore):
        self.team_store = team_store

    async def all_member_ids(self, team_id: int) -> list[int]:
        """
        Member ids that can be attached to the team's event types.

        Platform-created teams leave out the OAuth client account that
        created them: its membership is administrative, not bookable.
        """
        team = await self.team_store.get_by_id(team_id)
        if team is None:
            raise TeamNotFound(team_id)

        if team.is_platform_created:
            member_ids = await self.team_store.get_managed_member_ids(team_id)
        else:
            member_ids = await self.team_store.get_member_ids(team_id)

        logger.debug(
            "Resolved team members",
            team_id=team_id,
            platform_team=team.is_platform_created,
            member_count=len(member_ids),
        )
        return list(member_ids)
