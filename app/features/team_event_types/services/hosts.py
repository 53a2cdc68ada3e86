"""
Host list transformation and validation.
"""

from collections.abc import Iterable

from app.features.team_event_types.domain import (
    HostAssignment,
    HostInput,
    InvalidHosts,
    SchedulingType,
)
from app.infrastructure.observability.logging import get_logger

from .membership import TeamMembershipResolver
from .priority import DEFAULT_PRIORITY, DEFAULT_PRIORITY_WEIGHT, normalize_priority

logger = get_logger(__name__)

DEFAULT_IS_FIXED = False


def transform_hosts(
    hosts: list[HostInput] | None, scheduling_type: SchedulingType | None
) -> list[HostAssignment] | None:
    """
    Turn requested hosts into host assignments.

    Input order is kept and duplicate user ids pass through untouched.
    Returns None when no hosts were requested.
    """
    if hosts is None:
        return None

    assignments = [
        HostAssignment(
            member_id=host.user_id,
            is_fixed=host.mandatory if host.mandatory is not None else DEFAULT_IS_FIXED,
            priority=normalize_priority(host.priority or DEFAULT_PRIORITY),
        )
        for host in hosts
    ]
    return apply_scheduling_policy(assignments, scheduling_type)


def apply_scheduling_policy(
    assignments: list[HostAssignment], scheduling_type: SchedulingType | None
) -> list[HostAssignment]:
    """Collective event types make every host fixed with medium priority."""
    if scheduling_type != SchedulingType.COLLECTIVE:
        return assignments

    return [
        HostAssignment(
            member_id=assignment.member_id, is_fixed=True, priority=DEFAULT_PRIORITY_WEIGHT
        )
        for assignment in assignments
    ]


def hosts_for_members(
    member_ids: Iterable[int], scheduling_type: SchedulingType | None
) -> list[HostAssignment]:
    """Host assignments for "assign all team members"."""
    assignments = [
        HostAssignment(member_id=member_id, is_fixed=DEFAULT_IS_FIXED, priority=DEFAULT_PRIORITY_WEIGHT)
        for member_id in member_ids
    ]
    return apply_scheduling_policy(assignments, scheduling_type)


class HostValidator:
    def __init__(self, membership: TeamMembershipResolver):
        self.membership = membership

    async def validate(self, team_id: int, hosts: list[HostInput] | None) -> None:
        """
        Reject hosts that are not members of the team.

        Raises:
            InvalidHosts: naming every offending user id in request order.
        """
        if not hosts:
            return

        member_ids = set(await self.membership.all_member_ids(team_id))
        invalid_ids = [host.user_id for host in hosts if host.user_id not in member_ids]

        if invalid_ids:
            logger.warning("Hosts are not team members", team_id=team_id, invalid_ids=invalid_ids)
            raise InvalidHosts(team_id, invalid_ids)
