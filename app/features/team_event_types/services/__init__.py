"""
Service layer for team event types.
"""

from .conferencing_service import ConferencingService, conferencing_service
from .generic_input_service import InputEventTypesService, input_event_types_service
from .hosts import HostValidator, apply_scheduling_policy, hosts_for_members, transform_hosts
from .input_service import TeamEventTypeInputService, team_event_type_input_service
from .locations import LocationResolver, transform_locations
from .managed_children import ManagedChildPropagator
from .membership import TeamMembershipResolver
from .priority import normalize_priority

__all__ = [
    "ConferencingService",
    "conferencing_service",
    "HostValidator",
    "InputEventTypesService",
    "input_event_types_service",
    "LocationResolver",
    "ManagedChildPropagator",
    "TeamEventTypeInputService",
    "team_event_type_input_service",
    "TeamMembershipResolver",
    "apply_scheduling_policy",
    "hosts_for_members",
    "normalize_priority",
    "transform_hosts",
    "transform_locations",
]
