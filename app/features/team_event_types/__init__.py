"""
Team event types feature package.

Resolves create and update requests for team event types into validated
configurations (hosts, managed children, locations, metadata). Domain
models, read-only repositories and services live side by side here.
"""

# Re-export the primary building blocks for easy access.
from .domain.inputs import CreateTeamEventTypeInput, UpdateTeamEventTypeInput  # noqa: F401
from .domain.models import ResolvedTeamEventType  # noqa: F401
from .services.input_service import (  # noqa: F401
    TeamEventTypeInputService,
    team_event_type_input_service,
)
