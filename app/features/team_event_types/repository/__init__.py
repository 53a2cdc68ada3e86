"""
Read-only persistence for team event type resolution.
"""

from .calendars_repository import DestinationCalendarsRepository
from .conferencing_repository import ConferencingRepository
from .event_types_repository import TeamEventTypesRepository
from .teams_repository import TeamsRepository
from .users_repository import UsersRepository

__all__ = [
    "ConferencingRepository",
    "DestinationCalendarsRepository",
    "TeamEventTypesRepository",
    "TeamsRepository",
    "UsersRepository",
]
