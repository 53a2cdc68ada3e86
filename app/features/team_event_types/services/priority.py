"""
Host priority labels to ordinal weights.
"""

from app.features.team_event_types.domain import HostPriority, InvalidPriorityLabel

PRIORITY_WEIGHTS: dict[str, int] = {
    HostPriority.LOWEST.value: 0,
    HostPriority.LOW.value: 1,
    HostPriority.MEDIUM.value: 2,
    HostPriority.HIGH.value: 3,
    HostPriority.HIGHEST.value: 4,
}

DEFAULT_PRIORITY = HostPriority.MEDIUM
DEFAULT_PRIORITY_WEIGHT = PRIORITY_WEIGHTS[DEFAULT_PRIORITY.value]


def normalize_priority(label: HostPriority | str) -> int:
    """
    Map a priority label to its weight (lowest=0 .. highest=4).

    Raises:
        InvalidPriorityLabel: label is not one of the five known priorities.
            Request validation constrains labels, so this is a caller bug.
    """
    key = label.value if isinstance(label, HostPriority) else label
    try:
        return PRIORITY_WEIGHTS[key]
    except (KeyError, TypeError):
        raise InvalidPriorityLabel(label) from None
