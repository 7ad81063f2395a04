"""Turn a render snapshot into numbered walking directions."""

import math
from dataclasses import dataclass

from src.campus_paths.compass import CompassCode, word_for
from src.campus_paths.config import DEFAULT_MAP_CONFIG, MapConfig
from src.campus_paths.models import RenderSnapshot

# Shown instead of directions when there is no path to describe
PLACEHOLDER_PROMPT = "Please select two different buildings to find directions."

# Label printed before the footer in the directions panel and on paper
TOTAL_DISTANCE_LABEL = "Total walking distance: "


@dataclass(frozen=True)
class DirectionsText:
    """Formatted directions, shared as-is by the screen and the printout."""

    header: str = ""
    subheader: str = ""
    body: str = ""
    footer: str = ""

    @property
    def is_empty(self) -> bool:
        """True when there are no directions and the placeholder should show."""
        return self.body == ""


EMPTY_DIRECTIONS = DirectionsText()


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up (2.5 -> 3).

    Matches how distances were always displayed; Python's round() would
    send 2.5 to 2.
    """
    return int(math.floor(value + 0.5))


def estimated_minutes(total_distance: float, walking_speed: float) -> int:
    """Estimated walking time in whole minutes."""
    return round_half_up(total_distance / walking_speed)


def format_step(step_number: int, cost: float, direction: CompassCode | str) -> str:
    """Format one numbered line of the directions body."""
    return f"{step_number}.\t Walk {round_half_up(cost)} feet {word_for(direction)}.\n"


def format_directions(
    snapshot: RenderSnapshot,
    config: MapConfig = DEFAULT_MAP_CONFIG,
) -> DirectionsText:
    """
    Format walking directions for a snapshot.

    Each body line is rounded on its own and the footer rounds the exact
    total, so the footer can differ by a foot or two from the sum of the
    steps.

    Args:
        snapshot: The current render snapshot
        config: Supplies the walking speed

    Returns:
        DirectionsText with all fields empty when total_distance <= 0,
        otherwise header, travel time, numbered steps and total distance.
    """
    if snapshot.total_distance <= 0:
        return EMPTY_DIRECTIONS

    minutes = estimated_minutes(snapshot.total_distance, config.walking_speed)
    unit = "minute" if minutes <= 1 else "minutes"

    body = "".join(
        format_step(step_number, segment.cost, segment.direction)
        for step_number, segment in enumerate(snapshot.path, start=1)
    )

    return DirectionsText(
        header=f"{snapshot.start_name} to {snapshot.end_name}",
        subheader=f"estimated travel time: {minutes} {unit}",
        body=body,
        footer=f"{round_half_up(snapshot.total_distance)} feet",
    )


def render_panel(directions: DirectionsText) -> str:
    """
    Lay out directions for the on-screen panel.

    Shows the placeholder prompt under the (empty) header when there is
    nothing to display.
    """
    if directions.is_empty:
        return f"{directions.header}\n{PLACEHOLDER_PROMPT}\n"
    return (
        f"{directions.header}\n"
        f"{'-' * max(len(directions.header), 1)}\n"
        f"{directions.subheader}\n"
        f"{directions.body}"
        f"{TOTAL_DISTANCE_LABEL}{directions.footer}\n"
    )


def render_printable(directions: DirectionsText) -> str:
    """
    Lay out directions for printing or export.

    Uses the given DirectionsText fields verbatim; nothing is reformatted.
    Returns an empty string when there are no directions to print.
    """
    if directions.is_empty:
        return ""
    return (
        f"{directions.header}\n"
        f"{directions.subheader}\n"
        f"\n"
        f"{directions.body}"
        f"\n"
        f"{TOTAL_DISTANCE_LABEL}{directions.footer}\n"
    )
