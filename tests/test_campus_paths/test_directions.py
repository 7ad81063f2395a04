"""Tests for the directions formatter (pure functions)."""

from dataclasses import replace

import pytest

from src.campus_paths.compass import CompassCode
from src.campus_paths.config import MapConfig
from src.campus_paths.directions import (
    EMPTY_DIRECTIONS,
    PLACEHOLDER_PROMPT,
    DirectionsText,
    estimated_minutes,
    format_directions,
    format_step,
    render_panel,
    render_printable,
    round_half_up,
)
from src.campus_paths.models import Coordinate, PathSegment, RenderSnapshot


def make_path(*costs, direction=CompassCode.N):
    """Build a path of consecutive segments with the given costs."""
    return tuple(
        PathSegment(Coordinate(0, i), Coordinate(0, i + 1), cost, direction)
        for i, cost in enumerate(costs)
    )


def make_snapshot(*costs, direction=CompassCode.N):
    return RenderSnapshot(
        start_coord=Coordinate(0, 0),
        end_coord=Coordinate(0, len(costs)),
        start_name="Start Hall",
        end_name="End Hall",
        path=make_path(*costs, direction=direction),
    )


class TestRoundHalfUp:
    """Tests for round_half_up."""

    def test_rounds_down_below_half(self):
        assert round_half_up(50.4) == 50

    def test_half_rounds_up(self):
        """2.5 goes to 3, unlike Python's round()."""
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_integer_unchanged(self):
        assert round_half_up(100.0) == 100


class TestFormatDirectionsEmpty:
    """No path means all four fields are empty."""

    def test_empty_snapshot(self):
        assert format_directions(RenderSnapshot()) == EMPTY_DIRECTIONS

    def test_identical_endpoints(self):
        """Same start and end: names set but no segments."""
        snapshot = RenderSnapshot(
            start_coord=Coordinate(5, 5),
            end_coord=Coordinate(5, 5),
            start_name="Suzzallo Library",
            end_name="Suzzallo Library",
        )
        result = format_directions(snapshot)
        assert result.header == ""
        assert result.subheader == ""
        assert result.body == ""
        assert result.footer == ""

    def test_zero_cost_path(self):
        """A path whose costs sum to zero shows nothing."""
        assert format_directions(make_snapshot(0.0, 0.0)).is_empty


class TestFormatDirections:
    """Tests for formatted output when there is a path."""

    def test_end_to_end_example(self, sample_snapshot):
        """100 ft north then 50.4 ft east."""
        result = format_directions(sample_snapshot)

        assert result.header == (
            "Paul G. Allen Center for Computer Science & Engineering"
            " to Mary Gates Hall (North Entrance)"
        )
        assert result.subheader == "estimated travel time: 1 minute"
        assert result.body == "1.\t Walk 100 feet north.\n2.\t Walk 50 feet east.\n"
        assert result.footer == "150 feet"

    def test_body_has_one_numbered_line_per_segment(self):
        """Step numbers run 1..n in segment order."""
        result = format_directions(make_snapshot(10, 20, 30, 40, 50))
        lines = result.body.splitlines()

        assert len(lines) == 5
        assert [line.split(".")[0] for line in lines] == ["1", "2", "3", "4", "5"]
        assert lines[2] == "3.\t Walk 30 feet north."

    def test_zero_minutes_is_singular(self):
        """A very short walk rounds to 0 minutes and still says 'minute'."""
        result = format_directions(make_snapshot(100))
        assert result.subheader == "estimated travel time: 0 minute"

    def test_two_minutes_is_plural(self):
        result = format_directions(make_snapshot(300, 300))
        assert result.subheader == "estimated travel time: 2 minutes"

    def test_footer_rounded_independently_of_steps(self):
        """Three 10.4 ft steps show 10 each but the total shows 31."""
        result = format_directions(make_snapshot(10.4, 10.4, 10.4))

        assert result.body.count("Walk 10 feet") == 3
        assert result.footer == "31 feet"

    def test_uses_direction_words(self):
        result = format_directions(make_snapshot(12, direction=CompassCode.SW))
        assert result.body == "1.\t Walk 12 feet southwest.\n"

    def test_walking_speed_comes_from_config(self):
        """Overriding the walking speed changes the estimate."""
        slow = replace(MapConfig(), walking_speed=10.0)
        result = format_directions(make_snapshot(100), slow)
        assert result.subheader == "estimated travel time: 10 minutes"

    def test_is_pure(self, sample_snapshot):
        """Formatting twice gives equal results."""
        assert format_directions(sample_snapshot) == format_directions(sample_snapshot)


class TestEstimatedMinutes:
    """Tests for the singular/plural threshold."""

    @pytest.mark.parametrize(
        "distance, minutes",
        [(0.0, 0), (136.0, 0), (150.4, 1), (409.0, 1), (546.0, 2), (2728.0, 10)],
    )
    def test_minutes(self, distance, minutes):
        assert estimated_minutes(distance, 272.8) == minutes


class TestFormatStep:
    def test_format(self):
        assert format_step(7, 12.6, "W") == "7.\t Walk 13 feet west.\n"

    def test_accepts_compass_code(self):
        assert format_step(2, 40.5, CompassCode.NE) == "2.\t Walk 41 feet northeast.\n"


class TestRenderPrintable:
    """The printout carries the on-screen fields unchanged."""

    def test_contains_fields_verbatim(self, sample_snapshot):
        directions = format_directions(sample_snapshot)
        printable = render_printable(directions)

        assert directions.header in printable
        assert directions.subheader in printable
        assert directions.body in printable
        assert printable.rstrip("\n").endswith(directions.footer)

    def test_empty_directions_print_nothing(self):
        assert render_printable(EMPTY_DIRECTIONS) == ""

    def test_no_reformatting(self):
        """Whatever text is passed in is what gets printed."""
        directions = DirectionsText("H", "S", "B\n", "F")
        assert render_printable(directions) == "H\nS\n\nB\n\nTotal walking distance: F\n"


class TestRenderPanel:
    def test_placeholder_when_empty(self):
        assert PLACEHOLDER_PROMPT in render_panel(EMPTY_DIRECTIONS)

    def test_directions_when_present(self, sample_snapshot):
        panel = render_panel(format_directions(sample_snapshot))
        assert PLACEHOLDER_PROMPT not in panel
        assert "Total walking distance: 150 feet" in panel
