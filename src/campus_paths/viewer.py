"""Plotly-based display of a rendered campus map frame."""

import plotly.graph_objects as go

from src.campus_paths.directions import TOTAL_DISTANCE_LABEL, PLACEHOLDER_PROMPT, DirectionsText
from src.campus_paths.renderer import Surface
from src.campus_paths.transform import ViewTransform


def create_figure(
    frame: Surface,
    transform: ViewTransform,
    directions: DirectionsText | None = None,
    title: str = "Campus Map",
) -> go.Figure:
    """
    Create an interactive Plotly figure showing a rendered frame.

    The frame's pixels are shown unchanged; the view transform only decides
    which part of them is in view (the axis ranges).

    Args:
        frame: Surface produced by OverlayRenderer.redraw
        transform: Current viewport
        directions: Directions for the same snapshot, summarised in the title
        title: Figure title used when there are no directions

    Returns:
        Plotly Figure object ready for display
    """
    fig = go.Figure()

    fig.add_trace(
        go.Image(
            z=frame.to_array(),
            colormodel="rgba",
            hoverinfo="x+y",
            name="Campus Map",
        )
    )

    if directions is not None and not directions.is_empty:
        title = f"{directions.header}<br><sup>{directions.subheader}</sup>"
        _add_directions_annotation(fig, directions)
    elif directions is not None:
        title = PLACEHOLDER_PROMPT

    fig.update_layout(
        title=title,
        xaxis=dict(visible=False, constrain="domain"),
        # y grows downward in image space
        yaxis=dict(visible=False, scaleanchor="x", autorange=False),
        dragmode="pan",
        margin=dict(l=0, r=0, t=80, b=0),
    )
    apply_transform(fig, transform, frame.size)

    return fig


def apply_transform(fig: go.Figure, transform: ViewTransform, size: tuple[int, int]) -> go.Figure:
    """Point the figure's axes at the transform's visible window."""
    width, height = size
    window = transform.visible_window(width, height)
    fig.update_xaxes(range=[window.x0, window.x1])
    fig.update_yaxes(range=[window.y1, window.y0])
    return fig


def follow_transform(fig: go.Figure, transform: ViewTransform, size: tuple[int, int]) -> None:
    """Keep the figure's view in step with every later change to transform."""
    transform.subscribe(lambda changed: apply_transform(fig, changed, size))


def _add_directions_annotation(fig: go.Figure, directions: DirectionsText) -> None:
    """Add the numbered steps and total distance as a side annotation."""
    steps = directions.body.rstrip("\n").replace("\t", "").replace("\n", "<br>")
    fig.add_annotation(
        text=f"{steps}<br><b>{TOTAL_DISTANCE_LABEL}</b>{directions.footer}",
        xref="paper",
        yref="paper",
        x=1.0,
        y=1.0,
        xanchor="right",
        yanchor="top",
        align="left",
        showarrow=False,
        bgcolor="rgba(255, 255, 255, 0.85)",
        bordercolor="rgb(75, 46, 131)",
        font=dict(size=12, color="black"),
    )


def show_figure(fig: go.Figure) -> None:
    """Display figure in browser."""
    fig.show()


def export_html(fig: go.Figure, output_path: str) -> None:
    """Export figure as standalone HTML file."""
    fig.write_html(output_path, include_plotlyjs=True, full_html=True)
