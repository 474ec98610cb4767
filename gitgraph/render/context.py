"""Drawing context protocol - the primitive operations the renderer issues."""

from typing import Protocol


class DrawingContext(Protocol):
    """
    A 2D raster drawing context.

    Modeled on an HTML canvas: paths are accumulated with begin_path and the
    *_to calls, then painted with stroke or fill using the current style.
    Angles are in radians, measured clockwise with y pointing down.
    """

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def begin_path(self) -> None: ...

    def close_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None: ...

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None: ...

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_line_dash(self, dash: list[float]) -> None: ...

    def set_stroke_style(self, color: str) -> None: ...

    def set_fill_style(self, color: str) -> None: ...

    def set_font(self, font: str) -> None: ...

    def stroke(self) -> None: ...

    def fill(self) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...
