"""Interactive four-corner selection of a warp quadrilateral."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from os import PathLike

__all__ = ["CORNER_RADIUS", "DEFAULT_FILE_NAME", "CornerWarper"]

DEFAULT_FILE_NAME = "warper_settings.xml"
CORNER_RADIUS = 15

Point = tuple[float, float]


class CornerWarper:
    """Four draggable corners that describe the source quad of a warp.

    Corners are kept in image coordinates. ``set_view`` records where, and at
    what size, the image is shown, so that pointer positions given to
    ``press`` and ``drag`` can be mapped back into image coordinates.
    Corners run clockwise from the top-left: top-left, top-right,
    bottom-right, bottom-left.
    """

    def __init__(
        self,
        image_width: float = 0.0,
        image_height: float = 0.0,
        file_name: str | PathLike[str] = DEFAULT_FILE_NAME,
    ) -> None:
        self.image_width = float(image_width)
        self.image_height = float(image_height)
        self.file_name = file_name
        self.offset: Point = (0.0, 0.0)
        self.scale: Point = (1.0, 1.0)
        self.selected: int | None = None
        self.enabled = True
        self.source_points: list[Point] = []
        self.dest_points: list[Point] = []
        self.reset()

    def reset(self) -> None:
        """Put the source corners on the image corners and copy them as targets."""
        w, h = self.image_width, self.image_height
        self.source_points = [(0.0, 0.0), (w, 0.0), (w, h), (0.0, h)]
        self.dest_points = list(self.source_points)

    def set_view(
        self, x: float, y: float, w: float | None = None, h: float | None = None
    ) -> None:
        """Record that the image is shown at ``(x, y)``, optionally at size ``w`` x ``h``.

        With a size given, a disabled warper ignores the call.
        """
        if w is None or h is None:
            self.offset = (x, y)
            self.scale = (1.0, 1.0)
            return
        if not self.enabled:
            return
        self.offset = (x, y)
        if w == self.image_width and h == self.image_height:
            self.scale = (1.0, 1.0)
        else:
            self.scale = (w / self.image_width, h / self.image_height)

    def corner_hit(self, x: float, y: float) -> int | None:
        """Index of the first corner within ``CORNER_RADIUS`` of the view point, if any."""
        ox, oy = self.offset
        sx, sy = self.scale
        radius_sq = CORNER_RADIUS * CORNER_RADIUS
        for index, (px, py) in enumerate(self.source_points):
            dx = x - px * sx - ox
            dy = y - py * sy - oy
            if dx * dx + dy * dy < radius_sq:
                return index
        return None

    def _place(self, index: int, x: float, y: float) -> None:
        ox, oy = self.offset
        sx, sy = self.scale
        self.source_points[index] = ((x - ox) / sx, (y - oy) / sy)

    def press(self, x: float, y: float) -> None:
        """Pick up the corner under the pointer, if any, and move it there."""
        if not self.enabled:
            return
        self.selected = self.corner_hit(x, y)
        if self.selected is not None:
            self._place(self.selected, x, y)

    def drag(self, x: float, y: float) -> None:
        """Move the picked-up corner to the pointer."""
        if not self.enabled:
            return
        if self.selected is not None:
            self._place(self.selected, x, y)

    def release(self) -> None:
        """Drop the picked-up corner."""
        if not self.enabled:
            return
        self.selected = None

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def save(self) -> None:
        """Write the source corners to ``file_name`` as XML."""
        root = ET.Element("warper")
        for index, (x, y) in enumerate(self.source_points):
            point = ET.SubElement(root, f"point{index}")
            ET.SubElement(point, "x").text = repr(float(x))
            ET.SubElement(point, "y").text = repr(float(y))
        ET.ElementTree(root).write(self.file_name, encoding="utf-8", xml_declaration=True)

    def load(self) -> None:
        """Read the source corners from ``file_name``; missing values read as 0."""
        root = ET.parse(self.file_name).getroot()

        def value(path: str) -> float:
            text = root.findtext(path)
            return float(text) if text and text.strip() else 0.0

        self.source_points = [
            (value(f"point{i}/x"), value(f"point{i}/y")) for i in range(4)
        ]