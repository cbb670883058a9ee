"""场景图元装配：网格点、悬停标记、连线预览以及点/连线图元"""

from __future__ import annotations

from typing import Optional

from engine.grid_editor.host import Primitive, PrimitiveKind, SceneHost, SceneLayer
from engine.grid_editor.link_router import route
from engine.grid_editor.models import Link, Point
from engine.grid_editor.session import InteractionSession


class GridPalette:
    """网格编辑器配色（RGBA）"""

    GRID_DOT = (153, 153, 153, 255)
    POINT = (221, 221, 221, 255)
    LINK = (255, 255, 255, 77)
    LINK_PREVIEW = (255, 255, 255, 38)
    HOVER_RING = (255, 255, 255, 51)
    TRANSPARENT = (0, 0, 0, 0)


GRID_DOT_RADIUS = 0.02
POINT_RADIUS = 0.15
HOVER_RADIUS = 0.2
HOVER_STROKE_WIDTH = 0.05
LINK_STROKE_WIDTH = 0.1


class SceneRenderer:
    def __init__(self, host: SceneHost, grid_size: int) -> None:
        self.host = host
        self.grid_size = grid_size
        self.link_preview: Optional[Primitive] = None
        self.hover_marker: Optional[Primitive] = None

    def build(self) -> None:
        """创建静态图元（网格点、悬停标记、连线预览）"""
        size = self.grid_size
        for n in range(size * size):
            self.host.create_primitive(
                PrimitiveKind.CIRCLE,
                {"cx": n % size, "cy": n // size, "r": GRID_DOT_RADIUS, "fill": GridPalette.GRID_DOT},
                SceneLayer.GRID,
            )
        self.hover_marker = self.host.create_primitive(
            PrimitiveKind.CIRCLE,
            {
                "cx": size // 2,
                "cy": size // 2,
                "r": HOVER_RADIUS,
                "fill": GridPalette.TRANSPARENT,
                "stroke": GridPalette.HOVER_RING,
                "stroke_width": HOVER_STROKE_WIDTH,
            },
            SceneLayer.HOVER,
        )
        self.hover_marker.set_visible(False)
        self.link_preview = self.host.create_primitive(
            PrimitiveKind.PATH,
            {"stroke": GridPalette.LINK_PREVIEW, "stroke_width": LINK_STROKE_WIDTH},
            SceneLayer.PREVIEW,
        )
        self.link_preview.set_visible(False)

    def create_point(self, point: Point) -> None:
        point.handle = self.host.create_primitive(
            PrimitiveKind.CIRCLE,
            {"cx": point.x, "cy": point.y, "r": POINT_RADIUS, "fill": GridPalette.POINT},
            SceneLayer.POINTS,
        )

    def create_link(self, link: Link) -> None:
        link.handle = self.host.create_primitive(
            PrimitiveKind.PATH,
            {
                "stroke": GridPalette.LINK,
                "stroke_width": LINK_STROKE_WIDTH,
                "path": route(link.start.x, link.start.y, link.end.x, link.end.y),
            },
            SceneLayer.LINKS,
        )

    def remove_link(self, link: Link) -> None:
        if link.handle is not None:
            link.handle.remove()
            link.handle = None

    def apply_transform(self, scale: float, x: float, y: float) -> None:
        self.host.set_view_transform(scale, x, y)

    def draw_selection(self, session: InteractionSession) -> None:
        selected = session.selection.selected_point
        hover = session.selection.hover_point
        if self.link_preview is not None:
            if selected is not None:
                if hover is not None:
                    path = route(selected.x, selected.y, session.near_x, session.near_y)
                else:
                    path = route(selected.x, selected.y, session.hover_x, session.hover_y)
                self.link_preview.set_attributes({"path": path})
                self.link_preview.set_visible(True)
            else:
                self.link_preview.set_visible(False)

        if self.hover_marker is not None:
            if hover is not None:
                self.hover_marker.set_attributes({"cx": session.near_x, "cy": session.near_y})
                self.hover_marker.set_visible(True)
            else:
                self.hover_marker.set_visible(False)
