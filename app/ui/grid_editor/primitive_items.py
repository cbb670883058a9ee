"""网格编辑器图元：把引擎的属性表映射到 QGraphicsItem"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from PyQt6 import QtCore, QtGui, QtWidgets

from engine.grid_editor.host import PrimitiveKind
from engine.grid_editor.link_router import LinkPath

Rgba = Tuple[int, int, int, int]


def to_qcolor(rgba: Rgba) -> QtGui.QColor:
    r, g, b, a = rgba
    return QtGui.QColor(int(r), int(g), int(b), int(a))


def link_path_to_painter_path(path: LinkPath) -> QtGui.QPainterPath:
    vertices = path.vertices()
    painter_path = QtGui.QPainterPath(QtCore.QPointF(*vertices[0]))
    for x, y in vertices[1:]:
        painter_path.lineTo(x, y)
    return painter_path


class QtPrimitive:
    """包装单个 QGraphicsItem，对外只暴露 set_attributes/set_visible/remove"""

    def __init__(self, kind: PrimitiveKind, item: QtWidgets.QAbstractGraphicsShapeItem):
        self.kind = kind
        self.item = item
        self.attributes: dict[str, Any] = {}

    @classmethod
    def create(
        cls,
        kind: PrimitiveKind,
        attributes: Mapping[str, Any],
        parent: QtWidgets.QGraphicsItem,
        z_value: float,
    ) -> "QtPrimitive":
        if kind == PrimitiveKind.CIRCLE:
            item: QtWidgets.QAbstractGraphicsShapeItem = QtWidgets.QGraphicsEllipseItem()
        elif kind == PrimitiveKind.PATH:
            item = QtWidgets.QGraphicsPathItem()
            item.setBrush(QtGui.QBrush(QtCore.Qt.BrushStyle.NoBrush))
        else:
            raise ValueError(f"不支持的图元类型: {kind}")
        item.setPen(QtGui.QPen(QtCore.Qt.PenStyle.NoPen))
        item.setParentItem(parent)
        item.setZValue(z_value)
        # 图元只负责显示，命中检测由引擎的网格吸附完成
        item.setAcceptedMouseButtons(QtCore.Qt.MouseButton.NoButton)
        primitive = cls(kind, item)
        primitive.set_attributes(attributes)
        return primitive

    def set_attributes(self, attributes: Mapping[str, Any]) -> None:
        self.attributes.update(attributes)
        if "fill" in attributes:
            self.item.setBrush(QtGui.QBrush(to_qcolor(attributes["fill"])))
        if "stroke" in attributes or "stroke_width" in attributes:
            self._update_pen()
        if self.kind == PrimitiveKind.CIRCLE and {"cx", "cy", "r"} & set(attributes):
            self._update_circle_geometry()
        if self.kind == PrimitiveKind.PATH and "path" in attributes:
            path: Optional[LinkPath] = attributes["path"]
            if path is None:
                self.item.setPath(QtGui.QPainterPath())
            else:
                self.item.setPath(link_path_to_painter_path(path))

    def _update_pen(self) -> None:
        stroke = self.attributes.get("stroke")
        if stroke is None:
            self.item.setPen(QtGui.QPen(QtCore.Qt.PenStyle.NoPen))
            return
        pen = QtGui.QPen(to_qcolor(stroke), float(self.attributes.get("stroke_width", 0.0)))
        pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(QtCore.Qt.PenJoinStyle.RoundJoin)
        self.item.setPen(pen)

    def _update_circle_geometry(self) -> None:
        cx = float(self.attributes.get("cx", 0.0))
        cy = float(self.attributes.get("cy", 0.0))
        r = float(self.attributes.get("r", 0.0))
        self.item.setRect(QtCore.QRectF(cx - r, cy - r, 2 * r, 2 * r))

    def set_visible(self, visible: bool) -> None:
        self.item.setVisible(visible)

    def remove(self) -> None:
        scene = self.item.scene()
        if scene is not None:
            scene.removeItem(self.item)
