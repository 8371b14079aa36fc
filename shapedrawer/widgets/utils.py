from PySide6 import QtCore, QtGui

from shapedrawer.core import AnchorStyle, Color, LineStyle, Op, Point


def qpoint_to_point(p: QtCore.QPointF) -> Point:
    return float(p.x()), float(p.y())


def point_to_qpoint(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])


def to_qcolor(color: Color) -> QtGui.QColor:
    r, g, b, a = color
    return QtGui.QColor(r, g, b, a)


def to_qpainter_path(ops: list[Op]) -> QtGui.QPainterPath:
    qp = QtGui.QPainterPath()
    for op, data in ops:
        if op == "M":
            qp.moveTo(point_to_qpoint(data))
        elif op == "L":
            qp.lineTo(point_to_qpoint(data))
        elif op == "C":
            c1, c2, p2 = data
            qp.cubicTo(point_to_qpoint(c1), point_to_qpoint(c2), point_to_qpoint(p2))
        elif op == "Z":
            qp.closeSubpath()
    return qp


def stroke_pen(style: LineStyle, cap=QtCore.Qt.PenCapStyle.RoundCap) -> QtGui.QPen:
    pen = QtGui.QPen(to_qcolor(style.color), style.width)
    pen.setCapStyle(cap)
    return pen


def draw_marker(painter: QtGui.QPainter, center: Point, style: AnchorStyle) -> None:
    w, h = style.size
    rect = QtCore.QRectF(center[0] - w * 0.5, center[1] - h * 0.5, w, h)
    painter.setBrush(to_qcolor(style.background_color))
    painter.setPen(QtGui.QPen(to_qcolor(style.border_color), style.border_width))
    painter.drawRoundedRect(rect, style.corner_radius, style.corner_radius)
