from PySide6.QtWidgets import QWidget, QGraphicsDropShadowEffect
from PySide6.QtGui import QPainter, QBrush, QPen, QColor, QFont, QPolygonF
from PySide6.QtCore import Qt, QPointF, QRectF, QPropertyAnimation, QEasingCurve, Property

from wheel_model import slice_angle, target_rotation, label_position

BACKGROUND_COLOR = QColor("#181818")
POINTER_COLOR = QColor("#ff00de")
IDLE_OPACITY = 0.85
GLOW_COLOR = QColor(255, 255, 255, 200)
GLOW_RADIUS = 12


def pie_angles(index, length):
    """Qt drawPie start/span (1/16 degree) for slice ``index``.

    Slices run clockwise from 12 o'clock; Qt pies count counter-clockwise from
    3 o'clock. Both edges are rounded so neighbouring wedges share a boundary.
    """
    seg_angle = slice_angle(length)
    start = round((90 - index * seg_angle) * 16)
    end = round((90 - (index + 1) * seg_angle) * 16)
    return start, end - start


def spin_easing_curve():
    """cubic-bezier(.17,.67,.83,.67): quick start, long glide."""
    curve = QEasingCurve(QEasingCurve.BezierSpline)
    curve.addCubicBezierSegment(QPointF(0.17, 0.67), QPointF(0.83, 0.67), QPointF(1.0, 1.0))
    return curve


class WheelWidget(QWidget):
    """Draws the controller's wheel and animates it toward the spin target."""

    def __init__(self, controller, extra_turns=5, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.extra_turns = extra_turns
        self._rotation_angle = 0.0
        self.setMinimumSize(300, 300)

        self.wheel_font = QFont()
        self.wheel_font.setBold(True)

        # White neon glow around wedges and rim
        glow = QGraphicsDropShadowEffect(self)
        glow.setOffset(0, 0)
        glow.setBlurRadius(GLOW_RADIUS)
        glow.setColor(GLOW_COLOR)
        self.setGraphicsEffect(glow)

        self.animation = QPropertyAnimation(self, b"rotation_angle", self)
        self.animation.setDuration(controller.spin_duration_ms)
        self.animation.setEasingCurve(spin_easing_curve())

        controller.spin_started.connect(self.on_spin_started)
        controller.wheel_reset.connect(self.on_wheel_reset)
        controller.state_changed.connect(self.update)

    def get_rotation_angle(self):
        return self._rotation_angle

    def set_rotation_angle(self, angle):
        self._rotation_angle = angle
        self.update()

    rotation_angle = Property(float, get_rotation_angle, set_rotation_angle)

    def on_spin_started(self, target):
        """Start the rotation so the target slice ends under the pointer."""
        self.animation.stop()
        # Always spin forward by the full number of extra turns
        self.animation.setStartValue(self._rotation_angle % 360)
        self.animation.setEndValue(
            target_rotation(target, len(self.controller.wheel), self.extra_turns))
        self.animation.start()

    def on_wheel_reset(self):
        self.animation.stop()
        self.set_rotation_angle(0.0)

    def paintEvent(self, event):
        """Paint the wheel"""
        wheel = self.controller.wheel
        if not wheel:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        rect = self.rect()
        w = min(rect.width(), rect.height())
        center = QPointF(rect.width() / 2, rect.height() / 2)
        radius = w / 2 - 45
        selected = self.controller.selected_index

        painter.save()
        painter.translate(center)
        painter.rotate(self._rotation_angle)

        painter.setBrush(QBrush(BACKGROUND_COLOR))
        painter.setPen(QPen(Qt.white, 4))
        painter.drawEllipse(QPointF(0, 0), radius + 8, radius + 8)

        pie_rect = QRectF(-radius, -radius, radius * 2, radius * 2)
        for i, seg in enumerate(wheel):
            painter.setOpacity(1.0 if i == selected else IDLE_OPACITY)
            painter.setBrush(QBrush(QColor(seg['color'])))
            painter.setPen(QPen(Qt.white, 3))
            painter.drawPie(pie_rect, *pie_angles(i, len(wheel)))
        painter.setOpacity(1.0)

        self.wheel_font.setPointSize(max(8, int(radius / 11)))
        painter.setFont(self.wheel_font)
        painter.setPen(Qt.white)
        for i, seg in enumerate(wheel):
            if not seg['label']:
                continue
            x, y = label_position(i, len(wheel), radius)
            label_rect = QRectF(x - radius / 3, y - radius / 8, radius * 2 / 3, radius / 4)
            painter.drawText(label_rect, Qt.AlignCenter, seg['label'])
        painter.restore()

        # Pointer stays fixed at the top, outside the rim
        tip_y = center.y() - radius - 10
        pointer = QPolygonF([
            QPointF(center.x() - 16, tip_y - 28),
            QPointF(center.x() + 16, tip_y - 28),
            QPointF(center.x(), tip_y),
        ])
        painter.setBrush(QBrush(POINTER_COLOR))
        painter.setPen(QPen(Qt.white, 2))
        painter.drawPolygon(pointer)
        painter.end()
