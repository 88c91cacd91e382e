import logging
import random

from PySide6.QtCore import QObject, QTimer, Signal

from wheel_model import DEFAULT_SEGMENTS, generate_wheel, resolve_index, result_message

logger = logging.getLogger(__name__)

SPIN_DURATION_MS = 3500


class SpinController(QObject):
    """Owns the wheel and the idle/spinning state machine.

    Views read ``wheel``, ``is_spinning``, ``selected_index`` and
    ``result_text`` and listen to the signals; only this class mutates them.
    """
    spin_started = Signal(int)
    spin_finished = Signal(str)
    wheel_reset = Signal()
    state_changed = Signal()

    def __init__(self, num_segments=DEFAULT_SEGMENTS, spin_duration_ms=SPIN_DURATION_MS,
                 rng=None, parent=None):
        super().__init__(parent)
        self.num_segments = num_segments
        self.rng = rng if rng is not None else random.Random()

        self.wheel = generate_wheel(self.num_segments, self.rng)
        self.is_spinning = False
        self.selected_index = None
        self.result_text = None
        self.resolved_index = None

        self.resolve_timer = QTimer(self)
        self.resolve_timer.setSingleShot(True)
        self.resolve_timer.setInterval(spin_duration_ms)
        self.resolve_timer.timeout.connect(self.resolve)

    @property
    def spin_duration_ms(self):
        return self.resolve_timer.interval()

    def spin(self):
        """Start a spin toward a random target; ignored while a spin is running."""
        if self.is_spinning:
            logger.debug("Spin requested while spinning, ignored")
            return

        self.is_spinning = True
        self.result_text = None
        self.resolved_index = None
        target = self.rng.randrange(len(self.wheel))
        self.selected_index = target
        logger.debug("Spin started, target=%d", target)

        self.resolve_timer.start()
        self.spin_started.emit(target)
        self.state_changed.emit()

    def resolve(self):
        """Finish the running spin and publish the outcome."""
        if not self.is_spinning:
            return

        self.is_spinning = False
        self.resolved_index = resolve_index(self.selected_index, len(self.wheel))
        segment = self.wheel[self.resolved_index]
        self.result_text = result_message(segment)
        logger.debug("Spin finished, segment=%d label=%r -> %s",
                     self.resolved_index, segment['label'], self.result_text)

        self.spin_finished.emit(self.result_text)
        self.state_changed.emit()

    def reset(self):
        """Replace the wheel with a fresh random one; ignored while spinning."""
        if self.is_spinning:
            logger.debug("Reset requested while spinning, ignored")
            return

        self.wheel = generate_wheel(self.num_segments, self.rng)
        self.selected_index = None
        self.result_text = None
        self.resolved_index = None
        logger.info("Wheel regenerated with %d segments", len(self.wheel))

        self.wheel_reset.emit()
        self.state_changed.emit()
