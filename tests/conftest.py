import os

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def scenario_wheel():
    """12 segments, a $45 prize at index 9 and a blank at index 3."""
    wheel = []
    for i in range(12):
        if i in (3, 5, 7, 8, 11):
            wheel.append({'label': "", 'value': None, 'color': "#bc13fe"})
        else:
            value = 45 if i == 9 else (i + 1) * 5
            wheel.append({'label': f"${value}", 'value': value, 'color': "#39ff14"})
    return wheel


@pytest.fixture
def controller(qapp, scenario_wheel):
    from spin_controller import SpinController

    ctrl = SpinController(num_segments=12)
    ctrl.wheel = scenario_wheel
    yield ctrl
    ctrl.resolve_timer.stop()
