import logging

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel
from PySide6.QtCore import Qt

from spin_controller import SpinController
from wheel_window import WheelWidget
from settings import load_settings

logger = logging.getLogger(__name__)


class MainWindow(QWidget):
    """Neon wheel window: title, wheel, Spin/Reset buttons and the result line."""

    def __init__(self, settings=None, controller=None):
        super().__init__()
        self.settings = settings if settings is not None else load_settings()
        self.setWindowTitle("Neon Gambling Wheel")
        self.resize(self.settings["window_width"], self.settings["window_height"])
        self.setStyleSheet("""
            QWidget {
                background-color: #0d0d0d;
                color: white;
                font-size: 12pt;
            }
            QLabel#title {
                color: #39ff14;
                font-size: 24pt;
                font-weight: bold;
            }
            QLabel#result {
                color: #fff700;
                font-size: 18pt;
                font-weight: bold;
            }
            QPushButton {
                background-color: #181818;
                color: #00eaff;
                border: 2px solid #00eaff;
                padding: 8px 24px;
                border-radius: 6px;
                font-weight: bold;
            }
            QPushButton:hover {
                background-color: #00eaff;
                color: #0d0d0d;
            }
            QPushButton:disabled {
                color: #555;
                border-color: #555;
            }
        """)

        if controller is None:
            controller = SpinController(
                num_segments=self.settings["segment_count"],
                spin_duration_ms=self.settings["spin_duration_ms"],
                parent=self)
        self.controller = controller

        self.init_ui()

        self.controller.spin_started.connect(self.on_spin_started)
        self.controller.spin_finished.connect(self.on_spin_finished)
        self.controller.wheel_reset.connect(self.on_wheel_reset)

    def init_ui(self):
        layout = QVBoxLayout()
        layout.setContentsMargins(20, 10, 20, 20)

        self.title_lbl = QLabel("Neon Gambling Wheel")
        self.title_lbl.setObjectName("title")
        self.title_lbl.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_lbl)

        self.wheel_widget = WheelWidget(self.controller, extra_turns=self.settings["extra_turns"])
        layout.addWidget(self.wheel_widget, 1)

        btn_layout = QHBoxLayout()
        btn_layout.addStretch()
        self.spin_btn = QPushButton("Spin")
        self.spin_btn.clicked.connect(self.controller.spin)
        btn_layout.addWidget(self.spin_btn)
        self.reset_btn = QPushButton("Reset")
        self.reset_btn.clicked.connect(self.controller.reset)
        btn_layout.addWidget(self.reset_btn)
        btn_layout.addStretch()
        layout.addLayout(btn_layout)

        self.result_lbl = QLabel("")
        self.result_lbl.setObjectName("result")
        self.result_lbl.setAlignment(Qt.AlignCenter)
        self.result_lbl.setVisible(False)
        layout.addWidget(self.result_lbl)

        self.setLayout(layout)

    def set_controls_enabled(self, enabled):
        self.spin_btn.setEnabled(enabled)
        self.reset_btn.setEnabled(enabled)

    def on_spin_started(self, target):
        self.set_controls_enabled(False)
        self.result_lbl.setVisible(False)
        self.result_lbl.setText("")

    def on_spin_finished(self, message):
        self.set_controls_enabled(True)
        self.result_lbl.setText(message)
        self.result_lbl.setVisible(True)

    def on_wheel_reset(self):
        self.result_lbl.setVisible(False)
        self.result_lbl.setText("")
