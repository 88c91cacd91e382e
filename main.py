import sys
import logging
import logging.handlers
from PySide6.QtWidgets import QApplication
from main_window import MainWindow
from utils import external_path

LOG_FILE = "wheel.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3


def setup_logging(level=logging.INFO):
    """Log to stderr and to a size-capped wheel.log beside the program."""
    logger = logging.getLogger()
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    try:
        file_handler = logging.handlers.RotatingFileHandler(
            external_path(LOG_FILE), maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT, encoding="utf-8")
    except OSError as e:
        logger.warning("Cannot open log file, logging to stderr only: %s", e)
        return logger
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    return logger


def main():
    setup_logging()
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
#pyinstaller --noconfirm --onedir --windowed --name "NeonWheel" main.py
