import sys
import os


def external_path(relative_path):
    """Absolute path of a file kept next to the program (or the frozen EXE)."""
    if getattr(sys, 'frozen', False):
        base_path = os.path.dirname(sys.executable)
    else:
        base_path = os.path.abspath(".")
    return os.path.join(base_path, relative_path)


def format_currency(value):
    return f"${value}"
