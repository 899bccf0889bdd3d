"""
Run with: python -m barinventory
"""
from __future__ import annotations

import sys

from barinventory.app.application import create_app
from barinventory.app.main_window import MainWindow
from barinventory.logging_config import setup_logging


def main() -> int:
    """Main entry point for the application."""
    setup_logging()
    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
