"""Entry point for the formdesk Textual app."""

from __future__ import annotations

import logging
from pathlib import Path

from formdesk.config import DEBUG_LOG_PATH
from formdesk.forms_app import FormsApp


def configure_logging(log_path: str | Path = DEBUG_LOG_PATH, level: int = logging.DEBUG) -> logging.Handler:
    """Send log records to a file; the terminal belongs to the app."""
    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root = logging.getLogger("formdesk")
    root.setLevel(level)
    root.addHandler(handler)
    return handler


def main() -> None:
    configure_logging()
    FormsApp().run()


if __name__ == "__main__":
    main()
