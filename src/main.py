"""Entry point for the study assistant server.

Serves the FastAPI routes and the NiceGUI study page ("/") from one
uvicorn process. Settings come from the environment, optionally via .env.
"""

import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Send log records to stdout at LOG_LEVEL (default INFO)."""
    logging.basicConfig(
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


logger = logging.getLogger(__name__)


def main() -> None:
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app
    from src.ui.study_page import study_page  # noqa: F401 - registers "/"

    configure_logging()
    server = create_app()

    # Page storage (the theme choice) needs a secret
    ui.run_with(
        server,
        title="AI Study Assistant",
        favicon="🎓",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "study-assistant-secret"),
    )

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Study page at http://localhost:{port}/, API docs at /docs")

    uvicorn.run(
        server,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
