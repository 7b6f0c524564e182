import logging

import flet as ft

from cgpacalc.config.settings import settings
from cgpacalc.ui.app import main

logging.basicConfig(
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    level=settings.log_level_number,
)
log = logging.getLogger(__name__)


def run() -> None:
    log.info("Starting CGPA Calculator (web=%s, port=%d)", settings.web_mode, settings.port)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
