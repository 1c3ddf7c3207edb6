"""Application lifecycle."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from wellness_tracker.app_logging import configure_logging
from wellness_tracker.containers import AppContainer, build_container


@asynccontextmanager
async def run_app(container: AppContainer | None = None) -> AsyncIterator[AppContainer]:
    """Load saved data on entry and wait for pending saves on exit."""
    configure_logging()
    logger = logging.getLogger(__name__)
    app = container or build_container()
    await app.store.load()
    logger.info(
        "Wellness tracker ready: %s water entries, %s medications",
        len(app.store.state.water_entries),
        len(app.store.state.medications),
    )
    try:
        yield app
    finally:
        await app.close_resources()
