"""Server Lifecycle — owns the uvicorn server for one process run.

Invariants:
    - One CalculatorServer per entry point; no module-level server handle
    - SIGINT/SIGTERM handled by uvicorn: stop accepting, drain in-flight, exit 0

Design Decisions:
    - uvicorn.Config + uvicorn.Server over uvicorn.run(): the object stays
      reachable for a programmatic shutdown (request_shutdown)
"""

import asyncio
import logging
import signal

import uvicorn
from fastapi import FastAPI

from calculator_api.config import Settings
from calculator_api.main import create_app

logger = logging.getLogger(__name__)

TERMINATION_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class CalculatorServer:
    """Wraps the ASGI app and the uvicorn server that serves it."""

    def __init__(self, settings: Settings, app: FastAPI | None = None):
        self.settings = settings
        self.app = app or create_app(settings)
        self.config = uvicorn.Config(
            self.app,
            host=settings.host,
            port=settings.port,
            log_config=None,
            log_level=settings.log_level.lower(),
        )
        self.server = uvicorn.Server(self.config)

    @property
    def should_exit(self) -> bool:
        return self.server.should_exit

    def request_shutdown(self) -> None:
        """Ask the server to drain and stop, as a termination signal would."""
        logger.info("Shutdown requested: closing HTTP server")
        self.server.should_exit = True

    async def serve(self) -> None:
        logger.info(
            f"Server is running on port {self.settings.port}",
            extra={"host": self.settings.host, "port": self.settings.port},
        )
        await self.server.serve()
        logger.info("HTTP server closed")

    def run(self) -> None:
        """Serve until a termination signal; returns normally afterwards.

        uvicorn re-raises captured signals once it has drained, so the
        process-level handlers installed here turn that into a clean return.
        """
        for sig in TERMINATION_SIGNALS:
            signal.signal(sig, self._on_termination_signal)
        asyncio.run(self.serve())

    def _on_termination_signal(self, signum: int, frame) -> None:
        logger.info(f"{signal.Signals(signum).name} signal received")
        self.request_shutdown()
