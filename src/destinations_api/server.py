"""
Serving entry points.

- run(): console script `destinations-api`, blocking uvicorn server
- LiveServer: start/stop a real server in a background thread (tests, e2e)
"""
import threading
import time

import uvicorn
from fastapi import FastAPI

from destinations_api.config import get_settings

_POLL_INTERVAL = 0.05


def run() -> None:
    """Start the API via uvicorn on HOST:PORT."""
    settings = get_settings()
    print(f"Serving Destinations API on http://{settings.host}:{settings.port} ({settings.app_env})")
    uvicorn.run(
        "destinations_api.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level="info",
    )


class LiveServer:
    """A uvicorn server bound to a fixed port, running in a daemon thread.

    Usage::

        with LiveServer(app, port=3001) as server:
            httpx.get(f"{server.url}/api/destinations")

    start() blocks until uvicorn reports it is serving; stop() blocks until
    the socket is closed and the thread has exited.
    """

    def __init__(self, app: FastAPI, host: str = "127.0.0.1", port: int = 3001):
        self.app = app
        self.host = host
        self.port = port
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def is_running(self) -> bool:
        return (
            self._thread is not None
            and self._thread.is_alive()
            and self._server is not None
            and self._server.started
        )

    def start(self, timeout: float = 10.0) -> "LiveServer":
        """Run the server in the background and wait until it accepts connections.

        Raises:
            RuntimeError: if the server exits during startup (e.g. the port is
                already bound) or is not up within `timeout` seconds.
        """
        if self._thread is not None:
            raise RuntimeError(f"Server on {self.url} already started")

        # uvicorn.Server is single-use: started/should_exit stay set after a run
        self._server = uvicorn.Server(
            uvicorn.Config(self.app, host=self.host, port=self.port, log_level="warning")
        )
        self._thread = threading.Thread(
            target=self._server.run, name=f"live-server-{self.port}", daemon=True
        )
        self._thread.start()

        deadline = time.monotonic() + timeout
        while not self._server.started:
            if not self._thread.is_alive():
                self._thread = None
                raise RuntimeError(f"Server on {self.url} exited during startup")
            if time.monotonic() > deadline:
                self.stop()
                raise RuntimeError(f"Server on {self.url} did not start within {timeout}s")
            time.sleep(_POLL_INTERVAL)
        return self

    def stop(self, timeout: float = 10.0) -> None:
        """Ask uvicorn to exit and wait for the thread. No-op if not started."""
        if self._thread is None:
            return
        self._server.should_exit = True
        self._thread.join(timeout)
        if self._thread.is_alive():
            raise RuntimeError(f"Server on {self.url} did not stop within {timeout}s")
        self._thread = None

    def __enter__(self) -> "LiveServer":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
