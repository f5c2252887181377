"""Application bootstrap and lifecycle management."""

import asyncio
from typing import Protocol

from .api import ControlPlaneClient, IControlPlaneClient
from .dispatch import Dispatcher, IOutputSink, WatchSession
from .errors import ControlPlaneError
from .event_bus import ALL_SUBJECTS, IEventBus, MessageQueue, NatsEventBus
from .logging_config import get_logger
from .models import Message
from .output_router import OutputRouter

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...


class Application:
    """Watches the bus for one application."""

    def __init__(
        self,
        app: str,
        nats_uri: str,
        is_guid: bool = False,
        api_url: str | None = None,
        token: str | None = None,
        color: bool = True,
        event_bus: IEventBus | None = None,
        api_client: IControlPlaneClient | None = None,
        sink: IOutputSink | None = None,
    ):
        self._app = app
        self._nats_uri = nats_uri
        self._is_guid = is_guid
        self._api_url = api_url
        self._token = token
        self._color = color

        # Components (will be initialized in start() unless injected)
        self._event_bus = event_bus
        self._api_client = api_client
        self._sink = sink
        self._session: WatchSession | None = None
        self._dispatcher: Dispatcher | None = None
        self._queue: MessageQueue | None = None
        self._stopped = asyncio.Event()

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting watch for %s", self._app)

        # 1. Resolve the app to the GUID being watched
        guid = await self._resolve_guid()

        # 2. Session state + dispatcher (depends on sink)
        self._session = WatchSession(guid)
        if self._sink is None:
            self._sink = OutputRouter(color=self._color)
        self._dispatcher = Dispatcher(self._session, self._sink)

        # 3. Queue serializing deliveries into the dispatcher
        self._queue = MessageQueue()
        await self._queue.start(self._dispatcher.dispatch)

        # 4. Bus connection + wildcard subscription
        if self._event_bus is None:
            self._event_bus = NatsEventBus(self._nats_uri)
        await self._event_bus.connect()
        await self._event_bus.subscribe(ALL_SUBJECTS, self._handle_message)
        logger.info("Watching %s (%s)", self._app, guid)

    async def run(self) -> None:
        """Start, then watch until stop() is called."""
        try:
            await self.start()
            await self._stopped.wait()
        finally:
            await self.stop()

    def request_stop(self) -> None:
        """Ask a running watch to shut down."""
        self._stopped.set()

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        self._stopped.set()
        if self._event_bus:
            await self._event_bus.close()
        if self._queue:
            await self._queue.stop()
            self._queue = None
        if self._api_client:
            await self._api_client.aclose()
            self._api_client = None
        logger.info("Watch stopped")

    async def _handle_message(self, message: Message) -> None:
        await self._queue.put(message)

    async def _resolve_guid(self) -> str:
        if self._is_guid:
            return self._app

        if self._api_client is None:
            if not self._api_url:
                raise ControlPlaneError(
                    "no control-plane API URL configured (set CF_API_URL or pass --guid)"
                )
            self._api_client = ControlPlaneClient(self._api_url, self._token)
        return await self._api_client.resolve_app_guid(self._app)

    @property
    def session(self) -> WatchSession:
        """Get the watch session."""
        if not self._session:
            raise RuntimeError("Application not started")
        return self._session

    @property
    def dispatcher(self) -> Dispatcher:
        """Get the dispatcher."""
        if not self._dispatcher:
            raise RuntimeError("Application not started")
        return self._dispatcher
