"""NATS subscription adapter and single-consumer message queue."""

import asyncio
from typing import Awaitable, Callable, Protocol

from nats.aio.client import Client as NATS
from nats.aio.msg import Msg

from ..errors import BusConnectionError
from ..logging_config import get_logger
from ..models import Message

logger = get_logger(__name__)

ALL_SUBJECTS = ">"

TopicHandler = Callable[[Message], Awaitable[None]]
MessageConsumer = Callable[[Message], object]


class IEventBus(Protocol):
    """Publish/subscribe transport the watcher listens on."""

    async def connect(self) -> None:
        """Open the connection."""
        ...

    async def subscribe(self, subject: str, handler: TopicHandler) -> None:
        """Subscribe a handler to a subject (wildcards allowed)."""
        ...

    async def close(self) -> None:
        """Close the connection."""
        ...


def to_message(msg: Msg) -> Message:
    """Convert a NATS message to a Message."""
    return Message(
        subject=msg.subject,
        body=msg.data.decode("utf-8", errors="replace") if msg.data else "",
        reply_to=msg.reply or None,
    )


class NatsEventBus:
    """NATS-backed event bus."""

    def __init__(self, uri: str, client: NATS | None = None):
        self._uri = uri
        self._client = client or NATS()

    async def connect(self) -> None:
        """Connect to the NATS server."""
        try:
            await self._client.connect(servers=[self._uri])
        except Exception as e:
            raise BusConnectionError(f"could not connect to {self._redacted_uri()}: {e}") from e
        logger.info("Connected to %s", self._redacted_uri())

    async def subscribe(self, subject: str, handler: TopicHandler) -> None:
        """Subscribe a handler to a subject (wildcards allowed)."""

        async def callback(msg: Msg) -> None:
            await handler(to_message(msg))

        try:
            await self._client.subscribe(subject, cb=callback)
        except Exception as e:
            raise BusConnectionError(f"could not subscribe to {subject}: {e}") from e
        logger.info("Subscribed to %s", subject)

    async def close(self) -> None:
        """Close the connection."""
        if self._client.is_connected:
            await self._client.close()
            logger.info("Connection closed")

    def _redacted_uri(self) -> str:
        scheme, _, rest = self._uri.partition("://")
        credentials, at, location = rest.rpartition("@")
        if not at:
            return self._uri
        user = credentials.split(":", 1)[0]
        return f"{scheme}://{user}:***@{location}"


class MessageQueue:
    """Serializes deliveries into a single consumer, in arrival order."""

    def __init__(self):
        self._queue: asyncio.Queue[Message] = asyncio.Queue()
        self._consumer: MessageConsumer | None = None
        self._task: asyncio.Task | None = None

    async def start(self, consumer: MessageConsumer) -> None:
        """Start the consumer task."""
        if self._task:
            return
        self._consumer = consumer
        self._task = asyncio.create_task(self._consume())

    async def put(self, message: Message) -> None:
        """Queue a message for the consumer."""
        await self._queue.put(message)

    async def stop(self) -> None:
        """Drain queued messages, then stop the consumer task."""
        if not self._task:
            return

        await self._queue.join()
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def _consume(self) -> None:
        while True:
            message = await self._queue.get()
            try:
                self._consumer(message)
            except Exception:
                logger.exception("Error consuming message on %s", message.subject)
            finally:
                self._queue.task_done()
