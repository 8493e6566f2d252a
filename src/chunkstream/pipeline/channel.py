"""
Stage Channel
=============

Unbounded async hand-off queue between pipeline stages.

This module provides the StageChannel class, which connects a producing
stage to a consuming stage and carries an explicit end-of-stream signal.

Design Rules:
    - Unbounded: put never blocks and never drops
    - close() is the only termination signal
    - Consumers iterate with `async for`; iteration ends after close
    - Does NOT process or modify items
"""

import asyncio
import logging
from typing import AsyncIterator, Generic, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")

_CLOSED = object()


class ChannelClosedError(RuntimeError):
    """Raised when putting into a channel that has been closed."""
    pass


class StageChannel(Generic[T]):
    """
    Async hand-off queue with a close signal.

    A consumer waiting on an empty channel stays suspended until the
    producer puts an item or closes the channel.

    Attributes:
        name: Label used in log messages
        total_put: Items ever put into the channel
        closed: Whether close() has been called

    Example:
        channel = StageChannel("records")

        # Producer
        await channel.put(record)
        channel.close()

        # Consumer
        async for record in channel:
            handle(record)
    """

    def __init__(self, name: str = "channel") -> None:
        self.name = name
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed: bool = False
        self._total_put: int = 0

    @property
    def size(self) -> int:
        """Items waiting in the channel."""
        return self._queue.qsize()

    @property
    def total_put(self) -> int:
        """Total items ever put into the channel."""
        return self._total_put

    @property
    def closed(self) -> bool:
        return self._closed

    async def put(self, item: T) -> None:
        """
        Hand an item to the consumer.

        Yields control to the event loop so the consumer can run
        alongside the producer.

        Args:
            item: Item to hand off

        Raises:
            ChannelClosedError: If the channel was already closed
        """
        if self._closed:
            raise ChannelClosedError(f"Channel '{self.name}' is closed")

        self._queue.put_nowait(item)
        self._total_put += 1
        await asyncio.sleep(0)

    def close(self) -> None:
        """Signal that no more items will be put. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_CLOSED)
        logger.debug(f"Channel '{self.name}' closed after {self._total_put} items")

    async def get(self) -> T:
        """
        Wait for the next item.

        Returns:
            Next item

        Raises:
            StopAsyncIteration: If the channel is closed and drained
        """
        item = await self._queue.get()
        if item is _CLOSED:
            # Leave the marker for any other waiting consumer
            self._queue.put_nowait(_CLOSED)
            raise StopAsyncIteration
        return item

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        return await self.get()

    def metrics(self) -> dict:
        """
        Get channel metrics for observability.

        Returns:
            Dict with name, size, total_put, closed
        """
        return {
            "name": self.name,
            "size": self.size,
            "total_put": self._total_put,
            "closed": self._closed,
        }
