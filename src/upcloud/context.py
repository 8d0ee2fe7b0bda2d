"""Caller-owned cancellation for API calls.

Every ``Client.do`` call requires a ``Context``. The context is the only way
to abort an in-flight call: cancel it explicitly or give it a deadline. The
library never picks a timeout on its own.

Example:
    ```python
    from upcloud import Client, Context

    ctx = Context(timeout=10)
    zones, response = await client.zones.list_available_zones(ctx)
    ```

``cancel()`` is safe to call from another thread.
"""

import asyncio
import contextlib
import time
from collections.abc import AsyncIterator
from threading import Lock

from upcloud.errors.exceptions import ContextCancelledError, ContextError, DeadlineExceededError


class Context:
    """Cancellation handle shared by one or more API calls.

    Args:
        timeout: Seconds from now until the context expires. None means no
            deadline.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._cancelled = False
        self._lock = Lock()
        self._scopes: set[tuple[asyncio.AbstractEventLoop, asyncio.Timeout]] = set()

    @classmethod
    def background(cls) -> "Context":
        """Context that is never cancelled and has no deadline."""
        return cls()

    @property
    def deadline(self) -> float | None:
        """Absolute deadline on the ``time.monotonic()`` clock, or None."""
        return self._deadline

    def cancel(self) -> None:
        """Cancel the context, aborting every call currently bound to it."""
        with self._lock:
            self._cancelled = True
            scopes = list(self._scopes)

        for loop, scope in scopes:
            loop.call_soon_threadsafe(self._expire, loop, scope)

    def done(self) -> bool:
        return self.err() is not None

    def err(self) -> ContextError | None:
        """The reason the context ended, or None while it is still live."""
        if self._cancelled:
            return ContextCancelledError("context canceled")
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceededError("context deadline exceeded")
        return None

    @contextlib.asynccontextmanager
    async def bind(self) -> AsyncIterator[None]:
        """Run the enclosed awaits under this context.

        Raises:
            ContextCancelledError: If the context is cancelled before or during the block.
            DeadlineExceededError: If the deadline passes before or during the block.
        """
        error = self.err()
        if error is not None:
            raise error

        loop = asyncio.get_running_loop()
        when = None
        if self._deadline is not None:
            when = loop.time() + (self._deadline - time.monotonic())

        try:
            async with asyncio.timeout_at(when) as scope:
                entry = (loop, scope)
                with self._lock:
                    self._scopes.add(entry)
                    cancelled = self._cancelled
                try:
                    if cancelled:
                        scope.reschedule(loop.time())
                    yield
                finally:
                    with self._lock:
                        self._scopes.discard(entry)
        except TimeoutError as e:
            if not scope.expired():
                raise
            if self._cancelled:
                raise ContextCancelledError("context canceled") from e
            raise DeadlineExceededError("context deadline exceeded") from e

    def _expire(self, loop: asyncio.AbstractEventLoop, scope: asyncio.Timeout) -> None:
        with self._lock:
            bound = (loop, scope) in self._scopes
        if bound and not scope.expired():
            scope.reschedule(loop.time())
