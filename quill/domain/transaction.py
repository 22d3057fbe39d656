"""Work deferred until the request transaction has committed."""

from typing import Awaitable, Callable, List

import logfire

AfterCommit = Callable[[], Awaitable[None]]


class CommitHooks:
    """Callbacks run once the current unit of work has committed.

    The persistence layer owns the transaction and calls ``run`` right
    after a successful commit. Nothing runs when the transaction rolls back.
    """

    def __init__(self) -> None:
        self._callbacks: List[AfterCommit] = []

    def __len__(self) -> int:
        return len(self._callbacks)

    def add(self, callback: AfterCommit) -> None:
        """Register a callback for the next commit."""
        self._callbacks.append(callback)

    async def run(self) -> None:
        """Run and forget every registered callback, in registration order."""
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            await callback()
        if callbacks:
            logfire.debug("Commit hooks run", count=len(callbacks))
