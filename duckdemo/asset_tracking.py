"""Track resources whose assets must finish loading before they become available."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, MutableMapping


class ResourceHandles:
    """Queue of resources waiting for their assets, and those already published."""

    def __init__(self) -> None:
        self._waiting: deque[tuple[str, Any]] = deque()
        self._finished: list[str] = []

    @property
    def waiting(self) -> tuple[str, ...]:
        """Names of resources still loading, in queue order."""
        return tuple(name for name, _ in self._waiting)

    @property
    def finished(self) -> tuple[str, ...]:
        """Names of resources that have been published, in completion order."""
        return tuple(self._finished)

    def load_resource(self, name: str, factory: Callable[[], Any]) -> ResourceHandles:
        """Build the resource now and queue it until its assets are loaded."""
        self._waiting.append((name, factory()))
        return self

    def update(
        self,
        resources: MutableMapping[str, Any],
        is_loaded: Callable[[Any], bool],
    ) -> list[str]:
        """Publish every queued resource whose assets are loaded.

        Each queued entry is checked once; entries not yet loaded go back to
        the end of the queue. Returns the names published by this call.
        """
        published = []
        for _ in range(len(self._waiting)):
            name, value = self._waiting.popleft()
            if is_loaded(value):
                resources[name] = value
                self._finished.append(name)
                published.append(name)
            else:
                self._waiting.append((name, value))
        return published

    def is_all_done(self) -> bool:
        """True once every requested resource has been published."""
        return not self._waiting