from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Recording collaborators (console, file opener, transport) so that
   loggers can be exercised without touching real streams or the network.
3. Isolation of the process-wide registry between tests.
"""

import io
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Generator, List, Optional, Sequence, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from catlog.core.dispatcher import SinkDispatcher  # noqa: E402
from catlog.core.registry import GlobalRegistry, default_registry  # noqa: E402
from catlog.core.remote import RemoteSink  # noqa: E402
from catlog.infra.console import Stream, StreamConsole  # noqa: E402
from catlog.infra.env import EnvironmentReader  # noqa: E402


# -----------------------------------------------------------------------------
# Recording Collaborators
# -----------------------------------------------------------------------------
class RecordingConsole(StreamConsole):
    """Console that keeps every written line instead of printing it."""

    def __init__(self) -> None:
        super().__init__()
        self.lines: List[Tuple[Stream, str, Tuple[str, ...]]] = []

    def write_line(self, stream: Stream, text: str, styles: Sequence[str] = ()) -> None:
        self.lines.append((stream, text, tuple(styles)))


class CountingOpener:
    """File opener that counts how often each path is opened."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, bool]] = []
        self.handles: Dict[str, io.StringIO] = {}

    def __call__(self, path: str, append: bool) -> io.StringIO:
        self.calls.append((path, append))
        handle = self.handles.setdefault(path, io.StringIO())
        return handle

    def lines(self, path: str) -> List[str]:
        return self.handles[path].getvalue().splitlines()


class RecordingTransport:
    """Synchronous stand-in for the HTTP relay."""

    def __init__(self, outcome: Tuple[bool, Optional[int], str] = (True, 200, "Success")) -> None:
        self.outcome = outcome
        self.posts: List[Tuple[str, Dict[str, Any]]] = []

    def __call__(self, url: str, payload: Dict[str, Any]) -> Tuple[bool, Optional[int], str]:
        self.posts.append((url, payload))
        return self.outcome


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_default_registry(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep process-wide level, logfile, target, listeners and LOG isolated."""
    monkeypatch.delenv("LOG", raising=False)
    default_registry.reset()
    yield
    default_registry.reset()


@pytest.fixture
def env_vars() -> Dict[str, str]:
    """Mutable fake environment consumed by the `registry` fixture."""
    return {}


@pytest.fixture
def registry(env_vars: Dict[str, str]) -> GlobalRegistry:
    """A private registry reading its environment from `env_vars`."""
    return GlobalRegistry(env=EnvironmentReader(env_vars))


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def opener() -> CountingOpener:
    return CountingOpener()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def relay_pool() -> Generator[ThreadPoolExecutor, None, None]:
    """Private relay pool so tests can wait for their own deliveries."""
    pool = ThreadPoolExecutor(max_workers=2, thread_name_prefix="catlog-remote-sink-test")
    yield pool
    pool.shutdown(wait=True)


@pytest.fixture
def join_relays(relay_pool: ThreadPoolExecutor) -> Callable[[], None]:
    """Return a helper that waits for every delivery queued on `relay_pool`."""

    def _join() -> None:
        relay_pool.shutdown(wait=True)

    return _join


@pytest.fixture
def dispatcher(
        console: RecordingConsole,
        opener: CountingOpener,
        transport: RecordingTransport,
        relay_pool: ThreadPoolExecutor,
) -> SinkDispatcher:
    """Dispatcher wired entirely to recording collaborators."""
    return SinkDispatcher(
        console=console,
        file_opener=opener,
        remote=RemoteSink(console, transport=transport, executor=relay_pool),
    )


@pytest.fixture
def make_logger(registry: GlobalRegistry, dispatcher: SinkDispatcher) -> Callable[..., Any]:
    """
    Factory building loggers bound to the private registry and dispatcher.

    Returns:
        Callable[..., Logger]: ``make_logger(category, **options)``.
    """
    import catlog

    def _factory(category: str, **options: Any) -> Any:
        return catlog.create(category, options, registry=registry, dispatcher=dispatcher)

    return _factory

