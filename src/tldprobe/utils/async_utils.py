"""Run the async probing pipeline from synchronous CLI code."""

import asyncio
import signal
import sys
import threading
from collections.abc import Coroutine, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar, cast

_STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)

T = TypeVar("T")


def _can_install_signal_handlers() -> bool:
    return sys.platform != "win32" and threading.current_thread() is threading.main_thread()


@contextmanager
def _cancel_on_signal(loop: asyncio.AbstractEventLoop) -> Iterator[threading.Event]:
    """Cancel every task on *loop* when SIGINT or SIGTERM arrives."""
    interrupted = threading.Event()
    if not _can_install_signal_handlers():
        yield interrupted
        return

    def handler(signum: int, frame: Any) -> None:
        interrupted.set()
        for task in asyncio.all_tasks(loop):
            task.cancel()

    previous = {sig: signal.signal(sig, handler) for sig in _STOP_SIGNALS}
    try:
        yield interrupted
    finally:
        for sig, old_handler in previous.items():
            signal.signal(sig, old_handler)


def _close_loop(loop: asyncio.AbstractEventLoop) -> None:
    """Cancel leftover workers, drain async generators and the resolver executor."""
    try:
        pending = asyncio.all_tasks(loop)
        for task in pending:
            task.cancel()
        if pending:
            loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))

        for shutdown in (loop.shutdown_asyncgens, loop.shutdown_default_executor):
            try:
                loop.run_until_complete(shutdown())
            except RuntimeError:
                pass
    finally:
        asyncio.set_event_loop(None)
        loop.close()


def _run_in_fresh_loop(coro: Coroutine[Any, Any, T]) -> T:
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    with _cancel_on_signal(loop) as interrupted:
        try:
            return loop.run_until_complete(coro)
        except asyncio.CancelledError:
            if interrupted.is_set():
                raise KeyboardInterrupt from None
            raise
        finally:
            _close_loop(loop)


def safe_async_run(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run *coro* to completion on a private event loop.

    Ctrl-C cancels the in-flight probes and surfaces as ``KeyboardInterrupt``.
    When a loop is already running in this thread (pytest-asyncio, notebooks)
    the coroutine runs on a helper thread instead.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return _run_in_fresh_loop(coro)

    outcome: dict[str, Any] = {}

    def _runner() -> None:
        try:
            outcome["result"] = _run_in_fresh_loop(coro)
        except BaseException as exc:
            outcome["error"] = exc

    thread = threading.Thread(target=_runner, name="tldprobe-loop", daemon=True)
    thread.start()
    thread.join()

    if "error" in outcome:
        raise outcome["error"]
    return cast(T, outcome.get("result"))
