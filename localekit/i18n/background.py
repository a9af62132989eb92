"""Background executor for not-found lookups that complete later.

Coroutines returned by a not-found callback while no event loop is running
are driven to completion on a module-scoped thread pool.
"""

import asyncio
import atexit
from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock
from typing import Any, Coroutine, Optional

from localekit.logging import get_module_logger

logger = get_module_logger()

_EXECUTOR: Optional[ThreadPoolExecutor] = None
_executor_lock = Lock()
_executor_shutdown = False


def _get_or_create_executor(max_workers: int = 2) -> Optional[ThreadPoolExecutor]:
    """Lazily create the module-scoped executor if needed.

    Returns None when the executor has been explicitly shut down.
    """
    global _EXECUTOR
    with _executor_lock:
        if _executor_shutdown:
            return None
        if _EXECUTOR is None:
            _EXECUTOR = ThreadPoolExecutor(
                max_workers=max_workers,
                thread_name_prefix="localekit-i18n",
            )
            logger.debug("created_background_executor", max_workers=max_workers)
        return _EXECUTOR


def run_coroutine_in_background(coro: Coroutine[Any, Any, Any]) -> Optional[Future]:
    """Run a coroutine on its own event loop in a worker thread.

    Args:
        coro: Coroutine to run.

    Returns:
        Future for the coroutine's result, or None if the executor is shut
        down (the coroutine is closed without running).
    """
    executor = _get_or_create_executor()
    if executor is None:
        logger.warning("background_executor_shut_down")
        coro.close()
        return None
    return executor.submit(asyncio.run, coro)


def shutdown_background_executor(wait: bool = True) -> None:
    """Shut down the executor and prevent further submissions.

    Idempotent.

    Args:
        wait: If True, wait for pending coroutines to complete.
    """
    global _EXECUTOR, _executor_shutdown
    with _executor_lock:
        if _EXECUTOR is None:
            _executor_shutdown = True
            return
        try:
            _EXECUTOR.shutdown(wait=wait)
            logger.debug("background_executor_shut_down", wait=wait)
        finally:
            _EXECUTOR = None
            _executor_shutdown = True


@atexit.register
def _atexit_shutdown():
    """Best-effort shutdown at process exit."""
    shutdown_background_executor(wait=False)
