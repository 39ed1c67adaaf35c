# steam_deploy/utils/async_utils.py
"""Asynchronous operation utilities"""

import asyncio
import threading
from typing import Any, Coroutine, TypeVar

T = TypeVar('T')


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run async coroutine in sync context

    Args:
        coro: Coroutine to run

    Returns:
        Coroutine result
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # No running loop, use asyncio.run
        return asyncio.run(coro)

    # Already in async context, run on a fresh loop in a worker thread
    outcome = {}

    def run_in_thread():
        try:
            outcome['result'] = asyncio.run(coro)
        except BaseException as e:
            outcome['error'] = e

    thread = threading.Thread(target=run_in_thread)
    thread.start()
    thread.join()

    if 'error' in outcome:
        raise outcome['error']
    return outcome['result']
