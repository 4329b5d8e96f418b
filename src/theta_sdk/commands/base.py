"""Command base decorators."""

__all__ = ["api_call"]

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from ..exceptions import NotConnectedError, ThetaError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def api_call(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
    """Error boundary for public camera operations.

    SDK exceptions pass through unchanged. Any other exception escaping the
    operation is reported as ``NotConnectedError`` carrying the cause's
    description. Nothing is retried.

    Usage example:
        >>> @api_call
        ... async def reset(self):
        ...     await self.executor.execute("camera._reset")
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return await func(*args, **kwargs)
        except ThetaError:
            raise
        except Exception as e:
            logger.debug(f"{func.__qualname__} failed: {type(e).__name__}: {e}")
            raise NotConnectedError(str(e) or type(e).__name__) from e

    return wrapper
