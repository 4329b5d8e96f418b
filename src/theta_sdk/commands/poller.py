"""Long-running command polling."""

from __future__ import annotations

__all__ = ["CommandPoller"]

import asyncio
import logging
from typing import Any

from ..exceptions import ThetaWebApiError
from ..wire import CommandResponse, CommandState
from .executor import CommandExecutor

logger = logging.getLogger(__name__)


class CommandPoller:
    """Drives a command from ``inProgress`` to ``done``.

    Polls ``/osc/commands/status`` at a fixed interval. There is no retry cap
    and no overall deadline; cancel the awaiting task to give up.
    """

    def __init__(self, executor: CommandExecutor, interval: float = 1.0) -> None:
        """Initialize poller.

        Args:
            executor: Command executor
            interval: Seconds between two status queries
        """
        self.executor = executor
        self.interval = interval

    async def execute(self, name: str, parameters: dict[str, Any] | None = None) -> CommandResponse:
        """Execute a command and wait until it is done.

        Returns:
            The ``done`` response envelope

        Raises:
            ThetaWebApiError: The command failed, at submission or while in progress
            NotConnectedError: The camera could not be reached
        """
        response = await self.executor.execute(name, parameters)
        return await self.wait(response)

    async def wait(self, response: CommandResponse) -> CommandResponse:
        while response.state == CommandState.IN_PROGRESS:
            if response.id is None:
                raise ThetaWebApiError(f"{response.name} is in progress but has no command id")

            if response.progress is not None and response.progress.completion is not None:
                logger.debug(f"{response.name} [{response.id}] progress: {response.progress.completion:.0%}")

            await asyncio.sleep(self.interval)
            response = await self.executor.status(response.id)

        return response
