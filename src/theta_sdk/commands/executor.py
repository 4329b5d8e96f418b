"""Command executor.

Sends commands to ``/osc/commands/execute`` and interprets the response
envelope. Also covers the two plain endpoints, ``/osc/info`` and ``/osc/state``.
"""

from __future__ import annotations

__all__ = ["CommandExecutor", "convert", "decode"]

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from ..connection.http_manager import HttpConnectionManager
from ..exceptions import ThetaWebApiError
from ..wire import CommandResponse, CommandState, InfoResponse, StateResponse, WireObject

logger = logging.getLogger(__name__)

W = TypeVar("W", bound=WireObject)
T = TypeVar("T")

INFO_PATH = "osc/info"
STATE_PATH = "osc/state"
EXECUTE_PATH = "osc/commands/execute"
STATUS_PATH = "osc/commands/status"


def decode(wire_cls: type[W], data: Any) -> W:
    """Decode a JSON value into a wire object.

    Raises:
        ThetaWebApiError: The value does not have the expected shape
    """
    try:
        return wire_cls.from_dict(data)
    except (TypeError, KeyError, ValueError) as e:
        raise ThetaWebApiError(f"Illegal response, cannot read {wire_cls.__name__}: {e}") from e


def convert(converter: Callable[[W], T], wire: W) -> T:
    """Convert a decoded wire object into its public form.

    Raises:
        ThetaWebApiError: A value has the wrong type for its field
    """
    try:
        return converter(wire)
    except (TypeError, KeyError, ValueError) as e:
        raise ThetaWebApiError(f"Illegal response, cannot read {type(wire).__name__}: {e}") from e


class CommandExecutor:
    """Executes camera commands through an HTTP connection manager."""

    def __init__(self, http_manager: HttpConnectionManager) -> None:
        self.http = http_manager

    async def get_info(self) -> InfoResponse:
        data = await self.http.get_json(INFO_PATH)
        return decode(InfoResponse, data)

    async def get_state(self) -> StateResponse:
        data = await self.http.post_json(STATE_PATH)
        return decode(StateResponse, data)

    async def execute(self, name: str, parameters: dict[str, Any] | None = None) -> CommandResponse:
        """Execute a command.

        Args:
            name: Command name, e.g. ``camera.listFiles``
            parameters: Command parameters, omitted from the request when None

        Returns:
            The response envelope, ``done`` or ``inProgress``

        Raises:
            ThetaWebApiError: The camera answered with an error envelope or an unreadable body
            NotConnectedError: The camera could not be reached
        """
        body: dict[str, Any] = {"name": name}
        if parameters is not None:
            body["parameters"] = parameters

        logger.debug(f"Executing {name}")
        response = decode(CommandResponse, await self.http.post_json(EXECUTE_PATH, body))
        _raise_for_error(response)
        return response

    async def status(self, command_id: str) -> CommandResponse:
        """Query the state of an in-progress command.

        Raises:
            ThetaWebApiError: The command failed or the reply is unreadable
            NotConnectedError: The camera could not be reached
        """
        response = decode(CommandResponse, await self.http.post_json(STATUS_PATH, {"id": command_id}))
        _raise_for_error(response)
        return response

    async def execute_for(self, wire_cls: type[W], name: str, parameters: dict[str, Any] | None = None) -> W:
        """Execute a command that completes immediately and decode its results."""
        response = await self.execute(name, parameters)
        return decode(wire_cls, response.results)


def _raise_for_error(response: CommandResponse) -> None:
    if response.error is not None:
        raise ThetaWebApiError(response.error.message or f"{response.name} failed ({response.error.code})")
    if response.state == CommandState.ERROR:
        raise ThetaWebApiError(f"{response.name} failed")
