"""Pytest configuration and common fixtures.

Most tests run against ``FakeTheta``, an aiohttp application that speaks
enough of the OSC Web API to stand in for a camera. It records every request
and answers commands from queued replies, falling back to plain ``done``
envelopes.
"""

from __future__ import annotations

import asyncio
from collections import defaultdict, deque
from collections.abc import AsyncGenerator
from dataclasses import dataclass
from typing import Any

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from theta_sdk import ThetaClient, TimeoutConfig

# Camera used by hardware tests (THETA access point mode address)
HARDWARE_ENDPOINT = "http://192.168.1.1"

PREVIEW_BOUNDARY = b"---osclivepreview---"


# ==================== Envelope builders ====================


def done(name: str, results: dict[str, Any] | None = None) -> dict[str, Any]:
    envelope: dict[str, Any] = {"name": name, "state": "done"}
    if results is not None:
        envelope["results"] = results
    return envelope


def in_progress(name: str, command_id: str, completion: float = 0.5) -> dict[str, Any]:
    return {"name": name, "state": "inProgress", "id": command_id, "progress": {"completion": completion}}


def error(name: str, message: str, code: str = "invalidParameterValue") -> dict[str, Any]:
    return {"name": name, "state": "error", "error": {"code": code, "message": message}}


def info_body(model: str = "RICOH THETA Z1", firmware: str = "2.20.3") -> dict[str, Any]:
    return {
        "manufacturer": "RICOH",
        "model": model,
        "serialNumber": "10010104",
        "_wlanMacAddress": "00:45:78:bc:45:67",
        "_bluetoothMacAddress": "00:45:78:bc:45:67",
        "firmwareVersion": firmware,
        "supportUrl": "https://theta360.com/en/support/",
        "gps": False,
        "gyro": True,
        "uptime": 67,
        "api": ["/osc/info", "/osc/state", "/osc/checkForUpdates", "/osc/commands/execute", "/osc/commands/status"],
        "endpoints": {"httpPort": 80, "httpUpdatesPort": 80},
        "apiLevel": [2],
    }


def state_body(api_version: int = 2) -> dict[str, Any]:
    return {
        "batteryLevel": 0.8,
        "_batteryState": "charging",
        "_apiVersion": api_version,
        "_currentStorage": "IN",
        "_recordedTime": 0,
        "_recordableTime": 1500,
        "_latestFileUrl": "http://192.168.1.1/files/100RICOH/R0010015.JPG",
        "_captureStatus": "idle",
        "storageUri": "http://192.168.1.1/files/abcde/",
    }


@dataclass
class Reply:
    """A canned HTTP reply: a JSON body, or raw text (str) or raw bytes."""

    body: Any
    status: int = 200


class FakeTheta:
    """Scriptable stand-in for a THETA camera."""

    def __init__(self) -> None:
        self.info = info_body()
        self.state = state_body()
        self.options: dict[str, Any] = {}
        self.preview_frames: list[bytes] = [b"\xff\xd8frame-1\xff\xd9", b"\xff\xd8frame-2\xff\xd9"]
        self.delay = 0.0
        # Repeat preview_frames until the client disconnects
        self.preview_endless = False
        self.preview_closed = asyncio.Event()

        self.requests: list[tuple[str, Any]] = []
        self._command_replies: dict[str, deque[Reply]] = defaultdict(deque)
        self._status_replies: deque[Reply] = deque()
        self._endpoint_replies: dict[str, deque[Reply]] = defaultdict(deque)

    # ==================== Scripting ====================

    def reply(self, name: str, body: Any, status: int = 200) -> None:
        """Queue the reply for the next execution of command ``name``."""
        self._command_replies[name].append(Reply(body, status))

    def reply_status(self, body: Any, status: int = 200) -> None:
        """Queue the reply for the next ``/osc/commands/status`` request."""
        self._status_replies.append(Reply(body, status))

    def reply_endpoint(self, path: str, body: Any, status: int = 200) -> None:
        """Queue the reply for the next request to ``path`` (e.g. ``/osc/info``)."""
        self._endpoint_replies[path].append(Reply(body, status))

    # ==================== Inspection ====================

    def commands(self) -> list[str]:
        """Names of executed commands, in order."""
        return [body["name"] for path, body in self.requests if path == "/osc/commands/execute"]

    def parameters(self, name: str) -> list[dict[str, Any]]:
        """Parameters of every execution of command ``name``."""
        return [
            body.get("parameters", {})
            for path, body in self.requests
            if path == "/osc/commands/execute" and body["name"] == name
        ]

    def paths(self) -> list[str]:
        return [path for path, _ in self.requests]

    # ==================== Application ====================

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/osc/info", self._handle_info)
        app.router.add_post("/osc/state", self._handle_state)
        app.router.add_post("/osc/commands/execute", self._handle_execute)
        app.router.add_post("/osc/commands/status", self._handle_status)
        return app

    async def _handle_info(self, request: web.Request) -> web.StreamResponse:
        self.requests.append((request.path, None))
        return await self._respond(request.path, Reply(self.info))

    async def _handle_state(self, request: web.Request) -> web.StreamResponse:
        self.requests.append((request.path, None))
        return await self._respond(request.path, Reply({"fingerprint": "FIG_0001", "state": self.state}))

    async def _handle_execute(self, request: web.Request) -> web.StreamResponse:
        body = await request.json()
        self.requests.append((request.path, body))
        name = body["name"]

        if self._command_replies[name]:
            return await self._send(self._command_replies[name].popleft())
        if name == "camera.getLivePreview":
            return await self._stream_preview(request)
        return await self._send(Reply(self._default_reply(name, body.get("parameters", {}))))

    async def _handle_status(self, request: web.Request) -> web.StreamResponse:
        body = await request.json()
        self.requests.append((request.path, body))
        if not self._status_replies:
            return await self._send(Reply(error("unknown", "No command in progress"), 400))
        return await self._send(self._status_replies.popleft())

    def _default_reply(self, name: str, parameters: dict[str, Any]) -> dict[str, Any]:
        if name == "camera.getOptions":
            names = parameters.get("optionNames", [])
            return done(name, {"options": {key: self.options[key] for key in names if key in self.options}})
        if name == "camera.setOptions":
            self.options.update(parameters.get("options", {}))
            return done(name)
        if name == "camera.startSession":
            return done(name, {"sessionId": "SID_0001", "timeout": 180})
        return done(name)

    async def _respond(self, path: str, default: Reply) -> web.StreamResponse:
        queued = self._endpoint_replies[path]
        return await self._send(queued.popleft() if queued else default)

    async def _send(self, reply: Reply) -> web.StreamResponse:
        if self.delay:
            await asyncio.sleep(self.delay)
        if isinstance(reply.body, bytes):
            return web.Response(body=reply.body, status=reply.status)
        if isinstance(reply.body, str):
            return web.Response(text=reply.body, status=reply.status)
        return web.json_response(reply.body, status=reply.status)

    async def _stream_preview(self, request: web.Request) -> web.StreamResponse:
        response = web.StreamResponse(
            headers={"Content-Type": f"multipart/x-mixed-replace; boundary={PREVIEW_BOUNDARY.decode()}"}
        )
        await response.prepare(request)
        try:
            while True:
                for frame in self.preview_frames:
                    part = (
                        PREVIEW_BOUNDARY
                        + b"\r\nContent-type: image/jpeg\r\nContent-Length: "
                        + str(len(frame)).encode()
                        + b"\r\n\r\n"
                        + frame
                        + b"\r\n"
                    )
                    # Split parts so frames straddle chunk boundaries
                    middle = len(part) // 2
                    await response.write(part[:middle])
                    await response.write(part[middle:])
                if not self.preview_endless:
                    break
                await asyncio.sleep(0.01)
            await response.write_eof()
        finally:
            # Reached on normal end, and when a write fails because the client went away
            self.preview_closed.set()
        return response


# ==================== Fixtures ====================


@pytest.fixture
def fake_theta() -> FakeTheta:
    return FakeTheta()


@pytest.fixture
async def theta_server(fake_theta: FakeTheta) -> AsyncGenerator[TestServer, None]:
    server = TestServer(fake_theta.app())
    await server.start_server()
    try:
        yield server
    finally:
        await server.close()


@pytest.fixture
def endpoint(theta_server: TestServer) -> str:
    return str(theta_server.make_url("/")).rstrip("/")


@pytest.fixture
def timeout_config() -> TimeoutConfig:
    """Short timeouts and fast polling for tests."""
    return TimeoutConfig(
        connect_timeout=2.0,
        request_timeout=2.0,
        socket_timeout=2.0,
        status_poll_interval=0.01,
        preview_read_timeout=2.0,
    )


@pytest.fixture
async def theta_client(endpoint: str, timeout_config: TimeoutConfig) -> AsyncGenerator[ThetaClient, None]:
    """Client pointing at the fake camera, not initialized."""
    client = ThetaClient(endpoint, timeout_config=timeout_config)
    try:
        yield client
    finally:
        await client.close()


@pytest.fixture
async def hardware_client() -> AsyncGenerator[ThetaClient, None]:
    """Initialized client for a real camera at ``HARDWARE_ENDPOINT``."""
    async with ThetaClient(HARDWARE_ENDPOINT) as client:
        yield client
