"""Live preview: JPEG frames from the camera's MJPEG stream."""

from __future__ import annotations

__all__ = ["FrameExtractor", "LivePreview"]

import contextlib
import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable

from .commands.executor import EXECUTE_PATH
from .connection.http_manager import HttpConnectionManager

logger = logging.getLogger(__name__)

SOI = b"\xff\xd8"  # JPEG start of image
EOI = b"\xff\xd9"  # JPEG end of image

FrameHandler = Callable[[bytes], "bool | Awaitable[bool]"]


class FrameExtractor:
    """Cuts JPEG frames out of a multipart byte stream.

    Part boundaries and headers are skipped; everything from a start-of-image
    marker through the next end-of-image marker is one frame.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def feed(self, chunk: bytes) -> list[bytes]:
        """Add received bytes and return the frames they complete."""
        self._buffer.extend(chunk)
        frames: list[bytes] = []

        while True:
            start = self._buffer.find(SOI)
            if start < 0:
                # The last byte may be the first half of a marker
                del self._buffer[: max(len(self._buffer) - 1, 0)]
                break

            end = self._buffer.find(EOI, start + len(SOI))
            if end < 0:
                del self._buffer[:start]
                break

            frames.append(bytes(self._buffer[start : end + len(EOI)]))
            del self._buffer[: end + len(EOI)]

        return frames


class LivePreview:
    """Live preview of one camera.

    The stream holds one HTTP response open; it is released when iteration
    stops, the generator is closed or the consuming task is cancelled.
    """

    def __init__(self, http_manager: HttpConnectionManager) -> None:
        self.http = http_manager

    async def frames(self) -> AsyncIterator[bytes]:
        """Yield JPEG frames until the consumer stops.

        Raises:
            ThetaWebApiError: The camera refused the preview
            NotConnectedError: The camera could not be reached or the stream broke off
        """
        extractor = FrameExtractor()
        logger.info("Starting live preview...")
        async with self.http.stream(EXECUTE_PATH, {"name": "camera.getLivePreview"}) as resp:
            async for chunk in resp.content.iter_any():
                for frame in extractor.feed(chunk):
                    yield frame
        logger.debug("Live preview stream ended")

    async def run(self, frame_handler: FrameHandler) -> None:
        """Pass frames to ``frame_handler`` until it returns False.

        Args:
            frame_handler: Called with each JPEG frame; may be a coroutine function
        """
        async with contextlib.aclosing(self.frames()) as frames:
            async for frame in frames:
                result = frame_handler(frame)
                if inspect.isawaitable(result):
                    result = await result
                if not result:
                    logger.info("Live preview stopped by frame handler")
                    break
