"""Command: Media management

Provides functionality for listing, deleting and inspecting files, and for
converting videos on the camera.
"""

from __future__ import annotations

__all__ = ["MediaCommands", "VideoConversion"]

import logging
from enum import Enum

from ..enums import FileTypeEnum
from ..models import Exif, FileInfo, FileList, Xmp
from ..wire import ConvertVideoFormatsResults, ListFilesResults, MetadataResults
from .base import api_call
from .executor import CommandExecutor, convert, decode
from .poller import CommandPoller

logger = logging.getLogger(__name__)

VIDEO_SIZE_4K = "3840x1920"
VIDEO_SIZE_2K = "1920x960"
PROJECTION_EQUIRECTANGULAR = "Equirectangular"
CODEC_H264 = "H.264/MPEG-4 AVC"


class VideoConversion(Enum):
    """What a camera model supports of ``camera._convertVideoFormats``."""

    NONE = "none"  # files are already in their final format
    LOW_RESOLUTION_ONLY = "low_resolution_only"  # only 4K output, nothing else to apply
    FULL = "full"  # 2K/4K equirectangular with optional top/bottom correction


class MediaCommands:
    """Media management command interface."""

    def __init__(self, executor: CommandExecutor, poller: CommandPoller) -> None:
        """Initialize media command interface.

        Args:
            executor: Command executor
            poller: Poller for long-running commands
        """
        self.executor = executor
        self.poller = poller

    @api_call
    async def list_files(self, file_type: FileTypeEnum, start_position: int = 0, entry_count: int = 100) -> FileList:
        """List files stored on the camera.

        Args:
            file_type: Type of files to list
            start_position: Position of the first file to return
            entry_count: Maximum number of files to return

        Returns:
            One page of files and the total number of matching files

        Raises:
            ThetaWebApiError: Command failed
            NotConnectedError: Camera unreachable
        """
        logger.info(f"📂 Listing {file_type.value} files ({start_position}..+{entry_count})...")

        parameters = {
            "fileType": file_type.value,
            "startPosition": start_position,
            "entryCount": entry_count,
            "maxThumbSize": 0,
            "_detail": True,
        }
        results = await self.executor.execute_for(ListFilesResults, "camera.listFiles", parameters)
        files = [convert(FileInfo.from_wire, entry) for entry in results.entries]

        logger.info(f"✅ Found {len(files)} files (total {results.total_entries})")
        return FileList(files=files, total_entries=results.total_entries)

    @api_call
    async def delete_files(self, file_urls: list[str]) -> None:
        """Delete files.

        Args:
            file_urls: URLs of the files to delete, or a single ``"all"``,
                ``"image"`` or ``"video"`` to delete in bulk

        Raises:
            ThetaWebApiError: Command failed (e.g. a file does not exist)
            NotConnectedError: Camera unreachable
        """
        logger.info(f"🗑️ Deleting {len(file_urls)} file(s)...")
        await self.executor.execute("camera.delete", {"fileUrls": file_urls})
        logger.info("✅ Files deleted")

    async def delete_all_files(self) -> None:
        logger.warning("⚠️ Deleting all files on camera...")
        await self.delete_files([FileTypeEnum.ALL.value])

    async def delete_all_image_files(self) -> None:
        await self.delete_files([FileTypeEnum.IMAGE.value])

    async def delete_all_video_files(self) -> None:
        await self.delete_files([FileTypeEnum.VIDEO.value])

    @api_call
    async def get_metadata(self, file_url: str) -> tuple[Exif, Xmp]:
        """Get Exif and XMP metadata of a still image.

        Args:
            file_url: URL of the image

        Returns:
            (Exif, Xmp)
        """
        logger.debug(f"📄 Getting metadata: {file_url}")
        results = await self.executor.execute_for(MetadataResults, "camera._getMetadata", {"fileUrl": file_url})
        return convert(Exif.from_wire, results.exif), convert(Xmp.from_wire, results.xmp)

    @api_call
    async def convert_video_formats(
        self,
        file_url: str,
        to_low_resolution: bool,
        apply_top_bottom_correction: bool = True,
        conversion: VideoConversion = VideoConversion.FULL,
    ) -> str:
        """Convert a video file on the camera and wait for the result.

        Args:
            file_url: URL of the video to convert
            to_low_resolution: Request 2K output (4K on THETA X) instead of 4K
            apply_top_bottom_correction: Apply top/bottom (zenith) correction
            conversion: What the connected camera model supports

        Returns:
            URL of the converted file; the input URL when the model has nothing to convert
        """
        if conversion == VideoConversion.NONE:
            return file_url

        if conversion == VideoConversion.LOW_RESOLUTION_ONLY:
            if not to_low_resolution:
                return file_url
            parameters = {"fileUrl": file_url, "size": VIDEO_SIZE_4K}
        else:
            parameters = {
                "fileUrl": file_url,
                "size": VIDEO_SIZE_2K if to_low_resolution else VIDEO_SIZE_4K,
                "projectionType": PROJECTION_EQUIRECTANGULAR,
                "codec": CODEC_H264,
                "topBottomCorrection": "Apply" if apply_top_bottom_correction else "Disapply",
            }

        logger.info(f"🎞️ Converting video {file_url} to {parameters['size']}...")
        response = await self.poller.execute("camera._convertVideoFormats", parameters)
        results = decode(ConvertVideoFormatsResults, response.results)

        logger.info(f"✅ Video converted: {results.file_url}")
        return results.file_url

    @api_call
    async def cancel_video_convert(self) -> None:
        """Cancel the running video conversion."""
        logger.info("Cancelling video conversion...")
        await self.executor.execute("camera._cancelVideoConvert")
