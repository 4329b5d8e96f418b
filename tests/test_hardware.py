"""Hardware tests - require a THETA camera at ``HARDWARE_ENDPOINT``.

Run with: pytest -m hardware
"""

import logging

import pytest

from theta_sdk import OptionNameEnum, ThetaClient
from theta_sdk.enums import FileTypeEnum

logger = logging.getLogger(__name__)

pytestmark = pytest.mark.hardware


async def test_camera_info(hardware_client: ThetaClient):
    """Test reading static information.

    Validates:
    1. Model and firmware are reported
    2. The model is remembered by the client
    """
    info = await hardware_client.get_theta_info()
    logger.info(f"Camera: {info.model} firmware {info.firmware_version}")

    assert info.model.startswith("RICOH THETA")
    assert info.firmware_version


async def test_camera_state(hardware_client: ThetaClient):
    state = await hardware_client.get_theta_state()
    logger.info(f"Battery: {state.battery_level:.0%} ({state.charging_state})")

    assert 0.0 <= state.battery_level <= 1.0


async def test_read_options(hardware_client: ThetaClient):
    options = await hardware_client.get_options([OptionNameEnum.CAPTURE_MODE, OptionNameEnum.SHUTTER_VOLUME])

    assert options.capture_mode is not None
    assert options.shutter_volume is not None


async def test_restore_config_read(hardware_client: ThetaClient):
    """The configuration read at initialization can be applied back."""
    assert hardware_client.restore_config is not None
    await hardware_client.restore_settings()


async def test_list_files(hardware_client: ThetaClient):
    file_list = await hardware_client.list_files(FileTypeEnum.ALL, entry_count=5)
    logger.info(f"{file_list.total_entries} files on camera")

    assert len(file_list.files) <= 5
    assert file_list.total_entries >= len(file_list.files)


@pytest.mark.slow
async def test_take_picture(hardware_client: ThetaClient):
    """Take a picture and delete it again."""
    capture = await hardware_client.get_photo_capture_builder().build()
    file_url = await capture.take_picture()
    logger.info(f"Picture saved: {file_url}")

    assert file_url.startswith("http")
    await hardware_client.delete_files([file_url])


@pytest.mark.slow
async def test_live_preview(hardware_client: ThetaClient):
    frames = []

    def handler(frame: bytes) -> bool:
        frames.append(frame)
        return len(frames) < 3

    await hardware_client.get_live_preview(handler)

    assert len(frames) == 3
    assert all(frame.startswith(b"\xff\xd8") for frame in frames)
