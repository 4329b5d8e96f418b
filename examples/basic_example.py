"""Basic example: Connect to a THETA camera, take a picture and list files.

This example demonstrates:
- Initializing the client (clock sync through Config)
- Taking a still image with a few capture options
- Listing the newest files in a rich table

Prerequisites:
    Connect your computer to the camera's Wi-Fi access point (the SSID starts with "THETA").
    In access point mode the camera is reachable at http://192.168.1.1.

Usage:
    python basic_example.py
    python basic_example.py --endpoint http://192.168.0.20
"""

import argparse
import asyncio
import logging
from datetime import datetime

from theta_sdk import Config, FileTypeEnum, IsoEnum, ThetaClient, console, create_file_table, setup_logging

# Enable logging with rich formatting
setup_logging(level=logging.INFO)

logger = logging.getLogger(__name__)


async def async_main(endpoint: str):
    """Connect to the camera, take a picture and show the latest files."""
    # Camera clock format: YYYY:MM:DD hh:mm:ss+hh:mm
    now = datetime.now().astimezone()
    offset = now.strftime("%z")
    config = Config(date_time=f"{now:%Y:%m:%d %H:%M:%S}{offset[:3]}:{offset[3:]}")

    async with ThetaClient(endpoint, config=config) as client:
        info = await client.get_theta_info()
        logger.info(f"Connected to {info.model} (firmware {info.firmware_version})")

        # Take a picture
        capture = await client.get_photo_capture_builder().set_iso(IsoEnum.ISO_AUTO).build()
        file_url = await capture.take_picture()
        logger.info(f"Picture saved: {file_url}")

        # Show the latest files
        file_list = await client.list_files(FileTypeEnum.IMAGE, entry_count=10)
        console.print(create_file_table(file_list, title="Latest images"))


def main():
    """Take a picture with a THETA camera."""
    parser = argparse.ArgumentParser(description="Take a picture with a RICOH THETA camera")
    parser.add_argument("--endpoint", default="http://192.168.1.1", help="Camera base URL")
    args = parser.parse_args()

    asyncio.run(async_main(args.endpoint))


if __name__ == "__main__":
    main()
