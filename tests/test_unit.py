"""Unit tests - no camera required.

Tests package imports, class instantiation, and behavior that doesn't need a network.
"""

import logging

import aiohttp
import pytest


def test_package_imports():
    """Test that the main package can be imported."""
    import theta_sdk

    assert theta_sdk.__version__ is not None
    assert isinstance(theta_sdk.__version__, str)
    assert len(theta_sdk.__version__) > 0


def test_public_names_exported():
    import theta_sdk

    for name in ("ThetaClient", "Options", "OptionNameEnum", "Config", "OffDelayEnum", "IsoEnum"):
        assert name in theta_sdk.__all__
        assert hasattr(theta_sdk, name)


def test_exception_hierarchy():
    from theta_sdk.exceptions import InvalidOptionValueError, NotConnectedError, ThetaError, ThetaWebApiError

    assert issubclass(ThetaWebApiError, ThetaError)
    assert issubclass(NotConnectedError, ThetaError)
    assert issubclass(InvalidOptionValueError, ThetaError)
    assert issubclass(InvalidOptionValueError, TypeError)
    assert not issubclass(ThetaWebApiError, NotConnectedError)


async def test_client_creation():
    """Creating a client sends nothing and opens no session."""
    from theta_sdk import ThetaClient

    client = ThetaClient("http://192.168.1.1/")
    assert client.endpoint == "http://192.168.1.1/"
    assert client.http.base_url == "http://192.168.1.1"
    assert client.camera_model is None
    assert client.restore_config is None
    assert not client.http.is_connected
    await client.close()


def test_timeout_config_defaults():
    from theta_sdk import TimeoutConfig

    config = TimeoutConfig()
    timeout = config.to_client_timeout()

    assert config.status_poll_interval == 1.0
    assert isinstance(timeout, aiohttp.ClientTimeout)
    assert timeout.total == 20.0
    assert timeout.sock_connect == 20.0
    assert timeout.sock_read == 20.0
    assert config.to_preview_timeout().total is None


def test_setup_logging_quiets_third_party():
    from theta_sdk import setup_logging

    setup_logging(level=logging.DEBUG, show_wire=True)
    assert logging.getLogger("aiohttp").level == logging.WARNING
    assert logging.getLogger("theta_sdk.connection").level == logging.DEBUG

    setup_logging(level=logging.DEBUG)
    assert logging.getLogger("theta_sdk.connection").level == logging.INFO


@pytest.mark.parametrize(
    ("size", "expected"),
    [(512, "512 B"), (2048, "2.0 KB"), (5 * 1024 * 1024, "5.0 MB"), (3 * 1024**3, "3.0 GB")],
)
def test_format_size(size, expected):
    from theta_sdk.rich_utils import format_size

    assert format_size(size) == expected


def test_file_and_options_tables():
    from theta_sdk import FileInfo, FileList, IsoEnum, Options
    from theta_sdk.rich_utils import create_file_table, create_options_table

    file_list = FileList(
        files=[FileInfo("R0010015.JPG", 4051440, "2015:07:10 11:05", "http://x/R0010015.JPG", "http://x/t")],
        total_entries=7,
    )
    table = create_file_table(file_list)
    assert table.row_count == 1
    assert table.caption == "7 files in total"

    options_table = create_options_table(Options(iso=IsoEnum.ISO_200, shutter_volume=40))
    assert options_table.row_count == 2
