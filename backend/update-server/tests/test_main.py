"""Tests for the server entry point."""

import logging
from unittest.mock import patch

import pytest

from update_server.main import main


class TestMain:
    """Test cases for starting the server."""

    def test_runs_app_with_configured_address(self, images_dir):
        with patch("update_server.main.create_app") as create_app:
            main(["--images_directory", str(images_dir), "--listen_ip", "127.0.0.1", "--listen_port", "9090"])

        config = create_app.call_args.args[0]
        assert config.images_directory == str(images_dir)
        create_app.return_value.run.assert_called_once_with(host="127.0.0.1", port=9090, threaded=True)

    def test_bind_failure_exits(self, images_dir):
        with patch("update_server.main.create_app") as create_app:
            create_app.return_value.run.side_effect = OSError("Address already in use")

            with pytest.raises(SystemExit) as exc_info:
                main(["--images_directory", str(images_dir)])

        assert exc_info.value.code == 1

    def test_invalid_flag_exits_before_start(self):
        with patch("update_server.main.create_app") as create_app:
            with pytest.raises(SystemExit) as exc_info:
                main(["--images_directory", "x", "--filename_field_version", "v"])

        assert exc_info.value.code == 2
        create_app.assert_not_called()

    def test_missing_directory_warned_after_logging_setup(self, tmp_path, caplog):
        missing = tmp_path / "later"
        records_at_setup = []

        with patch("update_server.main.create_app"), patch("update_server.main.logging.basicConfig") as basic_config:
            basic_config.side_effect = lambda **kwargs: records_at_setup.append(len(caplog.records))
            with caplog.at_level(logging.WARNING, logger="update_server.main"):
                main(["--images_directory", str(missing)])

        assert records_at_setup == [0]
        assert f"Images directory {missing} does not exist" in caplog.text
