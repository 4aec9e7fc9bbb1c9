"""Pytest configuration and fixtures for update server tests."""

import pytest
from pathlib import Path
from typing import Callable, Iterable

from update_server.config import Config
from update_server.models import FilenameFieldLayout, Request
from update_server.server import create_app


@pytest.fixture
def layout() -> FilenameFieldLayout:
    """Default field layout: image_device_version.ext"""
    return FilenameFieldLayout()


@pytest.fixture
def images_dir(tmp_path: Path) -> Path:
    """Empty images directory."""
    directory = tmp_path / "images"
    directory.mkdir()
    return directory


@pytest.fixture
def make_catalog(images_dir: Path) -> Callable[[Iterable[str]], Path]:
    """Create files with the given names in the images directory."""
    def _make(names: Iterable[str]) -> Path:
        for name in names:
            (images_dir / name).write_bytes(f"IMAGE:{name}".encode())
        return images_dir
    return _make


@pytest.fixture
def sample_request() -> Request:
    """Request of a client running app 1.0.0 on deviceA."""
    return Request(image="app", device="deviceA", current_version="1.0.0")


@pytest.fixture
def config(images_dir: Path, layout: FilenameFieldLayout) -> Config:
    """Configuration pointing at the temporary images directory."""
    return Config(images_directory=str(images_dir), layout=layout)


@pytest.fixture
def app(config: Config):
    """Flask application under test."""
    app = create_app(config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
