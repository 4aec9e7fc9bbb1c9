"""Configuration module for the update server."""

import argparse
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from dotenv import load_dotenv

from . import __version__
from .errors import ConfigError
from .models import FilenameFieldLayout

ENV_PREFIX = "UPDATE_SERVER_"

DEFAULT_LISTEN_IP = "0.0.0.0"
DEFAULT_LISTEN_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """Startup configuration; never changed once the server runs."""
    images_directory: str
    listen_ip: str = DEFAULT_LISTEN_IP
    listen_port: int = DEFAULT_LISTEN_PORT
    layout: FilenameFieldLayout = field(default_factory=FilenameFieldLayout)
    log_level: str = DEFAULT_LOG_LEVEL


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def _port(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}")
    if not 1 <= number <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range 1..65535: {value!r}")
    return number


def build_parser(environ: Mapping[str, str]) -> argparse.ArgumentParser:
    """
    Build the command line parser.

    Environment variables prefixed with UPDATE_SERVER_ provide the defaults of
    the corresponding flags.
    """
    def env(name: str, default: Optional[str] = None) -> Optional[str]:
        return environ.get(ENV_PREFIX + name.upper(), default)

    parser = argparse.ArgumentParser(
        prog="swupdate-httpd",
        description="Minimal HTTP server that provides update images for SWUpdate clients.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    images_directory = env("images_directory")
    parser.add_argument(
        "--images_directory",
        default=images_directory,
        required=images_directory is None,
        help="The directory where the update images are placed.",
    )
    parser.add_argument(
        "--listen_ip",
        default=env("listen_ip", DEFAULT_LISTEN_IP),
        help="The interface to listen on.",
    )
    parser.add_argument(
        "--listen_port",
        type=_port,
        default=env("listen_port", str(DEFAULT_LISTEN_PORT)),
        help="The port to listen on.",
    )
    parser.add_argument(
        "--filename_fields_separator",
        default=env("filename_fields_separator", "_"),
        help="The separator used in the filename to separate the fields.",
    )
    parser.add_argument(
        "--filename_field_image_identifier",
        type=_non_negative_int,
        default=env("filename_field_image_identifier", "0"),
        help="The index of the field in the filename that contains the image identifier.",
    )
    parser.add_argument(
        "--filename_field_device_type",
        type=_non_negative_int,
        default=env("filename_field_device_type", "1"),
        help="The index of the field in the filename that contains the device type.",
    )
    parser.add_argument(
        "--filename_field_version",
        type=_non_negative_int,
        default=env("filename_field_version", "2"),
        help="The index of the field in the filename that contains the version number.",
    )
    parser.add_argument(
        "--log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=env("log_level", DEFAULT_LOG_LEVEL),
        help="Logging level.",
    )
    return parser


def load_config(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """
    Build the configuration from command line flags and the environment.

    When no environment mapping is given, a .env file in the working directory
    is loaded into os.environ first.

    Args:
        argv: Command line arguments without the program name
        environ: Environment variables (defaults to os.environ)

    Returns:
        Immutable configuration

    Raises:
        SystemExit: with status 2 on invalid flags or values
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    parser = build_parser(environ)
    args = parser.parse_args(argv)

    try:
        layout = FilenameFieldLayout(
            separator=args.filename_fields_separator,
            image_field_index=args.filename_field_image_identifier,
            device_field_index=args.filename_field_device_type,
            version_field_index=args.filename_field_version,
        )
    except ConfigError as e:
        parser.error(str(e))

    if not args.images_directory:
        parser.error("images directory must not be empty")

    # choices are not checked for values taken from the environment
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level: {args.log_level!r}")

    return Config(
        images_directory=os.path.abspath(args.images_directory),
        listen_ip=args.listen_ip,
        listen_port=args.listen_port,
        layout=layout,
        log_level=args.log_level,
    )
