"""Command-line entrypoint: print the BlurHash of an image path or URL."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .components import validate_components
from .config import AppConfig, load_config
from .encoder import encode_image
from .errors import BlurhasherError, ComponentsError, ConfigError, EncodeFailure, LoadError
from .logging_utils import configure_logging, get_logger
from .sources import SourceDispatcher

EXIT_OK = 0
EXIT_INVALID_COMPONENTS = 2
EXIT_LOAD_FAILED = 3
EXIT_ENCODE_FAILED = 4
EXIT_CONFIG_FAILED = 5

logger = get_logger("cli")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="blurhasher",
        description="Compute the BlurHash of a local image or an image URL.",
    )
    p.add_argument("image", help="Input image file path or URL.")
    p.add_argument(
        "-x",
        "--components-x",
        type=int,
        metavar="NUM",
        default=None,
        help="Number of components for X axis (1-9).",
    )
    p.add_argument(
        "-y",
        "--components-y",
        type=int,
        metavar="NUM",
        default=None,
        help="Number of components for Y axis (1-9).",
    )
    p.add_argument("--config", type=Path, default=None, help="Optional path to a YAML config.")
    p.add_argument("--log-level", default=None, help="Override the configured log level.")
    p.add_argument("--log-dir", type=Path, default=None, help="Write a rotating log file here.")
    p.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Network timeout in seconds (default: wait indefinitely).",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p.parse_args(argv)


def run(args: argparse.Namespace, config: AppConfig, dispatcher: SourceDispatcher | None = None) -> str:
    """Validate, load and encode; return the hash or raise ``BlurhasherError``."""

    components = validate_components(
        args.components_x,
        args.components_y,
        default_x=config.encoder.default_components_x,
        default_y=config.encoder.default_components_y,
    )
    dispatcher = dispatcher or SourceDispatcher(config=config.fetch)
    image = dispatcher.load(args.image)
    return encode_image(image, components)


def _apply_overrides(args: argparse.Namespace, config: AppConfig) -> AppConfig:
    if args.timeout is not None:
        if args.timeout <= 0:
            raise ConfigError("--timeout must be greater than zero")
        config.fetch.fetch_timeout_s = args.timeout
    if args.log_level:
        config.logging.level = args.log_level
    if args.log_dir is not None:
        config.logging.log_dir = args.log_dir
    return config


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    args = _parse_args(argv)

    # Explicit counts are checked before the config file is read.
    if args.components_x is not None or args.components_y is not None:
        try:
            validate_components(args.components_x, args.components_y)
        except ComponentsError as exc:
            configure_logging(None, "WARNING")
            return _fail(exc, EXIT_INVALID_COMPONENTS)

    try:
        config = _apply_overrides(args, load_config(args.config))
    except ConfigError as exc:
        configure_logging(None, "WARNING")
        return _fail(exc, EXIT_CONFIG_FAILED)

    try:
        configure_logging(config.logging.log_dir, config.logging.level)
    except ValueError as exc:
        configure_logging(None, "WARNING")
        return _fail(ConfigError(f"Invalid log level: {exc}"), EXIT_CONFIG_FAILED)

    try:
        blurhash = run(args, config)
    except ComponentsError as exc:
        return _fail(exc, EXIT_INVALID_COMPONENTS)
    except LoadError as exc:
        return _fail(exc, EXIT_LOAD_FAILED)
    except EncodeFailure as exc:
        return _fail(exc, EXIT_ENCODE_FAILED)

    print(blurhash)
    return EXIT_OK


def _fail(exc: BlurhasherError, code: int) -> int:
    logger.debug("Exiting with code {} after {}", code, type(exc).__name__)
    print(f"error: {exc}", file=sys.stderr)
    return code


if __name__ == "__main__":
    sys.exit(main())
