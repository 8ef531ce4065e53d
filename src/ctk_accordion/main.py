"""
Main entry point for the accordion demo.

This module provides the main entry point when the package is installed
and called via the ctk-accordion-demo command.
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import Optional

from . import __version__
from .config import AccordionSettings, get_config_manager
from .exceptions import AccordionError


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Setup application logging."""

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    handlers = []

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(log_format))
    handlers.append(console_handler)

    # File handler
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(log_format))
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        handlers=handlers,
        format=log_format,
        force=True,
    )

    # Pillow is pulled in by customtkinter and is chatty at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {log_level}")


def parse_arguments(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse command-line arguments."""

    parser = argparse.ArgumentParser(
        description="Accordion widget demo for CustomTkinter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Run with default settings
  %(prog)s --multi-open             # Allow several sections open at once
  %(prog)s --config my_config.env   # Run with custom config file
        """
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration file (.env format)"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from configuration, INFO)"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write log records to this file"
    )

    parser.add_argument(
        "--theme",
        choices=["light", "dark", "system"],
        help="Appearance mode (overrides config)"
    )

    parser.add_argument(
        "--multi-open",
        action="store_true",
        default=None,
        help="Start in multi-open mode (overrides config)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> AccordionSettings:
    """Load settings from the environment, a config file and CLI overrides."""
    manager = get_config_manager()
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {args.config}")
        manager.config_path = config_path

    return manager.load_config(
        appearance_mode=args.theme,
        multi_open=args.multi_open,
        log_level=args.log_level,
    )


def run_gui_mode(config: AccordionSettings) -> int:
    """Run the demo window until it is closed."""

    logger = logging.getLogger(__name__)

    try:
        from .gui import MainWindow

        logger.info("Starting accordion demo")
        app = MainWindow(config)
        app.run()

        logger.info("Application closed normally")
        return 0

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        return 1

    except Exception as e:
        logger.error(f"Application error: {e}", exc_info=True)
        return 1


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""

    args = parse_arguments(argv)

    try:
        config = load_settings(args)
    except (AccordionError, FileNotFoundError) as e:
        setup_logging(args.log_level or "INFO", args.log_file)
        logging.getLogger(__name__).error(f"Startup failed: {e}")
        return 1

    setup_logging(config.log_level, args.log_file)
    logger = logging.getLogger(__name__)
    logger.info(f"Accordion demo version {__version__}")

    return run_gui_mode(config)


if __name__ == "__main__":
    sys.exit(main())
