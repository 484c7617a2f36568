"""Server bootstrap: logging setup and component wiring."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from xcdocs.config.schema import Config
from xcdocs.mcp.server import MCPServer
from xcdocs.providers import Providers, build_providers
from xcdocs.tools.dispatch import ToolDispatcher

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_server_logging(
    level: int = logging.WARNING,
    log_file: Path | None = None,
    file_level: int = logging.DEBUG,
) -> None:
    """Configure logging for the xcdocs namespace.

    Console output always goes to stderr: stdout carries protocol messages
    only. With log_file set, a rotating file handler (max 5MB per file,
    3 backup files) is added as well.

    Args:
        level: Logging level for stderr output.
        log_file: Optional log file path. Parent directories are created.
        file_level: Logging level for the log file.
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    xcdocs_logger = logging.getLogger("xcdocs")

    # Remove any existing handlers to avoid duplicates on reconfigure
    xcdocs_logger.handlers.clear()
    xcdocs_logger.addHandler(console_handler)
    effective = level

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        xcdocs_logger.addHandler(file_handler)
        effective = min(level, file_level)

    xcdocs_logger.setLevel(effective)

    # Don't propagate to root logger
    xcdocs_logger.propagate = False

    if log_file is not None:
        logger.info("Server logging configured: %s", log_file)


def build_server(config: Config, providers: Providers | None = None) -> MCPServer:
    """Wire providers, dispatcher, and protocol engine from a config."""
    if providers is None:
        providers = build_providers(config)
    return MCPServer(config, ToolDispatcher(providers, config))
