"""stdio server mode.

Runs the MCP server on stdin/stdout until stdin is closed. Logs go to
stderr (and optionally a rotating log file), never to stdout.

Example client configuration:
    {"command": "xcdocs", "args": ["serve"]}
"""

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

from xcdocs.config.loader import load_config
from xcdocs.core.encoding import configure_stdio
from xcdocs.mcp.bootstrap import build_server, configure_server_logging
from xcdocs.mcp.server import run_stdio

# Configure UTF-8 at module load
configure_stdio()

# Load .env file if present
load_dotenv()

logger = logging.getLogger(__name__)


async def run_serve(
    config_path: Path | None = None,
    verbose: bool = False,
    log_file: Path | None = None,
) -> None:
    """Load configuration and serve MCP requests on stdio.

    Raises:
        ConfigError: If the configuration cannot be loaded.
    """
    configure_server_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        log_file=log_file,
    )
    config = load_config(config_path)
    server = build_server(config)

    logger.info(
        "Starting %s %s (protocol %s)",
        config.server.name,
        config.server.version,
        config.server.protocol_version,
    )
    await run_stdio(server)
