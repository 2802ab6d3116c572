#!/usr/bin/env python3
"""Main entry point for CronKeeper."""

import asyncio
import logging
import sys
from pathlib import Path
import uvicorn

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler(settings.log_file) if settings.log_file else logging.NullHandler()
    ]
)

logger = logging.getLogger(__name__)


def run_http_server():
    """Run the HTTP API server."""
    logger.info(f"Starting HTTP server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "api.http_server:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower()
    )


async def list_jobs(manager) -> int:
    """Print one line per job."""
    tab = await manager.load()
    for index, job in enumerate(tab.jobs()):
        print(f"{index}\t{job}")
    return len(tab)


async def render_crontab(manager) -> str:
    """Print the crontab as it would be saved."""
    tab = await manager.load()
    content = tab.render()
    print(content, end="")
    return content


def main(argv=None):
    """Main entry point."""
    import argparse
    from manager import CrontabManager
    from executors import CrontabExecutor, CrontabError

    parser = argparse.ArgumentParser(description="CronKeeper crontab editor")
    parser.add_argument(
        "--mode",
        choices=["http", "list", "render"],
        default="list",
        help="What to do (default: list)"
    )
    parser.add_argument(
        "--user",
        default=settings.crontab_user,
        help="Crontab owner (default: current user)"
    )
    parser.add_argument(
        "--host",
        default=settings.api_host,
        help=f"HTTP server host (default: {settings.api_host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api_port,
        help=f"HTTP server port (default: {settings.api_port})"
    )

    args = parser.parse_args(argv)

    # Update settings if provided
    if args.host:
        settings.api_host = args.host
    if args.port:
        settings.api_port = args.port
    settings.crontab_user = args.user or ""

    try:
        if args.mode == "http":
            run_http_server()
        else:
            manager = CrontabManager(CrontabExecutor(user=settings.crontab_user))
            if args.mode == "list":
                asyncio.run(list_jobs(manager))
            else:
                asyncio.run(render_crontab(manager))

    except KeyboardInterrupt:
        logger.info("Shutting down CronKeeper...")
    except CrontabError as e:
        logger.error(f"crontab failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
