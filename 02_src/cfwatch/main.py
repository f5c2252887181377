"""Main entry point for cfwatch."""

import argparse
import asyncio
import signal
import sys

from dotenv import find_dotenv, load_dotenv

from .app import Application
from .config import resolve_api_settings, resolve_nats_uri
from .errors import WatchError
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="cfwatch",
        description="Watch bus traffic relevant to one application.",
        add_help=False,
    )
    parser.add_argument("app", help="Application name (or GUID with --guid)")
    parser.add_argument("-h", "--host", help="NATS server host (NATS_HOST)")
    parser.add_argument("-P", "--port", type=int, help="NATS server port (NATS_PORT)")
    parser.add_argument("-u", "--user", help="NATS server user (NATS_USER)")
    parser.add_argument("-p", "--password", help="NATS server password (NATS_PASSWORD)")
    parser.add_argument(
        "--guid", action="store_true", help="Treat APP as a GUID; skip the API lookup"
    )
    parser.add_argument("--api-url", help="Control-plane API URL (CF_API_URL)")
    parser.add_argument("--token", help="Control-plane API token (CF_TOKEN)")
    parser.add_argument("--no-color", action="store_true", help="Disable colors")
    parser.add_argument("--log-level", help="Log level (LOG_LEVEL)")
    parser.add_argument("--help", action="help", help="Show this help and exit")
    return parser


async def watch(application: Application) -> None:
    """Run the watch until interrupted."""
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, application.request_stop)
        except NotImplementedError:
            # Windows event loops; KeyboardInterrupt still ends the run
            pass

    await application.run()


def main(argv: list[str] | None = None) -> int:
    """Run the application."""
    load_dotenv(find_dotenv(usecwd=True))

    args = build_parser().parse_args(argv)
    setup_logging(log_level=args.log_level)

    api_url, token = resolve_api_settings(args.api_url, args.token)
    application = Application(
        app=args.app,
        nats_uri=resolve_nats_uri(args.host, args.port, args.user, args.password),
        is_guid=args.guid,
        api_url=api_url,
        token=token,
        color=not args.no_color,
    )

    try:
        asyncio.run(watch(application))
    except WatchError as e:
        logger.info("Watch failed: %s", e)
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
