"""
ModelAvail command line entry point.
"""

import argparse
import asyncio
import locale
import logging
import sys

import uvicorn
from rich.console import Console

from .config import DEFAULT_HOST, DEFAULT_PORT, load_settings
from .controller import AvailabilityController
from .gateway import AvailabilityGateway
from .models import UnavailableModel
from .notifications import ConsoleNotifier
from .view import AvailabilityConsole, render

logger = logging.getLogger(__name__)


async def run_view(settings, console: Console):
    """Interactive console."""
    async with AvailabilityGateway(settings) as gateway:
        notifier = ConsoleNotifier(console)
        controller = AvailabilityController(gateway, notifier, locale=settings.locale)
        await AvailabilityConsole(controller, console, notifier).run()


async def run_list(settings, console: Console) -> int:
    """Print the current list once."""
    async with AvailabilityGateway(settings) as gateway:
        controller = AvailabilityController(
            gateway, ConsoleNotifier(console), locale=settings.locale
        )
        ok = await controller.refresh()
        console.print(render(controller))
        return 0 if ok else 1


async def run_reset(settings, console: Console, model_id: str, client_id: str) -> int:
    """Reset one pair and print the refreshed list."""
    async with AvailabilityGateway(settings) as gateway:
        controller = AvailabilityController(
            gateway, ConsoleNotifier(console), locale=settings.locale
        )
        # Unvalidated: the gateway reports empty identifiers as a reset error.
        record = UnavailableModel.model_construct(model_id=model_id, client_id=client_id)
        ok = await controller.reset_one(record)
        if ok:
            console.print(render(controller))
        return 0 if ok else 1


def configure_locale():
    """Use the user's locale for the date and time columns."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Could not apply system locale for time formatting: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modelavail", description="View and reset unavailable models"
    )
    parser.add_argument("--api-base", help="Availability service base URL")
    parser.add_argument("--api-key", help="Bearer token for the availability service")
    parser.add_argument("--locale", choices=["en", "zh"], help="Display language")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("view", help="Interactive console (default)")
    sub.add_parser("list", help="Print unavailable models and exit")

    reset = sub.add_parser("reset", help="Reset a model for one client")
    reset.add_argument("model_id")
    reset.add_argument("--client", dest="client_id", required=True)

    serve = sub.add_parser("serve", help="Run the in-memory reference service")
    serve.add_argument("--host", default=DEFAULT_HOST)
    serve.add_argument("--port", type=int, default=DEFAULT_PORT)
    return parser


def main(argv=None):
    """Run the application."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    if args.command == "serve":
        from .server import create_app

        logging.getLogger().setLevel(logging.INFO)
        logger.info(f"Starting reference availability service on {args.host}:{args.port}")
        uvicorn.run(create_app(), host=args.host, port=args.port, log_level="info")
        return 0

    configure_locale()
    settings = load_settings()
    if args.api_base:
        settings.base_url = args.api_base.rstrip("/")
    if args.api_key:
        settings.api_key = args.api_key
    if args.locale:
        settings.locale = args.locale

    console = Console(emoji_variant="text")
    if args.command == "list":
        return asyncio.run(run_list(settings, console))
    if args.command == "reset":
        return asyncio.run(
            run_reset(settings, console, args.model_id, args.client_id)
        )

    try:
        asyncio.run(run_view(settings, console))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
