"""
Rich console rendering and interactive loop for the availability controller.
"""

import asyncio
import os
from typing import Optional

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from .controller import VIEW_EMPTY, VIEW_LOADING, AvailabilityController
from .display import (
    CATEGORY_STYLES,
    display_name,
    display_provider,
    format_since,
    reason_category,
    reason_label,
)
from .i18n import translate
from .notifications import ConsoleNotifier
from .utils import get_logger

logger = get_logger(__name__)

# Table column widths
MODEL_WIDTH = 28
PROVIDER_WIDTH = 12
CLIENT_WIDTH = 16
REASON_WIDTH = 16
SINCE_WIDTH = 20


def clear_screen():
    """Clear the terminal screen."""
    os.system("cls" if os.name == "nt" else "clear")


def render_header(controller: AvailabilityController) -> Text:
    locale = controller.locale
    header = Text()
    header.append(translate("title", locale), style="bold cyan")
    header.append("  |  ")
    header.append(
        translate("unavailable_count", locale, count=controller.unavailable_count)
    )
    if controller.is_loading:
        header.append(f"  {translate('loading', locale)}", style="dim")
    return header


def render_table(controller: AvailabilityController) -> Table:
    """Build the striped records table in server order."""
    locale = controller.locale
    table = Table(
        show_header=True,
        header_style="bold",
        row_styles=["", "dim"],
        padding=(0, 1),
    )
    table.add_column("#", justify="right")
    table.add_column(translate("model_name", locale), min_width=MODEL_WIDTH)
    table.add_column(translate("provider", locale), style="cyan", min_width=PROVIDER_WIDTH)
    table.add_column(translate("client", locale), min_width=CLIENT_WIDTH)
    table.add_column(translate("reason", locale), min_width=REASON_WIDTH)
    table.add_column(translate("since", locale), min_width=SINCE_WIDTH)
    table.add_column(translate("actions", locale))

    for idx, record in enumerate(controller.records, 1):
        model_cell = Text(display_name(record), style="bold")
        model_cell.append(f"\n{record.model_id}", style="dim")
        badge = Text(
            reason_label(record, locale),
            style=CATEGORY_STYLES[reason_category(record)],
        )
        if controller.is_resetting(record):
            action = Text(translate("resetting", locale), style="yellow")
        else:
            action = Text(translate("reset", locale), style="green")

        table.add_row(
            str(idx),
            model_cell,
            display_provider(record),
            record.client_id,
            badge,
            format_since(record.since),
            action,
        )
    return table


def render(controller: AvailabilityController) -> RenderableType:
    """Loading indicator, empty state or table, plus a warning when data is stale."""
    locale = controller.locale
    parts = [render_header(controller)]
    state = controller.view_state

    if state == VIEW_LOADING and not controller.records:
        parts.append(Text(translate("loading", locale), style="dim"))
    elif state == VIEW_EMPTY:
        if controller.last_refresh_failed:
            parts.append(
                Panel(
                    Text(translate("fetch_failed", locale), style="bold red"),
                    border_style="red",
                    expand=False,
                )
            )
        else:
            parts.append(
                Panel(
                    Text.assemble(
                        (translate("no_unavailable", locale), "bold green"),
                        "\n",
                        (translate("no_unavailable_desc", locale), "dim"),
                    ),
                    border_style="green",
                    expand=False,
                )
            )
    else:
        if controller.last_refresh_failed:
            parts.append(Text(translate("stale_data", locale), style="yellow"))
        parts.append(render_table(controller))

    return Group(*parts)


class AvailabilityConsole:
    """Interactive terminal front end over an AvailabilityController."""

    def __init__(
        self,
        controller: AvailabilityController,
        console: Optional[Console] = None,
        notifier: Optional[ConsoleNotifier] = None,
    ):
        self.controller = controller
        self.console = console or Console(emoji_variant="text")
        self.notifier = notifier
        self.running = True

    def show(self):
        clear_screen()
        if self.notifier:
            self.notifier.replay(self.console)
        self.console.print("━" * 78)
        self.console.print(render(self.controller))
        self.console.print("━" * 78)

        locale = self.controller.locale
        self.console.print(f"   {translate('menu_refresh', locale)}")
        if self.controller.records:
            self.console.print(
                f"   {translate('menu_reset', locale, count=len(self.controller.records))}"
            )
            self.console.print(f"   {translate('menu_reset_all', locale)}")
        self.console.print(f"   {translate('menu_quit', locale)}")

    async def handle_choice(self, choice: str):
        """Dispatch one menu choice."""
        choice = choice.strip().upper()
        if choice == "Q":
            self.running = False
        elif choice == "R":
            if not self.controller.is_loading:
                await self.controller.refresh()
        elif choice == "A":
            await self.controller.reset_many(self.controller.records)
        elif choice.isdigit():
            idx = int(choice) - 1
            if 0 <= idx < len(self.controller.records):
                record = self.controller.records[idx]
                if not self.controller.is_resetting(record):
                    await self.controller.reset_one(record)

    async def run(self):
        """Main console loop."""
        with self.console.status(
            f"[bold]{translate('loading', self.controller.locale)}", spinner="dots"
        ):
            await self.controller.start()

        while self.running:
            self.show()
            choice = await asyncio.to_thread(
                Prompt.ask,
                translate("select_option", self.controller.locale),
                default="R",
            )
            await self.handle_choice(choice)
