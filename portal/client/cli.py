# /portal/client/cli.py

"""
Terminal host for the instructor dashboard.

    python -m portal.client.cli --email teacher@example.edu --password ...
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import httpx
from rich.console import Console
from rich.table import Table

from ..core.config import settings
from ..core.logging_config import setup_logging
from .api_client import PortalAPIClient
from .auth_context import AuthContext
from .dashboard_flow import InstructorDashboardFlow, JoinPolicy
from .dashboard_view import DashboardView, ViewKind, render_dashboard

logger = logging.getLogger(__name__)
console = Console()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="portal-dashboard", description="Show the instructor dashboard.")
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--base-url", default=settings.API_BASE_URL)
    parser.add_argument(
        "--join-policy",
        choices=[p.value for p in JoinPolicy],
        default=settings.DASHBOARD_JOIN_POLICY,
    )
    return parser


def print_dashboard(view: DashboardView) -> None:
    if view.kind == ViewKind.LOADING:
        console.print("[dim]Loading...[/dim]")
        return

    stats = Table(show_header=False, box=None)
    stats.add_column("Metric", style="dim")
    stats.add_column("Value", justify="right")
    for card in view.stat_cards:
        stats.add_row(card.label, str(card.value))
    console.print(stats)

    if view.kind == ViewKind.EMPTY:
        console.print(f"\n[italic]{view.empty_message}[/italic]")
        return

    table = Table(title="Enrolled Students", show_header=True, header_style="bold cyan")
    table.add_column("Roll No", style="dim")
    table.add_column("Name")
    table.add_column("Course")
    table.add_column("Section")
    table.add_column("Email", style="dim")
    for row in view.rows:
        table.add_row(row.roll_number, row.name, row.course, row.section, row.email)
    console.print(table)


async def run(args: argparse.Namespace, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    """Exit codes: 0 dashboard shown, 1 login failed, 2 not allowed in."""
    redirects: List[str] = []

    async with PortalAPIClient(base_url=args.base_url, transport=transport) as api:
        try:
            await api.login(args.email, args.password)
            principal = await api.get_current_principal()
        except httpx.HTTPError as exc:
            console.print(f"[red]Login failed:[/red] {exc}")
            return 1

        flow = InstructorDashboardFlow(api, navigate=redirects.append, join_policy=JoinPolicy(args.join_policy))
        await flow.sync(AuthContext.for_principal(principal))
        flow.teardown()

    if redirects:
        console.print(f"[yellow]{principal.name} may not view the instructor dashboard.[/yellow]")
        return 2

    console.print(f"[bold]Instructor Dashboard[/bold] - welcome back, {principal.name}!\n")
    print_dashboard(render_dashboard(flow.state))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    args = create_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
