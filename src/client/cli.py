"""
Terminal front end for the task form.

Usage:
    python main.py serve                 # run the proxy
    python main.py workspaces            # list workspaces, default marked
    python main.py set-default -w W1     # store the default workspace
    python main.py add --name "Write report" --duration custom --custom-duration 90
"""
import asyncio
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from src.utils.config import Config, ConfigDefaults, load_config
from src.utils.logger import configure_logging

from .form_controller import (
    CUSTOM_DURATION,
    STATUS_ERROR,
    STATUS_SUCCESS,
    FormStatus,
    TaskFormController,
)
from .proxy_client import ProxyClient

console = Console()

STATUS_STYLES = {
    STATUS_SUCCESS: "green",
    STATUS_ERROR: "bold red",
}

PRIORITIES = ["ASAP", "HIGH", "MEDIUM", "LOW"]
DEADLINE_TYPES = ["HARD", "SOFT", "NONE"]


def print_status(status: FormStatus) -> None:
    """Render the form's status line."""
    if not status.text:
        return
    style = STATUS_STYLES.get(status.level, "dim")
    console.print(f"[{style}]{status.text}[/{style}]")


async def open_form(config: Config) -> TaskFormController:
    """Connect to the proxy and load the workspace list."""
    proxy = ProxyClient.from_config(config.client)
    controller = TaskFormController(proxy)
    controller.subscribe(print_status)
    await controller.load()
    return controller


def render_workspaces(controller: TaskFormController) -> None:
    """Workspace table; the selected (default) workspace is starred."""
    if not controller.workspaces:
        console.print("[dim]No workspaces available.[/dim]")
        return

    table = Table(title="Motion Workspaces")
    table.add_column("", width=1)
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    for ws in controller.workspaces:
        marker = "*" if str(ws.get("id")) == controller.selected_workspace_id else ""
        table.add_row(marker, str(ws.get("id")), str(ws.get("name", "")))
    console.print(table)


@click.group()
@click.option('--config', 'config_path', default=ConfigDefaults.CONFIG_PATH_DEFAULT,
              help='Path to the YAML config file')
@click.option('--proxy-url', default=None, help='Base URL of the task proxy')
@click.option('--verbose', '-v', is_flag=True, help='Show log output')
@click.pass_context
def cli(ctx: click.Context, config_path: str, proxy_url: Optional[str], verbose: bool):
    """Pick a Motion workspace and submit tasks through the proxy."""
    config = load_config(config_path)
    if proxy_url:
        config.client.proxy_url = proxy_url
    configure_logging(config.logging.level if verbose else "WARNING", config.logging.file)
    ctx.obj = config


@cli.command()
@click.option('--host', default=None, help='Host to bind to')
@click.option('--port', default=None, type=int, help='Port to run server on')
@click.option('--reload', is_flag=True, help='Enable auto-reload')
@click.pass_obj
def serve(config: Config, host: Optional[str], port: Optional[int], reload: bool):
    """Run the task proxy."""
    import uvicorn

    host = host or config.server.host
    port = port or config.server.port
    console.print("[bold blue]Starting Motion Task Proxy[/bold blue]")
    console.print(f"Server: http://{host}:{port}")
    console.print("[bold]Press Ctrl+C to stop[/bold]\n")

    try:
        uvicorn.run("api.main:app", host=host, port=port, reload=reload, log_level="info")
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped by user[/yellow]")
    except OSError as e:
        console.print(f"\n[bold red]Could not start server on port {port}: {e}[/bold red]")
        sys.exit(1)


@cli.command()
@click.pass_obj
def workspaces(config: Config):
    """List workspaces; the default one is starred."""
    async def _run() -> bool:
        controller = await open_form(config)
        try:
            if controller.form_visible:
                render_workspaces(controller)
            return controller.form_visible
        finally:
            await controller.proxy.close()

    if not asyncio.run(_run()):
        sys.exit(1)


@cli.command('set-default')
@click.option('--workspace', '-w', 'workspace_id', default=None,
              help='Workspace id (defaults to the current selection)')
@click.pass_obj
def set_default(config: Config, workspace_id: Optional[str]):
    """Store the default workspace."""
    async def _run() -> bool:
        controller = await open_form(config)
        try:
            if not controller.form_visible:
                return False
            if workspace_id is not None:
                controller.select_workspace(workspace_id)
            return await controller.set_default_workspace()
        finally:
            await controller.proxy.close()

    if not asyncio.run(_run()):
        sys.exit(1)


@cli.command()
@click.option('--name', prompt='Task name', help='Task title')
@click.option('--description', default=None)
@click.option('--priority', type=click.Choice(PRIORITIES, case_sensitive=False), default=None)
@click.option('--due-date', default=None, help='Due date (defaults to a week from today)')
@click.option('--duration', default=None,
              help=f'Minutes, NONE, REMINDER or "{CUSTOM_DURATION}" (default 30)')
@click.option('--custom-duration', default=None, help=f'Minutes, used with --duration {CUSTOM_DURATION}')
@click.option('--start-date', default=None, help='Auto-scheduling start date (defaults to today)')
@click.option('--deadline-type', type=click.Choice(DEADLINE_TYPES, case_sensitive=False), default=None)
@click.option('--workspace', '-w', 'workspace_id', default=None,
              help='Workspace id (defaults to the stored default)')
@click.pass_obj
def add(config: Config, workspace_id: Optional[str], **options):
    """Submit a task."""
    field_names = {
        "name": "name",
        "description": "description",
        "priority": "priority",
        "due_date": "dueDate",
        "duration": "duration",
        "custom_duration": "customDuration",
        "start_date": "startDate",
        "deadline_type": "deadlineType",
    }
    values = {field_names[k]: v for k, v in options.items() if v is not None}
    for key in ("priority", "deadlineType"):
        if key in values:
            values[key] = values[key].upper()

    async def _run() -> bool:
        controller = await open_form(config)
        try:
            if not controller.form_visible:
                return False
            if workspace_id is not None:
                controller.select_workspace(workspace_id)
            controller.update_fields(**values)
            task_id = await controller.submit()
            if task_id:
                console.print(f"Task id: [cyan]{task_id}[/cyan]")
            return controller.status.level == STATUS_SUCCESS
        finally:
            await controller.proxy.close()

    if not asyncio.run(_run()):
        sys.exit(1)
