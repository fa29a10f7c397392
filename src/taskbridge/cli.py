"""taskbridge CLI - Google Tasks MCP server and shell client."""

import asyncio
import json
import logging
import sys

import click

from .adapters.google_tasks import GoogleTasksAdapter
from .config import load_config
from .core.errors import TasksError
from .core.tasks import COMPLETED, NEEDS_ACTION
from .dispatcher import Dispatcher

logger = logging.getLogger(__name__)


def _dispatcher() -> Dispatcher:
    return Dispatcher(GoogleTasksAdapter(load_config()))


def _call(name: str, arguments: dict | None = None):
    """Run an operation, exiting with the error message on failure."""
    try:
        return _dispatcher().call(name, arguments)
    except TasksError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="taskbridge")
def main():
    """taskbridge - Google Tasks over MCP."""
    pass


@main.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def serve(debug: bool):
    """Run the MCP server on stdio."""
    from .server import serve as run_server

    # stdout carries the protocol; logs go to stderr
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stderr,
    )

    config = load_config()
    missing = config.missing_credentials()
    if missing:
        logger.warning(f"Missing credentials: {', '.join(missing)}")

    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        click.echo("\nServer stopped.", err=True)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tasks(as_json: bool):
    """List tasks in the default list."""
    items = _call("list_tasks")

    if as_json:
        click.echo(json.dumps(items, indent=2))
        return

    if not items:
        click.echo("No tasks.")
        return

    for task in items:
        marker = "x" if task.get("status") == COMPLETED else " "
        click.echo(f"[{marker}] {task.get('title', '')}  ({task['id']})")


@main.command()
@click.argument("title")
@click.option("--notes", default=None, help="Notes for the task")
def add(title: str, notes: str | None):
    """Create a task."""
    task = _call("create_task", {"title": title, "notes": notes})
    click.echo(f"Created {task['id']}: {task.get('title', '')}")


@main.command()
@click.argument("task_id")
@click.option("--undo", is_flag=True, help="Mark as needing action again")
def complete(task_id: str, undo: bool):
    """Mark a task completed."""
    status = NEEDS_ACTION if undo else COMPLETED
    task = _call("complete_task", {"taskId": task_id, "status": status})
    click.echo(f"{task.get('title', task_id)}: {task.get('status', status)}")


@main.command()
@click.argument("task_id")
def delete(task_id: str):
    """Delete a task."""
    click.echo(_call("delete_task", {"taskId": task_id}))


@main.command()
def tools():
    """Show the operations the server exposes."""
    for tool in _dispatcher().list_tools():
        required = tool.input_schema.get("required", [])
        params = ", ".join(
            name if name in required else f"{name}?"
            for name in tool.input_schema.get("properties", {})
        )
        click.echo(f"{tool.name}({params}) - {tool.description}")
