"""CLI interface for Taskboard.

Commands:
- init: Create an empty task database
- serve: Run the web UI and HTTP API
- list: Show tasks
- add: Create a task
- delete: Delete a task by ID
"""

import sys

import click
import questionary
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import load_config
from .logging_setup import setup_logging
from .models import PRIORITIES, STATUSES, Task
from .service import create_task, delete_task, list_tasks
from .store import JsonFileStore


console = Console()


def _get_store(ctx) -> JsonFileStore:
    config = ctx.obj["config"]
    return JsonFileStore(config.data_file, indent=config.json_indent)


def _print_error(body: dict):
    console.print(
        f"[red]Error ({escape(str(body.get('error')))}): "
        f"{escape(str(body.get('message')))}[/red]"
    )
    if body.get("details"):
        console.print(f"  [dim]{escape(str(body['details']))}[/dim]")


def _confirm(message: str) -> bool:
    """Ask a yes/no question; Ctrl-C counts as no."""
    return bool(questionary.confirm(message, default=False).ask())


@click.group()
@click.version_option(version=__version__, prog_name="taskboard")
@click.option(
    "--config",
    "config_path",
    default=None,
    help="Config file (default: ./taskboard.json if present)",
)
@click.option(
    "--data-file",
    "-d",
    default=None,
    help="Task database file (overrides config)",
)
@click.pass_context
def main(ctx, config_path, data_file):
    """Taskboard - minimal task manager.

    Tasks live in a single JSON file that the web UI, the HTTP API
    and these commands all share.
    """
    ctx.ensure_object(dict)
    config = load_config(config_path)
    if data_file:
        config.data_file = data_file
    ctx.obj["config"] = config
    setup_logging(config.log_level, debug=config.debug)


# --- Init Command ---


@main.command()
@click.pass_context
def init(ctx):
    """Create an empty task database if none exists."""
    store = _get_store(ctx)
    path = escape(str(store.path))
    if store.exists():
        console.print(f"[yellow]Task database already exists: {path}[/yellow]")
        return

    store.initialize()
    console.print(f"[green]Created task database: {path}[/green]")


# --- Serve Command ---


@main.command()
@click.option("--host", default=None, help="Bind address (overrides config)")
@click.option("--port", "-p", type=int, default=None, help="Port (overrides config)")
@click.option("--debug", is_flag=True, help="Enable Flask debug mode")
@click.pass_context
def serve(ctx, host, port, debug):
    """Run the web UI and HTTP API."""
    from .app import create_app

    config = ctx.obj["config"]
    if host:
        config.host = host
    if port:
        config.port = port
    if debug:
        config.debug = True
        setup_logging("DEBUG", debug=True)

    store = _get_store(ctx)
    if store.initialize():
        console.print(
            f"[dim]Created empty task database at {escape(str(store.path))}[/dim]"
        )

    app = create_app(config, store=store)
    console.print(
        f"[green]Task Manager running on http://{config.host}:{config.port}[/green]"
    )
    console.print(f"[dim]Database: {escape(str(store.path))}[/dim]")
    app.run(host=config.host, port=config.port, debug=config.debug)


# --- Task Commands ---


@main.command("list")
@click.pass_context
def list_command(ctx):
    """Show all tasks."""
    status, body = list_tasks(_get_store(ctx))
    if status != 200:
        _print_error(body)
        sys.exit(1)

    if not body:
        console.print("[dim]No tasks.[/dim]")
        return

    table = Table(title=f"Tasks ({len(body)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Status", style="yellow")
    table.add_column("Priority")
    table.add_column("Due")

    for data in body:
        task = Task.from_dict(data if isinstance(data, dict) else {})
        priority_style = {
            "High": "red",
            "Medium": "yellow",
            "Low": "green",
        }.get(task.priority, "white")
        table.add_row(
            escape(task.id),
            escape(task.title),
            escape(task.status),
            f"[{priority_style}]{escape(task.priority)}[/{priority_style}]",
            escape(task.due_date),
        )

    console.print(table)


@main.command()
@click.argument("title")
@click.option("--description", "-D", default="", help="Task description")
@click.option(
    "--status",
    "-s",
    type=click.Choice(STATUSES),
    default="To Do",
    help="Task status",
)
@click.option(
    "--priority",
    "-p",
    type=click.Choice(PRIORITIES),
    default="Medium",
    help="Task priority",
)
@click.option("--due", default="", help="Due date (free-form)")
@click.pass_context
def add(ctx, title, description, status, priority, due):
    """Create a task.

    Examples:
        taskboard add "Write report"
        taskboard add "Deploy" -p High --due "Dec 31, 2025"
    """
    payload = {
        "title": title,
        "description": description,
        "status": status,
        "priority": priority,
        "dueDate": due,
    }
    code, body = create_task(_get_store(ctx), payload)
    if code != 201:
        _print_error(body)
        sys.exit(1)

    task = body["task"]
    console.print(
        f"[green]Created task {escape(task['id'])}: {escape(task['title'])}[/green]"
    )


@main.command()
@click.argument("task_id")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete(ctx, task_id, yes):
    """Delete a task by ID.

    Examples:
        taskboard delete 1735603200000042
        taskboard delete 1735603200000042 --yes
    """
    if not yes and not _confirm(f"Are you sure you want to delete task {task_id}?"):
        console.print("[yellow]Aborted.[/yellow]")
        return

    status, body = delete_task(_get_store(ctx), task_id)
    if status != 200:
        _print_error(body)
        sys.exit(1)

    deleted = Task.from_dict(body["deletedTask"])
    console.print(f"[green]{body['message']}[/green]")
    console.print(f"  {escape(deleted.id)}: {escape(deleted.label)}")
    console.print(f"  [dim]{body['remainingTasksCount']} task(s) remaining[/dim]")


if __name__ == "__main__":
    main()
