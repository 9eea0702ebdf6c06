#!/usr/bin/env python3
"""taskdesk CLI.

Command-line interface for preparing the task database, inspecting the
task listing and assignable users, and running the HTTP API.
"""

import typer
from rich.console import Console
from rich.table import Table

from .config import get_settings
from .database import (
    create_db_and_tables,
    get_session_context,
    get_sync_session,
    seed_database,
)
from .exceptions import TaskdeskError
from .logging_config import configure_logging
from .services import TaskAuthoringService, TaskService


app = typer.Typer(help="taskdesk task resource CLI")
console = Console()


@app.command()
def init_db():
    """Create the database tables."""
    try:
        create_db_and_tables()
    except TaskdeskError as e:
        console.print(f"[bold red]Error initializing database: {e}[/bold red]")
        raise typer.Exit(code=1) from e
    console.print("[bold green]✓ Database ready[/bold green]")


@app.command()
def seed(
    users: int = typer.Option(3, "--users", "-u", min=0, help="Users to insert"),
    tasks: int = typer.Option(25, "--tasks", "-t", min=0, help="Tasks to insert"),
):
    """Insert sample users and tasks."""
    try:
        create_db_and_tables()
        with get_session_context() as session:
            user_count, task_count = seed_database(
                session, user_count=users, task_count=tasks
            )
    except TaskdeskError as e:
        console.print(f"[bold red]Error seeding database: {e}[/bold red]")
        raise typer.Exit(code=1) from e

    console.print(
        f"[bold green]✓ Inserted {user_count} users and {task_count} tasks[/bold green]"
    )


@app.command()
def list_tasks(
    page: int = typer.Option(1, "--page", "-p", min=1, help="1-based page number"),
    owner: bool = typer.Option(
        True, "--owner/--no-owner", help="Show each task's owner"
    ),
):
    """Show one page of tasks."""
    service = TaskService(session=get_sync_session())
    try:
        result = service.list_tasks(page=page, include_owner=owner)
    except TaskdeskError as e:
        console.print(f"[bold red]Error listing tasks: {e}[/bold red]")
        raise typer.Exit(code=1) from e
    finally:
        service.close()

    table = Table(
        title=f"Tasks - page {result.page} of {result.total_pages} "
        f"({result.total_count} total)",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title", style="white")
    table.add_column("Status", style="green")
    if owner:
        table.add_column("Owner", style="yellow")

    for task in result.items:
        row = [str(task.id), task.title, task.status.value]
        if owner:
            row.append(task.owner.name if task.owner else "-")
        table.add_row(*row)

    if not result.items:
        console.print("[yellow]No tasks on this page[/yellow]")
    console.print(table)


@app.command()
def users():
    """Show the users a task can be assigned to."""
    service = TaskAuthoringService(session=get_sync_session())
    try:
        assignable = service.list_assignable_users()
    except TaskdeskError as e:
        console.print(f"[bold red]Error listing users: {e}[/bold red]")
        raise typer.Exit(code=1) from e
    finally:
        service.close()

    if not assignable:
        console.print("[yellow]No users available for assignment[/yellow]")
        return

    table = Table(title="Assignable Users", show_header=True, header_style="bold blue")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="white")
    for user_id, name in assignable.items():
        table.add_row(str(user_id), name)
    console.print(table)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", help="Bind port"),
):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from .api import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=host or settings.api.host,
        port=port or settings.api.port,
        log_level=settings.log_level.lower(),
    )


@app.callback()
def main():
    """taskdesk CLI.

    Manage the task database and inspect the task listing.
    """
    configure_logging()


if __name__ == "__main__":
    app()
