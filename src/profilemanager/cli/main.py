import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import get_require_email, get_vocabulary
from ..profiles import ProfileManager
from .config_commands import app as config_app
from .session import ProfileSession

app = typer.Typer()
console = Console()

# add config subcommand
app.add_typer(config_app, name="config", help="Manage option sets and validation settings")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")
):
    """manage an in-memory list of profiles for one session."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def get_profile_manager() -> ProfileManager:
    """profile manager configured from the config file."""
    return ProfileManager(get_vocabulary(), require_email=get_require_email())


@app.command()
def session():
    """
    start an interactive profile session.

    profiles live only as long as the session; nothing is written to disk.
    """
    ProfileSession(get_profile_manager(), console).run()


@app.command()
def vocabulary():
    """show the gender and hobby options offered when editing a profile."""
    vocab = get_vocabulary()

    table = Table(title="Options")
    table.add_column("Field", style="cyan")
    table.add_column("Choices")
    table.add_row("Gender", ", ".join(vocab.genders))
    table.add_row("Hobbies", ", ".join(vocab.hobbies))

    console.print(table)


if __name__ == "__main__":
    app()
