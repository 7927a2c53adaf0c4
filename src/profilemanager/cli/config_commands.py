from typing import List

import typer
from rich.console import Console

from .. import config
from ..domain.errors import ConfigError

app = typer.Typer()
console = Console()


def _set_options(key: str, values: List[str], label: str):
    try:
        config.set_vocabulary_option(key, values)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] {label} set to: {', '.join(getattr(config.get_vocabulary(), label.lower()))}")


@app.command("show")
def show_config():
    """show the current settings."""
    vocab = config.get_vocabulary()
    console.print(f"\n[bold]Config file:[/bold] [cyan]{config.CONFIG_FILE}[/cyan]")
    console.print(f"  Genders:        {', '.join(vocab.genders)}")
    console.print(f"  Hobbies:        {', '.join(vocab.hobbies)}")
    console.print(f"  Require email:  {'yes' if config.get_require_email() else 'no'}\n")


@app.command("set-genders")
def set_genders(options: List[str] = typer.Argument(..., help="Gender options, first one is the default")):
    """set the gender options."""
    _set_options(config.GENDERS_KEY, options, "Genders")


@app.command("set-hobbies")
def set_hobbies(options: List[str] = typer.Argument(..., help="Hobby options")):
    """set the hobby options."""
    _set_options(config.HOBBIES_KEY, options, "Hobbies")


@app.command("require-email")
def require_email(enabled: bool = typer.Argument(..., help="true or false")):
    """choose whether new and edited profiles need an email."""
    try:
        config.write_config_value(config.REQUIRE_EMAIL_KEY, "true" if enabled else "false")
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] Require email: {'yes' if enabled else 'no'}")
