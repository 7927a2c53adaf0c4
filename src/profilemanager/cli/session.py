"""interactive terminal session: home and profiles screens over one store."""
import logging
import re
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from ..domain.errors import InvalidDraftError, NotFoundError
from ..domain.models import Profile
from ..profiles import ProfileDraft, ProfileManager, StoreEvent

logger = logging.getLogger(__name__)

_ROW_NUMBER = re.compile(r"^[0-9]+$")

HOME = "home"
PROFILES = "profiles"

HELP_TEXT = """[bold]Commands[/bold]
  home           show the home screen
  profiles       show the profile list
  add            add a profile (home screen)
  edit N         edit profile N (profiles screen)
  delete N       delete profile N (profiles screen)
  fav N          toggle favorite on profile N (profiles screen)
  help           show this help
  quit           leave the session (profiles are not kept)"""


class ProfileSession:
    """renders store snapshots and turns typed commands into store operations."""

    def __init__(self, manager: ProfileManager, console: Optional[Console] = None):
        self.manager = manager
        self.console = console or Console()
        self.screen = HOME
        self._unsubscribe = manager.store.subscribe(self._on_change)

    def _on_change(self, event: StoreEvent):
        logger.debug(f"store event {event.kind} for {event.profile_id}")
        if self.screen == PROFILES:
            self.render_profiles(event.snapshot)

    def run(self):
        """read commands until quit or end of input."""
        self.render()
        try:
            while True:
                try:
                    line = Prompt.ask(f"{self.screen}>", default="", show_default=False, console=self.console)
                    if not self.handle(line):
                        break
                except EOFError:
                    self.handle("quit")
                    break
        finally:
            self._unsubscribe()

    def handle(self, line: str) -> bool:
        """
        run one command line.

        returns:
            False when the session should end
        """
        parts = line.strip().split()
        if not parts:
            return True

        command, args = parts[0].lower(), parts[1:]

        if command in ("quit", "exit"):
            self.console.print("[dim]Session ended, profiles discarded.[/dim]")
            return False
        if command == "help":
            self.console.print(HELP_TEXT)
        elif command in (HOME, PROFILES):
            self.screen = command
            self.render()
        elif command == "add":
            self._add()
        elif command in ("edit", "delete", "fav"):
            self._row_command(command, args)
        else:
            self.console.print(f"[red]Unknown command:[/red] {command} (type 'help')")
        return True

    def render(self):
        if self.screen == HOME:
            self.console.print(Panel("Welcome to Profile Manager!", expand=False))
        else:
            self.render_profiles(self.manager.store.snapshot())
        self._render_nav()

    def _render_nav(self):
        items = []
        for screen in (HOME, PROFILES):
            label = screen.capitalize()
            items.append(f"[bold reverse] {label} [/bold reverse]" if screen == self.screen else f" {label} ")
        self.console.print(" ".join(items))

    def render_profiles(self, profiles):
        if not profiles:
            self.console.print("[yellow]No profiles yet.[/yellow]")
            self.console.print("Go [cyan]home[/cyan] and use [cyan]add[/cyan] to create one.")
            return

        table = Table(title="Profiles")
        table.add_column("#", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Email")
        table.add_column("Phone")
        table.add_column("Age")
        table.add_column("Gender")
        table.add_column("Hobbies")
        table.add_column("Notifications")
        table.add_column("Fav", style="red")

        for i, profile in enumerate(profiles, start=1):
            table.add_row(
                str(i),
                profile.name,
                profile.email,
                profile.phone,
                str(profile.age),
                profile.gender,
                ", ".join(profile.hobbies),
                "On" if profile.notifications_enabled else "Off",
                "♥" if profile.is_favorite else "",
            )

        self.console.print(table)

    def _pick(self, args: List[str]) -> Optional[Profile]:
        profiles = self.manager.list_profiles()
        if len(args) != 1 or not _ROW_NUMBER.match(args[0]):
            self.console.print("[red]Error:[/red] give the profile number, e.g. 'edit 1'")
            return None
        index = int(args[0])
        if not 1 <= index <= len(profiles):
            self.console.print(f"[red]Error:[/red] no profile number {index}")
            return None
        return profiles[index - 1]

    def _row_command(self, command: str, args: List[str]):
        if self.screen != PROFILES:
            self.console.print(f"[yellow]'{command}' works on the profiles screen.[/yellow]")
            return

        profile = self._pick(args)
        if profile is None:
            return

        try:
            if command == "edit":
                self._fill_and_submit(self.manager.begin_edit(profile.id))
            elif command == "delete":
                if Confirm.ask(f"Delete {profile.name}'s profile?", default=False, console=self.console):
                    self.manager.delete(profile.id)
                    self.console.print("[green]✓[/green] Profile deleted")
            else:
                self.manager.toggle_favorite(profile.id)
        except NotFoundError as e:
            self.console.print(f"[red]Error:[/red] {e}")

    def _add(self):
        if self.screen != HOME:
            self.console.print("[yellow]Go home to add a profile.[/yellow]")
            return
        self._fill_and_submit(self.manager.begin_create())

    def _fill_and_submit(self, draft: ProfileDraft):
        vocabulary = self.manager.vocabulary
        title = "Edit Profile" if draft.is_edit else "Add Profile"
        self.console.print(f"\n[bold]{title}[/bold]")

        draft.name = self._ask("Name", draft.name)
        draft.email = self._ask("Email", draft.email)
        draft.phone = self._ask("Phone", draft.phone)
        draft.age = self._ask("Age", draft.age)
        draft.gender = self._ask(f"Gender ({'/'.join(vocabulary.genders)})", draft.gender)
        hobbies = self._ask(
            f"Hobbies, comma separated ({', '.join(vocabulary.hobbies)})",
            ", ".join(draft.hobbies),
        )
        draft.notifications_enabled = Confirm.ask(
            "Notifications", default=draft.notifications_enabled, console=self.console
        )

        try:
            self._apply_hobbies(draft, hobbies)
            self.manager.submit(draft)
        except (InvalidDraftError, NotFoundError) as e:
            self.console.print(f"[red]Error:[/red] {e}")
            self.console.print("[yellow]Profile not saved.[/yellow]")
            return

        self.console.print("[green]✓[/green] Profile saved")

    def _ask(self, label: str, current: str) -> str:
        return Prompt.ask(label, default=current, show_default=bool(current), console=self.console)

    def _apply_hobbies(self, draft: ProfileDraft, text: str):
        # match case-insensitively against the vocabulary, keep typed order
        known = {h.lower(): h for h in self.manager.vocabulary.hobbies}
        chosen = [h.strip() for h in text.split(",") if h.strip()]
        draft.hobbies = []
        for hobby in chosen:
            draft.set_hobby(known.get(hobby.lower(), hobby), True)
