"""An interactive command shell for playing Coup at one table."""

from __future__ import annotations

import argparse
import cmd
from typing import IO

from .actions import CoupError
from .table import ROLE_HELP, ROLES, Command, Table

MAX_NAME_LENGTH = 16
NO_PLAYERS_TEXT = "No players yet. Add players to start!"

_ALIASES = {
    "end_turn": Command.END_TURN,
    "next": Command.END_TURN,
}


def _parse_command(word: str) -> Command | None:
    key = word.lower().replace("-", "_")
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Command(key)
    except ValueError:
        return None


class CoupShell(cmd.Cmd):
    """Reads commands line by line and plays them on a Table."""

    intro = (
        "Coup Game - Full Demo\n"
        "Type 'add <name> [role]' to seat players, 'help' for commands."
    )
    prompt = "coup> "

    def __init__(
        self,
        table: Table | None = None,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.table = table if table is not None else Table()

    def _say(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def _select(self, text: str) -> bool:
        try:
            number = int(text)
        except ValueError:
            self._say(f"Not a player number: {text}")
            return False
        try:
            self._say(self.table.select_target(number - 1))
        except IndexError:
            self._say(f"No player at position {number}")
            return False
        return True

    def emptyline(self) -> bool:
        return False

    def do_add(self, arg: str) -> None:
        """add <name> [role]: seat a new player (roles: Governor, Baron, General, Judge, Merchant, Spy)."""
        parts = arg.split()
        if not parts:
            self._say(self.table.add_player("", next(iter(ROLES))))
            return
        if len(parts) > 2:
            self._say("Usage: add <name> [role]")
            return
        name = parts[0]
        role = parts[1] if len(parts) == 2 else next(iter(ROLES))
        if len(name) > MAX_NAME_LENGTH or not all(" " <= ch <= "~" for ch in name):
            self._say(
                f"Names are at most {MAX_NAME_LENGTH} printable ASCII characters."
            )
            return
        try:
            self._say(self.table.add_player(name, role))
        except CoupError as error:
            self._say(f"Error: {error}")

    def do_target(self, arg: str) -> None:
        """target <number>|none: choose the target of the next action."""
        text = arg.strip()
        if not text or text.lower() == "none":
            self._say(self.table.clear_target())
            return
        self._select(text)

    def do_players(self, arg: str) -> None:
        """players: list the players, their coins and markers."""
        rows = self.table.player_rows()
        if not rows:
            self._say(NO_PLAYERS_TEXT)
            return
        self._say(f"Current Turn: {self.table.game.turn()}")
        for row in rows:
            self._say(row)
        self._say(self.table.target_text)

    def do_help_roles(self, arg: str) -> None:
        """help_roles: describe each role's abilities."""
        self._say("Role Abilities:")
        for line in ROLE_HELP:
            self._say(line)

    def do_quit(self, arg: str) -> bool:
        """quit: leave the game."""
        return True

    def default(self, line: str) -> bool:
        """Run a game action, optionally followed by a target number."""
        words = line.split()
        if not words:
            return False
        if words[0] == "EOF":
            self._say("")
            return True
        command = _parse_command(words[0])
        if command is None:
            self._say(f"Unknown command: {words[0]}")
            return False
        if len(words) > 2:
            self._say(f"Usage: {command.value} [target number]")
            return False
        if len(words) == 2 and not self._select(words[1]):
            return False
        self._say(self.table.perform(command))
        return False


def main(argv: list[str] | None = None) -> int:
    """Start an interactive game of Coup."""
    parser = argparse.ArgumentParser(
        prog="coupgame", description="Play a game of Coup in the terminal."
    )
    parser.parse_args(argv)
    CoupShell().cmdloop()
    return 0