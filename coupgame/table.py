"""A game table: players, target selection and status messages around a Game."""

from __future__ import annotations

import enum

from .actions import CoupError
from .game import Game
from .player import Player
from .roles import Baron, General, Governor, Judge, Merchant, Spy

ROLES: dict[str, type[Player]] = {
    "Governor": Governor,
    "Baron": Baron,
    "General": General,
    "Judge": Judge,
    "Merchant": Merchant,
    "Spy": Spy,
}

ROLE_HELP = (
    "Governor: Gets 3 coins from tax, can cancel others' tax",
    "Baron: Can invest 3 coins to get 6 back, gets 1 coin when sanctioned",
    "General: Can pay 5 coins to prevent coup, gets coin back when arrested",
    "Judge: Can cancel bribe, sanctioner pays extra coin when sanctioning judge",
    "Merchant: Gets bonus coin if 3+ coins, pays 2 to treasury when arrested",
    "Spy: Can see coins (free), can prevent arrest (free)",
)

STARTING_COINS = 2
NO_TARGET_TEXT = "Target: None (Click a player below to select)"


class Command(enum.Enum):
    """Everything the current player can ask the table to do."""

    GATHER = "gather"
    TAX = "tax"
    INVEST = "invest"
    BRIBE = "bribe"
    ARREST = "arrest"
    SANCTION = "sanction"
    COUP = "coup"
    END_TURN = "end"
    SEE_COINS = "see_coins"
    PREVENT_ARREST = "prevent_arrest"
    PREVENT_COUP = "prevent_coup"
    CANCEL_BRIBE = "cancel_bribe"
    CANCEL_TAX = "cancel_tax"


_TARGET_PROMPTS = {
    Command.ARREST: "Select a target player first to arrest!",
    Command.SANCTION: "Select a target player first to sanction!",
    Command.COUP: "Select a target player first to coup!",
    Command.SEE_COINS: "Select a target player first to see their coins!",
    Command.PREVENT_ARREST: "Select a target player first to prevent their arrest!",
    Command.PREVENT_COUP: "Select a target player first to prevent coup against them!",
    Command.CANCEL_BRIBE: "Select a target player first to cancel their bribe!",
    Command.CANCEL_TAX: "Select a target player first to cancel their tax!",
}


def role_name(player: Player) -> str:
    """The role a player was seated with, or "Unknown"."""
    for name, cls in ROLES.items():
        if isinstance(player, cls):
            return name
    return "Unknown"


class Table:
    """Seats players in a game and turns commands into status messages."""

    def __init__(self, game: Game | None = None) -> None:
        self.game = game if game is not None else Game()
        self.players: list[Player] = []
        self.target: Player | None = None
        self.target_text = NO_TARGET_TEXT
        self.status = ""

    def add_player(self, name: str, role: str) -> str:
        """Seat a new player of ``role`` with the starting coins."""
        role_cls = next(
            (cls for key, cls in ROLES.items() if key.lower() == role.lower()), None
        )
        if role_cls is None:
            raise CoupError(f"Unknown role: {role}")
        if not name:
            self.status = "Enter a name to add player."
        elif any(player.name == name for player in self.players):
            self.status = "Player name already exists!"
        else:
            player = role_cls(self.game, name)
            player.add_coins(STARTING_COINS)
            self.players.append(player)
            self.status = (
                f"Added {role_name(player)} {name} with {STARTING_COINS} starting coins!"
            )
        return self.status

    def select_target(self, index: int) -> str:
        """Choose the player at ``index`` (from 0, in seating order) as target."""
        if not 0 <= index < len(self.players):
            raise IndexError(f"No player at position {index}")
        self.target = self.players[index]
        self.target_text = f"Target: {self.target.name} (Selected)"
        return self.target_text

    def clear_target(self) -> str:
        self.target = None
        self.target_text = NO_TARGET_TEXT
        return self.target_text

    def current_player(self) -> Player | None:
        """The seated player whose turn it is, if any."""
        if not self.players:
            return None
        turn = self.game.turn()
        return next((p for p in self.players if p.name == turn), None)

    def perform(self, command: Command) -> str:
        """Carry out ``command`` for the current player and return the status."""
        try:
            current = self.current_player()
            if current is None:
                return self.status
            message, action_taken = self._dispatch(current, command)
            if action_taken:
                if current.coins >= 10:
                    message += (
                        f" WARNING: {current.name} has 10+ coins and must coup!"
                    )
                try:
                    message = f"GAME OVER! {self.game.winner()} wins!"
                except CoupError:
                    pass
            self.status = message
        except CoupError as error:
            self.status = f"Error: {error}"
        return self.status

    def _dispatch(self, current: Player, command: Command) -> tuple[str, bool]:
        name = current.name
        if command is Command.GATHER:
            current.gather()
            return f"{name} gathered 1 coin!", True
        if command is Command.TAX:
            current.tax()
            return f"{name} collected tax!", True
        if command is Command.INVEST:
            if not isinstance(current, Baron):
                return "Only Barons can invest!", False
            current.invest()
            return f"{name} invested successfully!", True
        if command is Command.BRIBE:
            current.bribe()
            return f"{name} used bribe to get extra actions!", True
        if command is Command.END_TURN:
            self.game.next_turn()
            self.clear_target()
            return f"Turn ended. Now it's {self.game.turn()}'s turn.", False

        target = self.target
        if target is None:
            return _TARGET_PROMPTS[command], False

        if command is Command.ARREST:
            current.arrest(target)
            return f"{name} arrested {target.name}!", True
        if command is Command.SANCTION:
            current.sanction(target)
            return f"{name} sanctioned {target.name}!", True
        if command is Command.COUP:
            current.coup(target)
            self.clear_target()
            return f"{name} couped {target.name}!", True
        if command is Command.SEE_COINS:
            if not isinstance(current, Spy):
                return "Only Spies can see coins!", False
            coins = current.see_coins(target)
            return f"{name} sees that {target.name} has {coins} coins!", False
        if command is Command.PREVENT_ARREST:
            if not isinstance(current, Spy):
                return "Only Spies can prevent arrest!", False
            current.prevent_arrest(target)
            return (
                f"{name} prevented {target.name} from being arrested next turn!",
                False,
            )
        if command is Command.PREVENT_COUP:
            if not isinstance(current, General):
                return "Only Generals can prevent coup!", False
            current.prevent_coup(target)
            return f"{name} prevented coup against {target.name}!", True
        if command is Command.CANCEL_BRIBE:
            if not isinstance(current, Judge):
                return "Only Judges can cancel bribe!", False
            current.cancel_bribe(target)
            return f"{name} cancelled {target.name}'s bribe!", True
        if not isinstance(current, Governor):
            return "Only Governors can cancel tax!", False
        current.cancel_tax(target)
        return f"{name} cancelled {target.name}'s tax!", False

    def player_rows(self) -> list[str]:
        """One line per seated player, with coins and status markers."""
        if not self.players:
            return []
        current_turn = self.game.turn()
        rows = []
        for number, player in enumerate(self.players, start=1):
            row = (
                f"{number}. {player.name} ({role_name(player)})"
                f" - Coins: {player.coins}"
            )
            if player.name == current_turn:
                row += " (CURRENT TURN)"
            if not player.alive:
                row += " (DEAD)"
            if player.sanctioned:
                row += " [SANCTIONED]"
            if player.arrest_prevented:
                row += " [ARREST PROTECTED]"
            if player.coup_prevented:
                row += " [COUP PROTECTED]"
            rows.append(row)
        return rows