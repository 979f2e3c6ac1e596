"""The basic player and the actions every role shares."""

from __future__ import annotations

from .actions import ActionType, CoupError
from .game import Game


class Player:
    """A seat at the table; joining the game happens on construction."""

    def __init__(self, game: Game, name: str) -> None:
        self.game = game
        self.name = name
        self._coins = 0
        self._alive = True
        self.last_action = ActionType.NONE
        self.last_arrested: Player | None = None
        self.sanctioned = False
        self.arrest_prevented = False
        self.coup_prevented = False
        game.add_player(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, coins={self._coins})"

    @property
    def coins(self) -> int:
        return self._coins

    @property
    def alive(self) -> bool:
        return self._alive

    def add_coins(self, amount: int) -> None:
        if amount < 0:
            raise CoupError("Amount must be positive")
        self._coins += amount

    def remove_coins(self, amount: int) -> None:
        if amount < 0:
            raise CoupError("Amount must be positive")
        if amount > self._coins:
            raise CoupError("Amount must be less than or equal to coins")
        self._coins -= amount

    def eliminate(self) -> None:
        """Take this player out of the game."""
        if not self._alive:
            raise CoupError("Player is already dead")
        self._alive = False
        self.game.remove_player(self)

    def clear_last_action(self) -> None:
        self.last_action = ActionType.NONE

    def on_sanctioned(self, sanctioner: Player) -> None:
        """Reaction to being sanctioned; ordinary players have none."""

    def on_arrested(self) -> bool:
        """Reaction to being arrested; True means the usual coin transfer is skipped."""
        return False

    def on_turn_start(self) -> None:
        """Reaction to the start of this player's turn; ordinary players have none."""

    def gather(self) -> None:
        self.game.validate_player(self, ActionType.GATHER)
        self.add_coins(1)
        self.last_action = ActionType.GATHER
        self.game.consume_action()

    def tax(self) -> None:
        self.game.validate_player(self, ActionType.TAX)
        self.add_coins(2)
        self.last_action = ActionType.TAX
        self.game.consume_action()

    def bribe(self) -> None:
        """Pay 4 coins for an extra action this turn."""
        self.game.validate_player(self, ActionType.BRIBE, 4)
        self.remove_coins(4)
        self.last_action = ActionType.BRIBE
        self.game.add_actions(1)

    def arrest(self, target: Player) -> None:
        self.game.validate_player(self, ActionType.ARREST)
        self.game.validate_target(target)
        if self.last_arrested is target:
            raise CoupError("Player has already arrested this target")
        if target.coins < 1:
            raise CoupError("Target has no coins to arrest")
        if not self.game.handle_special_arrest(target):
            target.remove_coins(1)
            self.add_coins(1)
        self.last_arrested = target
        self.last_action = ActionType.ARREST
        self.game.consume_action()

    def sanction(self, target: Player) -> None:
        self.game.validate_player(self, ActionType.SANCTION, 3)
        self.game.validate_target(target)
        self.game.handle_special_sanction(self, target)
        self.remove_coins(3)
        target.sanctioned = True
        self.last_action = ActionType.SANCTION
        self.game.consume_action()

    def coup(self, target: Player) -> None:
        self.game.validate_player(self, ActionType.COUP, 7)
        self.game.validate_target(target)
        if target.coup_prevented:
            raise CoupError("Target has coup prevented")
        self.remove_coins(7)
        target.eliminate()
        self.last_action = ActionType.COUP
        self.game.consume_action()