"""Turn order, rule validation and role-specific hooks for a game of Coup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .actions import ActionType, CoupError

if TYPE_CHECKING:
    from .player import Player


class Game:
    """Holds the seating order, whose turn it is and how many actions remain."""

    def __init__(self) -> None:
        self._players: list[Player] = []
        self._current: Player | None = None
        self._remaining_actions = 1

    @property
    def remaining_actions(self) -> int:
        """Actions the current player may still take this turn."""
        return self._remaining_actions

    def turn(self) -> str:
        """Name of the player whose turn it is."""
        if self._current is None:
            raise CoupError("No player turn")
        return self._current.name

    def players(self) -> list[str]:
        """Names of the living players, in seating order."""
        return [player.name for player in self._players if player.alive]

    def winner(self) -> str:
        """Name of the sole survivor; raises while more than one is alive."""
        alive = [player for player in self._players if player.alive]
        if len(alive) == 1:
            return alive[0].name
        raise CoupError("No winner")

    def add_player(self, player: Player) -> None:
        if self._current is None:
            self._current = player
        self._players.append(player)

    def remove_player(self, player: Player) -> None:
        try:
            self._players.remove(player)
        except ValueError:
            raise CoupError("Player is not in this game") from None

    def validate_player(
        self, player: Player, action: ActionType = ActionType.NONE, price: int = 0
    ) -> None:
        """Check that ``player`` may take ``action`` costing ``price`` now."""
        self._validate_player_alive(player)
        self.validate_player_turn(player)
        self.validate_player_has_actions()
        self.validate_player_has_enough_coins(player, price)
        self._validate_less_than_ten_coins(player, action)
        self._validate_not_sanctioned(player, action)
        self._validate_can_arrest(player, action)

    def validate_target(self, target: Player) -> None:
        self._validate_player_alive(target)
        self.validate_target_in_game(target)

    def handle_special_sanction(self, sanctioner: Player, target: Player) -> None:
        target.on_sanctioned(sanctioner)

    def handle_special_arrest(self, target: Player) -> bool:
        """Apply the target's arrest reaction; True if it replaces the usual transfer."""
        return target.on_arrested()

    def handle_start_of_turn(self, player: Player) -> None:
        player.on_turn_start()

    def consume_action(self) -> None:
        """Use up one action, ending the turn when none remain."""
        self._remaining_actions -= 1
        if self._remaining_actions <= 0:
            self.next_turn()

    def add_actions(self, amount: int) -> None:
        self._remaining_actions += amount

    def validate_target_in_game(self, target: Player) -> None:
        if not any(player is target for player in self._players):
            raise CoupError("Target player must be in the same game")

    def validate_player_has_enough_coins(self, player: Player, price: int) -> None:
        if player.coins < price:
            raise CoupError("Player does not have enough coins")

    def validate_player_turn(self, player: Player) -> None:
        if self._current is not player:
            raise CoupError("It's not your turn")

    def validate_player_has_actions(self) -> None:
        if self._remaining_actions <= 0:
            raise CoupError("No actions remaining in this turn")

    def next_turn(self) -> None:
        """Pass the turn to the next seat and prepare that player."""
        if not self._players:
            return
        try:
            index = self._players.index(self._current)
        except ValueError:
            raise CoupError("Current player not found in game") from None
        self._current = self._players[(index + 1) % len(self._players)]
        self._reset_player(self._current)

    def _reset_player(self, player: Player) -> None:
        player.sanctioned = False
        player.arrest_prevented = False
        player.coup_prevented = False
        self._remaining_actions = 1
        self.handle_start_of_turn(player)

    @staticmethod
    def _validate_player_alive(player: Player) -> None:
        if not player.alive:
            raise CoupError("Dead players cannot perform actions")

    @staticmethod
    def _validate_less_than_ten_coins(player: Player, action: ActionType) -> None:
        if player.coins >= 10 and action is not ActionType.COUP:
            raise CoupError("Player has more than 10 coins, must perform coup")

    @staticmethod
    def _validate_not_sanctioned(player: Player, action: ActionType) -> None:
        if player.sanctioned and action in (ActionType.GATHER, ActionType.TAX):
            raise CoupError("Player is sanctioned")

    @staticmethod
    def _validate_can_arrest(player: Player, action: ActionType) -> None:
        if player.arrest_prevented and action is ActionType.ARREST:
            raise CoupError("Player cannot perform arrest")