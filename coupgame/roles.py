"""The six roles and their special abilities."""

from __future__ import annotations

from .actions import ActionType, CoupError
from .player import Player


class Governor(Player):
    """Takes 3 coins from tax and can cancel another player's tax."""

    def tax(self) -> None:
        self.game.validate_player(self, ActionType.TAX)
        self.add_coins(3)
        self.last_action = ActionType.TAX
        self.game.consume_action()

    def cancel_tax(self, target: Player) -> None:
        self.game.validate_target(target)
        if target.last_action is not ActionType.TAX:
            raise CoupError("Target's last action was not tax")
        target.remove_coins(min(2, target.coins))
        target.last_action = ActionType.NONE


class Baron(Player):
    """Can invest 3 coins for 6, and is paid 1 coin when sanctioned."""

    def invest(self) -> None:
        self.game.validate_player(self, ActionType.NONE, 3)
        self.remove_coins(3)
        self.add_coins(6)
        self.game.consume_action()

    def on_sanctioned(self, sanctioner: Player) -> None:
        self.add_coins(1)


class General(Player):
    """Can pay 5 coins to shield a player from coups; recovers arrested coins."""

    def prevent_coup(self, target: Player) -> None:
        self.game.validate_player(self, ActionType.NONE, 5)
        self.game.validate_target_in_game(target)
        self.remove_coins(5)
        target.coup_prevented = True

    def on_arrested(self) -> bool:
        self.add_coins(1)
        return False


class Judge(Player):
    """Can cancel a bribe; sanctioning a judge costs an extra coin."""

    def cancel_bribe(self, target: Player) -> None:
        self.game.validate_target(target)
        self.game.validate_player_turn(target)
        self.game.validate_player_has_actions()
        if target.last_action is not ActionType.BRIBE:
            raise CoupError("Target's last action was not bribe")
        self.game.consume_action()

    def on_sanctioned(self, sanctioner: Player) -> None:
        if sanctioner.coins < 4:
            raise CoupError("Player does not have enough coins to pay for sanction")
        sanctioner.remove_coins(1)


class Merchant(Player):
    """Earns a bonus coin at turn start with 3+ coins; pays 2 when arrested."""

    def on_arrested(self) -> bool:
        self.remove_coins(min(2, self.coins))
        return True

    def on_turn_start(self) -> None:
        if self.coins >= 3:
            self.add_coins(1)


class Spy(Player):
    """Can look at another player's coins and stop them from arresting."""

    def see_coins(self, target: Player) -> int:
        self.game.validate_target(target)
        return target.coins

    def prevent_arrest(self, target: Player) -> None:
        self.game.validate_target(target)
        target.arrest_prevented = True