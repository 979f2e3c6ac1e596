import pytest

from coupgame.actions import CoupError
from coupgame.game import Game
from coupgame.player import Player
from coupgame.roles import Baron, General, Governor, Merchant


def test_game_player_management():
    game = Game()
    Governor(game, "Player1")
    Baron(game, "Player2")
    assert game.players() == ["Player1", "Player2"]
    assert game.turn() == "Player1"


def test_player_elimination_with_duplicate_registration():
    game = Game()
    player1 = Governor(game, "Player1")
    player2 = Baron(game, "Player2")
    game.add_player(player1)
    game.add_player(player2)
    assert player1.alive is True
    player1.eliminate()
    assert player1.alive is False
    with pytest.raises(CoupError):
        player1.eliminate()


def test_sanction_cleared_at_turn_start():
    game = Game()
    player1 = Governor(game, "Player1")
    player2 = Baron(game, "Player2")
    player1.add_coins(3)
    assert player2.sanctioned is False
    player2.sanctioned = True
    assert player2.sanctioned is True
    game.next_turn()
    assert player2.sanctioned is False
    player2.gather()
    assert player2.coins == 1


def test_winner_detection():
    game = Game()
    Governor(game, "Player1")
    player2 = Baron(game, "Player2")
    player3 = General(game, "Player3")
    with pytest.raises(CoupError):
        game.winner()
    player2.eliminate()
    player3.eliminate()
    assert game.winner() == "Player1"


def test_turn_management():
    game = Game()
    player1 = Governor(game, "Player1")
    player2 = Baron(game, "Player2")
    game.add_player(player1)
    game.add_player(player2)
    assert game.turn() == "Player1"
    game.next_turn()
    assert game.turn() == "Player2"
    game.next_turn()
    assert game.turn() == "Player1"


def test_turn_without_players_raises():
    with pytest.raises(CoupError, match="No player turn"):
        Game().turn()


def test_next_turn_on_empty_game_keeps_no_turn():
    game = Game()
    game.next_turn()
    with pytest.raises(CoupError):
        game.turn()


def test_next_turn_fails_when_current_player_removed():
    game = Game()
    first = Player(game, "A")
    Player(game, "B")
    first.eliminate()
    assert game.players() == ["B"]
    with pytest.raises(CoupError, match="Current player not found"):
        game.next_turn()


def test_remaining_actions_starts_at_one_and_grows():
    game = Game()
    Player(game, "A")
    assert game.remaining_actions == 1
    game.add_actions(2)
    assert game.remaining_actions == 3


def test_extra_action_keeps_turn():
    game = Game()
    a = Player(game, "A")
    Player(game, "B")
    game.add_actions(1)
    a.gather()
    assert game.turn() == "A"
    a.gather()
    assert game.turn() == "B"
    assert a.coins == 2


def test_consume_action_passes_turn():
    game = Game()
    Player(game, "A")
    Player(game, "B")
    game.consume_action()
    assert game.turn() == "B"
    assert game.remaining_actions == 1


def test_wrong_turn_rejected():
    game = Game()
    Player(game, "A")
    b = Player(game, "B")
    with pytest.raises(CoupError, match="It's not your turn"):
        b.gather()


def test_ten_coins_forces_coup():
    game = Game()
    a = Player(game, "A")
    Player(game, "B")
    a.add_coins(10)
    with pytest.raises(CoupError, match="must perform coup"):
        a.gather()
    assert a.coins == 10


def test_sanctioned_player_cannot_gather_or_tax():
    game = Game()
    a = Player(game, "A")
    a.sanctioned = True
    with pytest.raises(CoupError, match="Player is sanctioned"):
        a.gather()
    with pytest.raises(CoupError, match="Player is sanctioned"):
        a.tax()


def test_sanctioned_player_may_still_bribe():
    game = Game()
    a = Player(game, "A")
    a.sanctioned = True
    a.add_coins(4)
    a.bribe()
    assert game.remaining_actions == 2


def test_validate_target_in_other_game():
    game1, game2 = Game(), Game()
    a = Player(game1, "A")
    b = Player(game2, "B")
    with pytest.raises(CoupError, match="same game"):
        game1.validate_target(b)
    game1.validate_target_in_game(a)
    assert game1.players() == ["A"]


def test_dead_target_rejected():
    game = Game()
    Player(game, "A")
    b = Player(game, "B")
    b.eliminate()
    with pytest.raises(CoupError, match="Dead players"):
        game.validate_target(b)


def test_not_enough_coins():
    game = Game()
    a = Player(game, "A")
    with pytest.raises(CoupError, match="not have enough coins"):
        game.validate_player_has_enough_coins(a, 1)


def test_merchant_bonus_at_turn_start():
    game = Game()
    Player(game, "A")
    merchant = Merchant(game, "M")
    merchant.add_coins(3)
    game.next_turn()
    assert merchant.coins == 4


def test_merchant_no_bonus_below_three():
    game = Game()
    Player(game, "A")
    merchant = Merchant(game, "M")
    merchant.add_coins(2)
    game.next_turn()
    assert merchant.coins == 2


def test_turn_start_resets_protections():
    game = Game()
    Player(game, "A")
    b = Player(game, "B")
    b.arrest_prevented = True
    b.coup_prevented = True
    game.next_turn()
    assert (b.arrest_prevented, b.coup_prevented) == (False, False)


def test_handle_special_arrest_for_plain_player():
    game = Game()
    a = Player(game, "A")
    assert game.handle_special_arrest(a) is False