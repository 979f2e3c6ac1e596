# coupgame

A rules engine for a Coup-style game of coins and character roles, with an
interactive shell for playing it at the terminal.

## Installing

```
pip install .
```

## Playing

```
coupgame
```

This opens a shell with the prompt `coup> `. The commands are:

- `add <name> [role]`: seat a player. The role is one of Governor, Baron,
  General, Judge, Merchant or Spy (any letter case) and defaults to Governor.
  Names are at most 16 printable ASCII characters and must be unique. Every
  new player starts with 2 coins.
- `target <number>`: choose the target of the next action (players are
  numbered from 1 in seating order). `target none` or plain `target` clears it.
- `players`: show whose turn it is, every player with their role, coins and
  markers (`(CURRENT TURN)`, `(DEAD)`, `[SANCTIONED]`, `[ARREST PROTECTED]`,
  `[COUP PROTECTED]`), and the current target.
- `help_roles`: describe each role's abilities.
- `quit` (or end of input): leave.

Any other line is an action for the player whose turn it is:
`gather`, `tax`, `invest`, `bribe`, `arrest`, `sanction`, `coup`, `end`
(also `end_turn` or `next`), `see_coins`, `prevent_arrest`, `prevent_coup`,
`cancel_bribe` and `cancel_tax`. Hyphens may stand for underscores. An action
may be followed by a player number, which selects that player as the target
first, e.g. `arrest 2`. After each action the shell prints a status line;
broken rules are reported as `Error: ...`, and when one player is left the
shell announces `GAME OVER! <name> wins!`.

## Rules in brief

Each turn gives one action; when it is used the turn passes to the next seat.

- **gather**: take 1 coin.
- **tax**: take 2 coins (a Governor takes 3).
- **bribe**: pay 4 coins for one more action this turn.
- **arrest**: take 1 coin from a target that has at least one. You cannot
  arrest the same player you arrested last time.
- **sanction**: pay 3 coins to mark the target as sanctioned. A sanctioned
  player cannot gather or tax.
- **coup**: pay 7 coins to remove the target from the game.
- A player holding 10 or more coins may do nothing but coup.
- When a player's turn begins, their sanction, arrest-prevented and
  coup-prevented markers are cleared.

Roles:

- **Governor**: gets 3 coins from tax, and can cancel the tax of a player
  whose last action was tax, taking back up to 2 coins from them.
- **Baron**: can invest 3 coins to get 6 back (uses the action), and gets
  1 coin when sanctioned.
- **General**: can pay 5 coins to mark a player as protected from coup
  (does not use the action), and gets the coin back when arrested.
- **Judge**: can cancel the bribe of the player whose turn it is, using up
  one of that player's actions. Sanctioning a Judge costs one coin more, and
  needs at least 4 coins.
- **Merchant**: gets a bonus coin at the start of a turn when holding 3 or
  more coins. When arrested, pays up to 2 coins to the treasury instead of
  giving one to the arrester.
- **Spy**: can see another player's coins and can stop a player from
  arresting, both for free.

## Using the library

```python
from coupgame.game import Game
from coupgame.roles import Governor, Baron

game = Game()
alice = Governor(game, "Alice")
bob = Baron(game, "Bob")

alice.tax()           # Alice gets 3 coins; the turn passes to Bob
print(game.turn())    # "Bob"
print(game.players()) # ["Alice", "Bob"]
```

- `coupgame.game.Game` keeps the seating order and turn, and checks the rules
  (`turn()`, `players()`, `winner()`, `next_turn()`, ...).
- `coupgame.player.Player` has the shared actions (`gather`, `tax`, `bribe`,
  `arrest`, `sanction`, `coup`) and coin handling; `coupgame.roles` holds
  `Governor`, `Baron`, `General`, `Judge`, `Merchant` and `Spy`.
- `coupgame.table.Table` wraps a game with starting coins, a selected target
  and status messages; `Table.perform` takes a `coupgame.table.Command`.

A move that breaks the rules raises `coupgame.actions.CoupError`.

## What it does not do

There is no graphical interface: the game is played in the text shell or
through the library. Games are not saved; a game lasts as long as the shell.

## Running the tests

```
pip install .[test]
pytest
```