# warlite

A small text-mode take on the WAR board game. You name your territories, give
each one an army colour and a number of troops, and then send them into dice
battles against each other. The game speaks Portuguese on screen.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

### The full game

```
warlite
warlite --seed 42
```

`--seed` fixes the dice so a game can be replayed. Without it the dice are
random.

The game asks how many territories you want. You need at least two; a smaller
number is asked for again. For each territory you then enter:

- a name (only the first word is kept)
- the colour of the army that holds it, such as Azul or Verde
- its number of troops

Wherever a number is expected and something else is typed, the question is
asked again. After registration the map is shown and you get a menu:

1. Show the current map.
2. Attack. You pick an attacking territory and a defending one by number. A
   number outside the map cancels the attack. Each side rolls one six-sided
   die, and the higher roll wins:
   - If the attacker wins, the defender loses one troop. A territory that
     drops to zero troops is conquered: it takes the attacker's colour and
     gets one troop.
   - If the defender wins, the attacker loses one troop. When the attacker is
     left with a single troop, the game says its troops have run out.
   - A tie costs neither side anything.
   - Two territories of the same colour cannot fight each other.
3. Quit. The game shows the final map and ends.

Any other choice is reported as invalid. Ending the input (Ctrl-D) or pressing
Ctrl-C leaves the game.

### Setup only

```
warlite-novice
```

This reads exactly five territories from standard input, one field per line:
the name (first word), the army colour, then the troop count. It shows no
prompts, so it works equally well with a file piped in. It then prints the
world map report and exits. If the input ends early or a troop count is not a
number, it prints an error to standard error and exits with status 1.

## Using it from Python

The modules are `warlite.territory`, `warlite.battle`, `warlite.adventurer`
and `warlite.novice`.

```python
import random

from warlite.territory import Territory, format_map
from warlite.battle import attack, SameColorError

north = Territory("Norte", "Azul", 3)
south = Territory("Sul", "Verde", 1)

try:
    result = attack(north, south, random.Random(7))
    print(result.report())
except SameColorError:
    print("Those territories belong to the same army.")

print(format_map([north, south]))
```

`attack` changes the two territories in place. It returns a `BattleResult`,
which holds both dice rolls (`attacker_roll`, `defender_roll`), the `Outcome`
(`ATTACK_WINS`, `DEFENSE_WINS` or `TIE`), and the flags `conquered` and
`attacker_exhausted`. `roll_die` rolls a single die with the random generator
you pass in.

`warlite.novice` offers `read_territories(lines, count)`, which builds
territories from any iterable of lines, and `format_report(territories)`.
`warlite.adventurer.run_game(console, rng)` plays a whole game through a
`Console`, which can be given its own input and output streams.

## What it does not do

There are no secret missions or victory checks, no computer opponent, no turns
between players, and no way to save or load a game. Battles use one die per
side only.