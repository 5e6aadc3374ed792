# pixelplay

Small arcade games written as plain, frame-stepped game logic, together with a
tiny director for line-based dialogue scripts.

Each game exposes a `step` function. It takes the current state, the buttons
held this frame and a `Canvas`, updates the state, records what would be drawn
and returns the state to keep for the next frame. The rules can therefore be
run, inspected and tested without any display.

## Contents

- `pixelplay.controls`
  - `ButtonState` (`RELEASED`, `JUST_PRESSED`, `PRESSED`, `JUST_RELEASED`) with
    `pressed()` and `just_pressed()`.
  - `Gamepad`, one controller's buttons; `Gamepad.holding("left", "a")` and
    `Gamepad.tapping("start")` build one quickly.
  - `Controls`, gamepads by slot; `gamepad(index)` returns an idle pad for an
    empty slot.
  - `Canvas`, which records `DrawCommand`s (`clear`, `rect`, `circ`, `ellipse`,
    `sprite`, `text`, `path`, `set_camera`) in `commands`; `kinds()` lists
    their kinds in order.
  - `default_rand()`, a random unsigned 32-bit integer.
- `pixelplay.tanks`: a two-player tank duel among mirrored blocks
  (`GameState.new()`, `step(state, controls, canvas)`; `state.winner` becomes
  a `Winner` once a missile hits).
- `pixelplay.space_invaders`: five rows of eleven invaders marching down
  (`GameState.new()`, `step(state, controls, canvas)`).
- `pixelplay.lumberjack`: the rules of an energy-limited wood-chopping game:
  `PlayerData`, `GameData`, `init_player`, `chop_tree`, `chop_one`.
  Chopping without enough energy raises `GameError` with
  `GameErrorCode.NOT_ENOUGH_ENERGY`. Energy refills by one every
  `TIME_TO_REFILL_ENERGY` seconds, up to `MAX_ENERGY`.
- `pixelplay.director` and `pixelplay.textbox`: run a dialogue script one line
  per call of `assess_current_line(state, gamepad, canvas)`. The script syntax
  covers knots (`<< name`), diverts (`>> name`), comments (`#`), choices
  (`]> a ]> b`, with the targets on the next line as `>> x >> y`, where `NULL`
  keeps the choice open), waits (`! WAIT / 2`), spoken lines (`NOAH: hello`)
  and `-- end`. Malformed scripts raise `ScriptError`.
- The space shooter:
  - `pixelplay.shooter_entities`: player, enemies, projectiles, power-ups,
    quests and `check_collision`.
  - `pixelplay.shooter_state`: `GameState`, `spawn_rate`, `enemy_for_roll` and
    `splash_fragments`.
  - `pixelplay.shooter_update`: `update(state, controls, canvas, rand)` and the
    rules it runs.
  - `pixelplay.shooter_game`: `step(state, controls, canvas, rand)`, which draws
    the frame and then calls `update`, plus the `draw_*` helpers.

  Gamepad 0 moves the ship; gamepad 1's A or start fires.

## Installing

    pip install .

Run the tests with:

    pip install ".[test]"
    pytest

## Examples

    from pixelplay.controls import Canvas, Controls, Gamepad
    from pixelplay import space_invaders

    state = space_invaders.GameState.new()
    controls = Controls({0: Gamepad.tapping("a")})
    canvas = Canvas()
    state = space_invaders.step(state, controls, canvas)
    print(state.tick, len(state.bullets), canvas.kinds()[:3])

The shooter takes a random source, so a fixed one makes a run repeatable:

    from pixelplay.controls import Canvas, Controls, default_rand
    from pixelplay import shooter_game
    from pixelplay.shooter_state import GameState

    state = GameState.new()
    for _ in range(600):
        state = shooter_game.step(state, Controls(), Canvas(), default_rand)
    print(state.tick, len(state.enemies))

The lumberjack rules need no canvas at all:

    from pixelplay.lumberjack import GameData, PlayerData, chop_one, init_player

    player, game = PlayerData(), GameData()
    init_player(player, signer="player-one", now=0)
    chop_one(player, game, counter=1, now=0)
    print(player.wood, player.energy, game.total_wood_collected)

A dialogue script:

    from pixelplay.controls import Canvas, Gamepad
    from pixelplay.director import DirectorState, assess_current_line

    state = DirectorState.from_script("<< start\nNOAH: hello\n-- end")
    assess_current_line(state, Gamepad(), Canvas())                # skips the knot
    assess_current_line(state, Gamepad.tapping("start"), Canvas())  # shows and advances
    assess_current_line(state, Gamepad(), Canvas())
    print(state.scene)  # 2

## What it does not do

- It draws nothing on screen and reads no real input. `Canvas` only records
  calls and `Controls` holds whatever button states you give it; hooking them
  to a renderer and a controller is up to you. There is no command to start a
  game, and no sprites or fonts ship with the package.
- The lumberjack module holds the game's rules only. It keeps players and trees
  in plain objects: no accounts, no storage, no network.
- The director runs scripts you pass it. It does not draw portraits, speech
  bubbles, backgrounds or camera moves, and ships no script of its own.