# jeeprun

A top-down arcade game. You drive a jeep across a desert. A small band of weaklings walks north towards a boat, and you try to keep them alive on the way. Kamikaze zombies, wandering enemies and ranged gun turrets keep spawning around you, one every two seconds.

## Installing

```
pip install .
```

This also installs `numpy` and `pygame`.

## Playing

```
jeeprun
```

The window is 800×600 by default. You can choose another size:

```
jeeprun --width 1024 --height 768
```

| Input       | Action                             |
|-------------|------------------------------------|
| W / S       | Accelerate forward / reverse       |
| A / D       | Steer left / right                 |
| Mouse       | Aim the turret                     |
| Left button | Fire                               |
| 1 / 2       | Switch to machine gun / missiles   |
| Escape      | Quit                               |

The jeep keeps its momentum and slows down through friction. It steers faster the faster it goes.

### Pickups

The ground is scattered with 90 pickups:

- health packs restore one point of health;
- ammo crates refill bullets (+25, up to 100) and missiles (+5, up to 10);
- invincibility orbs stop enemies from hurting you for five seconds.

The jeep starts with 15 health, 100 bullets and 10 missiles. The HUD shows a health bar and both ammunition counts.

### Enemies

- **Kamikaze zombies** chase you or a weakling and blow up when they get close. The blast damages the enemies and weaklings around it.
- **Wanderers** drift across the map and change heading every few seconds.
- **Ranged turrets** shoot at you or at nearby weaklings. They follow you within range and back off when you come too close.

Bullets hit what lies along their flight line and leave a spray of blood. Missiles explode on contact and damage everything inside the blast radius once. Driving into an enemy hurts both of you.

### How a game ends

The game ends when the jeep is destroyed ("Game over"), when you press Escape, or when you close the window. Weaklings that reach the boat stop walking, and the game reports each arrival. Status messages ("spawning wanderer", "Weakling reached end goal", "Game over") are printed to the terminal.

## What it does not do

- Nothing in the package declares a win or a loss based on the weaklings. The boat records arrivals, but no frame ever reaches its win or lose outcome.
- Objects are drawn as flat-coloured shapes and dots. The game keeps a list of texture file names (`jeeprun.world.TEXTURE_FILES`) but never loads images or shaders.

## As a library

The game logic needs no window, so you can run it headless:

- `jeeprun.world.World(pointer=None, rng=None, clock=None)` takes an optional cursor (`jeeprun.player.Pointer`), a `random.Random` and a clock function.
- `World.setup()` places the player, enemies, pickups, weaklings, boat, background and HUD.
- Each frame, call `World.handle_controls(delta_time, controls)` with a `jeeprun.world.Controls` snapshot, then `World.update(delta_time)`.
- `World.closed` and `World.messages` report the state of the game.
- `World.view_matrix(width, height)` gives the camera matrix centred on the player.

`jeeprun.app.App(width, height, title)` is the pygame front end. It wires a window and live input to a `World`. `App.run()` plays until the world closes and returns the messages produced.

## Tests

```
pip install .[test]
pytest
```