# invaders

A compact Space Invaders style arcade game built on pygame. Waves of enemies
snake their way down the screen, shooting as they go; a UFO crosses the top
of the screen from time to time and, when shot down, drops a power-up. The
level each player reached is remembered between sessions.

## Installing

```
pip install .
```

pygame is installed as a dependency.

## Resources

The game needs a resource directory, by default `Resources` in the current
directory, laid out like this:

- `Images/` – PNG images, looked up by file name without `.png`:
  `Background`, `Font`, `PowerupBar`, `logo`, `Player`, `PlayerBullet`,
  `Explosion`, `ExplosionBig`, `EnemyBullet`, `Enemy0`, `Enemy1`, `Enemy2`,
  `Ufo`, `Powerup0` to `Powerup3`. Animated images are horizontal strips of
  equally wide frames; `Font` is a strip of 96 glyphs starting at the space
  character.
- `Fonts/ARIALN.TTF` – the TrueType font used for the name prompt.
- `music/music.ogg` – optional background music, looped while playing.

If the image directory, the `logo` image, any other required image or the
font is missing, the game prints a message and exits with status 1.

## Playing

```
invaders
invaders --resources path/to/Resources --save-file scores.txt
```

Options:

- `--resources` – the resource directory (default `Resources`).
- `--save-file` – the player data file (default `player_data.txt`).

On the opening screen, type your name and press Enter. If you have played
before under that name, the game starts at the level saved for you.

| Key         | Action                         |
|-------------|--------------------------------|
| Left, Right | Move the ship                  |
| Z           | Fire                           |
| R           | Restart after the game is over |

Moving past one edge of the screen brings the ship in at the other. You
start with three lives; an enemy bullet without a shield, or enemies
reaching your row, costs one. Clearing every enemy moves you on to the next
level after a short "Next level!" pause. There are eight level layouts;
after the last one the game keeps cycling through the second half. Enemies
start faster and shoot more often as the level number rises, and the
survivors of a wave speed up as their companions are destroyed.

### Enemies

- Type 0 takes one hit and fires a single bullet straight down.
- Type 1 takes two hits and fires two bullets in a narrow spread.
- Type 2 takes three hits and fires three bullets in a wide spread.

An enemy flashes white briefly when it is hit.

### Power-ups

Shooting the UFO drops one of four power-ups. Catch it to activate it for
512 frames; the bar in the top right corner shows the time left:

- **Shield** (blue): absorbs one enemy bullet.
- **Fast reload** (red): fire much more often.
- **Triple shot** (yellow): three bullets per shot.
- **Mirrored controls** (purple): left and right are swapped.

## Saved progress

When a game ends, the player's name, level and score are written to the save
file, one player per line as `name,level,score`; other players' lines are
kept. `invaders.userdata.PlayerStore` reads and writes this file. Pressing R
after a game over starts again from the saved level with three lives.

## Using the game from code

`invaders.game.Game(assets, store, rng)` holds one session. Feed typed
characters to `type_char`, advance one frame with `tick(controls)` where
`controls` is an `invaders.player.Controls` (`left`, `right`, `fire`; an
extra true `restart` attribute means the restart key is held), and render
with `draw(surface)` onto a 320×180 surface. `invaders.assets.Assets` loads
and looks up the images.

## What it does not do

- No images, font or music ship with the package; you supply the resource
  directory described above.
- No points are awarded during play, so the score stored in the save file
  stays 0 (`Player.add_score` exists but nothing calls it).

## Running the tests

```
pip install .[test]
pytest
```