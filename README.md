# catroad

Cat Road is a small arcade game built on pygame. A kitten moves around an
800×600 window with the arrow keys and picks up collectibles; each pickup
adds 10 points to the score.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Playing

```
catroad
```

The game opens on a title screen:

- Press **Enter** to start playing.
- Press **Esc** to quit.

During play, each arrow key held down moves the kitten 10 pixels per frame.
The kitten cannot leave the window. Closing the window ends the game.

Files are read relative to the current working directory:

- `assets/images/fondo_inicio.png` and `assets/fonts/Platinum Sign.ttf` for
  the title screen. If either is missing, `catroad` stops with a
  `RuntimeError`.
- `assets/coleccionable1.png` and `assets/coleccionable2.png` for the two
  collectibles. They are placed at (100, 200) and (300, 400). A collectible
  whose image cannot be loaded has no area and can never be picked up.
- `Platinum Sign.ttf` for the score text. The game runs without it.

## Sprite demo

```
catroad-sprite-demo
```

This opens a window titled "DinoChrome" with a red square at (400, 300). It
also shows the frames of `assets/images/mi_imagen.png` in turn, if that file
exists. Move it with the arrow keys and close the window to quit.

## Using the pieces

The game's building blocks can be used on their own:

- `catroad.gatito.Gatito`: the kitten. It has a position, lives (never below
  zero) and energy. Its `mover_arriba`, `mover_abajo`, `mover_izquierda` and
  `mover_derecha` methods move it 10 units within the limits you give them.
  `bounds()` returns its 64×64 area.
- `catroad.puntaje.Puntaje`: the current score (`valor`) and the best score
  (`maximo`). It has `aumentar`, `reiniciar` and `texto()`. `guardar_maximo`
  and `cargar_maximo` write the best score to a text file and read it back.
- `catroad.obstaculo.Obstaculo`: a rectangular obstacle. It has
  `set_posicion`, `set_tamano` and `destruir`. `colisiona_con(x, y, w, h)`
  tests it for overlap with an area.
- `catroad.coleccionable.Coleccionable`: an item that can be collected once.
  After that it is no longer drawn. `cargar_textura` raises `OSError` if the
  image cannot be loaded.
- `catroad.nivel.Nivel`: a level holding obstacles, collectibles and a
  background image.
- `catroad.rect.Rect`: an axis-aligned rectangle with `intersects` and
  `moved`.
- `catroad.juego.JuegoCatCross`: the game state. It has
  `inicializar_coleccionables`, `manejar_teclas` (takes a set of pygame key
  codes) and `verificar_colisiones_coleccionables`.
- `catroad.personaje.Personaje`: the animated character from the sprite demo,
  with `move`, `update(elapsed)` and `frame_rect()`.

An example:

```python
from catroad.gatito import Gatito
from catroad.puntaje import Puntaje

gato = Gatito()
gato.mover_derecha(800, 64)
print(gato.bounds())

puntaje = Puntaje()
puntaje.aumentar(10)
puntaje.guardar_maximo("maximo.txt")
print(puntaje.texto())
```

## What it does not do

- The game window does not draw the kitten.
- Each frame is cleared after the collectibles and the score are drawn, so
  they do not stay on screen.
- Obstacles, levels, lives and energy are not used by the game loop.
- There is no sound.
- The best score is not saved between runs unless you call `guardar_maximo`
  yourself.

## Running the tests

```
pytest
```