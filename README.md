# fractview

An interactive viewer for escape-time fractals. It opens an 800×800 window
showing one of four fractals and lets you zoom, pan, recolour and switch
between them from the keyboard and mouse. It also contains a small reader
for XPM pixmaps.

Supported fractals:

| Letter | Fractal      |
|--------|--------------|
| `m`    | Mandelbrot   |
| `j`    | Julia        |
| `b`    | Burning Ship |
| `t`    | Tricorn      |

## Installation

```
pip install .
```

This installs `numpy` and `pygame`.

## Usage

Start the viewer with the letter of the fractal you want:

```
fractview m
```

Case does not matter, so `fractview J` opens the Julia set too. An empty
argument (`fractview ""`) opens the Mandelbrot set. If there is not exactly
one argument, or it is not one of the letters above, a help screen is
printed and the program exits without opening a window. If the display
cannot be opened, an error is written to standard error and the exit
status is 1.

### Controls

| Input               | Action                                             |
|---------------------|----------------------------------------------------|
| `Esc` / close       | Quit                                               |
| `1` – `4`           | Switch to Mandelbrot, Julia, Burning Ship, Tricorn |
| `Q` / `W`           | Raise the colour value (by 0x500000 / 0x50)        |
| `A` / `S`           | Lower the colour value (by 0x500000 / 0x50)        |
| Mouse wheel         | Zoom in and out around the pointer (factor 1.3)    |
| Arrow keys          | Move the view                                      |
| `L`                 | Lock or unlock the Julia constant (Julia only)     |
| `0`                 | Reset the current fractal to its default view      |

In the Julia view the constant follows the mouse pointer until you press
`L` to freeze it. Switching fractal with `1`–`4` also resets the view.

## Using it as a library

The computation does not depend on the window:

```python
from fractview.engine import Engine, parse_fractal_type
from fractview.fractals import FractalType

engine = Engine(parse_fractal_type("b"))
pixels = engine.render()          # 800×800 uint32 array, indexed [y, x]
count = engine.iterations_at(400, 400)

engine.reset(FractalType.TRICORN)
```

Each pixel of `render()` is the escape count times 8 times the current
colour value, kept to 32 bits; the window shows its low 24 bits as RGB.
`parse_fractal_type` raises `fractview.utils.UsageError` for an unknown
letter.

Input is fed through `Engine.on_key`, `Engine.on_scroll` and
`Engine.on_mouse_move`, which take `fractview.keys.Key` and
`fractview.keys.MouseButton` values and return whether a redraw is needed.
`fractview.keys.decode_key` and `decode_button` turn raw X11 or macOS key
and button codes into those values.

`fractview.fractals` provides the single-point iteration functions
(`mandelbrot`, `julia`, `burning_ship`, `tricorn`) that work on a
`Fractal` view state.

### XPM images

`fractview.xpm` reads XPM pixmaps and resolves X11 colour names through
`fractview.colornames.lookup_color`:

```python
from fractview.xpm import load_xpm_file, parse_xpm_lines

image = load_xpm_file("icon.xpm")
print(image.width, image.height, hex(image.pixel(0, 0)))

small = parse_xpm_lines(["2 1 2 1", "a c #ff0000", "b c None", "ab"])
```

Pixels are 32-bit values; `None` (transparent) colours are stored as
`0xFF000000`. Comments outside quoted strings are ignored in files.
Malformed input raises `fractview.xpm.XpmError`.

## Limitations

- The viewer only displays; it cannot save the rendered picture to a file.
- XPM images can be read into arrays but are not shown by the viewer, and
  there is no XPM writer.

## Running the tests

```
pip install ".[test]"
pytest
```