# wireframe3d

A small viewer and toolkit for 3D wireframe models. A model is a set of
vertices joined by edges. You can load a model from a text file, move it,
scale it and rotate it about its centre, draw it as a flat projection, and
save it again.

The package has no dependencies outside the standard library. The desktop
window uses `tkinter`, which needs a Python built with Tk support.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## The desktop application

```
wireframe3d
```

This command runs `wireframe3d.gui:main` and opens a window with a white
drawing area and a control panel. The panel labels and messages are in
Russian.

- **File field and buttons.** Type a path into the file field, or pick a file
  with the "Выбрать файл" button. "Загрузить" loads the model from that path.
  "Сохранить" writes the current model to that path.
- **"Нарисовать"** draws the model. The model's origin is placed at the middle
  of the drawing area and the z coordinate is dropped.
- **Transform fields.** There are three fields each for the shift (`dx`, `dy`,
  `dz`), the scale factors (`kx`, `ky`, `kz`) and the rotation angles in
  degrees (`x`, `y`, `z`). Each group has its own button. After a transform
  succeeds, the model is redrawn. Scaling and rotation happen about the
  model's centre. A shift moves the centre together with the model.

If a field does not hold a number, a warning is shown. If an operation fails
on a missing or invalid model, or on a file error, a warning dialog says so.
Closing the window releases the model. When the window cannot start, `main`
prints the error, shows it in a dialog if it can, and returns exit status 4.

## Model file format

A model file holds numbers separated by whitespace:

```
4
0 0 0
100 0 0
0 100 0
0 0 100
3
1 2
1 3
1 4
```

1. The number of vertices, then `x y z` for each vertex.
2. The number of edges, then two vertex numbers for each edge, counting from 1.

A model must have at least one vertex and at least one edge, and every edge
must name existing vertices. If not, loading raises `DataError`. A file that
cannot be opened or written raises `FileError`. Exported files use the same
layout, with coordinates written to six decimal places.

## Using it from Python

```python
from wireframe3d.draw import RecordingScene, draw_figure
from wireframe3d.figure import load_figure
from wireframe3d.geometry import MoveData, RotateData, ScaleData

figure = load_figure("cube.txt")           # reads, checks, computes the centre
figure.translate(MoveData(10, 0, 0))
figure.scale(ScaleData(2, 2, 2))
figure.rotate(RotateData(0, 45, 0))        # about x, then y, then z

scene = RecordingScene()
draw_figure(figure, scene, 800, 600)
print(scene.lines)                         # [(x1, y1, x2, y2), ...]

figure.export("cube_moved.txt")
```

Other entry points:

- `parse_figure(text)` builds a model from text in the file format.
- `read_figure(filename)` reads a model from a file without computing its centre.
- `Figure.update_center()` sets the centre to the mean of the vertices.

Scale factors must be positive. Any other value raises `DataError`.

`draw_figure` accepts any object with `add_line(x1, y1, x2, y2)` and `clear()`
methods. It clears the scene before it draws. Passing `None` as the scene
raises `SceneError`.

The same operations can be sent as requests to a `Manager`, which holds one
model the way the desktop application does:

```python
from wireframe3d.geometry import MoveData
from wireframe3d.manager import Action, Manager, Request

manager = Manager()
manager.handle(Request(Action.IMPORT, filename="cube.txt"))
manager.handle(Request(Action.MOVE, move=MoveData(0, 5, 0)))
manager.handle(Request(Action.EXPORT, filename="moved.txt"))
```

For `IMPORT` and `EXPORT` requests without a file name, the manager raises
`FileError`. `QUIT` replaces the model with an empty one. `CHECK` does
nothing.

All errors derive from `FigureError`: `FileError`, `DataError` and
`SceneError`.

## What it does not do

There is no perspective projection, no hidden-line removal and no undo. The
drawing simply drops the z coordinate. Models are read and written only in
the plain text format above.