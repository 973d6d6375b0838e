"""Dispatching user requests onto the single figure being edited."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from wireframe3d.draw import draw_figure
from wireframe3d.figure import Figure, load_figure
from wireframe3d.geometry import FileError, MoveData, RotateData, ScaleData


class Action(enum.IntEnum):
    """What a request asks the manager to do."""

    IMPORT = 0
    EXPORT = 1
    MOVE = 2
    ROTATE = 3
    SCALE = 4
    DRAW = 5
    CHECK = 6
    QUIT = 7


@dataclass
class Request:
    """An action together with the data it needs."""

    action: Action
    filename: Optional[str] = None
    move: MoveData = field(default_factory=MoveData)
    rotate: RotateData = field(default_factory=RotateData)
    scale: ScaleData = field(default_factory=ScaleData)
    scene: Any = None
    width: float = 0.0
    height: float = 0.0


class Manager:
    """Holds the current figure and applies requests to it."""

    def __init__(self) -> None:
        self.figure = Figure()

    def _filename(self, request: Request) -> str:
        if not request.filename:
            raise FileError("no file name given")
        return request.filename

    def handle(self, request: Request) -> None:
        """Carry out a request; errors are raised as FigureError subclasses."""
        match request.action:
            case Action.IMPORT:
                self.figure = load_figure(self._filename(request))
            case Action.EXPORT:
                self.figure.export(self._filename(request))
            case Action.MOVE:
                self.figure.translate(request.move)
            case Action.SCALE:
                self.figure.scale(request.scale)
            case Action.ROTATE:
                self.figure.rotate(request.rotate)
            case Action.DRAW:
                draw_figure(self.figure, request.scene, request.width, request.height)
            case Action.QUIT:
                self.figure = Figure()
            case Action.CHECK:
                pass