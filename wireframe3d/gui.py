"""Desktop window for loading, transforming and drawing a wireframe model."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional, Sequence

from wireframe3d.geometry import (
    DataError,
    FigureError,
    FileError,
    MoveData,
    RotateData,
    ScaleData,
)
from wireframe3d.manager import Action, Manager, Request

MEMORY_ERROR = 4

ERROR_TITLE = "Ошибка"
GENERIC_ERROR = "Ошибка!"
DATA_ERROR_MESSAGE = "Фигура не задана!"
FILE_ERROR_MESSAGE = "Ошибка при работе с файлом!"
BAD_MOVE_INPUT = "Введите корректные числа для переноса"
BAD_SCALE_INPUT = "Введите корректные числа для масштабирования"
BAD_ROTATE_INPUT = "Введите корректные числовые значения для поворота"
FATAL_TITLE = "Uzhas! ERROR!"


class CanvasScene:
    """A scene that draws onto a Tk canvas."""

    def __init__(self, canvas: Any, colour: str = "black", width: float = 1.5) -> None:
        self.canvas = canvas
        self.colour = colour
        self.width = width

    def add_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.canvas.create_line(x1, y1, x2, y2, fill=self.colour, width=self.width)

    def clear(self) -> None:
        self.canvas.delete("all")


def error_message(error: BaseException) -> str:
    """Return the message shown to the user for an error."""
    if isinstance(error, DataError):
        return DATA_ERROR_MESSAGE
    if isinstance(error, FileError):
        return FILE_ERROR_MESSAGE
    return GENERIC_ERROR


def parse_triple(texts: Sequence[str]) -> tuple[float, float, float]:
    """Parse three numeric fields; raise ValueError if any is not a number."""
    if len(texts) != 3:
        raise ValueError("exactly three values are expected")
    values = []
    for text in texts:
        if "_" in text:
            raise ValueError(f"not a number: {text!r}")
        values.append(float(text))
    return values[0], values[1], values[2]


class MainWindow:
    """The main window: a drawing area and controls that send requests."""

    def __init__(self, master: Any = None, manager: Optional[Manager] = None) -> None:
        import tkinter as tk
        from tkinter import filedialog, messagebox

        self._messagebox = messagebox
        self._filedialog = filedialog
        self.manager = manager if manager is not None else Manager()
        self.root = master if master is not None else tk.Tk()
        self.root.title("Wireframe")
        self.root.protocol("WM_DELETE_WINDOW", self.close)

        self.canvas = tk.Canvas(self.root, width=800, height=600, background="white")
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.scene = CanvasScene(self.canvas)

        panel = tk.Frame(self.root, padx=8, pady=8)
        panel.pack(side=tk.RIGHT, fill=tk.Y)

        tk.Label(panel, text="Файл").pack(anchor=tk.W)
        self.file_input = tk.Entry(panel, width=30)
        self.file_input.pack(fill=tk.X)
        self._button(panel, "Выбрать файл", self.choose_file)
        self._button(panel, "Загрузить", self.import_figure)
        self._button(panel, "Сохранить", self.export_figure)
        self._button(panel, "Нарисовать", self.draw)

        self.move_inputs = self._triple(panel, "Перенос", ("dx", "dy", "dz"), "0")
        self._button(panel, "Перенести", self.translate_model)
        self.scale_inputs = self._triple(panel, "Масштаб", ("kx", "ky", "kz"), "1")
        self._button(panel, "Масштабировать", self.scale_model)
        self.rotate_inputs = self._triple(panel, "Поворот", ("x", "y", "z"), "0")
        self._button(panel, "Повернуть", self.rotate_model)

    def _button(self, parent: Any, text: str, command: Callable[[], None]) -> None:
        import tkinter as tk

        tk.Button(parent, text=text, command=command).pack(fill=tk.X, pady=2)

    def _triple(
        self, parent: Any, title: str, labels: Sequence[str], default: str
    ) -> list[Any]:
        import tkinter as tk

        tk.Label(parent, text=title).pack(anchor=tk.W, pady=(8, 0))
        row = tk.Frame(parent)
        row.pack(fill=tk.X)
        entries = []
        for label in labels:
            tk.Label(row, text=label).pack(side=tk.LEFT)
            entry = tk.Entry(row, width=6)
            entry.insert(0, default)
            entry.pack(side=tk.LEFT, padx=2)
            entries.append(entry)
        return entries

    def _send(self, request: Request) -> bool:
        try:
            self.manager.handle(request)
        except FigureError as error:
            self.show_error(error)
            return False
        return True

    def _read(self, entries: Sequence[Any], complaint: str) -> Optional[tuple[float, float, float]]:
        try:
            return parse_triple([entry.get() for entry in entries])
        except ValueError:
            self._messagebox.showwarning(ERROR_TITLE, complaint)
            return None

    def draw(self) -> None:
        """Redraw the figure to fill the drawing area."""
        self.canvas.update_idletasks()
        width = self.canvas.winfo_width()
        height = self.canvas.winfo_height()
        self._send(Request(Action.DRAW, scene=self.scene, width=width, height=height))

    def import_figure(self) -> None:
        """Load the figure from the file named in the file field."""
        self._send(Request(Action.IMPORT, filename=self.file_input.get()))

    def export_figure(self) -> None:
        """Save the figure to the file named in the file field."""
        self._send(Request(Action.EXPORT, filename=self.file_input.get()))

    def choose_file(self) -> None:
        """Let the user pick a model file and put its name in the file field."""
        filename = self._filedialog.askopenfilename(parent=self.root, title="Выберите файл")
        if filename:
            self.file_input.delete(0, "end")
            self.file_input.insert(0, filename)

    def translate_model(self) -> None:
        """Move the figure by the offsets entered, then redraw it."""
        values = self._read(self.move_inputs, BAD_MOVE_INPUT)
        if values is not None and self._send(Request(Action.MOVE, move=MoveData(*values))):
            self.draw()

    def scale_model(self) -> None:
        """Scale the figure by the factors entered, then redraw it."""
        values = self._read(self.scale_inputs, BAD_SCALE_INPUT)
        if values is not None and self._send(Request(Action.SCALE, scale=ScaleData(*values))):
            self.draw()

    def rotate_model(self) -> None:
        """Rotate the figure by the angles entered, then redraw it."""
        values = self._read(self.rotate_inputs, BAD_ROTATE_INPUT)
        if values is not None and self._send(
            Request(Action.ROTATE, rotate=RotateData(*values))
        ):
            self.draw()

    def show_error(self, error: BaseException) -> None:
        """Tell the user what went wrong."""
        self._messagebox.showwarning(ERROR_TITLE, error_message(error), parent=self.root)

    def close(self) -> None:
        """Release the figure and close the window."""
        self.manager.handle(Request(Action.QUIT))
        self.root.destroy()

    def run(self) -> None:
        """Run the window's event loop until it is closed."""
        self.root.mainloop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the main window and run until it is closed."""
    try:
        window = MainWindow()
        window.run()
    except Exception as error:  # noqa: BLE001
        print(error, file=sys.stderr)
        try:
            from tkinter import messagebox

            messagebox.showerror(FATAL_TITLE, str(error))
        except Exception:  # noqa: BLE001
            pass
        return MEMORY_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())