# -*- coding: utf-8 -*-
"""candidate_grid

Modelo de datos del solucionador: coordenadas de celda y tablero de
candidatos 9x9. Cada celda guarda el conjunto de dígitos (1..9) que aún son
posibles en ella; internamente se usa un arreglo booleano de numpy con forma
(9, 9, 9) indexado como ``[fila, columna, dígito - 1]``.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterator, Optional, Sequence, Tuple, Union
import numpy as np

SIZE = 9
BOX = 3
DIGITS = tuple(range(1, SIZE + 1))


class GridFormatError(ValueError):
    """Entrada mal formada al construir un tablero."""


@dataclass(frozen=True)
class Cell:
    """Coordenada (fila, columna) inmutable, ambas en [0, 9)."""
    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < SIZE and 0 <= self.col < SIZE):
            raise ValueError(f"Celda fuera del tablero: ({self.row},{self.col})")

    @property
    def index(self) -> int:
        return self.row * SIZE + self.col

    @property
    def box_origin(self) -> Tuple[int, int]:
        """Esquina superior izquierda del bloque 3x3 que contiene la celda."""
        return BOX * (self.row // BOX), BOX * (self.col // BOX)


CellLike = Union[Cell, Tuple[int, int]]


def as_cell(cell: CellLike) -> Cell:
    return cell if isinstance(cell, Cell) else Cell(*cell)


class CandidateGrid:
    """Tablero de candidatos con semántica de valor (``copy`` es independiente)."""

    __hash__ = None  # mutable

    def __init__(self, candidates: Optional[np.ndarray] = None):
        if candidates is None:
            candidates = np.ones((SIZE, SIZE, SIZE), dtype=bool)
        else:
            candidates = np.array(candidates, dtype=bool)
            if candidates.shape != (SIZE, SIZE, SIZE):
                raise ValueError(f"Se esperaba un arreglo (9, 9, 9), no {candidates.shape}.")
        self.candidates = candidates

    # --------------------------
    # Construcción
    # --------------------------
    @classmethod
    def from_rows(cls, rows: Union[Sequence[Sequence[int]], np.ndarray]) -> "CandidateGrid":
        """Construye el tablero a partir de 9x9 enteros con ``0`` en las casillas vacías."""
        try:
            raw = np.asarray(rows)
        except (TypeError, ValueError) as exc:
            raise GridFormatError("El tablero debe ser 9x9 de enteros.") from exc
        if raw.shape != (SIZE, SIZE):
            raise GridFormatError("El tablero debe ser 9x9.")
        if raw.dtype.kind not in "iuf":
            raise GridFormatError("El tablero debe ser 9x9 de enteros.")
        arr = raw.astype(int)
        # 5.0 se acepta, 1.5 no
        if (arr != raw).any():
            raise GridFormatError("El tablero debe ser 9x9 de enteros.")
        if ((arr < 0) | (arr > SIZE)).any():
            raise GridFormatError("Los valores deben estar entre 0 y 9.")

        grid = cls()
        for r, c in zip(*np.nonzero(arr)):
            grid.assign(Cell(int(r), int(c)), int(arr[r, c]))
        return grid

    def copy(self) -> "CandidateGrid":
        return CandidateGrid(self.candidates.copy())

    # --------------------------
    # Consultas
    # --------------------------
    def __getitem__(self, cell: CellLike) -> FrozenSet[int]:
        cell = as_cell(cell)
        return frozenset(int(d) + 1 for d in np.flatnonzero(self.candidates[cell.row, cell.col]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateGrid):
            return NotImplemented
        return bool(np.array_equal(self.candidates, other.candidates))

    def __repr__(self) -> str:
        determined = int((self.counts() == 1).sum())
        return f"CandidateGrid(determinadas={determined}/81)"

    @staticmethod
    def cells() -> Iterator[Cell]:
        """Recorre las 81 celdas en orden por filas."""
        for r in range(SIZE):
            for c in range(SIZE):
                yield Cell(r, c)

    def counts(self) -> np.ndarray:
        """Número de candidatos por celda (9x9)."""
        return self.candidates.sum(axis=2)

    def is_determined(self, cell: CellLike) -> bool:
        cell = as_cell(cell)
        return int(self.candidates[cell.row, cell.col].sum()) == 1

    def is_solved(self) -> bool:
        return bool((self.counts() == 1).all())

    def value_at(self, cell: CellLike) -> Optional[int]:
        """Dígito de una celda determinada, o ``None`` si aún tiene varias opciones."""
        cell = as_cell(cell)
        opts = np.flatnonzero(self.candidates[cell.row, cell.col])
        return int(opts[0]) + 1 if len(opts) == 1 else None

    def to_array(self) -> np.ndarray:
        """Matriz 9x9 con el dígito de cada celda determinada y ``0`` en el resto."""
        values = np.argmax(self.candidates, axis=2) + 1
        return np.where(self.counts() == 1, values, 0)

    def has_unit_conflict(self) -> bool:
        """``True`` si dos celdas determinadas de una misma fila, columna o bloque comparten dígito."""
        singles = self.candidates & (self.counts() == 1)[:, :, None]
        rows = singles.sum(axis=1)
        cols = singles.sum(axis=0)
        boxes = singles.reshape(BOX, BOX, BOX, BOX, SIZE).sum(axis=(1, 3))
        return bool((rows > 1).any() or (cols > 1).any() or (boxes > 1).any())

    def is_valid_solution(self) -> bool:
        """Comprueba que el tablero esté resuelto y cada unidad contenga 1..9 una sola vez."""
        if not self.is_solved():
            return False
        values = self.to_array()
        expected = np.arange(1, SIZE + 1)
        boxes = values.reshape(BOX, BOX, BOX, BOX).transpose(0, 2, 1, 3).reshape(SIZE, SIZE)
        return all(
            (np.sort(units, axis=1) == expected).all()
            for units in (values, values.T, boxes)
        )

    # --------------------------
    # Mutación
    # --------------------------
    def assign(self, cell: CellLike, value: int) -> None:
        """Reduce los candidatos de ``cell`` al conjunto unitario ``{value}``."""
        if value not in DIGITS:
            raise ValueError(f"Dígito inválido: {value}")
        cell = as_cell(cell)
        self.candidates[cell.row, cell.col] = False
        self.candidates[cell.row, cell.col, value - 1] = True
