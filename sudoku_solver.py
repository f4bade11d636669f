# sudoku_solver.py
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union
import numpy as np
from rich.console import Console
from candidate_grid import BOX, SIZE, CandidateGrid, Cell, CellLike, as_cell


class SearchLimitExceeded(RuntimeError):
    """La búsqueda superó ``max_nodes`` y fue abandonada."""


@dataclass
class SudokuSolver:
    """Resuelve un tablero de Sudoku por eliminación de candidatos y backtracking.

    Parámetros
    ----------
    grid: CandidateGrid | List[List[int]]
        Tablero de candidatos, o tablero 9x9 con ceros en las casillas vacías.
    verbose: bool, opcional
        Si es ``True`` se muestran mensajes del proceso.
    max_nodes: int, opcional
        Límite de nodos de búsqueda; al superarlo se lanza ``SearchLimitExceeded``.
    """
    grid: Union[CandidateGrid, Sequence[Sequence[int]], np.ndarray]
    verbose: bool = False
    max_nodes: Optional[int] = None
    nodes: int = field(default=0, init=False)
    duration_ms: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.grid, CandidateGrid):
            self.grid = CandidateGrid.from_rows(self.grid)
        if self.max_nodes is not None and self.max_nodes < 1:
            raise ValueError("max_nodes debe ser positivo.")
        self.console = Console()

    # --------------------------
    # API pública
    # --------------------------
    def solve(self) -> Optional[CandidateGrid]:
        """Devuelve un tablero resuelto nuevo, o ``None`` si el Sudoku no tiene solución.

        El tablero original no se modifica. ``nodes`` y ``duration_ms`` quedan
        con las estadísticas de esta llamada.
        """
        self.nodes = 0
        start = time.perf_counter()
        try:
            board = self.grid.copy()
            result = self._try_from(board) if self._propagate_givens(board) else None
        finally:
            self.duration_ms = (time.perf_counter() - start) * 1000.0

        if result is None:
            self._log("Sudoku sin solución")
        else:
            self._log(f"Resuelto en {self.duration_ms:.2f} ms ({self.nodes} nodos)")
        return result

    @staticmethod
    def get_next_cell(grid: CandidateGrid) -> Optional[Cell]:
        """Celda no determinada con menos candidatos (heurística MRV).

        Los empates se resuelven por orden de filas: gana la primera celda
        encontrada. Devuelve ``None`` si todas las celdas tienen un único
        candidato.
        """
        counts = grid.counts()
        if (counts == 1).all():
            return None
        if (counts == 0).any():
            raise ValueError("El tablero contiene una celda sin candidatos.")
        # las celdas determinadas quedan fuera con un tamaño imposible
        idx = int(np.argmin(np.where(counts > 1, counts, counts.max() + 1)))
        return Cell(*divmod(idx, SIZE))

    @staticmethod
    def remove_candidate(grid: CandidateGrid, cell: CellLike, value: int) -> bool:
        """Elimina ``value`` de los pares de ``cell`` (fila, columna y bloque).

        Devuelve ``False`` si alguna celda par se queda sin candidatos; el resto
        del tablero no se revisa.
        """
        cell = as_cell(cell)
        cand = grid.candidates
        d = value - 1
        own = cand[cell.row, cell.col].copy()
        br, bc = cell.box_origin
        cand[cell.row, :, d] = False
        cand[:, cell.col, d] = False
        cand[br:br + BOX, bc:bc + BOX, d] = False
        cand[cell.row, cell.col] = own
        return bool(
            cand[cell.row].any(axis=1).all()
            and cand[:, cell.col].any(axis=1).all()
            and cand[br:br + BOX, bc:bc + BOX].any(axis=2).all()
        )

    # --------------------------
    # Métodos internos
    # --------------------------
    def _propagate_givens(self, board: CandidateGrid) -> bool:
        """Aplica la eliminación desde cada dato inicial antes de buscar."""
        if (board.counts() == 0).any():
            self._log("Contradicción: celda sin candidatos en el tablero inicial")
            return False
        givens: List[Cell] = [cell for cell in board.cells() if board.is_determined(cell)]
        for cell in givens:
            if not self.remove_candidate(board, cell, board.value_at(cell)):
                self._log(f"Contradicción en los datos iniciales ({cell.row},{cell.col})")
                return False
        return not board.has_unit_conflict()

    def _try_from(self, board: CandidateGrid) -> Optional[CandidateGrid]:
        self.nodes += 1
        if self.max_nodes is not None and self.nodes > self.max_nodes:
            raise SearchLimitExceeded(f"Se superó el límite de {self.max_nodes} nodos.")

        cell = self.get_next_cell(board)
        if cell is None:
            return board  # todas las celdas determinadas
        for value in sorted(board[cell]):
            self._log(f"Probando {value} en ({cell.row},{cell.col})")
            nxt = board.copy()
            nxt.assign(cell, value)
            if not self.remove_candidate(nxt, cell, value) or nxt.has_unit_conflict():
                continue  # poda: contradicción
            solved = self._try_from(nxt)
            if solved is not None:
                return solved
        self._log(f"Retrocediendo en ({cell.row},{cell.col})")
        return None

    def _log(self, msg: str) -> None:
        if self.verbose:
            self.console.print(msg, style="bold cyan")
