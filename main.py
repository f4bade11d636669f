# -*- coding: utf-8 -*-
"""main

Punto de entrada de línea de comandos para resolver Sudokus 9x9:
  1) Lectura del tablero desde un archivo de texto (81 símbolos)
  2) Impresión del tablero inicial
  3) Resolución con eliminación de candidatos + backtracking (SudokuSolver)
  4) Impresión del resultado y del tiempo empleado

Uso:
    python main.py puzzles/easy.txt [otro.txt ...] [--verbose] [--max-nodes N]

El código de salida es 0 si todos los tableros se resolvieron y 1 si alguno
no tiene solución. Los errores de entrada abortan la ejecución con código 2.
"""

import argparse
from typing import List, Optional
from rich import print
from tqdm import tqdm
from candidate_grid import CandidateGrid, GridFormatError
from grid_io import read_grid, render_grid
from sudoku_solver import SearchLimitExceeded, SudokuSolver

VERBOSE = False
PLACEHOLDER = "-"


def solve_file(path: str, verbose: bool = VERBOSE, max_nodes: Optional[int] = None) -> Optional[CandidateGrid]:
    """Lee, muestra y resuelve un tablero; devuelve la solución o ``None``."""
    grid = read_grid(path)
    print(render_grid(grid, PLACEHOLDER))
    print(f"\nIntentando resolver {path} ...")

    solver = SudokuSolver(grid, verbose=verbose, max_nodes=max_nodes)
    solved = solver.solve()
    if solved is None:
        print(f"No se pudo resolver {path} ({solver.nodes} nodos).")
        return None

    print(f"Resuelto {path} en {solver.duration_ms:.2f} ms. Resultado:\n")
    print(render_grid(solved, PLACEHOLDER))
    print()
    return solved


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Resuelve Sudokus 9x9 por eliminación de candidatos y backtracking.")
    ap.add_argument("puzzles", nargs="+", help="Archivos con 81 símbolos (1-9 y '-', '.' o '0' para vacías)")
    ap.add_argument("--verbose", action="store_true", default=VERBOSE, help="Mostrar el proceso de búsqueda")
    ap.add_argument("--max-nodes", type=int, default=None, help="Abandonar la búsqueda tras N nodos")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    paths = args.puzzles
    if args.verbose and len(paths) > 1:
        paths = tqdm(paths, desc="Tableros", ncols=80, colour="blue")

    unsolved = 0
    for path in paths:
        try:
            solved = solve_file(path, verbose=args.verbose, max_nodes=args.max_nodes)
        except (OSError, GridFormatError) as exc:
            ap.error(f"{path}: {exc}")
        except SearchLimitExceeded as exc:
            print(f"Búsqueda abandonada en {path}: {exc}")
            solved = None
        if solved is None:
            unsolved += 1
    return 1 if unsolved else 0


if __name__ == "__main__":
    raise SystemExit(main())
