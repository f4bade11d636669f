# -*- coding: utf-8 -*-
"""grid_io

Lectura y escritura del formato de texto plano del tablero: 81 símbolos en
orden por filas (opcionalmente separados por espacios o saltos de línea),
dígitos 1-9 para los datos iniciales y ``-``, ``.`` o ``0`` para las casillas
vacías.
"""

from typing import Union
import os
from candidate_grid import CandidateGrid, Cell, GridFormatError, SIZE

PLACEHOLDERS = frozenset("-.0")
PLACEHOLDER = "-"

PathLike = Union[str, os.PathLike]


def parse_grid(text: str) -> CandidateGrid:
    """Construye un ``CandidateGrid`` a partir del texto; lanza ``GridFormatError`` si está mal formado."""
    tokens = "".join(text.split())
    if len(tokens) != SIZE * SIZE:
        raise GridFormatError(f"Se esperaban 81 símbolos, se encontraron {len(tokens)}.")

    grid = CandidateGrid()
    for pos, tok in enumerate(tokens):
        if tok in PLACEHOLDERS:
            continue
        if not ("1" <= tok <= "9"):
            raise GridFormatError(f"Símbolo inválido {tok!r} en la posición {pos}.")
        grid.assign(Cell(*divmod(pos, SIZE)), int(tok))
    return grid


def read_grid(path: PathLike) -> CandidateGrid:
    # los errores de apertura (OSError) se propagan tal cual
    with open(path, encoding="utf-8") as fh:
        return parse_grid(fh.read())


def render_grid(grid: CandidateGrid, placeholder: str = PLACEHOLDER) -> str:
    """9 líneas de 9 caracteres: dígito si la celda está determinada, ``placeholder`` si no."""
    if len(placeholder) != 1 or placeholder.isdigit():
        raise ValueError("El marcador debe ser un único carácter no numérico.")
    values = grid.to_array()
    return "\n".join(
        "".join(str(v) if v else placeholder for v in row)
        for row in values
    )


def write_grid(grid: CandidateGrid, path: PathLike, placeholder: str = PLACEHOLDER) -> None:
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(render_grid(grid, placeholder) + "\n")
