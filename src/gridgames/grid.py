"""
Grid Games - Grid Primitives
Bounds-checked 2-D addressing and neighbourhood enumeration shared by all engines
"""

from typing import Callable, Generic, Iterator, List, Tuple, TypeVar

from .errors import BoundsError


T = TypeVar('T')
Position = Tuple[int, int]

# (dr, dc) offsets for each connectivity
ORTHOGONAL = ((-1, 0), (0, -1), (0, 1), (1, 0))
COMPASS = ((-1, -1), (-1, 0), (-1, 1),
           (0, -1), (0, 1),
           (1, -1), (1, 0), (1, 1))


class Grid(Generic[T]):
    """Rectangular row-major array of cells, fixed in size at creation"""

    def __init__(self, rows: int, cols: int, factory: Callable[[int, int], T]):
        self.rows = rows
        self.cols = cols
        self._cells: List[List[T]] = [
            [factory(row, col) for col in range(cols)]
            for row in range(rows)
        ]

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if a position lies on the grid"""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_bounds(self, row: int, col: int):
        """Raise BoundsError if a position lies off the grid"""
        if not self.in_bounds(row, col):
            raise BoundsError(row, col, self.rows, self.cols)

    def cell(self, row: int, col: int) -> T:
        """Get cell at specified position"""
        self.check_bounds(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, value: T):
        """Replace the cell at a position (for grids of plain values)"""
        self.check_bounds(row, col)
        self._cells[row][col] = value

    def __getitem__(self, position: Position) -> T:
        row, col = position
        return self.cell(row, col)

    def __len__(self) -> int:
        return self.rows * self.cols

    def positions(self) -> Iterator[Position]:
        """All positions in row-major order"""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def cells(self) -> Iterator[T]:
        """All cells in row-major order"""
        for board_row in self._cells:
            yield from board_row

    def row_cells(self, row: int) -> List[T]:
        """Cells of one row, left to right"""
        self.check_bounds(row, 0)
        return list(self._cells[row])

    def neighbors(self, row: int, col: int, connectivity: int = 8) -> Iterator[Position]:
        """
        Lazily enumerate on-grid neighbours of a position, excluding the origin

        Args:
            row: Row coordinate (0-indexed)
            col: Column coordinate (0-indexed)
            connectivity: 4 for orthogonal neighbours, 8 to include diagonals
        """
        self.check_bounds(row, col)
        if connectivity == 8:
            offsets = COMPASS
        elif connectivity == 4:
            offsets = ORTHOGONAL
        else:
            raise ValueError(f"Unknown connectivity: {connectivity}. Use 4 or 8.")

        for dr, dc in offsets:
            nr, nc = row + dr, col + dc
            if self.in_bounds(nr, nc):
                yield nr, nc

    def row_positions(self, row: int) -> List[Position]:
        self.check_bounds(row, 0)
        return [(row, col) for col in range(self.cols)]

    def column_positions(self, col: int) -> List[Position]:
        self.check_bounds(0, col)
        return [(row, col) for row in range(self.rows)]

    def box_positions(self, row: int, col: int, box_size: int = 3) -> List[Position]:
        """Positions of the box_size x box_size block containing (row, col)"""
        self.check_bounds(row, col)
        start_row = (row // box_size) * box_size
        start_col = (col // box_size) * box_size
        return [(r, c)
                for r in range(start_row, min(start_row + box_size, self.rows))
                for c in range(start_col, min(start_col + box_size, self.cols))]

    def peer_positions(self, row: int, col: int, box_size: int = 3) -> List[Position]:
        """Row, column and box positions sharing a constraint with (row, col), origin excluded"""
        peers = set(self.row_positions(row))
        peers.update(self.column_positions(col))
        peers.update(self.box_positions(row, col, box_size))
        peers.discard((row, col))
        return sorted(peers)

    def diagonal_positions(self) -> List[Position]:
        """Top-left to bottom-right diagonal of a square grid"""
        return [(i, i) for i in range(min(self.rows, self.cols))]

    def anti_diagonal_positions(self) -> List[Position]:
        """Top-right to bottom-left diagonal of a square grid"""
        n = min(self.rows, self.cols)
        return [(i, n - 1 - i) for i in range(n)]

    def lines(self) -> Iterator[List[Position]]:
        """Every full row, column and both diagonals"""
        for row in range(self.rows):
            yield self.row_positions(row)
        for col in range(self.cols):
            yield self.column_positions(col)
        if self.rows == self.cols:
            yield self.diagonal_positions()
            yield self.anti_diagonal_positions()
