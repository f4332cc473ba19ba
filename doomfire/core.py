import logging

import numpy as np

from doomfire.exceptions import ConfigurationError, InvariantViolation
from doomfire.palettes import MAX_INTENSITY, color_of

logger = logging.getLogger(__name__)

# Decay draws are uniform over {0, 1, 2}
DECAY_CHOICES = 3


def grid_dimensions(width: int, height: int, cell_size: int):
    """Return ``(columns, rows)`` for a viewport, one spare cell per axis."""
    for name, value in (("width", width), ("height", height), ("cell_size", cell_size)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise ConfigurationError(f"{name} must be positive, got {value}")
    return width // cell_size + 1, height // cell_size + 1


class RandomDecay:
    """Default decay source: a uniform draw from ``{0, 1, 2}`` per call."""

    def __init__(self, seed=None):
        self.rng = np.random.default_rng(seed)

    def __call__(self) -> int:
        return int(self.rng.integers(0, DECAY_CHOICES))


class FireGrid:
    """Doom fire simulation state.

    Intensities live in a flat row-major ``uint8`` buffer; cell ``(col, row)``
    is at ``col + columns * row``. The last row is the fire source.

    ``decay_source`` is any zero-argument callable returning 0, 1 or 2. Tests
    pass a constant or scripted source to make ``step()`` deterministic.
    """

    def __init__(self, width: int, height: int, cell_size: int, decay_source=None):
        self.decay_source = decay_source if decay_source is not None else RandomDecay()
        self.width = 0
        self.height = 0
        self.cell_size = 0
        self.columns = 0
        self.rows = 0
        self.fire = np.zeros(0, dtype=np.uint8)
        self.resize(width, height, cell_size)

    # Grid

    def resize(self, width: int, height: int, cell_size: int):
        """Reallocate a zeroed buffer for the new viewport. Does not seed."""
        columns, rows = grid_dimensions(width, height, cell_size)
        self.width, self.height, self.cell_size = width, height, cell_size
        self.columns, self.rows = columns, rows
        self.fire = np.zeros(columns * rows, dtype=np.uint8)

    def dimensions(self):
        return self.columns, self.rows

    def _index(self, col: int, row: int) -> int:
        if not (0 <= col < self.columns and 0 <= row < self.rows):
            raise IndexError(
                f"cell ({col}, {row}) outside {self.columns}x{self.rows} grid"
            )
        return col + self.columns * row

    def intensity_at(self, col: int, row: int) -> int:
        return int(self.fire[self._index(col, row)])

    def color_at(self, col: int, row: int):
        return color_of(self.intensity_at(col, row))

    def cells(self):
        """Yield ``(col, row, intensity)`` in row-major order."""
        columns = self.columns
        for index, intensity in enumerate(self.fire.tolist()):
            yield index % columns, index // columns, intensity

    def check_invariants(self):
        if self.fire.shape != (self.columns * self.rows,):
            raise InvariantViolation(
                f"buffer length {self.fire.shape[0]} does not match "
                f"{self.columns}x{self.rows} grid"
            )
        if self.fire.size and int(self.fire.max()) > MAX_INTENSITY:
            hottest = int(self.fire.max())
            raise InvariantViolation(
                f"intensity {hottest} above {MAX_INTENSITY}", value=hottest
            )

    # Seeder

    def seed(self):
        """Zero the grid and set the whole bottom row to MAX_INTENSITY."""
        self.fire.fill(0)
        self.fire[self.columns * (self.rows - 1):] = MAX_INTENSITY

    # Propagator

    def step(self):
        """Advance the fire by one frame, in place.

        Each cell takes the intensity of the cell below it minus a random
        decay, written up to ``decay`` cells to the left (wind). Cells are
        visited in row-major order on the live buffer: when several cells
        drift onto one target the last write wins, and a cell nobody writes
        keeps its previous value.
        """
        fire = self.fire
        columns = self.columns
        draw = self.decay_source
        # Last row has nothing below it and is never written
        for index in range(fire.shape[0] - columns):
            decay = draw()
            if decay not in (0, 1, 2):
                raise InvariantViolation(
                    f"decay source returned {decay!r}, expected 0, 1 or 2", value=decay
                )
            new_intensity = max(0, int(fire[index + columns]) - decay)
            wind_index = index - decay if index - decay >= 0 else index
            fire[wind_index] = new_intensity

    # Host helpers

    def rebuild(self, width: int, height: int, cell_size: int):
        """Resize, reseed and run one step, as a window resize does."""
        self.resize(width, height, cell_size)
        self.seed()
        self.step()
        logger.debug(
            "Rebuilt fire grid %dx%d cells (%dx%d px, cell %d)",
            self.columns, self.rows, width, height, cell_size,
        )

    def change_cell_size(self, delta: int) -> bool:
        """Grow or shrink the cell size, keeping it in ``[1, min(width, height)]``.

        Returns ``False`` without touching the grid when the change would
        leave that range.
        """
        new_size = self.cell_size + delta
        if delta == 0 or not 1 <= new_size <= min(self.width, self.height):
            return False
        self.rebuild(self.width, self.height, new_size)
        logger.debug("Cell size changed to %d", new_size)
        return True
