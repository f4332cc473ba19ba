import numpy as np
import taichi as ti

from doomfire.palettes import PALETTE_DOOM

# Colouring is cheap; keep it on the CPU backend
ti.init(arch=ti.cpu)

palette_array = np.array(PALETTE_DOOM, dtype=np.uint8)


@ti.kernel
def colorize(
    fire: ti.types.ndarray(dtype=ti.u8, ndim=1),
    palette: ti.types.ndarray(dtype=ti.u8, ndim=2),
    image: ti.types.ndarray(dtype=ti.u8, ndim=3),
    columns: int,
    rows: int,
):
    for row, col in ti.ndrange(rows, columns):
        intensity = ti.cast(fire[col + columns * row], ti.i32)
        for c in ti.static(range(3)):
            image[row, col, c] = palette[intensity, c]


def render_image(grid):
    """Return a ``(rows, columns, 3)`` uint8 image, one pixel per cell."""
    grid.check_invariants()
    columns, rows = grid.dimensions()
    image = np.zeros((rows, columns, 3), dtype=np.uint8)
    colorize(np.ascontiguousarray(grid.fire), palette_array, image, columns, rows)
    return image
