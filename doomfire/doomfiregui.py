import logging
import sys

from PySide6.QtCore import QRect, QTimer, Qt
from PySide6.QtGui import QColor, QImage, QKeyEvent, QPainter, QPixmap, QResizeEvent
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow

from doomfire.constants import (FIRE_CELL_SIZE, FIRE_HEIGHT, FIRE_SEED,
                                FIRE_TICK_MS, FIRE_WIDTH)
from doomfire.core import FireGrid, RandomDecay
from doomfire.palettes import inverse_color
from doomfire.render import render_image

logger = logging.getLogger(__name__)


class FireWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("DoomFire (PySide6)")
        self.label = QLabel(self)
        self.label.setMinimumSize(1, 1)
        self.label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setCentralWidget(self.label)
        self.grid = FireGrid(
            FIRE_WIDTH, FIRE_HEIGHT, FIRE_CELL_SIZE, decay_source=RandomDecay(FIRE_SEED)
        )
        self.grid.seed()
        self.debug = False
        self.resize(FIRE_WIDTH, FIRE_HEIGHT)
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.update_frame)
        self.timer.start(FIRE_TICK_MS)

    def update_frame(self):
        self.grid.step()
        self.repaint_fire()

    def repaint_fire(self):
        grid = self.grid
        columns, rows = grid.dimensions()
        cell = grid.cell_size
        np_img = render_image(grid)
        bytes_per_line = 3 * columns
        qimg = QImage(np_img.data, columns, rows, bytes_per_line, QImage.Format.Format_RGB888)
        # One image pixel per cell, blown up to cell_size squares
        cells = qimg.scaled(
            columns * cell,
            rows * cell,
            Qt.AspectRatioMode.IgnoreAspectRatio,
            Qt.TransformationMode.FastTransformation,
        )

        pixmap = QPixmap(max(1, grid.width), max(1, grid.height))
        pixmap.fill(Qt.GlobalColor.black)
        painter = QPainter(pixmap)
        painter.drawImage(0, 0, cells)
        if self.debug:
            self.draw_debug_overlay(painter)
        painter.end()
        self.label.setPixmap(pixmap)

    def draw_debug_overlay(self, painter: QPainter):
        cell = self.grid.cell_size
        font = painter.font()
        font.setPixelSize(max(1, int(cell * 0.7)))
        painter.setFont(font)
        for col, row, intensity in self.grid.cells():
            rect = QRect(col * cell, row * cell, cell, cell)
            painter.setPen(QColor(*inverse_color(self.grid.color_at(col, row))))
            painter.drawRect(rect)
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, str(intensity))

    def resizeEvent(self, event: QResizeEvent):
        super().resizeEvent(event)
        size = self.label.size()
        if size.width() > 0 and size.height() > 0:
            cell = min(self.grid.cell_size, size.width(), size.height())
            self.grid.rebuild(size.width(), size.height(), cell)
            self.repaint_fire()

    def keyPressEvent(self, event: QKeyEvent):
        key = event.key()
        if key == Qt.Key.Key_D:
            self.debug = not self.debug
            logger.info("Debug overlay %s", "on" if self.debug else "off")
            self.repaint_fire()
        elif key == Qt.Key.Key_Up:
            if self.grid.change_cell_size(1):
                logger.info("Cell size %d", self.grid.cell_size)
                self.repaint_fire()
        elif key == Qt.Key.Key_Down:
            if self.grid.change_cell_size(-1):
                logger.info("Cell size %d", self.grid.cell_size)
                self.repaint_fire()
        elif key == Qt.Key.Key_R:
            self.grid.seed()
            logger.info("Reseeded fire")
            self.repaint_fire()
        else:
            super().keyPressEvent(event)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    app = QApplication(sys.argv)
    win = FireWindow()
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
