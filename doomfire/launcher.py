import os
import subprocess
import sys

from PySide6.QtWidgets import (QApplication, QHBoxLayout, QLabel, QPushButton,
                               QSpinBox, QVBoxLayout, QWidget)

from doomfire.constants import FIRE_CELL_SIZE, FIRE_HEIGHT, FIRE_WIDTH


def launch_env(width, height, cell_size, base=None):
    """Environment for a fire window process with the chosen geometry."""
    env = dict(os.environ if base is None else base)
    env["FIRE_WIDTH"] = str(width)
    env["FIRE_HEIGHT"] = str(height)
    env["FIRE_CELL_SIZE"] = str(cell_size)
    return env


class Launcher(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("DoomFire Launcher")
        layout = QVBoxLayout()

        self.width_input = QSpinBox()
        self.width_input.setRange(1, 8192)
        self.width_input.setValue(FIRE_WIDTH)
        self.width_input.setSingleStep(10)

        self.height_input = QSpinBox()
        self.height_input.setRange(1, 8192)
        self.height_input.setValue(FIRE_HEIGHT)
        self.height_input.setSingleStep(10)

        self.cell_input = QSpinBox()
        self.cell_input.setRange(1, 8192)
        self.cell_input.setValue(FIRE_CELL_SIZE)

        for text, widget in (
            ("Width:", self.width_input),
            ("Height:", self.height_input),
            ("Cell size:", self.cell_input),
        ):
            row = QHBoxLayout()
            row.addWidget(QLabel(text))
            row.addWidget(widget)
            layout.addLayout(row)
        # Cell size may not exceed the smaller window side
        self.width_input.valueChanged.connect(self.clamp_cell_size)
        self.height_input.valueChanged.connect(self.clamp_cell_size)
        self.clamp_cell_size()

        self.launch_btn = QPushButton("Launch")
        self.launch_btn.clicked.connect(self.launch)
        layout.addWidget(self.launch_btn)

        self.setLayout(layout)

    def clamp_cell_size(self):
        self.cell_input.setMaximum(min(self.width_input.value(), self.height_input.value()))

    def launch(self):
        env = launch_env(
            self.width_input.value(), self.height_input.value(), self.cell_input.value()
        )
        subprocess.Popen([sys.executable, "-m", "doomfire.doomfiregui"], env=env)
        self.close()


def main():
    app = QApplication(sys.argv)
    launcher = Launcher()
    launcher.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
