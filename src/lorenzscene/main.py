"""
Application Initialization
==========================
This module constructs the application objects and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Simulation Context (Model).
2. Instantiates the Main Window (View), which wires the frame loop.
3. Starts the animation once the window is shown.
"""
import sys

from PySide6.QtWidgets import QApplication

from lorenzscene import config
from lorenzscene.logging_config import setup_logging
from lorenzscene.model.state import SimulationContext
from lorenzscene.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (Console)
    setup_logging(level=config.LOG_LEVEL)

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(config.WINDOW_TITLE)

    # 3. Initialize the Data Model
    context = SimulationContext()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(context)
    window.show()
    window.start()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
