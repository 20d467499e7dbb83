"""
Application Initialization
==========================
This module reads the command line, configures logging and starts the Qt
event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the launch options (initial order, family, speed, view mode).
2. Sets up logging before any engine starts ticking.
3. Instantiates the Main Window with the (clamped) initial parameters.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

import pyqtgraph as pg
from PySide6.QtCore import QCommandLineOption, QCommandLineParser

from epicycles.application import create_app
from epicycles.logging_config import parse_level, setup_logging
from epicycles.model.parameters import SeriesParameters, ViewMode
from epicycles.model.series import FunctionFamily
from epicycles.view.main_window import MainWindow

logger = logging.getLogger(__name__)


@dataclass
class LaunchOptions:
    params: SeriesParameters = field(default_factory=SeriesParameters)
    mode: ViewMode = ViewMode.EPICYCLES
    log_level: int = logging.INFO
    log_file: str | None = None
    warnings: list[str] = field(default_factory=list)


def build_parser() -> QCommandLineParser:
    parser = QCommandLineParser()
    parser.setApplicationDescription("Visualização de séries de Fourier com epiciclos.")
    parser.addHelpOption()
    parser.addVersionOption()

    families = ", ".join(f.value for f in FunctionFamily if f != FunctionFamily.QUADRATIC_COSINE)
    modes = ", ".join(m.value for m in ViewMode)
    options = [
        QCommandLineOption(["n", "order"], "Number of terms (1-30).", "order", "1"),
        QCommandLineOption(["f", "family"], f"Wave family: {families}.", "family", FunctionFamily.SQUARE.value),
        QCommandLineOption(["s", "speed"], "Animation speed multiplier (0.1-5.0).", "speed", "1.0"),
        QCommandLineOption(["view"], f"Initial view: {modes}.", "mode", ViewMode.EPICYCLES.value),
        QCommandLineOption(["log-level"], "Logging level (DEBUG, INFO, WARNING, ...).", "level", "INFO"),
        QCommandLineOption(["log-file"], "Also write the log to this file.", "path"),
    ]
    for option in options:
        parser.addOption(option)
    return parser


def parse_options(parser: QCommandLineParser) -> LaunchOptions:
    """
    Convert parsed command line values into launch options.

    Invalid values never abort the launch: they fall back to the defaults and
    are collected in `warnings`.
    """
    options = LaunchOptions()
    defaults = SeriesParameters()

    try:
        order = int(parser.value("order"))
    except ValueError:
        options.warnings.append(f"Invalid order '{parser.value('order')}', using {defaults.order}.")
        order = defaults.order

    try:
        speed = float(parser.value("speed"))
    except ValueError:
        options.warnings.append(f"Invalid speed '{parser.value('speed')}', using {defaults.speed}.")
        speed = defaults.speed

    try:
        family = FunctionFamily(parser.value("family"))
    except ValueError:
        options.warnings.append(f"Unknown family '{parser.value('family')}', using {defaults.family.value}.")
        family = defaults.family

    try:
        options.mode = ViewMode(parser.value("view"))
    except ValueError:
        options.warnings.append(f"Unknown view '{parser.value('view')}', using {ViewMode.EPICYCLES.value}.")

    options.params = SeriesParameters(order=order, family=family, speed=speed).clamped()
    options.log_level = parse_level(parser.value("log-level"))
    options.log_file = parser.value("log-file") or None
    return options


def main() -> int:
    """Main entry point for the application."""
    app = create_app()

    parser = build_parser()
    parser.process(app)
    options = parse_options(parser)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=options.log_level, log_file=options.log_file)
    for warning in options.warnings:
        print(warning, file=sys.stderr)
        logger.warning(warning)

    # 2. Plot defaults for the spectrum panel
    pg.setConfigOption("background", "w")
    pg.setConfigOption("foreground", "k")

    # 3. Main Window with the initial parameters
    window = MainWindow(options.params, options.mode)
    window.show()

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
