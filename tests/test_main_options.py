import logging
import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from epicycles import __version__
from epicycles.application import APP_ID, ORG_ID, VISIBLE_APP_NAME, create_app
from epicycles.main import build_parser, parse_options
from epicycles.model.parameters import SeriesParameters, ViewMode
from epicycles.model.series import FunctionFamily

app = QApplication.instance() or QApplication([])


def parse(*args):
    parser = build_parser()
    assert parser.parse(["epicycles", *args]), parser.errorText()
    return parse_options(parser)


class LaunchOptionsTest(unittest.TestCase):
    def test_every_option_is_registered(self):
        help_text = build_parser().helpText()
        for name in ("--order", "--family", "--speed", "--view", "--log-level", "--log-file", "-n", "-f", "-s"):
            self.assertIn(name, help_text)

    def test_defaults(self):
        options = parse()
        self.assertEqual(options.params, SeriesParameters())
        self.assertEqual(options.mode, ViewMode.EPICYCLES)
        self.assertEqual(options.log_level, logging.INFO)
        self.assertIsNone(options.log_file)
        self.assertEqual(options.warnings, [])

    def test_values(self):
        options = parse("--order", "12", "--family", "triangular", "--speed", "2.5", "--view", "decomposition")
        self.assertEqual(options.params, SeriesParameters(order=12, family=FunctionFamily.TRIANGULAR, speed=2.5))
        self.assertEqual(options.mode, ViewMode.DECOMPOSITION)

    def test_short_names(self):
        options = parse("-n", "4", "-f", "sawtooth", "-s", "0.5")
        self.assertEqual(options.params, SeriesParameters(order=4, family=FunctionFamily.SAWTOOTH, speed=0.5))

    def test_out_of_range_is_clamped(self):
        options = parse("--order", "50", "--speed", "12")
        self.assertEqual(options.params.order, 30)
        self.assertEqual(options.params.speed, 5.0)
        self.assertEqual(options.warnings, [])

    def test_invalid_values_fall_back(self):
        options = parse("--order", "many", "--speed", "fast", "--family", "circle", "--view", "3d")
        self.assertEqual(options.params, SeriesParameters())
        self.assertEqual(options.mode, ViewMode.EPICYCLES)
        self.assertEqual(len(options.warnings), 4)

    def test_logging_options(self):
        options = parse("--log-level", "debug", "--log-file", "run.log")
        self.assertEqual(options.log_level, logging.DEBUG)
        self.assertEqual(options.log_file, "run.log")


class CreateAppTest(unittest.TestCase):
    def test_reuses_running_instance(self):
        self.assertIs(create_app(), app)
        self.assertEqual(app.applicationVersion(), __version__)
        self.assertEqual(app.applicationDisplayName(), VISIBLE_APP_NAME)
        self.assertEqual(app.applicationName(), APP_ID)
        self.assertEqual(app.organizationName(), ORG_ID)


if __name__ == "__main__":
    unittest.main()
