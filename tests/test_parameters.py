import unittest

from epicycles.model.parameters import SeriesParameters, ViewMode
from epicycles.model.series import FunctionFamily


class SeriesParametersTest(unittest.TestCase):
    def test_defaults(self):
        params = SeriesParameters()
        self.assertEqual(params.order, 1)
        self.assertEqual(params.family, FunctionFamily.SQUARE)
        self.assertEqual(params.speed, 1.0)
        self.assertEqual(params.clamped(), params)

    def test_clamps_order(self):
        self.assertEqual(SeriesParameters(order=0).clamped().order, 1)
        self.assertEqual(SeriesParameters(order=-4).clamped().order, 1)
        self.assertEqual(SeriesParameters(order=31).clamped().order, 30)
        self.assertEqual(SeriesParameters(order=12).clamped().order, 12)

    def test_clamps_speed(self):
        self.assertEqual(SeriesParameters(speed=0.0).clamped().speed, 0.1)
        self.assertEqual(SeriesParameters(speed=9.0).clamped().speed, 5.0)
        self.assertEqual(SeriesParameters(speed=2.5).clamped().speed, 2.5)

    def test_family_from_string(self):
        params = SeriesParameters(family="triangular").clamped()
        self.assertIs(params.family, FunctionFamily.TRIANGULAR)
        with self.assertRaises(ValueError):
            SeriesParameters(family="circle").clamped()

    def test_view_modes(self):
        self.assertEqual(ViewMode("decomposition"), ViewMode.DECOMPOSITION)
        self.assertEqual(len(ViewMode), 3)


if __name__ == "__main__":
    unittest.main()
