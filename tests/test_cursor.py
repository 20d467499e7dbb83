import unittest

from epicycles.config import BASE_TIME_STEP
from epicycles.model.cursor import TimeCursor, TimeDirection


class TimeCursorTest(unittest.TestCase):
    def test_forward(self):
        cursor = TimeCursor(step=0.025, speed=1.0)
        for _ in range(8):
            cursor.advance()
        self.assertAlmostEqual(cursor.value, 8 * 0.025)
        self.assertEqual(cursor.ticks, 8)

    def test_backward(self):
        cursor = TimeCursor(step=0.025, speed=2.0, direction=TimeDirection.BACKWARD)
        self.assertAlmostEqual(cursor.increment, -0.05)
        for _ in range(4):
            cursor.advance()
        self.assertAlmostEqual(cursor.value, -0.2)

    def test_speed_scales_increment(self):
        self.assertAlmostEqual(TimeCursor(speed=0.1).increment, BASE_TIME_STEP * 0.1)
        self.assertAlmostEqual(TimeCursor(speed=5.0).increment, BASE_TIME_STEP * 5.0)

    def test_advance_returns_new_value(self):
        cursor = TimeCursor(step=1.0)
        self.assertEqual(cursor.advance(), 1.0)
        self.assertEqual(cursor.advance(), 2.0)

    def test_reset(self):
        cursor = TimeCursor()
        cursor.advance()
        cursor.reset()
        self.assertEqual(cursor.value, 0.0)
        self.assertEqual(cursor.ticks, 0)


if __name__ == "__main__":
    unittest.main()
