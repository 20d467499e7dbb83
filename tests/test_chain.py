import math
import unittest

from epicycles.model.chain import Point, evaluate_chain
from epicycles.model.series import FunctionFamily, Term, generate_terms, get_family, partial_sum


class EvaluateChain(unittest.TestCase):
    def test_square_single_term_at_zero(self):
        terms = generate_terms(FunctionFamily.SQUARE, 1)
        geometry = evaluate_chain((0.0, 0.0), terms, 0.0)
        self.assertAlmostEqual(geometry.tip.x, 1.2732, places=4)
        self.assertAlmostEqual(geometry.tip.y, 0.0)
        self.assertEqual(len(geometry.segments), 1)
        self.assertEqual(geometry.segments[0].center, Point(0.0, 0.0))

    def test_origin_and_scale(self):
        terms = generate_terms(FunctionFamily.SQUARE, 1)
        geometry = evaluate_chain(Point(300.0, 250.0), terms, 0.0, scale=100.0)
        self.assertAlmostEqual(geometry.tip.x, 300.0 + 400 / math.pi)
        self.assertAlmostEqual(geometry.tip.y, 250.0)
        self.assertAlmostEqual(geometry.segments[0].radius, 400 / math.pi)

    def test_segments_are_chained(self):
        terms = generate_terms(FunctionFamily.SAWTOOTH, 6)
        geometry = evaluate_chain((10.0, 20.0), terms, 1.3, scale=50.0)
        self.assertEqual(len(geometry.segments), 6)
        self.assertEqual(geometry.anchor, Point(10.0, 20.0))
        for prev, nxt in zip(geometry.segments, geometry.segments[1:]):
            self.assertEqual(prev.endpoint, nxt.center)
        self.assertEqual(geometry.segments[-1].endpoint, geometry.tip)

    def test_radius_is_absolute_amplitude(self):
        terms = generate_terms(FunctionFamily.TRIANGULAR, 3)
        geometry = evaluate_chain((0.0, 0.0), terms, 0.4, scale=10.0)
        for term, segment in zip(terms, geometry.segments):
            self.assertGreaterEqual(segment.radius, 0.0)
            self.assertAlmostEqual(segment.radius, abs(term.amplitude) * 10.0)
            spoke = math.dist(segment.center, segment.endpoint)
            self.assertAlmostEqual(spoke, segment.radius)

    def test_tip_height_is_partial_sum(self):
        terms = generate_terms(FunctionFamily.SQUARE, 8)
        for t in (0.0, 0.3, 2.1, -4.0):
            geometry = evaluate_chain((0.0, 0.0), terms, t)
            self.assertAlmostEqual(geometry.tip.y, partial_sum(terms, t))

    def test_deterministic(self):
        terms = generate_terms(FunctionFamily.SAWTOOTH, 10)
        first = evaluate_chain((1.0, 2.0), terms, 0.75, scale=3.0)
        second = evaluate_chain((1.0, 2.0), terms, 0.75, scale=3.0)
        self.assertEqual(first, second)

    def test_continuous_in_time(self):
        terms = generate_terms(FunctionFamily.SQUARE, 30)
        a = evaluate_chain((0.0, 0.0), terms, 1.0, scale=100.0).tip
        b = evaluate_chain((0.0, 0.0), terms, 1.0 + 1e-6, scale=100.0).tip
        self.assertLess(math.dist(a, b), 1e-2)

    def test_dc_offset_lifts_origin(self):
        family = get_family(FunctionFamily.QUADRATIC_COSINE)
        terms = family.terms(2)
        scale = family.pixel_scale(500)
        geometry = evaluate_chain((150.0, 250.0), terms, 0.0, scale=scale, dc_offset=family.DC_OFFSET)
        self.assertAlmostEqual(geometry.anchor.x, 150.0)
        self.assertAlmostEqual(geometry.anchor.y, 250.0 - family.DC_OFFSET * scale)

    def test_empty_chain(self):
        geometry = evaluate_chain((5.0, 6.0), [], 1.0, scale=2.0, dc_offset=1.0)
        self.assertEqual(geometry.segments, ())
        self.assertEqual(geometry.tip, Point(5.0, 4.0))
        self.assertEqual(geometry.anchor, geometry.tip)

    def test_phase_shifts_start_angle(self):
        geometry = evaluate_chain((0.0, 0.0), [Term(1, 2.0, math.pi / 2)], 0.0)
        self.assertAlmostEqual(geometry.tip.x, 0.0)
        self.assertAlmostEqual(geometry.tip.y, 2.0)


if __name__ == "__main__":
    unittest.main()
