import math
import unittest

import numpy as np

from epicycles.config import ROW_FILL_RATIO
from epicycles.model.decomposition import (
    RowLabel, component_scale, compute_window, result_label, row_labels, summed_scale,
)
from epicycles.model.series import FunctionFamily, generate_terms, partial_sum


class ComputeWindow(unittest.TestCase):
    def test_shapes(self):
        terms = generate_terms(FunctionFamily.SQUARE, 4)
        window = compute_window(terms, 1.0, 120, 0.01)
        self.assertEqual(window.width, 120)
        self.assertEqual(window.times.shape, (120,))
        self.assertEqual(window.per_harmonic.shape, (4, 120))
        self.assertEqual(window.summed.shape, (120,))

    def test_sample_times(self):
        terms = generate_terms(FunctionFamily.SQUARE, 1)
        window = compute_window(terms, 2.0, 50, 0.01)
        np.testing.assert_allclose(window.times[0], 2.0 - 50 * 0.01)
        np.testing.assert_allclose(window.times[-1], 2.0 - 0.01)
        np.testing.assert_allclose(np.diff(window.times), 0.01)

    def test_rows_are_isolated_harmonics(self):
        terms = generate_terms(FunctionFamily.SAWTOOTH, 3)
        window = compute_window(terms, -0.5, 30, 0.02)
        for k, term in enumerate(terms):
            expected = term.amplitude * np.sin(term.harmonic_index * window.times + term.phase)
            np.testing.assert_allclose(window.per_harmonic[k], expected)

    def test_summed_is_sum_of_rows(self):
        terms = generate_terms(FunctionFamily.TRIANGULAR, 6)
        window = compute_window(terms, 3.0, 200, 0.01)
        np.testing.assert_allclose(window.summed, window.per_harmonic.sum(axis=0))
        np.testing.assert_allclose(window.summed, partial_sum(terms, window.times))

    def test_zero_width(self):
        terms = generate_terms(FunctionFamily.SQUARE, 3)
        window = compute_window(terms, 0.0, 0, 0.01)
        self.assertEqual(window.width, 0)
        self.assertEqual(window.per_harmonic.shape, (3, 0))
        self.assertEqual(window.peak, 0.0)

    def test_peak(self):
        terms = generate_terms(FunctionFamily.SQUARE, 1)
        window = compute_window(terms, math.pi / 2 + 0.01, 1, 0.01)
        self.assertAlmostEqual(window.peak, 4 / math.pi)


class Scales(unittest.TestCase):
    def test_component_scale_uses_fundamental(self):
        scale = component_scale(FunctionFamily.SQUARE, 80)
        self.assertAlmostEqual(scale * 4 / math.pi, 40 * ROW_FILL_RATIO)

        scale = component_scale(FunctionFamily.SAWTOOTH, 80)
        self.assertAlmostEqual(scale * 2 / math.pi, 40 * ROW_FILL_RATIO)

    def test_rows_fit_their_half_height(self):
        for family in (FunctionFamily.SQUARE, FunctionFamily.SAWTOOTH, FunctionFamily.TRIANGULAR):
            terms = generate_terms(family, 10)
            scale = component_scale(family, 80)
            window = compute_window(terms, 0.0, 700, 0.01)
            self.assertLessEqual(np.max(np.abs(window.per_harmonic)) * scale, 40 + 1e-9)

    def test_summed_scale_normalises_peak(self):
        summed = np.array([0.0, 0.5, -2.0, 1.0])
        scale = summed_scale(summed, 83.0)
        self.assertAlmostEqual(2.0 * scale, 83.0 * ROW_FILL_RATIO)

    def test_summed_scale_fallback(self):
        self.assertEqual(summed_scale(np.zeros(10), 83.0), 1.0)
        self.assertEqual(summed_scale(np.empty(0), 83.0), 1.0)
        self.assertEqual(summed_scale(np.array([np.nan, 1.0]), 83.0), 1.0)
        self.assertEqual(summed_scale(np.array([np.inf]), 83.0), 1.0)

    def test_summed_scale_near_zero_is_finite(self):
        for tiny in (1e-12, 1e-300, 5e-324):
            scale = summed_scale(np.full(8, tiny), 83.0)
            self.assertTrue(np.isfinite(scale))
            self.assertGreater(scale, 0.0)

    def test_summed_scale_follows_window(self):
        terms = generate_terms(FunctionFamily.SQUARE, 1)
        low = compute_window(terms, 0.05, 5, 0.01)
        high = compute_window(terms, math.pi / 2, 5, 0.01)
        self.assertGreater(summed_scale(low.summed, 83.0), summed_scale(high.summed, 83.0))


class Labels(unittest.TestCase):
    def test_square_row_labels(self):
        terms = generate_terms(FunctionFamily.SQUARE, 3)
        labels = row_labels(terms, FunctionFamily.SQUARE)
        self.assertEqual([label.index for label in labels], [0, 1, 2])
        self.assertEqual([label.frequency for label in labels], [1, 3, 5])
        self.assertAlmostEqual(labels[1].amplitude, 4 / (3 * math.pi))

    def test_sawtooth_labels_start_at_one(self):
        terms = generate_terms(FunctionFamily.SAWTOOTH, 2)
        labels = row_labels(terms, FunctionFamily.SAWTOOTH)
        self.assertEqual([label.index for label in labels], [1, 2])
        self.assertLess(labels[1].amplitude, 0)

    def test_result_label(self):
        terms = generate_terms(FunctionFamily.TRIANGULAR, 3)
        window = compute_window(terms, 1.0, 100, 0.01)
        label = result_label(terms, window)
        self.assertEqual(label, RowLabel(index=0, frequency=1, amplitude=window.peak))

    def test_result_label_without_terms(self):
        window = compute_window([], 0.0, 10, 0.01)
        self.assertEqual(result_label([], window).frequency, 1)
        self.assertEqual(result_label([], window).amplitude, 0.0)


if __name__ == "__main__":
    unittest.main()
