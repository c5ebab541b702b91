from __future__ import annotations

import dataclasses
import unittest

import numpy as np

from pyrational.config import OrderConfig
from pyrational.numeric import almost_equal, almost_zero


class TestOrderConfig(unittest.TestCase):
    def test_resolve(self) -> None:
        self.assertEqual(OrderConfig.resolve(None, None), OrderConfig(None, None))
        self.assertEqual(OrderConfig.resolve(3, None), OrderConfig(3, None))
        self.assertEqual(OrderConfig.resolve(3, 5).effective_order, 3)
        self.assertEqual(OrderConfig.resolve(10, 5).effective_order, 5)
        self.assertEqual(OrderConfig.resolve(None, 7).effective_order, 7)
        self.assertEqual(OrderConfig.resolve(0, 5).effective_order, 0)
        self.assertEqual(OrderConfig.resolve(np.int64(4), 9).effective_order, 4)

    def test_flags(self) -> None:
        cfg = OrderConfig.resolve(None, None)
        self.assertTrue(cfg.is_unlimited)
        self.assertFalse(cfg.is_bound)
        cfg = OrderConfig.resolve(2, 4)
        self.assertFalse(cfg.is_unlimited)
        self.assertTrue(cfg.is_bound)

    def test_rejects_invalid(self) -> None:
        with self.assertRaises(ValueError):
            OrderConfig.resolve(-1, 5)
        with self.assertRaises(TypeError):
            OrderConfig.resolve(2.5, 5)
        with self.assertRaises(TypeError):
            OrderConfig.resolve(True, 5)
        with self.assertRaises(ValueError):
            OrderConfig(maximum_order=2, effective_order=3)
        with self.assertRaises(ValueError):
            OrderConfig(maximum_order=None, effective_order=-1)

    def test_frozen(self) -> None:
        cfg = OrderConfig.resolve(2, 4)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            cfg.effective_order = 1  # type: ignore[misc]


class TestNumeric(unittest.TestCase):
    def test_almost_equal(self) -> None:
        self.assertTrue(almost_equal(1.0, 1.0))
        self.assertTrue(almost_equal(1.0, 1.0 + 1.0e-16))
        self.assertTrue(almost_equal(1.0e6, 1.0e6 * (1.0 + 1.0e-15)))
        self.assertFalse(almost_equal(1.0, 1.0 + 1.0e-12))
        self.assertTrue(almost_equal(0.0, 1.0e-16))
        self.assertFalse(almost_equal(0.0, 1.0e-10))
        self.assertTrue(almost_equal(float("inf"), float("inf")))
        self.assertFalse(almost_equal(float("inf"), 1.0))
        self.assertFalse(almost_equal(float("nan"), float("nan")))

    def test_almost_zero(self) -> None:
        self.assertTrue(almost_zero(0.0))
        self.assertTrue(almost_zero(-1.0e-16))
        self.assertFalse(almost_zero(1.0e-14))


if __name__ == "__main__":
    unittest.main()
