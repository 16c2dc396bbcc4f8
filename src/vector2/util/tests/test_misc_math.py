#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for floating point classification of scalars

.. Created on Sat Oct 17 10:31:50 2026
"""

import math
import unittest

import numpy as np

from vector2.util import misc_math as mm


class ClassifyTestCase(unittest.TestCase):
    def setUp(self):
        self.values = [1.0, -0.0, 5e-324, math.inf, -math.inf, math.nan,
                       np.float32(2.0), np.float32(1e-40), np.float32('nan')]

    def test_nan(self):
        flags = [mm.is_nan(x) for x in self.values]
        assert flags == [False, False, False, False, False, True,
                         False, False, True]

    def test_infinite(self):
        flags = [mm.is_infinite(x) for x in self.values]
        assert flags == [False, False, False, True, True, False,
                         False, False, False]

    def test_finite(self):
        flags = [mm.is_finite(x) for x in self.values]
        assert flags == [True, True, True, False, False, False,
                         True, True, False]

    def test_normal(self):
        flags = [mm.is_normal(x) for x in self.values]
        assert flags == [True, False, False, False, False, False,
                         True, False, False]

    def test_normal_uses_own_precision(self):
        assert mm.is_normal(1e-40)
        assert mm.is_normal(np.float64(1e-40))
        assert not mm.is_normal(np.float32(1e-40))
        assert mm.is_normal(np.finfo(np.float32).tiny)
        assert not mm.is_normal(np.float32(np.finfo(np.float32).tiny/2))

    def test_returns_python_bool(self):
        assert type(mm.is_nan(np.float32(1.0))) is bool
        assert type(mm.is_normal(2.0)) is bool
