#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 the vector2 developers
""" miscellaneous functions for classifying floating point scalars

The tests follow numpy's classification functions, so they work for
python floats as well as numpy scalars of any precision.

.. Created on Sat Oct 17 10:02:15 2026

.. codeauthor: the vector2 developers
"""
import numpy as np


def is_nan(x) -> bool:
    """ True if x is a NaN """
    return bool(np.isnan(x))


def is_infinite(x) -> bool:
    """ Test for IEEE inf, either sign """
    return bool(np.isinf(x))


def is_finite(x) -> bool:
    """ True if x is neither infinite nor NaN """
    return bool(np.isfinite(x))


def is_normal(x) -> bool:
    """ True if x is a normal floating point value

    Zero, subnormal, infinite and NaN values are not normal. The smallest
    normal magnitude is taken from the precision of x itself, i.e. a value
    that is normal as a double may be subnormal as a `np.float32`.
    """
    if not np.isfinite(x):
        return False
    tiny = np.finfo(np.result_type(x)).tiny
    return bool(np.abs(x) >= tiny)

