#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 the vector2 developers
""" Constants for common vectors

The zero vector and the four axis aligned unit vectors, in single
(`np.float32`) and double (`np.float64`) precision.

The in-place operators modify a :class:`~.Vector2`, so each lookup of a
constant returns a new vector. This keeps::

    v = consts.ZERO_F64
    v += step

from changing `consts.ZERO_F64`.

.. Created on Sat Oct 17 11:26:52 2026

.. codeauthor: the vector2 developers
"""

import numpy as np

from vector2.vector import Vector2

_directions = {
    'ZERO': (0., 0.),
    'UP': (0., 1.),
    'DOWN': (0., -1.),
    'RIGHT': (1., 0.),
    'LEFT': (-1., 0.),
    }

_precisions = {
    'F32': np.float32,
    'F64': np.float64,
    }

_consts = {f"{d}_{p}": (xy, float_type)
           for d, xy in _directions.items()
           for p, float_type in _precisions.items()}

__all__ = sorted(_consts)


def __getattr__(name):
    try:
        (x, y), float_type = _consts[name]
    except KeyError:
        raise AttributeError(
            f"module {__name__!r} has no attribute {name!r}") from None
    return Vector2(float_type(x), float_type(y))


def __dir__():
    return sorted(list(globals()) + __all__)
