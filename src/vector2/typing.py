#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 the vector2 developers
""" type hints for vector2

The scalar type of a :class:`~.Vector2` is left open. These aliases
document the conventions used in the signatures:

T, U are scalar type variables; a vector operation `Vector2[T] op U`
returns a vector of whatever `T op U` returns.

FloatScalar is a scalar that supports the floating point queries

Array2 is a numpy array of shape (2,), array-like input is V2
Tuple2[T] is the 2-tuple (x, y)

.. Created on Sat Oct 17 09:12:41 2026

.. codeauthor: the vector2 developers
"""
from typing import TypeVar
import numpy as np
import numpy.typing as npt

T = TypeVar('T')
U = TypeVar('U')

FloatScalar = float | np.floating

Array2 = npt.NDArray
V2 = npt.ArrayLike

Tuple2 = tuple[T, T]
