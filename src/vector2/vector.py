#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 the vector2 developers
""" Generic 2D vector value type

A :class:`Vector2` holds a pair of scalars, `x` and `y`, of any numeric
type. The operators apply the scalar operations component-wise, so the
component type of a result is whatever the scalar operation produces.
For the usual types (int, float, `np.float32`, `np.float64`) this is the
input type; the general form matters for scalar algebras such as unit
carrying quantities, where `T * U` yields a third type.

The geometric queries (:meth:`~Vector2.length`, :meth:`~Vector2.direction`
etc.) require floating point components and are evaluated with numpy so
the precision of the components is kept, e.g. a vector of `np.float32`
has a `np.float32` length.

None of the operations validate their inputs. Division by zero, the
direction of the zero vector and similar cases resolve through the
arithmetic of the scalar type: IEEE inf/NaN for numpy floats,
`ZeroDivisionError` for python int and float division. Use the
classification predicates, e.g. :meth:`~Vector2.is_all_finite`, to detect
such results.

.. Created on Sat Oct 17 09:40:06 2026

.. codeauthor: the vector2 developers
"""

import logging
from typing import Generic

import numpy as np

from vector2.typing import T, U, FloatScalar, Array2, V2, Tuple2
from vector2.util import misc_math as mm

logger = logging.getLogger(__name__)


class Vector2(Generic[T]):
    """ Representation of a mathematical vector, e.g. a position or velocity

    Attributes:
        x: first component
        y: second component

    Vectors compare equal when their components are equal. The in-place
    operators (+=, -=, \\*=, /=) modify the vector they are applied to, so
    a Vector2 is not hashable.
    """
    # numpy scalars on the left of an operator defer to Vector2 rather
    # than converting it to an array
    __array_ufunc__ = None

    def __init__(self, x: T = 0, y: T = 0):
        self.x = x
        self.y = y

    def __repr__(self):
        return f"{type(self).__name__}({self.x!r}, {self.y!r})"

    def listobj_str(self):
        return f"{type(self).__name__}: x={self.x}, y={self.y}\n"

    def __json_encode__(self):
        return {'x': self.x, 'y': self.y}

    def __json_decode__(self, **attrs):
        self.x = attrs['x']
        self.y = attrs['y']

    def copy(self) -> 'Vector2[T]':
        return type(self)(self.x, self.y)

    __copy__ = copy

    # --- positional access
    def __len__(self):
        return 2

    def __iter__(self):
        yield self.x
        yield self.y

    def __getitem__(self, index):
        return (self.x, self.y)[index]

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    # --- conversions
    @classmethod
    def from_array(cls, array: V2) -> 'Vector2':
        """ Create a vector from a 2 element sequence or numpy array

        Element 0 becomes `x` and element 1 becomes `y`. Elements taken
        from a numpy array keep the array's dtype.

        Raises:
            ValueError: if array doesn't have the shape (2,)
        """
        shape = np.shape(array)
        if shape != (2,):
            logger.debug("from_array: rejected input of shape %s", shape)
            raise ValueError(f"expected 2 elements, got shape {shape}")
        return cls(array[0], array[1])

    def into_array(self, dtype=None) -> Array2:
        """ Return the components as a numpy array [x, y]

        Args:
            dtype: optional numpy dtype; by default numpy infers it from
                   the component types
        """
        return np.array([self.x, self.y], dtype=dtype)

    def __array__(self, dtype=None, copy=None):
        if copy is False:
            raise ValueError("a Vector2 is always copied to a new array")
        return self.into_array(dtype=dtype)

    @classmethod
    def from_tuple(cls, tpl: Tuple2[T]) -> 'Vector2[T]':
        """ Create a vector from the 2-tuple (x, y) """
        try:
            x, y = tpl
        except ValueError:
            logger.debug("from_tuple: %r does not unpack to 2 items", tpl)
            raise
        return cls(x, y)

    def into_tuple(self) -> Tuple2[T]:
        return self.x, self.y

    # --- arithmetic
    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y)

    def __iadd__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, scalar: U):
        if isinstance(scalar, Vector2):
            return NotImplemented
        return type(self)(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: U):
        if isinstance(scalar, Vector2):
            return NotImplemented
        return type(self)(self.x / scalar, self.y / scalar)

    def __imul__(self, scalar: U):
        if isinstance(scalar, Vector2):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar: U):
        if isinstance(scalar, Vector2):
            return NotImplemented
        self.x /= scalar
        self.y /= scalar
        return self

    def __rmul__(self, scalar: FloatScalar):
        # commuted forms are limited to floating point scalars
        if not isinstance(scalar, (float, np.floating)):
            return NotImplemented
        return type(self)(scalar * self.x, scalar * self.y)

    def __rtruediv__(self, scalar: FloatScalar):
        if not isinstance(scalar, (float, np.floating)):
            return NotImplemented
        return type(self)(scalar / self.x, scalar / self.y)

    def __neg__(self):
        return type(self)(-self.x, -self.y)

    def normal(self) -> 'Vector2[T]':
        """ Returns the normal vector (aka. hat vector) of this vector

        The normal is perpendicular to the vector, rotated by +90 degrees,
        and is defined as (-y, x). Only negation of the components is
        needed, so integer vectors are fine.

        Not to be confused with :meth:`normalise`, which returns a unit
        vector.
        """
        return type(self)(-self.y, self.x)

    def dot(self, other: 'Vector2'):
        """ Returns the dot product of two vectors """
        return self.x*other.x + self.y*other.y

    def det(self, other: 'Vector2'):
        """ Returns the determinant (2D cross product) of two vectors

        The sign gives the orientation of `other` relative to this vector:
        positive if `other` is counterclockwise from it.
        """
        return self.x*other.y - self.y*other.x

    # --- geometric queries, floating point components
    @classmethod
    def unit_vector(cls, direction: FloatScalar) -> 'Vector2':
        """ Creates a new unit vector pointing in `direction` (radians) """
        return cls(np.cos(direction), np.sin(direction))

    def length_squared(self):
        """ Returns the magnitude/length of the vector squared """
        return self.x*self.x + self.y*self.y

    def length(self):
        """ Returns the magnitude/length of the vector """
        # sqrt of the sum of squares is faster than hypot
        return np.sqrt(self.length_squared())

    def normalise(self) -> 'Vector2':
        """ Returns the unit vector in the direction of this one

        The zero vector has no direction; its normalised form has NaN
        components.
        """
        return self / self.length()

    normalize = normalise

    def direction(self):
        """ Returns the angle of the vector in radians, atan2(y, x) """
        return np.arctan2(self.y, self.x)

    def direction_to(self, other: 'Vector2'):
        """ Returns direction towards another vector """
        return (other - self).direction()

    def distance_to(self, other: 'Vector2'):
        """ Returns the distance between two vectors """
        return (other - self).length()

    def distance_to_squared(self, other: 'Vector2'):
        """ Returns the distance between two vectors, squared """
        return (other - self).length_squared()

    # --- classification
    def is_any_nan(self) -> bool:
        """ Returns `True` if either component is NaN """
        return mm.is_nan(self.x) or mm.is_nan(self.y)

    def is_any_infinite(self) -> bool:
        """ Returns `True` if either component is +/- infinity """
        return mm.is_infinite(self.x) or mm.is_infinite(self.y)

    def is_all_finite(self) -> bool:
        """ Returns `True` if both components are neither infinite nor NaN """
        return mm.is_finite(self.x) and mm.is_finite(self.y)

    def is_all_normal(self) -> bool:
        """ Returns `True` if both components are neither zero, infinite,
        subnormal nor NaN
        """
        return mm.is_normal(self.x) and mm.is_normal(self.y)
