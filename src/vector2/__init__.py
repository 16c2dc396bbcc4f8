# -*- coding: utf-8 -*-
""" The **vector2** generic 2D vector package

    The vector type is contained in the :mod:`~.vector` module. It is
    supported by the following modules:

        - :mod:`~.vector`: the :class:`~.vector.Vector2` value type, its
          operators, geometric queries and conversions
        - :mod:`~.consts`: the zero and axis aligned unit vectors in single
          and double precision
        - :mod:`~.typing`: type hints for the generic scalar design

    The :mod:`~.util` subpackage provides floating point classification of
    scalars.

    The :mod:`~.environment` module gathers the common imports for use in
    scripts and interactive sessions.
"""

from importlib.metadata import version, PackageNotFoundError

from vector2.vector import Vector2

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'

__all__ = ['Vector2', 'listobj']


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    listobj() is designed to be used in scripting environments where detailed,
    textual output is supported. It is a wrapper to a call of `listobj_str` on
    `obj`, e.g. :meth:`.Vector2.listobj_str`. Objects without a
    `listobj_str` method are printed with `repr`.
    """
    try:
        print(obj.listobj_str(), end='')
    except AttributeError:
        print(repr(obj))
