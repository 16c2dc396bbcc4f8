""" package supplying utility functions for math and numpy support

    The :mod:`~vector2.util` subpackage provides scalar level helpers used
    by the vector operations:

        - floating point classification, :mod:`~.misc_math`
"""
