#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for the vector constants

.. Created on Sat Oct 17 16:03:12 2026
"""

import numpy as np
import pytest

from vector2 import consts
from vector2.vector import Vector2


@pytest.mark.parametrize("name, xy", [
    ('ZERO', (0., 0.)),
    ('UP', (0., 1.)),
    ('DOWN', (0., -1.)),
    ('RIGHT', (1., 0.)),
    ('LEFT', (-1., 0.)),
    ])
def test_values_and_precision(name, xy):
    v32 = getattr(consts, name + '_F32')
    v64 = getattr(consts, name + '_F64')
    assert v32 == Vector2(*xy)
    assert v64 == Vector2(*xy)
    assert isinstance(v32.x, np.float32) and isinstance(v32.y, np.float32)
    assert isinstance(v64.x, np.float64) and isinstance(v64.y, np.float64)


def test_unit_vectors():
    for v in (consts.UP_F64, consts.DOWN_F64, consts.RIGHT_F64,
              consts.LEFT_F64, consts.UP_F32, consts.LEFT_F32):
        assert v.length() == 1.0
    assert consts.RIGHT_F64.normal() == consts.UP_F64
    assert consts.UP_F64.normal() == consts.LEFT_F64
    assert -consts.LEFT_F32 == consts.RIGHT_F32


def test_in_place_does_not_alter_constant():
    v = consts.ZERO_F64
    v += Vector2(1.0, 2.0)
    assert v == Vector2(1.0, 2.0)
    assert consts.ZERO_F64 == Vector2(0.0, 0.0)

    from vector2.consts import UP_F64
    u = UP_F64
    u *= 3.0
    assert consts.UP_F64 == Vector2(0.0, 1.0)


def test_module_attributes():
    assert len(consts.__all__) == 10
    assert 'DOWN_F32' in dir(consts)
    with pytest.raises(AttributeError):
        consts.DIAGONAL_F64
