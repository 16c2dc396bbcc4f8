#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 the vector2 developers
""" script file providing an environment for using vector2

Usage::

    from vector2.environment import *

.. Created on Sat Oct 17 14:05:30 2026

.. codeauthor: the vector2 developers
"""

# initialization
import math
import numpy as np

# vector2
import vector2
from vector2 import listobj

from vector2.vector import Vector2
from vector2 import consts
from vector2.consts import (ZERO_F32, UP_F32, DOWN_F32, RIGHT_F32, LEFT_F32,
                            ZERO_F64, UP_F64, DOWN_F64, RIGHT_F64, LEFT_F64)

from vector2.util import misc_math
