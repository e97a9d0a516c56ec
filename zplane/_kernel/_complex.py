# SPDX-FileCopyrightText: Copyright 2026, Siavash Ameli <sameli@berkeley.edu>
# SPDX-License-Identifier: BSD-3-Clause
# SPDX-FileType: SOURCE
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the license found in the LICENSE.txt file in the root directory
# of this source tree.


# =======
# Imports
# =======

import math
from .._errors import DivisionByZeroError

__all__ = ['DIVISION_TOLERANCE', 'complex_add', 'complex_subtract',
           'complex_multiply', 'complex_scale', 'complex_divide',
           'complex_reciprocal', 'complex_magnitude',
           'complex_magnitude_squared', 'complex_phase']

DIVISION_TOLERANCE = 1e-15


# ===========
# complex add
# ===========

def complex_add(a, b):
    """Sum of two complex numbers."""
    return complex(a) + complex(b)


# ================
# complex subtract
# ================

def complex_subtract(a, b):
    """Difference ``a - b`` of two complex numbers."""
    return complex(a) - complex(b)


# ================
# complex multiply
# ================

def complex_multiply(a, b):
    """Product of two complex numbers."""
    return complex(a) * complex(b)


# =============
# complex scale
# =============

def complex_scale(a, s):
    """Product of a complex number and a real scalar."""
    a = complex(a)
    s = float(s)
    return complex(a.real * s, a.imag * s)


# =================
# complex magnitude
# =================

def complex_magnitude(a):
    """
    Modulus of a complex number, computed with :func:`math.hypot` so that
    large components do not overflow.
    """

    a = complex(a)
    return math.hypot(a.real, a.imag)


# =========================
# complex magnitude squared
# =========================

def complex_magnitude_squared(a):
    a = complex(a)
    return a.real * a.real + a.imag * a.imag


# =============
# complex phase
# =============

def complex_phase(a):
    """Argument of a complex number in ``(-pi, pi]``."""
    a = complex(a)
    return math.atan2(a.imag, a.real)


# ==============
# complex divide
# ==============

def complex_divide(a, b):
    """
    Quotient ``a / b`` of two complex numbers.

    Raises
    ------

    zplane.DivisionByZeroError
        If ``|b|`` is below ``1e-15``.
    """

    a = complex(a)
    b = complex(b)

    if complex_magnitude(b) < DIVISION_TOLERANCE:
        raise DivisionByZeroError('Division by near-zero complex number.')

    # Smith's algorithm keeps the intermediate products bounded
    if abs(b.real) >= abs(b.imag):
        r = b.imag / b.real
        d = b.real + b.imag * r
        return complex((a.real + a.imag * r) / d, (a.imag - a.real * r) / d)
    else:
        r = b.real / b.imag
        d = b.real * r + b.imag
        return complex((a.real * r + a.imag) / d, (a.imag * r - a.real) / d)


# ==================
# complex reciprocal
# ==================

def complex_reciprocal(a):
    """
    Reciprocal ``1 / a``, failing like :func:`complex_divide`.
    """

    return complex_divide(1.0, a)
