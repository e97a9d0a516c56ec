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

import cmath
import numpy
from .._errors import RootFindingError
from .._kernel import poly_trim

__all__ = ['find_roots_analytic', 'DISCRIMINANT_TOLERANCE']

DISCRIMINANT_TOLERANCE = 1e-14


# ============
# roots linear
# ============

def _roots_linear(a, b):
    return [complex(-b / a)]


# ===============
# roots quadratic
# ===============

def _roots_quadratic(a, b, c):
    """
    Roots of ``a z^2 + b z + c``.
    """

    if numpy.iscomplexobj(numpy.array([a, b, c])):
        sq = cmath.sqrt(b * b - 4.0 * a * c)
        # Pick the sign that avoids cancellation
        if abs(-b + sq) < abs(-b - sq):
            sq = -sq
        q = (-b + sq) / 2.0
        if q == 0:
            return [complex(0.0), complex(0.0)]
        return [complex(q / a), complex(c / q)]

    disc = b * b - 4.0 * a * c

    if abs(disc) < DISCRIMINANT_TOLERANCE:
        r = -b / (2.0 * a)
        return [complex(r), complex(r)]

    elif disc > 0:
        sq = numpy.sqrt(disc)
        q = -0.5 * (b + numpy.copysign(sq, b))
        if q == 0:
            return [complex(0.0), complex(0.0)]
        r1 = q / a
        r2 = c / q
        return [complex(min(r1, r2)), complex(max(r1, r2))]

    else:
        re = -b / (2.0 * a)
        im = numpy.sqrt(-disc) / (2.0 * abs(a))
        return [complex(re, im), complex(re, -im)]


# ===========
# roots cubic
# ===========

def _roots_cubic(a, b, c, d):
    """
    Roots of a real cubic ``a z^3 + b z^2 + c z + d`` with Cardano's method.

    The cubic is reduced to the depressed form ``t^3 + p t + q`` with
    ``z = t - b / (3 a)``.
    """

    b, c, d = b / a, c / a, d / a
    offset = b / 3.0

    p = c - b * b / 3.0
    q = 2.0 * b ** 3 / 27.0 - b * c / 3.0 + d
    disc = q * q / 4.0 + p ** 3 / 27.0

    tol = DISCRIMINANT_TOLERANCE

    if abs(disc) < tol:
        if abs(p) < tol:
            # Triple root
            r = -offset
            return [complex(r)] * 3
        else:
            # One single and one double root
            u = numpy.cbrt(-q / 2.0)
            return [complex(2.0 * u - offset), complex(-u - offset),
                    complex(-u - offset)]

    elif disc > 0:
        # One real root and a conjugate pair
        sq = numpy.sqrt(disc)
        u = numpy.cbrt(-q / 2.0 - numpy.copysign(sq, q))
        v = -p / (3.0 * u) if u != 0.0 else 0.0
        re = -(u + v) / 2.0 - offset
        im = numpy.sqrt(3.0) * (u - v) / 2.0
        return [complex(u + v - offset), complex(re, abs(im)),
                complex(re, -abs(im))]

    else:
        # Three distinct real roots, trigonometric form
        m = 2.0 * numpy.sqrt(-p / 3.0)
        arg = 3.0 * q / (p * m)
        theta = numpy.arccos(numpy.clip(arg, -1.0, 1.0)) / 3.0
        roots = [m * numpy.cos(theta - 2.0 * numpy.pi * k / 3.0) - offset
                 for k in range(3)]
        return [complex(r) for r in sorted(roots)]


# ===================
# complex cubic roots
# ===================

def _roots_cubic_complex(a, b, c, d):
    """
    Cardano's method for complex coefficients, using the principal cube root.
    """

    b, c, d = b / a, c / a, d / a
    offset = b / 3.0
    p = c - b * b / 3.0
    q = 2.0 * b ** 3 / 27.0 - b * c / 3.0 + d
    sq = cmath.sqrt(q * q / 4.0 + p ** 3 / 27.0)

    w = -q / 2.0 + sq
    if abs(w) < abs(-q / 2.0 - sq):
        w = -q / 2.0 - sq

    if abs(w) == 0.0:
        return [complex(-offset)] * 3

    u = w ** (1.0 / 3.0)
    omega = complex(-0.5, numpy.sqrt(3.0) / 2.0)
    roots = []
    for k in range(3):
        uk = u * omega ** k
        roots.append(complex(uk - p / (3.0 * uk) - offset))

    return roots


# ===================
# find roots analytic
# ===================

def find_roots_analytic(coeffs):
    """
    Closed-form roots of polynomials of degree one to three.

    Parameters
    ----------

    coeffs : array_like
        Coefficients, highest degree first. Leading zeros are ignored.

    Returns
    -------

    roots : numpy.ndarray
        Complex array of length equal to the degree. Repeated roots appear
        repeatedly.

    Raises
    ------

    zplane.RootFindingError
        With code ``'UNSUPPORTED_DEGREE'`` if the degree is not 1, 2 or 3,
        and ``'ANALYTIC_FAILURE'`` if a closed form produced non-finite
        values.

    Notes
    -----

    A quadratic discriminant of magnitude below ``1e-14`` is treated as zero
    and yields a repeated root. Cubics are reduced to the depressed form and
    solved with Cardano's formula, or with the trigonometric ``arccos`` form
    when all three roots are real and distinct.

    Examples
    --------

    .. code-block:: python

        >>> from zplane import find_roots_analytic
        >>> find_roots_analytic([1, -5, 6])
        array([2.+0.j, 3.+0.j])
    """

    c = poly_trim(coeffs)
    degree = c.size - 1

    if degree < 1 or degree > 3:
        raise RootFindingError(
            f'Analytic solver supports degree 1 to 3, got degree {degree}.',
            code='UNSUPPORTED_DEGREE')

    is_complex = numpy.iscomplexobj(c)

    if degree == 1:
        roots = _roots_linear(*c)
    elif degree == 2:
        roots = _roots_quadratic(*c)
    elif is_complex:
        roots = _roots_cubic_complex(*c)
    else:
        roots = _roots_cubic(*c)

    roots = numpy.array(roots, dtype=complex)
    if not numpy.all(numpy.isfinite(roots)):
        raise RootFindingError('Closed-form solution is not finite.',
                               code='ANALYTIC_FAILURE')

    return roots
