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

import numpy
from scipy.special import comb

__all__ = ['poly_trim', 'scale_coefficients', 'evaluate',
           'evaluate_and_derivative', 'evaluate_with_derivatives',
           'derivative', 'synthetic_division', 'deflate_conjugate_pair',
           'shift_polynomial', 'cauchy_upper_bound', 'fujiwara_bound',
           'cauchy_lower_bound', 'coefficient_condition',
           'is_ill_conditioned', 'polish_root_newton', 'newton_polish']

# Coefficients are ordered from the highest degree (index 0) to the constant
# term (index -1) throughout this module.


# =========
# as coeffs
# =========

def _as_coeffs(coeffs):
    """
    Coefficients as a 1D float array, or complex array if any coefficient has
    a non-zero imaginary part.
    """

    c = numpy.atleast_1d(numpy.asarray(coeffs))
    if numpy.iscomplexobj(c):
        if numpy.all(c.imag == 0):
            return c.real.astype(float)
        return c.astype(complex)
    return c.astype(float)


# =========
# poly trim
# =========

def poly_trim(coeffs, tol=1e-14):
    """
    Strip leading coefficients whose magnitude is at most ``tol``.

    An all-zero input is reduced to a single zero coefficient.
    """

    c = _as_coeffs(coeffs)
    if c.size == 0:
        return c

    nonzero = numpy.flatnonzero(numpy.abs(c) > tol)
    if nonzero.size == 0:
        return c[-1:] * 0

    return c[nonzero[0]:]


# ==================
# scale coefficients
# ==================

def scale_coefficients(coeffs):
    """
    Divide all coefficients by the largest coefficient magnitude.

    Parameters
    ----------

    coeffs : array_like
        Polynomial coefficients.

    Returns
    -------

    scaled : numpy.ndarray
        Coefficients whose largest magnitude is one. If every coefficient is
        below ``1e-10`` in magnitude, a copy of the input is returned.
    """

    c = _as_coeffs(coeffs)
    max_mag = numpy.max(numpy.abs(c)) if c.size > 0 else 0.0
    if max_mag < 1e-10:
        return c.copy()

    return c / max_mag


# ========
# evaluate
# ========

def evaluate(coeffs, z):
    """
    Evaluate a polynomial with Horner's method.

    Parameters
    ----------

    coeffs : array_like
        Coefficients, highest degree first.

    z : complex or array_like
        Evaluation point(s).

    Returns
    -------

    value : complex or numpy.ndarray
        A Python complex for scalar ``z``, otherwise a complex array of the
        shape of ``z``.
    """

    c = _as_coeffs(coeffs)
    z_arr = numpy.asarray(z, dtype=complex)

    value = numpy.zeros_like(z_arr) + c[0]
    for ci in c[1:]:
        value = value * z_arr + ci

    if value.ndim == 0:
        return complex(value)
    return value


# =======================
# evaluate and derivative
# =======================

def evaluate_and_derivative(coeffs, z):
    """
    Value and first derivative of a polynomial in a single Horner pass.
    """

    c = _as_coeffs(coeffs)
    z_arr = numpy.asarray(z, dtype=complex)

    value = numpy.zeros_like(z_arr) + c[0]
    deriv = numpy.zeros_like(z_arr)
    for ci in c[1:]:
        deriv = deriv * z_arr + value
        value = value * z_arr + ci

    if value.ndim == 0:
        return complex(value), complex(deriv)
    return value, deriv


# =========================
# evaluate with derivatives
# =========================

def evaluate_with_derivatives(coeffs, z):
    """
    Value, first and second derivatives of a polynomial in one pass.

    Used by Laguerre's method.
    """

    c = _as_coeffs(coeffs)
    z_arr = numpy.asarray(z, dtype=complex)

    value = numpy.zeros_like(z_arr) + c[0]
    d1 = numpy.zeros_like(z_arr)
    d2 = numpy.zeros_like(z_arr)
    for ci in c[1:]:
        d2 = d2 * z_arr + d1
        d1 = d1 * z_arr + value
        value = value * z_arr + ci
    d2 = 2.0 * d2

    if value.ndim == 0:
        return complex(value), complex(d1), complex(d2)
    return value, d1, d2


# ==========
# derivative
# ==========

def derivative(coeffs):
    """
    Coefficients of the derivative polynomial.

    For ``P(z) = a_0 z^n + ... + a_n`` the result is
    ``[n a_0, (n-1) a_1, ..., a_{n-1}]``. The derivative of a constant is
    ``[0]``.
    """

    c = _as_coeffs(coeffs)
    n = c.size - 1
    if n < 1:
        return numpy.zeros(1, dtype=c.dtype)

    powers = numpy.arange(n, 0, -1)
    return c[:-1] * powers


# ==================
# synthetic division
# ==================

def synthetic_division(coeffs, root, return_remainder=False):
    """
    Divide a polynomial by ``(z - root)``.

    Parameters
    ----------

    coeffs : array_like
        Dividend coefficients, highest degree first.

    root : complex
        The root to deflate. Complex roots use complex arithmetic on every
        step, ``q[i] = c[i] + q[i-1] * root``.

    return_remainder : bool, default=False
        If `True`, the remainder ``P(root)`` is also returned.

    Returns
    -------

    quotient : numpy.ndarray
        Quotient coefficients, of length ``len(coeffs) - 1``. The array is
        real when both the dividend and the root are real.

    remainder : complex
        Only returned if ``return_remainder`` is `True`.

    Examples
    --------

    .. code-block:: python

        >>> from zplane._kernel import synthetic_division
        >>> synthetic_division([1.0, -5.0, 6.0], 2.0)
        array([ 1., -3.])
    """

    c = _as_coeffs(coeffs)
    root = complex(root)

    if numpy.isrealobj(c) and root.imag == 0.0:
        dtype = float
        r = root.real
    else:
        dtype = complex
        r = root

    n = c.size - 1
    quotient = numpy.zeros(max(n, 0), dtype=dtype)
    acc = c[0] if c.size > 0 else 0.0
    for i in range(n):
        quotient[i] = acc
        acc = c[i + 1] + acc * r

    if return_remainder:
        return quotient, complex(acc)
    return quotient


# ======================
# deflate conjugate pair
# ======================

def deflate_conjugate_pair(coeffs, root):
    """
    Divide a real polynomial by ``(z - root)(z - conj(root))``.

    The quadratic divisor ``z^2 - 2 Re(root) z + |root|^2`` is real, so the
    quotient stays real.
    """

    c = _as_coeffs(coeffs)
    root = complex(root)
    b = -2.0 * root.real
    d = root.real * root.real + root.imag * root.imag

    n = c.size - 1
    if n < 2:
        raise ValueError('Polynomial degree must be at least two.')

    q = numpy.zeros(n - 1, dtype=c.dtype)
    q[0] = c[0]
    if n - 1 > 1:
        q[1] = c[1] - b * q[0]
    for i in range(2, n - 1):
        q[i] = c[i] - b * q[i - 1] - d * q[i - 2]

    return q


# ================
# shift polynomial
# ================

def shift_polynomial(coeffs, shift):
    """
    Coefficients of ``P(z - shift)`` by binomial expansion.

    The roots of the returned polynomial are the roots of ``P`` translated by
    ``+shift``. To center a region at ``c`` at the origin, pass ``-c``.

    Parameters
    ----------

    coeffs : array_like
        Coefficients of ``P``, highest degree first.

    shift : complex
        Translation.

    Returns
    -------

    shifted : numpy.ndarray
        Complex coefficients of the translated polynomial, of the same length
        as ``coeffs``.
    """

    c = _as_coeffs(coeffs).astype(complex)
    n = c.size - 1
    shift = complex(shift)
    if shift == 0:
        return c

    out = numpy.zeros(n + 1, dtype=complex)
    neg = -shift
    for k in range(n + 1):
        m = n - k
        if c[k] == 0:
            continue
        for j in range(m + 1):
            # a_k z^m expands to sum_j C(m, j) z^j (-shift)^(m - j)
            out[n - j] += c[k] * comb(m, j, exact=True) * neg ** (m - j)

    return out


# ==================
# cauchy upper bound
# ==================

def cauchy_upper_bound(coeffs):
    """
    Cauchy's bound ``1 + max |a_i / a_0|`` on the modulus of every root.
    """

    c = _as_coeffs(coeffs)
    if c.size < 2 or c[0] == 0:
        return 1.0

    return 1.0 + float(numpy.max(numpy.abs(c[1:] / c[0])))


# ==============
# fujiwara bound
# ==============

def fujiwara_bound(coeffs):
    """
    Fujiwara's bound ``2 max |a_i / a_0|^(1/i)``, usually tighter than
    Cauchy's bound for polynomials with large coefficients.
    """

    c = _as_coeffs(coeffs)
    n = c.size - 1
    if n < 1 or c[0] == 0:
        return 1.0

    ratios = numpy.abs(c[1:] / c[0])
    powers = 1.0 / numpy.arange(1, n + 1)
    terms = ratios ** powers
    terms[-1] = (ratios[-1] / 2.0) ** powers[-1]

    return 2.0 * float(numpy.max(terms))


# ==================
# cauchy lower bound
# ==================

def cauchy_lower_bound(coeffs):
    """
    Lower bound on the modulus of every root.

    This is the unique positive root of
    ``|a_0| x^n + ... + |a_{n-1}| x - |a_n|``, found by Newton's method from
    above. Returns zero if the constant term vanishes.
    """

    c = _as_coeffs(coeffs)
    n = c.size - 1
    q = numpy.abs(c).astype(float)
    if n < 1 or q[-1] == 0.0 or q[0] == 0.0:
        return 0.0

    q[-1] = -q[-1]
    x = numpy.exp((numpy.log(-q[-1]) - numpy.log(q[0])) / n)
    if q[-2] != 0.0:
        x = min(x, -q[-1] / q[-2])

    # Move down until the bound polynomial changes sign
    while x > 1e-300:
        xm = 0.1 * x
        if numpy.polyval(q, xm) <= 0.0:
            break
        x = xm

    dq = q[:-1] * numpy.arange(n, 0, -1)
    for _ in range(100):
        f = numpy.polyval(q, x)
        df = numpy.polyval(dq, x)
        if df == 0.0:
            break
        dx = f / df
        x -= dx
        if abs(dx) <= 0.005 * abs(x):
            break

    return float(max(x, 0.0))


# =====================
# coefficient condition
# =====================

def coefficient_condition(coeffs):
    """
    Cheap conditioning indicators of a coefficient vector.

    Returns
    -------

    ratio : float
        Ratio of the largest to the smallest non-zero coefficient magnitude.

    alternation : float
        Fraction of consecutive non-zero coefficient pairs whose real parts
        change sign.
    """

    c = _as_coeffs(coeffs)
    mags = numpy.abs(c)
    nonzero = mags[mags > 0.0]
    if nonzero.size == 0:
        return 1.0, 0.0

    ratio = float(numpy.max(nonzero) / numpy.min(nonzero))

    signs = numpy.sign(numpy.real(c))
    signs = signs[signs != 0]
    if signs.size < 2:
        alternation = 0.0
    else:
        alternation = float(numpy.mean(signs[1:] != signs[:-1]))

    return ratio, alternation


# ==================
# is ill conditioned
# ==================

def is_ill_conditioned(coeffs, ratio_threshold=1e8):
    """
    Heuristic ill-conditioning flag from the coefficient magnitudes.

    A polynomial is flagged when its coefficient magnitude ratio exceeds
    ``ratio_threshold``, or when its coefficients strongly alternate in sign
    while still spanning more than four orders of magnitude.
    """

    ratio, alternation = coefficient_condition(coeffs)
    if ratio > ratio_threshold:
        return True
    if (alternation > 0.7) and (ratio > 1e4):
        return True
    return False


# ==================
# polish root newton
# ==================

def polish_root_newton(coeffs, z, tolerance=1e-12, max_iterations=10):
    """
    Refine one root with bounded, damped Newton iterations.

    A step is only taken if it does not increase the residual, so the
    returned root is never worse than the input.
    """

    z = complex(z)
    value, deriv = evaluate_and_derivative(coeffs, z)
    residual = abs(value)

    for _ in range(max_iterations):
        if residual == 0.0 or abs(deriv) < 1e-300:
            break

        step = value / deriv
        if abs(step) > 1.0:
            step = step / abs(step)

        z_new = z - step
        value_new, deriv_new = evaluate_and_derivative(coeffs, z_new)
        if abs(value_new) > residual:
            break

        z, value, deriv = z_new, value_new, deriv_new
        residual = abs(value)
        if abs(step) <= tolerance * max(1.0, abs(z)):
            break

    return z


# =============
# newton polish
# =============

def newton_polish(coeffs, roots, tolerance=1e-12, max_iterations=5):
    """
    Apply :func:`polish_root_newton` to every root of an array.
    """

    roots = numpy.asarray(roots, dtype=complex).ravel()
    return numpy.array([polish_root_newton(coeffs, r, tolerance,
                                           max_iterations)
                        for r in roots], dtype=complex)
