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
from .._util import make_rng
from .._errors import DivisionByZeroError, RootFindingError
from .._kernel import poly_trim, scale_coefficients, evaluate, \
    evaluate_and_derivative, derivative, synthetic_division, \
    deflate_conjugate_pair, cauchy_lower_bound, coefficient_condition, \
    complex_divide, newton_polish, relative_residuals
from ._analytic import find_roots_analytic
from ._companion import find_roots_companion
from ._aberth_ehrlich import find_roots_aberth_ehrlich

__all__ = ['find_roots_jenkins_traub']

_EPS = numpy.finfo(float).eps
_MAX_ATTEMPTS = 3
_PAIR_THRESHOLD = numpy.sqrt(_EPS)
_RESIDUAL_LIMIT = 1e-8


# ==============
# roundoff bound
# ==============

def _roundoff_bound(p, s):
    """
    Magnitude ``sum |a_i| |s|^(n-i)`` that bounds Horner's rounding error.
    """

    return abs(evaluate(numpy.abs(p), abs(s)))


# ============
# is converged
# ============

def _is_converged(p, s, value, tolerance):
    bound = _roundoff_bound(p, s)
    return abs(value) <= max(tolerance, 20.0 * _EPS) * bound


# ==============
# is oscillating
# ==============

def _is_oscillating(history):
    """
    Detect alternating increase and decrease over the last six measures.
    """

    if len(history) < 6:
        return False

    recent = numpy.diff(history[-6:])
    signs = numpy.sign(recent)
    alternations = numpy.sum(signs[1:] * signs[:-1] < 0)

    return alternations >= 0.7 * (len(recent) - 1)


# ==================
# is ill conditioned
# ==================

def _is_ill_conditioned(c):
    ratio, _ = coefficient_condition(c)
    return (ratio > 1e8) or (abs(c[0]) < 1e-8 * numpy.max(numpy.abs(c)))


# =========
# stabilize
# =========

def _stabilize(c, rng, degree):
    """
    Lift near-zero coefficients and the leading coefficient to a tractable
    magnitude, then rescale.
    """

    c = numpy.array(c)
    max_mag = numpy.max(numpy.abs(c))
    floor = 1e-10 * max_mag

    for i in range(1, c.size):
        mag = abs(c[i])
        if 0.0 < mag < floor:
            c[i] = c[i] / mag * floor * (1.0 + 0.1 * rng.uniform())

    if abs(c[0]) < 1e-6 * max_mag:
        sign = c[0] / abs(c[0]) if c[0] != 0 else 1.0
        c[0] = sign * 1e-6 * max_mag

    c = scale_coefficients(c)

    # Break exact symmetries of high degree polynomials that stay ill
    if degree > 10 and _is_ill_conditioned(c):
        nonzero = c != 0
        noise = 1e-14 * rng.uniform(-1.0, 1.0, size=c.size)
        c[nonzero] = c[nonzero] * (1.0 + noise[nonzero])
        c = scale_coefficients(c)

    return c


# ==============
# starting shift
# ==============

def _starting_shift(attempt, radius, rng):
    """
    Initial shift on a circle whose radius is tied to the root modulus bound.
    """

    r1, r2 = rng.uniform(size=2)

    if attempt == 0:
        angle = 0.7 + 0.5 * r1
        scale = 0.9 + 0.2 * r2
    elif attempt == 1:
        angle = numpy.pi * r1
        scale = 0.4 + 0.3 * r2
    else:
        angle = 2.0 * numpy.pi * r1
        scale = 0.1 + 1.9 * r2

    return complex(radius * scale * numpy.exp(1j * angle))


# ======
# next h
# ======

def _next_h(p, h, s):
    """
    One update of the H polynomial with shift ``s``.

    With ``t = -P(s) / H(s)`` the new polynomial is
    ``(P(z) + t H(z)) / (z - s)``, evaluated by two synthetic divisions.
    """

    q_p, p_s = synthetic_division(p, s, return_remainder=True)
    q_h, h_s = synthetic_division(h, s, return_remainder=True)
    q_h = numpy.concatenate(([0.0], q_h))

    if abs(h_s) <= 10.0 * _EPS * numpy.max(numpy.abs(h)):
        return q_h.astype(complex)

    t = -p_s / h_s
    return q_p + t * q_h


# ===========
# three stage
# ===========

def _three_stage(p, sigma, attempt, rng, tolerance):
    """
    Search for a single root of the monic polynomial ``p``.

    Returns the root, or `None` if no stage reached an acceptable residual.
    """

    n = p.size - 1
    retry = attempt > 0

    # Stage 1: no shift
    h = derivative(p).astype(complex) / n
    for _ in range(15 if retry else 10):
        h = _next_h(p, h, 0.0)

    # Stage 2: variable shift
    s = sigma
    history = []
    perturb = 0.15 if retry else 0.05
    for _ in range(30 if retry else 20):
        h = _next_h(p, h, s)
        p_s = evaluate(p, s)
        if _is_converged(p, s, p_s, tolerance):
            return s

        history.append(abs(p_s))
        if _is_oscillating(history):
            kick = rng.uniform(-1.0, 1.0) + 1j * rng.uniform(-1.0, 1.0)
            s = s + perturb * max(abs(s), 1.0) * kick
            history = []
            continue

        try:
            h_bar = complex_divide(evaluate(h, s), h[0])
            step = complex_divide(p_s, h_bar)
        except DivisionByZeroError:
            kick = rng.uniform(-1.0, 1.0) + 1j * rng.uniform(-1.0, 1.0)
            s = s + perturb * max(abs(s), 1.0) * kick
            continue

        if abs(step) > 10.0:
            step = 0.5 * step

        s_new = s - step
        if not numpy.isfinite(s_new):
            break

        stalled = abs(s_new - s) < 1e-14 * max(1.0, abs(s))
        s = s_new
        if stalled:
            break

    # Stage 3: damped Newton
    damping = 0.8 if retry else 1.0
    for _ in range(25 if retry else 20):
        value, deriv = evaluate_and_derivative(p, s)
        if _is_converged(p, s, value, tolerance):
            return s

        try:
            step = complex_divide(value, deriv)
        except DivisionByZeroError:
            kick = rng.uniform(-1.0, 1.0) + 1j * rng.uniform(-1.0, 1.0)
            s = s + perturb * max(abs(s), 1.0) * kick
            continue

        if abs(step) > 1.0:
            step = step * damping / abs(step)
        s = s - step

    # Accept a slightly worse root rather than giving up
    value = evaluate(p, s)
    relaxed = 1e-10 if retry else tolerance
    if _is_converged(p, s, value, relaxed):
        return s

    accept = 1e-7 if retry else 1e-8
    if abs(value) < accept * max(1.0, _roundoff_bound(p, s)):
        return s

    return None


# =============
# find one root
# =============

def _find_one_root(p, rng, tolerance, diagnostics):
    """
    Run the three stage search with up to three different starting shifts.
    """

    pm = p.astype(complex) / p[0]
    radius = cauchy_lower_bound(pm)
    if radius == 0.0:
        radius = 1.0

    for attempt in range(_MAX_ATTEMPTS):
        sigma = _starting_shift(attempt, radius, rng)
        root = _three_stage(pm, sigma, attempt, rng, tolerance)
        if root is not None:
            return complex(root)

        diagnostics.append(f'Jenkins-Traub attempt {attempt + 1} did not '
                           f'converge for degree {p.size - 1}.')

    return None


# ===============
# is complex root
# ===============

def _is_complex_root(p, root, tolerance):
    """
    Whether an accepted root of a real polynomial is one member of a
    conjugate pair.

    An imaginary part below ``sqrt(eps) |root|`` is taken as rounding noise
    if the real part alone solves the polynomial about as well as the root.
    """

    scale = max(1.0, abs(root))
    if abs(root.imag) <= 1e-12 * scale:
        return False
    if abs(root.imag) > _PAIR_THRESHOLD * scale:
        return True

    real_residual, residual = relative_residuals(p, [root.real, root])
    return real_residual > max(10.0 * residual, tolerance, 100.0 * _EPS)


# ========================
# find roots jenkins traub
# ========================

def find_roots_jenkins_traub(coeffs, rng=None, convergence_tolerance=1e-12,
                             diagnostics=None):
    """
    Roots of a polynomial by the Jenkins-Traub three stage algorithm.

    Parameters
    ----------

    coeffs : array_like
        Coefficients, highest degree first.

    rng : int, numpy.random.Generator, or None, default=None
        Source of the random starting shifts and perturbations.

    convergence_tolerance : float, default=1e-12
        Relative residual at which a single root is accepted.

    diagnostics : list, default=None
        If a list is given, messages about ill-conditioning, failed attempts
        and fallbacks are appended to it.

    Returns
    -------

    roots : numpy.ndarray
        Complex roots, one per degree.

    Raises
    ------

    zplane.RootFindingError
        With code ``'JENKINS_TRAUB_FAILURE'`` if the iteration produced
        non-finite roots.

    Notes
    -----

    Roots are found one at a time. Each search starts with no-shift
    iterations of the H polynomial (stage 1), continues with variable shift
    iterations ``s <- s - P(s) / H(s)`` (stage 2) and finishes with damped
    Newton steps (stage 3). A found root is removed by synthetic division
    (both members of a conjugate pair at once for real polynomials) and the
    search restarts on the quotient until the degree is three, which is
    solved in closed form.

    When three starting shifts all fail, the remaining roots are taken from
    the eigenvalues of the companion matrix. This fallback is best-effort.

    Finally every root is polished by a few Newton steps on the undeflated
    polynomial. If the polished roots still leave a relative residual above
    ``1e-8``, they are recomputed from the companion matrix and refined by
    Aberth-Ehrlich iteration when needed.

    Examples
    --------

    .. code-block:: python

        >>> from zplane import find_roots_jenkins_traub
        >>> roots = find_roots_jenkins_traub([1, -10, 35, -50, 24], rng=0)
    """

    rng = make_rng(rng)
    if diagnostics is None:
        diagnostics = []

    c = poly_trim(coeffs)
    degree = c.size - 1
    if degree < 1:
        return numpy.zeros(0, dtype=complex)

    c = scale_coefficients(c)

    # Exact roots at the origin
    nonzero = numpy.flatnonzero(c != 0)
    zero_count = c.size - 1 - nonzero[-1]
    roots = [0j] * zero_count
    c = c[:c.size - zero_count]
    original = c

    if c.size > 1 and _is_ill_conditioned(c):
        diagnostics.append('Ill-conditioned coefficients, stabilized before '
                           'Jenkins-Traub iteration.')
        c = _stabilize(c, rng, c.size - 1)

    p = c
    is_real = numpy.isrealobj(p)

    while p.size - 1 > 3:
        root = _find_one_root(p, rng, convergence_tolerance, diagnostics)

        if root is None:
            diagnostics.append(f'Falling back to companion matrix for the '
                               f'remaining {p.size - 1} roots.')
            rest, exact = find_roots_companion(p, return_status=True)
            if not exact:
                diagnostics.append('Companion matrix QR did not fully '
                                   'reduce.')
            roots.extend(rest)
            p = p[:1]
            break

        if is_real and _is_complex_root(p, root, convergence_tolerance):
            p = deflate_conjugate_pair(p, root)
            roots.extend([root, root.conjugate()])
        elif is_real:
            p = synthetic_division(p, root.real)
            roots.append(complex(root.real))
        else:
            p = synthetic_division(p, root)
            roots.append(root)

        p = scale_coefficients(p)

    if p.size > 1:
        roots.extend(find_roots_analytic(p))

    roots = numpy.array(roots, dtype=complex)
    if original.size > 1:
        roots[zero_count:] = newton_polish(original, roots[zero_count:],
                                           convergence_tolerance, 3)

    if not numpy.all(numpy.isfinite(roots)):
        raise RootFindingError('Jenkins-Traub produced non-finite roots.',
                               code='JENKINS_TRAUB_FAILURE')

    # A corrupted deflation leaves roots that do not solve the polynomial
    if original.size > 1:
        residual = numpy.max(relative_residuals(original,
                                                roots[zero_count:]))
        if residual > _RESIDUAL_LIMIT:
            diagnostics.append(f'Deflated roots have residual '
                               f'{residual:.3e}, recomputing from the '
                               f'companion matrix.')
            rest = find_roots_companion(original)
            if numpy.max(relative_residuals(original, rest)) > \
                    _RESIDUAL_LIMIT:
                rest = find_roots_aberth_ehrlich(
                    original, tolerance=convergence_tolerance, rng=rng,
                    diagnostics=diagnostics, initial_roots=rest)
            rest = newton_polish(original, rest, convergence_tolerance, 3)
            other = numpy.max(relative_residuals(original, rest))
            if numpy.all(numpy.isfinite(rest)) and other < residual:
                roots[zero_count:] = rest

    return roots
