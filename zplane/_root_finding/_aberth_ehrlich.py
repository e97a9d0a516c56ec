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
from .._kernel import poly_trim, scale_coefficients, evaluate, \
    evaluate_and_derivative, evaluate_with_derivatives, derivative, \
    synthetic_division, cauchy_upper_bound, fujiwara_bound, \
    is_ill_conditioned, polish_root_newton, relative_residuals
from ._analytic import find_roots_analytic
from ._companion import find_roots_companion

__all__ = ['find_roots_aberth_ehrlich']

_EPS = numpy.finfo(float).eps


# ===========
# random kick
# ===========

def _random_kick(rng, size=None):
    """
    Random complex numbers in the unit square.
    """

    return rng.uniform(-1.0, 1.0, size=size) + \
        1j * rng.uniform(-1.0, 1.0, size=size)


# ===============
# initial guesses
# ===============

def _initial_guesses(c, rng):
    """
    Starting points spread over a disk bounded by the root modulus bound.

    * Degree up to 10: one jittered circle.
    * Degree 11 to 30: three interleaved bands, near, inside and outside the
      unit circle.
    * Degree above 30: stratified shells between ``0.2`` and the bound.
    """

    n = c.size - 1
    bound = min(cauchy_upper_bound(c), fujiwara_bound(c))
    k = numpy.arange(n)
    angles = 2.0 * numpy.pi * k / n

    if n <= 10:
        angles = angles + 0.1 * rng.uniform(size=n) - 0.05
        radii = bound * (0.5 + 0.5 * rng.uniform(size=n))

    elif n <= 30:
        angles = angles + 0.1 * rng.uniform(size=n) - 0.05
        u = rng.uniform(size=n)
        band = k % 3
        radii = numpy.where(
            band == 0, 0.9 + 0.2 * u,
            numpy.where(band == 1, 0.5 + 0.4 * u,
                        1.1 + max(bound - 1.1, 0.0) * u))

    else:
        num_shells = min(5, int(numpy.floor(numpy.sqrt(n))))
        per_shell = int(numpy.ceil(n / num_shells))
        radii = numpy.empty(n)
        angles = numpy.empty(n)
        start = 0
        for shell in range(num_shells):
            count = min(per_shell, n - start)
            if count <= 0:
                break
            shell_radius = 0.2 + (bound - 0.2) * shell / (num_shells - 1)
            idx = numpy.arange(count)
            jitter = (0.5 / count) * (rng.uniform(size=count) - 0.5)
            angles[start:start + count] = 2.0 * numpy.pi * idx / count + \
                jitter
            radii[start:start + count] = shell_radius * \
                (1.0 + 0.1 * (rng.uniform(size=count) - 0.5))
            start += count

    return radii * numpy.exp(1j * angles)


# ===================
# diversified guesses
# ===================

def _diversified_guesses(c, rng):
    """
    Restart points mixed from three rings, shuffled.
    """

    n = c.size - 1
    scale = abs(c[-1] / c[0]) ** (1.0 / n) if c[-1] != 0 else 1.0
    scale = max(scale, 1e-3)

    m = int(numpy.ceil(n / 3))
    parts = []
    for low, width, offset in ((0.8, 0.4, 0.0), (1.5, 1.0, numpy.pi / m),
                               (0.2, 0.3, numpy.pi / (2 * m))):
        idx = numpy.arange(m)
        angle = 2.0 * numpy.pi * idx / m + offset + \
            0.2 * rng.uniform(size=m) - 0.1
        radius = low + width * rng.uniform(size=m)
        parts.append(radius * numpy.exp(1j * angle))

    guesses = numpy.concatenate(parts)[:n]
    rng.shuffle(guesses)

    return scale * guesses


# ==================
# aberth corrections
# ==================

def _aberth_corrections(c, z, active, rng):
    """
    Aberth corrections ``w_i = N_i / (1 - N_i S_i)`` of every active root,
    all computed from the same iterate.
    """

    value, deriv = evaluate_and_derivative(c, z)

    with numpy.errstate(divide='ignore', invalid='ignore'):
        diff = z[:, None] - z[None, :]
        numpy.fill_diagonal(diff, numpy.inf)
        S = numpy.sum(1.0 / diff, axis=1)

        flat = numpy.abs(deriv) < 1e-14
        newton = numpy.where(flat, 0.0, value / numpy.where(flat, 1.0, deriv))
        denom = 1.0 - newton * S
        singular = (numpy.abs(denom) < 1e-14) | ~numpy.isfinite(denom)

        w = numpy.where(singular, 0.5 * newton,
                        newton / numpy.where(singular, 1.0, denom))

    # A flat derivative gives no direction, so kick the root instead
    if numpy.any(flat & active):
        idx = numpy.flatnonzero(flat & active)
        scale = 0.01 * numpy.maximum(1.0, numpy.abs(z[idx]))
        w[idx] = scale * _random_kick(rng, idx.size)

    w[~active] = 0.0
    w[~numpy.isfinite(w)] = 0.0

    return w


# ======================
# weierstrass correction
# ======================

def _weierstrass_correction(c, z):
    """
    Durand-Kerner correction ``P(z_i) / (a_0 prod_{j != i} (z_i - z_j))``.
    """

    with numpy.errstate(divide='ignore', invalid='ignore', over='ignore'):
        diff = z[:, None] - z[None, :]
        numpy.fill_diagonal(diff, 1.0)
        w = evaluate(c, z) / (c[0] * numpy.prod(diff, axis=1))

    w[~numpy.isfinite(w)] = 0.0
    return w


# =============
# is stagnating
# =============

def _is_stagnating(history, window=5):
    """
    Consecutive max-changes shrink by less than ten percent on average.
    """

    if len(history) < window:
        return False

    recent = numpy.asarray(history[-window:])
    if numpy.any(recent <= 0.0):
        return False

    ratios = recent[:-1] / recent[1:]
    return float(numpy.mean(ratios)) < 1.1


# ===============
# polish laguerre
# ===============

def _polish_laguerre(c, z, tolerance, max_iterations=10):
    """
    Refine one root with Laguerre's method.

    Of the two candidate denominators ``G +- sqrt((n-1)(n H - G^2))`` the one
    of larger magnitude is used. A step is kept only if it lowers the
    residual.
    """

    n = c.size - 1
    z = complex(z)
    value, d1, d2 = evaluate_with_derivatives(c, z)

    for _ in range(max_iterations):
        if value == 0:
            break

        G = d1 / value
        H = G * G - d2 / value
        sq = numpy.sqrt(complex((n - 1) * (n * H - G * G)))
        den_plus = G + sq
        den_minus = G - sq
        den = den_plus if abs(den_plus) >= abs(den_minus) else den_minus
        if abs(den) < 1e-300:
            break

        step = n / den
        z_new = z - step
        value_new, d1_new, d2_new = evaluate_with_derivatives(c, z_new)
        if abs(value_new) >= abs(value):
            break

        z, value, d1, d2 = z_new, value_new, d1_new, d2_new
        if abs(step) <= tolerance * max(1.0, abs(z)):
            break

    return z


# ============
# polish roots
# ============

def _polish_roots(c, z, tolerance):
    """
    Newton for roots already near tolerance, Laguerre for the rest.
    """

    residuals = relative_residuals(c, z)
    polished = numpy.array(z, dtype=complex)
    for i in range(z.size):
        if residuals[i] <= 100.0 * tolerance:
            polished[i] = polish_root_newton(c, z[i], tolerance, 5)
        else:
            polished[i] = _polish_laguerre(c, z[i], tolerance)

    return polished


# ================
# is multiple root
# ================

def _is_multiple_root(c, z):
    """
    The derivative vanishes too, relative to its coefficient scale.
    """

    dc = derivative(c)
    value = abs(evaluate(dc, z))
    bound = abs(evaluate(numpy.abs(dc), abs(z)))

    return value <= 1e-5 * max(bound, 1e-300)


# ===========
# deduplicate
# ===========

def _deduplicate(c, z, tolerance):
    """
    Remove spurious duplicates of simple roots, keeping the most accurate
    copy, then recover the missing roots from the deflated quotient.
    """

    residuals = relative_residuals(c, z)
    order = numpy.argsort(residuals)
    kept = []
    dropped = 0

    for i in order:
        close = [k for k in kept
                 if abs(z[i] - z[k]) <= 10.0 * tolerance * max(1.0, abs(z[i]))]
        if close and not _is_multiple_root(c, z[i]):
            dropped += 1
        else:
            kept.append(i)

    if dropped == 0:
        return z

    kept_roots = z[kept]

    # Deflate by the kept roots, smallest modulus first
    quotient = c.astype(complex)
    for r in kept_roots[numpy.argsort(numpy.abs(kept_roots))]:
        quotient = synthetic_division(quotient, r)

    if quotient.size - 1 <= 3:
        missing = find_roots_analytic(quotient)
    else:
        missing = find_roots_companion(quotient)

    missing = numpy.array([polish_root_newton(c, r, tolerance, 10)
                           for r in missing], dtype=complex)

    return numpy.concatenate((kept_roots, missing))


# =========================
# find roots aberth ehrlich
# =========================

def find_roots_aberth_ehrlich(coeffs, max_iterations=100, tolerance=1e-12,
                              rng=None, parallel=False, diagnostics=None,
                              initial_roots=None):
    """
    All roots of a polynomial by simultaneous Aberth-Ehrlich iteration.

    Parameters
    ----------

    coeffs : array_like
        Coefficients, highest degree first.

    max_iterations : int, default=100
        Iteration budget. Raised to at least 150 for degree above 15.

    tolerance : float, default=1e-12
        Relative movement ``|w_i| / max(1, |z_i|)`` below which a root is
        considered converged. Multiplied by ten for ill-conditioned
        coefficients.

    rng : int, numpy.random.Generator, or None, default=None
        Source of the initial jitter and the perturbations.

    parallel : bool, default=False
        Accepted for interface compatibility. Corrections are always computed
        for all roots from the previous iterate and applied together, so the
        result does not depend on this flag.

    diagnostics : list, default=None
        If a list is given, messages about stagnation, restarts and early
        termination are appended to it.

    initial_roots : array_like, default=None
        Starting points. If `None`, they are placed from the root modulus
        bound.

    Returns
    -------

    roots : numpy.ndarray
        Complex roots, one per degree.

    Notes
    -----

    Each iteration computes for every root ``z_i`` the Newton quotient
    ``N_i = P(z_i) / P'(z_i)`` and the repulsion ``S_i = sum 1 / (z_i - z_j)``
    and moves the root by ``N_i / (1 - N_i S_i)``. A damped Newton step
    replaces the correction when the denominator vanishes.

    On top of the plain iteration:

    * the step is extrapolated by twenty percent while the convergence trend
      is good,
    * every fifth iteration a half Weierstrass (Durand-Kerner) step is tried
      and kept if it lowers the residuals,
    * stagnation of the max-change over five iterations escalates from mild
      perturbation to a diversified restart and then to an aggressive
      perturbation,
    * for well-conditioned polynomials of degree above ten, roots that have
      converged are frozen,
    * roots are finally polished with Newton or Laguerre steps and spurious
      duplicates are replaced by the roots of the deflated quotient.

    Examples
    --------

    .. code-block:: python

        >>> from zplane import find_roots_aberth_ehrlich
        >>> roots = find_roots_aberth_ehrlich([1, 0, 0, 0, -1], rng=0)
    """

    rng = make_rng(rng)
    if diagnostics is None:
        diagnostics = []

    c = poly_trim(coeffs)
    n = c.size - 1
    if n < 1:
        return numpy.zeros(0, dtype=complex)

    c = scale_coefficients(c)
    if n <= 2:
        return find_roots_analytic(c)

    ill = is_ill_conditioned(c)
    if ill:
        tolerance = 10.0 * tolerance
    if n > 15:
        max_iterations = max(max_iterations, 150)
    min_iterations = 8 if ill else 5

    if initial_roots is None:
        z = _initial_guesses(c, rng)
    else:
        z = numpy.array(initial_roots, dtype=complex).ravel()
        if z.size != n:
            raise ValueError('"initial_roots" should have one root per '
                             'degree.')

    deflate = (n > 10) and (not ill)
    active = numpy.ones(n, dtype=bool)
    history = []
    last_change = numpy.inf
    stagnation = 0
    converged = False

    for iteration in range(max_iterations):
        w = _aberth_corrections(c, z, active, rng)
        steps = numpy.abs(w) / numpy.maximum(1.0, numpy.abs(z))
        change = float(numpy.max(steps[active])) if numpy.any(active) else 0.0

        # Extrapolate while the trend is good
        if (iteration > 2) and (change < 0.9 * last_change) and \
                (change > 10.0 * tolerance):
            w = w * (0.96 if ill else 1.2)

        z = z - w

        if (iteration > 0) and (iteration % 5 == 0):
            z_w = z - 0.5 * _weierstrass_correction(c, z) * active
            if numpy.sum(relative_residuals(c, z_w)) < \
                    numpy.sum(relative_residuals(c, z)):
                z = z_w

        residuals = relative_residuals(c, z)
        if deflate:
            active &= ~((steps < tolerance) & (residuals < 100.0 * tolerance))

        history.append(change)
        at_roundoff = numpy.max(residuals) <= 4.0 * _EPS
        if (iteration + 1 >= min_iterations) and \
                ((change < tolerance) or at_roundoff or
                 not numpy.any(active)):
            converged = True
            break

        # Clusters of multiple roots stall at small residuals
        if (numpy.max(residuals) > 100.0 * tolerance) and \
                _is_stagnating(history):
            stagnation += 1
            history = []
            if stagnation <= 3:
                scale = 0.01 * 0.9 ** (iteration // 10)
                pick = (numpy.arange(n) % 3 == iteration % 3) & active
                z[pick] += scale * numpy.maximum(1.0, numpy.abs(z[pick])) * \
                    _random_kick(rng, int(numpy.sum(pick)))
                diagnostics.append(f'Aberth-Ehrlich stagnation at iteration '
                                   f'{iteration}, mild perturbation.')
            elif stagnation == 4:
                z = _diversified_guesses(c, rng)
                active[:] = True
                diagnostics.append(f'Aberth-Ehrlich stagnation at iteration '
                                   f'{iteration}, diversified restart.')
            else:
                z[active] += 0.1 * numpy.maximum(1.0, numpy.abs(z[active])) * \
                    _random_kick(rng, int(numpy.sum(active)))
                diagnostics.append(f'Aberth-Ehrlich stagnation at iteration '
                                   f'{iteration}, aggressive perturbation.')

        if (iteration >= 0.8 * max_iterations) and \
                (change > 100.0 * tolerance):
            diagnostics.append(f'Aberth-Ehrlich stopped early at iteration '
                               f'{iteration} with change {change:.3e}.')
            break

        last_change = change

    if not converged:
        diagnostics.append('Aberth-Ehrlich did not reach the tolerance.')

    z = _polish_roots(c, z, tolerance)
    z = _deduplicate(c, z, tolerance)

    return z
