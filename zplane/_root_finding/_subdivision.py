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
from .._kernel import poly_trim, scale_coefficients, shift_polynomial, \
    polish_root_newton, relative_residuals
from ._aberth_ehrlich import find_roots_aberth_ehrlich

__all__ = ['find_roots_subdivision']


# ===========
# root radius
# ===========

def _root_radius(c):
    """
    Radius ``1.1 max(1, |a_i / a_0|^(1/i))`` of a disk holding all roots.
    """

    n = c.size - 1
    ratios = numpy.abs(c[1:] / c[0])
    terms = ratios ** (1.0 / numpy.arange(1, n + 1))

    return 1.1 * max(1.0, float(numpy.max(terms)))


# ============
# region roots
# ============

def _region_roots(c, center, half_width, depth, max_depth, rng, tolerance):
    """
    Roots in the square of the given center and half width.

    The square is split into four quadrants until ``max_depth`` is reached.
    At the leaves the polynomial is translated so the square sits at the
    origin, solved by Aberth-Ehrlich iteration, and only roots within
    ``1.1`` times the circumscribed radius of the square are kept.
    """

    if depth < max_depth:
        found = []
        h = 0.5 * half_width
        for dx in (-h, h):
            for dy in (-h, h):
                found.extend(_region_roots(c, center + complex(dx, dy), h,
                                           depth + 1, max_depth, rng,
                                           tolerance))
        return found

    shifted = shift_polynomial(c, -center)
    local = find_roots_aberth_ehrlich(shifted, max_iterations=50,
                                      tolerance=tolerance, rng=rng)

    radius = half_width * numpy.sqrt(2.0)
    inside = numpy.abs(local) <= 1.1 * radius

    return list(local[inside] + center)


# =============
# merge cluster
# =============

def _merge(c, roots, cluster_tolerance):
    """
    Drop candidates that repeat an already kept candidate, preferring the
    candidates with the smallest residuals.
    """

    if len(roots) == 0:
        return numpy.zeros(0, dtype=complex)

    roots = numpy.asarray(roots, dtype=complex)
    order = numpy.argsort(relative_residuals(c, roots))
    kept = []
    for i in order:
        r = roots[i]
        if all(abs(r - k) > cluster_tolerance * max(1.0, abs(r))
               for k in kept):
            kept.append(r)

    return numpy.array(kept, dtype=complex)


# ======================
# find roots subdivision
# ======================

def find_roots_subdivision(coeffs, max_subdivisions=3, tolerance=1e-12,
                           rng=None, diagnostics=None):
    """
    Roots of a polynomial by partitioning the plane into square regions.

    Parameters
    ----------

    coeffs : array_like
        Coefficients, highest degree first.

    max_subdivisions : int, default=3
        Depth of the partition. The bounding square is first cut into a
        ``2^k`` by ``2^k`` grid with ``k = min(4, max_subdivisions)``, and
        every cell is split into quadrants for the remaining depth.

    tolerance : float, default=1e-12
        Tolerance passed to the local Aberth-Ehrlich solves.

    rng : int, numpy.random.Generator, or None, default=None
        Random source of the local solves.

    diagnostics : list, default=None
        If a list is given, messages about top-up solves are appended.

    Returns
    -------

    roots : numpy.ndarray
        Complex roots, one per degree.

    Notes
    -----

    Polynomials of degree up to ten are passed to
    :func:`zplane.find_roots_aberth_ehrlich` directly. Regional candidates
    are merged, missing roots are filled from a direct Aberth-Ehrlich run on
    the full polynomial, and every root is polished with bounded Newton
    steps.
    """

    rng = make_rng(rng)
    if diagnostics is None:
        diagnostics = []

    c = poly_trim(coeffs)
    n = c.size - 1
    if n < 1:
        return numpy.zeros(0, dtype=complex)

    c = scale_coefficients(c)
    if n <= 10:
        return find_roots_aberth_ehrlich(c, max_iterations=150,
                                         tolerance=tolerance, rng=rng,
                                         diagnostics=diagnostics)

    radius = _root_radius(c)
    grid = 2 ** min(4, max_subdivisions)
    depth = max(0, max_subdivisions - min(4, max_subdivisions))
    half_width = radius / grid

    candidates = []
    for i in range(grid):
        for j in range(grid):
            center = complex(-radius + (2 * i + 1) * half_width,
                             -radius + (2 * j + 1) * half_width)
            candidates.extend(_region_roots(c, center, half_width, 0, depth,
                                            rng, tolerance))

    cluster_tolerance = max(1e-8, 1e3 * tolerance)
    roots = _merge(c, candidates, cluster_tolerance)

    # Keep the accurate candidates only
    if roots.size > 0:
        good = relative_residuals(c, roots) <= 1e-6
        roots = roots[good]

    if roots.size != n:
        diagnostics.append(f'Subdivision found {roots.size} of {n} roots, '
                           f'completing with a direct solve.')
        direct = find_roots_aberth_ehrlich(c, max_iterations=150,
                                           tolerance=tolerance, rng=rng,
                                           diagnostics=diagnostics)
        if roots.size > n:
            order = numpy.argsort(relative_residuals(c, roots))
            roots = roots[order[:n]]
        else:
            # Add the direct roots that are farthest from the ones we have
            needed = n - roots.size
            if roots.size > 0:
                dist = numpy.min(numpy.abs(direct[:, None] -
                                           roots[None, :]), axis=1)
                order = numpy.argsort(-dist)
            else:
                order = numpy.arange(direct.size)
            roots = numpy.concatenate((roots, direct[order[:needed]]))

    roots = numpy.array([polish_root_newton(c, r, tolerance, 10)
                         for r in roots], dtype=complex)

    return roots
