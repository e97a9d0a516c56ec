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

from typing import NamedTuple, Optional, Tuple, List
import numpy
from ._poly_util import poly_trim, evaluate

__all__ = ['VerificationReport', 'relative_residuals', 'verify_roots']


# ===================
# Verification Report
# ===================

class VerificationReport(NamedTuple):
    """
    Outcome of checking candidate roots against a polynomial.

    Parameters
    ----------

    passed : bool
        `True` if the number of roots equals the degree, every root is finite
        and every relative residual is within tolerance.

    max_residual : float
        Largest relative residual over all roots.

    residuals : numpy.ndarray
        Relative residual of each root, see :func:`relative_residuals`.

    failures : list of int
        Indices of the (up to three) worst roots above the tolerance.

    closest_pair_distance : float
        Smallest distance between two roots, ``inf`` for fewer than two.

    closest_pair : tuple of int, optional
        Indices of the closest two roots.

    messages : list of str
        Diagnostics for ill-conditioning triage.
    """

    passed: bool
    max_residual: float
    residuals: numpy.ndarray
    failures: List[int]
    closest_pair_distance: float
    closest_pair: Optional[Tuple[int, int]]
    messages: List[str]

    def __bool__(self):
        return bool(self.passed)


# ==================
# relative residuals
# ==================

def relative_residuals(coeffs, roots):
    """
    Backward-error residual of each root.

    For a root ``r`` of ``P(z) = sum a_k z^(n-k)`` this is
    ``|P(r)| / sum |a_k| |r|^(n-k)``. The measure does not depend on the
    scaling of the coefficients and stays meaningful for roots of large
    modulus.
    """

    c = poly_trim(coeffs)
    roots = numpy.asarray(roots, dtype=complex).ravel()
    if roots.size == 0:
        return numpy.zeros(0)

    values = numpy.abs(evaluate(c, roots))
    bounds = numpy.abs(evaluate(numpy.abs(c), numpy.abs(roots)))
    bounds = numpy.maximum(bounds, numpy.finfo(float).tiny)

    return values / bounds


# ============
# verify roots
# ============

def verify_roots(coeffs, roots, tolerance=1e-8):
    """
    Check candidate roots by evaluating the polynomial at each of them.

    Parameters
    ----------

    coeffs : array_like
        Coefficients, highest degree first. Leading near-zero coefficients
        are ignored.

    roots : array_like
        Candidate roots.

    tolerance : float, default=1e-8
        Largest accepted relative residual.

    Returns
    -------

    report : VerificationReport
        Evaluates to `True` in a boolean context if the roots passed.

    Examples
    --------

    .. code-block:: python

        >>> from zplane._kernel import verify_roots
        >>> report = verify_roots([1.0, -5.0, 6.0], [2.0, 3.0])
        >>> report.passed
        True
    """

    c = poly_trim(coeffs)
    degree = c.size - 1
    roots = numpy.asarray(roots, dtype=complex).ravel()
    messages = []
    passed = True

    if roots.size != degree:
        passed = False
        messages.append(f'Expected {degree} roots, got {roots.size}.')

    finite = numpy.isfinite(roots)
    if not numpy.all(finite):
        passed = False
        messages.append(f'{int(numpy.sum(~finite))} roots are not finite.')

    residuals = numpy.full(roots.size, numpy.inf)
    if numpy.any(finite):
        residuals[finite] = relative_residuals(c, roots[finite])
    max_residual = float(numpy.max(residuals)) if roots.size > 0 else 0.0

    above = numpy.flatnonzero(residuals > tolerance)
    failures = [int(i) for i in above[numpy.argsort(-residuals[above])][:3]]
    if above.size > 0:
        passed = False
        worst = ', '.join(f'root {i}: {residuals[i]:.3e}' for i in failures)
        messages.append(f'{above.size} roots exceed tolerance {tolerance:.1e} '
                        f'({worst}).')

    closest_distance = numpy.inf
    closest_pair = None
    if roots.size > 1 and numpy.all(finite):
        dist = numpy.abs(roots[:, None] - roots[None, :])
        numpy.fill_diagonal(dist, numpy.inf)
        i, j = numpy.unravel_index(numpy.argmin(dist), dist.shape)
        closest_distance = float(dist[i, j])
        closest_pair = (int(min(i, j)), int(max(i, j)))

    if degree > 15:
        messages.append(f'High degree polynomial ({degree}): roots may be '
                        'sensitive to coefficient perturbations.')
    if closest_distance < 1e-3:
        messages.append(f'Clustered roots detected (closest pair distance '
                        f'{closest_distance:.3e}).')

    return VerificationReport(passed=passed, max_residual=max_residual,
                              residuals=residuals, failures=failures,
                              closest_pair_distance=closest_distance,
                              closest_pair=closest_pair, messages=messages)
