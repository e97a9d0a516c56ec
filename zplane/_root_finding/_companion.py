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
import scipy.linalg
from .._kernel import poly_trim

__all__ = ['companion_matrix', 'find_roots_companion']


# ================
# companion matrix
# ================

def companion_matrix(coeffs):
    """
    Upper Hessenberg companion matrix of a polynomial.

    The first row holds ``-a_i / a_0`` and the first subdiagonal is one, so
    the eigenvalues are the roots of the polynomial.
    """

    c = poly_trim(coeffs).astype(complex)
    n = c.size - 1
    if n < 1:
        raise ValueError('Polynomial degree must be at least one.')

    C = numpy.zeros((n, n), dtype=complex)
    C[0, :] = -c[1:] / c[0]
    if n > 1:
        C[1:, :-1] = numpy.eye(n - 1, dtype=complex)

    return C


# =======================
# rayleigh quotient shift
# =======================

def _rayleigh_quotient_shift(A, mu, max_iterations=20):
    """
    Estimate the eigenvalue of ``A`` nearest to ``mu`` by Rayleigh quotient
    iteration.
    """

    n = A.shape[0]
    v = numpy.ones(n, dtype=complex) / numpy.sqrt(n)
    norm_A = max(numpy.linalg.norm(A, ord=1), 1e-300)
    eye = numpy.eye(n, dtype=complex)

    for _ in range(max_iterations):
        try:
            w = scipy.linalg.solve(A - mu * eye, v)
        except (numpy.linalg.LinAlgError, ValueError):
            # The shift is an eigenvalue to working precision
            break

        norm_w = numpy.linalg.norm(w)
        if not numpy.isfinite(norm_w) or norm_w == 0.0:
            break

        v = w / norm_w
        mu = numpy.vdot(v, A @ v)
        if numpy.linalg.norm(A @ v - mu * v) <= 1e-14 * norm_A:
            break

    return complex(mu)


# ===============
# wilkinson shift
# ===============

def _wilkinson_shift(H):
    """
    Eigenvalue of the trailing 2x2 block closest to the last diagonal entry.
    """

    a, b = H[-2, -2], H[-2, -1]
    c, d = H[-1, -2], H[-1, -1]
    half_trace = 0.5 * (a + d)
    sq = numpy.sqrt(half_trace * half_trace - (a * d - b * c) + 0j)
    mu1 = half_trace + sq
    mu2 = half_trace - sq

    return mu1 if abs(mu1 - d) <= abs(mu2 - d) else mu2


# ==========
# shifted qr
# ==========

def _shifted_qr(H, max_iterations_per_root=60):
    """
    Eigenvalues of an upper Hessenberg matrix by explicitly shifted QR.

    The trailing eigenvalue is deflated whenever the last subdiagonal entry is
    negligible. Stalled blocks first receive exceptional shifts, and then an
    exact shift from Rayleigh quotient iteration. Any block that still does
    not reduce contributes its diagonal as the eigenvalue estimates.
    """

    H = numpy.array(H, dtype=complex)
    eps = numpy.finfo(float).eps
    eigenvalues = []
    hi = H.shape[0]
    exact = True

    while hi > 0:
        if hi == 1:
            eigenvalues.append(H[0, 0])
            break

        for iteration in range(max_iterations_per_root + 1):
            sub = abs(H[hi - 1, hi - 2])
            scale = abs(H[hi - 1, hi - 1]) + abs(H[hi - 2, hi - 2])
            if sub <= eps * max(scale, 1e-300):
                break

            if iteration == max_iterations_per_root:
                exact = False
                break

            block = H[:hi, :hi]
            if iteration > 0 and iteration % 20 == 0:
                mu = _rayleigh_quotient_shift(block, block[-1, -1])
            elif iteration > 0 and iteration % 10 == 0:
                # Exceptional shift
                mu = block[-1, -1] + sub * numpy.exp(1j * iteration)
            else:
                mu = _wilkinson_shift(block)

            eye = numpy.eye(hi, dtype=complex)
            Q, R = numpy.linalg.qr(block - mu * eye)
            H[:hi, :hi] = R @ Q + mu * eye

        if not exact:
            eigenvalues.extend(numpy.diag(H[:hi, :hi]))
            break

        eigenvalues.append(H[hi - 1, hi - 1])
        H[hi - 1, hi - 2] = 0.0
        hi -= 1

    return numpy.array(eigenvalues, dtype=complex), exact


# ====================
# find roots companion
# ====================

def find_roots_companion(coeffs, return_status=False):
    """
    Roots as the eigenvalues of the balanced companion matrix.

    Parameters
    ----------

    coeffs : array_like
        Coefficients, highest degree first.

    return_status : bool, default=False
        If `True`, also return whether every QR block reduced cleanly.

    Returns
    -------

    roots : numpy.ndarray
        Complex roots, one per degree.

    exact : bool
        Only returned if ``return_status`` is `True`.

    Notes
    -----

    This is a best-effort fallback: the companion matrix is balanced with
    :func:`scipy.linalg.matrix_balance`, reduced with
    :func:`scipy.linalg.hessenberg` and iterated with a simple explicitly
    shifted QR algorithm. The result is not guaranteed to be accurate and is
    always verified by the caller.
    """

    C = companion_matrix(coeffs)
    n = C.shape[0]

    if n == 1:
        roots, exact = numpy.array([C[0, 0]], dtype=complex), True
    else:
        C, _ = scipy.linalg.matrix_balance(C, permute=False)
        H = scipy.linalg.hessenberg(C)
        roots, exact = _shifted_qr(H)

    if return_status:
        return roots, exact
    return roots
