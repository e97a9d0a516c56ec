#! /usr/bin/env python

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

import sys
import numpy
from numpy.testing import assert_allclose, assert_array_equal
from zplane import find_roots_jenkins_traub, find_roots, verify_roots
from zplane._root_finding._jenkins_traub import _is_complex_root


# ============
# sorted roots
# ============

def _sorted(roots):
    roots = numpy.asarray(roots, dtype=complex)
    order = numpy.lexsort((numpy.round(roots.imag, 6),
                           numpy.round(roots.real, 6)))
    return roots[order]


# ================
# test known roots
# ================

def _test_known_roots():
    """
    Integer roots of a quartic and a mix of real and complex roots.
    """

    roots = find_roots_jenkins_traub([1, -10, 35, -50, 24], rng=0)
    assert_allclose(_sorted(roots), [1, 2, 3, 4], atol=1e-9)

    expected = numpy.array([-1.5, 0.3, 0.7 + 0.4j, 0.7 - 0.4j, -0.2 + 1.1j,
                            -0.2 - 1.1j, 2.0, 1.2])
    c = numpy.poly(expected).real
    diagnostics = []
    roots = find_roots_jenkins_traub(c, rng=0, diagnostics=diagnostics)

    assert roots.size == expected.size
    assert_allclose(_sorted(roots), _sorted(expected), atol=1e-7)
    assert verify_roots(c, roots, 1e-8).passed


# ===============
# test zero roots
# ===============

def _test_zero_roots():
    """
    Trailing zero coefficients are exact roots at the origin.
    """

    roots = find_roots_jenkins_traub([1, -3, 2, 0, 0], rng=0)
    assert roots.size == 4
    assert numpy.sum(roots == 0) == 2
    assert_allclose(_sorted(roots[roots != 0]), [1, 2], atol=1e-10)


# ================
# test determinism
# ================

def _test_determinism():
    """
    The same seed gives the same roots.
    """

    rng = numpy.random.default_rng(7)
    c = rng.uniform(-1, 1, size=9)
    c[0] = 1.0

    roots1 = find_roots_jenkins_traub(c, rng=3)
    roots2 = find_roots_jenkins_traub(c, rng=3)
    assert_array_equal(roots1, roots2)
    assert roots1.size == 8


# ====================
# test real root noise
# ====================

def _test_real_root_noise():
    """
    A real root with a rounding-level imaginary part is deflated as real,
    while a genuine complex root is deflated with its conjugate.
    """

    x = -0.9675674640151258
    pair = -0.828 + 0.42j
    c = numpy.poly([x, pair, pair.conjugate(), 0.5, 2.0]).real

    assert not _is_complex_root(c, complex(x, -5.49e-12), 1e-12)
    assert _is_complex_root(c, pair, 1e-12)
    assert not _is_complex_root(c, complex(0.5, 0.0), 1e-12)


# =======================
# test random polynomials
# =======================

def _test_random_polynomials():
    """
    Bounded random polynomials of degree up to 20 are solved with verified
    roots.
    """

    rng = numpy.random.default_rng(123)
    for trial in range(300):
        degree = int(rng.integers(1, 21))
        c = rng.uniform(-10.0, 10.0, size=degree + 1)

        roots = find_roots_jenkins_traub(c, rng=trial)
        assert roots.size == degree
        assert verify_roots(c, roots, 1e-8).passed

        result = find_roots(c, method='jenkins', seed=trial)
        assert result.verified
        assert result.roots.size == degree


# ==================
# test jenkins traub
# ==================

def test_jenkins_traub():
    """
    A test for :func:`zplane.find_roots_jenkins_traub`.
    """

    _test_known_roots()
    _test_zero_roots()
    _test_determinism()
    _test_real_root_noise()
    _test_random_polynomials()


# ===========
# script main
# ===========

if __name__ == "__main__":
    sys.exit(test_jenkins_traub())
