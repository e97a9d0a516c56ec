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
from zplane import find_roots_aberth_ehrlich, verify_roots


# ============
# sorted roots
# ============

def _sorted(roots):
    roots = numpy.asarray(roots, dtype=complex)
    order = numpy.lexsort((numpy.round(roots.imag, 6),
                           numpy.round(roots.real, 6)))
    return roots[order]


# =================
# test simple roots
# =================

def _test_simple_roots():
    """
    Simultaneous iteration on polynomials with simple roots.
    """

    roots = find_roots_aberth_ehrlich([1, -10, 35, -50, 24], rng=0)
    assert_allclose(_sorted(roots), [1, 2, 3, 4], atol=1e-9)

    # Roots of unity of degree twelve
    c = numpy.zeros(13)
    c[0] = 1.0
    c[-1] = -1.0
    roots = find_roots_aberth_ehrlich(c, max_iterations=150, rng=0)
    assert roots.size == 12
    assert_allclose(numpy.abs(roots), 1.0, atol=1e-9)
    assert verify_roots(c, roots, 1e-8).passed


# ===================
# test multiple roots
# ===================

def _test_multiple_roots():
    """
    A triple root is returned as a cluster of three nearby values.
    """

    c = numpy.poly([1.0, 1.0, 1.0, -2.0])
    roots = find_roots_aberth_ehrlich(c, rng=0)

    assert roots.size == 4
    assert verify_roots(c, roots, 1e-8).passed
    assert numpy.sum(numpy.abs(roots - 1.0) < 1e-3) == 3
    assert numpy.sum(numpy.abs(roots + 2.0) < 1e-8) == 1


# ==================
# test initial roots
# ==================

def _test_initial_roots():
    """
    Iteration started from given initial guesses.
    """

    c = [1, -6, 11, -6]
    roots = find_roots_aberth_ehrlich(
        c, rng=0, initial_roots=[0.5 + 0.5j, 1.5 - 0.2j, 4.0])
    assert_allclose(_sorted(roots), [1, 2, 3], atol=1e-9)


# ================
# test determinism
# ================

def _test_determinism():
    """
    The same seed gives the same roots.
    """

    rng = numpy.random.default_rng(11)
    c = rng.standard_normal(15)

    roots1 = find_roots_aberth_ehrlich(c, rng=5)
    roots2 = find_roots_aberth_ehrlich(c, rng=5)
    assert_array_equal(roots1, roots2)
    assert roots1.size == 14


# ===================
# test aberth ehrlich
# ===================

def test_aberth_ehrlich():
    """
    A test for :func:`zplane.find_roots_aberth_ehrlich`.
    """

    _test_simple_roots()
    _test_multiple_roots()
    _test_initial_roots()
    _test_determinism()


# ===========
# script main
# ===========

if __name__ == "__main__":
    sys.exit(test_aberth_ehrlich())
