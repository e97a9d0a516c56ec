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
from numpy.testing import assert_allclose
from zplane import find_roots_subdivision, verify_roots


# ===============
# test low degree
# ===============

def _test_low_degree():
    """
    Low degree polynomials are solved directly.
    """

    roots = find_roots_subdivision([1, -10, 35, -50, 24], rng=0)
    assert_allclose(numpy.sort(roots.real), [1, 2, 3, 4], atol=1e-9)


# ================
# test high degree
# ================

def _test_high_degree():
    """
    Regional solves on a degree twelve polynomial.
    """

    expected = numpy.concatenate((
        numpy.exp(2j * numpy.pi * numpy.arange(6) / 6),
        [0.3, -0.4, 1.5, -2.0, 0.5 + 0.5j, 0.5 - 0.5j]))
    c = numpy.poly(expected).real

    diagnostics = []
    roots = find_roots_subdivision(c, max_subdivisions=1, rng=0,
                                   diagnostics=diagnostics)

    assert roots.size == 12
    assert verify_roots(c, roots, 1e-8).passed

    # Every expected root is matched by a found root
    dist = numpy.abs(expected[:, None] - roots[None, :])
    assert numpy.max(numpy.min(dist, axis=1)) < 1e-6


# ================
# test subdivision
# ================

def test_subdivision():
    """
    A test for :func:`zplane.find_roots_subdivision`.
    """

    _test_low_degree()
    _test_high_degree()


# ===========
# script main
# ===========

if __name__ == "__main__":
    sys.exit(test_subdivision())
