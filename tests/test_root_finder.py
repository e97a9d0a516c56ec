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
import warnings
import json
import numpy
from numpy.testing import assert_allclose, assert_array_equal
import pytest
from zplane import find_roots, RootFindingOptions, HighDegreeOptions, \
    RootFindingError, RootFindingWarning, verify_roots


# ============
# sorted roots
# ============

def _sorted(roots):
    roots = numpy.asarray(roots, dtype=complex)
    order = numpy.lexsort((numpy.round(roots.imag, 6),
                           numpy.round(roots.real, 6)))
    return roots[order]


# =================
# test closed forms
# =================

def _test_closed_forms():
    """
    Known roots of low degree polynomials.
    """

    result = find_roots([1, -5, 6])
    assert result.verified
    assert result.method == 'analytic'
    assert_allclose(_sorted(result.roots), [2, 3], atol=1e-9)

    result = find_roots([1, 0, 1])
    assert_allclose(_sorted(result.roots), [-1j, 1j], atol=1e-9)

    result = find_roots([1, 0, 0, -1])
    expected = [1.0, -0.5 + 0.8660254037844386j, -0.5 - 0.8660254037844386j]
    assert_allclose(_sorted(result.roots), _sorted(expected), atol=1e-9)

    # Leading zeros and roots at the origin
    result = find_roots([0, 0, 1, -1, 0, 0])
    assert result.roots.size == 3
    assert numpy.sum(result.roots == 0) == 2

    # Constant polynomial has no roots
    result = find_roots([5.0])
    assert result.roots.size == 0
    assert result.verified


# ===============
# test root count
# ===============

def _test_root_count():
    """
    A degree n polynomial gives n verified roots, for every method.
    """

    expected = numpy.array([0.9, -0.6, 0.2 + 0.8j, 0.2 - 0.8j, 1.3, -1.1,
                            0.5j, -0.5j])
    c = numpy.poly(expected).real

    for method in ['auto', 'jenkins', 'aberth', 'subdivision']:
        result = find_roots(c, method=method, seed=0)
        assert result.verified
        assert result.roots.size == expected.size
        assert verify_roots(c, result.roots, 1e-8).passed
        if method != 'auto':
            assert result.method == method

    # Degree above ten takes the high degree path
    rng = numpy.random.default_rng(1)
    c = rng.uniform(-1, 1, size=16)
    result = find_roots(c, seed=0)
    assert result.roots.size == 15
    assert result.verified


# ================
# test determinism
# ================

def _test_determinism():
    """
    The same seed gives identical roots.
    """

    rng = numpy.random.default_rng(3)
    c = rng.uniform(-1, 1, size=13)

    result1 = find_roots(c, seed=42)
    result2 = find_roots(c, seed=42)
    assert_array_equal(result1.roots, result2.roots)
    assert result1.method == result2.method


# ============
# test options
# ============

def _test_options():
    """
    Options given as a tuple, a dictionary or keywords.
    """

    c = [1, -10, 35, -50, 24]
    options = RootFindingOptions(method='aberth', seed=1)
    result = find_roots(c, options)
    assert result.method == 'aberth'

    result = find_roots(c, {'method': 'jenkins', 'seed': 1})
    assert result.method == 'jenkins'

    options = RootFindingOptions(
        high_degree=HighDegreeOptions(strategy='recursive'))
    result = find_roots(c, options, strategy='direct')
    assert result.verified

    with pytest.raises(RootFindingError) as error:
        find_roots(c, method='newton')
    assert error.value.code == 'INVALID_OPTIONS'

    with pytest.raises(RootFindingError) as error:
        find_roots(c, tolerance=1e-3)
    assert error.value.code == 'INVALID_OPTIONS'


# ===================
# test invalid inputs
# ===================

def _test_invalid_inputs():
    """
    Malformed coefficients fail fast with an error code.
    """

    cases = [
        ([], 'EMPTY_COEFFICIENTS'),
        ([0, 0, 0], 'ZERO_POLYNOMIAL'),
        ([1, 'a'], 'INVALID_COEFFICIENTS'),
        ([1, numpy.nan], 'INVALID_COEFFICIENTS'),
        ([1, numpy.inf], 'INVALID_COEFFICIENTS'),
        ('1, 2', 'INVALID_COEFFICIENTS'),
        ([[1, 2], [3, 4]], 'INVALID_COEFFICIENTS'),
    ]

    for coeffs, code in cases:
        with pytest.raises(RootFindingError) as error:
            find_roots(coeffs)
        assert error.value.code == code
        assert code in str(error.value)

    with pytest.raises(RootFindingError) as error:
        find_roots([1, 0, 0, 0, -1], method='analytic')
    assert error.value.code == 'UNSUPPORTED_DEGREE'


# =========================
# test graceful degradation
# =========================

def _test_graceful_degradation():
    """
    Failure handling in strict and non-strict modes.
    """

    # No root can meet a vanishing tolerance
    c = [1, 0, 0, 0, 0, -2]

    with pytest.raises(RootFindingError) as error:
        find_roots(c, verification_tolerance=1e-300)
    assert error.value.code == 'ALL_METHODS_FAILED'

    with pytest.raises(RootFindingError) as error:
        find_roots(c, method='aberth', verification_tolerance=1e-300)
    assert error.value.code == 'ABERTH_EHRLICH_INACCURATE'

    with pytest.warns(RootFindingWarning):
        result = find_roots(c, verification_tolerance=1e-300, strict=False)
    assert result.roots.size == 5
    assert not result.verified
    assert result.method == 'heuristic'
    assert len(result.attempts) > 0

    # Coefficients spanning twelve orders of magnitude
    c = [1e-6, 1.0, -3.0, 1e6, 2.0, 1e-4]
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', RootFindingWarning)
        result = find_roots(c, strict=False)
    assert result.roots.size == 5
    if result.verified:
        assert result.method != 'heuristic'
        assert verify_roots(c, result.roots, 1e-7).passed
    else:
        assert result.method == 'heuristic'

    # Strict mode either verifies or raises, with the same outcome
    try:
        strict_result = find_roots(c, strict=True)
    except RootFindingError as error:
        assert error.code == 'ALL_METHODS_FAILED'
        assert not result.verified
    else:
        assert strict_result.verified is True
        assert result.verified
        assert strict_result.roots.size == 5


# ==============
# test serialize
# ==============

def _test_serialize():
    """
    Results convert to plain JSON.
    """

    result = find_roots([1, 0, 1])
    data = result.to_dict()
    text = json.dumps(data)

    assert data['verified'] is True
    assert len(data['roots']) == 2
    assert set(data['roots'][0].keys()) == {'re', 'im'}
    assert isinstance(text, str)


# ===============
# test find roots
# ===============

def test_find_roots():
    """
    A test for :func:`zplane.find_roots`.
    """

    _test_closed_forms()
    _test_root_count()
    _test_determinism()
    _test_options()
    _test_invalid_inputs()
    _test_graceful_degradation()
    _test_serialize()


# ===========
# script main
# ===========

if __name__ == "__main__":
    sys.exit(test_find_roots())
