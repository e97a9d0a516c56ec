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
import json
import numpy
from numpy.testing import assert_allclose
import pytest
from zplane import factorize_z_transform, format_factorized_expression, \
    FactorizationError, RootFindingError, SignalType, ROCType


# ==================
# test factorization
# ==================

def _test_factorization():
    """
    Zeros, poles, gain and region of a second order transform.
    """

    result = factorize_z_transform([1, -0.5], [1, -1.7, 0.72])

    assert result.verified
    assert_allclose(result.zeros, [0.5], atol=1e-12)
    assert_allclose(numpy.sort(result.poles.real), [0.8, 0.9], atol=1e-12)
    assert result.gain == 1.0

    # Both poles inside the unit circle
    assert result.signal_type == SignalType.CAUSAL
    assert result.roc.type == ROCType.OUTSIDE_CIRCLE
    assert result.roc.description == '|z| > 0.9'

    assert result.expression.startswith('(z - 0.5) / ')
    assert '(z - 0.8)' in result.expression
    assert '(z - 0.9)' in result.expression


# ===================
# test reconstruction
# ===================

def _test_reconstruction():
    """
    Gain, zeros and poles reproduce the rational function.
    """

    rng = numpy.random.default_rng(0)
    num = rng.uniform(-1, 1, size=5)
    den = rng.uniform(-1, 1, size=6)
    den[0] = 1.0

    result = factorize_z_transform(num, den)
    assert result.zeros.size == 4
    assert result.poles.size == 5

    for z in [1.5 + 0.5j, -0.7 + 1.2j, 2.0j, -3.0]:
        expected = numpy.polyval(num, z) / numpy.polyval(den, z)
        value = result.gain * numpy.prod(z - result.zeros) / \
            numpy.prod(z - result.poles)
        assert_allclose(value, expected, rtol=1e-7)


# ===============
# test expression
# ===============

def _test_expression():
    """
    Formatting of gain, real roots, conjugate pairs and the origin.
    """

    assert format_factorized_expression([1j, -1j], [0.5]) == \
        '(z² + 1) / (z - 0.5)'
    assert format_factorized_expression([0.0], [-0.25], gain=2.0) == \
        '2 · z / (z + 0.25)'
    assert format_factorized_expression([], [0.5 + 0.5j, 0.5 - 0.5j]) == \
        '1 / (z² - z + 0.5)'
    assert format_factorized_expression([2.0], []) == '(z - 2)'

    result = factorize_z_transform([2, -1], [1, 0, 0.81])
    assert result.gain == 2.0
    assert result.expression == '2 · (z - 0.5) / (z² + 0.81)'

    result = factorize_z_transform([1, -1], generate_expression=False)
    assert result.expression == ''


# ================
# test signal type
# ================

def _test_signal_type():
    """
    Explicit, sample based and pole based signal types.
    """

    den = [1, -1.7, 0.72]

    result = factorize_z_transform([1], den, signal_type='anticausal')
    assert result.signal_type == SignalType.ANTICAUSAL
    assert result.roc.type == ROCType.INSIDE_CIRCLE
    assert_allclose(result.roc.radius, 0.8, atol=1e-12)

    result = factorize_z_transform([1], den, original_signal=numpy.ones(20))
    assert result.signal_type == SignalType.BILATERAL_EXPONENTIAL
    assert result.roc.type == ROCType.ANNULAR

    # One pole inside and one outside the unit circle
    result = factorize_z_transform([1], numpy.poly([0.5, 2.0]))
    assert result.signal_type == SignalType.BILATERAL_EXPONENTIAL
    assert result.roc.contains_unit_circle()


# ===========
# test errors
# ===========

def _test_errors():
    """
    Malformed input and failed root finding are reported as factorization
    errors.
    """

    with pytest.raises(FactorizationError) as error:
        factorize_z_transform([], [1])
    assert str(error.value).startswith('Factorization failed: ')

    with pytest.raises(FactorizationError) as error:
        factorize_z_transform([1], None)

    with pytest.raises(FactorizationError) as error:
        factorize_z_transform([1, 2], [0, 0])
    assert isinstance(error.value.__cause__, RootFindingError)
    assert 'ZERO_POLYNOMIAL' in str(error.value)

    with pytest.raises(FactorizationError):
        factorize_z_transform([1], [1, -0.5], signal_type='sideways')


# ==============
# test serialize
# ==============

def _test_serialize():
    """
    Results convert to plain JSON.
    """

    result = factorize_z_transform([1, 0, 1], [1, -0.5])
    data = result.to_dict()
    json.dumps(data)

    assert data['signal_type'] == 'causal'
    assert data['roc']['outer_radius'] is None
    assert len(data['zeros']) == 2


# ===============
# test factorizer
# ===============

def test_factorizer():
    """
    A test for :func:`zplane.factorize_z_transform`.
    """

    _test_factorization()
    _test_reconstruction()
    _test_expression()
    _test_signal_type()
    _test_errors()
    _test_serialize()


# ===========
# script main
# ===========

if __name__ == "__main__":
    sys.exit(test_factorizer())
