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
from zplane import ZTransformError, ROCType, compute_z_transform, \
    compute_inverse_z_transform, multiply_z_transforms, \
    time_shift_z_transform, calculate_frequency_response, \
    get_common_z_transform, format_z_transform_expression


# ========================
# test compute z transform
# ========================

def _test_compute_z_transform():
    """
    Forward transform of finite sequences.
    """

    zt = compute_z_transform([1, 0.5, 0.25])
    assert zt.expression == '1 + 0.5z^{-1} + 0.25z^{-2}'
    assert_allclose(zt.numerator, [1, 0.5, 0.25])
    assert_allclose(zt.denominator, [1])
    assert zt.roc.type == ROCType.ENTIRE_PLANE
    assert zt.zeros is None

    zt = compute_z_transform([1, -3, 2], factorized=True)
    assert_allclose(numpy.sort(zt.zeros.real), [1, 2], atol=1e-10)
    assert_allclose(zt.poles, [0, 0], atol=1e-12)
    assert zt.gain == 1.0

    zt = compute_z_transform([0, 0, 0])
    assert zt.expression == '0'
    assert zt.roc.type == ROCType.ENTIRE_PLANE

    zt = compute_z_transform([1, 2, 3], limit=2)
    assert_allclose(zt.numerator, [1, 2])

    zt = compute_z_transform([1, 2, 3], causal=False)
    assert zt.expression == 'z^{1} + 2 + 3z^{-1}'

    json.dumps(compute_z_transform([1, -3, 2], factorized=True).to_dict())


# ==================
# test invalid input
# ==================

def _test_invalid_input():
    """
    Validation error codes of the forward transform.
    """

    cases = [
        (dict(signal=None), 'INVALID_SIGNAL'),
        (dict(signal='abc'), 'INVALID_SIGNAL_TYPE'),
        (dict(signal=[]), 'EMPTY_SIGNAL'),
        (dict(signal=[1, 'a']), 'INVALID_SIGNAL_VALUE_TYPE'),
        (dict(signal=[1, numpy.nan]), 'INVALID_SIGNAL_VALUE_NAN'),
        (dict(signal=[1, numpy.inf]), 'INVALID_SIGNAL_VALUE_INFINITE'),
        (dict(signal=[1], limit=1.5), 'INVALID_LIMIT_TYPE'),
        (dict(signal=[1], limit=0), 'INVALID_LIMIT'),
        (dict(signal=[1], causal=1), 'INVALID_CAUSAL_FLAG'),
        (dict(signal=[1], factorized='yes'), 'INVALID_FACTORIZED_FLAG'),
        (dict(signal=[1], signal_type='periodic'), 'INVALID_SIGNAL_TYPE'),
        (dict(signal=[1], factorization_options=[1]),
         'INVALID_FACTORIZATION_OPTIONS'),
    ]

    for kwargs, code in cases:
        with pytest.raises(ZTransformError) as error:
            compute_z_transform(**kwargs)
        assert error.value.code == code


# ========================
# test inverse z transform
# ========================

def _test_inverse_z_transform():
    """
    Long division of rational transforms.
    """

    n = numpy.arange(8)

    zt = get_common_z_transform('exponential', a=0.5)
    assert_allclose(compute_inverse_z_transform(zt, 8), 0.5 ** n)

    zt = get_common_z_transform('unit_step')
    assert_allclose(compute_inverse_z_transform(zt, 8), numpy.ones(8))

    x = compute_inverse_z_transform({'numerator': [1, 2, 3]}, 5,
                                    causal=False, offset=1)
    assert_allclose(x, [0, 1, 2, 3, 0])

    with pytest.raises(ZTransformError) as error:
        compute_inverse_z_transform(zt, 0)
    assert error.value.code == 'INVALID_LENGTH'

    with pytest.raises(ZTransformError) as error:
        compute_inverse_z_transform(
            {'numerator': [1], 'denominator': [0, 1]}, 4)
    assert error.value.code == 'ZERO_LEADING_COEFFICIENT'

    with pytest.raises(ZTransformError) as error:
        compute_inverse_z_transform({'denominator': [1]}, 4)
    assert error.value.code == 'MISSING_NUMERATOR'


# ======================
# test transform algebra
# ======================

def _test_transform_algebra():
    """
    Products and delays of transforms.
    """

    step = get_common_z_transform('unit_step')
    exp = get_common_z_transform('exponential', a=0.5)

    zt = multiply_z_transforms(step, exp)
    assert_allclose(zt.numerator, [1])
    assert_allclose(zt.denominator, [1, -1.5, 0.5])
    assert zt.roc.description == '|z| > 1'

    # Convolution of the step and exponential sequences
    x = compute_inverse_z_transform(zt, 6)
    assert_allclose(x, numpy.cumsum(0.5 ** numpy.arange(6)))

    zt = time_shift_z_transform(exp, 2)
    assert_allclose(zt.numerator, [0, 0, 1])
    assert zt.roc == exp.roc
    assert_allclose(compute_inverse_z_transform(zt, 5),
                    [0, 0, 1, 0.5, 0.25])

    zt = time_shift_z_transform({'numerator': [1, 2, 3]}, -1)
    assert_allclose(zt.numerator, [2, 3])

    with pytest.raises(ZTransformError) as error:
        time_shift_z_transform(exp, -1)
    assert error.value.code == 'INVALID_ADVANCE'

    with pytest.raises(ZTransformError) as error:
        time_shift_z_transform(exp, 1.5)
    assert error.value.code == 'INVALID_DELAY'


# =======================
# test frequency response
# =======================

def _test_frequency_response():
    """
    Response on the upper unit semicircle.
    """

    zt = get_common_z_transform('exponential', a=0.5)
    response = calculate_frequency_response(zt, points=5)
    assert response.frequencies.size == 5
    assert_allclose(response.frequencies[-1], numpy.pi)
    assert_allclose(response.magnitude[0], 2.0)
    assert_allclose(response.magnitude[-1], 1.0 / 1.5)
    assert_allclose(response.phase[0], 0.0, atol=1e-12)

    # Pole on the unit circle at zero frequency
    zt = get_common_z_transform('unit_step')
    response = calculate_frequency_response(zt, points=5)
    assert numpy.isnan(response.magnitude[0])
    assert numpy.all(numpy.isfinite(response.magnitude[1:]))
    assert response.to_dict()['magnitude'][0] is None

    with pytest.raises(ZTransformError) as error:
        calculate_frequency_response(zt, points=0)
    assert error.value.code == 'INVALID_POINTS'


# ========================
# test common z transforms
# ========================

def _test_common_z_transforms():
    """
    Transforms of standard sequences.
    """

    n = numpy.arange(16)
    omega = numpy.pi / 5

    zt = get_common_z_transform('unit_step')
    assert zt.roc.description == '|z| > 1'
    assert_allclose(zt.poles, [1], atol=1e-10)
    assert_allclose(zt.zeros, [0], atol=1e-10)

    zt = get_common_z_transform('exponential', a=0.8)
    assert_allclose(zt.roc.radius, 0.8)

    zt = get_common_z_transform('sine', omega=omega)
    assert_allclose(compute_inverse_z_transform(zt, 16),
                    numpy.sin(omega * n), atol=1e-12)
    assert_allclose(zt.roc.radius, 1.0)

    zt = get_common_z_transform('cosine', omega=omega, phi=0.3)
    assert_allclose(compute_inverse_z_transform(zt, 16),
                    numpy.cos(omega * n + 0.3), atol=1e-12)

    zt = get_common_z_transform('unit_impulse')
    assert zt.roc.type == ROCType.ENTIRE_PLANE
    assert zt.expression == '1'

    zt = get_common_z_transform('unit_impulse', delay=2)
    assert_allclose(zt.numerator, [0, 0, 1])
    assert zt.roc.type == ROCType.ENTIRE_PLANE
    assert not zt.roc.includes_zero

    with pytest.raises(ZTransformError) as error:
        get_common_z_transform('ramp')
    assert error.value.code == 'INVALID_SEQUENCE_TYPE'


# ===============
# test expression
# ===============

def _test_expression():
    """
    Expressions in powers of z^{-1}.
    """

    text = format_z_transform_expression([1, 0.5], [1, -0.9])
    assert text == '(1 + 0.5z^{-1}) / (1 - 0.9z^{-1})'

    text = format_z_transform_expression([0, -1, 0, 2])
    assert text == '-z^{-1} + 2z^{-3}'

    assert format_z_transform_expression([0, 0]) == '0'


# ================
# test z transform
# ================

def test_z_transform():
    """
    A test for Z-transform functions.
    """

    _test_compute_z_transform()
    _test_invalid_input()
    _test_inverse_z_transform()
    _test_transform_algebra()
    _test_frequency_response()
    _test_common_z_transforms()
    _test_expression()


# ===========
# script main
# ===========

if __name__ == "__main__":
    sys.exit(test_z_transform())
