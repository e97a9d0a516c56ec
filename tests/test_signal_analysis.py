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
from zplane import analyze_signal, SignalType


# ===================
# test analyze signal
# ===================

def test_analyze_signal():
    """
    A test for :func:`zplane.analyze_signal`.
    """

    # No nonzero samples
    analysis = analyze_signal(numpy.zeros(10))
    assert analysis.type == SignalType.FINITE_DURATION
    assert analysis.is_finite_duration

    # Short pulse
    analysis = analyze_signal([0, 0, 0, 1, 1, 0, 0, 0, 0, 0])
    assert analysis.type == SignalType.FINITE_DURATION
    assert not analysis.is_exponential

    # Constant ratio and balanced energy
    analysis = analyze_signal(numpy.ones(20))
    assert analysis.type == SignalType.BILATERAL_EXPONENTIAL
    assert analysis.is_exponential
    assert analysis.growth_rate is None
    assert analysis.decay_rate is None

    # Growing and decaying exponentials
    n = numpy.arange(20)
    analysis = analyze_signal(1.1 ** n)
    assert analysis.is_exponential
    assert_allclose(analysis.growth_rate, 1.1)
    assert analysis.decay_rate is None

    analysis = analyze_signal(0.9 ** n)
    assert_allclose(analysis.decay_rate, 0.9)
    assert analysis.growth_rate is None

    # Two-sided sequence that is not exponential
    analysis = analyze_signal(0.5 ** numpy.abs(numpy.arange(21) - 10))
    assert not analysis.is_exponential
    assert analysis.type == SignalType.NONCAUSAL


# ===========
# script main
# ===========

if __name__ == "__main__":
    sys.exit(test_analyze_signal())
