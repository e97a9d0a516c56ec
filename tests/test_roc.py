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
from numpy.testing import assert_allclose
import pytest
from zplane import ROC, ROCType, ROCOperation, SignalType, determine_roc, \
    combine_rocs, infer_signal_type, is_stable, causality, \
    analyze_roc_with_explanation


# ==================
# test determine roc
# ==================

def _test_determine_roc():
    """
    Region of convergence for every signal type.
    """

    roc = determine_roc([0.5, -0.8], signal_type='causal')
    assert roc.type == ROCType.OUTSIDE_CIRCLE
    assert_allclose(roc.radius, 0.8)
    assert roc.description == '|z| > 0.8'
    assert roc.includes_infinity and not roc.includes_zero

    roc = determine_roc([2.0, -3.0j], signal_type=SignalType.ANTICAUSAL)
    assert roc.type == ROCType.INSIDE_CIRCLE
    assert_allclose(roc.radius, 2.0)
    assert roc.description == '|z| < 2'
    assert roc.includes_zero and not roc.includes_infinity

    roc = determine_roc([0.5, 2.0], signal_type='finite_duration')
    assert roc.type == ROCType.ENTIRE_PLANE

    roc = determine_roc([0.5, 2.0], signal_type='bilateral_exponential')
    assert roc.type == ROCType.ANNULAR
    assert roc.radius_range() == (0.5, 2.0)
    assert roc.description == '0.5 < |z| < 2'

    # Thin ring around poles of a single magnitude
    roc = determine_roc([0.9j, -0.9j], signal_type='bilateral_exponential')
    assert_allclose(roc.radius_range(), (0.9 * 0.98, 0.9 * 1.02))

    # Largest gap between distinct magnitudes
    roc = determine_roc([0.5, 0.6, 3.0], signal_type='noncausal')
    assert_allclose(roc.radius_range(), (0.6, 3.0))

    roc = determine_roc([2.0, -2.0], signal_type='noncausal')
    assert_allclose(roc.radius_range(), (1.0, 4.0))

    # Poles at the origin are ignored by default
    roc = determine_roc([0.0, 0.5])
    assert roc.description == '|z| > 0.5'

    roc = determine_roc([0.0], ignore_zero_poles=False)
    assert roc.type == ROCType.OUTSIDE_CIRCLE
    assert roc.radius == 0.0


# =============
# test no poles
# =============

def _test_no_poles():
    """
    Without poles the region is the plane, bounded by the signal type.
    """

    roc = determine_roc([], signal_type='causal')
    assert roc.type == ROCType.ENTIRE_PLANE
    assert roc.includes_zero and not roc.includes_infinity

    roc = determine_roc([], signal_type='anticausal')
    assert not roc.includes_zero and roc.includes_infinity

    roc = determine_roc([], signal_type='noncausal')
    assert roc.includes_zero and roc.includes_infinity
    assert roc.description == 'All z'


# =================
# test combine rocs
# =================

def _test_combine_rocs():
    """
    Intersection and union of regions.
    """

    a = ROC.outside_circle(0.5)
    b = ROC.outside_circle(0.8)
    roc = combine_rocs(a, b, ROCOperation.MULTIPLY)
    assert roc.type == ROCType.OUTSIDE_CIRCLE
    assert roc.radius == 0.8

    # Disjoint regions
    roc = combine_rocs(ROC.outside_circle(3.0), ROC.inside_circle(0.5),
                       'multiply')
    assert roc.type == ROCType.NONE

    roc = combine_rocs(ROC.outside_circle(0.5), ROC.inside_circle(3.0),
                       'add')
    assert roc.type == ROCType.ANNULAR
    assert roc.radius_range() == (0.5, 3.0)

    # The empty region absorbs intersections
    roc = combine_rocs(ROC.none(), ROC.entire_plane(), 'multiply')
    assert roc.type == ROCType.NONE

    # and is the identity of unions
    roc = combine_rocs(ROC.none(), b, 'convolve')
    assert roc == b

    roc = combine_rocs(ROC.annular(0.5, 1.0), ROC.annular(2.0, 3.0),
                       'convolve')
    assert roc.radius_range() == (0.5, 3.0)

    roc = combine_rocs(ROC.entire_plane(), a, 'multiply')
    assert roc == a

    # Excluded origin and infinity survive an intersection
    roc = combine_rocs(ROC.entire_plane(includes_zero=False),
                       ROC.inside_circle(2.0), 'multiply')
    assert roc.type == ROCType.INSIDE_CIRCLE
    assert roc.radius == 2.0
    assert not roc.includes_zero
    assert roc.description == '|z| < 2, z ≠ 0'
    assert causality(roc) == 'noncausal'

    roc = combine_rocs(determine_roc([], signal_type='causal'),
                       ROC.outside_circle(0.5), 'multiply')
    assert roc.type == ROCType.OUTSIDE_CIRCLE
    assert roc.radius == 0.5
    assert not roc.includes_infinity
    assert roc.description == '|z| > 0.5, z ≠ ∞'

    with pytest.raises(ValueError):
        ROC.annular(2.0, 1.0)


# ======================
# test infer signal type
# ======================

def _test_infer_signal_type():
    """
    Signal type from the pole positions relative to the unit circle.
    """

    assert infer_signal_type([]) == SignalType.FINITE_DURATION
    assert infer_signal_type([0.5, 0.3j]) == SignalType.CAUSAL
    assert infer_signal_type([2.0, -3.0]) == SignalType.ANTICAUSAL
    assert infer_signal_type([0.5, 2.0]) == \
        SignalType.BILATERAL_EXPONENTIAL


# ============================
# test stability and causality
# ============================

def _test_stability_causality():
    """
    Stability and causality read from the region.
    """

    assert is_stable(ROC.outside_circle(0.5))
    assert not is_stable(ROC.outside_circle(1.0))
    assert not is_stable(ROC.outside_circle(2.0))
    assert is_stable(ROC.inside_circle(2.0))
    assert is_stable(ROC.annular(0.5, 2.0))
    assert not is_stable(ROC.none())

    assert causality(ROC.outside_circle(0.5)) == 'causal'
    assert causality(ROC.inside_circle(2.0)) == 'anticausal'
    assert causality(ROC.entire_plane()) == 'finite'
    assert causality(ROC.annular(0.5, 2.0)) == 'noncausal'


# ============
# test explain
# ============

def _test_explain():
    """
    Plain language account of a region.
    """

    analysis = analyze_roc_with_explanation([0.5, 0.8], 'causal')
    assert analysis.stable
    assert analysis.roc.description == '|z| > 0.8'
    assert analysis.pole_distribution.startswith('2 poles inside')
    assert analysis.stability_analysis.startswith('Stable')
    assert analysis.causality_analysis.startswith('Causal')

    analysis = analyze_roc_with_explanation([1.0], 'causal')
    assert not analysis.stable

    data = analysis.to_dict()
    json.dumps(data)
    assert data['roc']['type'] == 'OUTSIDE_CIRCLE'
    assert data['roc']['outer_radius'] is None
    assert data['stable'] is False


# ========
# test roc
# ========

def test_roc():
    """
    A test for region of convergence functions.
    """

    _test_determine_roc()
    _test_no_poles()
    _test_combine_rocs()
    _test_infer_signal_type()
    _test_stability_causality()
    _test_explain()


# ===========
# script main
# ===========

if __name__ == "__main__":
    sys.exit(test_roc())
