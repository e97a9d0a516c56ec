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

from enum import Enum
from typing import NamedTuple, Optional
import numpy
from .._util import format_number

__all__ = ['SignalType', 'ROCType', 'ROCOperation', 'ROC', 'ROCAnalysis',
           'determine_roc', 'combine_rocs', 'infer_signal_type',
           'is_stable', 'causality', 'analyze_roc_with_explanation']


# ===========
# Signal Type
# ===========

class SignalType(str, Enum):
    """
    Assumption on the support of a sequence, which selects the ROC rule.
    """

    CAUSAL = 'causal'
    ANTICAUSAL = 'anticausal'
    NONCAUSAL = 'noncausal'
    FINITE_DURATION = 'finite_duration'
    BILATERAL_EXPONENTIAL = 'bilateral_exponential'


# ========
# ROC Type
# ========

class ROCType(str, Enum):
    """
    Shape of a region of convergence.
    """

    ENTIRE_PLANE = 'ENTIRE_PLANE'
    OUTSIDE_CIRCLE = 'OUTSIDE_CIRCLE'
    INSIDE_CIRCLE = 'INSIDE_CIRCLE'
    ANNULAR = 'ANNULAR'
    NONE = 'NONE'


# =============
# ROC Operation
# =============

class ROCOperation(str, Enum):
    """
    Operation on two transforms. Products and sums of transforms converge on
    the intersection of the two ROCs, convolution on their union.
    """

    MULTIPLY = 'multiply'
    CONVOLVE = 'convolve'
    ADD = 'add'


# ===
# ROC
# ===

class ROC(NamedTuple):
    """
    Region of convergence ``inner_radius < |z| < outer_radius``.

    Parameters
    ----------

    type : ROCType
        Shape of the region.

    inner_radius : float
        Lower bound of ``|z|``. Zero for regions reaching the origin, and
        ``inf`` for the empty region.

    outer_radius : float
        Upper bound of ``|z|``. ``inf`` for regions reaching infinity, and
        zero for the empty region.

    includes_zero : bool
        Whether ``z = 0`` belongs to the region.

    includes_infinity : bool
        Whether ``z = inf`` belongs to the region.

    description : str
        Human readable form, such as ``'|z| > 1'``.

    Notes
    -----

    The circle radius of an ``OUTSIDE_CIRCLE`` region is its
    ``inner_radius`` and that of an ``INSIDE_CIRCLE`` region is its
    ``outer_radius``. The property :attr:`radius` returns it for both.
    """

    type: ROCType
    inner_radius: float
    outer_radius: float
    includes_zero: bool
    includes_infinity: bool
    description: str

    # ============
    # entire plane
    # ============

    @classmethod
    def entire_plane(cls, includes_zero=True, includes_infinity=True):
        """
        The whole z-plane, possibly without the origin or infinity.
        """

        excluded = []
        if not includes_zero:
            excluded.append('z = 0')
        if not includes_infinity:
            excluded.append('z = ∞')

        if excluded:
            description = 'All z except ' + ' and '.join(excluded)
        else:
            description = 'All z'

        return cls(ROCType.ENTIRE_PLANE, 0.0, numpy.inf, bool(includes_zero),
                   bool(includes_infinity), description)

    # ==============
    # outside circle
    # ==============

    @classmethod
    def outside_circle(cls, radius):
        """
        The region ``|z| > radius``, including infinity.
        """

        radius = float(radius)
        if radius < 0:
            raise ValueError('"radius" should be non-negative.')

        return cls(ROCType.OUTSIDE_CIRCLE, radius, numpy.inf, False, True,
                   f'|z| > {format_number(radius)}')

    # =============
    # inside circle
    # =============

    @classmethod
    def inside_circle(cls, radius):
        """
        The region ``|z| < radius``, including the origin.
        """

        radius = float(radius)
        if radius < 0:
            raise ValueError('"radius" should be non-negative.')

        return cls(ROCType.INSIDE_CIRCLE, 0.0, radius, True, False,
                   f'|z| < {format_number(radius)}')

    # =======
    # annular
    # =======

    @classmethod
    def annular(cls, inner_radius, outer_radius):
        """
        The ring ``inner_radius < |z| < outer_radius``.
        """

        inner_radius = float(inner_radius)
        outer_radius = float(outer_radius)
        if not (0.0 <= inner_radius < outer_radius):
            raise ValueError('Annular region needs 0 <= inner < outer.')

        return cls(ROCType.ANNULAR, inner_radius, outer_radius, False, False,
                   f'{format_number(inner_radius)} < |z| < '
                   f'{format_number(outer_radius)}')

    # ====
    # none
    # ====

    @classmethod
    def none(cls):
        """
        The empty region.
        """

        return cls(ROCType.NONE, numpy.inf, 0.0, False, False,
                   'Empty (no region of convergence)')

    # ======
    # radius
    # ======

    @property
    def radius(self):
        """
        Circle radius of one-sided regions, `None` otherwise.
        """

        if self.type == ROCType.OUTSIDE_CIRCLE:
            return self.inner_radius
        elif self.type == ROCType.INSIDE_CIRCLE:
            return self.outer_radius
        return None

    # ============
    # radius range
    # ============

    def radius_range(self):
        """
        ``(min, max)`` bounds of ``|z|``. The empty region gives
        ``(inf, 0)``.
        """

        return self.inner_radius, self.outer_radius

    # ====================
    # contains unit circle
    # ====================

    def contains_unit_circle(self):
        """
        Whether ``|z| = 1`` lies inside the region.
        """

        if self.type == ROCType.NONE:
            return False
        return self.inner_radius < 1.0 < self.outer_radius

    # =======
    # to dict
    # =======

    def to_dict(self):
        """
        JSON-serializable representation. Infinite radii become `None`.
        """

        def _finite(x):
            return float(x) if numpy.isfinite(x) else None

        return {
            'type': self.type.value,
            'inner_radius': _finite(self.inner_radius),
            'outer_radius': _finite(self.outer_radius),
            'includes_zero': bool(self.includes_zero),
            'includes_infinity': bool(self.includes_infinity),
            'description': self.description,
        }


# ==========
# from range
# ==========

def _from_range(low, high, includes_zero, includes_infinity):
    """
    Most specific region for the radius range ``(low, high)``. Exclusions
    of the origin and of infinity carry over to one-sided regions.
    """

    if not (low < high):
        return ROC.none()

    if low <= 0.0 and numpy.isinf(high):
        return ROC.entire_plane(includes_zero, includes_infinity)
    elif numpy.isinf(high):
        roc = ROC.outside_circle(low)
        if not includes_infinity:
            roc = roc._replace(includes_infinity=False,
                               description=roc.description + ', z ≠ ∞')
        return roc
    elif low <= 0.0:
        roc = ROC.inside_circle(high)
        if not includes_zero:
            roc = roc._replace(includes_zero=False,
                               description=roc.description + ', z ≠ 0')
        return roc
    else:
        return ROC.annular(low, high)


# ===============
# pole magnitudes
# ===============

def _pole_magnitudes(poles, ignore_zero_poles, tolerance):
    poles = numpy.asarray(poles, dtype=complex).ravel()
    magnitudes = numpy.abs(poles)
    if ignore_zero_poles:
        magnitudes = magnitudes[magnitudes > tolerance]
    return magnitudes


# =============
# bilateral roc
# =============

def _bilateral_roc(min_mag, max_mag, growth_rate, decay_rate):
    """
    Annulus between the smallest and largest pole magnitude.

    Poles of (nearly) one magnitude give a thin ring of two percent around
    it. Known growth and decay rates of the two tails can tighten the ring.
    """

    if abs(max_mag - min_mag) < 1e-6:
        if min_mag == 0.0:
            return ROC.none()
        return ROC.annular(0.98 * min_mag, 1.02 * min_mag)

    inner = min_mag
    outer = max_mag

    if (growth_rate is not None) and (decay_rate is not None):
        growth = abs(growth_rate)
        decay = abs(decay_rate)
        if growth > 0 and decay > 0:
            if growth > 1:
                inner = max(min_mag, 1.0 / growth)
            if decay < 1:
                outer = min(max_mag, 1.0 / decay)

    if not (inner < outer):
        return ROC.none()

    return ROC.annular(inner, outer)


# =============
# noncausal roc
# =============

def _noncausal_roc(magnitudes, tolerance):
    """
    Annulus over the largest gap between distinct pole magnitudes.

    This is a heuristic. A single distinct magnitude ``r`` gives the ring
    ``0.5 r < |z| < 2 r``.
    """

    sorted_mags = numpy.sort(magnitudes)
    distinct = [sorted_mags[0]]
    for m in sorted_mags[1:]:
        if m - distinct[-1] > tolerance * max(1.0, m):
            distinct.append(m)

    if len(distinct) == 1:
        r = distinct[0]
        if r == 0.0:
            return ROC.none()
        return ROC.annular(0.5 * r, 2.0 * r)

    gaps = numpy.diff(distinct)
    k = int(numpy.argmax(gaps))

    return ROC.annular(distinct[k], distinct[k + 1])


# =============
# determine roc
# =============

def determine_roc(poles=(), signal_type=SignalType.CAUSAL,
                  ignore_zero_poles=True, tolerance=1e-10, growth_rate=None,
                  decay_rate=None):
    """
    Region of convergence of a rational transform from its poles.

    Parameters
    ----------

    poles : array_like, default=()
        Poles of the transform. An empty input is valid.

    signal_type : SignalType or str, default='causal'
        Support assumption of the sequence.

    ignore_zero_poles : bool, default=True
        Discard poles with magnitude below ``tolerance``.

    tolerance : float, default=1e-10
        Tolerance on pole magnitudes.

    growth_rate : float, default=None
        Growth ratio of the left tail of a bilateral exponential sequence.

    decay_rate : float, default=None
        Decay ratio of the right tail of a bilateral exponential sequence.

    Returns
    -------

    roc : ROC
        The region of convergence.

    Notes
    -----

    * Causal: ``|z| > max |p|``.
    * Anticausal: ``|z| < min |p|``.
    * Finite duration: the entire plane.
    * Bilateral exponential: ``min |p| < |z| < max |p|``, refined by the
      growth and decay rates when both are given.
    * Noncausal: the largest gap between distinct pole magnitudes. This rule
      and the fixed-width rings are heuristics.

    Without poles the region is the entire plane, without the origin for
    anticausal sequences and without infinity for causal sequences.

    Examples
    --------

    .. code-block:: python

        >>> from zplane import determine_roc
        >>> determine_roc([0.5, -0.8], signal_type='causal').description
        '|z| > 0.8'
    """

    signal_type = SignalType(signal_type)
    magnitudes = _pole_magnitudes(poles, ignore_zero_poles, tolerance)

    if magnitudes.size == 0:
        return ROC.entire_plane(
            includes_zero=(signal_type != SignalType.ANTICAUSAL),
            includes_infinity=(signal_type != SignalType.CAUSAL))

    min_mag = float(numpy.min(magnitudes))
    max_mag = float(numpy.max(magnitudes))

    if signal_type == SignalType.CAUSAL:
        return ROC.outside_circle(max_mag)
    elif signal_type == SignalType.ANTICAUSAL:
        return ROC.inside_circle(min_mag)
    elif signal_type == SignalType.FINITE_DURATION:
        return ROC.entire_plane()
    elif signal_type == SignalType.BILATERAL_EXPONENTIAL:
        return _bilateral_roc(min_mag, max_mag, growth_rate, decay_rate)
    else:
        return _noncausal_roc(magnitudes, tolerance)


# ============
# combine rocs
# ============

def combine_rocs(roc1, roc2, operation=ROCOperation.MULTIPLY):
    """
    Region of convergence of a combination of two transforms.

    Parameters
    ----------

    roc1, roc2 : ROC
        Regions of the two operands.

    operation : ROCOperation or str, default='multiply'
        ``'multiply'`` and ``'add'`` intersect the regions, ``'convolve'``
        takes the smallest ring covering both.

    Returns
    -------

    roc : ROC
        The combined region. Disjoint intersections give the empty region.
    """

    operation = ROCOperation(operation)
    low1, high1 = roc1.radius_range()
    low2, high2 = roc2.radius_range()

    if operation == ROCOperation.CONVOLVE:
        if roc1.type == ROCType.NONE:
            return roc2
        if roc2.type == ROCType.NONE:
            return roc1
        return _from_range(min(low1, low2), max(high1, high2),
                           roc1.includes_zero or roc2.includes_zero,
                           roc1.includes_infinity or roc2.includes_infinity)

    if ROCType.NONE in (roc1.type, roc2.type):
        return ROC.none()

    return _from_range(max(low1, low2), min(high1, high2),
                       roc1.includes_zero and roc2.includes_zero,
                       roc1.includes_infinity and roc2.includes_infinity)


# =================
# infer signal type
# =================

def infer_signal_type(poles, tolerance=1e-10):
    """
    Support assumption that makes a transform with these poles stable.

    Poles are counted strictly inside, on and strictly outside the unit
    circle:

    * no poles: finite duration,
    * none outside: causal,
    * none inside: anticausal,
    * both inside and outside: bilateral exponential.
    """

    magnitudes = numpy.abs(numpy.asarray(poles, dtype=complex).ravel())
    if magnitudes.size == 0:
        return SignalType.FINITE_DURATION

    inside = int(numpy.sum(magnitudes < 1.0 - tolerance))
    outside = int(numpy.sum(magnitudes > 1.0 + tolerance))

    if outside == 0:
        return SignalType.CAUSAL
    elif inside == 0:
        return SignalType.ANTICAUSAL
    else:
        return SignalType.BILATERAL_EXPONENTIAL


# =========
# is stable
# =========

def is_stable(roc):
    """
    BIBO stability: the region contains the unit circle.
    """

    return roc.contains_unit_circle()


# =========
# causality
# =========

def causality(roc):
    """
    Causality class read from the shape of the region.

    Returns
    -------

    kind : str
        ``'causal'`` if the region extends to infinity, ``'anticausal'`` if
        it extends to the origin, ``'finite'`` for the entire plane and
        ``'noncausal'`` otherwise.
    """

    if roc.type == ROCType.OUTSIDE_CIRCLE and roc.includes_infinity:
        return 'causal'
    elif roc.type == ROCType.INSIDE_CIRCLE and roc.includes_zero:
        return 'anticausal'
    elif roc.type == ROCType.ENTIRE_PLANE:
        return 'finite'
    return 'noncausal'


# ============
# ROC Analysis
# ============

class ROCAnalysis(NamedTuple):
    """
    Region of convergence with a plain language account of it.
    """

    roc: ROC
    signal_characteristics: str
    pole_distribution: str
    roc_determination: str
    stability_analysis: str
    causality_analysis: str
    stable: Optional[bool] = None

    def to_dict(self):
        return {
            'roc': self.roc.to_dict(),
            'analysis': {
                'signal_characteristics': self.signal_characteristics,
                'pole_distribution': self.pole_distribution,
                'roc_determination': self.roc_determination,
                'stability_analysis': self.stability_analysis,
                'causality_analysis': self.causality_analysis,
            },
            'stable': bool(self.stable),
        }


_SIGNAL_TEXT = {
    SignalType.CAUSAL: 'Causal sequence: x[n] = 0 for n < 0.',
    SignalType.ANTICAUSAL: 'Anticausal sequence: x[n] = 0 for n > 0.',
    SignalType.FINITE_DURATION: 'Finite duration sequence: x[n] is zero '
                                'outside a finite range of n.',
    SignalType.BILATERAL_EXPONENTIAL: 'Bilateral exponential sequence: both '
                                      'tails grow or decay exponentially.',
    SignalType.NONCAUSAL: 'Noncausal sequence: nonzero for both negative '
                          'and positive n.',
}

_CAUSALITY_TEXT = {
    'causal': 'Causal: the region extends outward to infinity.',
    'anticausal': 'Anticausal: the region extends inward to the origin.',
    'finite': 'Finite duration: the region is the entire z-plane.',
    'noncausal': 'Noncausal: the region is bounded on both sides, so the '
                 'sequence is two-sided.',
}


# ============================
# analyze roc with explanation
# ============================

def analyze_roc_with_explanation(poles=(), signal_type=SignalType.CAUSAL,
                                 ignore_zero_poles=True, tolerance=1e-10,
                                 growth_rate=None, decay_rate=None):
    """
    Determine the region of convergence and explain it.

    Takes the same arguments as :func:`determine_roc`.

    Returns
    -------

    analysis : ROCAnalysis
        The region, texts on the sequence, the pole distribution, the region
        shape, stability and causality, and the stability flag.
    """

    signal_type = SignalType(signal_type)
    roc = determine_roc(poles, signal_type, ignore_zero_poles, tolerance,
                        growth_rate, decay_rate)

    magnitudes = _pole_magnitudes(poles, ignore_zero_poles, tolerance)
    inside = int(numpy.sum(magnitudes < 1.0 - tolerance))
    on = int(numpy.sum(numpy.abs(magnitudes - 1.0) <= tolerance))
    outside = int(numpy.sum(magnitudes > 1.0 + tolerance))

    if magnitudes.size == 0:
        distribution = 'No poles: the transform is a polynomial in z or ' \
                       'z^-1.'
    else:
        distribution = f'{inside} poles inside, {on} on and {outside} ' \
                       f'outside the unit circle.'

    if roc.type == ROCType.NONE:
        determination = 'No region of convergence exists for these poles ' \
                        'under this assumption.'
    else:
        determination = f'ROC is {roc.description} ({roc.type.value}).'

    stable = is_stable(roc)
    if stable:
        stability = 'Stable: the region contains the unit circle |z| = 1.'
    else:
        stability = 'Unstable: the region does not contain the unit ' \
                    'circle |z| = 1.'

    return ROCAnalysis(roc=roc,
                       signal_characteristics=_SIGNAL_TEXT[signal_type],
                       pole_distribution=distribution,
                       roc_determination=determination,
                       stability_analysis=stability,
                       causality_analysis=_CAUSALITY_TEXT[causality(roc)],
                       stable=stable)
