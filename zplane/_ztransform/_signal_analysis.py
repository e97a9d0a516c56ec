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

from typing import NamedTuple, Optional
import numpy
from ._roc import SignalType

__all__ = ['SignalAnalysis', 'analyze_signal']

THRESHOLD = 1e-8


# ===============
# Signal Analysis
# ===============

class SignalAnalysis(NamedTuple):
    """
    Support and growth characteristics inferred from samples.

    Parameters
    ----------

    type : SignalType
        Inferred support assumption.

    is_exponential : bool
        Consecutive sample ratios are nearly constant.

    growth_rate : float, optional
        Mean ratio of an exponential sequence if it exceeds one.

    decay_rate : float, optional
        Mean ratio of an exponential sequence if it is below one.

    is_finite_duration : bool
        The nonzero samples span less than three quarters of the samples.
    """

    type: SignalType
    is_exponential: bool
    growth_rate: Optional[float]
    decay_rate: Optional[float]
    is_finite_duration: bool


# ==============
# analyze signal
# ==============

def analyze_signal(signal):
    """
    Infer the support of a sequence from its samples.

    Parameters
    ----------

    signal : array_like
        Real samples. The sample at ``len(signal) // 2`` is taken as the time
        origin for the causal and anticausal tests.

    Returns
    -------

    analysis : SignalAnalysis
        Inferred characteristics.

    Notes
    -----

    Samples with magnitude at most ``1e-8`` are treated as zero. After
    trimming leading and trailing zeros:

    1. fewer than ``0.75 len`` nonzero-span samples means finite duration,
    2. a ratio variance below ``0.1`` of consecutive samples means an
       exponential,
    3. two halves each holding more than twenty percent of the energy of the
       other, together with an exponential shape, mean bilateral,
    4. a start no earlier than ten percent of the length before the center
       means causal, and an end no later than ten percent after it means
       anticausal.

    Fewer than three ratios give finite duration or noncausal.
    """

    x = numpy.asarray(signal, dtype=float).ravel()
    length = x.size
    nonzero = numpy.flatnonzero(numpy.abs(x) > THRESHOLD)

    if nonzero.size == 0:
        return SignalAnalysis(SignalType.FINITE_DURATION, False, None, None,
                              True)

    first = int(nonzero[0])
    last = int(nonzero[-1])
    is_finite = (last - first + 1) < 0.75 * length

    a = x[first:last]
    b = x[first + 1:last + 1]
    both = (numpy.abs(a) > THRESHOLD) & (numpy.abs(b) > THRESHOLD)
    ratios = b[both] / a[both]

    if ratios.size < 3:
        kind = SignalType.FINITE_DURATION if is_finite else \
            SignalType.NONCAUSAL
        return SignalAnalysis(kind, False, None, None, is_finite)

    mean_ratio = float(numpy.mean(ratios))
    is_exponential = float(numpy.var(ratios)) < 0.1

    mid = length // 2
    energy_first = float(numpy.sum(x[:mid] ** 2))
    energy_second = float(numpy.sum(x[mid:] ** 2))
    is_bilateral = (energy_first > 0.2 * energy_second) and \
        (energy_second > 0.2 * energy_first)

    if is_finite:
        kind = SignalType.FINITE_DURATION
    elif is_bilateral and is_exponential:
        kind = SignalType.BILATERAL_EXPONENTIAL
    elif first >= mid - 0.1 * length:
        kind = SignalType.CAUSAL
    elif last <= mid + 0.1 * length:
        kind = SignalType.ANTICAUSAL
    else:
        kind = SignalType.NONCAUSAL

    growth = mean_ratio if (is_exponential and mean_ratio > 1) else None
    decay = mean_ratio if (is_exponential and mean_ratio < 1) else None

    return SignalAnalysis(kind, is_exponential, growth, decay, is_finite)
