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

import numbers
import numpy

__all__ = ['make_rng', 'complex_to_dict', 'roots_to_list', 'format_number']


# ========
# make rng
# ========

def make_rng(seed=None):
    """
    Create a random generator, or pass an existing one through.

    Parameters
    ----------

    seed : int, numpy.random.Generator, or None, default=None
        Seed for random number generation. If a generator is given, it is
        returned unchanged so that nested solvers share one stream. If `None`,
        results will not be reproducible.

    Returns
    -------

    rng : numpy.random.Generator
        The random generator.

    Examples
    --------

    .. code-block:: python

        >>> from zplane._util import make_rng
        >>> rng = make_rng(0)
        >>> rng is make_rng(rng)
        True
    """

    if isinstance(seed, numpy.random.Generator):
        return seed

    if (seed is not None) and (not isinstance(seed, numbers.Integral)):
        raise ValueError('"seed" should be an integer, a generator, or None.')

    return numpy.random.default_rng(seed)


# ===============
# complex to dict
# ===============

def complex_to_dict(z):
    """
    JSON-friendly representation of a complex number.
    """

    z = complex(z)
    return {'re': float(z.real), 'im': float(z.imag)}


# =============
# roots to list
# =============

def roots_to_list(roots):
    """
    Convert an array of complex roots to a list of ``{'re', 'im'}`` dicts.
    """

    return [complex_to_dict(r) for r in numpy.asarray(roots).ravel()]


# =============
# format number
# =============

def format_number(x, digits=4):
    """
    Format a float with at most ``digits`` decimals and no trailing zeros.

    Examples
    --------

    .. code-block:: python

        >>> format_number(1.0)
        '1'
        >>> format_number(0.123456)
        '0.1235'
    """

    if numpy.isinf(x):
        return '∞' if x > 0 else '-∞'

    text = f'{float(x):.{digits}f}'
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        text = '0'

    return text
