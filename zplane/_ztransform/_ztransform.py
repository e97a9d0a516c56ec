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
from collections.abc import Mapping
from typing import NamedTuple, Optional
import numpy
from .._errors import FactorizationError, ZTransformError
from .._util import roots_to_list, complex_to_dict, format_number
from ._roc import ROC, ROCOperation, SignalType, combine_rocs
from ._factorizer import factorize_z_transform

__all__ = ['ZTransformResult', 'FrequencyResponse', 'compute_z_transform',
           'compute_inverse_z_transform', 'multiply_z_transforms',
           'time_shift_z_transform', 'calculate_frequency_response',
           'get_common_z_transform', 'format_z_transform_expression']

_ZERO_TOLERANCE = 1e-10


# ==================
# Z Transform Result
# ==================

class ZTransformResult(NamedTuple):
    """
    Rational Z-transform in powers of :math:`z^{-1}`.

    Parameters
    ----------

    numerator : numpy.ndarray
        Coefficients :math:`b_k` of :math:`z^{-k}`.

    denominator : numpy.ndarray
        Coefficients :math:`a_k` of :math:`z^{-k}`.

    roc : ROC
        Region of convergence.

    expression : str
        Human readable form of the transform.

    zeros : numpy.ndarray, default=None
        Zeros, when the transform was factored.

    poles : numpy.ndarray, default=None
        Poles, when the transform was factored.

    gain : float, default=None
        Gain, when the transform was factored.
    """

    numerator: numpy.ndarray
    denominator: numpy.ndarray
    roc: ROC
    expression: str
    zeros: Optional[numpy.ndarray] = None
    poles: Optional[numpy.ndarray] = None
    gain: Optional[float] = None

    def to_dict(self):
        """
        JSON-serializable representation.
        """

        out = {
            'numerator': [float(b) for b in self.numerator],
            'denominator': [float(a) for a in self.denominator],
            'roc': self.roc.to_dict(),
            'expression': self.expression,
        }

        if self.zeros is not None:
            out['zeros'] = roots_to_list(self.zeros)
        if self.poles is not None:
            out['poles'] = roots_to_list(self.poles)
        if self.gain is not None:
            if isinstance(self.gain, complex):
                out['gain'] = complex_to_dict(self.gain)
            else:
                out['gain'] = float(self.gain)

        return out


# ==================
# Frequency Response
# ==================

class FrequencyResponse(NamedTuple):
    """
    Transform evaluated on the upper half of the unit circle.

    All fields are arrays of the same length. Where the denominator
    vanishes the response is `nan`.
    """

    frequencies: numpy.ndarray
    magnitude: numpy.ndarray
    phase: numpy.ndarray
    real: numpy.ndarray
    imag: numpy.ndarray

    def to_dict(self):
        """
        JSON-serializable representation, with `None` in place of `nan`.
        """

        def _list(x):
            return [float(v) if numpy.isfinite(v) else None for v in x]

        return {
            'frequencies': _list(self.frequencies),
            'magnitude': _list(self.magnitude),
            'phase': _list(self.phase),
            'real': _list(self.real),
            'imag': _list(self.imag),
        }


# ===============
# validate signal
# ===============

def _validate_signal(signal):
    """
    Check that the signal is a non-empty sequence of finite real numbers.
    """

    if signal is None:
        raise ZTransformError('Signal is None.', 'INVALID_SIGNAL')

    if isinstance(signal, numpy.ndarray):
        if signal.ndim != 1:
            raise ZTransformError('Signal must be a one dimensional array.',
                                  'INVALID_SIGNAL_TYPE')
    elif not isinstance(signal, (list, tuple)):
        raise ZTransformError('Signal must be a list, tuple or array.',
                              'INVALID_SIGNAL_TYPE')

    if len(signal) == 0:
        raise ZTransformError('Signal cannot be empty.', 'EMPTY_SIGNAL')

    for i, x in enumerate(signal):
        if isinstance(x, (bool, numpy.bool_)) or \
                not isinstance(x, numbers.Real):
            raise ZTransformError(
                f'Signal element at index {i} is not a real number (type: '
                f'{type(x).__name__}).', 'INVALID_SIGNAL_VALUE_TYPE')
        if numpy.isnan(x):
            raise ZTransformError(f'Signal element at index {i} is NaN.',
                                  'INVALID_SIGNAL_VALUE_NAN')
        if not numpy.isfinite(x):
            raise ZTransformError(f'Signal element at index {i} is not '
                                  f'finite.', 'INVALID_SIGNAL_VALUE_INFINITE')

    return numpy.asarray(signal, dtype=float)


# ================
# validate options
# ================

def _validate_options(limit, causal, factorized, signal_type,
                      factorization_options):
    if limit is not None:
        if isinstance(limit, bool) or \
                not isinstance(limit, numbers.Integral):
            raise ZTransformError('Limit must be an integer.',
                                  'INVALID_LIMIT_TYPE')
        if limit <= 0:
            raise ZTransformError('Limit must be a positive integer.',
                                  'INVALID_LIMIT')

    if not isinstance(causal, bool):
        raise ZTransformError('Causal flag must be a boolean.',
                              'INVALID_CAUSAL_FLAG')

    if not isinstance(factorized, bool):
        raise ZTransformError('Factorized flag must be a boolean.',
                              'INVALID_FACTORIZED_FLAG')

    if signal_type is not None:
        try:
            SignalType(signal_type)
        except ValueError as error:
            raise ZTransformError(f'Invalid signal type: {signal_type!r}.',
                                  'INVALID_SIGNAL_TYPE') from error

    if factorization_options is not None and \
            not isinstance(factorization_options, Mapping):
        raise ZTransformError('Factorization options must be a mapping.',
                              'INVALID_FACTORIZATION_OPTIONS')


# =====================
# validate coefficients
# =====================

def _validate_coefficients(coeffs, name):
    if isinstance(coeffs, numpy.ndarray):
        if coeffs.ndim != 1:
            raise ZTransformError(f'Z-transform {name} must be a one '
                                  f'dimensional array.',
                                  f'INVALID_{name.upper()}_TYPE')
    elif not isinstance(coeffs, (list, tuple)):
        raise ZTransformError(f'Z-transform {name} must be a list, tuple or '
                              f'array.', f'INVALID_{name.upper()}_TYPE')

    if len(coeffs) == 0:
        raise ZTransformError(f'Z-transform {name} cannot be empty.',
                              f'EMPTY_{name.upper()}')

    for i, x in enumerate(coeffs):
        if isinstance(x, (bool, numpy.bool_)) or \
                not isinstance(x, numbers.Real):
            raise ZTransformError(f'{name.capitalize()} coefficient at index '
                                  f'{i} is not a real number.',
                                  'INVALID_COEFFICIENT_TYPE')
        if not numpy.isfinite(x):
            raise ZTransformError(f'{name.capitalize()} coefficient at index '
                                  f'{i} is not finite.',
                                  'INVALID_COEFFICIENT')

    return numpy.asarray(coeffs, dtype=float)


# ======
# unpack
# ======

def _unpack(zt):
    """
    Validated numerator, denominator and ROC of a transform.

    The transform is either a :class:`ZTransformResult` or a mapping with a
    ``'numerator'`` key and optional ``'denominator'`` and ``'roc'`` keys.
    """

    if zt is None:
        raise ZTransformError('Z-transform is None.', 'INVALID_ZTRANSFORM')

    if isinstance(zt, ZTransformResult):
        numerator, denominator, roc = zt.numerator, zt.denominator, zt.roc
    elif isinstance(zt, Mapping):
        numerator = zt.get('numerator')
        denominator = zt.get('denominator', None)
        roc = zt.get('roc', None)
    else:
        raise ZTransformError('Z-transform must be a ZTransformResult or a '
                              'mapping.', 'INVALID_ZTRANSFORM_TYPE')

    if numerator is None:
        raise ZTransformError('Z-transform numerator is missing.',
                              'MISSING_NUMERATOR')

    numerator = _validate_coefficients(numerator, 'numerator')
    if denominator is None:
        denominator = numpy.ones(1)
    else:
        denominator = _validate_coefficients(denominator, 'denominator')
        if abs(denominator[0]) < _ZERO_TOLERANCE:
            raise ZTransformError('Denominator leading coefficient cannot '
                                  'be zero.', 'ZERO_LEADING_COEFFICIENT')

    if roc is None:
        roc = ROC.entire_plane()

    return numerator, denominator, roc


# ============
# equal length
# ============

def _equal_length(numerator, denominator):
    """
    Pad two polynomials in :math:`z^{-1}` with trailing zeros to a common
    length, so that both read as polynomials in :math:`z` of equal degree.
    """

    n = max(numerator.size, denominator.size)
    num = numpy.pad(numerator, (0, n - numerator.size))
    den = numpy.pad(denominator, (0, n - denominator.size))

    return num, den


# =================
# format polynomial
# =================

def _format_polynomial(coeffs, offset):
    """
    Sum of ``c_i z^{offset - i}`` terms, skipping negligible coefficients.
    """

    text = ''
    for i, c in enumerate(coeffs):
        if abs(c) < _ZERO_TOLERANCE:
            continue

        power = offset - i
        magnitude = format_number(abs(c))
        if power == 0:
            term = magnitude
        elif magnitude == '1':
            term = f'z^{{{power}}}'
        else:
            term = f'{magnitude}z^{{{power}}}'

        if text == '':
            text = term if c > 0 else f'-{term}'
        else:
            text += f' + {term}' if c > 0 else f' - {term}'

    return text or '0'


# =============================
# format z transform expression
# =============================

def format_z_transform_expression(numerator, denominator=(1.0, ), causal=True,
                                  offset=0):
    """
    Human readable form of a transform in powers of :math:`z^{-1}`.

    Parameters
    ----------

    numerator : array_like
        Coefficients of :math:`z^{-k}` of the numerator.

    denominator : array_like, default=(1.0,)
        Coefficients of :math:`z^{-k}` of the denominator.

    causal : bool, default=True
        If `False`, the numerator coefficient ``offset`` is the sample at
        the time origin.

    offset : int, default=0
        Index of the time origin in the numerator of a noncausal sequence.

    Returns
    -------

    expression : str
        Such as ``'(1 + 0.5z^{-1}) / (1 - 0.9z^{-1})'``, or the numerator
        alone when the denominator is one.

    Examples
    --------

    .. code-block:: python

        >>> from zplane import format_z_transform_expression
        >>> format_z_transform_expression([1, 2, 3], causal=False, offset=1)
        'z^{1} + 2 + 3z^{-1}'
    """

    numerator = numpy.asarray(numerator, dtype=float)
    denominator = numpy.asarray(denominator, dtype=float)

    num = _format_polynomial(numerator, 0 if causal else offset)
    if denominator.size == 1 and abs(denominator[0] - 1.0) < _ZERO_TOLERANCE:
        return num

    den = _format_polynomial(denominator, 0)
    return f'({num}) / ({den})'


# ===================
# compute z transform
# ===================

def compute_z_transform(signal, limit=None, causal=True, factorized=False,
                        signal_type=None, factorization_options=None):
    """
    Z-transform of a finite sequence.

    Parameters
    ----------

    signal : array_like
        Real samples :math:`x[n]`.

    limit : int, default=None
        Largest number of samples to use. By default all samples are used.

    causal : bool, default=True
        If `True`, the first sample is at :math:`n = 0`. If `False`, the
        middle sample ``len(signal) // 2`` is at :math:`n = 0`.

    factorized : bool, default=False
        If `True`, the zeros, poles and gain are included in the result.

    signal_type : SignalType or str, default=None
        Support assumption for the region of convergence. If not given, it is
        inferred from the samples.

    factorization_options : dict, default=None
        Keyword arguments of :func:`zplane.factorize_z_transform`, such as
        ``root_finding_options``.

    Returns
    -------

    result : ZTransformResult
        Numerator :math:`x[n]`, denominator ``[1]``, region of convergence
        and expression.

    Raises
    ------

    zplane.ZTransformError
        If the signal or an option is invalid. In factorized mode a failed
        factorization is raised as :class:`zplane.FactorizationError`.

    Notes
    -----

    The transform is :math:`X(z) = \\sum_n x[n] z^{-n}`. In the unfactorized
    mode a failed factorization does not raise, and the region of
    convergence falls back to the plane without the origin (and without
    infinity for a noncausal sequence).

    Examples
    --------

    .. code-block:: python

        >>> from zplane import compute_z_transform
        >>> zt = compute_z_transform([1, 0.5, 0.25])
        >>> zt.expression
        '1 + 0.5z^{-1} + 0.25z^{-2}'
    """

    x = _validate_signal(signal)
    _validate_options(limit, causal, factorized, signal_type,
                      factorization_options)

    if factorization_options is None:
        factorization_options = {}
    factorization_options = dict(factorization_options)
    factorization_options.pop('signal_type', None)
    factorization_options.pop('original_signal', None)

    offset = 0 if causal else x.size // 2
    terms = x.size if limit is None else min(limit, x.size)
    numerator = x[:terms].copy()
    denominator = numpy.ones(1)

    if numpy.all(numpy.abs(numerator) < _ZERO_TOLERANCE):
        return ZTransformResult(numerator=numpy.zeros(1),
                                denominator=denominator,
                                roc=ROC.entire_plane(), expression='0')

    expression = format_z_transform_expression(numerator, denominator,
                                               causal, offset)

    num, den = _equal_length(numerator, denominator)
    original_signal = x if signal_type is None else None

    if factorized:
        factors = factorize_z_transform(num, den, signal_type=signal_type,
                                        original_signal=original_signal,
                                        **factorization_options)
        return ZTransformResult(numerator=numerator, denominator=denominator,
                                roc=factors.roc, expression=expression,
                                zeros=factors.zeros, poles=factors.poles,
                                gain=factors.gain)

    try:
        factors = factorize_z_transform(num, den, signal_type=signal_type,
                                        original_signal=original_signal,
                                        generate_expression=False,
                                        **factorization_options)
        roc = factors.roc
    except FactorizationError:
        roc = ROC.entire_plane(includes_zero=False,
                               includes_infinity=causal)

    return ZTransformResult(numerator=numerator, denominator=denominator,
                            roc=roc, expression=expression)


# ===========================
# compute inverse z transform
# ===========================

def compute_inverse_z_transform(zt, length, causal=True, offset=0):
    """
    First samples of the causal sequence of a rational transform.

    Parameters
    ----------

    zt : ZTransformResult or dict
        Transform with numerator and denominator in powers of :math:`z^{-1}`.

    length : int
        Number of samples.

    causal : bool, default=True
        If `False`, the samples are delayed by ``offset``.

    offset : int, default=0
        Delay of a noncausal sequence.

    Returns
    -------

    samples : numpy.ndarray
        The sequence :math:`x[0], \\dots, x[\\text{length}-1]`.

    Raises
    ------

    zplane.ZTransformError
        If the transform is malformed or ``length`` is not a positive
        integer.

    Notes
    -----

    The samples are obtained by long division of the numerator by the
    denominator, that is, by the recursion

    .. math::

        x[n] = \\frac{1}{a_0} \\Big( b_n - \\sum_{k=1}^{n} a_k x[n-k] \\Big).
    """

    numerator, denominator, _ = _unpack(zt)

    if isinstance(length, bool) or not isinstance(length, numbers.Integral) \
            or length <= 0:
        raise ZTransformError('Length must be a positive integer.',
                              'INVALID_LENGTH')

    b = numerator / denominator[0]
    a = denominator / denominator[0]

    x = numpy.zeros(length)
    for n in range(length):
        sample = b[n] if n < b.size else 0.0
        k = numpy.arange(1, min(a.size - 1, n) + 1)
        if k.size > 0:
            sample -= numpy.dot(a[k], x[n - k])
        x[n] = sample

    if (not causal) and offset != 0:
        shifted = numpy.zeros(length)
        if 0 < offset < length:
            shifted[offset:] = x[:length - offset]
        elif -length < offset < 0:
            shifted[:length + offset] = x[-offset:]
        x = shifted

    return x


# =====================
# multiply z transforms
# =====================

def multiply_z_transforms(zt1, zt2):
    """
    Product of two transforms, the transform of the convolution of their
    sequences.

    The region of convergence is the intersection of the two regions.
    """

    num1, den1, roc1 = _unpack(zt1)
    num2, den2, roc2 = _unpack(zt2)

    numerator = numpy.convolve(num1, num2)
    denominator = numpy.convolve(den1, den2)
    roc = combine_rocs(roc1, roc2, ROCOperation.MULTIPLY)

    return ZTransformResult(
        numerator=numerator, denominator=denominator, roc=roc,
        expression=format_z_transform_expression(numerator, denominator))


# ======================
# time shift z transform
# ======================

def time_shift_z_transform(zt, delay):
    """
    Transform of the sequence delayed by ``delay`` samples.

    Parameters
    ----------

    zt : ZTransformResult or dict
        Transform to shift.

    delay : int
        A positive delay multiplies the transform by :math:`z^{-delay}`. A
        negative delay advances the sequence, dropping its leading numerator
        coefficients.

    Returns
    -------

    result : ZTransformResult
        The shifted transform with the region of convergence of ``zt``.

    Raises
    ------

    zplane.ZTransformError
        With code ``'INVALID_DELAY'`` for a non-integer delay and
        ``'INVALID_ADVANCE'`` if the advance is not shorter than the
        numerator.
    """

    numerator, denominator, roc = _unpack(zt)

    if isinstance(delay, bool) or not isinstance(delay, numbers.Integral):
        raise ZTransformError('Delay must be an integer.', 'INVALID_DELAY')

    if delay > 0:
        numerator = numpy.concatenate((numpy.zeros(delay), numerator))
    elif delay < 0:
        if -delay >= numerator.size:
            raise ZTransformError('Cannot advance the Z-transform by more '
                                  'than the number of numerator '
                                  'coefficients.', 'INVALID_ADVANCE')
        numerator = numerator[-delay:]

    return ZTransformResult(
        numerator=numerator, denominator=denominator, roc=roc,
        expression=format_z_transform_expression(numerator, denominator))


# ============================
# calculate frequency response
# ============================

def calculate_frequency_response(zt, points=1000):
    """
    Frequency response :math:`H(e^{i \\omega})` for
    :math:`0 \\leq \\omega \\leq \\pi`.

    Parameters
    ----------

    zt : ZTransformResult or dict
        Transform with numerator and denominator in powers of :math:`z^{-1}`.

    points : int, default=1000
        Number of equally spaced frequencies.

    Returns
    -------

    response : FrequencyResponse
        Frequencies, magnitude, unwrapped phase, real and imaginary parts.

    Raises
    ------

    zplane.ZTransformError
        If the transform is malformed, or with code ``'INVALID_POINTS'`` if
        ``points`` is not a positive integer.

    See Also
    --------

    zplane.visualization.plot_frequency_response

    Examples
    --------

    .. code-block:: python

        >>> from zplane import get_common_z_transform
        >>> from zplane import calculate_frequency_response
        >>> zt = get_common_z_transform('exponential', a=0.5)
        >>> response = calculate_frequency_response(zt, points=5)
        >>> float(response.magnitude[0])
        2.0
    """

    numerator, denominator, _ = _unpack(zt)

    if isinstance(points, bool) or not isinstance(points, numbers.Integral) \
            or points <= 0:
        raise ZTransformError('Number of points must be a positive integer.',
                              'INVALID_POINTS')

    omega = numpy.linspace(0.0, numpy.pi, points)
    w = numpy.exp(-1j * omega)

    # Polynomials in z^{-1}, lowest power first
    num = numpy.polyval(numerator[::-1], w)
    den = numpy.polyval(denominator[::-1], w)

    response = numpy.full(points, numpy.nan + 1j * numpy.nan)
    valid = numpy.abs(den) >= _ZERO_TOLERANCE
    response[valid] = num[valid] / den[valid]

    phase = numpy.angle(response)
    phase[valid] = numpy.unwrap(phase[valid])

    return FrequencyResponse(frequencies=omega, magnitude=numpy.abs(response),
                             phase=phase, real=response.real.copy(),
                             imag=response.imag.copy())


# ======================
# get common z transform
# ======================

def get_common_z_transform(kind, a=0.5, omega=numpy.pi / 4, phi=0.0,
                           delay=0):
    """
    Transform of a standard sequence.

    Parameters
    ----------

    kind : str
        One of:

        * ``'unit_impulse'``: :math:`\\delta[n]`.
        * ``'unit_step'``: :math:`u[n]`.
        * ``'exponential'``: :math:`a^n u[n]`.
        * ``'sine'``: :math:`\\sin(\\omega n + \\phi) u[n]`.
        * ``'cosine'``: :math:`\\cos(\\omega n + \\phi) u[n]`.

    a : float, default=0.5
        Base of the exponential sequence.

    omega : float, default=pi/4
        Angular frequency of the sinusoids.

    phi : float, default=0.0
        Phase of the sinusoids.

    delay : int, default=0
        Delay of the sequence in samples.

    Returns
    -------

    result : ZTransformResult
        The factored transform. Its region of convergence is computed from
        the poles for a causal sequence.

    Raises
    ------

    zplane.ZTransformError
        With code ``'INVALID_SEQUENCE_TYPE'`` for an unknown ``kind``.

    Examples
    --------

    .. code-block:: python

        >>> from zplane import get_common_z_transform
        >>> get_common_z_transform('unit_step').roc.description
        '|z| > 1'
    """

    resonator = [1.0, -2.0 * numpy.cos(omega), 1.0]

    if kind == 'unit_impulse':
        numerator, denominator = [1.0], [1.0]
    elif kind == 'unit_step':
        numerator, denominator = [1.0], [1.0, -1.0]
    elif kind == 'exponential':
        numerator, denominator = [1.0], [1.0, -float(a)]
    elif kind == 'sine':
        numerator = [numpy.sin(phi), numpy.sin(omega - phi)]
        denominator = resonator
    elif kind == 'cosine':
        numerator = [numpy.cos(phi), -numpy.cos(omega - phi)]
        denominator = resonator
    else:
        raise ZTransformError(f'Unknown sequence type: {kind!r}.',
                              'INVALID_SEQUENCE_TYPE')

    numerator = numpy.asarray(numerator, dtype=float)
    denominator = numpy.asarray(denominator, dtype=float)

    if delay != 0:
        shifted = time_shift_z_transform(
            {'numerator': numerator, 'denominator': denominator}, delay)
        numerator = shifted.numerator

    if kind == 'unit_impulse':
        signal_type = SignalType.FINITE_DURATION
    else:
        signal_type = SignalType.CAUSAL

    num, den = _equal_length(numerator, denominator)
    factors = factorize_z_transform(num, den, signal_type=signal_type)

    # A delayed impulse has a pole at the origin
    roc = factors.roc
    if kind == 'unit_impulse' and delay > 0:
        roc = ROC.entire_plane(includes_zero=False)

    return ZTransformResult(
        numerator=numerator, denominator=denominator, roc=roc,
        expression=format_z_transform_expression(numerator, denominator),
        zeros=factors.zeros, poles=factors.poles, gain=factors.gain)
