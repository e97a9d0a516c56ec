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

from typing import List, NamedTuple
import numpy
from .._errors import RootFindingError, FactorizationError
from .._util import roots_to_list, complex_to_dict, format_number
from .._root_finding import find_roots
from ._roc import ROC, SignalType, determine_roc, infer_signal_type
from ._signal_analysis import analyze_signal

__all__ = ['FactorizationResult', 'factorize_z_transform',
           'format_factorized_expression']

_PAIR_TOLERANCE = 1e-10


# ====================
# Factorization Result
# ====================

class FactorizationResult(NamedTuple):
    """
    Pole-zero form of a rational Z-transform.

    Parameters
    ----------

    zeros : numpy.ndarray
        Roots of the numerator.

    poles : numpy.ndarray
        Roots of the denominator.

    gain : float or complex
        Ratio of the leading coefficients.

    expression : str
        Factored form, such as ``'2 · (z - 0.5) / (z - 0.9)'``. Empty if no
        expression was requested.

    roc : ROC
        Region of convergence of the transform.

    signal_type : SignalType
        Support assumption that selected the region of convergence.

    verified : bool
        Both root sets passed residual verification.

    warnings : list of str
        Diagnostics of the two root finding calls.
    """

    zeros: numpy.ndarray
    poles: numpy.ndarray
    gain: complex
    expression: str
    roc: ROC
    signal_type: SignalType
    verified: bool
    warnings: List[str]

    def to_dict(self):
        """
        JSON-serializable representation.
        """

        if isinstance(self.gain, complex):
            gain = complex_to_dict(self.gain)
        else:
            gain = float(self.gain)

        return {
            'zeros': roots_to_list(self.zeros),
            'poles': roots_to_list(self.poles),
            'gain': gain,
            'expression': self.expression,
            'roc': self.roc.to_dict(),
            'signal_type': self.signal_type.value,
            'verified': bool(self.verified),
            'warnings': list(self.warnings),
        }


# =============
# as polynomial
# =============

def _as_polynomial(coeffs, name):
    """
    Validate a coefficient array and strip its leading zeros.
    """

    if coeffs is None or numpy.ndim(coeffs) != 1 or len(coeffs) == 0:
        raise FactorizationError(f'Invalid {name}: must be a non-empty '
                                 f'array of coefficients.')

    c = numpy.asarray(coeffs)
    nonzero = numpy.flatnonzero(c != 0)
    if nonzero.size == 0:
        return c[-1:]

    return c[nonzero[0]:]


# =============
# format factor
# =============

def _format_factor(root):
    """
    Linear factor ``(z - root)`` of a single root.
    """

    root = complex(root)
    if abs(root) < _PAIR_TOLERANCE:
        return 'z'

    if abs(root.imag) < _PAIR_TOLERANCE:
        if root.real > 0:
            return f'(z - {format_number(root.real)})'
        return f'(z + {format_number(-root.real)})'

    sign = '+' if root.imag > 0 else '-'
    return f'(z - ({format_number(root.real)} {sign} ' \
           f'{format_number(abs(root.imag))}j))'


# ===========
# format pair
# ===========

def _format_pair(root):
    """
    Quadratic factor ``(z² - 2 Re(root) z + |root|²)`` of a conjugate pair.
    """

    root = complex(root)
    b = -2.0 * root.real
    c = abs(root) ** 2

    text = 'z²'
    if abs(b) >= _PAIR_TOLERANCE:
        sign = '-' if b < 0 else '+'
        magnitude = format_number(abs(b))
        if magnitude == '1':
            magnitude = ''
        text += f' {sign} {magnitude}z'
    text += f' + {format_number(c)}'

    return f'({text})'


# ==============
# format factors
# ==============

def _format_factors(roots):
    """
    Product of the factors of a root set, conjugate pairs rendered once.
    """

    roots = [complex(r) for r in numpy.asarray(roots).ravel()]
    used = [False] * len(roots)
    factors = []

    for i, r in enumerate(roots):
        if used[i]:
            continue
        used[i] = True

        if abs(r.imag) < _PAIR_TOLERANCE:
            factors.append(_format_factor(r))
            continue

        # Look for the conjugate partner
        scale = max(1.0, abs(r))
        for j in range(i + 1, len(roots)):
            s = roots[j]
            if (not used[j]) and \
                    abs(s.real - r.real) < _PAIR_TOLERANCE * scale and \
                    abs(s.imag + r.imag) < _PAIR_TOLERANCE * scale:
                used[j] = True
                factors.append(_format_pair(r))
                break
        else:
            factors.append(_format_factor(r))

    return ''.join(factors)


# ============================
# format factorized expression
# ============================

def format_factorized_expression(zeros, poles, gain=1.0):
    """
    Human readable pole-zero form of a rational transform.

    Parameters
    ----------

    zeros : array_like
        Zeros of the transform.

    poles : array_like
        Poles of the transform.

    gain : float, default=1.0
        Gain. It is omitted from the expression when it equals one.

    Returns
    -------

    expression : str
        For instance ``'2 · (z - 0.5)(z² + 1) / (z - 0.9)'``. Roots at the
        origin are rendered as ``z`` and complex-conjugate pairs as one real
        quadratic factor.

    Examples
    --------

    .. code-block:: python

        >>> from zplane import format_factorized_expression
        >>> format_factorized_expression([1j, -1j], [0.5])
        '(z² + 1) / (z - 0.5)'
    """

    numerator = _format_factors(zeros) or '1'
    denominator = _format_factors(poles)

    gain = complex(gain)
    if abs(gain - 1.0) > 1e-10:
        if abs(gain.imag) < 1e-10:
            prefix = format_number(gain.real)
        else:
            prefix = f'({format_number(gain.real)} + ' \
                     f'{format_number(gain.imag)}j)'
        expression = f'{prefix} · {numerator}'
    else:
        expression = numerator

    if denominator:
        expression = f'{expression} / {denominator}'

    return expression


# =====================
# factorize z transform
# =====================

def factorize_z_transform(numerator, denominator=(1.0, ), signal_type=None,
                          original_signal=None, generate_expression=True,
                          root_finding_options=None, plot=False, latex=False,
                          save=False):
    """
    Factor a rational Z-transform into zeros, poles and gain.

    Parameters
    ----------

    numerator : array_like
        Numerator coefficients, highest power of ``z`` first.

    denominator : array_like, default=(1.0,)
        Denominator coefficients, highest power of ``z`` first.

    signal_type : SignalType or str, default=None
        Support assumption of the sequence. If not given, it is inferred
        from ``original_signal``, and otherwise from the poles.

    original_signal : array_like, default=None
        Samples of the sequence, used to infer the signal type.

    generate_expression : bool, default=True
        If `True`, the factored expression is formatted.

    root_finding_options : RootFindingOptions or dict, default=None
        Options of :func:`zplane.find_roots` for both root sets.

    plot : bool, default=False
        If `True`, the pole-zero diagram is plotted.

    latex : bool, default=False
        If `True`, the plot is rendered with LaTeX.

    save : bool or str, default=False
        If not `False`, the plot is saved. A string sets the filename.

    Returns
    -------

    result : FactorizationResult
        Zeros, poles, gain, expression and region of convergence.

    Raises
    ------

    zplane.FactorizationError
        If a coefficient array is empty, or if finding the zeros or poles
        failed.

    See Also
    --------

    zplane.find_roots
    zplane.determine_roc

    Notes
    -----

    The gain is the ratio ``b_0 / a_0`` of the leading coefficients after
    leading zeros are stripped, so that

    .. math::

        \\frac{B(z)}{A(z)} = g \\frac{\\prod_i (z - z_i)}{\\prod_j (z - p_j)}.

    Examples
    --------

    .. code-block:: python

        >>> from zplane import factorize_z_transform
        >>> result = factorize_z_transform([1, -0.5], [1, -1.7, 0.72])
        >>> result.roc.description
        '|z| > 0.9'
    """

    num = _as_polynomial(numerator, 'numerator')
    den = _as_polynomial(denominator, 'denominator')

    try:
        num_result = find_roots(num, root_finding_options)
        den_result = find_roots(den, root_finding_options)
    except RootFindingError as error:
        raise FactorizationError(error) from error

    zeros = num_result.roots
    poles = den_result.roots
    gain = complex(num[0] / den[0])
    if gain.imag == 0:
        gain = gain.real

    growth_rate = None
    decay_rate = None
    try:
        if signal_type is not None:
            signal_type = SignalType(signal_type)
        elif original_signal is not None:
            analysis = analyze_signal(original_signal)
            signal_type = analysis.type
            growth_rate = analysis.growth_rate
            decay_rate = analysis.decay_rate
        else:
            signal_type = infer_signal_type(poles)
    except ValueError as error:
        raise FactorizationError(error) from error

    roc = determine_roc(poles, signal_type, growth_rate=growth_rate,
                        decay_rate=decay_rate)

    if generate_expression:
        expression = format_factorized_expression(zeros, poles, gain)
    else:
        expression = ''

    warnings = [f'numerator: {w}' for w in num_result.warnings] + \
        [f'denominator: {w}' for w in den_result.warnings]

    if plot:
        from ..visualization import plot_pole_zero
        plot_pole_zero(zeros, poles, roc=roc, latex=latex, save=save)

    return FactorizationResult(zeros=zeros, poles=poles, gain=gain,
                               expression=expression, roc=roc,
                               signal_type=signal_type,
                               verified=(num_result.verified and
                                         den_result.verified),
                               warnings=warnings)
