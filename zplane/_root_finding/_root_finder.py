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
import warnings
from enum import Enum
from typing import NamedTuple, List, Tuple
import numpy
from .._util import make_rng, roots_to_list
from .._errors import ZPlaneError, RootFindingError, RootFindingWarning
from .._kernel import poly_trim, scale_coefficients, cauchy_upper_bound, \
    is_ill_conditioned, verify_roots
from ._analytic import find_roots_analytic
from ._jenkins_traub import find_roots_jenkins_traub
from ._aberth_ehrlich import find_roots_aberth_ehrlich
from ._subdivision import find_roots_subdivision

__all__ = ['RootFindingMethod', 'HighDegreeStrategy', 'HighDegreeOptions',
           'RootFindingOptions', 'RootFindingResult', 'find_roots']


# ===================
# Root Finding Method
# ===================

class RootFindingMethod(str, Enum):
    """
    Root finding algorithm selected by :func:`find_roots`.
    """

    AUTO = 'auto'
    JENKINS = 'jenkins'
    ABERTH = 'aberth'
    ANALYTIC = 'analytic'
    SUBDIVISION = 'subdivision'


# ====================
# High Degree Strategy
# ====================

class HighDegreeStrategy(str, Enum):
    """
    Solver chain for polynomials of degree above ten.

    * ``'hybrid'``: Jenkins-Traub (up to degree 20), then Aberth-Ehrlich with
      a larger budget, then subdivision. Above degree 30 Aberth-Ehrlich runs
      first.
    * ``'recursive'``: subdivision first, then Aberth-Ehrlich.
    * ``'direct'``: Jenkins-Traub (up to degree 20) or Aberth-Ehrlich only.
    """

    RECURSIVE = 'recursive'
    DIRECT = 'direct'
    HYBRID = 'hybrid'


# ===================
# High Degree Options
# ===================

class HighDegreeOptions(NamedTuple):
    """
    Options of the high degree path of :func:`find_roots`.

    Parameters
    ----------

    strategy : str, default='hybrid'
        One of ``'hybrid'``, ``'recursive'`` or ``'direct'``.

    max_subdivisions : int, default=3
        Depth of the subdivision solver.

    parallel : bool, default=True
        Hint for simultaneous correction. Results do not depend on it.
    """

    strategy: str = 'hybrid'
    max_subdivisions: int = 3
    parallel: bool = True


# ====================
# Root Finding Options
# ====================

class RootFindingOptions(NamedTuple):
    """
    Options of :func:`find_roots`.

    Parameters
    ----------

    method : str, default='auto'
        One of ``'auto'``, ``'jenkins'``, ``'aberth'``, ``'analytic'`` or
        ``'subdivision'``.

    verification_tolerance : float, default=1e-8
        Largest accepted relative residual of a returned root.

    max_iterations : int, default=100
        Iteration budget of the iterative solvers.

    convergence_tolerance : float, default=1e-12
        Convergence tolerance of the iterative solvers.

    strict : bool, default=True
        If `True`, a total failure raises :class:`zplane.RootFindingError`.
        If `False`, heuristic roots are returned with ``verified=False``.

    normalize : bool, default=True
        Scale coefficients to unit maximum magnitude before solving.

    high_degree : HighDegreeOptions
        Options of the high degree path.

    seed : int, numpy.random.Generator, or None, default=0
        Seed of the random perturbations. A fixed seed makes every call
        reproducible.
    """

    method: str = 'auto'
    verification_tolerance: float = 1e-8
    max_iterations: int = 100
    convergence_tolerance: float = 1e-12
    strict: bool = True
    normalize: bool = True
    high_degree: HighDegreeOptions = HighDegreeOptions()
    seed: object = 0


# ===================
# Root Finding Result
# ===================

class RootFindingResult(NamedTuple):
    """
    Roots of a polynomial with their confidence.

    Parameters
    ----------

    roots : numpy.ndarray
        Complex roots, one per degree. Repeated roots appear as nearby
        values.

    verified : bool
        `True` if the roots passed residual verification against the input
        coefficients. `False` only for the non-strict heuristic fallback.

    method : str
        Name of the solver that produced the roots, or ``'heuristic'``.

    warnings : list of str
        Diagnostics gathered while solving.

    attempts : list of tuple
        ``(method, message)`` for every solver that was tried and rejected.
    """

    roots: numpy.ndarray
    verified: bool
    method: str
    warnings: List[str]
    attempts: List[Tuple[str, str]]

    def to_dict(self):
        """
        JSON-serializable representation.
        """

        return {
            'roots': roots_to_list(self.roots),
            'verified': bool(self.verified),
            'method': self.method,
            'warnings': list(self.warnings),
            'attempts': [{'method': m, 'message': msg}
                         for m, msg in self.attempts],
        }


# ===============
# resolve options
# ===============

def _resolve_options(options, kwargs):
    """
    Merge an options tuple with keyword overrides.
    """

    if options is None:
        options = RootFindingOptions()
    elif isinstance(options, dict):
        kwargs = {**options, **kwargs}
        options = RootFindingOptions()
    elif not isinstance(options, RootFindingOptions):
        raise RootFindingError('"options" should be a RootFindingOptions.',
                               code='INVALID_OPTIONS')

    high_fields = {}
    for name in HighDegreeOptions._fields:
        if name in kwargs:
            high_fields[name] = kwargs.pop(name)
    if 'high_degree' in kwargs and isinstance(kwargs['high_degree'], dict):
        high_fields = {**kwargs.pop('high_degree'), **high_fields}

    unknown = set(kwargs) - set(RootFindingOptions._fields)
    if unknown:
        raise RootFindingError(f'Unknown options: {sorted(unknown)}.',
                               code='INVALID_OPTIONS')

    options = options._replace(**kwargs)
    if high_fields:
        options = options._replace(
            high_degree=options.high_degree._replace(**high_fields))

    try:
        method = RootFindingMethod(options.method)
        strategy = HighDegreeStrategy(options.high_degree.strategy)
    except ValueError as error:
        raise RootFindingError(str(error), code='INVALID_OPTIONS') from error

    if options.verification_tolerance <= 0 or \
            options.convergence_tolerance <= 0 or options.max_iterations < 1:
        raise RootFindingError('Tolerances and "max_iterations" should be '
                               'positive.', code='INVALID_OPTIONS')

    return options, method, strategy


# =====================
# validate coefficients
# =====================

def _validate_coefficients(coefficients):
    """
    Coefficients as a 1D numeric array, failing fast on malformed input.
    """

    if not isinstance(coefficients, (list, tuple, numpy.ndarray)):
        raise RootFindingError('Coefficients should be an array of numbers.',
                               code='INVALID_COEFFICIENTS')

    if len(coefficients) == 0:
        raise RootFindingError('Coefficients array is empty.',
                               code='EMPTY_COEFFICIENTS')

    try:
        array = numpy.asarray(coefficients)
    except (ValueError, TypeError) as error:
        raise RootFindingError('Coefficients should be an array of '
                               'numbers.',
                               code='INVALID_COEFFICIENTS') from error

    if array.ndim != 1:
        raise RootFindingError('Coefficients should be one dimensional.',
                               code='INVALID_COEFFICIENTS')

    if array.dtype.kind not in 'iufc':
        if not all(isinstance(x, numbers.Number) and not isinstance(x, bool)
                   for x in array):
            raise RootFindingError('Every coefficient should be a number.',
                                   code='INVALID_COEFFICIENTS')
    elif array.dtype.kind == 'b':
        raise RootFindingError('Every coefficient should be a number.',
                               code='INVALID_COEFFICIENTS')

    if numpy.iscomplexobj(array) and numpy.any(array.imag != 0):
        array = array.astype(complex)
    else:
        array = numpy.real(array).astype(float)

    if not numpy.all(numpy.isfinite(array)):
        raise RootFindingError('Coefficients should be finite.',
                               code='INVALID_COEFFICIENTS')

    if numpy.all(array == 0):
        raise RootFindingError('All coefficients are zero.',
                               code='ZERO_POLYNOMIAL')

    return array


# ==========
# plan chain
# ==========

def _plan_chain(method, degree, ill, strategy, max_iterations):
    """
    Ordered list of ``(solver, budget)`` to try.
    """

    boosted = min(int(1.5 * max_iterations), 200)

    if method == RootFindingMethod.ANALYTIC:
        return [('analytic', None)]
    elif method == RootFindingMethod.JENKINS:
        return [('jenkins', None)]
    elif method == RootFindingMethod.ABERTH:
        return [('aberth', max_iterations)]
    elif method == RootFindingMethod.SUBDIVISION:
        return [('subdivision', None)]

    if degree <= 3:
        return [('analytic', None), ('aberth', max_iterations)]

    if degree > 10:
        if strategy == HighDegreeStrategy.RECURSIVE:
            return [('subdivision', None), ('aberth', boosted)]

        first = [('jenkins', None)] if degree <= 20 else []
        if strategy == HighDegreeStrategy.DIRECT:
            return first + [('aberth', boosted)]

        if degree > 30:
            first = [('aberth', 200)] + first
        return first + [('aberth', boosted), ('subdivision', None)]

    if ill:
        return [('aberth', max_iterations), ('jenkins', None),
                ('subdivision', None)]

    return [('jenkins', None), ('aberth', max_iterations),
            ('subdivision', None)]


# ==========
# run solver
# ==========

def _run_solver(name, budget, coeffs, rng, tolerance, options, diagnostics):

    if name == 'analytic':
        return find_roots_analytic(coeffs)
    elif name == 'jenkins':
        return find_roots_jenkins_traub(coeffs, rng=rng,
                                        convergence_tolerance=tolerance,
                                        diagnostics=diagnostics)
    elif name == 'aberth':
        return find_roots_aberth_ehrlich(
            coeffs, max_iterations=budget, tolerance=tolerance, rng=rng,
            parallel=options.high_degree.parallel, diagnostics=diagnostics)
    else:
        return find_roots_subdivision(
            coeffs, max_subdivisions=options.high_degree.max_subdivisions,
            tolerance=tolerance, rng=rng, diagnostics=diagnostics)


# ============
# failure code
# ============

def _failure_code(name, raised):
    if name == 'analytic':
        return 'ANALYTIC_FAILURE'
    elif name == 'jenkins':
        return 'JENKINS_TRAUB_FAILURE'
    elif name == 'aberth':
        return 'ABERTH_EHRLICH_FAILURE' if raised else \
            'ABERTH_EHRLICH_INACCURATE'
    else:
        return 'SUBDIVISION_FAILURE' if raised else 'SUBDIVISION_INACCURATE'


# ===============
# heuristic roots
# ===============

def _heuristic_roots(coeffs):
    """
    Roots spread evenly on the circle of Cauchy's bound.
    """

    n = coeffs.size - 1
    radius = cauchy_upper_bound(coeffs)
    angles = 2.0 * numpy.pi * numpy.arange(n) / n + numpy.pi / n

    return radius * numpy.exp(1j * angles)


# ==========
# find roots
# ==========

def find_roots(coefficients, options=None, **kwargs):
    """
    Roots of a polynomial with automatic method selection and verification.

    Parameters
    ----------

    coefficients : array_like
        Coefficients, highest degree first. Leading zeros are ignored.

    options : RootFindingOptions or dict, default=None
        Options. Any field can also be given as a keyword argument, including
        the fields of :class:`HighDegreeOptions` (``strategy``,
        ``max_subdivisions`` and ``parallel``).

    Returns
    -------

    result : RootFindingResult
        Roots, verification flag, method and diagnostics.

    Raises
    ------

    zplane.RootFindingError
        With code ``'INVALID_COEFFICIENTS'``, ``'EMPTY_COEFFICIENTS'`` or
        ``'ZERO_POLYNOMIAL'`` for malformed input, ``'INVALID_OPTIONS'`` for
        malformed options, ``'UNSUPPORTED_DEGREE'`` if the analytic method is
        forced on a degree above three, and, in strict mode, a method
        specific code or ``'ALL_METHODS_FAILED'`` if no solver produced
        verified roots.

    Warns
    -----

    zplane.RootFindingWarning
        In non-strict mode, when the heuristic roots are returned.

    See Also
    --------

    zplane.find_roots_analytic
    zplane.find_roots_jenkins_traub
    zplane.find_roots_aberth_ehrlich
    zplane.find_roots_subdivision

    Notes
    -----

    Roots at the origin (trailing zero coefficients) are factored off first.
    The remaining polynomial is dispatched by its degree ``n``:

    * ``n <= 3``: closed forms.
    * ``4 <= n <= 10``: Jenkins-Traub, Aberth-Ehrlich, then subdivision.
      Ill-conditioned coefficients try Aberth-Ehrlich first.
    * ``n > 10``: the high degree chain of
      :class:`HighDegreeStrategy`.

    Every candidate is verified against the input coefficients by
    :func:`zplane.verify_roots`. The relative residual of each root must not
    exceed ``verification_tolerance``, loosened ten times when the
    coefficients are ill-conditioned. A rejected candidate passes control to
    the next solver.

    Examples
    --------

    .. code-block:: python

        >>> from zplane import find_roots
        >>> result = find_roots([1, -5, 6])
        >>> result.roots
        array([2.+0.j, 3.+0.j])
        >>> result.verified
        True
    """

    options, method, strategy = _resolve_options(options, dict(kwargs))
    array = _validate_coefficients(coefficients)

    # Negligible leading coefficients are dropped
    original = poly_trim(array, tol=1e-14 * numpy.max(numpy.abs(array)))
    degree = original.size - 1
    if degree == 0:
        return RootFindingResult(roots=numpy.zeros(0, dtype=complex),
                                 verified=True, method=method.value,
                                 warnings=[], attempts=[])

    if method == RootFindingMethod.ANALYTIC and degree > 3:
        raise RootFindingError(
            f'Analytic method supports degree up to 3, got {degree}.',
            code='UNSUPPORTED_DEGREE')

    # Roots at the origin are exact
    last = numpy.flatnonzero(original != 0)[-1]
    zero_count = original.size - 1 - last
    work = original[:last + 1]
    zeros = numpy.zeros(zero_count, dtype=complex)
    n = work.size - 1

    if n == 0:
        return RootFindingResult(roots=zeros, verified=True,
                                 method=method.value, warnings=[],
                                 attempts=[])

    if options.normalize:
        work = scale_coefficients(work)

    diagnostics = []
    ill = is_ill_conditioned(work)
    verification_tolerance = options.verification_tolerance
    max_iterations = options.max_iterations
    convergence_tolerance = options.convergence_tolerance
    if ill:
        verification_tolerance *= 10.0
        max_iterations = int(1.5 * max_iterations)
        convergence_tolerance *= 10.0
        diagnostics.append('Ill-conditioned coefficients, tolerances '
                           'relaxed.')

    rng = make_rng(options.seed)
    attempts = []

    chain = _plan_chain(method, n, ill, strategy, max_iterations)
    if (method != RootFindingMethod.AUTO) and (not options.strict):
        forced = {name for name, _ in chain}
        chain += [link for link in
                  _plan_chain(RootFindingMethod.AUTO, n, ill, strategy,
                              max_iterations)
                  if link[0] not in forced]

    code = 'ALL_METHODS_FAILED'
    for name, budget in chain:
        try:
            candidate = _run_solver(name, budget, work, rng,
                                    convergence_tolerance, options,
                                    diagnostics)
        except (ZPlaneError, numpy.linalg.LinAlgError) as error:
            attempts.append((name, f'{name} raised: {error}'))
            code = _failure_code(name, raised=True)
            continue

        roots = numpy.concatenate((zeros, candidate))
        report = verify_roots(original, roots, verification_tolerance)
        if report.passed:
            return RootFindingResult(roots=roots, verified=True, method=name,
                                     warnings=diagnostics + report.messages,
                                     attempts=attempts)

        attempts.append((name, f'{name} verification failed with max '
                               f'residual {report.max_residual:.3e}'))
        code = _failure_code(name, raised=False)

    message = '; '.join(msg for _, msg in attempts)

    if options.strict:
        if method == RootFindingMethod.AUTO or len(chain) > 1:
            code = 'ALL_METHODS_FAILED'
        raise RootFindingError(f'Root finding failed: {message}', code=code)

    roots = numpy.concatenate((zeros, _heuristic_roots(work)))
    text = f'Returning heuristic roots, no method was verified: {message}'
    diagnostics.append(text)
    warnings.warn(text, RootFindingWarning, stacklevel=2)

    return RootFindingResult(roots=roots, verified=False, method='heuristic',
                             warnings=diagnostics, attempts=attempts)
