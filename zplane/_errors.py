# SPDX-FileCopyrightText: Copyright 2026, Siavash Ameli <sameli@berkeley.edu>
# SPDX-License-Identifier: BSD-3-Clause
# SPDX-FileType: SOURCE
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the license found in the LICENSE.txt file in the root directory
# of this source tree.

__all__ = ['ZPlaneError', 'DivisionByZeroError', 'RootFindingError',
           'FactorizationError', 'ZTransformError', 'RootFindingWarning']


# ============
# ZPlane Error
# ============

class ZPlaneError(Exception):
    """
    Base class of all errors raised by :mod:`zplane`.
    """

    pass


# ======================
# Division By Zero Error
# ======================

class DivisionByZeroError(ZPlaneError, ZeroDivisionError):
    """
    Complex division by a number whose magnitude is below ``1e-15``.

    Solvers catch this error and perturb the current iterate instead of
    propagating it.
    """

    pass


# ==================
# Root Finding Error
# ==================

class RootFindingError(ZPlaneError):
    """
    Failure of polynomial root finding.

    Parameters
    ----------

    message : str
        Human readable description.

    code : str, default='ALL_METHODS_FAILED'
        Machine readable error code, such as ``'INVALID_COEFFICIENTS'``,
        ``'EMPTY_COEFFICIENTS'``, ``'ZERO_POLYNOMIAL'``,
        ``'UNSUPPORTED_DEGREE'`` or ``'ALL_METHODS_FAILED'``.
    """

    def __init__(self, message, code='ALL_METHODS_FAILED'):
        super().__init__(message)
        self.code = code

    def __str__(self):
        return f'[{self.code}] {self.args[0]}'


# ===================
# Factorization Error
# ===================

class FactorizationError(ZPlaneError):
    """
    Failure to factor a rational Z-transform into zeros, poles and gain.

    The message always starts with ``'Factorization failed: '``.
    """

    def __init__(self, cause):
        super().__init__(f'Factorization failed: {cause}')


# ================
# ZTransform Error
# ================

class ZTransformError(ZPlaneError):
    """
    Invalid input to the Z-transform layer.

    Parameters
    ----------

    message : str
        Human readable description.

    code : str
        Machine readable error code, such as ``'INVALID_SIGNAL'`` or
        ``'INVALID_LIMIT'``.
    """

    def __init__(self, message, code):
        super().__init__(message)
        self.code = code

    def __str__(self):
        return f'[{self.code}] {self.args[0]}'


# ====================
# Root Finding Warning
# ====================

class RootFindingWarning(RuntimeWarning):
    """Roots were returned without passing residual verification."""

    pass
