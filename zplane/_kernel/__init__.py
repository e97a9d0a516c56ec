# SPDX-FileCopyrightText: Copyright 2026, Siavash Ameli <sameli@berkeley.edu>
# SPDX-License-Identifier: BSD-3-Clause
# SPDX-FileType: SOURCE
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the license found in the LICENSE.txt file in the root directory
# of this source tree.

from ._complex import complex_add, complex_subtract, complex_multiply, \
    complex_scale, complex_divide, complex_reciprocal, complex_magnitude, \
    complex_magnitude_squared, complex_phase
from ._poly_util import poly_trim, scale_coefficients, evaluate, \
    evaluate_and_derivative, evaluate_with_derivatives, derivative, \
    synthetic_division, deflate_conjugate_pair, shift_polynomial, \
    cauchy_upper_bound, fujiwara_bound, cauchy_lower_bound, \
    coefficient_condition, is_ill_conditioned, polish_root_newton, \
    newton_polish
from ._verify import VerificationReport, relative_residuals, verify_roots

__all__ = ['complex_add', 'complex_subtract', 'complex_multiply',
           'complex_scale', 'complex_divide', 'complex_reciprocal',
           'complex_magnitude', 'complex_magnitude_squared', 'complex_phase',
           'poly_trim', 'scale_coefficients', 'evaluate',
           'evaluate_and_derivative', 'evaluate_with_derivatives',
           'derivative', 'synthetic_division', 'deflate_conjugate_pair',
           'shift_polynomial', 'cauchy_upper_bound', 'fujiwara_bound',
           'cauchy_lower_bound', 'coefficient_condition',
           'is_ill_conditioned', 'polish_root_newton', 'newton_polish',
           'VerificationReport', 'relative_residuals', 'verify_roots']
