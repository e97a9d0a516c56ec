# SPDX-FileCopyrightText: Copyright 2026, Siavash Ameli <sameli@berkeley.edu>
# SPDX-License-Identifier: BSD-3-Clause
# SPDX-FileType: SOURCE
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the license found in the LICENSE.txt file in the root directory
# of this source tree.

from ._errors import ZPlaneError, DivisionByZeroError, RootFindingError, \
    FactorizationError, ZTransformError, RootFindingWarning
from ._kernel import VerificationReport, verify_roots
from ._root_finding import find_roots_analytic, find_roots_companion, \
    find_roots_jenkins_traub, find_roots_aberth_ehrlich, \
    find_roots_subdivision, RootFindingMethod, HighDegreeStrategy, \
    HighDegreeOptions, RootFindingOptions, RootFindingResult, find_roots
from ._ztransform import SignalType, ROCType, ROCOperation, ROC, \
    ROCAnalysis, determine_roc, combine_rocs, infer_signal_type, is_stable, \
    causality, analyze_roc_with_explanation, SignalAnalysis, analyze_signal, \
    FactorizationResult, factorize_z_transform, format_factorized_expression, \
    ZTransformResult, FrequencyResponse, compute_z_transform, \
    compute_inverse_z_transform, multiply_z_transforms, \
    time_shift_z_transform, calculate_frequency_response, \
    get_common_z_transform, format_z_transform_expression
from . import visualization

__all__ = ['ZPlaneError', 'DivisionByZeroError', 'RootFindingError',
           'FactorizationError', 'ZTransformError', 'RootFindingWarning',
           'VerificationReport', 'verify_roots', 'find_roots_analytic',
           'find_roots_companion', 'find_roots_jenkins_traub',
           'find_roots_aberth_ehrlich', 'find_roots_subdivision',
           'RootFindingMethod', 'HighDegreeStrategy', 'HighDegreeOptions',
           'RootFindingOptions', 'RootFindingResult', 'find_roots',
           'SignalType', 'ROCType', 'ROCOperation', 'ROC', 'ROCAnalysis',
           'determine_roc', 'combine_rocs', 'infer_signal_type', 'is_stable',
           'causality', 'analyze_roc_with_explanation', 'SignalAnalysis',
           'analyze_signal', 'FactorizationResult', 'factorize_z_transform',
           'format_factorized_expression', 'ZTransformResult',
           'FrequencyResponse', 'compute_z_transform',
           'compute_inverse_z_transform', 'multiply_z_transforms',
           'time_shift_z_transform', 'calculate_frequency_response',
           'get_common_z_transform', 'format_z_transform_expression',
           'visualization']

from .__version__ import __version__                          # noqa: F401 E402
