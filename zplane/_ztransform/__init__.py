# SPDX-FileCopyrightText: Copyright 2026, Siavash Ameli <sameli@berkeley.edu>
# SPDX-License-Identifier: BSD-3-Clause
# SPDX-FileType: SOURCE
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the license found in the LICENSE.txt file in the root directory
# of this source tree.

from ._roc import SignalType, ROCType, ROCOperation, ROC, ROCAnalysis, \
    determine_roc, combine_rocs, infer_signal_type, is_stable, causality, \
    analyze_roc_with_explanation
from ._signal_analysis import SignalAnalysis, analyze_signal
from ._factorizer import FactorizationResult, factorize_z_transform, \
    format_factorized_expression
from ._ztransform import ZTransformResult, FrequencyResponse, \
    compute_z_transform, compute_inverse_z_transform, multiply_z_transforms, \
    time_shift_z_transform, calculate_frequency_response, \
    get_common_z_transform, format_z_transform_expression

__all__ = ['SignalType', 'ROCType', 'ROCOperation', 'ROC', 'ROCAnalysis',
           'determine_roc', 'combine_rocs', 'infer_signal_type', 'is_stable',
           'causality', 'analyze_roc_with_explanation', 'SignalAnalysis',
           'analyze_signal', 'FactorizationResult', 'factorize_z_transform',
           'format_factorized_expression', 'ZTransformResult',
           'FrequencyResponse', 'compute_z_transform',
           'compute_inverse_z_transform', 'multiply_z_transforms',
           'time_shift_z_transform', 'calculate_frequency_response',
           'get_common_z_transform', 'format_z_transform_expression']
