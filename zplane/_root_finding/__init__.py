# SPDX-FileCopyrightText: Copyright 2026, Siavash Ameli <sameli@berkeley.edu>
# SPDX-License-Identifier: BSD-3-Clause
# SPDX-FileType: SOURCE
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the license found in the LICENSE.txt file in the root directory
# of this source tree.

from ._analytic import find_roots_analytic
from ._companion import companion_matrix, find_roots_companion
from ._jenkins_traub import find_roots_jenkins_traub
from ._aberth_ehrlich import find_roots_aberth_ehrlich
from ._subdivision import find_roots_subdivision
from ._root_finder import RootFindingMethod, HighDegreeStrategy, \
    HighDegreeOptions, RootFindingOptions, RootFindingResult, find_roots

__all__ = ['find_roots_analytic', 'companion_matrix', 'find_roots_companion',
           'find_roots_jenkins_traub', 'find_roots_aberth_ehrlich',
           'find_roots_subdivision', 'RootFindingMethod', 'HighDegreeStrategy',
           'HighDegreeOptions', 'RootFindingOptions', 'RootFindingResult',
           'find_roots']
