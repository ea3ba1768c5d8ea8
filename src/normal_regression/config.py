"""
Numerical settings for the regression solver.

These are module-level constants so that every operation agrees on the
working precision and on when a matrix counts as singular.
"""

import numpy as np

# Working dtype for all matrices and vectors
DTYPE = np.float64

# A matrix is treated as singular when its smallest singular value is at most
# DEFAULT_RCOND times its largest one (i.e. condition number >= 1e12).
DEFAULT_RCOND = 1e-12

# Value written into the intercept column
BIAS_VALUE = 1.0
