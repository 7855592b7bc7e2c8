"""Package-level constants"""


# Minimum pivot magnitude accepted by the dense solver, smaller pivots indicate a numerically singular kernel matrix
SINGULAR_PIVOT_THRESHOLD = 1e-12


# The number of leading training points used to estimate the default shape parameter
EPSILON_SAMPLE_SIZE = 100

# Shape parameter used if less than two training points are available for its estimation
DEFAULT_EPSILON = 1.0
