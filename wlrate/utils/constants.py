"""constants computed once here to avoid recomputation"""
import math
import sys

# model defaults
DEFAULT_MU = 25.0
DEFAULT_SIGMA = DEFAULT_MU / 3.0
DEFAULT_BETA = DEFAULT_MU / 6.0
DEFAULT_KAPPA = 0.0001
DEFAULT_TAU = DEFAULT_MU / 300.0
DEFAULT_MARGIN = 0.0
DEFAULT_EPSILON = 0.1
DEFAULT_WINDOW_SIZE = 4

# numerical guards for the truncated gaussian functions
MACHINE_EPSILON = sys.float_info.epsilon
DRAW_MASS_THRESHOLD = 1e-5

INV_SQRT_2 = 1.0 / math.sqrt(2.0)
