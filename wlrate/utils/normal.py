"""standard normal distribution functions"""
import math
import statistics
from scipy.stats import norm
from wlrate.utils.constants import INV_SQRT_2

STANDARD_NORMAL = statistics.NormalDist()


def cdf(x):
    """cdf of standard normal"""
    return 0.5 * (1.0 + math.erf(x * INV_SQRT_2))


def pdf(x):
    """pdf of standard normal"""
    return STANDARD_NORMAL.pdf(x)


def inv_cdf(p):
    """inverse cdf (quantile function) of standard normal"""
    return float(norm.ppf(p))
