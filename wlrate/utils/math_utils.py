"""math utility functions for rating systems"""
import math
import numpy as np
from wlrate.utils import normal
from wlrate.utils.constants import MACHINE_EPSILON, DRAW_MASS_THRESHOLD


def sigmoid_scalar(x):
    """no need to use numpy on scalars, the branches keep math.exp from overflowing"""
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def normalize(vector, target_min, target_max):
    """min-max scale a vector into [target_min, target_max], constant vectors map to target_min"""
    values = np.asarray(vector, dtype=np.float64)
    if values.size == 0:
        return []
    source_min = values.min()
    source_range = values.max() - source_min
    if source_range == 0.0:
        return [float(target_min)] * values.size
    scaled = ((values - source_min) / source_range) * (target_max - target_min) + target_min
    return scaled.tolist()


def matrix_transpose(matrix):
    """transpose a list of equal length rows"""
    if len(matrix) == 0 or len(matrix[0]) == 0:
        return []
    return [list(column) for column in zip(*matrix)]


def unwind(tenet, objects):
    """
    stable sort objects by tenet

    Returns the sorted objects and, for each sorted position, the original index of the object
    placed there. Calling unwind again with those indices as the tenet restores the original order.
    """
    if len(objects) == 0:
        return [], []
    order = sorted(range(len(objects)), key=lambda idx: tenet[idx])
    return [objects[idx] for idx in order], order


def v(x, t):
    """additive mean correction for a win, the truncated gaussian v function"""
    xt = x - t
    denom = normal.cdf(xt)
    if denom < MACHINE_EPSILON:
        return -xt
    return normal.pdf(xt) / denom


def w(x, t):
    """multiplicative variance correction for a win"""
    xt = x - t
    denom = normal.cdf(xt)
    if denom < MACHINE_EPSILON:
        return 1.0 if x < 0 else 0.0
    v_val = v(x, t)
    return v_val * (v_val + xt)


def vt(x, t):
    """additive mean correction for a draw, gaussian truncated to [-t - |x|, t - |x|]"""
    abs_x = math.fabs(x)  # the papers do NOT do this but ALL open source implementations DO...
    b = normal.cdf(t - abs_x) - normal.cdf(-t - abs_x)
    if b < DRAW_MASS_THRESHOLD:
        if x < 0:
            return -x - t
        return -x + t
    a = normal.pdf(-t - abs_x) - normal.pdf(t - abs_x)
    return (-a if x < 0 else a) / b


def wt(x, t):
    """multiplicative variance correction for a draw"""
    abs_x = math.fabs(x)
    b = normal.cdf(t - abs_x) - normal.cdf(-t - abs_x)
    if b < MACHINE_EPSILON:
        return 1.0
    vt_val = vt(x, t)
    return ((t - abs_x) * normal.pdf(t - abs_x) + (t + abs_x) * normal.pdf(-t - abs_x)) / b + vt_val**2.0
