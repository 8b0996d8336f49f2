"""
Escape-time test for membership of the Mandelbrot set.
"""

import logging
import operator

import numpy as np
from numba import njit

from escapetime import config
from escapetime.errors import InvalidLimitError

_logger = logging.getLogger(__name__)

# Marks "no escape within the limit" in integer results
INCONCLUSIVE = -1

# Largest limit the compiled kernels accept as int64.  No loop gets that
# far, so larger limits are clamped without changing any result.
_MAX_LIMIT = np.iinfo(np.int64).max


def _escape_kernel(c, limit):
    z = 0j
    for i in range(limit):
        z = z * z + c
        # squared distance from the origin against 2.0 ** 2
        if z.real * z.real + z.imag * z.imag > 4.0:
            return i
    return INCONCLUSIVE


def _escape_array_kernel(points, limit, out):
    for k in range(points.size):
        out[k] = _escape_kernel(points[k], limit)


_escape_kernel_jit = njit(nogil=True, cache=bool(config.CACHE))(
    _escape_kernel)


@njit(nogil=True, cache=bool(config.CACHE))
def _escape_array_kernel_jit(points, limit, out):
    for k in range(points.size):
        out[k] = _escape_kernel_jit(points[k], limit)


def _select(pyfunc, jitfunc):
    if config.DISABLE_JIT:
        _logger.debug("JIT disabled, using interpreted %s", pyfunc.__name__)
        return pyfunc
    return jitfunc


def _check_limit(limit):
    if isinstance(limit, (bool, np.bool_)):
        raise InvalidLimitError(limit)
    try:
        limit = operator.index(limit)
    except TypeError:
        raise InvalidLimitError(limit) from None
    if limit < 0:
        raise InvalidLimitError(limit)
    return min(limit, int(_MAX_LIMIT))


def escape_time(c, limit):
    """
    Try to determine if *c* is in the Mandelbrot set, using at most *limit*
    iterations to decide.

    If *c* is not a member, return the 0-based index of the iteration at
    which ``z = z * z + c`` left the circle of radius two centered on the
    origin.  If *c* seems to be a member (more precisely, if the iteration
    limit was reached without proving that *c* is not a member), return
    None.

    Non-finite inputs are not special-cased: a NaN never compares greater
    than the threshold, so it reports None.
    """
    limit = _check_limit(limit)
    if isinstance(c, (str, bytes)):
        raise TypeError("expected a number, got %s" % type(c).__name__)
    c = complex(c)
    kernel = _select(_escape_kernel, _escape_kernel_jit)
    i = kernel(c, limit)
    if i == INCONCLUSIVE:
        return None
    return int(i)


def escape_times(points, limit):
    """
    Vectorized :func:`escape_time` over an array of complex coordinates.

    Returns an int64 array shaped like *points*; coordinates with no
    escape within *limit* iterations hold INCONCLUSIVE.
    """
    limit = _check_limit(limit)
    points = np.asarray(points)
    if points.dtype.kind in "USO" and points.size and any(
            isinstance(p, (str, bytes)) for p in points.reshape(-1)):
        raise TypeError("expected numbers, got strings")
    points = points.astype(np.complex128, copy=False)
    flat = np.ascontiguousarray(points).reshape(-1)
    out = np.empty(flat.shape, dtype=np.int64)
    kernel = _select(_escape_array_kernel, _escape_array_kernel_jit)
    kernel(flat, limit, out)
    return out.reshape(points.shape)
