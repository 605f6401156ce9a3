import mlx.core as mx
import numpy as np

# mlx float64 transcendentals (exp, sigmoid, logsumexp) are only float32-accurate,
# so references are compared at these tolerances rather than at double precision
RTOL = 1e-6
ATOL = 1e-6
FD_EPSILON = 1e-3
FD_ATOL = 1e-3


def f64(x):
    return mx.array(x, dtype=mx.float64)


def finite_difference(score_fn, x: np.ndarray, epsilon=FD_EPSILON) -> np.ndarray:
    grad = np.zeros_like(x)
    for idx in np.ndindex(*x.shape):
        plus, minus = x.copy(), x.copy()
        plus[idx] += epsilon
        minus[idx] -= epsilon
        grad[idx] = (score_fn(plus) - score_fn(minus)) / (2 * epsilon)
    return grad
