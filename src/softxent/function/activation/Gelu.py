from softxent.function.Consts import SQRT_2, SQRT_PI
from softxent.function.Function import Function
import mlx.core as mx


class Gelu(Function):
    names = ("gelu",)

    @staticmethod
    def apply(z, approx="none"):
        match approx:
            case "none":
                return 0.5 * z * (1 + mx.erf(z / SQRT_2))
            case "tanh":
                return 0.5 * z * (1 + mx.tanh(Gelu._tanh_inner(z)))
            case _:
                raise ValueError(f"Invalid approximation type: {approx}")

    @staticmethod
    def derivative(z, approx="none"):
        match approx:
            case "none":
                pdf = mx.exp(-0.5 * z * z) / (SQRT_2 * SQRT_PI)
                cdf = 0.5 * (1 + mx.erf(z / SQRT_2))
                return cdf + z * pdf
            case "tanh":
                t = mx.tanh(Gelu._tanh_inner(z))
                inner_grad = SQRT_2 / SQRT_PI * (1 + 3 * 0.044715 * z * z)
                return 0.5 * (1 + t) + 0.5 * z * (1 - t * t) * inner_grad
            case _:
                raise ValueError(f"Invalid approximation type: {approx}")

    @staticmethod
    def _tanh_inner(z):
        return SQRT_2 / SQRT_PI * (z + 0.044715 * z ** 3)


gelu = Gelu()
