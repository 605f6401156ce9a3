from softxent.function.Function import Function
import mlx.core as mx


# piecewise linear approximation of the sigmoid: 0.2 * z + 0.5, clipped to [0, 1]
class HardSigmoid(Function):
    names = ("hardsigmoid", "hard_sigmoid")

    @staticmethod
    def apply(z):
        return mx.clip(0.2 * z + 0.5, 0, 1)

    @staticmethod
    def derivative(z):
        inside = mx.logical_and(z > -2.5, z < 2.5)
        return inside.astype(z.dtype) * 0.2


hard_sigmoid = HardSigmoid()
