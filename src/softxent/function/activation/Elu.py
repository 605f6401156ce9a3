from softxent.function.Function import Function
import mlx.core as mx


class Elu(Function):
    names = ("elu",)

    @staticmethod
    def apply(z, alpha=1.0):
        return mx.where(z > 0, z, alpha * (mx.exp(z) - 1))

    @staticmethod
    def derivative(z, alpha=1.0):
        return mx.where(z > 0, mx.ones_like(z), alpha * mx.exp(z))


elu = Elu()
