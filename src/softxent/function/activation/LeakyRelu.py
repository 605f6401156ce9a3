from softxent.function.Function import Function
import mlx.core as mx


class LeakyRelu(Function):
    names = ("leakyrelu", "leaky_relu")

    @staticmethod
    def apply(z, alpha=0.01):
        return mx.where(z > 0, z, alpha * z)

    @staticmethod
    def derivative(z, alpha=0.01):
        return mx.where(z > 0, mx.ones_like(z), alpha * mx.ones_like(z))


leaky_relu = LeakyRelu()
