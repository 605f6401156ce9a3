from softxent.function.Function import Function
import mlx.core as mx


class Softplus(Function):
    names = ("softplus",)

    @staticmethod
    def apply(z):
        # log(1 + exp(z)) without overflow for large z
        return mx.logaddexp(z, mx.zeros_like(z))

    @staticmethod
    def derivative(z):
        return mx.sigmoid(z)


softplus = Softplus()
