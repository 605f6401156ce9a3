from softxent.function.Function import Function
import mlx.core as mx


class Sigmoid(Function):
    names = ("sigmoid",)

    @staticmethod
    def apply(z):
        return mx.sigmoid(z)

    @staticmethod
    def derivative(z):
        s = mx.sigmoid(z)
        return s * (1 - s)


sigmoid = Sigmoid()
