from softxent.function.Function import Function
import mlx.core as mx


class Tanh(Function):
    names = ("tanh",)

    @staticmethod
    def apply(z):
        return mx.tanh(z)

    @staticmethod
    def derivative(z):
        t = mx.tanh(z)
        return 1 - t * t


tanh = Tanh()
