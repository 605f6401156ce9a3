from softxent.function.Function import Function
import mlx.core as mx


class Softsign(Function):
    names = ("softsign",)

    @staticmethod
    def apply(z):
        return z / (1 + mx.abs(z))

    @staticmethod
    def derivative(z):
        d = 1 + mx.abs(z)
        return 1 / (d * d)


softsign = Softsign()
