from softxent.function.Function import Function
import mlx.core as mx


# swish with beta=1 is silu, so both names resolve here
class Swish(Function):
    names = ("swish", "silu")

    @staticmethod
    def apply(z, beta=1.0):
        return z * mx.sigmoid(beta * z)

    @staticmethod
    def derivative(z, beta=1.0):
        s = mx.sigmoid(beta * z)
        return s + beta * z * s * (1 - s)


swish = Swish()
