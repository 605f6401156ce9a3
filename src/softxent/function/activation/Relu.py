from softxent.function.Function import Function
import mlx.core as mx


class Relu(Function):
    names = ("relu",)

    @staticmethod
    def apply(z):
        return mx.maximum(z, 0)

    @staticmethod
    def derivative(z):
        return (z > 0).astype(z.dtype)


relu = Relu()
