from softxent.function.Function import Function
from softxent.function.activation.Softmax import Softmax
import mlx.core as mx


class LogSoftmax(Function):
    """log(softmax(z)) computed as z - logsumexp(z), so the softmax itself is never formed."""
    names = ("logsoftmax", "log_softmax")

    @staticmethod
    def apply(z):
        return z - mx.logsumexp(z, axis=1, keepdims=True)

    @staticmethod
    def derivative(z):
        # diagonal of the Jacobian, see Softmax.derivative
        return 1 - Softmax.apply(z)


log_softmax = LogSoftmax()
