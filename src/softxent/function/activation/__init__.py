from softxent.function.activation.Elu import Elu, elu
from softxent.function.activation.Gelu import Gelu, gelu
from softxent.function.activation.HardSigmoid import HardSigmoid, hard_sigmoid
from softxent.function.activation.Identity import Identity, identity
from softxent.function.activation.LeakyRelu import LeakyRelu, leaky_relu
from softxent.function.activation.LogSoftmax import LogSoftmax, log_softmax
from softxent.function.activation.Relu import Relu, relu
from softxent.function.activation.Sigmoid import Sigmoid, sigmoid
from softxent.function.activation.Softmax import Softmax, softmax
from softxent.function.activation.Softplus import Softplus, softplus
from softxent.function.activation.Softsign import Softsign, softsign
from softxent.function.activation.Swish import Swish, swish
from softxent.function.activation.Tanh import Tanh, tanh
from softxent.function.activation.registry import register_activation, get_activation, activation_names

for _fn in (identity, sigmoid, hard_sigmoid, tanh, relu, leaky_relu, elu, gelu, swish, softplus, softsign,
            softmax, log_softmax):
    register_activation(_fn)
del _fn
