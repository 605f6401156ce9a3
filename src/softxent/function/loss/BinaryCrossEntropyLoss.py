import json
from typing import Optional, Union

from absl import logging
import mlx.core as mx

from softxent.function.Function import Function
from softxent.function.activation import Softmax, get_activation, log_softmax
from softxent.function.loss.LossFunction import LossFunction
from softxent.function.loss.serde import dtype_from_name, dtype_name, list_to_row_vector, row_vector_to_list


class BinaryCrossEntropyLoss(LossFunction):
    """Binary cross entropy over C independent output units, with optional per-unit weights.

    With the "softmax" activation the row is instead read as one categorical
    distribution, and the score becomes the (weighted) multi-class cross entropy.

    No clamping is applied: an activation that saturates at exactly 0 or 1 yields
    inf or NaN in the score and gradient.
    """

    def __init__(self, weights: Optional[mx.array] = None):
        if weights is not None:
            if not isinstance(weights, mx.array):
                weights = mx.array(weights)
            if weights.ndim == 1:
                weights = weights.reshape(1, -1)
            if weights.ndim != 2 or weights.shape[0] != 1:
                raise ValueError(f"Weights array must be a row vector, got shape {tuple(weights.shape)}")
            logging.debug('BinaryCrossEntropyLoss with %d unit weights', weights.size)
        self._weights: Optional[mx.array] = weights

    @property
    def weights(self) -> Optional[mx.array]:
        return self._weights

    def _check_weights(self, num_units: int) -> None:
        if self._weights.size != num_units:
            raise RuntimeError(f"Weights vector (length {self._weights.size}) does not match "
                               f"output.shape[1]={num_units}")

    @staticmethod
    def _column_mask(mask: Optional[mx.array]) -> Optional[mx.array]:
        if mask is None:
            return None
        if not isinstance(mask, mx.array):
            mask = mx.array(mask)
        return mask.reshape(-1, 1) if mask.ndim == 1 else mask

    def _score_array(self, labels, pre_output, activation_fn, mask):
        fn = get_activation(activation_fn)
        if isinstance(fn, Softmax):
            score_arr = log_softmax(pre_output) * labels
        else:
            output = fn(pre_output)
            score_arr = mx.log(output) * labels
            score_arr = score_arr + mx.log(1 - output) * (1 - labels)

        if self._weights is not None:
            self._check_weights(pre_output.shape[1])
            score_arr = score_arr * self._weights

        mask = self._column_mask(mask)
        if mask is not None:
            score_arr = score_arr * mask
        return score_arr

    def compute_score(self, labels: mx.array, pre_output: mx.array, activation_fn: Union[str, Function],
                      mask: Optional[mx.array] = None, average: bool = False) -> float:
        score_arr = self._score_array(labels, pre_output, activation_fn, mask)
        score = -mx.sum(score_arr).item()
        if average:
            # an empty batch averages to NaN, not an exception
            num_examples = score_arr.shape[0]
            score = score / num_examples if num_examples else float("nan")
        return score

    def compute_score_array(self, labels: mx.array, pre_output: mx.array, activation_fn: Union[str, Function],
                            mask: Optional[mx.array] = None) -> mx.array:
        score_arr = self._score_array(labels, pre_output, activation_fn, mask)
        return -mx.sum(score_arr, axis=1, keepdims=True)

    def compute_gradient(self, labels: mx.array, pre_output: mx.array, activation_fn: Union[str, Function],
                         mask: Optional[mx.array] = None) -> mx.array:
        fn = get_activation(activation_fn)
        output = fn(pre_output)

        if isinstance(fn, Softmax):
            if self._weights is not None:
                self._check_weights(output.shape[1])
                weighted_labels = labels * self._weights
                row_weight = mx.sum(weighted_labels, axis=1, keepdims=True)
                grad = output * row_weight - weighted_labels
            else:
                grad = output - labels
        else:
            # With a = activation(x) and a' = activation'(x):
            #   XE = -(label * log(a) + (1 - label) * log(1 - a))
            #   dXE/dx = a' * (a - label) / (a * (1 - a))
            grad = fn.derivative(pre_output) * (output - labels) / (output * (1 - output))
            if self._weights is not None:
                self._check_weights(output.shape[1])
                grad = grad * self._weights

        mask = self._column_mask(mask)
        if mask is not None:
            grad = grad * mask
        return grad

    def compute_gradient_and_score(self, labels: mx.array, pre_output: mx.array,
                                   activation_fn: Union[str, Function], mask: Optional[mx.array] = None,
                                   average: bool = False) -> tuple[float, mx.array]:
        # TODO: share the activation forward pass between the score and the gradient
        return (self.compute_score(labels, pre_output, activation_fn, mask, average),
                self.compute_gradient(labels, pre_output, activation_fn, mask))

    def to_config(self) -> dict:
        config = {"class_name": self.__class__.__name__}
        if self._weights is not None:
            config["weights"] = row_vector_to_list(self._weights)
            config["dtype"] = dtype_name(self._weights.dtype)
        return config

    @classmethod
    def from_config(cls, config: dict) -> "BinaryCrossEntropyLoss":
        class_name = config.get("class_name", cls.__name__)
        if class_name != cls.__name__:
            raise ValueError(f"Config is for {class_name}, not {cls.__name__}")
        weights = config.get("weights")
        if weights is None:
            return cls()
        return cls(list_to_row_vector(weights, dtype_from_name(config.get("dtype", "float32"))))

    def to_json(self) -> str:
        return json.dumps(self.to_config())

    @classmethod
    def from_json(cls, text: str) -> "BinaryCrossEntropyLoss":
        return cls.from_config(json.loads(text))

    def __eq__(self, other):
        if not isinstance(other, BinaryCrossEntropyLoss):
            return NotImplemented
        if self._weights is None or other._weights is None:
            return self._weights is None and other._weights is None
        return (self._weights.shape == other._weights.shape
                and mx.array_equal(self._weights, other._weights).item())

    def __hash__(self):
        if self._weights is None:
            return hash(self.__class__.__name__)
        return hash((self.__class__.__name__, tuple(row_vector_to_list(self._weights))))

    def __repr__(self):
        if self._weights is None:
            return "BinaryCrossEntropyLoss()"
        return f"BinaryCrossEntropyLoss(weights={row_vector_to_list(self._weights)})"
