from abc import ABC, abstractmethod
from typing import Optional, Union

import mlx.core as mx

from softxent.function.Function import Function


class LossFunction(ABC):
    @abstractmethod
    def compute_score(self, labels: mx.array, pre_output: mx.array, activation_fn: Union[str, Function],
                      mask: Optional[mx.array] = None, average: bool = False) -> float:
        pass

    @abstractmethod
    def compute_score_array(self, labels: mx.array, pre_output: mx.array, activation_fn: Union[str, Function],
                            mask: Optional[mx.array] = None) -> mx.array:
        pass

    @abstractmethod
    def compute_gradient(self, labels: mx.array, pre_output: mx.array, activation_fn: Union[str, Function],
                         mask: Optional[mx.array] = None) -> mx.array:
        pass

    @abstractmethod
    def compute_gradient_and_score(self, labels: mx.array, pre_output: mx.array,
                                   activation_fn: Union[str, Function], mask: Optional[mx.array] = None,
                                   average: bool = False) -> tuple[float, mx.array]:
        pass

    def __call__(self, *args, **kwargs):
        return self.compute_score(*args, **kwargs)
