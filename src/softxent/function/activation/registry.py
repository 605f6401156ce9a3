from typing import Union

from absl import logging

from softxent.function.Function import Function

_ACTIVATIONS: dict[str, Function] = {}


def register_activation(fn: Function, *names: str) -> Function:
    if not isinstance(fn, Function):
        raise TypeError(f"Expected a Function, got {type(fn).__name__}")
    keys = names or fn.names or (fn.name,)
    for key in keys:
        key = key.lower()
        previous = _ACTIVATIONS.get(key)
        if previous is not None and previous is not fn:
            logging.debug('Replacing activation %r: %r -> %r', key, previous, fn)
        _ACTIVATIONS[key] = fn
    return fn


def get_activation(activation: Union[str, Function]) -> Function:
    if isinstance(activation, Function):
        return activation
    fn = _ACTIVATIONS.get(activation.lower())
    if fn is None:
        raise ValueError(f"Unknown activation function {activation!r}. "
                         f"Registered: {', '.join(activation_names())}")
    logging.debug('Resolved activation %r to %r', activation, fn)
    return fn


def activation_names() -> list[str]:
    return sorted(_ACTIVATIONS)
