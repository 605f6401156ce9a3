import mlx.core as mx

_DTYPES = {
    "float16": mx.float16,
    "bfloat16": mx.bfloat16,
    "float32": mx.float32,
    "float64": mx.float64,
}


def dtype_name(dtype) -> str:
    for name, candidate in _DTYPES.items():
        if candidate == dtype:
            return name
    raise ValueError(f"Unsupported weights dtype {dtype}")


def dtype_from_name(name: str):
    if name not in _DTYPES:
        raise ValueError(f"Unsupported weights dtype {name!r}")
    return _DTYPES[name]


def row_vector_to_list(arr: mx.array) -> list[float]:
    return [float(v) for v in arr.reshape(-1).tolist()]


def list_to_row_vector(values, dtype=mx.float32) -> mx.array:
    values = list(values)
    if not values:
        raise ValueError("Cannot build a row vector from an empty sequence")
    if any(isinstance(v, (list, tuple)) for v in values):
        raise ValueError("Row vector values must be a flat sequence of numbers")
    return mx.array([float(v) for v in values], dtype=dtype).reshape(1, -1)
