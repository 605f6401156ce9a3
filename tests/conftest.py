import mlx.core as mx
import numpy as np
import pytest

# float64 kernels only exist on the CPU device
mx.set_default_device(mx.cpu)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
