import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest

from playground_nn import NeuralNetwork

# [2, 3, 1] 網路的固定權重，最後一列為偏置
W1 = np.array([
    [0.5, -1.0, 0.25],
    [2.0, 0.5, -0.5],
    [0.1, 0.2, 0.3],
])
W2 = np.array([
    [1.0],
    [-2.0],
    [0.5],
    [0.75],
])


@pytest.fixture
def rng():
    return np.random.default_rng(1)


@pytest.fixture
def fixed_network():
    return NeuralNetwork.from_weights([W1, W2])
