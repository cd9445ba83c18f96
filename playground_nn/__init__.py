'''
Name: Playground NN
Topic: forward propagation
Author: CHEN, KE-RONG
Date: 2026/10/19
'''
from .errors import NeuralNetworkError, InvalidTopology, ShapeMismatch, EmptyBatch
from .matrix import Matrix, transpose, multiply
from .layers import Layer, BiasedLinear
from .model import NeuralNetwork, build, infer
from .runner import BatchRunner
