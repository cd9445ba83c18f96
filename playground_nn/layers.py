'''
Name: Playground NN
Topic: forward propagation
Author: CHEN, KE-RONG
Date: 2026/10/19
'''
import numbers

import numpy as np

from .errors import InvalidTopology, ShapeMismatch
from .matrix import Matrix

class Layer:
    """
    神經網路層的基礎類別。
    """
    def forward(self, inputs):
        """前向傳播"""
        raise NotImplementedError


def check_width(width, name='width'):
    """確認層寬度是正整數 (bool 不算)，回傳 int。"""
    if isinstance(width, bool) or not isinstance(width, numbers.Integral):
        raise InvalidTopology(f"{name} 必須是整數，收到 {width!r}")
    if width <= 0:
        raise InvalidTopology(f"{name} 必須大於 0，收到 {width}")
    return int(width)


def random_weights(rows, cols, rng=None):
    """
    產生 (rows, cols) 的權重，每個元素為 2u - 1，u 取自 [0, 1) 的均勻分布。
    沒有給 rng 時使用 numpy 的全域亂數來源。
    """
    source = np.random if rng is None else rng
    u = source.random(rows * cols)
    return 2 * np.asarray(u, dtype=np.float64) - 1


class BiasedLinear(Layer):
    """
    帶有偏置單元的線性層。
    權重矩陣形狀為 (input_dim + 1, output_dim)，最後一列就是偏置。
    執行 y = Wᵀ · [x; 1] 的運算，輸入與輸出都是 (特徵數, 樣本數) 的矩陣。
    """
    def __init__(self, weights):
        if not isinstance(weights, Matrix):
            weights = Matrix.from_array(weights)
        if weights.rows < 2 or weights.cols < 1:
            raise InvalidTopology(f"權重矩陣形狀 {weights.shape} 不合法")
        self._weights = weights

    @classmethod
    def random(cls, input_dim, output_dim, rng=None):
        """
        以隨機權重初始化一個 input_dim -> output_dim 的層。
        """
        input_dim = check_width(input_dim, 'input_dim')
        output_dim = check_width(output_dim, 'output_dim')
        rows = input_dim + 1
        return cls(Matrix(random_weights(rows, output_dim, rng), rows, output_dim))

    @property
    def weights(self):
        return self._weights

    @property
    def shape(self):
        return self._weights.shape

    @property
    def input_dim(self):
        return self._weights.rows - 1

    @property
    def output_dim(self):
        return self._weights.cols

    @property
    def bias(self):
        """偏置列 (權重矩陣的最後一列)。"""
        return self._weights.to_array()[-1]

    def forward(self, inputs):
        """
        執行前向傳播。

        參數:
            inputs (Matrix): 形狀為 (input_dim, 樣本數) 的工作緩衝區。

        返回:
            Matrix: 形狀為 (output_dim, 樣本數) 的新緩衝區。
        """
        # 加上一列常數 1 作為偏置特徵
        augmented = inputs.append_row(1.0)
        if augmented.rows != self._weights.rows:
            raise ShapeMismatch(
                f"層預期 {self.input_dim} 個輸入特徵，收到 {inputs.rows} 個")
        return self._weights.transpose().matmul(augmented)

    def __repr__(self):
        return f"BiasedLinear({self.input_dim} -> {self.output_dim})"
