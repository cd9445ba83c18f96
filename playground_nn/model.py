'''
Name: Playground NN
Topic: forward propagation
Author: CHEN, KE-RONG
Date: 2026/10/19
'''
import numpy as np

from .errors import InvalidTopology, ShapeMismatch
from .layers import BiasedLinear, check_width
from .matrix import Matrix


class NeuralNetwork:
    """
    全連接前饋網路，由依序排列的 BiasedLinear 層組成。
    建構後不可變，可以同時被多個呼叫端拿來做推論。
    層與層之間沒有活化函數，整個網路就是一個仿射映射。
    """

    def __init__(self, layers):
        """
        初始化網路。

        參數:
            layers (list): BiasedLinear 層的列表，相鄰層的寬度必須相接。
        """
        layers = tuple(layers)
        if not layers:
            raise InvalidTopology("網路至少需要一個層")
        for i, (prev, nxt) in enumerate(zip(layers, layers[1:])):
            if prev.output_dim != nxt.input_dim:
                raise InvalidTopology(
                    f"第 {i} 層輸出 {prev.output_dim} 個神經元，"
                    f"但第 {i + 1} 層預期 {nxt.input_dim} 個輸入")
        self._layers = layers

    @classmethod
    def build(cls, layer_widths, rng=None):
        """
        依照層寬度列表建構網路，每一對相鄰寬度 (a, b) 產生一個 (a + 1, b) 的權重矩陣。

        參數:
            layer_widths (list): 各層神經元數量，第一個為輸入層，最後一個為輸出層。
            rng (optional): 具有 random(size) 方法的亂數來源，例如 np.random.default_rng(0)。

        返回:
            NeuralNetwork: 權重隨機初始化的網路。
        """
        try:
            widths = list(layer_widths)
        except TypeError:
            raise InvalidTopology(f"layer_widths 必須是序列，收到 {layer_widths!r}") from None
        if len(widths) < 2:
            raise InvalidTopology(f"至少需要兩層 (輸入與輸出)，收到 {len(widths)} 層")
        widths = [check_width(w, f"layer_widths[{i}]") for i, w in enumerate(widths)]
        return cls(BiasedLinear.random(a, b, rng) for a, b in zip(widths, widths[1:]))

    @classmethod
    def from_weights(cls, matrices):
        """由固定的二維權重陣列 (每個形狀為 (輸入數 + 1, 輸出數)) 建構網路。"""
        return cls(BiasedLinear(m) for m in matrices)

    @property
    def layers(self):
        return self._layers

    @property
    def weight_matrices(self):
        return tuple(layer.weights for layer in self._layers)

    @property
    def shapes(self):
        return tuple(layer.shape for layer in self._layers)

    @property
    def layer_widths(self):
        return [self._layers[0].input_dim] + [layer.output_dim for layer in self._layers]

    @property
    def input_dim(self):
        return self._layers[0].input_dim

    @property
    def output_dim(self):
        return self._layers[-1].output_dim

    def infer(self, batch):
        """
        對一個 batch 執行完整的前向傳播。

        參數:
            batch: 等長向量的序列，每個向量長度等於輸入層寬度。

        返回:
            list: 每筆輸入對應一個輸出向量 (np.array)，順序與輸入相同。
        """
        examples = Matrix.from_rows(batch)
        if examples.cols != self.input_dim:
            raise ShapeMismatch(
                f"輸入向量長度為 {examples.cols}，網路輸入層寬度為 {self.input_dim}")
        # (樣本數, 特徵數) -> (特徵數, 樣本數)
        working = examples.transpose()
        for layer in self._layers:
            working = layer.forward(working)
        return working.transpose().to_rows()

    def forward(self, inputs):
        """
        以二維陣列執行前向傳播。

        參數:
            inputs (np.array): 形狀為 (樣本數, 輸入層寬度) 的資料。

        返回:
            np.array: 形狀為 (樣本數, 輸出層寬度) 的結果。
        """
        outputs = self.infer(inputs)
        return np.vstack(outputs)

    def summary(self):
        """回傳描述網路結構的多行字串。"""
        lines = [f"NeuralNetwork {' -> '.join(str(w) for w in self.layer_widths)}"]
        for i, layer in enumerate(self._layers):
            lines.append(f"  [{i}] {layer!r} weights={layer.shape}")
        return '\n'.join(lines)

    def __repr__(self):
        return f"NeuralNetwork(layer_widths={self.layer_widths})"


def build(layer_widths, rng=None):
    """建構網路，等同 NeuralNetwork.build。"""
    return NeuralNetwork.build(layer_widths, rng)


def infer(network, batch):
    """對 batch 執行推論，等同 network.infer(batch)。"""
    return network.infer(batch)
