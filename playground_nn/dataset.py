'''
Name: Playground NN
Topic: forward propagation
Author: CHEN, KE-RONG
Date: 2026/10/19
'''
import numpy as np

def generate_linear(n=100, rng=None):
    """
    在 [0, 1) x [0, 1) 中隨機取 n 個點，依照 x1 > x2 標記類別。

    返回:
        (np.array, np.array): 形狀為 (n, 2) 的輸入與 (n, 1) 的標籤。
    """
    source = np.random if rng is None else rng
    pts = np.asarray(source.random((n, 2)), dtype=np.float64)
    labels = (pts[:, 0] > pts[:, 1]).astype(int).reshape(n, 1)
    return pts, labels


def generate_XOR_easy():
    """沿著兩條對角線產生 21 個點的 XOR 資料。"""
    inputs = []
    labels = []

    for i in range(11):
        inputs.append([0.1 * i, 0.1 * i])
        labels.append(0)

        if 0.1 * i == 0.5:
            continue

        inputs.append([0.1 * i, 1 - 0.1 * i])
        labels.append(1)

    return np.array(inputs), np.array(labels).reshape(21, 1)


DATASETS = {
    'linear': generate_linear,
    'xor': lambda n=None, rng=None: generate_XOR_easy(),
}
