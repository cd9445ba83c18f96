'''
Name: Playground NN
Topic: forward propagation
Author: CHEN, KE-RONG
Date: 2026/10/19
'''
import matplotlib.pyplot as plt
import numpy as np

def _finish(fig, save_path):
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close(fig)
    else:
        plt.show()


def print_summary(network):
    """印出網路結構。"""
    print("模型結構:")
    for i, layer in enumerate(network.layers):
        rows, cols = layer.shape
        print(f"- [{i}] {layer.__class__.__name__}: {layer.input_dim} -> {layer.output_dim} (weights {rows}x{cols})")


def plot_outputs(X, outputs, save_path=None):
    """
    視覺化二維輸入，並以第一個輸出分量上色。

    參數:
        X (np.array): 形狀為 (樣本數, 2) 的輸入。
        outputs: 每筆輸入對應的輸出向量。
        save_path (str, optional): 有給時存檔，否則直接顯示。
    """
    X = np.asarray(X)
    values = np.vstack(outputs)[:, 0]

    fig = plt.figure(figsize=(7, 6))
    plt.title("Network Output", fontsize=16)
    sc = plt.scatter(X[:, 0], X[:, 1], c=values, cmap='coolwarm')
    plt.colorbar(sc, label='output[0]')
    plt.xlabel("x1")
    plt.ylabel("x2")
    plt.grid(True)
    plt.tight_layout()
    _finish(fig, save_path)


def plot_weight_histogram(network, save_path=None):
    """繪製每一層權重的分佈直方圖。"""
    n = len(network.layers)
    fig, axes = plt.subplots(1, n, figsize=(5 * n, 4), squeeze=False)
    for i, layer in enumerate(network.layers):
        ax = axes[0][i]
        ax.hist(layer.weights.data, bins=20, range=(-1, 1), alpha=0.75, color='cornflowerblue')
        ax.set_title(f"Layer {i} {layer.shape}")
        ax.set_xlabel("weight")
        ax.grid(axis='y', alpha=0.5)
    plt.tight_layout()
    _finish(fig, save_path)
