'''
Name: Playground NN
Topic: forward propagation
Author: CHEN, KE-RONG
Date: 2026/10/19
'''

class NeuralNetworkError(Exception):
    """網路建構或推論時發生錯誤的基礎類別。"""


class InvalidTopology(NeuralNetworkError, ValueError):
    """
    層寬度列表不合法：少於兩層、寬度不是整數或寬度 <= 0。
    """


class ShapeMismatch(NeuralNetworkError, ValueError):
    """
    矩陣或輸入向量的形狀與預期不符。
    """


class EmptyBatch(ShapeMismatch):
    """推論時傳入了空的 batch。"""
