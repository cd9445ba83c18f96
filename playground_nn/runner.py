'''
Name: Playground NN
Topic: forward propagation
Author: CHEN, KE-RONG
Date: 2026/10/19
'''
from concurrent.futures import ThreadPoolExecutor

# 進度條函式庫
from tqdm import tqdm

from .errors import ShapeMismatch
from .matrix import Matrix

class BatchRunner:
    """
    批次推論器，把大型 batch 切成互不重疊的小 batch 後依序 (或多執行緒) 推論，
    再依照原本的輸入順序合併結果。
    """
    def __init__(self, network, chunk_size=256, workers=1, progress=False):
        """
        初始化推論器。

        參數:
            network: 要推論的 NeuralNetwork (不可變，可共用)。
            chunk_size (int): 每個小 batch 的樣本數。
            workers (int): 執行緒數量，1 代表在目前執行緒執行。
            progress (bool): 是否顯示 tqdm 進度條。
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size 必須大於 0，收到 {chunk_size}")
        if workers < 1:
            raise ValueError(f"workers 必須大於 0，收到 {workers}")
        self.network = network
        self.chunk_size = chunk_size
        self.workers = workers
        self.progress = progress

    def split(self, batch):
        """依序切出長度最多為 chunk_size 的小 batch。"""
        return [batch[start:start + self.chunk_size]
                for start in range(0, len(batch), self.chunk_size)]

    def run(self, batch):
        """
        執行批次推論。

        參數:
            batch: 等長向量的序列。

        返回:
            list: 每筆輸入對應的輸出向量，順序與輸入相同。任一小 batch 失敗時整個呼叫失敗。
        """
        # 先檢查整個 batch，避免推論到一半才發現形狀錯誤
        examples = Matrix.from_rows(batch)
        if examples.cols != self.network.input_dim:
            raise ShapeMismatch(
                f"輸入向量長度為 {examples.cols}，網路輸入層寬度為 {self.network.input_dim}")

        chunks = self.split(examples.to_rows())
        bar = tqdm(total=len(chunks), desc="Inference Progress", disable=not self.progress)
        outputs = []
        try:
            if self.workers == 1:
                for chunk in chunks:
                    outputs.append(self.network.infer(chunk))
                    bar.update(1)
            else:
                with ThreadPoolExecutor(max_workers=self.workers) as executor:
                    # map 會依照提交順序回傳結果
                    for result in executor.map(self.network.infer, chunks):
                        outputs.append(result)
                        bar.update(1)
        finally:
            bar.close()
        return [vector for chunk_outputs in outputs for vector in chunk_outputs]
