'''
Name: Playground NN
Topic: forward propagation
Author: CHEN, KE-RONG
Date: 2026/10/19
'''
import numpy as np

from .errors import ShapeMismatch, EmptyBatch

DTYPE = np.float64


def _as_buffer(src, rows, cols, name='buffer'):
    """把輸入轉成一維 float 緩衝區，並檢查長度是否等於 rows * cols。"""
    buf = np.asarray(src, dtype=DTYPE).reshape(-1)
    if rows < 0 or cols < 0 or buf.size != rows * cols:
        raise ShapeMismatch(f"{name} 長度為 {buf.size}，與形狀 ({rows}, {cols}) 不符")
    return buf


def transpose(src, src_rows, src_cols):
    """
    轉置以列為主 (row-major) 儲存的扁平矩陣。

    參數:
        src: 長度為 src_rows * src_cols 的扁平緩衝區。
        src_rows (int): 原矩陣列數。
        src_cols (int): 原矩陣行數。

    返回:
        np.array: 形狀為 (src_cols, src_rows) 的扁平緩衝區。
    """
    buf = _as_buffer(src, src_rows, src_cols, 'src')
    return np.ascontiguousarray(buf.reshape(src_rows, src_cols).T).reshape(-1)


def multiply(a, b, m, n, k):
    """
    扁平矩陣相乘：C = A · B，其中 A 為 m×k、B 為 k×n、C 為 m×n。
    """
    a_buf = _as_buffer(a, m, k, 'A')
    b_buf = _as_buffer(b, k, n, 'B')
    return np.dot(a_buf.reshape(m, k), b_buf.reshape(k, n)).reshape(-1)


class Matrix:
    """
    不可變的二維矩陣：以列為主的扁平緩衝區加上 rows / cols。
    所有運算都回傳新的 Matrix，不會修改原本的緩衝區。
    """
    __slots__ = ('_data', '_rows', '_cols')

    def __init__(self, data, rows, cols):
        buf = _as_buffer(data, rows, cols).copy()
        buf.setflags(write=False)
        self._data = buf
        self._rows = int(rows)
        self._cols = int(cols)

    @classmethod
    def from_array(cls, array):
        """由二維陣列建立矩陣。"""
        array = np.asarray(array, dtype=DTYPE)
        if array.ndim != 2:
            raise ShapeMismatch(f"需要二維陣列，收到 {array.ndim} 維")
        return cls(array.reshape(-1), array.shape[0], array.shape[1])

    @classmethod
    def from_rows(cls, rows):
        """
        將一串等長向量依序攤平成 (len(rows), len(rows[0])) 的矩陣。

        參數:
            rows: 向量的序列，每個向量長度必須相同。
        """
        rows = list(rows)
        if not rows:
            raise EmptyBatch("batch 不可為空")
        width = None
        for i, row in enumerate(rows):
            if np.ndim(row) != 1:
                raise ShapeMismatch(f"第 {i} 筆資料不是一維向量")
            if width is None:
                width = len(row)
            elif len(row) != width:
                raise ShapeMismatch(f"第 {i} 筆向量長度為 {len(row)}，預期為 {width}")
        if width == 0:
            raise ShapeMismatch("向量長度不可為 0")
        data = np.concatenate([np.asarray(row, dtype=DTYPE).reshape(-1) for row in rows])
        return cls(data, len(rows), width)

    @property
    def rows(self):
        return self._rows

    @property
    def cols(self):
        return self._cols

    @property
    def shape(self):
        return (self._rows, self._cols)

    @property
    def data(self):
        """唯讀的扁平緩衝區。"""
        return self._data

    def __len__(self):
        return self._data.size

    def __repr__(self):
        return f"Matrix(rows={self._rows}, cols={self._cols})"

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._data, other._data)

    __hash__ = None

    def transpose(self):
        return Matrix(transpose(self._data, self._rows, self._cols), self._cols, self._rows)

    @property
    def T(self):
        return self.transpose()

    def matmul(self, other):
        """
        矩陣相乘 self · other，收縮維度為 self.cols == other.rows。
        """
        if self._cols != other.rows:
            raise ShapeMismatch(
                f"無法相乘: ({self._rows}, {self._cols}) · ({other.rows}, {other.cols})")
        data = multiply(self._data, other.data, self._rows, other.cols, self._cols)
        return Matrix(data, self._rows, other.cols)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def append_row(self, value):
        """在矩陣最下方加上一列常數，回傳 (rows + 1, cols) 的新矩陣。"""
        extra = np.full(self._cols, value, dtype=DTYPE)
        return Matrix(np.concatenate([self._data, extra]), self._rows + 1, self._cols)

    def to_array(self):
        """回傳可寫入的 (rows, cols) numpy 陣列副本。"""
        return self._data.reshape(self._rows, self._cols).copy()

    def to_rows(self):
        """依序切成 rows 個長度為 cols 的向量。"""
        if self._cols == 0:
            return [np.empty(0, dtype=DTYPE) for _ in range(self._rows)]
        return [self._data[start:start + self._cols].copy()
                for start in range(0, self._data.size, self._cols)]
