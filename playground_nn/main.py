'''
Name: Playground NN
Topic: forward propagation
Author: CHEN, KE-RONG
Date: 2026/10/19
'''
import argparse
import os

import numpy as np
import yaml

from .dataset import DATASETS
from .errors import NeuralNetworkError
from .model import build
from .runner import BatchRunner
from .show_result import print_summary, plot_outputs, plot_weight_histogram

DEFAULTS = {
    'layers': [2, 10, 10, 1],
    'dataset': 'xor',
    'n_samples': 100,
    'seed': None,
    'chunk_size': 256,
    'workers': 1,
    'plot': False,
    'output_dir': None,
    'log_interval': 5,
}


def load_config(path):
    """讀取 YAML 設定檔，回傳扁平的設定 dict (key 使用底線)。"""
    if not path:
        return {}
    with open(path, 'r') as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"設定檔 {path} 的最上層必須是 mapping")
    unknown = set(k.replace('-', '_') for k in cfg) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"設定檔 {path} 含有未知的欄位: {sorted(unknown)}")
    return {k.replace('-', '_'): v for k, v in cfg.items()}


def build_parser():
    parser = argparse.ArgumentParser(description='Playground NN: forward propagation')
    parser.add_argument('--config', type=str, default=None,
                        help='YAML 設定檔路徑，命令列參數會覆寫設定檔')
    # 預設值為 None，代表「沒有在命令列指定」
    parser.add_argument('--layers', type=int, nargs='+', default=None,
                        help=f"各層神經元數量 (default: {' '.join(map(str, DEFAULTS['layers']))})")
    parser.add_argument('--dataset', type=str, default=None, choices=sorted(DATASETS),
                        help=f"dataset to use (default: {DEFAULTS['dataset']})")
    parser.add_argument('--n-samples', type=int, default=None, metavar='N',
                        help=f"linear 資料集的樣本數 (default: {DEFAULTS['n_samples']})")
    parser.add_argument('--seed', type=int, default=None, metavar='S',
                        help='random seed (default: 不固定)')
    parser.add_argument('--chunk-size', type=int, default=None, metavar='N',
                        help=f"每個小 batch 的樣本數 (default: {DEFAULTS['chunk_size']})")
    parser.add_argument('--workers', type=int, default=None, metavar='N',
                        help=f"推論執行緒數量 (default: {DEFAULTS['workers']})")
    parser.add_argument('--plot', action='store_true', default=None,
                        help='繪製輸出與權重分佈')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='圖片輸出資料夾，未指定時直接顯示')
    parser.add_argument('--log-interval', type=int, default=None, metavar='N',
                        help=f"印出前 N 筆輸出 (default: {DEFAULTS['log_interval']})")
    return parser


def resolve_config(args):
    """合併設定：命令列 > YAML 設定檔 > 預設值。"""
    config = dict(DEFAULTS)
    config.update(load_config(args.config))
    for key in DEFAULTS:
        value = getattr(args, key)
        if value is not None:
            config[key] = value
    if config['dataset'] not in DATASETS:
        raise ValueError(f"不支援的資料集: {config['dataset']}")
    return config


def run(config):
    """依照設定建構網路並推論，回傳 (網路, 輸入, 輸出)。"""
    rng = np.random.default_rng(config['seed']) if config['seed'] is not None else None

    # --- 資料準備 ---
    print(f"使用資料集: {config['dataset'].upper()}")
    X, _ = DATASETS[config['dataset']](n=config['n_samples'], rng=rng)

    # --- 模型建構 ---
    network = build(config['layers'], rng=rng)
    print_summary(network)

    # --- 推論 ---
    runner = BatchRunner(network, chunk_size=config['chunk_size'],
                         workers=config['workers'], progress=True)
    outputs = runner.run(X)

    for x, y in list(zip(X, outputs))[:config['log_interval']]:
        print(f"input={np.round(x, 4).tolist()} -> output={np.round(y, 4).tolist()}")

    # --- 結果顯示 ---
    if config['plot']:
        output_dir = config['output_dir']
        out_path = hist_path = None
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
            out_path = os.path.join(output_dir, 'outputs.png')
            hist_path = os.path.join(output_dir, 'weights.png')
        plot_outputs(X, outputs, save_path=out_path)
        plot_weight_histogram(network, save_path=hist_path)
        if output_dir:
            print(f"圖片已儲存至: {output_dir}")

    return network, X, outputs


def main(argv=None):
    """
    主函式，負責解析命令列參數、建構網路並執行推論。
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = resolve_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        parser.error(str(e))
    print(f"設定: {config}")
    try:
        run(config)
    except (NeuralNetworkError, ValueError) as e:
        parser.error(str(e))
    return 0

if __name__ == '__main__':
    main()
