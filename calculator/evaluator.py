import logging
from collections import OrderedDict
from typing import Dict, Iterable

import numpy as np
import pandas as pd

from config.config import EVALUATOR_CONFIG
from calculator.exceptions import CalculatorError
from calculator.parser import tokenize, validate_parens
from calculator.rpn_converter import to_postfix
from calculator.rpn_evaluator import evaluate

logger = logging.getLogger(__name__)

BATCH_COLUMNS = ['expression', 'result', 'error_code', 'error']


def calculate(expression: str) -> float:
    """
    完整流水线: tokenize -> validate_parens -> to_postfix -> evaluate
    任一阶段失败都会直接抛出对应的 CalculatorError。
    """
    tokens = tokenize(expression.strip())
    validate_parens(tokens)
    postfix = to_postfix(tokens)
    return evaluate(postfix)


class ExpressionEvaluator:

    def __init__(self, cache_size=None):
        if cache_size is None:
            cache_size = EVALUATOR_CONFIG['cache_size']
        if cache_size <= 0:
            raise ValueError(f"cache_size must be positive, got {cache_size}")
        self.cache_size = cache_size
        # 使用有限大小的OrderedDict实现LRU缓存
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self) -> Dict[str, int]:
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
        }

    def evaluate(self, expression: str) -> float:
        """
        Args:
            expression: 中缀表达式字符串
        Returns:
            float结果；错误不进缓存，直接抛出
        """
        cache_key = expression.strip()

        if cache_key in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(cache_key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {cache_key[:50]}")
            return self._result_cache[cache_key]

        self._cache_misses += 1
        result = calculate(cache_key)
        self._result_cache[cache_key] = result
        self._manage_cache()
        return result

    def evaluate_batch(self, expressions: Iterable[str]) -> pd.DataFrame:
        """
        批量计算，每个表达式一行；空行跳过。
        失败的行 result 为NaN，并记录 error_code 与 error。
        """
        rows = []
        for expression in expressions:
            expression = expression.strip()
            if not expression:
                continue
            try:
                result = self.evaluate(expression)
                rows.append((expression, result, None, None))
            except CalculatorError as e:
                logger.warning(f"Failed to evaluate '{expression[:50]}': {e}")
                rows.append((expression, np.nan, e.code, str(e)))

        frame = pd.DataFrame(rows, columns=BATCH_COLUMNS, dtype=object)
        frame['result'] = frame['result'].astype(np.float64)
        failed = int(frame['error_code'].notna().sum())
        logger.info(f"Batch evaluated: {len(frame)} expressions, {failed} failed")
        return frame
