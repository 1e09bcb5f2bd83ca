"""calculator/operators.py"""
import logging

import numpy as np

from calculator.exceptions import DivideByZeroError

logger = logging.getLogger(__name__)


class Operators:
    """所有算术操作符的静态方法集合（IEEE-754 float64 语义）"""

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        """一元负号"""
        return np.negative(np.float64(operand))

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除数为0（含-0.0）时报错，而不是返回inf"""
        if operand2 == 0.0:
            raise DivideByZeroError()
        with np.errstate(over='ignore', under='ignore'):
            return np.float64(operand1) / np.float64(operand2)

    @staticmethod
    def pow(operand1, operand2):
        """
        乘方：实数指数，支持负数和小数指数。
        0的负数次幂得到inf，溢出得到inf，负底数的小数次幂得到nan，都不算错误。
        """
        with np.errstate(all='ignore'):
            result = np.power(np.float64(operand1), np.float64(operand2))
        if not np.isfinite(result):
            logger.debug(f"Non-finite power result: {operand1} ^ {operand2} = {result}")
        return result
