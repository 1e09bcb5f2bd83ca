"""
计算器的异常层次结构。

所有异常都继承自 CalculatorError，调用方可以一次捕获全部计算错误。
每个异常携带稳定的 code 以及诊断信息属性，流水线在第一个失败的阶段
抛出异常并原样交给调用方，不做重试也不替换默认值。
"""


class CalculatorError(Exception):
    """所有计算错误的基类"""
    code = "CALCULATOR_ERROR"


class InvalidTokenError(CalculatorError):
    """
    词法错误：无法识别的字符或格式错误的数字字面量。

    Attributes:
        token: 出错的字符或子串
    """
    code = "INVALID_TOKEN"

    def __init__(self, token: str):
        super().__init__(f"invalid token: '{token}'")
        self.token = token


class UnmatchedParensError(CalculatorError):
    """结构错误：括号嵌套不平衡"""
    code = "UNMATCHED_PARENS"

    def __init__(self):
        super().__init__("unmatched parentheses")


class DivideByZeroError(CalculatorError):
    """算术错误：除法右操作数为零（乘方不在此列）"""
    code = "DIVIDE_BY_ZERO"

    def __init__(self):
        super().__init__("division by zero")


class InvalidExpressionError(CalculatorError):
    """
    只有在后缀求值时才能发现的结构错误。

    Attributes:
        detail: 操作数个数错误、栈中残留多余数值或栈为空等具体原因
    """
    code = "INVALID_EXPRESSION"

    def __init__(self, detail: str):
        super().__init__(f"invalid expression: {detail}")
        self.detail = detail
