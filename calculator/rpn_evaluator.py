"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from calculator.exceptions import InvalidExpressionError
from calculator.operators import Operators
from calculator.token_system import TokenType, TOKEN_DEFINITIONS

logger = logging.getLogger(__name__)

UNARY_HANDLERS = {
    TokenType.UNARY_MINUS: Operators.neg,
}

BINARY_HANDLERS = {
    TokenType.PLUS: Operators.add,
    TokenType.MINUS: Operators.sub,
    TokenType.MULTIPLY: Operators.mul,
    TokenType.DIVIDE: Operators.div,
    TokenType.POWER: Operators.pow,
}


def evaluate(postfix):
    """
    评估后缀Token序列

    Args:
        postfix: to_postfix 输出的Token序列
    Returns:
        float结果
    Raises:
        DivideByZeroError: 除数为0
        InvalidExpressionError: 操作数不足、栈中残留多余数值或栈为空
    """
    stack = []

    for token in postfix:
        token_type = token.type

        if token_type == TokenType.NUMBER:
            stack.append(token.value)

        # ================== 一元操作符处理 ==================
        elif token_type in UNARY_HANDLERS:
            if not stack:
                raise InvalidExpressionError("unary minus requires one operand")
            stack.append(UNARY_HANDLERS[token_type](stack.pop()))

        # ================== 二元操作符处理 ==================
        elif token_type in BINARY_HANDLERS:
            if len(stack) < 2:
                symbol = TOKEN_DEFINITIONS[token_type].symbol
                raise InvalidExpressionError(f"insufficient operands for operation '{symbol}'")
            operand2 = stack.pop()
            operand1 = stack.pop()
            stack.append(BINARY_HANDLERS[token_type](operand1, operand2))

        else:
            # 括号不应出现在合法的后缀序列中
            raise InvalidExpressionError(f"unexpected token '{token.text}' in postfix sequence")

    if not stack:
        raise InvalidExpressionError("stack empty after evaluation")
    if len(stack) > 1:
        logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
        raise InvalidExpressionError("extra values remained on the stack")
    return float(stack[0])
