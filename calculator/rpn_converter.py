"""中缀 -> 后缀(RPN) 转换：调度场算法"""
import logging

from calculator.exceptions import UnmatchedParensError
from calculator.token_system import Token, TokenType, BINARY_OPERATORS, tokens_to_text

logger = logging.getLogger(__name__)

# 这些Token之后出现的 '-' 是一元负号
_PREFIX_CONTEXT = BINARY_OPERATORS | {TokenType.UNARY_MINUS, TokenType.LPAREN}


def resolve_unary_minus(tokens):
    """
    区分一元负号：位于开头、操作符之后或 '(' 之后的 MINUS 改为 UNARY_MINUS。
    已经是 UNARY_MINUS 的Token保持不变，所以重复调用结果一致。
    """
    resolved = []
    prev = None
    for token in tokens:
        if token.type == TokenType.MINUS and (prev is None or prev.type in _PREFIX_CONTEXT):
            token = Token.of(TokenType.UNARY_MINUS)
        resolved.append(token)
        prev = token
    return resolved


def _should_pop(top, incoming):
    """栈顶操作符是否要在 incoming 入栈前弹出"""
    if top.type == TokenType.LPAREN:
        return False
    if incoming.is_right_associative():
        return top.precedence > incoming.precedence
    return top.precedence >= incoming.precedence


def to_postfix(tokens):
    """
    调度场算法（Shunting-yard）

    Args:
        tokens: 中缀Token序列（MINUS 可以尚未区分一元/二元）
    Returns:
        后缀Token序列，不含括号
    Raises:
        UnmatchedParensError: 括号不配对
    """
    output = []
    operators = []

    for token in resolve_unary_minus(tokens):
        token_type = token.type

        if token_type == TokenType.NUMBER:
            output.append(token)

        elif token_type in (TokenType.LPAREN, TokenType.UNARY_MINUS):
            # 前缀操作符：直接入栈，不弹出任何东西
            operators.append(token)

        elif token_type == TokenType.RPAREN:
            while True:
                if not operators:
                    raise UnmatchedParensError()
                top = operators.pop()
                if top.type == TokenType.LPAREN:
                    break
                output.append(top)

        else:
            # 二元操作符
            while operators and _should_pop(operators[-1], token):
                output.append(operators.pop())
            operators.append(token)

    # 把剩余的操作符移到输出
    while operators:
        op = operators.pop()
        if op.type == TokenType.LPAREN:
            raise UnmatchedParensError()
        output.append(op)

    logger.debug(f"Postfix: {tokens_to_text(output)}")
    return output
