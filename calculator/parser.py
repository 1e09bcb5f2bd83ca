"""词法分析与括号检查"""
import logging
import math

from calculator.exceptions import InvalidTokenError, UnmatchedParensError
from calculator.token_system import Token, TokenType, SYMBOL_TO_TYPE

logger = logging.getLogger(__name__)

_NUMBER_CHARS = frozenset('0123456789.')


def _parse_number(buffer):
    """把数字缓冲区解析为有限的float64"""
    try:
        value = float(buffer)
    except ValueError:
        raise InvalidTokenError(buffer) from None
    # 超长数字串会溢出成inf
    if not math.isfinite(value):
        raise InvalidTokenError(buffer)
    return Token.number(value)


def tokenize(expression):
    """
    把表达式拆成Token序列。
    例: "2 + 3" -> [NUMBER 2.0, PLUS, NUMBER 3.0]

    每个 '-' 都作为 MINUS 输出，一元/二元的区分留给转换阶段。
    Raises:
        InvalidTokenError: 无法识别的字符或格式错误的数字
    """
    tokens = []
    num_buffer = []

    for ch in expression:
        if ch in _NUMBER_CHARS:
            num_buffer.append(ch)
            continue
        if num_buffer:
            tokens.append(_parse_number(''.join(num_buffer)))
            num_buffer = []

        if ch.isspace():
            continue

        token_type = SYMBOL_TO_TYPE.get(ch)
        if token_type is None:
            raise InvalidTokenError(ch)
        tokens.append(Token.of(token_type))

    if num_buffer:
        tokens.append(_parse_number(''.join(num_buffer)))

    logger.debug(f"Tokenized {len(expression)} chars into {len(tokens)} tokens")
    return tokens


def validate_parens(tokens):
    """检查括号是否配对；不检查操作符与操作数的位置"""
    balance = 0
    for token in tokens:
        if token.type == TokenType.LPAREN:
            balance += 1
        elif token.type == TokenType.RPAREN:
            balance -= 1
            if balance < 0:
                raise UnmatchedParensError()
    if balance != 0:
        raise UnmatchedParensError()
