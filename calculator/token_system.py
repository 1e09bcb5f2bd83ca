"""calculator/token_system.py"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from config.config import OPERATOR_CONFIG


class TokenType(Enum):
    NUMBER = "number"
    PLUS = "plus"
    MINUS = "minus"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"
    UNARY_MINUS = "unary_minus"  # 由转换阶段从 MINUS 区分出来
    LPAREN = "lparen"
    RPAREN = "rparen"


@dataclass(frozen=True)
class OperatorInfo:
    symbol: str
    precedence: int
    right_associative: bool = False
    arity: int = 0


def _operator(symbol, key=None, arity=2):
    key = key or symbol
    return OperatorInfo(
        symbol=symbol,
        precedence=OPERATOR_CONFIG["precedence"][key],
        right_associative=key in OPERATOR_CONFIG["right_associative"],
        arity=arity,
    )


# 非数字Token的定义表
TOKEN_DEFINITIONS = {
    TokenType.PLUS: _operator('+'),
    TokenType.MINUS: _operator('-'),
    TokenType.MULTIPLY: _operator('*'),
    TokenType.DIVIDE: _operator('/'),
    TokenType.POWER: _operator('^'),
    TokenType.UNARY_MINUS: _operator('-', key='neg', arity=1),
    TokenType.LPAREN: _operator('(', arity=0),
    TokenType.RPAREN: _operator(')', arity=0),
}

# 词法分析用：单字符 -> Token类型（'-' 一律先视为二元减号）
SYMBOL_TO_TYPE = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.MULTIPLY,
    '/': TokenType.DIVIDE,
    '^': TokenType.POWER,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
}

BINARY_OPERATORS = frozenset({
    TokenType.PLUS, TokenType.MINUS, TokenType.MULTIPLY,
    TokenType.DIVIDE, TokenType.POWER,
})


@dataclass(frozen=True)
class Token:
    """不可变的Token值；只有 NUMBER 携带 value"""
    type: TokenType
    value: Optional[float] = None

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, float(value))

    @classmethod
    def of(cls, token_type):
        return _SINGLETONS[token_type]

    @property
    def text(self):
        """Token的规范源码文本（数字不会使用指数形式）"""
        if self.type == TokenType.NUMBER:
            return np.format_float_positional(self.value, trim='-')
        return TOKEN_DEFINITIONS[self.type].symbol

    @property
    def precedence(self):
        if self.type == TokenType.NUMBER:
            return 1
        return TOKEN_DEFINITIONS[self.type].precedence

    def is_operator(self):
        return self.type in BINARY_OPERATORS or self.type == TokenType.UNARY_MINUS

    def is_right_associative(self):
        return self.is_operator() and TOKEN_DEFINITIONS[self.type].right_associative

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token(NUMBER, {self.value!r})"
        return f"Token({self.type.name})"


_SINGLETONS = {token_type: Token(token_type) for token_type in TOKEN_DEFINITIONS}


def tokens_to_text(tokens):
    """把Token序列还原成以空格分隔的规范文本"""
    return ' '.join(token.text for token in tokens)
