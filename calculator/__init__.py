"""计算器核心 - Token系统、词法分析、调度场转换和RPN求值"""
from .token_system import TokenType, Token, TOKEN_DEFINITIONS, tokens_to_text
from .exceptions import (
    CalculatorError, InvalidTokenError, UnmatchedParensError,
    DivideByZeroError, InvalidExpressionError
)
from .parser import tokenize, validate_parens
from .rpn_converter import resolve_unary_minus, to_postfix
from .rpn_evaluator import evaluate
from .operators import Operators
from .evaluator import calculate, ExpressionEvaluator

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'tokens_to_text',
    'CalculatorError', 'InvalidTokenError', 'UnmatchedParensError',
    'DivideByZeroError', 'InvalidExpressionError',
    'tokenize', 'validate_parens', 'resolve_unary_minus', 'to_postfix',
    'evaluate', 'Operators', 'calculate', 'ExpressionEvaluator'
]
