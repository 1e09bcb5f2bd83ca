"""配置模块"""
from .config import (
    OPERATOR_CONFIG, EVALUATOR_CONFIG, REPL_CONFIG,
    OUTPUT_CONFIG, LOGGING_CONFIG, validate_config
)

__all__ = [
    'OPERATOR_CONFIG', 'EVALUATOR_CONFIG', 'REPL_CONFIG',
    'OUTPUT_CONFIG', 'LOGGING_CONFIG', 'validate_config'
]
