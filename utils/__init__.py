"""工具模块"""
from .output import supports_ansi, format_number, print_result, print_error, print_prompt

__all__ = ['supports_ansi', 'format_number', 'print_result', 'print_error', 'print_prompt']
