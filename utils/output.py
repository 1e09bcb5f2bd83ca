"""utils/output.py - 终端输出"""
import os
import sys

import numpy as np

from config.config import OUTPUT_CONFIG


def supports_ansi(stream=None):
    """检查终端是否支持ANSI颜色"""
    if not OUTPUT_CONFIG['use_color'] or 'NO_COLOR' in os.environ:
        return False
    stream = stream if stream is not None else sys.stdout
    if sys.platform == 'win32' and 'TERM' not in os.environ:
        return False
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


def _colorize(text, color, stream):
    if supports_ansi(stream):
        return f"{OUTPUT_CONFIG[color]}{text}{OUTPUT_CONFIG['reset']}"
    return text


def format_number(value):
    """最短的定点十进制表示，整数不带 .0（5, 0.5, -8, inf, nan）"""
    return np.format_float_positional(float(value), trim='-')


def print_result(result, stream=None):
    """格式化输出结果"""
    stream = stream if stream is not None else sys.stdout
    if supports_ansi(stream):
        text = _colorize(f"{OUTPUT_CONFIG['result_prefix']}{format_number(result)}", 'green', stream)
    else:
        text = format_number(result)
    print(text, file=stream)


def print_error(message, stream=None):
    """格式化输出错误"""
    stream = stream if stream is not None else sys.stderr
    prefix = _colorize(OUTPUT_CONFIG['error_prefix'], 'red', stream)
    print(f"{prefix} {message}", file=stream)


def print_prompt(prompt, stream=None):
    """格式化输出提示"""
    stream = stream if stream is not None else sys.stdout
    print(_colorize(prompt, 'yellow', stream), file=stream)
