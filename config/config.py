"""配置文件"""

# 操作符参数
OPERATOR_CONFIG = {
    # 优先级：括号(结构性) < 加减 < 乘除 < 乘方/一元负号
    "precedence": {
        "(": 1,
        ")": 1,
        "+": 2,
        "-": 2,
        "*": 3,
        "/": 3,
        "^": 4,
        "neg": 4,  # 一元负号
    },
    "right_associative": ("^", "neg"),
}

# 求值器参数
EVALUATOR_CONFIG = {
    "cache_size": 1000,  # ExpressionEvaluator 的LRU缓存条目数
}

# 交互模式参数
REPL_CONFIG = {
    "prompt": "Enter an expression (or 'exit' to quit):",
    "exit_command": "exit",
}

# 终端输出
OUTPUT_CONFIG = {
    "use_color": True,
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "reset": "\x1b[0m",
    "result_prefix": "Result: ",
    "error_prefix": "Error:",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    ranks = OPERATOR_CONFIG["precedence"]
    assert ranks["+"] == ranks["-"], "加减必须同级"
    assert ranks["*"] == ranks["/"], "乘除必须同级"
    assert ranks["("] < ranks["+"] < ranks["*"] < ranks["^"], "优先级顺序必须为 () < +- < */ < ^"
    assert ranks["neg"] >= ranks["^"], "一元负号不能比乘方结合得更松"
    assert "^" in OPERATOR_CONFIG["right_associative"], "乘方必须右结合"
    assert EVALUATOR_CONFIG["cache_size"] > 0, "缓存大小必须为正数"
    assert REPL_CONFIG["exit_command"], "退出命令不能为空"
    return True
