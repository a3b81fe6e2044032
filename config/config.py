"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    # 运算符优先级，未列出的字符（包括括号）一律视为 -1
    "precedence": {
        "^": 3,
        "*": 2,
        "/": 2,
        "+": 1,
        "-": 1,
    },
    "default_precedence": -1,
    "open_brackets": ("(", "{"),
    "close_brackets": (")", "}"),
}

# 词法分析参数
TOKENIZER_CONFIG = {
    "operators": "+-*/^",
    "open_brackets": "({",
    "close_brackets": ")}",
    "end_of_expression": "\n",
}

# 命令行参数
CLI_CONFIG = {
    "prompt": "Infix expression:",
    "error_prefix": "Invalid expression: ",
}

# 批量求值
BATCH_CONFIG = {
    "columns": ["expression", "result", "error"],
    "default_output_path": "results.csv",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    precedence = EVALUATOR_CONFIG["precedence"]
    assert set(precedence) == set(TOKENIZER_CONFIG["operators"]), "每个运算符都必须有优先级"
    assert precedence["^"] > precedence["*"] > precedence["+"], "^ 高于 * /，* / 高于 + -"
    assert EVALUATOR_CONFIG["default_precedence"] < min(precedence.values()), "括号优先级必须最低"
    assert "".join(EVALUATOR_CONFIG["open_brackets"]) == TOKENIZER_CONFIG["open_brackets"]
    assert "".join(EVALUATOR_CONFIG["close_brackets"]) == TOKENIZER_CONFIG["close_brackets"]
    return True
