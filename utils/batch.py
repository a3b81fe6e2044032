"""utils/batch.py - 批量求值，一行一个表达式"""
import numpy as np
import pandas as pd
import logging

from config.config import BATCH_CONFIG
from core import InfixEvaluator, InvalidExpressionError

logger = logging.getLogger(__name__)


def load_expressions(file_path):
    """
    读取表达式文件，忽略空行

    Parameters:
    - file_path: 文本文件路径

    Returns:
    - 表达式字符串列表
    """
    logger.info(f"Loading expressions from {file_path}")
    with open(file_path, 'r', encoding='utf-8') as f:
        expressions = [line.strip() for line in f if line.strip()]
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_expressions(expressions):
    """对每个表达式单独求值，非法表达式记录错误信息而不中断"""
    rows = []
    for expression in expressions:
        expression = expression.strip()
        if not expression:
            continue
        try:
            # 每个表达式使用独立的求值器
            result = InfixEvaluator().evaluate_text(expression)
            rows.append((expression, result, None))
        except InvalidExpressionError as e:
            logger.warning(f"Invalid expression {expression!r}: {e}")
            rows.append((expression, np.nan, str(e)))

    return pd.DataFrame(rows, columns=BATCH_CONFIG["columns"])


def summarize_results(results):
    total = len(results)
    invalid = int(results['error'].notna().sum())
    return {
        'total': total,
        'valid': total - invalid,
        'invalid': invalid,
    }
