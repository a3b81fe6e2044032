"""core/tokenizer.py - 把输入文本切分为分类后的Token（惰性）"""
import logging
import re

from config.config import TOKENIZER_CONFIG
from core.token_system import TOKEN_DEFINITIONS, END_TOKEN, number_token, word_token, other_token

logger = logging.getLogger(__name__)

# '-' 不属于数字，负号只能作为二元减号出现
NUMBER_PATTERN = re.compile(r"\d+(\.\d*)?|\.\d+")
WORD_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")


class TokenSourceError(RuntimeError):
    """读取输入失败，不可恢复"""
    pass


def tokenize(text):
    """
    逐个产生Token，遇到换行或文本末尾时产生结束标记
    Args:
        text: 表达式文本
    Yields:
        Token
    """
    single_chars = (TOKENIZER_CONFIG["operators"]
                    + TOKENIZER_CONFIG["open_brackets"]
                    + TOKENIZER_CONFIG["close_brackets"])
    end_char = TOKENIZER_CONFIG["end_of_expression"]

    i = 0
    n = len(text)
    while i < n:
        ch = text[i]

        if ch == end_char:
            yield END_TOKEN
            return

        if ch.isspace():
            i += 1
            continue

        if ch in single_chars:
            yield TOKEN_DEFINITIONS[ch]
            i += 1
            continue

        m = NUMBER_PATTERN.match(text, i)
        if m:
            yield number_token(m.group(0))
            i = m.end()
            continue

        m = WORD_PATTERN.match(text, i)
        if m:
            yield word_token(m.group(0))
            i = m.end()
            continue

        yield other_token(ch)
        i += 1

    yield END_TOKEN


def read_tokens(stream):
    """从文件类对象读取一行并切分"""
    try:
        line = stream.readline()
    except OSError as e:
        raise TokenSourceError(f"Failed to read expression: {e}") from e
    logger.debug(f"Read expression line: {line!r}")
    return tokenize(line)
