"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"                # 数字常量
    OPERATOR = "operator"            # + - * / ^
    OPEN_BRACKET = "open_bracket"    # ( {
    CLOSE_BRACKET = "close_bracket"  # ) }
    END = "end"                      # 表达式结束（换行）
    WORD = "word"                    # 标识符，语法中总是非法
    OTHER = "other"                  # 其他无法识别的字符


class Token:
    def __init__(self, token_type, text, value=None):
        self.type = token_type
        self.text = text
        self.value = value  # 仅 NUMBER 有数值

    @property
    def char(self):
        """单字符token的字符，其余返回 None"""
        if self.type in (TokenType.OPERATOR, TokenType.OPEN_BRACKET, TokenType.CLOSE_BRACKET):
            return self.text
        return None

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.text, self.value) == (other.type, other.text, other.value)

    def __hash__(self):
        return hash((self.type, self.text, self.value))

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name}, {self.text!r})"


# 单字符Token定义字典
TOKEN_DEFINITIONS = {
    # 二元运算符
    '+': Token(TokenType.OPERATOR, '+'),
    '-': Token(TokenType.OPERATOR, '-'),
    '*': Token(TokenType.OPERATOR, '*'),
    '/': Token(TokenType.OPERATOR, '/'),
    '^': Token(TokenType.OPERATOR, '^'),

    # 括号，两种形式可以互换
    '(': Token(TokenType.OPEN_BRACKET, '('),
    '{': Token(TokenType.OPEN_BRACKET, '{'),
    ')': Token(TokenType.CLOSE_BRACKET, ')'),
    '}': Token(TokenType.CLOSE_BRACKET, '}'),

    # 结束标记
    '\n': Token(TokenType.END, '\n'),
}

END_TOKEN = TOKEN_DEFINITIONS['\n']


def number_token(value):
    return Token(TokenType.NUMBER, str(value), value=float(value))


def word_token(text):
    return Token(TokenType.WORD, text)


def other_token(text):
    return Token(TokenType.OTHER, text)
