"""核心模块 - Token系统、词法分析、栈和中缀求值器"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, END_TOKEN
)
from .stack import ArrayStack, EmptyStackError
from .tokenizer import tokenize, read_tokens, TokenSourceError
from .operators import Operators
from .infix_evaluator import (
    InfixEvaluator, EvaluationState, InvalidExpressionError, evaluate_expression
)

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'END_TOKEN',
    'ArrayStack', 'EmptyStackError',
    'tokenize', 'read_tokens', 'TokenSourceError',
    'Operators',
    'InfixEvaluator', 'EvaluationState', 'InvalidExpressionError', 'evaluate_expression'
]
