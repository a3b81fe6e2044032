"""core/operators.py"""
import numpy as np
import logging

from config.config import EVALUATOR_CONFIG

logger = logging.getLogger(__name__)


class Operators:
    """所有二元运算符的静态方法集合（IEEE 浮点语义，除零得到 inf/nan）"""

    @staticmethod
    def add(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法：除零不报错，返回 inf 或 nan"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.divide(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def pow(operand1, operand2):
        """operand1 的 operand2 次幂"""
        with np.errstate(all='ignore'):
            return np.power(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def precedence(char):
        return EVALUATOR_CONFIG["precedence"].get(char, EVALUATOR_CONFIG["default_precedence"])

    @staticmethod
    def apply(operator, operand1, operand2):
        op_method = getattr(Operators, OPERATOR_METHODS.get(operator, ''), None)
        if op_method is None:
            raise ValueError(f"Unknown binary operator: {operator}")
        result = op_method(operand1, operand2)
        logger.debug(f"{operand1} {operator} {operand2} = {result}")
        return result


OPERATOR_METHODS = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
    '^': 'pow',
}
