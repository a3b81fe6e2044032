"""中缀表达式求值器 - 单遍转换并求值，不生成完整的后缀表达式"""
import logging

from config.config import EVALUATOR_CONFIG
from core.token_system import TokenType
from core.tokenizer import tokenize
from core.operators import Operators
from core.stack import ArrayStack, EmptyStackError

logger = logging.getLogger(__name__)

OPEN_BRACKETS = EVALUATOR_CONFIG["open_brackets"]
CLOSE_BRACKETS = EVALUATOR_CONFIG["close_brackets"]


class InvalidExpressionError(Exception):
    """表达式不符合语法"""
    pass


class EvaluationState:
    """上一个Token的类型和字符，只用于检查相邻规则"""

    def __init__(self):
        self.prev_type = None
        self.prev_char = None

    @property
    def prev_was_operand(self):
        return self.prev_type == TokenType.NUMBER

    @property
    def at_start(self):
        return self.prev_type is None

    def update(self, token):
        self.prev_type = token.type
        self.prev_char = token.char


class InfixEvaluator:
    """
    用两个栈对中缀表达式求值：运算符栈（用于转换为后缀）和操作数栈（用于求值）。
    同一个实例不能被并发调用；每次 evaluate 都会重置栈。
    """

    def __init__(self):
        self.operator_stack = ArrayStack()
        self.operand_stack = ArrayStack()

    def evaluate(self, tokens):
        """
        处理Token直到结束标记，再处理栈中剩余的运算符
        Args:
            tokens: Token 可迭代对象（可以是惰性的生成器）
        Returns:
            表达式的值 (float)
        Raises:
            InvalidExpressionError: 表达式不合法
        """
        self.operator_stack.clear()
        self.operand_stack.clear()
        state = EvaluationState()

        for token in tokens:
            if token.type == TokenType.END:
                break

            if token.type == TokenType.NUMBER:
                self.handle_operand(token.value, state)
            elif token.type == TokenType.OPERATOR:
                self.handle_operator(token.text, state)
            elif token.type == TokenType.OPEN_BRACKET:
                self.handle_open_bracket(token.text, state)
            elif token.type == TokenType.CLOSE_BRACKET:
                self.handle_close_bracket(token.text, state)
            else:
                # WORD 和 OTHER 都不属于语法
                self._reject(f"Unrecognized symbol: {token.text}")

            state.update(token)

        return self.handle_remaining_operators(state)

    def evaluate_text(self, text):
        return self.evaluate(tokenize(text))

    def handle_operand(self, operand, state):
        """操作数直接入栈"""
        if state.prev_was_operand:
            self._reject("Can not have multiple operands in succession.")
        if state.prev_type == TokenType.CLOSE_BRACKET:
            self._reject("Can not have operand following a closing bracket.")
        self.operand_stack.push(float(operand))

    def handle_operator(self, operator, state):
        """先解析栈顶优先级不低于当前运算符的运算符，再把当前运算符入栈"""
        if not state.prev_was_operand:
            if state.at_start:
                self._reject("Expression can not begin with an operator.")
            if state.prev_type == TokenType.OPEN_BRACKET:
                self._reject("Operator can not follow an open bracket.")
            if state.prev_type == TokenType.OPERATOR:
                self._reject("Can not have two operators in succession.")

        # 括号的优先级为 -1，所以在这里永远不会被弹出
        while (not self.operator_stack.is_empty()
               and Operators.precedence(self.operator_stack.peek()) >= Operators.precedence(operator)):
            self._resolve(self.operator_stack.pop())

        self.operator_stack.push(operator)

    def handle_open_bracket(self, open_bracket, state):
        if state.prev_was_operand:
            self._reject("An open bracket can not follow an operand.")
        if state.prev_type == TokenType.CLOSE_BRACKET:
            self._reject("An open bracket can not follow a closed bracket.")

        # 开括号优先级最低，总是直接入栈，开始新的作用域
        self.operator_stack.push(open_bracket)

    def handle_close_bracket(self, close_bracket, state):
        """解析运算符直到遇到开括号；括号种类不要求配对"""
        if not (state.prev_was_operand or state.prev_type == TokenType.CLOSE_BRACKET):
            self._reject("A closed bracket must be preceded by an operand.")

        while True:
            try:
                operator = self.operator_stack.pop()
            except EmptyStackError as e:
                self._reject(f"Unmatched closing bracket '{close_bracket}'.", cause=e)
            if operator in OPEN_BRACKETS:
                break
            self._resolve(operator)

    def handle_remaining_operators(self, state):
        """到达结束标记后，依次解析剩余的运算符，返回最后的结果"""
        if state.at_start:
            self._reject("Empty expression.")
        if state.prev_type in (TokenType.OPERATOR, TokenType.OPEN_BRACKET):
            self._reject(f"Expression can not end with '{state.prev_char}'.")

        while not self.operator_stack.is_empty():
            operator = self.operator_stack.pop()
            if operator in OPEN_BRACKETS:
                self._reject(f"Unmatched opening bracket '{operator}'.")
            self._resolve(operator)

        if len(self.operand_stack) != 1:
            self._reject(f"Malformed expression: {len(self.operand_stack)} operands left after evaluation.")

        return float(self.operand_stack.pop())

    def _resolve(self, operator):
        """弹出两个操作数并计算，结果压回操作数栈"""
        try:
            operand2 = self.operand_stack.pop()
            operand1 = self.operand_stack.pop()
        except EmptyStackError as e:
            self._reject(f"Insufficient operands for '{operator}'.", cause=e)
        self.operand_stack.push(Operators.apply(operator, operand1, operand2))

    @staticmethod
    def _reject(message, cause=None):
        logger.debug(f"Rejected expression: {message}")
        raise InvalidExpressionError(message) from cause


def evaluate_expression(text):
    """对一行中缀表达式求值"""
    return InfixEvaluator().evaluate_text(text)
