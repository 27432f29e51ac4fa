"""
Parser for the expression language.

Overview and approach:
- This parser implements a small, hand-written recursive-descent parser for
    statements and a Pratt (precedence climbing) parser for expressions. Each
    token type that can start an expression has a prefix parse function and
    each binary operator has an infix parse function, registered in
    `self.prefix_parse_fns` and `self.infix_parse_fns`. Binding power comes
    from the `PRECEDENCES` table.

Key points:
- Token window:
    - The parser pulls tokens from a `Lexer` one at a time and keeps exactly
        two of them: `cur_token` and `peek_token`. `next_token()` shifts both.

- Expression parsing:
    - `parse_expression(precedence)` runs the prefix function for the current
        token, then, while the peek token binds tighter than `precedence`,
        advances and hands the expression built so far to the peek token's
        infix function. The right operand of an infix operator is parsed with
        that operator's own precedence, so operators of equal precedence
        group to the left.

- Statement parsing:
    - `parse_statement()` dispatches on the current token: `let` and
        `return` have their own rules, everything else is an expression
        statement. Trailing semicolons are optional.

- Errors:
    - The parser never raises. Diagnostics are appended to `self.errors`
        and parsing continues with the next token, so one malformed
        statement can queue several messages. A statement that could not be
        built is dropped; a `let`/`return` whose value failed is kept with a
        `None` value. Callers must check `get_errors()` before trusting the
        program.

Examples:
    - `a + b * c` parses to `(a + (b * c))`
    - `-a * b` parses to `((-a) * b)`
"""

from __future__ import annotations
import logging
from enum import IntEnum
from typing import Callable, Dict, List, Optional
from tokens import Token, TokenType
from lexer import Lexer
from ast_nodes import *


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
INT64_MAX_DIGITS = len(str(INT64_MAX))


class Precedence(IntEnum):
    LOWEST = 1
    EQUALS = 2  # ==
    LESSGREATER = 3  # > or <
    SUM = 4  # +
    PRODUCT = 5  # *
    PREFIX = 6  # -x or !x
    CALL = 7  # f(x)


# Operator precedence table (higher = tighter binding)
PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.ASTERISK: Precedence.PRODUCT,
}

PrefixParseFn = Callable[[], Optional[Expression]]
InfixParseFn = Callable[[Optional[Expression]], Optional[Expression]]


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.errors: List[str] = []
        self._logger = logging.getLogger("Parser")

        self.prefix_parse_fns: Dict[TokenType, PrefixParseFn] = {
            TokenType.IDENT: self.parse_identifier,
            TokenType.INT: self.parse_integer_literal,
            TokenType.TRUE: self.parse_boolean,
            TokenType.FALSE: self.parse_boolean,
            TokenType.BANG: self.parse_prefix_expression,
            TokenType.MINUS: self.parse_prefix_expression,
            TokenType.LPAREN: self.parse_grouped_expression,
        }

        self.infix_parse_fns: Dict[TokenType, InfixParseFn] = {
            token_type: self.parse_infix_expression for token_type in PRECEDENCES
        }

        # Read two tokens so cur_token and peek_token are both set.
        self.cur_token = self.lexer.next_token()
        self.peek_token = self.lexer.next_token()

    def next_token(self) -> None:
        """Move the two-token window forward by one token."""
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, token_type: TokenType) -> bool:
        return self.cur_token.type == token_type

    def peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def expect_peek(self, token_type: TokenType) -> bool:
        """Advance if the peek token has the given type, else record an error.

        On a mismatch the parser does not move, so the unexpected token is
        still there for the next statement to trip over.
        """
        if self.peek_token_is(token_type):
            self.next_token()
            return True
        self.peek_error(token_type)
        return False

    def get_errors(self) -> List[str]:
        """Return the diagnostics recorded so far, in the order they occurred."""
        return list(self.errors)

    def _add_error(self, message: str) -> None:
        self._logger.debug("parse error: %s", message)
        self.errors.append(message)

    def peek_error(self, token_type: TokenType) -> None:
        self._add_error(
            f"expected next token to be {str(token_type)}, "
            f"got {str(self.peek_token.type)} instead"
        )

    def no_prefix_parse_fn_error(self, token: Token) -> None:
        self._add_error(f"no prefix parse function for {token.literal} found")

    def peek_precedence(self) -> int:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def cur_precedence(self) -> int:
        return PRECEDENCES.get(self.cur_token.type, Precedence.LOWEST)

    def parse_program(self) -> ProgramNode:
        """Parse a complete program (sequence of statements)."""
        program = ProgramNode()

        while not self.cur_token_is(TokenType.EOF):
            try:
                stmt = self.parse_statement()
            except RecursionError:
                # The token window is mid-expression; nothing after it is reliable.
                self._add_error("expression nested too deeply")
                break
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()

        return program

    def parse_statement(self) -> Optional[Statement]:
        """Parse a statement."""
        match self.cur_token.type:
            case TokenType.LET:
                return self.parse_let_statement()
            case TokenType.RETURN:
                return self.parse_return_statement()
            case _:
                return self.parse_expression_statement()

    def parse_let_statement(self) -> Optional[LetStatementNode]:
        """Parse let statement: let identifier = expression ;?"""
        token = self.cur_token

        if not self.expect_peek(TokenType.IDENT):
            return None

        name = IdentifierNode(token=self.cur_token, value=self.cur_token.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        return LetStatementNode(token=token, name=name, value=value)

    def parse_return_statement(self) -> ReturnStatementNode:
        """Parse return statement: return expression ;?"""
        token = self.cur_token
        self.next_token()

        return_value = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        return ReturnStatementNode(token=token, return_value=return_value)

    def parse_expression_statement(self) -> Optional[ExpressionStatementNode]:
        token = self.cur_token
        expression = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        if expression is None:
            return None
        return ExpressionStatementNode(token=token, expression=expression)

    def parse_expression(self, precedence: int) -> Optional[Expression]:
        """Parse an expression whose operators bind tighter than `precedence`."""
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.cur_token)
            return None

        left = prefix()

        # Pratt parsing loop: repeatedly bind operators with sufficient
        # precedence to the current left-hand expression.
        while (
            not self.peek_token_is(TokenType.SEMICOLON)
            and precedence < self.peek_precedence()
        ):
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left

            self.next_token()
            left = infix(left)

        return left

    def parse_identifier(self) -> IdentifierNode:
        return IdentifierNode(token=self.cur_token, value=self.cur_token.literal)

    def parse_integer_literal(self) -> Optional[IntegerLiteralNode]:
        token = self.cur_token
        # Longer digit runs cannot fit in 64 bits; skip int() on them.
        if len(token.literal.lstrip("0")) > INT64_MAX_DIGITS:
            self._add_error(f"could not parse {token.literal} as integer")
            return None
        value = int(token.literal)
        if not INT64_MIN <= value <= INT64_MAX:
            self._add_error(f"could not parse {token.literal} as integer")
            return None
        return IntegerLiteralNode(token=token, value=value)

    def parse_boolean(self) -> BooleanLiteralNode:
        return BooleanLiteralNode(
            token=self.cur_token, value=self.cur_token_is(TokenType.TRUE)
        )

    def parse_prefix_expression(self) -> PrefixExpressionNode:
        token = self.cur_token
        self.next_token()
        right = self.parse_expression(Precedence.PREFIX)
        return PrefixExpressionNode(token=token, operator=token.literal, right=right)

    def parse_infix_expression(
        self, left: Optional[Expression]
    ) -> InfixExpressionNode:
        token = self.cur_token
        precedence = self.cur_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        return InfixExpressionNode(
            token=token, left=left, operator=token.literal, right=right
        )

    def parse_grouped_expression(self) -> Optional[Expression]:
        """Parse `( expression )`; the parentheses leave no node behind."""
        self.next_token()
        expression = self.parse_expression(Precedence.LOWEST)

        if not self.expect_peek(TokenType.RPAREN):
            return None

        return expression
