"""
Lexer for the expression language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`, one token per call to `next_token()`.
- It recognizes keywords (`let`, `return`, `true`, `false`, and the reserved
    `fn`, `if`, `else`), identifiers, integer literals, single- and
    two-character operators (`==`, `!=`) and delimiters, and skips whitespace.

Examples:
    Input:  "let five = 5;"
    Tokens: [LET, IDENT('five'), ASSIGN, INT('5'), SEMICOLON, EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- Two-character operators are checked first so `==` is not split into `=` `=`.
- Identifiers are scanned and then mapped to keywords via `lookup_ident`.
- The lexer never raises: an unknown character becomes an ILLEGAL token and
    the end of input yields EOF on every further call.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import Token, TokenType, lookup_ident


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.current_char = self.text[self.pos] if self.text else None

    def advance(self) -> None:
        """Advance to next character."""
        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def integer(self) -> str:
        """Scan a maximal run of decimal digits."""
        start = self.pos
        while self.current_char is not None and _is_digit(self.current_char):
            self.advance()
        return self.text[start : self.pos]

    def identifier(self) -> str:
        """Scan an identifier or keyword."""
        start = self.pos
        while self.current_char is not None and _is_letter(self.current_char):
            self.advance()
        return self.text[start : self.pos]

    def next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        self.skip_whitespace()

        if self.current_char is None:
            return Token(TokenType.EOF, "")

        # Handle two-character operators first so `==` is not lexed as `=` `=`.
        if self.current_char == "=" and self.peek_char() == "=":
            self.advance()
            self.advance()
            return Token(TokenType.EQ, "==")

        if self.current_char == "!" and self.peek_char() == "=":
            self.advance()
            self.advance()
            return Token(TokenType.NOT_EQ, "!=")

        # Single character tokens handled directly via structural matching.
        match self.current_char:
            case "=":
                token = Token(TokenType.ASSIGN, "=")
            case "+":
                token = Token(TokenType.PLUS, "+")
            case "-":
                token = Token(TokenType.MINUS, "-")
            case "!":
                token = Token(TokenType.BANG, "!")
            case "*":
                token = Token(TokenType.ASTERISK, "*")
            case "/":
                token = Token(TokenType.SLASH, "/")
            case "<":
                token = Token(TokenType.LT, "<")
            case ">":
                token = Token(TokenType.GT, ">")
            case ",":
                token = Token(TokenType.COMMA, ",")
            case ";":
                token = Token(TokenType.SEMICOLON, ";")
            case "(":
                token = Token(TokenType.LPAREN, "(")
            case ")":
                token = Token(TokenType.RPAREN, ")")
            case "{":
                token = Token(TokenType.LBRACE, "{")
            case "}":
                token = Token(TokenType.RBRACE, "}")
            case _:
                token = None

        if token is not None:
            self.advance()
            return token

        if _is_letter(self.current_char):
            ident = self.identifier()
            return Token(lookup_ident(ident), ident)

        if _is_digit(self.current_char):
            return Token(TokenType.INT, self.integer())

        # Unknown character: hand it to the parser as ILLEGAL.
        illegal = self.current_char
        self.advance()
        return Token(TokenType.ILLEGAL, illegal)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, ending with EOF."""
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens


def _is_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"
