# parser/lexer.py
# This file is part of transiter - Lazy Transitive Traversal
#
# Lexical analyzer for tree literals using SLY

"""Lexical analyzer for tree literals such as ``1(2(4), 3)``.

Supported Tokens:
- Labels: integers (NUMBER) and identifiers (NAME)
- Punctuation: (, ), ,
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class TreeLexer(Lexer):
    """SLY-based lexer for tree literal tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "NUMBER",
        "NAME",
        "LPAREN",
        "RPAREN",
        "COMMA",
    }

    ignore = " \t\r\n"

    LPAREN = r"\("
    RPAREN = r"\)"
    COMMA = r","

    NAME = r"[a-zA-Z_][a-zA-Z0-9_]*"

    @_(r"\d+")
    def NUMBER(self, t):
        t.value = int(t.value)
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Raises:
            ValueError: Always raised with character and position information
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
