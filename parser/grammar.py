# parser/grammar.py
# This file is part of transiter - Lazy Transitive Traversal
#
# LALR(1) grammar and parser for tree literals using SLY

"""Tree literal grammar implemented with the SLY parser generator.

Grammar:
    node     : label
             | label ( )
             | label ( children )
    children : node
             | children , node
    label    : NUMBER | NAME

Integer labels become ``int``, identifiers stay ``str``.
"""

from sly import Parser
from model.tree_node import TreeNode
from utils.logger import get_logger
from .lexer import TreeLexer
from .exceptions import ParseError


class _TreeParser(Parser):
    """SLY-based LALR(1) parser building ``TreeNode`` values."""

    tokens = TreeLexer.tokens

    @_("node")
    def start(self, p) -> TreeNode:
        """Start rule: a literal is a single root node."""
        return p.node

    @_("label")
    def node(self, p) -> TreeNode:
        """Leaf without parentheses."""
        return TreeNode(p.label)

    @_("label LPAREN RPAREN")
    def node(self, p) -> TreeNode:
        """Leaf with an explicit empty child list."""
        return TreeNode(p.label)

    @_("label LPAREN children RPAREN")
    def node(self, p) -> TreeNode:
        """Inner node with its children in order."""
        return TreeNode(p.label, p.children)

    @_("node")
    def children(self, p) -> list:
        return [p.node]

    @_("children COMMA node")
    def children(self, p) -> list:
        return p.children + [p.node]

    @_("NUMBER")
    def label(self, p):
        return p.NUMBER

    @_("NAME")
    def label(self, p):
        return p.NAME

    def parse(self, text: str) -> TreeNode:
        """Parse a tree literal.

        Args:
            text: Tree literal to parse

        Returns:
            Root node of the parsed tree

        Raises:
            ParseError: If the literal is empty or malformed
        """
        logger = get_logger()
        logger.debug(f"Parsing tree literal: {text}")

        if text.strip() == "":
            raise ParseError("Input tree literal is empty.")

        try:
            root = super().parse(TreeLexer().tokenize(text))

            if root is None:
                raise ParseError("Failed to parse tree literal (syntax error).")

            logger.debug(f"Parsed tree literal into {root.count()} node(s)")
            return root

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of tree literal"

        raise ParseError(error_msg)
