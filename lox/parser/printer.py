"""
Parenthesized prefix rendering of expression trees.

    -123 * (45.67)  ->  (* (- 123.0) (group 45.67))

Author: xwest
"""

from typing import Any

from .ast_nodes import ASTVisitor, ASTNodeType, Expression


class AstPrinter(ASTVisitor):
    """Renders an expression tree as a Lisp-like string."""

    def print(self, expr: Expression) -> str:
        return expr.accept(self)

    def visit(self, node: Expression) -> str:
        if node.node_type == ASTNodeType.LITERAL:
            return self._stringify(node.value)
        if node.node_type == ASTNodeType.GROUPING:
            return self._parenthesize("group", node.expression)
        if node.node_type == ASTNodeType.UNARY_OP:
            return self._parenthesize(node.operator.lexeme, node.operand)
        if node.node_type == ASTNodeType.BINARY_OP:
            return self._parenthesize(node.operator.lexeme, node.left, node.right)
        raise TypeError(f"Unknown node type: {node.node_type}")

    def _parenthesize(self, name: str, *exprs: Expression) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"

    @staticmethod
    def _stringify(value: Any) -> str:
        if value is None:
            return "nil"
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
