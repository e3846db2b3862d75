#!/usr/bin/env python3
"""Complexity guard for the per-file conversion state machine."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
TARGET = ROOT / "src/webp_converter/application/use_cases.py"
MAX_STATEMENTS = 45
MAX_DEPTH = 3


def _statement_count(node: ast.FunctionDef) -> int:
    return sum(isinstance(child, ast.stmt) for child in ast.walk(node)) - 1


def _max_depth(node: ast.AST, depth: int = 0) -> int:
    nested = (ast.If, ast.For, ast.While, ast.Try, ast.With)
    deepest = depth
    for child in ast.iter_child_nodes(node):
        child_depth = depth + 1 if isinstance(child, nested) else depth
        deepest = max(deepest, _max_depth(child, child_depth))
    return deepest


def main() -> None:
    """Fail when use-case functions grow too long or too deeply nested."""
    tree = ast.parse(TARGET.read_text(encoding="utf-8"))
    violations: list[str] = []
    for node in tree.body:
        if not isinstance(node, ast.FunctionDef):
            continue
        count = _statement_count(node)
        if count > MAX_STATEMENTS:
            violations.append(f"{node.name}: {count} statements")
        depth = _max_depth(node)
        if depth > MAX_DEPTH:
            violations.append(f"{node.name}: nesting depth {depth}")
    if violations:
        raise SystemExit(
            "Use-case complexity threshold exceeded:\n"
            + "\n".join(f"- {v}" for v in violations)
        )
    print("Orchestrator complexity check passed.")


if __name__ == "__main__":
    main()
