"""Docstring and line-length rules for the ``teems`` package."""

from __future__ import annotations

import ast
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1] / "teems"
MAX_LINE_LENGTH = 79


def _package_files() -> list[Path]:
    return sorted(PACKAGE_ROOT.rglob("*.py"))


def _public_nodes(tree: ast.Module):
    for node in tree.body:
        if not isinstance(node, (ast.FunctionDef, ast.ClassDef)):
            continue
        if node.name.startswith("_"):
            continue
        yield node.name, node
        if not isinstance(node, ast.ClassDef):
            continue
        for child in node.body:
            if isinstance(child, ast.FunctionDef) and not (
                child.name.startswith("_")
            ):
                yield f"{node.name}.{child.name}", child


def test_public_api_docstrings_present() -> None:
    missing: list[str] = []
    for path in _package_files():
        tree = ast.parse(path.read_text(encoding="utf-8"))
        for name, node in _public_nodes(tree):
            if ast.get_docstring(node) is None:
                missing.append(f"{path.name}:{node.lineno} {name}")

    assert not missing, "Missing public docstrings:\n" + "\n".join(missing)


def test_package_line_lengths() -> None:
    violations: list[str] = []
    for path in _package_files():
        lines = path.read_text(encoding="utf-8").splitlines()
        for number, line in enumerate(lines, 1):
            if len(line) > MAX_LINE_LENGTH:
                violations.append(f"{path.name}:{number} ({len(line)})")

    assert not violations, "Lines over 79 characters:\n" + "\n".join(
        violations
    )
