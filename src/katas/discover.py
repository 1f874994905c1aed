from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, List, Set

import libcst as cst

def _find_test_files(root_dir: Path) -> List[Path]:
    return sorted((root_dir / "tests").rglob("test_*.py"))

class _NameCollector(cst.CSTVisitor):
    def __init__(self) -> None:
        self.names: Set[str] = set()

    def visit_Name(self, node: cst.Name) -> None:
        # also sees the attr of katas.word_count(...)
        self.names.add(node.value)

def referenced_names(code: str) -> Dict[str, Set[str]]:
    """Map each top-level ``test_*`` function to the identifiers used in it."""
    mod = cst.parse_module(code)
    out: Dict[str, Set[str]] = {}
    for node in mod.body:
        if isinstance(node, cst.FunctionDef) and node.name.value.startswith("test_"):
            col = _NameCollector()
            node.body.visit(col)
            for deco in node.decorators:
                deco.visit(col)
            out[node.name.value] = col.names
    return out

def select_tests(root_dir: Path, functions: Iterable[str]) -> List[str]:
    """
    Pick pytest node ids whose test function mentions any of ``functions``.
    Node ids are relative to ``root_dir`` so they can be run from there.
    """
    wanted = set(functions)
    if not wanted:
        return []  # unknown impact; caller may choose to run full suite
    selected: List[str] = []
    for path in _find_test_files(root_dir):
        try:
            tests = referenced_names(path.read_text())
        except (OSError, UnicodeDecodeError, cst.ParserSyntaxError):
            continue
        rel = path.relative_to(root_dir).as_posix()
        for name, used in tests.items():
            if used & wanted:
                selected.append(f"{rel}::{name}")
    return selected
