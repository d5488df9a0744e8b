import ast
import re
from pathlib import Path

NUMBERED_STEP = re.compile(r"^\s*1\.\s", re.MULTILINE)


def _test_files() -> list[Path]:
    root = Path(__file__).resolve().parent
    return sorted(path for path in root.rglob("test_*.py") if path.name != "conftest.py")


def _undocumented_test_functions(file_path: Path) -> list[tuple[str, int]]:
    tree = ast.parse(file_path.read_text(encoding="utf-8"))
    violations: list[tuple[str, int]] = []
    for node in tree.body:
        if not isinstance(node, ast.FunctionDef) or not node.name.startswith("test_"):
            continue
        docstring = ast.get_docstring(node) or ""
        if not NUMBERED_STEP.search(docstring):
            violations.append((node.name, node.lineno))
    return violations


def test_every_test_function_documents_numbered_steps():
    """
    Validate test methods describe their steps.

    1. Discover all backend test files excluding conftest.
    2. Parse each file AST and inspect only test_* function docstrings.
    3. Detect docstrings missing a numbered step list.
    4. Validate no violations exist and report actionable locations otherwise.
    """
    errors: list[str] = []
    for file_path in _test_files():
        for test_name, line in _undocumented_test_functions(file_path):
            errors.append(f"{file_path.relative_to(Path(__file__).resolve().parent)}:{line} in {test_name}")
    assert not errors, "Test functions without numbered step docstrings:\n" + "\n".join(errors)
