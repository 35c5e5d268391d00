from __future__ import annotations

import ast
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]


def _python_files(root: Path):
    for path in root.rglob("*.py"):
        if "dist" in path.parts:
            continue
        yield path


def _imported_modules(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8", errors="ignore"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name
        elif isinstance(node, ast.ImportFrom):
            yield node.module or ""


def _matches(name: str, banned: tuple[str, ...]) -> bool:
    return any(name == prefix or name.startswith(prefix + ".") for prefix in banned)


def test_core_layer_does_not_import_storage_layer():
    violations: list[tuple[str, str]] = []

    for path in _python_files(ROOT / "core"):
        for name in _imported_modules(path):
            if _matches(name, ("infra", "sqlalchemy", "alembic")):
                violations.append((str(path.relative_to(ROOT)), name))

    assert not violations, f"Core layer imports storage layer: {violations}"


def test_task_engine_only_talks_to_storage_through_ports():
    violations: list[tuple[str, str]] = []

    for path in _python_files(ROOT / "core" / "services"):
        for name in _imported_modules(path):
            if _matches(name, ("json", "sqlite3")):
                violations.append((str(path.relative_to(ROOT)), name))

    assert not violations, f"Services bypass repository ports: {violations}"
