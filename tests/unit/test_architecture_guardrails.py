from __future__ import annotations

import ast
import graphlib
import sys
from functools import lru_cache
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

SRC = Path(__file__).resolve().parents[2] / "src"
PACKAGE = SRC / "pacing"

# Which layers each layer may import from; "entry" is bootstrap and __main__.
ALLOWED_LAYERS = {
    "domain": {"domain"},
    "application": {"domain", "application"},
    "infrastructure": {"domain", "application", "infrastructure"},
    "entry": {"domain", "application", "infrastructure", "entry"},
}


def _layer(module: str) -> str:
    parts = module.split(".")
    if len(parts) > 1 and parts[1] in ("domain", "application", "infrastructure"):
        return parts[1]
    return "entry"


def _module_name(path: Path) -> str:
    return ".".join(path.relative_to(SRC).with_suffix("").parts)


def _absolute(module: str, target: str | None, level: int) -> str:
    if level == 0:
        return target or ""
    base = module.split(".")[:-level]
    return ".".join(base + ([target] if target else []))


@lru_cache(maxsize=None)
def _import_table() -> dict[str, set[str]]:
    """Every module under ``pacing`` mapped to the absolute names it imports."""

    table: dict[str, set[str]] = {}
    for path in sorted(PACKAGE.rglob("*.py")):
        module = _module_name(path)
        names: set[str] = set()
        for node in ast.walk(ast.parse(path.read_text(encoding="utf-8"))):
            if isinstance(node, ast.Import):
                names.update(alias.name for alias in node.names)
            elif isinstance(node, ast.ImportFrom):
                origin = _absolute(module, node.module, node.level)
                names.add(origin)
                names.update(f"{origin}.{alias.name}" for alias in node.names)
        table[module] = names
    return table


def _internal_edges() -> dict[str, set[str]]:
    table = _import_table()
    return {module: {name for name in names if name in table and name != module} for module, names in table.items()}


class ArchitectureGuardrailTests(unittest.TestCase):
    def test_layers_only_import_downward(self) -> None:
        violations = []
        for module, targets in _internal_edges().items():
            for target in targets:
                if _layer(target) not in ALLOWED_LAYERS[_layer(module)]:
                    violations.append(f"{module} -> {target}")

        self.assertEqual([], sorted(violations))

    def test_only_the_runner_wires_the_application(self) -> None:
        importers = sorted(module for module, targets in _internal_edges().items() if "pacing.bootstrap" in targets)
        self.assertEqual(["pacing.__main__"], importers)

        runner_importers = [module for module, targets in _internal_edges().items() if "pacing.__main__" in targets]
        self.assertEqual([], runner_importers)

    def test_third_party_libraries_stay_at_the_edges(self) -> None:
        misplaced = []
        for module, names in _import_table().items():
            roots = {name.split(".")[0] for name in names}
            if "sqlalchemy" in roots and not module.startswith("pacing.infrastructure.db."):
                misplaced.append(f"{module} imports sqlalchemy")
            if "dotenv" in roots and module != "pacing.__main__":
                misplaced.append(f"{module} imports dotenv")

        self.assertEqual([], misplaced)

    def test_import_graph_has_no_cycles(self) -> None:
        sorter = graphlib.TopologicalSorter(_internal_edges())
        try:
            sorter.prepare()
        except graphlib.CycleError as exc:
            self.fail(f"Import cycle detected: {' -> '.join(exc.args[1])}")


if __name__ == "__main__":
    unittest.main()
