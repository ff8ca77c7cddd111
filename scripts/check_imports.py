#!/usr/bin/env python3
"""Check hexagonal architecture import boundaries of the motionboard package.

Layering rules:
- domain/: Pure motion logic, NO imports from other motionboard layers,
  and no third-party imports except structlog
- application/: Use cases, may import from domain/ only
- infrastructure/: Adapters, may import from domain/ and application/
- config/: Settings, may import from domain/ and infrastructure/

Modules outside these layers (bootstrap.py) are wiring and unchecked.

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import sys
from pathlib import Path

PACKAGE = "motionboard"

# Layer hierarchy: lower number = more inner layer (more protected)
LAYER_HIERARCHY: dict[str, int] = {
    "domain": 0,  # Core, innermost - imports NOTHING from the package
    "application": 1,  # Use cases - imports from domain only
    "infrastructure": 2,  # Adapters - imports from domain, application
    "config": 3,  # Settings - imports from domain, infrastructure
}

# Explicit import rules: what each layer CAN import from
ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "application": {"domain"},
    "infrastructure": {"domain", "application"},
    "config": {"domain", "infrastructure"},
}

# Third-party distributions a layer may use (None = unrestricted)
ALLOWED_THIRD_PARTY: dict[str, set[str] | None] = {
    "domain": {"structlog"},
    "application": {"structlog"},
    "infrastructure": None,
    "config": None,
}


def get_import_modules(node: ast.Import | ast.ImportFrom) -> list[str]:
    """Extract the module names of an import statement.

    Relative imports (from . import x) are returned with their leading dots.
    """
    if isinstance(node, ast.ImportFrom):
        return ["." * node.level + (node.module or "")]
    return [alias.name for alias in node.names]


def _get_file_layer(py_file: Path, package_dir: Path) -> str | None:
    """Determine the architectural layer of a file.

    Args:
        py_file: Path to the Python file
        package_dir: Path to the motionboard package directory

    Returns:
        The layer name or None if the file is not inside a layer
    """
    try:
        relative = py_file.relative_to(package_dir)
    except ValueError:
        return None

    parts = relative.parts
    if len(parts) < 2:
        return None

    file_layer = parts[0]
    return file_layer if file_layer in LAYER_HIERARCHY else None


def _parse_file(py_file: Path) -> ast.Module | None:
    """Parse a Python file into an AST, or None if it does not parse."""
    try:
        source = py_file.read_text(encoding="utf-8")
        return ast.parse(source, filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return None


def _check_import_violation(module: str, file_layer: str) -> str | None:
    """Check if an import violates layer boundaries.

    Args:
        module: The imported module (e.g., "motionboard.domain.models")
        file_layer: The layer the importing file belongs to

    Returns:
        Error message if violation detected, None otherwise
    """
    if module.startswith("."):
        return None

    top_level = module.split(".")[0]

    if top_level == PACKAGE:
        module_parts = module.split(".")
        if len(module_parts) < 2:
            return None
        target_layer = module_parts[1]
        if target_layer not in LAYER_HIERARCHY or target_layer == file_layer:
            return None
        if target_layer not in ALLOWED_IMPORTS[file_layer]:
            return f"{file_layer} layer cannot import from {target_layer}"
        return None

    if top_level in sys.stdlib_module_names or top_level == "__future__":
        return None

    allowed = ALLOWED_THIRD_PARTY[file_layer]
    if allowed is not None and top_level not in allowed:
        return f"{file_layer} layer cannot import third-party package {top_level}"
    return None


def check_file_imports(py_file: Path, package_dir: Path) -> list[tuple[str, int, str]]:
    """Check a single file for import boundary violations.

    Returns:
        List of (file_path, line_number, violation_message) tuples
    """
    file_layer = _get_file_layer(py_file, package_dir)
    if file_layer is None:
        return []

    tree = _parse_file(py_file)
    if tree is None:
        return []

    violations: list[tuple[str, int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, (ast.Import, ast.ImportFrom)):
            for module in get_import_modules(node):
                error_msg = _check_import_violation(module, file_layer)
                if error_msg:
                    violations.append((str(py_file), node.lineno, error_msg))

    return violations


def check_import_boundaries(package_dir: Path) -> list[tuple[str, int, str]]:
    """Check all Python files of the package for import boundary violations."""
    violations: list[tuple[str, int, str]] = []

    if not package_dir.exists():
        print(f"Error: Package directory '{package_dir}' does not exist", file=sys.stderr)
        return violations

    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))

    return violations


def format_violations(violations: list[tuple[str, int, str]]) -> str:
    """Format violations for human-readable output."""
    if not violations:
        return ""

    lines = ["Import boundary violations found:", ""]
    for file_path, line_no, message in sorted(violations):
        lines.append(f"  {file_path}:{line_no}: {message}")
    lines.append("")
    lines.append(f"Total: {len(violations)} violation(s)")
    return "\n".join(lines)


def main() -> int:
    """Main entry point.

    Returns:
        0 if no violations, 1 if violations found
    """
    if len(sys.argv) > 1:
        package_dir = Path(sys.argv[1])
    else:
        package_dir = Path(__file__).parent.parent / PACKAGE

    violations = check_import_boundaries(package_dir)

    if violations:
        print(format_violations(violations))
        return 1
    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
