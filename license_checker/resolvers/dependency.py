"""Dependency listing and tree flattening.

Provides DependencyLister, which runs the package manager's listing
command and normalizes its output into a flat name-to-version mapping.
Two output shapes are understood: the nested object tree printed by
npm and pnpm, and the line-delimited JSON printed by yarn.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import structlog

from license_checker.constants import PACKAGE_MANIFEST, UNKNOWN_VERSION
from license_checker.exceptions import DependencyListingError
from license_checker.models.dependency import PackageManager
from license_checker.resolvers.process import ProcessRunner, SubprocessRunner

log = structlog.get_logger("license_checker.dependency")

# Synthetic root yarn emits for workspaces
YARN_WORKSPACE_AGGREGATOR = "workspace-aggregator-"

# Top-level sections of an npm/pnpm project object
PROJECT_SECTIONS = ("dependencies", "devDependencies", "optionalDependencies")


def flatten_nested_dependencies(
    dependencies: dict[str, Any],
    result: Optional[dict[str, str]] = None,
) -> dict[str, str]:
    """Flatten an npm/pnpm style nested dependency mapping.

    Walks depth-first in document order. Every node carrying a version is
    recorded under its name unless the name was already seen, so the
    first-visited version wins. Children are walked whether or not the
    node itself was recorded.

    Args:
        dependencies: Mapping of package name to node, where each node may
            hold "version" and a nested "dependencies" mapping.
        result: Mapping to add to (a new one is created if omitted).

    Returns:
        Mapping of package name to version.
    """
    flat: dict[str, str] = {} if result is None else result
    visited: set[int] = set()
    stack: list[tuple[str, Any]] = list(reversed(list(dependencies.items())))

    while stack:
        name, node = stack.pop()
        if not isinstance(node, dict) or id(node) in visited:
            continue
        visited.add(id(node))

        version = node.get("version")
        if version and name not in flat:
            flat[name] = str(version)

        children = node.get("dependencies")
        if isinstance(children, dict):
            stack.extend(reversed(list(children.items())))

    return flat


def select_yarn_tree_line(output: str) -> Optional[dict[str, Any]]:
    """Find the tree object among yarn's line-delimited JSON output.

    Lines that are not valid JSON objects, or whose type is not "tree",
    are ignored.

    Args:
        output: Raw standard output of `yarn list --json`.

    Returns:
        The parsed tree line, or None when no such line exists.
    """
    for line in output.strip().splitlines():
        try:
            parsed = json.loads(line)
        except ValueError:
            continue
        if isinstance(parsed, dict) and parsed.get("type") == "tree":
            return parsed
    return None


def yarn_package_name(qualified: str) -> str:
    """Strip the version from a yarn node name such as 'lodash@4.17.21'.

    Splits on the last '@' so scoped names keep their scope. A name
    without any '@' is returned unchanged.
    """
    if "@" not in qualified:
        return qualified
    return qualified.rpartition("@")[0]


def flatten_yarn_tree(
    tree: dict[str, Any],
    result: Optional[dict[str, str]] = None,
) -> dict[str, str]:
    """Flatten the data of a yarn tree line.

    Nodes carry "name" (package@version) and "children"; the top-level
    data holds its roots under "trees". Yarn does not expose a usable
    version here, so every package is recorded as 'unknown'.

    Args:
        tree: The "data" object of the selected tree line.
        result: Mapping to add to (a new one is created if omitted).

    Returns:
        Mapping of package name to version sentinel.
    """
    flat: dict[str, str] = {} if result is None else result
    visited: set[int] = set()
    stack: list[Any] = [tree]

    while stack:
        node = stack.pop()
        if not isinstance(node, dict) or id(node) in visited:
            continue
        visited.add(id(node))

        qualified = node.get("name")
        if isinstance(qualified, str) and not qualified.startswith(
            YARN_WORKSPACE_AGGREGATOR
        ):
            name = yarn_package_name(qualified)
            if name and name not in flat:
                flat[name] = UNKNOWN_VERSION

        children: list[Any] = []
        for key in ("trees", "children"):
            value = node.get(key)
            if isinstance(value, list):
                children.extend(value)
        stack.extend(reversed(children))

    return flat


def read_manifest_dependencies(
    project_dir: Path, include_dev: bool = False
) -> dict[str, str]:
    """Read direct dependencies declared in the project's package.json.

    Args:
        project_dir: Directory holding package.json.
        include_dev: Merge devDependencies over dependencies.

    Returns:
        Mapping of package name to declared version range.

    Raises:
        DependencyListingError: If the manifest is missing or unreadable.
    """
    manifest_path = project_dir / PACKAGE_MANIFEST
    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise DependencyListingError(f"No {PACKAGE_MANIFEST} found in {project_dir}") from e
    except (OSError, ValueError) as e:
        raise DependencyListingError(f"Cannot read '{manifest_path}': {e}") from e

    if not isinstance(manifest, dict):
        raise DependencyListingError(f"Invalid manifest '{manifest_path}'")

    dependencies: dict[str, str] = {}
    sections = ["dependencies", "devDependencies"] if include_dev else ["dependencies"]
    for section in sections:
        declared = manifest.get(section)
        if isinstance(declared, dict):
            dependencies.update({name: str(ver) for name, ver in declared.items()})
    return dependencies


class DependencyLister:
    """Lists a project's installed dependencies through its package manager."""

    def __init__(
        self,
        package_manager: PackageManager,
        project_dir: Path,
        include_dev: bool = False,
        runner: Optional[ProcessRunner] = None,
    ) -> None:
        """Initialize the lister.

        Args:
            package_manager: npm, yarn or pnpm.
            project_dir: Project root the command runs in.
            include_dev: Include development dependencies.
            runner: Process runner (defaults to SubprocessRunner).
        """
        self._package_manager = package_manager
        self._project_dir = project_dir
        self._include_dev = include_dev
        self._runner = runner if runner is not None else SubprocessRunner()

    def listing_command(self) -> list[str]:
        """Build the listing command for the configured package manager."""
        if self._package_manager is PackageManager.YARN:
            command = ["yarn", "list", "--json"]
            production_flag = "--production"
        elif self._package_manager is PackageManager.PNPM:
            command = ["pnpm", "list", "--json", "--depth", "Infinity"]
            production_flag = "--prod"
        else:
            command = ["npm", "ls", "--json", "--all"]
            production_flag = "--production"

        if not self._include_dev:
            command.append(production_flag)
        return command

    def list_dependencies(self) -> dict[str, str]:
        """List all dependencies as a flat name-to-version mapping.

        When the listing command fails or prints unparseable output, falls
        back to the direct dependencies declared in package.json.

        Returns:
            Mapping of package name to version, in discovery order.

        Raises:
            DependencyListingError: If both the command and the manifest
                fallback fail.
        """
        try:
            output = self._runner.run(self.listing_command(), self._project_dir)
            return self.parse_output(output)
        except (DependencyListingError, ValueError) as e:
            log.warning(
                "dependency listing failed, falling back to manifest",
                package_manager=self._package_manager.value,
                error=str(e),
            )
            try:
                return read_manifest_dependencies(self._project_dir, self._include_dev)
            except DependencyListingError as fallback_error:
                raise DependencyListingError(
                    f"Failed to get dependencies with {self._package_manager.value}: "
                    f"{e}; {fallback_error}"
                ) from e

    def parse_output(self, output: str) -> dict[str, str]:
        """Normalize listing output for the configured package manager.

        Raises:
            ValueError: If npm/pnpm output is not valid JSON.
        """
        if self._package_manager is PackageManager.YARN:
            tree_line = select_yarn_tree_line(output)
            if tree_line is None:
                return {}
            data = tree_line.get("data")
            return flatten_yarn_tree(data) if isinstance(data, dict) else {}

        parsed = json.loads(output)
        # pnpm prints one object per workspace project
        projects = parsed if isinstance(parsed, list) else [parsed]
        flat: dict[str, str] = {}
        for project in projects:
            if not isinstance(project, dict):
                continue
            for section in PROJECT_SECTIONS:
                children = project.get(section)
                if isinstance(children, dict):
                    flatten_nested_dependencies(children, flat)
        return flat
