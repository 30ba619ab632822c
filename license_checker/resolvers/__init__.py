"""Dependency and license resolvers package."""

from license_checker.resolvers.dependency import (
    DependencyLister,
    flatten_nested_dependencies,
    flatten_yarn_tree,
    read_manifest_dependencies,
    select_yarn_tree_line,
)
from license_checker.resolvers.license import (
    LicenseResolver,
    detect_license_from_content,
)
from license_checker.resolvers.manager import detect_package_manager
from license_checker.resolvers.process import ProcessRunner, SubprocessRunner

__all__ = [
    "DependencyLister",
    "LicenseResolver",
    "ProcessRunner",
    "SubprocessRunner",
    "detect_license_from_content",
    "detect_package_manager",
    "flatten_nested_dependencies",
    "flatten_yarn_tree",
    "read_manifest_dependencies",
    "select_yarn_tree_line",
]
