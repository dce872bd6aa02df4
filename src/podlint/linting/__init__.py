"""Podspec selection and ``pod lib lint`` execution."""

from podlint.linting.filter import select_podspecs
from podlint.linting.runner import PodspecLinter, build_lint_arguments

__all__ = [
    "PodspecLinter",
    "build_lint_arguments",
    "select_podspecs",
]
