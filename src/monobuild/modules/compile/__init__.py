"""Compile module."""

from monobuild.modules.compile.compiler import compile_package, compiler_args

__all__ = ["compile_package", "compiler_args"]
