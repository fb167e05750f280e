"""Core abstractions shared by the transpiler components."""

from cs2kt.transpiler.core.interfaces import SymbolResolver, TreeWalker

__all__ = ["SymbolResolver", "TreeWalker"]
