"""utilkit: small standalone helpers for URLs, object graphs, trees and debouncing."""

from __future__ import annotations

from utilkit.domain.callables import is_async_fn
from utilkit.domain.copying import deep_copy
from utilkit.domain.merge import ArrayMode, deep_merge
from utilkit.domain.tree import TreeNode, iter_tree, traverse_tree
from utilkit.domain.urls import is_url
from utilkit.services.debounce import Debouncer, TimerRef, debounce_run

__version__ = "0.3.0"

__all__ = [
    "ArrayMode",
    "Debouncer",
    "TimerRef",
    "TreeNode",
    "__version__",
    "debounce_run",
    "deep_copy",
    "deep_merge",
    "is_async_fn",
    "is_url",
    "iter_tree",
    "traverse_tree",
]
