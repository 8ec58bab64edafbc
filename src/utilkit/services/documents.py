"""DocumentService: run the object helpers over JSON files.

Backs the CLI commands. Each method returns a :class:`ServiceResult`;
missing files, malformed JSON and invalid tree documents become error
results rather than exceptions.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from utilkit.domain.copying import deep_copy
from utilkit.domain.merge import ArrayMode, deep_merge
from utilkit.domain.tree import NodeId, TreeNode, traverse_tree
from utilkit.domain.urls import is_url
from utilkit.services.result import ServiceResult

if TYPE_CHECKING:
    from utilkit.config.settings import UtilkitSettings

logger = logging.getLogger(__name__)


class _LoadError(Exception):
    def __init__(self, code: str, message: str, path: Path) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path


def _load_json(path: Path) -> Any:
    if not path.is_file():
        raise _LoadError("FILE_NOT_FOUND", f"No such file: {path}", path)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise _LoadError("INVALID_JSON", f"Invalid JSON in {path}: {exc}", path) from exc


class DocumentService:
    """Operations over JSON documents, parameterized by settings defaults."""

    def __init__(self, settings: UtilkitSettings | None = None) -> None:
        self._settings = settings

    @property
    def default_array_mode(self) -> ArrayMode:
        if self._settings is None:
            return ArrayMode.MERGE
        return self._settings.merge.array_mode

    def check_urls(self, urls: list[str]) -> ServiceResult:
        results = [{"url": url, "is_url": is_url(url)} for url in urls]
        valid = sum(1 for r in results if r["is_url"])
        warnings = [f"Not a URL: {r['url']}" for r in results if not r["is_url"]]
        return ServiceResult(
            ok=True,
            op="is_url",
            data={"results": results, "valid": valid, "total": len(results)},
            warnings=warnings,
        )

    def merge(
        self,
        base_path: Path,
        override_path: Path,
        *,
        array_mode: ArrayMode | str | None = None,
    ) -> ServiceResult:
        op = "merge"
        mode = ArrayMode(array_mode) if array_mode is not None else self.default_array_mode
        try:
            base = _load_json(base_path)
            override = _load_json(override_path)
        except _LoadError as exc:
            return ServiceResult.failure(op, exc.code, exc.message, path=str(exc.path))

        for path, doc in ((base_path, base), (override_path, override)):
            if not isinstance(doc, dict):
                return ServiceResult.failure(
                    op,
                    "INVALID_DOCUMENT",
                    f"Top-level value in {path} must be a JSON object",
                    path=str(path),
                    found=type(doc).__name__,
                )

        merged = deep_merge(base, override, mode)
        logger.debug("merged %s into %s (%s)", override_path, base_path, mode)
        return ServiceResult(
            ok=True,
            op=op,
            data={"array_mode": str(mode), "document": merged},
        )

    def walk_tree(self, path: Path) -> ServiceResult:
        op = "tree"
        try:
            raw = _load_json(path)
        except _LoadError as exc:
            return ServiceResult.failure(op, exc.code, exc.message, path=str(exc.path))

        try:
            root = TreeNode.model_validate(raw)
        except ValidationError as exc:
            return ServiceResult.failure(
                op,
                "INVALID_TREE",
                f"{path} is not a tree document",
                path=str(path),
                errors=exc.errors(include_url=False),
            )

        order: list[NodeId] = []
        traverse_tree(root, order.append)
        return ServiceResult(ok=True, op=op, data={"order": order, "count": len(order)})

    def copy(self, path: Path) -> ServiceResult:
        op = "copy"
        try:
            doc = _load_json(path)
        except _LoadError as exc:
            return ServiceResult.failure(op, exc.code, exc.message, path=str(exc.path))

        copied = deep_copy(doc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"document": copied, "equal": copied == doc},
        )
