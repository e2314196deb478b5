"""Apply JSON Patch documents to a book's update view."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import jsonpatch
import jsonpointer

from application.schemas.books import PatchOperation
from domain.exceptions import BookValidationError

PATCHABLE_PATHS = frozenset({"/title", "/description"})


def _path_errors(operations: Sequence[PatchOperation]) -> list[dict[str, Any]]:
    errors = []
    for index, operation in enumerate(operations):
        for key, pointer in (("path", operation.path), ("from", operation.from_)):
            if pointer is not None and pointer not in PATCHABLE_PATHS:
                errors.append(
                    {
                        "field": f"{index} -> {key}",
                        "message": f"'{pointer}' is not a patchable book field.",
                        "type": "patch_path",
                    }
                )
    return errors


def apply_book_patch(
    view: dict[str, Any],
    operations: Sequence[PatchOperation],
) -> dict[str, Any]:
    """Return a patched copy of *view*; *view* itself is left untouched.

    Operations run in the order given.  Any operation aimed outside
    :data:`PATCHABLE_PATHS`, or one that cannot be applied, rejects the
    whole document.
    """
    errors = _path_errors(operations)
    if errors:
        raise BookValidationError(errors)

    document = [operation.to_json_patch() for operation in operations]
    try:
        return jsonpatch.apply_patch(view, document)
    except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as exc:
        raise BookValidationError(
            [{"field": "patch", "message": str(exc), "type": "patch_conflict"}]
        ) from exc
