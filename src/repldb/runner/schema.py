# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract of
``python -m repldb.runner``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

Operation = Literal[
    "get",
    "get_many",
    "set",
    "set_many",
    "delete",
    "delete_many",
    "list",
    "empty",
]


class CommandInput(BaseModel):
    """A single store command read from stdin.

    Attributes:
        url: Database URL (falls back to ``REPLIT_DB_URL`` when omitted)
        operation: Client operation to run
        key: Key for ``get``, ``set`` and ``delete``
        value: Value for ``set``
        keys: Keys for ``get_many`` and ``delete_many``
        items: Key/value pairs for ``set_many``
        prefix: Key prefix for ``list``
    """

    url: str | None = None
    operation: Operation
    key: str | None = None
    value: str | None = None
    keys: list[str] = Field(default_factory=list)
    items: dict[str, str] = Field(default_factory=dict)
    prefix: str = ""


class CommandOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success: Whether the command completed
        result: Operation return value (on success)
        error: Error message (on failure)
        error_type: Error class name (on failure)
    """

    success: bool
    result: Any = None
    error: str = ""
    error_type: str = ""
