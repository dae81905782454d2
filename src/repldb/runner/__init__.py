# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for driving the store from JSON commands.

Usage:
    python -m repldb.runner < input.json > output.json

Exports:
    Executor: Runs one command against the store
    CommandInput: Input schema
    CommandOutput: Output schema
"""

from .executor import CommandError, Executor
from .schema import CommandInput, CommandOutput

__all__ = [
    "CommandError",
    "CommandInput",
    "CommandOutput",
    "Executor",
]
