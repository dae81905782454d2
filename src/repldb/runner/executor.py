# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for running a single store command.

Orchestrates the flow:
1. Build (or reuse) a client for the requested URL
2. Check the command carries the arguments its operation needs
3. Dispatch to the client
4. Return structured result
"""

from __future__ import annotations

from typing import Any

from repldb.client import ReplDBClient

from .schema import CommandInput, CommandOutput


class CommandError(Exception):
    """Raised when a command is missing arguments for its operation."""

    pass


class Executor:
    """Executes a command against the store.

    Pass a client to the constructor to reuse it (and to inject a fake
    transport in tests); otherwise one is built from ``input.url`` and
    closed after the command.

    Example:
        executor = Executor()
        output = executor.execute(CommandInput(operation="list", url=url))
    """

    def __init__(self, client: ReplDBClient | None = None) -> None:
        self._injected_client = client

    def execute(self, input_data: CommandInput) -> CommandOutput:
        """Run the command.

        Note:
            This method catches all exceptions and returns them as
            CommandOutput errors, ensuring valid JSON is always returned.
        """
        try:
            return CommandOutput(success=True, result=self._execute_internal(input_data))
        except Exception as e:
            return CommandOutput(
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )

    def _execute_internal(self, input_data: CommandInput) -> Any:
        client = self._injected_client or ReplDBClient(input_data.url)
        owns_client = self._injected_client is None

        try:
            return self._dispatch(client, input_data)
        finally:
            if owns_client:
                client.close()

    def _dispatch(self, client: ReplDBClient, cmd: CommandInput) -> Any:
        op = cmd.operation
        if op == "get":
            return client.get(self._require_key(cmd))
        if op == "get_many":
            return client.get_many(*cmd.keys)
        if op == "set":
            if cmd.value is None:
                raise CommandError("'set' requires 'value'")
            return client.set(self._require_key(cmd), cmd.value)
        if op == "set_many":
            return client.set_many(cmd.items)
        if op == "delete":
            return client.delete(self._require_key(cmd))
        if op == "delete_many":
            return client.delete_many(cmd.keys)
        if op == "list":
            return client.list(cmd.prefix)
        return client.empty()

    @staticmethod
    def _require_key(cmd: CommandInput) -> str:
        if cmd.key is None:
            raise CommandError(f"'{cmd.operation}' requires 'key'")
        return cmd.key
