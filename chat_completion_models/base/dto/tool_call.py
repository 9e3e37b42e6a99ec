"""Tool-call requests carried by assistant messages."""

from __future__ import annotations

import json
from typing import Any, Literal

from ._base import ResponseModel


class FunctionCall(ResponseModel):
    """The function the model asked to call.

    Attributes:
        name: Function name.
        arguments: JSON-encoded arguments exactly as generated by the model.
            The model may emit invalid JSON or parameters outside the declared
            schema; validate before executing.
    """

    name: str
    arguments: str

    def parsed_arguments(self) -> Any:
        """Return ``arguments`` decoded with ``json.loads``.

        Raises:
            json.JSONDecodeError: When the model produced malformed JSON.
        """
        return json.loads(self.arguments)


class ToolCall(ResponseModel):
    """A single tool call requested by the assistant."""

    id: str
    type: Literal["function"] = "function"
    function: FunctionCall


__all__ = ["FunctionCall", "ToolCall"]
