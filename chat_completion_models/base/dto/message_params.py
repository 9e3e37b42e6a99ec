"""
Chat message records and their polymorphic decoding.

Purpose
-------
A choice's ``message`` is one of four shapes selected by its ``role`` key.
Each variant declares its own required fields (assistant messages may carry
tool-call requests, tool messages require ``tool_call_id``), so the shape is
only known after ``role`` has been read.

Design
------
- ``MessageParam`` is a pydantic tagged union discriminated on ``role``: the
  validator reads ``role`` first, then validates the whole object against the
  matching variant. A missing ``role`` or a value outside the four known roles
  fails; there is no fallback variant.
- ``UserMessageParam.content`` carries no tag. It is decoded by trial: a plain
  string first, then a list of ``VisionContent`` parts. When both fail the
  error reports both attempts.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import Field, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from ._base import ResponseModel
from .tool_call import ToolCall
from .vision import VisionContent


# Message roles; each is the discriminator tag of one MessageParam variant.
Role = Literal["system", "user", "assistant", "tool"]

UserMessageContent = Union[str, List[VisionContent]]

CONTENT_MISMATCH_TYPE = "content_type_mismatch"

_VISION_LIST: TypeAdapter[List[VisionContent]] = TypeAdapter(List[VisionContent])


def _summarize_attempt(exc: ValidationError) -> str:
    err = exc.errors(include_url=False)[0]
    loc = ".".join(str(p) for p in err["loc"])
    return f"{loc}: {err['msg']}" if loc else err["msg"]


def content_by_trial(value: Any) -> UserMessageContent:
    """Decode user content as a plain string, else as a list of vision parts.

    Raises:
        PydanticCustomError: ``content_type_mismatch`` when neither shape
            matches. The message names both attempts so a malformed list item
            can be told apart from a value that was not a list at all.
    """
    if isinstance(value, str):
        return value
    string_attempt = f"string: got {type(value).__name__}"
    try:
        return _VISION_LIST.validate_python(value)
    except ValidationError as exc:
        raise PydanticCustomError(
            CONTENT_MISMATCH_TYPE,
            "Content: expected String || Vision ({string_attempt}; vision: {vision_attempt})",
            {"string_attempt": string_attempt, "vision_attempt": _summarize_attempt(exc)},
        ) from exc


class SystemMessageParam(ResponseModel):
    role: Literal["system"] = "system"
    content: str
    name: Optional[str] = None


class UserMessageParam(ResponseModel):
    """A user message whose content is plain text or a list of vision parts."""

    role: Literal["user"] = "user"
    content: UserMessageContent
    name: Optional[str] = None

    @field_validator("content", mode="before")
    @classmethod
    def _decode_content(cls, value: Any) -> UserMessageContent:
        return content_by_trial(value)

    @property
    def is_plain_text(self) -> bool:
        """True when ``content`` decoded as a plain string."""
        return isinstance(self.content, str)

    def text_or_joined(self) -> str:
        """Return a flattened string view of the content.

        Text parts are joined with newlines; image parts are rendered as
        ``[image_url]`` placeholders for compact logging.
        """
        if isinstance(self.content, str):
            return self.content
        parts: List[str] = []
        for p in self.content:
            if p.type == "text":
                parts.append(p.text)
            else:
                parts.append(f"[{p.type}]")
        return "\n".join(parts)


class AssistantMessageParam(ResponseModel):
    """A model-generated message.

    ``content`` is ``None`` when the model only requested tool calls.
    """

    role: Literal["assistant"] = "assistant"
    content: Optional[str] = None
    name: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None

    @property
    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)


class ToolMessageParam(ResponseModel):
    """The result of a tool call, answering ``tool_call_id``."""

    role: Literal["tool"] = "tool"
    content: str
    tool_call_id: str


MessageParam = Annotated[
    Union[SystemMessageParam, UserMessageParam, AssistantMessageParam, ToolMessageParam],
    Field(discriminator="role"),
]


__all__ = [
    "Role",
    "UserMessageContent",
    "CONTENT_MISMATCH_TYPE",
    "content_by_trial",
    "SystemMessageParam",
    "UserMessageParam",
    "AssistantMessageParam",
    "ToolMessageParam",
    "MessageParam",
]
