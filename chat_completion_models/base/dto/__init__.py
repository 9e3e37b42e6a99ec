"""Response DTOs for decoded chat completions."""

from .usage import CompletionUsage
from .logprobs import ChoiceLogprobs, TokenLogprob, TopLogprob
from .vision import ImageContentPart, ImageURL, TextContentPart, VisionContent
from .tool_call import FunctionCall, ToolCall
from .message_params import (
    AssistantMessageParam,
    MessageParam,
    Role,
    SystemMessageParam,
    ToolMessageParam,
    UserMessageContent,
    UserMessageParam,
)
from .chat_result import ChatCompletionResult, Choice, FinishReason

__all__ = [
    "CompletionUsage",
    "ChoiceLogprobs",
    "TokenLogprob",
    "TopLogprob",
    "ImageContentPart",
    "ImageURL",
    "TextContentPart",
    "VisionContent",
    "FunctionCall",
    "ToolCall",
    "Role",
    "AssistantMessageParam",
    "MessageParam",
    "SystemMessageParam",
    "ToolMessageParam",
    "UserMessageContent",
    "UserMessageParam",
    "ChatCompletionResult",
    "Choice",
    "FinishReason",
]
