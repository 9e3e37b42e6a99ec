"""chat_completion_models package

Immutable response models for a chat-completion API client.

Purpose:
    Decode the body of a successful chat completion call into a typed,
    immutable tree (result, choices, log probabilities, usage), with
    role-dispatched message decoding and string-or-vision-list user content.
    Transport, authentication and streaming belong to the caller.

Public API (re-exported):
    - Version: ``__version__``
    - Decoding: :func:`decode_chat_result`, :func:`decode_message`,
      :func:`decode_user_content`
    - Encoding: :func:`encode_chat_result`, :func:`dumps_chat_result`
    - Exceptions: :class:`DecodingFailure`, :class:`DecodingErrorCode`
    - Models: ``ChatCompletionResult``, ``Choice``, ``FinishReason``,
      ``ChoiceLogprobs``, ``TokenLogprob``, ``TopLogprob``,
      ``CompletionUsage``, the four ``*MessageParam`` variants, vision
      content parts and tool calls.
    - Config: :class:`DecodeConfig`, :func:`get_decode_config`,
      :func:`reload_decode_config`

Example:
    >>> result = decode_chat_result(response.content)
    >>> result.choices[0].message.content
"""

from .base.decoding import (
    decode_chat_result,
    decode_message,
    decode_user_content,
    dumps_chat_result,
    encode_chat_result,
)
from .base.dto import (
    AssistantMessageParam,
    ChatCompletionResult,
    Choice,
    ChoiceLogprobs,
    CompletionUsage,
    FinishReason,
    FunctionCall,
    ImageContentPart,
    ImageURL,
    MessageParam,
    Role,
    SystemMessageParam,
    TextContentPart,
    TokenLogprob,
    ToolCall,
    ToolMessageParam,
    TopLogprob,
    UserMessageContent,
    UserMessageParam,
    VisionContent,
)
from .base.errors import DecodingErrorCode, DecodingFailure
from .config import DecodeConfig, get_decode_config, reload_decode_config

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Decoding / encoding
    "decode_chat_result",
    "decode_message",
    "decode_user_content",
    "dumps_chat_result",
    "encode_chat_result",
    # Exceptions
    "DecodingErrorCode",
    "DecodingFailure",
    # Models
    "ChatCompletionResult",
    "Choice",
    "FinishReason",
    "ChoiceLogprobs",
    "TokenLogprob",
    "TopLogprob",
    "CompletionUsage",
    "Role",
    "MessageParam",
    "SystemMessageParam",
    "UserMessageParam",
    "AssistantMessageParam",
    "ToolMessageParam",
    "UserMessageContent",
    "VisionContent",
    "TextContentPart",
    "ImageContentPart",
    "ImageURL",
    "ToolCall",
    "FunctionCall",
    # Config
    "DecodeConfig",
    "get_decode_config",
    "reload_decode_config",
]
