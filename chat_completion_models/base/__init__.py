"""Base layer: response DTOs, decoding entry points, errors and logging."""

from .decoding import (
    decode_chat_result,
    decode_message,
    decode_user_content,
    dumps_chat_result,
    encode_chat_result,
)
from .errors import DecodingErrorCode, DecodingFailure

__all__ = [
    "decode_chat_result",
    "decode_message",
    "decode_user_content",
    "dumps_chat_result",
    "encode_chat_result",
    "DecodingErrorCode",
    "DecodingFailure",
]
