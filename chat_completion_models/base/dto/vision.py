"""Structured user-message content parts (text and image references).

``VisionContent`` is a tagged union discriminated on the ``type`` key:
``"text"`` decodes as :class:`TextContentPart`, ``"image_url"`` as
:class:`ImageContentPart`.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from ._base import ResponseModel


ImageDetail = Literal["auto", "low", "high"]


class ImageURL(ResponseModel):
    """Image reference: an http(s) URL or a base64 ``data:`` URL."""

    url: str
    detail: Optional[ImageDetail] = None


class TextContentPart(ResponseModel):
    type: Literal["text"] = "text"
    text: str


class ImageContentPart(ResponseModel):
    type: Literal["image_url"] = "image_url"
    image_url: ImageURL


VisionContent = Annotated[
    Union[TextContentPart, ImageContentPart],
    Field(discriminator="type"),
]


__all__ = [
    "ImageDetail",
    "ImageURL",
    "TextContentPart",
    "ImageContentPart",
    "VisionContent",
]
