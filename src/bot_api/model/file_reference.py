from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_serializer

from bot_api.util.config import config


class RemoteFile(BaseModel):
    """A file Telegram can fetch on its own: a file_id from an earlier upload, or an HTTP URL."""
    model_config = ConfigDict(frozen = True)

    value: str = Field(min_length = 1)

    @model_serializer
    def serialize(self) -> str:
        return self.value


class AttachedFile(BaseModel):
    """
    A local file sent as one part of the same multipart request.

    On the wire it is only referenced through its marker (e.g. "attach://cover"),
    and the transport is expected to add the content as a form part named after it.
    """
    model_config = ConfigDict(frozen = True)

    name: str = Field(pattern = r"^[^\s/]+$")
    content: bytes = Field(repr = False)
    mime_type: str = "application/octet-stream"

    @property
    def attach_uri(self) -> str:
        return f"{config.attach_uri_scheme}{self.name}"

    @model_serializer
    def serialize(self) -> str:
        return self.attach_uri


def _coerce_file_reference(value: Any) -> Any:
    # bare strings are file IDs or URLs
    if isinstance(value, str):
        return RemoteFile(value = value)
    return value


FileReference = Annotated[
    Union[RemoteFile, AttachedFile],
    BeforeValidator(_coerce_file_reference),
]
