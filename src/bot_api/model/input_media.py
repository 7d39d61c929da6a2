from enum import Enum
from typing import Any, ClassVar, NoReturn, Union

from pydantic import BaseModel, ConfigDict, Field

from bot_api.model.file_reference import AttachedFile, FileReference
from bot_api.model.message_entity import MessageEntity
from bot_api.model.parse_mode import ParseMode
from bot_api.serde.duration import ApiDuration
from bot_api.util import log
from bot_api.util.error_codes import MEDIA_DECODE_UNSUPPORTED
from bot_api.util.errors import UnsupportedOperationError


class MediaKind(str, Enum):
    audio = "audio"
    document = "document"
    photo = "photo"
    video = "video"
    animation = "animation"


def refuse_decoding(target: str) -> NoReturn:
    raise UnsupportedOperationError(
        log.e(f"{target} deserialization is not supported"),
        MEDIA_DECODE_UNSUPPORTED,
    )


class InputMedia(BaseModel):
    """
    https://core.telegram.org/bots/api#inputmedia

    Base of the outbound media variants. The wire "type" is not a field: every
    variant pins it as a class constant (`kind`), and only the encoder writes it.
    These models are write-only; decoding them is refused.
    """
    model_config = ConfigDict(frozen = True, extra = "forbid")

    kind: ClassVar[MediaKind]

    media: FileReference
    thumbnail: FileReference | None = None

    def __init__(self, **data: Any):
        if type(self) is InputMedia:
            raise TypeError("InputMedia is abstract, construct one of its variants instead")
        super().__init__(**data)

    def uploads(self) -> list[AttachedFile]:
        """Files that must travel as multipart parts next to this media, in wire order."""
        return [reference for reference in [self.media, self.thumbnail] if isinstance(reference, AttachedFile)]

    @classmethod
    def model_validate(cls, *args: Any, **kwargs: Any) -> NoReturn:
        refuse_decoding(cls.__name__)

    @classmethod
    def model_validate_json(cls, *args: Any, **kwargs: Any) -> NoReturn:
        refuse_decoding(cls.__name__)

    @classmethod
    def model_validate_strings(cls, *args: Any, **kwargs: Any) -> NoReturn:
        refuse_decoding(cls.__name__)


class InputMediaAudio(InputMedia):
    """https://core.telegram.org/bots/api#inputmediaaudio"""
    kind: ClassVar[MediaKind] = MediaKind.audio

    caption: str | None = None
    caption_format: ParseMode | None = Field(default = None, serialization_alias = "parse_mode")
    caption_entities: tuple[MessageEntity, ...] | None = None
    duration_seconds: int | None = Field(default = None, ge = 0, serialization_alias = "duration")
    performer: str | None = None
    title: str | None = None


class InputMediaDocument(InputMedia):
    """https://core.telegram.org/bots/api#inputmediadocument"""
    kind: ClassVar[MediaKind] = MediaKind.document

    caption: str | None = None
    caption_format: ParseMode | None = Field(default = None, serialization_alias = "parse_mode")
    caption_entities: tuple[MessageEntity, ...] | None = None
    disable_content_type_detection: bool | None = None


class InputMediaPhoto(InputMedia):
    """https://core.telegram.org/bots/api#inputmediaphoto"""
    kind: ClassVar[MediaKind] = MediaKind.photo

    caption: str | None = None
    caption_format: ParseMode | None = Field(default = None, serialization_alias = "parse_mode")
    caption_entities: tuple[MessageEntity, ...] | None = None
    has_spoiler: bool | None = None
    show_caption_above_media: bool | None = None


class InputMediaVideo(InputMedia):
    """https://core.telegram.org/bots/api#inputmediavideo"""
    kind: ClassVar[MediaKind] = MediaKind.video

    cover: FileReference | None = None
    start_timestamp: ApiDuration | None = None
    caption: str | None = None
    caption_format: ParseMode | None = Field(default = None, serialization_alias = "parse_mode")
    caption_entities: tuple[MessageEntity, ...] | None = None
    width: int | None = None
    height: int | None = None
    duration_seconds: int | None = Field(default = None, ge = 0, serialization_alias = "duration")
    supports_streaming: bool | None = None
    has_spoiler: bool | None = None
    show_caption_above_media: bool | None = None

    def uploads(self) -> list[AttachedFile]:
        uploads = super().uploads()
        if isinstance(self.cover, AttachedFile):
            uploads.append(self.cover)
        return uploads


class InputMediaAnimation(InputMedia):
    """https://core.telegram.org/bots/api#inputmediaanimation"""
    kind: ClassVar[MediaKind] = MediaKind.animation

    caption: str | None = None
    caption_format: ParseMode | None = Field(default = None, serialization_alias = "parse_mode")
    caption_entities: tuple[MessageEntity, ...] | None = None
    width: int | None = None
    height: int | None = None
    duration_seconds: int | None = Field(default = None, ge = 0, serialization_alias = "duration")
    has_spoiler: bool | None = None
    show_caption_above_media: bool | None = None


AnyInputMedia = Union[
    InputMediaAudio,
    InputMediaDocument,
    InputMediaPhoto,
    InputMediaVideo,
    InputMediaAnimation,
]
