import json
from typing import Any, Iterable, NoReturn, assert_never

from bot_api.model.input_media import (
    AnyInputMedia,
    InputMedia,
    InputMediaAnimation,
    InputMediaAudio,
    InputMediaDocument,
    InputMediaPhoto,
    InputMediaVideo,
    MediaKind,
    refuse_decoding,
)
from bot_api.util import log


class InputMediaEncoder:
    """
    Writes InputMedia variants in the Bot API wire format.

    Pydantic can tag unions on its own, but the Bot API already names its own
    discriminator "type", so the encoder writes that key itself from the
    variant's pinned `kind`, and lets each variant dump the rest of its fields.
    Absent optional fields are left out of the payload, never sent as null.

    The encoder holds no state; a single instance is shared.
    """

    def encode(self, value: AnyInputMedia) -> dict[str, Any]:
        log.t(f"Encoding {type(value).__name__}")
        match value:
            case InputMediaAudio():
                return self.__write(InputMediaAudio.kind, value)
            case InputMediaDocument():
                return self.__write(InputMediaDocument.kind, value)
            case InputMediaPhoto():
                return self.__write(InputMediaPhoto.kind, value)
            case InputMediaVideo():
                return self.__write(InputMediaVideo.kind, value)
            case InputMediaAnimation():
                return self.__write(InputMediaAnimation.kind, value)
            case _:
                assert_never(value)

    def encode_all(self, values: Iterable[AnyInputMedia]) -> list[dict[str, Any]]:
        return [self.encode(value) for value in values]

    def encode_json(self, value: AnyInputMedia) -> str:
        return json.dumps(self.encode(value), separators = (",", ":"), ensure_ascii = False)

    # noinspection PyMethodMayBeStatic
    def decode(self, data: Any) -> NoReturn:
        refuse_decoding(InputMedia.__name__)

    @staticmethod
    def __write(kind: MediaKind, value: InputMedia) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": kind.value}
        payload.update(value.model_dump(mode = "json", by_alias = True, exclude_none = True))
        return payload


input_media_encoder = InputMediaEncoder()
