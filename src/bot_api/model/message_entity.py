from pydantic import BaseModel, ConfigDict, Field

from bot_api.model.user import User


class MessageEntity(BaseModel):
    """https://core.telegram.org/bots/api#messageentity"""
    model_config = ConfigDict(frozen = True)

    type: str
    offset: int = Field(ge = 0)  # in UTF-16 code units
    length: int = Field(ge = 1)
    url: str | None = None  # only for "text_link"
    user: User | None = None  # only for "text_mention"
    language: str | None = None  # programming language of the code block
    custom_emoji_id: str | None = None
