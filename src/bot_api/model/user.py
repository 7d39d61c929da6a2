from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """https://core.telegram.org/bots/api#user"""
    model_config = ConfigDict(frozen = True)

    id: int
    is_bot: bool
    first_name: str
    last_name: str | None = None
    username: str | None = None
    language_code: str | None = None
