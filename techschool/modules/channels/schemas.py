from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChannelBase(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    youtube_channel_id: str = Field(min_length=1, max_length=64)
    avatar_url: Optional[str] = None


class ChannelCreate(ChannelBase):
    pass


class ChannelRead(ChannelBase):
    id: int
    url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
