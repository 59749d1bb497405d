from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from techschool.core.errors import NotFoundError
from techschool.core.logging import get_logger
from techschool.modules.channels.models import Channel
from techschool.modules.channels.repository import ChannelRepository

logger = get_logger(__name__)

CHANNEL_URL = "https://www.youtube.com/channel/{youtube_channel_id}"


def add_channel_url(channel: Optional[Channel]) -> Optional[Channel]:
    """Attach the public YouTube URL to a loaded channel."""
    if channel is None:
        return None
    channel.url = CHANNEL_URL.format(youtube_channel_id=channel.youtube_channel_id)
    return channel


class ChannelService:
    """Service layer for channel operations."""

    def __init__(self, db: Session):
        self.db = db
        self.channel_repo = ChannelRepository(db)

    def get_channel_by_youtube_channel_id(self, youtube_channel_id: str) -> Channel:
        """Get a channel by YouTube ID, raising NotFoundError when absent."""
        channel = self.channel_repo.get_by_youtube_channel_id(youtube_channel_id)
        if channel is None:
            raise NotFoundError("Channel", youtube_channel_id)
        return channel

    def list_channels(self) -> list[Channel]:
        return [add_channel_url(channel) for channel in self.channel_repo.list_all()]

    def create_channel(
        self,
        name: str,
        youtube_channel_id: str,
        avatar_url: Optional[str] = None,
    ) -> Channel:
        channel = self.channel_repo.create(
            name=name,
            youtube_channel_id=youtube_channel_id,
            avatar_url=avatar_url,
        )
        self.db.commit()
        self.db.refresh(channel)

        logger.info(
            "created channel",
            channel_id=channel.id,
            youtube_channel_id=channel.youtube_channel_id,
        )
        return add_channel_url(channel)
