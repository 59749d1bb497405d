from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from techschool.modules.channels.models import Channel


class ChannelRepository:
    """Repository for Channel entity."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_youtube_channel_id(self, youtube_channel_id: str) -> Optional[Channel]:
        """Get channel by its YouTube channel ID."""
        return self.db.scalars(
            select(Channel).where(Channel.youtube_channel_id == youtube_channel_id)
        ).first()

    def list_all(self) -> list[Channel]:
        """List all channels ordered by name."""
        return list(self.db.scalars(select(Channel).order_by(Channel.name.asc())))

    def create(
        self,
        name: str,
        youtube_channel_id: str,
        avatar_url: Optional[str] = None,
    ) -> Channel:
        """Create a new channel."""
        channel = Channel(
            name=name,
            youtube_channel_id=youtube_channel_id,
            avatar_url=avatar_url,
        )
        self.db.add(channel)
        self.db.flush()
        return channel
