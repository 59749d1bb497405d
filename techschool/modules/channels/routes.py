# techschool/modules/channels/routes.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from techschool.db.deps import get_db
from techschool.modules.channels.repository import ChannelRepository
from techschool.modules.channels.schemas import ChannelCreate, ChannelRead
from techschool.modules.channels.service import ChannelService

router = APIRouter(prefix="/channels", tags=["channels"])


@router.post(
    "",
    response_model=ChannelRead,
    status_code=status.HTTP_201_CREATED,
)
def create_channel(payload: ChannelCreate, db: Session = Depends(get_db)):
    """Register a channel that courses can be attached to."""
    if ChannelRepository(db).get_by_youtube_channel_id(payload.youtube_channel_id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Channel already exists",
        )
    channel_service = ChannelService(db)
    return channel_service.create_channel(
        name=payload.name,
        youtube_channel_id=payload.youtube_channel_id,
        avatar_url=payload.avatar_url,
    )


@router.get("", response_model=List[ChannelRead])
def list_channels(db: Session = Depends(get_db)):
    """List channels ordered by name."""
    channel_service = ChannelService(db)
    return channel_service.list_channels()
