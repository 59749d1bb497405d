# techschool/modules/tags/routes.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from techschool.db.deps import get_db
from techschool.modules.tags.models import TAG_MODELS
from techschool.modules.tags.repository import TagRepository
from techschool.modules.tags.schemas import TagRead

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("/{kind}", response_model=List[TagRead])
def list_tags(kind: str, db: Session = Depends(get_db)):
    """List languages, frameworks, tools or fundamentals, ordered by name."""
    model = TAG_MODELS.get(kind)
    if model is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown tag kind: {kind}",
        )
    return TagRepository(db, model).list_all()
