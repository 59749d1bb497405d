from fastapi import APIRouter

from techschool.modules.channels.routes import router as channels_router
from techschool.modules.courses.routes import router as courses_router
from techschool.modules.tags.routes import router as tags_router

api_router = APIRouter()
api_router.include_router(courses_router)
api_router.include_router(channels_router)
api_router.include_router(tags_router)
