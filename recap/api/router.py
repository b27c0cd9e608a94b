from fastapi import APIRouter

from recap.api.observe.routes import router as observe_router

router = APIRouter()
router.include_router(observe_router)
