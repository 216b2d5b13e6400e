from fastapi import APIRouter
from rerank_proxy.api.health import router as health_router
from rerank_proxy.api.rerank.router import router as rerank_router

router = APIRouter()
router.include_router(health_router)
router.include_router(rerank_router)
