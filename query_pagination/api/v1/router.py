from fastapi import APIRouter

from query_pagination.api.v1.endpoints import pagination

router = APIRouter()

router.include_router(pagination.router)
