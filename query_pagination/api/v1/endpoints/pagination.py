from typing import Annotated

from fastapi import APIRouter, Depends

from query_pagination.core.pagination import get_page_params
from query_pagination.core.paginator import PageParams
from query_pagination.schemas.common import ErrorResponse

router = APIRouter(prefix="/pagination", tags=["pagination"])


@router.get(
    "",
    response_model=PageParams,
    responses={400: {"model": ErrorResponse}},
    summary="Return the validated page and size of this request",
)
async def get_pagination(
    params: Annotated[PageParams, Depends(get_page_params)],
) -> PageParams:
    return params
