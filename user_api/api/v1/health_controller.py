# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.user_dto import MessageResponse


router = APIRouter(tags=["health"])


@router.get("/", response_model=MessageResponse)
async def root() -> MessageResponse:
    """Liveness check"""
    return MessageResponse(message="API working as expected")
