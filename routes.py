from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from config import HEALTH_MESSAGE

router = APIRouter()


@router.get("/health", response_class=PlainTextResponse, tags=["Health"])
def health():
    return HEALTH_MESSAGE
