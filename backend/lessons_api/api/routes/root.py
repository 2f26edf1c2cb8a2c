"""Root — plain-text welcome message at GET /."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["root"])

WELCOME_TEXT = "Welcome! Please select a collection, e.g., /collections/lessons"


@router.get("/", response_class=PlainTextResponse)
async def welcome():
    return WELCOME_TEXT
