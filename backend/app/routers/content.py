"""
In-app content API endpoints.

Lets the message-authoring tools check how a server payload will be
decoded by the SDK before it is sent to devices.

Endpoints:
  POST /parse   — decode a raw payload into its content variant
  GET  /types   — list known content types and the decoder each one uses
"""

import logging

from fastapi import APIRouter, HTTPException

from app.models.inapp_content import ContentType
from app.services.content_parser import creator_for, parse_content

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/parse",
    responses={
        200: {
            "description": "Payload decoded",
            "content": {
                "application/json": {
                    "example": {
                        "padding": {"top": -1, "left": 10, "bottom": -1, "right": 10},
                        "background_alpha": 0.5,
                        "html": '<a href="itbl://close">Close</a>',
                        "type": "inboxHtml",
                        "title": "Spring sale",
                        "subtitle": None,
                        "icon": None,
                    }
                }
            },
        },
        422: {"description": "Payload has no html body, or the html has no href"},
    },
)
async def parse_inapp_content(payload: dict) -> dict:
    """
    Decode an in-app message payload.

    Returns the decoded content including its ``type``. A payload the SDK
    would refuse to display is reported as 422 with the parser's reason.
    """
    result = parse_content(payload)
    if not result.ok:
        logger.info("Rejected in-app payload: %s", result.reason)
        raise HTTPException(status_code=422, detail=result.reason)

    return result.content.model_dump(mode="json")


@router.get("/types")
async def list_content_types() -> dict:
    """Known contentType values and the decoder each one is routed to."""
    return {
        "default": ContentType.HTML.value,
        "types": [
            {"content_type": t.value, "decoder": creator_for(t).__name__}
            for t in ContentType
        ],
    }
