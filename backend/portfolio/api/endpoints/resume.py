from __future__ import annotations

import logging
import os

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from portfolio.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resume", tags=["resume"])


@router.get("/download")
def download_resume() -> Response:
    path = settings.RESUME_PATH
    if not os.path.isfile(path):
        logger.error("Resume file not found at: %s", path)
        raise HTTPException(
            status_code=404,
            detail="Resume file not found. Please contact the administrator.",
        )

    try:
        with open(path, "rb") as f:
            content = f.read()
    except OSError as e:
        logger.exception("Error reading resume file at: %s", path)
        raise HTTPException(
            status_code=500,
            detail="An error occurred while downloading the resume. Please try again later.",
        ) from e

    return Response(
        content=content,
        media_type=settings.RESUME_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{settings.RESUME_DOWNLOAD_NAME}"'},
    )
