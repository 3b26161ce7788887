"""FastAPI entry point exposing the image generation proxy."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .config import Settings, get_settings
from .exceptions import UpstreamError
from .schemas import ErrorResponse, GenerationRequest, HealthResponse
from .service import ImageGenService, get_imagegen_service

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


app = FastAPI(title="Gemini Image Gen Proxy", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse, summary="Health Check Endpoint")
async def healthcheck(settings: Settings = Depends(get_settings)):
    return HealthResponse(
        status="ok",
        project=settings.project_id,
        location=settings.location,
        model=settings.model_id,
    )


@app.post(
    "/api/generate",
    summary="Relay a prompt to the image model and return its raw response",
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate(
    request: Request,
    service: ImageGenService = Depends(get_imagegen_service),
):
    try:
        body = await request.json()
        prompt = body.get("prompt") if isinstance(body, dict) else None
        if not prompt:
            return _error_response(status.HTTP_400_BAD_REQUEST, "Prompt is required")

        payload = GenerationRequest.model_validate(body)

        data = await run_in_threadpool(service.generate_image, payload.prompt)
        return JSONResponse(status_code=status.HTTP_200_OK, content=data)

    except UpstreamError as exc:
        return _error_response(exc.status_code, str(exc), exc.details)
    except Exception as exc:
        logger.exception("API Route Error")
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc) or "Internal Server Error",
        )


__all__ = ["app"]


if __name__ == "__main__":  # pragma: no cover - convenience entry point
    import uvicorn

    uvicorn.run("imagegen.main:app", host="0.0.0.0", port=8000, reload=True)
