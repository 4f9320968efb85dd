from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.logger import logger
from exceptions.api import ApiError


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError with its own body shape and status code.

    Args:
        request (Request): The request that failed.
        exc (ApiError): The raised error.

    Returns:
        JSONResponse: The error response.
    """
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message}"
        )
    else:
        logger.warning(
            f"{request.method} {request.url.path} rejected "
            f"({exc.status_code}): {exc.message}"
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
