import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid body"


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected %s %s: %s", request.method,
                    request.url.path, exc.errors())
        return JSONResponse(
            content={"message": INVALID_BODY_MESSAGE},
            status_code=status.HTTP_400_BAD_REQUEST
        )

    # Constraint violations, missing foreign keys, connection errors
    @app.exception_handler(SQLAlchemyError)
    async def data_access_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error(str(exc))
        return JSONResponse(
            content={"error": str(exc)},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(str(exc))
        return JSONResponse(
            content={"error": str(exc)},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
