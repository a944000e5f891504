import logging
import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from github_org_api import config
from github_org_api.api.routes import router
from github_org_api.domain.exceptions import NetworkError, ParseError, RemoteStatusError

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


async def _remote_status_error(request: Request, exc: RemoteStatusError) -> JSONResponse:
    # GitHub's client/server error status is passed through unchanged
    logger.warning(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


async def _bad_gateway(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"detail": str(exc)})


async def _invalid_parameters(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": errors})


def create_app() -> FastAPI:
    app = FastAPI(title="GitHub organization repositories API")
    app.include_router(router)

    app.add_exception_handler(RemoteStatusError, _remote_status_error)
    app.add_exception_handler(NetworkError, _bad_gateway)
    app.add_exception_handler(ParseError, _bad_gateway)
    app.add_exception_handler(RequestValidationError, _invalid_parameters)
    return app


def main():
    configure_logging()
    logger.info(f"Serving on {config.HOST}:{config.PORT}")
    uvicorn.run(create_app(), host=config.HOST, port=config.PORT, log_config=None)


if __name__ == "__main__":
    main()
