from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from accounts import router as accounts_router
from core import config, db
from core.logging_config import setup_logging
from messages import router as messages_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies share the 400 used for service-level validation.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(title="social-media api", lifespan=lifespan)

    # Browser origins come from CORS_ORIGINS; none are allowed by default.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(accounts_router.router, tags=["accounts"])
    app.include_router(messages_router.router, tags=["messages"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "social-media api"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=config.server_host(), port=config.server_port())
