from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import get_settings
from .routes.scrape import router as scrape_router


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Recipe Extractor API")

    # Configuration CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=3600,
    )

    app.include_router(scrape_router)
    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn on the configured port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_keep_alive=120,
    )


if __name__ == "__main__":
    run()
