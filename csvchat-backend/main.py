import logging
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import router
from core.ai import ProviderError
from core.config import Settings, settings, require_api_key

logging.basicConfig(level=logging.INFO)


def create_app(current: Settings = settings) -> FastAPI:
    # --- FASTAPI APP SETUP ---
    app = FastAPI(
        title="CSV Chat Backend API",
        description="Upload a CSV and ask a Gemini-backed business analytics assistant questions about it.",
        version="1.0.0"
    )
    logging.info(f"Allowed CORS origins: {current.cors_allowed_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=current.cors_allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if not current.allow_all_origins:
        allowed = set(current.cors_allowed_origins)

        @app.middleware("http")
        async def reject_unknown_origins(request: Request, call_next):
            origin = request.headers.get("origin")
            if origin is not None and origin not in allowed:
                logging.error(f"Rejected request from origin {origin}")
                return JSONResponse(
                    status_code=403,
                    content={"detail": "Origin not allowed by CORS", "error": origin},
                )
            return await call_next(request)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse(status_code=400, content={"detail": message})

    @app.exception_handler(ProviderError)
    async def provider_error_handler(request: Request, exc: ProviderError):
        return JSONResponse(
            status_code=500,
            content={"detail": "Failed to get AI response", "error": str(exc)},
        )

    app.include_router(router)
    return app


require_api_key(settings)
app = create_app(settings)


if __name__ == "__main__":
    logging.info(f"Server running at http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
