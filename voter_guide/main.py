from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from voter_guide.core import config
from voter_guide.services.questionnaire_service import QuestionnaireService
from voter_guide.routers import questionnaire

config.configure_logging()

# Services
questionnaire_service = QuestionnaireService()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Warm the tree cache so the first visitor does not pay for the fetch
    await app.state.questionnaire_service.tree_source.get()
    yield

app = FastAPI(lifespan=lifespan)

# Session Middleware
# We enable https_only if the origin starts with https
https_only = config.ORIGIN.startswith("https")
app.add_middleware(
    SessionMiddleware,
    secret_key=config.SESSION_SECRET,
    session_cookie="voter_guide_session",
    same_site="lax",
    https_only=https_only
)

# Security Headers Middleware
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        if https_only:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        response.headers["Content-Security-Policy"] = "default-src 'self'; frame-ancestors 'none';"
        return response

app.add_middleware(SecurityHeadersMiddleware)

# App State
app.state.questionnaire_service = questionnaire_service

# Include Routers
app.include_router(questionnaire.router, prefix="/api/questionnaire")

@app.get("/health")
async def health():
    tree = await app.state.questionnaire_service.tree_status()
    return {"status": "ok", "tree": tree}

if __name__ == "__main__":
    import uvicorn
    import argparse

    parser = argparse.ArgumentParser(description="Run the voter guide questionnaire service")
    parser.add_argument("--port", type=int, default=8000, help="Port to run the service on")
    parser.add_argument("--host", type=str, default="0.0.0.0", help="Host to bind to")
    args = parser.parse_args()

    uvicorn.run(app, host=args.host, port=args.port)
