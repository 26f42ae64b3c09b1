import time
import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from api import suggest
from config import Settings, load_settings, setup_logging

logger = logging.getLogger(__name__)

def get_application(settings: Optional[Settings] = None):
    if settings is None:
        load_dotenv()
        settings = load_settings()
    setup_logging(settings.log_level)

    _app = FastAPI(
        title="RLS Policy Suggestions",
        description="AI-assisted Postgres row level security policy authoring",
        version="1.0.0"
    )
    _app.state.settings = settings
    _app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @_app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        logger.info(
            "%s %s -> %s (%.4fs)",
            request.method, request.url.path, response.status_code, process_time
        )
        return response

    @_app.get("/")
    async def root():
        return {
            "message": "RLS Policy Suggestions",
            "endpoints": {
                "suggest": "POST /ai/sql/suggest"
            }
        }

    _app.include_router(suggest.router, prefix="/ai/sql", tags=["AI"])
    # Registered after the POST route so it only sees the other verbs
    _app.add_route("/ai/sql/suggest", suggest.reject_method, include_in_schema=False)
    return _app

app = get_application()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
