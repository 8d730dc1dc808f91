from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from core.config import settings
from core.error_handlers import register_error_handlers
from core.logging import configure_logging
from core.security import security
from routers import (
    cards as cards_router,
    decks as decks_router,
)

configure_logging(settings)

app = FastAPI(title="Flashdeck")
register_error_handlers(app)
security.handle_errors(app)

origins = [origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(decks_router.router)
app.include_router(cards_router.router)


@app.get("/status")
async def status():
    return {"status": "ok"}

if __name__ == "__main__":
    uvicorn.run("main:app", reload=True, host="127.0.0.1", port=8000)
