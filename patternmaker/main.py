import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.patterns import router as patterns_router
from .settings import CORS_ORIGINS, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Cross Stitch Pattern Maker")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(patterns_router, prefix="/api/v1", tags=["patterns"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
