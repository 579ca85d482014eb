import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Routers
from routers.health import router as health_router
from routers.marking import router as marking_router
from routers.practice import router as practice_router
from routers.questions import router as questions_router

logger = logging.getLogger("trig-drill")
logging.basicConfig(level=logging.INFO)

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if o.strip()
]

app = FastAPI(title="Trig Drill – Practice API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-session-id"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(marking_router)  # /evaluate, /mark
app.include_router(questions_router)  # /questions/...
app.include_router(practice_router)  # /practice/...
app.include_router(health_router)  # /health/...
