# server/main.py

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from core import config
from core.errors import register_exception_handlers
from core.logging_setup import setup_logging
from api import auth, tasks
from database import init_db


setup_logging(config.LOG_LEVEL, config.LOG_FILE)
logger = logging.getLogger(__name__)

init_db()

app = FastAPI(title="Task Tracker API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(tasks.router)


@app.get("/health")
def health():
    return {"status": "ok"}


logger.info("Task Tracker API ready (database: %s)", config.DATABASE_URL.split("@")[-1])
