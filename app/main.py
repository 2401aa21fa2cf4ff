from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from app.core.config import settings
from app.core.database import init_db
from app.core.handlers import register_exception_handlers
from app.core.logging import logger
from app.api.router import api_router

ENDPOINTS = {
    "GET /students": "Get all students",
    "GET /students/:rollnumber": "Get student by roll number",
    "POST /students": "Create new student",
    "PUT /students/:rollnumber": "Update student",
    "DELETE /students/:rollnumber": "Delete student",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Refuse to start without a database: uvicorn aborts before binding the
    listener when startup raises.
    """
    if not await run_in_threadpool(init_db):
        logger.error("❌ Failed to connect to database. Server not started.")
        raise RuntimeError("Cannot connect to database!")

    logger.info(f"🚀 {settings.PROJECT_NAME} ready")
    logger.info("📚 API Routes:")
    for route in ENDPOINTS:
        logger.info(f"   {route}")
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router)


@app.get("/")
def root():
    """
    Service description and endpoint listing
    """
    return {
        "message": "Student Management API",
        "status": "Connected to database",
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "endpoints": ENDPOINTS,
    }


def main():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
