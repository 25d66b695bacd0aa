"""
FastAPI application entry point for the Hospital Records API.

Architecture Overview:
    ┌─────────────────────────────────────────────────────────────┐
    │                     FastAPI Application                      │
    ├─────────────────────────────────────────────────────────────┤
    │  Middleware: LoggingMiddleware → CORSMiddleware             │
    ├─────────────────────────────────────────────────────────────┤
    │  Routers (api/routers/)                                     │
    │    ├── health.py     - /health, /ready                      │
    │    ├── entities.py   - create/list/get for eight tables     │
    │    └── reports.py    - canned reports                       │
    ├─────────────────────────────────────────────────────────────┤
    │  Services (services/)     ← Injected via Depends()          │
    │    ├── HospitalRecordsService  - validated create/read      │
    │    └── ReportService           - report parameters + rows   │
    ├─────────────────────────────────────────────────────────────┤
    │  Repositories (repositories/)   ← Injected into Services    │
    ├─────────────────────────────────────────────────────────────┤
    │  Database (SQLite)              ← Injected into Repositories│
    └─────────────────────────────────────────────────────────────┘
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from core.config import API_HOST, API_PORT, API_RELOAD
from core.dependencies import get_database
from core.exceptions import setup_exception_handlers
from core.logging_config import setup_logging
from core.middleware import LoggingMiddleware
from api.routers import health_router, entities_router, reports_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, then open the database so the schema exists
    before the first request.
    """
    setup_logging(level="INFO", json_format=True)

    logger = logging.getLogger(__name__)
    logger.info("Starting Hospital Records API...")

    db = get_database()
    logger.info("Database initialized", extra={"db_path": db.db_path})

    yield

    logger.info("Hospital Records API shutting down...")


app = FastAPI(
    title="Hospital Records API",
    description="Create and read hospital records (patients, doctors, departments, "
                "appointments, bills, medicines, prescriptions, staff) and run the "
                "standard billing, pharmacy and staffing reports.",
    version="1.0.0",
    lifespan=lifespan
)

setup_exception_handlers(app)

# Middleware runs in reverse registration order: LoggingMiddleware sees requests first
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)

app.include_router(health_router)
app.include_router(entities_router)
app.include_router(reports_router)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_RELOAD
    )
