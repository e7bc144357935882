"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from rollcall.api.routes import attendance, data, employees, health, imports, session
from rollcall.core.config import AppSettings
from rollcall.core.logging import configure_logging
from rollcall.core.protocols import IFileStore
from rollcall.persistence import RecordStore, create_file_store, create_store
from rollcall.services.access import AccessControl
from rollcall.services.attendance_repository import AttendanceRepository
from rollcall.services.data_transfer import DataTransferService


def wire_state(app: FastAPI, settings: AppSettings, store: RecordStore,
               file_store: IFileStore | None = None) -> None:
    """Attach the store-backed services the routes depend on."""
    repository = AttendanceRepository(store)
    app.state.settings = settings
    app.state.store = store
    app.state.repository = repository
    app.state.access = AccessControl(repository)
    app.state.data_transfer = DataTransferService(store, file_store)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    if getattr(app.state, "store", None) is not None:
        # Pre-wired (tests, embedding)
        yield
        return
    settings = AppSettings()
    configure_logging(settings.log_level)
    store = create_store(settings)
    store.start()
    wire_state(app, settings, store, create_file_store(settings))
    try:
        yield
    finally:
        store.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Rollcall Attendance Tracker",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(employees.router, prefix="/employees")
    app.include_router(attendance.router)
    app.include_router(session.router)
    app.include_router(imports.router, prefix="/imports")
    app.include_router(data.router, prefix="/data")
    return app
