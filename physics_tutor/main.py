"""
AP Physics C Study Backend: Main Application
FastAPI app. Mounts routers and CORS.
Database initialization and catalog seeding on startup.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from physics_tutor.config import CORS_ORIGINS, LOG_LEVEL, SEED_ON_STARTUP, APP_VERSION, PORT
from physics_tutor.database import init_db, SessionLocal
from physics_tutor.catalog import seed_all

logger = logging.getLogger("physics_tutor")


# ─── Lifespan (startup/shutdown) ─────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: init DB + run pending catalog seeds. Shutdown: cleanup."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    logger.info("Initializing database...")
    init_db()

    if SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            for result in seed_all(db):
                if result.skipped:
                    logger.info(f"Seed {result.source} v{result.version} already applied")
                else:
                    logger.info(
                        f"Seeded {result.source} v{result.version}: "
                        f"{result.inserted} nodes ({result.deleted} replaced)"
                    )
        finally:
            db.close()
    else:
        logger.info("Catalog seeding on startup disabled")

    logger.info(f"AP Physics C Study Backend v{APP_VERSION} ready")
    yield
    logger.info("Shutting down")


# ─── App ─────────────────────────────────────────────────────────────────────

app = FastAPI(
    title="AP Physics C Study Backend",
    description="Resource catalog, question practice and AI tutor for AP Physics C",
    version=APP_VERSION,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers
from physics_tutor.routers import auth, resources, questions, tutor, datasets, analytics
app.include_router(auth.router)
app.include_router(resources.router)
app.include_router(questions.router)
app.include_router(tutor.router)
app.include_router(datasets.router)
app.include_router(analytics.router)


# Health check (both /health and /healthz for container probes)
@app.get("/health")
@app.get("/healthz")
async def health():
    return {"status": "ok", "version": APP_VERSION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)
