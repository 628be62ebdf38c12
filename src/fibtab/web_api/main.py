"""
FastAPI Application
==================
Main entry point for the fibtab API.

Run with:
    uvicorn fibtab.web_api.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fibtab import __version__
from fibtab.web_api.config import settings
from fibtab.web_api.routers import health, ladder, reindent

# Create application
app = FastAPI(
    title="fibtab API",
    description="Fibonacci indentation ladder lookups and reindenting",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(ladder.router, tags=["Ladder"])
app.include_router(reindent.router, prefix="/reindent", tags=["Reindent"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "fibtab API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m fibtab.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
