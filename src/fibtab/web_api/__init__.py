"""
fibtab Web API
==============
FastAPI-based REST API for ladder lookups and text reindenting.

Quick Start:
    uvicorn fibtab.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
