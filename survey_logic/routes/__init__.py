"""Routes package for FastAPI endpoints.

This package contains all API route modules for the survey logic service.
"""

from survey_logic.routes import health, logic, surveys

__all__ = ["health", "logic", "surveys"]
