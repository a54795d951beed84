from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import logging

from fitplan.infra.ai_providers import missing_credentials
from fitplan.utilities.config import CORS_ORIGINS

# Routers
from fitplan.api.api_ai import router as ai_router
from fitplan.api.routes import diet_plan, nutrition

# Logging
logger = logging.getLogger("fitplan_app")

# Initialize FastAPI app
app = FastAPI(title="FitPlan API")

# Any origin by default so the Expo client works from devices and emulators
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(ai_router)
app.include_router(nutrition.router)
app.include_router(diet_plan.router)


@app.on_event("startup")
def _warn_missing_credentials():
    """Log which provider credentials are missing; affected endpoints answer 503."""
    missing = missing_credentials()
    if missing:
        logger.warning("Missing provider configuration: %s. Check .env or environment variables.",
                       ", ".join(missing))
    else:
        logger.info("All provider credentials configured")


@app.get("/health")
def health_check():
    return {"status": "ok"}
