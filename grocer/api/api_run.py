import logging

from fastapi import FastAPI

from grocer.api.routes import grocery, meal_plan, recipes
from grocer.utilities.config import DEBUG

# Logging
logger = logging.getLogger("grocer_app")

# Initialize FastAPI app
app = FastAPI(title="Household Grocery List API", debug=DEBUG)

# Include routers
app.include_router(grocery.router)
app.include_router(meal_plan.router)
app.include_router(recipes.router)


@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.on_event("startup")
def _log_startup():
    logger.info("Grocer API started (debug=%s)", DEBUG)
