from typing import Literal

from loguru import logger
from sqlalchemy import text

from ..context import AppContext
from ..database import verify_schema


async def health(
        context: AppContext,
        route: Literal['database', 'relay'] | None = None,
    ) -> dict:
    """Health check function.

    Args:
        context (AppContext): Process wiring to inspect.
        route (str): Specific route to check. Options are 'database', 'relay'.

    Returns:
        dict: Health status information.
    """
    logger.info("Health check invoked")

    errors = context.settings.validate()
    if errors:
        logger.error("Settings validation errors: {}", errors)
        return {"status": "error", "errors": errors}

    if route is None:
        logger.info("No specific route provided, returning overall readiness")
        return {"status": "success"}

    route_normalised = route.strip().lower()
    logger.info("Health check route: {}", route_normalised)

    if route_normalised == "database":
        try:
            with context.session_manager.session() as session:
                session.execute(text("SELECT 1"))
            verification = verify_schema(context.session_manager)
            return {"status": "success", "database": f"connected (verification {verification['status']})"}
        except Exception as e:
            logger.error("Database connection failed: {}", e)
            return {"status": "error", "database": "disconnected", "error": str(e)}

    if route_normalised == "relay":
        if context.store.are_settings_valid():
            return {"status": "success", "relay": "configured"}
        logger.warning("ActionHub settings are incomplete")
        return {"status": "error", "relay": "incomplete settings"}

    logger.warning("Unknown health check route: {}", route_normalised)
    return {"status": "error", "error": f"Unknown route: {route_normalised}"}
