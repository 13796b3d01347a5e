from loguru import logger

from ..context import AppContext
from ..share import FormError


async def configure(payload: dict, context: AppContext) -> dict:
    """Apply a submitted global configuration form."""
    logger.info("Configuration submission received")

    try:
        result = context.controller.apply_submission(payload)
    except FormError as e:
        logger.warning("Rejected configuration submission: {}", e)
        return {"status": "error", "message": str(e)}

    response = {"status": "success", **result.to_dict()}
    response["settings_valid"] = context.store.are_settings_valid()
    return response
