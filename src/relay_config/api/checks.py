from loguru import logger

from ..share import check_field


async def check(field: str, value: str | None) -> dict:
    """Live validation of a single ActionHub form field."""
    try:
        result = check_field(field, value)
    except KeyError:
        logger.warning("No live check for field: {}", field)
        return {"status": "error", "message": f"Unknown field: {field}"}

    return result.to_dict()
