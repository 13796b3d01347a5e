from ..context import AppContext


async def current_settings(context: AppContext) -> dict:
    """Current global configuration with passwords masked."""
    return {"status": "success", "settings": context.store.export_settings(mask_secrets=True)}
