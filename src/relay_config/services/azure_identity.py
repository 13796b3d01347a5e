from functools import lru_cache
from loguru import logger

from azure.identity import DefaultAzureCredential


@lru_cache(maxsize=1)
def get_credentials() -> DefaultAzureCredential:
    """Get or create a cached DefaultAzureCredential instance.

    Enables CLI and managed identity authentication, suitable for both
    local development and Azure-hosted environments.
    """
    logger.debug("Initializing Azure DefaultAzureCredential")
    return DefaultAzureCredential(
        exclude_cli_credential=False,
        exclude_managed_identity_credential=False,
        exclude_interactive_browser_credential=True,
        exclude_visual_studio_code_credential=True,
        exclude_shared_token_cache_credential=True,
        exclude_environment_credential=True,
        exclude_powershell_credential=True,
        exclude_developer_cli_credential=True,
    )
