import pytest
from unittest.mock import MagicMock

from relay_config.api import configure, current_settings


@pytest.fixture
def context(store, controller):
    mock_context = MagicMock()
    mock_context.store = store
    mock_context.controller = controller
    return mock_context


class TestConfigureEndpoint:

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_configure_success(self, context, valid_submission):
        result = await configure(valid_submission, context)

        assert result["status"] == "success"
        assert result["saved"] is True
        assert result["settings_valid"] is True
        assert result["reinit_warning"] is None

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_configure_reports_reinit_warning(self, context, relay, valid_submission):
        relay.reinit.side_effect = RuntimeError("no broker")

        result = await configure(valid_submission, context)

        assert result["status"] == "success"
        assert "no broker" in result["reinit_warning"]

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_configure_reports_field_errors(self, context, valid_submission):
        valid_submission["actionHubMqHost"] = ""

        result = await configure(valid_submission, context)

        assert result["status"] == "success"
        assert "actionHubMqHost" in result["field_errors"]
        assert result["settings_valid"] is False

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_configure_form_error(self, context):
        result = await configure({"connectionFactory": "x"}, context)
        assert result["status"] == "error"


class TestSettingsEndpoint:

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_current_settings_are_masked(self, context, valid_submission):
        await configure(valid_submission, context)

        result = await current_settings(context)

        assert result["status"] == "success"
        settings = result["settings"]
        assert settings["use_global"] is True
        assert settings["connection_factory"]["password"] == "***MASKED***"
        assert settings["relay"]["password"] == "***MASKED***"
        assert settings["relay"]["host"] == "mq.example.com"
