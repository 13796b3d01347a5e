from unittest.mock import MagicMock

import pytest

from relay_config.services import Secret
from relay_config.share import ActionHubRelay, RelayMessagingSettings, ShareSettings


def valid_relay() -> RelayMessagingSettings:
    return RelayMessagingSettings("mq.example.com", 5672, "u", Secret("p"), "ex", "wf", "act")


@pytest.mark.unit
def test_reinit_with_incomplete_settings_stays_disconnected(store):
    connector = MagicMock()
    relay = ActionHubRelay(store, connector)

    relay.reinit()

    connector.assert_not_called()
    assert relay.active is None


@pytest.mark.unit
def test_reinit_pulls_current_settings(store):
    connector = MagicMock()
    relay = ActionHubRelay(store, connector)

    store.replace(ShareSettings(relay=valid_relay()))
    relay.reinit()

    connector.assert_called_once_with(valid_relay())
    assert relay.active == valid_relay()


@pytest.mark.unit
def test_reinit_propagates_connector_errors(store):
    relay = ActionHubRelay(store, MagicMock(side_effect=ConnectionError("refused")))
    store.replace(ShareSettings(relay=valid_relay()))

    with pytest.raises(ConnectionError):
        relay.reinit()
    assert relay.active is None


@pytest.mark.unit
def test_reinit_without_connector(store):
    relay = ActionHubRelay(store)
    store.replace(ShareSettings(relay=valid_relay()))

    relay.reinit()

    assert relay.active == valid_relay()
