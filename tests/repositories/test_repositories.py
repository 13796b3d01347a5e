import pytest

from relay_config.models import SHARE_SETTINGS_ID, ShareSettingsRecord
from relay_config.repositories import BaseRepository, ShareSettingsRepository


@pytest.mark.unit
def test_share_settings_repository_load_first_run(db_session):
    repo = ShareSettingsRepository(db_session)
    assert repo.load() is None


@pytest.mark.unit
def test_share_settings_repository_store_creates_single_row(db_session):
    repo = ShareSettingsRepository(db_session)
    record = repo.store(action_hub_mq_host="mq.example.com", action_hub_mq_port=5672)
    db_session.commit()

    assert record.id == SHARE_SETTINGS_ID
    assert record.use_global is False
    assert repo.load().action_hub_mq_host == "mq.example.com"


@pytest.mark.unit
def test_share_settings_repository_store_updates_in_place(db_session):
    repo = ShareSettingsRepository(db_session)
    repo.store(action_hub_mq_host="old", use_global=True)
    repo.store(action_hub_mq_host="new", use_global=False)
    db_session.commit()

    rows = db_session.query(ShareSettingsRecord).all()
    assert len(rows) == 1
    assert rows[0].action_hub_mq_host == "new"
    assert rows[0].use_global is False


@pytest.mark.unit
def test_share_settings_repository_custom_record_id(db_session):
    ShareSettingsRepository(db_session, record_id="other").store(username="x")
    db_session.commit()

    assert ShareSettingsRepository(db_session).load() is None
    assert ShareSettingsRepository(db_session, record_id="other").load().username == "x"


@pytest.mark.unit
def test_base_repository_upsert_rejects_unknown_field(db_session):
    repo = BaseRepository(ShareSettingsRecord, db_session)
    repo.create(id="a")

    with pytest.raises(ValueError):
        repo.upsert("a", not_a_column=1)


@pytest.mark.unit
def test_base_repository_delete_and_exists(db_session):
    repo = BaseRepository(ShareSettingsRecord, db_session)
    repo.create(id="a")

    assert repo.exists("a")
    assert repo.delete("a") is True
    assert repo.exists("a") is False
    assert repo.delete("a") is False
