import json
from datetime import UTC, datetime

import pytest

from promo_quoter.core.application.exceptions import IdempotencyKeyConflictError
from promo_quoter.core.domain.order import IdempotencyRecord
from promo_quoter.infrastructure.repositories import IdempotencyStoreFileAdapter
from promo_quoter.infrastructure.repositories.idempotency_store_file_adapter import STORE_FILE_NAME

NOW = datetime(2026, 1, 15, 9, 30, tzinfo=UTC)


@pytest.fixture
def store(tmp_path):
    return IdempotencyStoreFileAdapter(tmp_path / "runtime")


def test_creates_empty_store_file(tmp_path):
    IdempotencyStoreFileAdapter(tmp_path / "runtime")

    path = tmp_path / "runtime" / STORE_FILE_NAME
    assert json.loads(path.read_text(encoding="utf-8")) == {}


def test_save_and_find_round_trip(store):
    store.save(IdempotencyRecord(key="k1", order_id="o-1", created_at=NOW))

    record = store.find_by_key("k1")

    assert record == IdempotencyRecord(key="k1", order_id="o-1", created_at=NOW, request_hash="NA")
    assert store.find_by_key("missing") is None


def test_records_survive_a_new_adapter(tmp_path):
    IdempotencyStoreFileAdapter(tmp_path).save(IdempotencyRecord(key="k1", order_id="o-1", created_at=NOW))

    assert IdempotencyStoreFileAdapter(tmp_path).find_by_key("k1").order_id == "o-1"


def test_duplicate_key_is_rejected(store):
    store.save(IdempotencyRecord(key="k1", order_id="o-1", created_at=NOW))

    with pytest.raises(IdempotencyKeyConflictError):
        store.save(IdempotencyRecord(key="k1", order_id="o-2", created_at=NOW))

    assert store.find_by_key("k1").order_id == "o-1"
    assert store.count() == 1


def test_restore_rewrites_snapshot(store):
    state = store.snapshot()
    store.save(IdempotencyRecord(key="k1", order_id="o-1", created_at=NOW))

    store.restore(state)

    assert store.find_by_key("k1") is None


def test_empty_file_reads_as_empty_store(tmp_path):
    store = IdempotencyStoreFileAdapter(tmp_path)
    (tmp_path / STORE_FILE_NAME).write_text("", encoding="utf-8")

    assert store.count() == 0
