import json
import threading

import pytest

from justice_ai.client.controller import AnalysisController
from justice_ai.client.storage import (
    InMemoryStore,
    JsonFileStore,
    new_draft_id,
    normalize_draft_id,
    session_store,
)


def test_in_memory_store_roundtrip():
    store = InMemoryStore()

    store.set("justiceai-query", "draft")
    assert store.get("justiceai-query") == "draft"
    assert "justiceai-query" in store

    store.remove("justiceai-query")
    assert store.get("justiceai-query") is None
    # Removing a missing key is harmless
    store.remove("justiceai-query")


def test_json_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "nested" / "draft.json"

    JsonFileStore(path).set("justiceai-query", "میرا مسئلہ")

    assert JsonFileStore(path).get("justiceai-query") == "میرا مسئلہ"
    assert json.loads(path.read_text(encoding="utf-8")) == {"justiceai-query": "میرا مسئلہ"}


def test_json_file_store_remove_keeps_other_keys(tmp_path):
    store = JsonFileStore(tmp_path / "draft.json")
    store.set("justiceai-query", "draft")
    store.set("other", "value")

    store.remove("justiceai-query")

    assert store.get("justiceai-query") is None
    assert store.get("other") == "value"


def test_missing_file_reads_as_empty(tmp_path):
    store = JsonFileStore(tmp_path / "absent.json")

    assert store.get("justiceai-query") is None
    store.remove("justiceai-query")
    assert not (tmp_path / "absent.json").exists()


def test_corrupt_file_reads_as_empty(tmp_path):
    path = tmp_path / "draft.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileStore(path)

    assert store.get("justiceai-query") is None

    store.set("justiceai-query", "fresh")
    assert store.get("justiceai-query") == "fresh"


def test_non_object_file_reads_as_empty(tmp_path):
    path = tmp_path / "draft.json"
    path.write_text('["a", "b"]', encoding="utf-8")

    assert JsonFileStore(path).get("justiceai-query") is None


def test_sessions_do_not_share_drafts(tmp_path, requester):
    alice = AnalysisController(requester, session_store(tmp_path, new_draft_id()))
    alice.set_query("My husband is threatening divorce and taking my children")

    bob = AnalysisController(requester, session_store(tmp_path, new_draft_id()))

    assert bob.query == ""
    assert len(list(tmp_path.glob("*.json"))) == 1


def test_reloaded_session_restores_its_own_draft(tmp_path, requester):
    draft_id = new_draft_id()
    AnalysisController(requester, session_store(tmp_path, draft_id)).set_query("Unpaid wages")

    reloaded = AnalysisController(requester, session_store(tmp_path, draft_id.upper()))

    assert reloaded.query == "Unpaid wages"


def test_concurrent_writes_are_safe(tmp_path):
    path = tmp_path / "draft.json"
    errors = []

    def writer(n):
        store = JsonFileStore(path)
        try:
            for i in range(100):
                store.set(f"writer-{n}", f"edit {i}")
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert json.loads(path.read_text(encoding="utf-8")) == {
        f"writer-{n}": "edit 99" for n in range(4)}
    assert list(tmp_path.glob("*.tmp")) == []


@pytest.mark.parametrize("value", [None, "", "../../etc/passwd", "not-a-uuid"])
def test_invalid_draft_ids_are_rejected(tmp_path, value):
    assert normalize_draft_id(value) is None
    with pytest.raises(ValueError):
        session_store(tmp_path, value)


def test_draft_id_is_canonicalized():
    draft_id = new_draft_id()

    assert normalize_draft_id(draft_id) == draft_id
    assert normalize_draft_id(draft_id.upper()) == draft_id
