from forge.lib import ids


def test_to_base36():
    assert ids.to_base36(0) == "0"
    assert ids.to_base36(35) == "z"
    assert ids.to_base36(36) == "10"


def test_generate_id_time_prefix_and_suffix():
    """Contract: base36 timestamp followed by a random suffix."""
    task_id = ids.generate_id(1_700_000_000_000)

    prefix = ids.to_base36(1_700_000_000_000)
    assert task_id.startswith(prefix)
    assert len(task_id) == len(prefix) + ids.SUFFIX_LENGTH
    assert task_id.isalnum() and task_id == task_id.lower()


def test_unique_id_skips_taken(monkeypatch):
    """Contract: regenerates until the id is unused."""
    minted = iter(["dup0", "dup0", "new1"])
    monkeypatch.setattr(ids, "generate_id", lambda timestamp_ms=None: next(minted))

    assert ids.unique_id({"dup0"}) == "new1"
