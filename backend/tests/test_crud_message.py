from datetime import datetime, timedelta, timezone

from portfolio.crud.message import (
    check_connection,
    count_messages_from_ip_since,
    create_message,
    get_message_by_id,
    list_messages,
)

T0 = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


def _create(db, *, at, ip="192.0.2.10", name="Jane"):
    return create_message(
        db,
        name=name,
        email="jane@mailhost.org",
        subject="Hi",
        body="Body text",
        submitted_at=at,
        ip_address=ip,
    )


def test_create_assigns_increasing_ids(db):
    first = _create(db, at=T0)
    second = _create(db, at=T0)
    assert first.id is not None
    assert second.id > first.id


def test_get_message_by_id_missing_returns_none(db):
    assert get_message_by_id(db, 999) is None


def test_ip_address_is_nullable(db):
    msg = _create(db, at=T0, ip=None)
    db.expire_all()
    assert get_message_by_id(db, msg.id).ip_address is None


def test_list_messages_newest_first(db):
    _create(db, at=T0, name="old")
    _create(db, at=T0 + timedelta(minutes=5), name="new")
    _create(db, at=T0 + timedelta(minutes=1), name="middle")

    names = [m.name for m in list_messages(db)]
    assert names == ["new", "middle", "old"]


def test_list_messages_paginates(db):
    for i in range(5):
        _create(db, at=T0 + timedelta(minutes=i), name=f"m{i}")

    page = list_messages(db, limit=2, offset=1)
    assert [m.name for m in page] == ["m3", "m2"]


def test_count_messages_from_ip_since(db):
    _create(db, at=T0 - timedelta(minutes=20))
    _create(db, at=T0 - timedelta(minutes=10))
    _create(db, at=T0)
    _create(db, at=T0, ip="192.0.2.99")
    _create(db, at=T0, ip=None)

    since = T0 - timedelta(minutes=15)
    assert count_messages_from_ip_since(db, ip_address="192.0.2.10", since=since) == 2
    assert count_messages_from_ip_since(db, ip_address="192.0.2.99", since=since) == 1
    assert count_messages_from_ip_since(db, ip_address="203.0.113.1", since=since) == 0


def test_count_includes_boundary(db):
    _create(db, at=T0)
    assert count_messages_from_ip_since(db, ip_address="192.0.2.10", since=T0) == 1


def test_check_connection(db):
    assert check_connection(db) is True


def test_create_does_not_reload_after_commit(db, monkeypatch):
    def fail_refresh(*args, **kwargs):
        raise AssertionError("refresh after commit")

    monkeypatch.setattr(db, "refresh", fail_refresh)

    msg = _create(db, at=T0)
    assert msg.id is not None
    db.expire_all()
    assert get_message_by_id(db, msg.id).name == "Jane"
