"""BaseService over SQLAlchemyMapper on in-memory SQLite."""
import pytest
from sqlalchemy.exc import IntegrityError

from xrbase.db.mapper import SQLAlchemyMapper
from xrbase.exceptions import ValidationException
from xrbase.services import BaseService

NOW = 1_700_000_000


@pytest.fixture(autouse=True)
def frozen_clock(monkeypatch):
    monkeypatch.setattr("xrbase.services.base_service.current_time_in_second", lambda: NOW)


@pytest.fixture
def service(account_model, db_session):
    return BaseService(SQLAlchemyMapper(account_model, db_session), primary_key_name="id")


@pytest.fixture
def seeded(service, account_model):
    return [service.insert(account_model(name=f"acc{i}", status=1)) for i in range(25)]


def test_insert_populates_defaults(service, account_model):
    account = service.insert(account_model(name="alice"))

    stored = service.select_by_id(account.id)
    assert stored.create_time == stored.update_time == NOW
    assert stored.version == 0


def test_insert_or_update_round_trip(service, account_model, db_session):
    created = service.insert_or_update(account_model(name="bob", status=0))
    assert created.id is not None

    changed = account_model(id=created.id, name="bobby", status=1, update_time=NOW + 5)
    result = service.insert_or_update(changed)

    assert result.id == created.id
    assert result.name == "bobby"
    assert result.update_time == NOW + 5
    assert result.create_time == NOW
    assert service.select_count({"name": "bobby"}) == 1


def test_insert_or_update_unknown_id_inserts(service, account_model):
    result = service.insert_or_update(account_model(id=424242, name="carol"))

    assert result.id == 424242
    assert service.select_by_id(424242).name == "carol"


def test_duplicate_primary_key_insert_surfaces_store_error(service, account_model, db_session):
    service.insert(account_model(id=7, name="first"))
    db_session.expunge_all()

    with pytest.raises(IntegrityError):
        service.insert(account_model(id=7, name="second"))


def test_select_page(service, seeded):
    page = service.select_page(3, 10, {"status": 1})

    assert page.records == 25
    assert page.pages == 3
    assert [a.name for a in page.data] == [f"acc{i}" for i in range(20, 25)]


def test_select_page_defaults(service, seeded):
    page = service.select_page(0, 0)

    assert (page.page, page.size, page.pages) == (1, 10, 3)
    assert len(page.data) == 10


def test_select_map_and_by_ids(service, seeded):
    ids = [seeded[0].id, seeded[1].id]

    by_key = service.select_map({"idList": ids})

    assert set(by_key) == {str(i) for i in ids}
    assert [a.id for a in service.select_by_ids(ids)] == ids


def test_delete_operations(service, seeded):
    assert service.delete_by_id(seeded[0].id) == 1
    assert service.delete_by_ids([seeded[1].id, seeded[2].id]) == 2
    assert service.delete_by_map({"name": "acc3"}) == 1
    assert service.select_count({"status": 1}) == 21
    assert service.select_by_id(seeded[0].id) is None


def test_delete_by_map_with_misspelled_key_keeps_rows(service, account_model):
    for i in range(5):
        service.insert(account_model(name=f"u{i}", status=1))

    with pytest.raises(ValidationException):
        service.delete_by_map({"status": 1, "nmae": "u0"})

    assert service.select_count({"status": 1}) == 5


def test_select_one_with_misspelled_key_is_rejected(service, seeded):
    with pytest.raises(ValidationException):
        service.select_one({"nmae": "acc3"})
