from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine, inspect

from fmgsync.adapters.fmg import translate_record
from fmgsync.adapters.rendering import TemplateRenderer
from fmgsync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyWorldUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)
from fmgsync.domain.model import DocumentRecord
from fmgsync.domain.reconciliation import ReconciliationStrategy
from fmgsync.domain.world_import import import_world
from tests.helpers.map_exports import world_export

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture(autouse=True)
def reset_unit_of_work_state() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def test_unit_of_work_requires_startup() -> None:
    with pytest.raises(StartupError):
        SqlAlchemyWorldUnitOfWork()


def test_startup_requires_force_for_reconfiguration() -> None:
    engine_a = create_engine("sqlite+pysqlite:///:memory:", future=True)
    engine_b = create_engine("sqlite+pysqlite:///:memory:", future=True)

    startup(engine=engine_a, force=True)

    with pytest.raises(StartupError):
        startup(engine=engine_b)

    startup(engine=engine_b, force=True)
    assert configured_engine() is engine_b
    assert is_started()


def test_startup_creates_tables() -> None:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)

    startup(engine=engine)

    assert {"document", "document_collection"} <= set(inspect(engine).get_table_names())


def test_repositories_require_an_open_session(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    with pytest.raises(StartupError):
        _ = SqlAlchemyWorldUnitOfWork().repositories


def test_exception_rolls_back(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)
    record = DocumentRecord(ordering_key=1, name="Elves", content="body")

    with pytest.raises(RuntimeError), SqlAlchemyWorldUnitOfWork() as uow:
        uow.repositories.documents.create_many("Cultures", [record])
        raise RuntimeError("boom")

    with SqlAlchemyWorldUnitOfWork() as uow:
        assert uow.repositories.documents.list("Cultures") is None


def test_world_import_persists_and_reimports(
    sqlite_unit_of_work: Callable[[], SqlAlchemyWorldUnitOfWork],
) -> None:
    first = import_world(
        world_export(),
        translate=translate_record,
        unit_of_work_factory=sqlite_unit_of_work,
        renderer=TemplateRenderer(),
    )
    second = import_world(
        world_export(),
        translate=translate_record,
        unit_of_work_factory=sqlite_unit_of_work,
        renderer=TemplateRenderer(),
    )

    assert first.ok
    assert second.ok
    assert {outcome.strategy for outcome in second.outcomes} == {ReconciliationStrategy.UPDATE}
    with sqlite_unit_of_work() as uow:
        burgs = uow.repositories.documents.list("Burgs")
    assert burgs is not None
    assert [identity.ordering_key for identity in burgs] == [1, 2, 3]
    first_burgs = next(o for o in first.outcomes if o.collection == "Burgs")
    assert {identity.id for identity in burgs} == set(first_burgs.identities.values())
