from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from fmgsync.adapters.fmg import translate_record
from fmgsync.adapters.sqlalchemy import create_all_tables, start_mappers
from fmgsync.adapters.sqlalchemy.unit_of_work import SqlAlchemyWorldUnitOfWork, shutdown, startup
from fmgsync.domain.ingest_pipeline import EntityGraphStore, classify_export
from tests.helpers.documents import FakeDocumentStore, RecordingRenderer
from tests.helpers.map_exports import scenario_export, world_export

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def world_store() -> EntityGraphStore:
    return EntityGraphStore.from_export(classify_export(world_export()), translate_record)


@pytest.fixture
def scenario_store() -> EntityGraphStore:
    return EntityGraphStore.from_export(classify_export(scenario_export()), translate_record)


@pytest.fixture
def document_store() -> FakeDocumentStore:
    return FakeDocumentStore()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    start_mappers()
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyWorldUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemyWorldUnitOfWork:
        return SqlAlchemyWorldUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()
