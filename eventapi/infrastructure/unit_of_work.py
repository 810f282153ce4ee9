# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transaction boundary shared by the SQLAlchemy repositories."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from eventapi.shared.logging import logger

_DEPTH_KEY = "uow_depth"


@dataclass(slots=True)
class SqlAlchemyUnitOfWork(AbstractContextManager):
    """Opens a session on enter; commits on clean exit, rolls back otherwise.

    With a thread-scoped session factory an inner unit of work joins the
    outer one: only the outermost scope commits, rolls back and closes.
    """

    session_factory: Callable[[], Session]
    _session: Session | None = field(default=None, init=False, repr=False)
    _outermost: bool = field(default=True, init=False, repr=False)

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        session = self.session_factory()
        depth = session.info.get(_DEPTH_KEY, 0)
        session.info[_DEPTH_KEY] = depth + 1
        self._outermost = depth == 0
        self._session = session
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        session = self.session
        session.info[_DEPTH_KEY] -= 1
        if not self._outermost:
            self._session = None
            return
        try:
            if exc is None:
                session.commit()
            else:
                logger.debug(f"uow: rollback after {exc_type.__name__}")
                session.rollback()
        except Exception:
            logger.exception("uow: commit failed")
            session.rollback()
            raise
        finally:
            session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("unit of work used outside its context")
        return self._session


@contextmanager
def unit_of_work_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    with SqlAlchemyUnitOfWork(factory) as uow:
        yield uow.session
