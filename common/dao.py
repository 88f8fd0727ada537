from abc import ABC
from typing import Type

from sqlalchemy import Engine
from sqlalchemy.orm import Session, DeclarativeMeta

from common.session import SessionFactory


class AbstractDAO(ABC):
    engine: Engine = None
    session: Session = None
    model: Type[DeclarativeMeta]

    def __init__(self, model: Type[DeclarativeMeta], session_factory: SessionFactory):
        sess = session_factory.get_session()
        self.engine = sess.engine
        self.session: Session = sess.session
        self.model = model

    def create_tables(self):
        self.model.__table__.create(self.engine, checkfirst=True)

    def drop_tables(self):
        self.model.__table__.drop(self.engine, checkfirst=True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close_session()

    def close_session(self) -> None:
        self.session.close()
