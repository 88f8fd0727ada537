from typing import List, Optional

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from common.dao import AbstractDAO
from common.session import SessionFactory
from tabs.models import Tab

UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class TabsDAO(AbstractDAO):
    def __init__(self, session_factory: SessionFactory):
        super().__init__(Tab, session_factory)

    def get_all_tabs(self) -> List[Tab]:
        # no ORDER BY, rows come back in whatever order the database returns them
        return self.session.query(Tab).all()

    def get_tab(self, tab_id: str) -> Optional[Tab]:
        return self.session.get(Tab, tab_id)

    def get_tab_count(self) -> int:
        return self.session.query(Tab).count()

    def upsert_tab(
        self,
        tab_id: str,
        title: str,
        content: str,
        parent_id: Optional[str],
        created_at: int,
    ):
        """
        Insert the tab, or overwrite title, content and parent_id of the existing row with the same id.
        created_at is only written by the insert branch, so the first save's timestamp is kept.
        """
        insert = UPSERT_INSERTS.get(self.engine.dialect.name)
        if insert is None:
            raise ValueError(
                f"Upsert is not supported for dialect '{self.engine.dialect.name}'"
            )
        statement = insert(Tab).values(
            id=tab_id,
            title=title,
            content=content,
            parent_id=parent_id,
            created_at=created_at,
        )
        statement = statement.on_conflict_do_update(
            index_elements=[Tab.id],
            set_={
                "title": statement.excluded.title,
                "content": statement.excluded.content,
                "parent_id": statement.excluded.parent_id,
            },
        )
        try:
            self.session.execute(statement)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
