from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

import logs
from classes import TabRecord
from config import LIST_POLICY_ERROR, SAVE_POLICY_ERROR, SAVE_ACKNOWLEDGEMENT
from tabs.dao import TabsDAO

logger = logs.Log("tabs", "tabs.log").get_logger()

router = APIRouter()


def get_tabs_dao(request: Request):
    with TabsDAO(request.app.state.session_factory) as tabs_dao:
        yield tabs_dao


@router.get("/tabs", response_model=List[TabRecord], tags=["Tabs"])
def get_tabs(request: Request, tabs_dao: TabsDAO = Depends(get_tabs_dao)):
    try:
        tabs = tabs_dao.get_all_tabs()
    except SQLAlchemyError:
        logger.exception("Failed to load tabs")
        if request.app.state.list_failure_policy == LIST_POLICY_ERROR:
            raise HTTPException(status_code=503, detail="Failed to load tabs")
        # an empty list here is indistinguishable from an empty table
        return []
    return [TabRecord(**tab.as_dict()) for tab in tabs]


@router.post("/tabs", response_class=PlainTextResponse, tags=["Tabs"])
def save_tab(
    request: Request, tab: TabRecord, tabs_dao: TabsDAO = Depends(get_tabs_dao)
):
    try:
        tabs_dao.upsert_tab(
            tab.id, tab.title, tab.content, tab.parent_id, tab.created_at
        )
    except SQLAlchemyError:
        logger.exception(f"Failed to save tab {tab.id}")
        if request.app.state.save_failure_policy == SAVE_POLICY_ERROR:
            raise HTTPException(status_code=503, detail="Failed to save tab")
        raise
    logger.debug(f"Saved tab {tab.id}")
    return SAVE_ACKNOWLEDGEMENT
