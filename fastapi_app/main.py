from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, HTTPException

from agent import MealDictatorAgent, UnrecognizedIntent, build_agent
from fastapi_app.envelope import RequestType, SkillRequest, envelope

logging.basicConfig(
    level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("meal_dictator")

app = FastAPI(title="Meal Dictator Skill API", version="1.0.0")

agent: MealDictatorAgent = build_agent(logger)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@app.get("/health")
def health() -> Dict[str, Any]:
    return {"status": "ok", "time": datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"}


@app.post("/skill")
def skill(req: SkillRequest) -> Dict[str, Any]:
    request_id = req.request.requestId
    session_id = req.session.sessionId

    if req.session.new:
        agent.on_session_started(request_id, session_id)

    kind = req.request.type
    if kind == RequestType.LAUNCH.value:
        return envelope(agent.launch(request_id, session_id).to_api())

    if kind == RequestType.INTENT.value:
        if req.request.intent is None:
            raise HTTPException(status_code=400, detail="intent required")
        try:
            response = agent.handle(
                req.request.intent.to_domain(),
                request_id=request_id,
                session_id=session_id,
            )
        except UnrecognizedIntent:
            raise HTTPException(status_code=400, detail="Invalid Intent")
        return envelope(response.to_api())

    if kind == RequestType.SESSION_ENDED.value:
        agent.on_session_ended(request_id, session_id)
        return envelope()

    raise HTTPException(status_code=400, detail=f"unsupported request type: {kind}")


# Entry for local dev
# uvicorn fastapi_app.main:app --reload --port 8000
