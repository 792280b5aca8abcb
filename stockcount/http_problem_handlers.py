# stockcount/http_problem_handlers.py
from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from stockcount.api.problem import make_problem

logger = logging.getLogger(__name__)


def _new_trace_id() -> str:
    return f"t_{uuid.uuid4().hex[:12]}"


def _request_context(req: Request) -> Dict[str, Any]:
    return {"path": getattr(req.url, "path", ""), "method": req.method}


def _problem_from_http_exc(req: Request, exc: HTTPException) -> Dict[str, Any]:
    """
    Render HTTPException.detail as a Problem.
    Accepted detail shapes:
    - already a Problem ({"error_code", "message", ...})
    - str
    - anything else (stringified)
    """
    status_code = int(exc.status_code)
    trace_id = _new_trace_id()
    ctx = _request_context(req)

    d = exc.detail

    # 1) already a Problem: fill in http_status / trace_id / request context
    if isinstance(d, dict) and "error_code" in d and "message" in d:
        out = dict(d)
        out.setdefault("http_status", status_code)
        out.setdefault("trace_id", trace_id)
        if isinstance(out.get("context"), dict):
            merged = dict(ctx)
            merged.update(out["context"])
            out["context"] = merged
        else:
            out["context"] = ctx
        return out

    # 2) plain detail
    msg = str(d) if d is not None else "Request rejected"
    return make_problem(
        status_code=status_code,
        error_code="http_error",
        message=msg,
        context=ctx,
        details=[{"type": "state", "reason": msg}],
        trace_id=trace_id,
    )


def _validation_details(raw: List[Any]) -> List[Dict[str, Any]]:
    details: List[Dict[str, Any]] = []
    for i, e in enumerate(raw):
        if not isinstance(e, dict):
            continue
        loc = [str(p) for p in (e.get("loc") or ()) if p not in ("body", "query", "path")]
        details.append(
            {
                "type": "validation",
                "path": ".".join(loc) or f"validation[{i}]",
                "reason": str(e.get("msg") or e.get("type") or "invalid"),
            }
        )
    return details


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def _unhandled_exc(req: Request, exc: Exception):
        trace_id = _new_trace_id()
        logger.exception("UNHANDLED_EXC[%s]: %s", trace_id, exc)
        content = make_problem(
            status_code=500,
            error_code="internal_error",
            message="Internal error, please retry later",
            context=_request_context(req),
            trace_id=trace_id,
        )
        return JSONResponse(status_code=500, content=content)

    @app.exception_handler(RequestValidationError)
    async def _validation_exc(req: Request, exc: RequestValidationError):
        content = make_problem(
            status_code=422,
            error_code="request_validation_error",
            message="Invalid request parameters",
            context=_request_context(req),
            details=_validation_details(exc.errors()),
            trace_id=_new_trace_id(),
        )
        return JSONResponse(status_code=422, content=content)

    @app.exception_handler(HTTPException)
    async def _http_exc(req: Request, exc: HTTPException):
        content = _problem_from_http_exc(req, exc)
        return JSONResponse(status_code=int(exc.status_code), content=content)
