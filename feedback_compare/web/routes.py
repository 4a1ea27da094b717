## routes.py
from __future__ import annotations

import uuid
from types import SimpleNamespace
from typing import Optional

from flask import Blueprint, abort, current_app, redirect, render_template, request, session, url_for

from feedback_compare.domain.errors import AnalysisInProgressError
from feedback_compare.renderers.report_renderer import ReportRenderer
from feedback_compare.repositories.session_repository import SessionRepository
from feedback_compare.services.analysis_service import FeedbackAnalysisService
from feedback_compare.services.feedback_session import FeedbackSession
from feedback_compare.services.file_intake import SLOT_TITLES

SESSION_KEY = "feedback_session_id"


def _session_id() -> str:
    sid = session.get(SESSION_KEY)
    if not sid:
        sid = uuid.uuid4().hex
        session[SESSION_KEY] = sid
    return sid


def create_blueprint(
    analysis_service: FeedbackAnalysisService,
    session_repo: SessionRepository,
    renderer: ReportRenderer,
) -> Blueprint:
    bp = Blueprint("web", __name__)

    def existing_session() -> Optional[FeedbackSession]:
        # Only uploads create sessions; browsing never adds to the store
        sid = session.get(SESSION_KEY)
        return session_repo.get(sid) if sid else None

    def render_page(fs: FeedbackSession, code: int = 200):
        slots = [
            SimpleNamespace(
                id=slot,
                title=title,
                label=fs.intake.label(slot),
                selected=fs.intake.has_file(slot),
            )
            for slot, title in SLOT_TITLES.items()
        ]
        page_model = dict(
            slots=slots,
            can_analyze=fs.can_analyze,
            loading=fs.loading,
            has_files=any(s.selected for s in slots),
            error=fs.error_message,
            report_html=renderer.render(fs.report) if fs.report is not None else None,
        )
        return render_template("index.html", **page_model), code

    @bp.get("/")
    def index():
        return render_page(existing_session() or FeedbackSession())

    @bp.post("/upload/<slot>")
    def upload(slot: str):
        if slot not in SLOT_TITLES:
            abort(404)

        uploaded = request.files.get("file")
        if uploaded is None or not uploaded.filename:
            # Nothing picked: keep whatever the slot already holds
            return redirect(url_for("web.index"))

        fs = session_repo.get_or_create(_session_id())

        selected = fs.intake.select(slot, uploaded.filename, uploaded.read())
        if selected is not None:
            current_app.logger.info(
                "Selected %s for %s (%d chars, %d active sessions)",
                selected.filename, slot, selected.size, len(session_repo),
            )

        return redirect(url_for("web.index"))

    @bp.post("/analyze")
    def analyze():
        fs = existing_session()
        if fs is None:
            return redirect(url_for("web.index"))

        try:
            ran = fs.analyze(analysis_service)
        except AnalysisInProgressError:
            current_app.logger.info("Rejected analyze request: run already in progress")
            abort(409)

        if not ran:
            return redirect(url_for("web.index"))

        code = 200 if fs.report is not None else 500
        current_app.logger.info("Analysis finished status=%s", fs.status.value)
        return render_page(fs, code)

    @bp.post("/reset")
    def reset():
        sid = session.pop(SESSION_KEY, None)
        if sid:
            session_repo.discard(sid)
        return redirect(url_for("web.index"))

    return bp
