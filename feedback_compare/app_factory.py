from __future__ import annotations

import secrets
from typing import Optional

from flask import Flask

from feedback_compare.adapters.llm_gemini import GeminiLlmClient
from feedback_compare.config.ini_config import AppSettings, IniConfig
from feedback_compare.ports.llm import LlmClient
from feedback_compare.renderers.report_renderer import ReportRenderer
from feedback_compare.repositories.session_repository import SessionRepository
from feedback_compare.services.analysis_service import FeedbackAnalysisService
from feedback_compare.web.routes import create_blueprint


def create_app(settings: Optional[AppSettings] = None, llm_client: Optional[LlmClient] = None) -> Flask:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    if llm_client is None:
        llm_client = GeminiLlmClient(
            model_name=settings.model,
            api_key_env=settings.api_key_env,
            temperature=settings.temperature,
        )

    analysis_service = FeedbackAnalysisService(llm_client=llm_client)
    session_repo = SessionRepository(
        max_sessions=settings.max_sessions,
        idle_ttl_seconds=settings.session_idle_seconds,
    )
    renderer = ReportRenderer()

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(analysis_service, session_repo, renderer))
    app.extensions["feedback_sessions"] = session_repo

    app.secret_key = settings.secret_key or secrets.token_hex(32)
    app.config["MAX_CONTENT_LENGTH"] = settings.max_upload_bytes
    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug

    app.logger.info("Configured model %s (key env: %s)", settings.model, ", ".join(settings.api_key_env))
    return app

#############################
#
# Composition root
# •	create_app() loads AppSettings, builds the Gemini adapter, the analysis service,
#   the bounded in-memory session repository and the report renderer, then registers the blueprint.
# •	Tests pass their own AppSettings and a fake LlmClient instead of touching the INI or Gemini.
#
# Request flow
# •	GET /                  -> index.html with both upload slots, button state, error, report
# •	POST /upload/<slot>    -> the only place a session is created; FileIntake.select(...) then redirect
# •	POST /analyze          -> FeedbackSession.analyze(service) -> prompt -> Gemini -> parse_report
#                             -> ReportRenderer.render(...) embedded in index.html (500 on failure)
# •	POST /reset            -> drop the session
