from contextlib import asynccontextmanager
import json
import logging
import os

from career_agent.ai.config import load_ai_config
from career_agent.core.config import settings
from career_agent.core.scoring import get_ranking_weights

logger = logging.getLogger(__name__)


def configuration_warnings() -> list[str]:
    warnings = []
    if not settings.job_board.configured:
        warnings.append("ADZUNA_APP_ID/ADZUNA_API_KEY not set; job searches return no listings")
    if settings.job_board.demo_listings:
        warnings.append("DEMO_JOBS_ENABLED is on; placeholder listings may be shown")
    if load_ai_config().provider == "openai" and not os.getenv("OPENAI_API_KEY"):
        warnings.append("OPENAI_API_KEY not set; letters use static drafts and chat streams end in an error")
    return warnings


@asynccontextmanager
async def lifespan(app):
    get_ranking_weights()
    for warning in configuration_warnings():
        logger.warning(warning)
    logger.info(
        json.dumps(
            {
                "event": "startup",
                "auth_mode": settings.chat_auth_mode,
                "rate_limit": settings.rate_limit if settings.rate_limit_enabled else None,
                "model": load_ai_config().model,
            }
        )
    )
    yield
