"""Wellscore MCP server application factory.

This module provides:
- create_app() for testability (integration tests create fresh server instances)
- Module-level `mcp` variable for FastMCP discovery
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP

from wellscore.core.config.settings import Settings, get_settings
from wellscore.core.storage.database import AssessmentDatabase
from wellscore.core.storage.encryption import EncryptionError, FieldEncryptor
from wellscore.core.storage.repository import AssessmentRepository
from wellscore.domains.wellness.domain_logic.metric_models import CategoryWeights
from wellscore.domains.wellness.resources.reference_tables import (
    register_reference_resources,
)
from wellscore.domains.wellness.tools.wellness_score_tools import (
    register_wellness_score_tools,
)

logger = logging.getLogger(__name__)

SERVER_VERSION = "0.1.0"


def weights_from_settings(settings: Settings) -> CategoryWeights:
    """Build category weights from settings.

    Raises:
        ValueError: If the configured weights are negative or don't sum to 1.
    """
    return CategoryWeights(
        metabolic=settings.weight_metabolic,
        vo2_max=settings.weight_vo2_max,
        grip_strength=settings.weight_grip_strength,
        body_composition=settings.weight_body_composition,
    )


def create_app(
    *,
    repository_override: AssessmentRepository | None = None,
    weights_override: CategoryWeights | None = None,
) -> FastMCP:
    """Create and configure the Wellscore MCP server.

    1. Creates the FastMCP server instance
    2. Resolves category weights (override, else settings)
    3. Initializes the encrypted assessment store when a key is configured
    4. Registers tools and resources
    """
    settings = get_settings()

    server = FastMCP(
        "Wellscore",
        instructions=(
            "Wellness score calculator. Turns self-reported metabolic labs, "
            "VO2max, grip strength and body composition into a 0-100 score "
            "per category, a weighted total and a letter grade."
        ),
    )

    weights = weights_override or weights_from_settings(settings)
    logger.info("Category weights: %s", weights.as_dict())

    # --- Assessment store ---
    repository: AssessmentRepository | None = None
    if repository_override is not None:
        repository = repository_override
    elif settings.encryption_key:
        try:
            encryptor = FieldEncryptor(settings.encryption_key)
            database = AssessmentDatabase(settings.db_path)
            database.initialize()
            repository = AssessmentRepository(database, encryptor)
            logger.info(
                "Assessment store initialized: %s (schema v%d)",
                settings.db_path,
                database.get_schema_version(),
            )
        except EncryptionError as exc:
            logger.error("Failed to initialize storage: %s", exc)
            logger.warning("Continuing without persistence; assessments will not be saved")
    else:
        logger.info(
            "No ENCRYPTION_KEY configured; running without persistence. "
            "Set ENCRYPTION_KEY to enable saved assessments."
        )

    @server.tool
    def health_check() -> dict:
        """Check server health and return basic status information."""
        status = {
            "status": "ok",
            "server": "Wellscore",
            "version": SERVER_VERSION,
            "weights": weights.as_dict(),
            "storage_enabled": repository is not None,
        }
        if repository is not None:
            status["assessments_stored"] = repository.count_assessments()
        return status

    register_wellness_score_tools(server, weights)
    logger.info("Wellness scoring tools registered")

    if repository is not None:
        from wellscore.domains.wellness.tools.assessment_tools import (
            register_assessment_tools,
        )

        register_assessment_tools(server, repository, weights)
        logger.info("Assessment tools registered")

    register_reference_resources(server, weights)

    return server


# Module-level instance for FastMCP discovery ("...app.py:mcp").
# Lazy: only created on attribute access, not when tests import create_app.
def __getattr__(name: str):
    if name == "mcp":
        global mcp  # noqa: PLW0603
        mcp = create_app()
        return mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
