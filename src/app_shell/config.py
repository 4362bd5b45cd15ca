import logging
import os
import sys

from src.rules.models import Rules

logger = logging.getLogger(__name__)


def configure_logging(rules: Rules) -> None:
    logging.basicConfig(
        level=rules.ops.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def validate_ops_rules(rules: Rules) -> None:
    """
    Validate operational requirements before startup.
    """
    missing = [env_var for env_var in rules.ops.required_env if not os.environ.get(env_var)]

    if missing:
        logger.critical("Missing required environment variables: %s", ", ".join(missing))
        sys.exit(1)

    # Admin login answers 500 until both secrets are set.
    if not os.environ.get("ADMIN_NAME") or not os.environ.get("ADMIN_PWD"):
        logger.warning("ADMIN_NAME/ADMIN_PWD not set; admin login is disabled")

    logger.info("Configuration validated")
