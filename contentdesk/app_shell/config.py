import logging
import os
from dataclasses import dataclass
from pathlib import Path

from contentdesk.domain.entities import Role
from contentdesk.rules.loader import load_rules
from contentdesk.rules.models import Rules

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "CONTENTDESK_DATA_DIR"
RULES_PATH_ENV = "CONTENTDESK_RULES_PATH"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    rules_path: Path

    @property
    def db_path(self) -> Path:
        return self.data_dir / "contentdesk.db"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            data_dir=Path(os.environ.get(DATA_DIR_ENV, "./data")),
            rules_path=Path(os.environ.get(RULES_PATH_ENV, "./rules.yaml")),
        )


def validate_rules(rules: Rules) -> None:
    """
    Validate operational requirements before startup.
    Raises ValueError on a rules file the workflow cannot run with.
    """
    missing = [r.value for r in Role if r.value not in rules.rbac.roles]
    if missing:
        raise ValueError(f"rbac.roles is missing role(s): {', '.join(missing)}")

    ids = [u.id for u in rules.directory.users]
    if len(ids) != len(set(ids)):
        raise ValueError("directory.users contains duplicate ids")


def load_validated_rules(settings: Settings) -> Rules:
    rules = load_rules(settings.rules_path)
    validate_rules(rules)
    logger.info("Rules loaded from %s", settings.rules_path)
    return rules
