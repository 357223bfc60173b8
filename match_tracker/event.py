import json
from functools import lru_cache
import logging
from pathlib import Path

from pydantic import ValidationError

from .config import settings
from .schemas import EventConfig

logger = logging.getLogger(__name__)


class EventConfigError(Exception):
    """El fichero de campo/partidos no existe o no es valido."""


def load_event(path) -> EventConfig:
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        event = EventConfig.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise EventConfigError(f"Invalid event file {path}: {e}") from e

    logger.info(
        f"Event loaded: {event.name} @ {event.course_name} "
        f"({len(event.matches)} matches)"
    )
    return event


@lru_cache
def get_event() -> EventConfig:
    # Dependencia FastAPI: el evento se carga una vez y es inmutable
    return load_event(settings.EVENT_FILE)
