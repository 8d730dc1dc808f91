import httpx
import structlog
from fastapi import BackgroundTasks

from core.config import settings

logger = structlog.get_logger(__name__)

DECKS_PATH = "/decks"


def deck_path(deck_id: int) -> str:
    return f"{DECKS_PATH}/{deck_id}"


def notify_revalidation(url: str, path: str, timeout: float) -> None:
    """POST a stale-path hint to the rendering layer; failures are only logged."""
    try:
        response = httpx.post(url, json={"path": path}, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.warning("revalidation_failed", path=path, url=url, error=str(exc))
        return
    logger.debug("revalidation_sent", path=path, status_code=response.status_code)


class PathRevalidator:
    """Collects view paths whose cached renderings are stale.

    When a webhook URL is configured each path is forwarded after the
    response has been sent, via FastAPI background tasks.
    """

    def __init__(
        self,
        background_tasks: BackgroundTasks | None = None,
        webhook_url: str | None = None,
        timeout: float = 5.0,
    ):
        self.background_tasks = background_tasks
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.paths: list[str] = []

    def revalidate_path(self, path: str) -> None:
        self.paths.append(path)
        logger.info("revalidate_path", path=path)
        if self.webhook_url and self.background_tasks is not None:
            self.background_tasks.add_task(notify_revalidation, self.webhook_url, path, self.timeout)


def get_revalidator(background_tasks: BackgroundTasks) -> PathRevalidator:
    return PathRevalidator(
        background_tasks=background_tasks,
        webhook_url=settings.REVALIDATE_URL,
        timeout=settings.REVALIDATE_TIMEOUT_SECONDS,
    )
