"""Application service: health check (query).

HEALTHY when every catalog store answers and holds data, DEGRADED when
a catalog store is empty, UNHEALTHY when a store cannot be read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import RepositoryError
from storefront.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class HealthStatus(Enum):
    HEALTHY = "HEALTHY"
    DEGRADED = "DEGRADED"
    UNHEALTHY = "UNHEALTHY"


@dataclass(frozen=True)
class HealthReport:
    status: HealthStatus
    message: str


class HealthCheckHandler:

    def __init__(
        self,
        catalog_repos: dict[str, Repository],
        order_repo: Repository,
    ) -> None:
        self._catalog_repos = catalog_repos
        self._order_repo = order_repo

    def handle(self) -> HealthReport:
        try:
            empty = [
                name for name, repo in self._catalog_repos.items() if repo.count() == 0
            ]
            self._order_repo.count()
        except RepositoryError as exc:
            logger.error("Health check failed: %s", exc)
            return HealthReport(
                HealthStatus.UNHEALTHY, f"A store could not be read: {exc}"
            )

        if empty:
            return HealthReport(
                HealthStatus.DEGRADED,
                f"The database was not initialized (empty: {', '.join(empty)})",
            )
        return HealthReport(HealthStatus.HEALTHY, "All stores are available")
