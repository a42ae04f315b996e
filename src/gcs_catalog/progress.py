"""Progress reporting collaborator for long-running catalog operations."""

from typing import Optional, Protocol, runtime_checkable

from gcs_catalog.core import get_logger


@runtime_checkable
class TaskLog(Protocol):
    """Sink for user-facing progress notifications supplied by the host.

    Calls are made in order and each must return before the operation goes on.
    An exception raised by the sink aborts the running operation.
    """

    def step(self, message: str) -> None:
        ...

    def task(self, name: str, label: str, total: Optional[int]) -> None:
        ...

    def progress(self, name: str, current: int) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class StructlogTaskLog:
    """TaskLog writing every notification to a structlog logger."""

    def __init__(self, name: str = "gcs_catalog.task"):
        self.logger = get_logger(name)

    def step(self, message: str) -> None:
        self.logger.info(message)

    def task(self, name: str, label: str, total: Optional[int]) -> None:
        self.logger.info(
            label, task=name, total=total if total is not None else "unknown"
        )

    def progress(self, name: str, current: int) -> None:
        self.logger.debug("Task progress", task=name, current=current)

    def error(self, message: str) -> None:
        self.logger.error(message)
