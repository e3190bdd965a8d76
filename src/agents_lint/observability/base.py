from typing import Protocol


class MetricsHook(Protocol):
    """Receives timings and counts from the parser and the validator.

    Label values are plain strings; suggestion counts carry
    ``{"priority": "high"}`` and the like.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook. Stateless, so a single instance is safe to share."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        return None

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        return None
