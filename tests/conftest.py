import pytest

WELL_FORMED_LINES = [
    "# AGENTS.md",
    "",
    "## Project overview",
    "This is a Next.js 14 storefront written in TypeScript 5.4.",
    "",
    "## Setup",
    "- Install dependencies: `pnpm install`",
    "- Start dev server: `pnpm dev`",
    "- Build: `pnpm build`",
    "",
    "## Testing",
    "- Run all tests: `pnpm test`",
    "- Run a single file: `pnpm test -- cart.spec.ts`",
    "- Lint before committing: `pnpm lint`",
    "",
    "## Code style",
    "- TypeScript strict mode enabled",
    "- Single quotes, no semicolons",
    "- Prefer named exports",
    "",
    "## Pull requests",
    "- Title format: [area] short description",
    "- Run the checks below before opening a PR",
    "",
    "```bash",
    "pnpm lint",
    "pnpm test",
    "```",
]


class RecordingMetricsHook:
    """Keeps every call so tests can assert on emitted metrics."""

    def __init__(self) -> None:
        self.latencies: list[tuple[str, float]] = []
        self.counters: list[tuple[str, int, dict[str, str]]] = []
        self.gauges: list[tuple[str, float]] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies.append((name, value_ms))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters.append((name, value, labels or {}))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges.append((name, value))


def make_long_document(total_lines: int = 210) -> str:
    """A document covering setup, testing and style, padded with short sections."""
    lines = [
        "# AGENTS.md",
        "Guidance for coding agents.",
        "## Setup",
        "- Install: `pnpm install`",
        "## Testing",
        "- Run: `pnpm test`",
        "## Code style",
        "- Lint with `pnpm lint`",
    ]
    n = 0
    while len(lines) < total_lines:
        if n % 20 == 0:
            lines.append(f"## Notes {n // 20 + 1}")
        else:
            lines.append(f"- detail {n}")
        n += 1
    return "\n".join(lines)


@pytest.fixture
def well_formed_doc() -> str:
    """28-line document that satisfies every structural check."""
    return "\n".join(WELL_FORMED_LINES) + "\n"


@pytest.fixture
def long_doc() -> str:
    return make_long_document(210)


@pytest.fixture
def metrics_hook() -> RecordingMetricsHook:
    return RecordingMetricsHook()
