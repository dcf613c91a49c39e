"""
End-to-end walkthrough of the reading pipelines.

This script shows:
1. Configuration loading
2. Parsing transcribed and typed readings (including rejections)
3. Storing readings in the in-memory store
4. Building a summary and chart points for a range

Run with: uv run python run_demo.py
"""

from datetime import UTC, datetime, timedelta

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from adapters.memory.store import InMemoryReadingStore
from bpcore.config import get_config, print_config_summary
from bpcore.domain.models import ReadingRequest
from bpcore.services.reading_service import ReadingService

console = Console()

SAMPLE_PHRASES = [
    "one hundred twenty over eighty pulse seventy two",
    "120/80 72",
    "my systolic is 145 and diastolic is 95 pulse is 80",
    "blood pressure 138 by 92",
    "120 over 30",
    "I feel fine today",
    "   ",
]


def demo_parsing(service: ReadingService) -> None:
    console.print(Panel("Parsing free-text readings", style="blue"))

    table = Table(title="Parse outcomes")
    table.add_column("Input", style="cyan")
    table.add_column("Result", style="magenta")
    table.add_column("Message", style="green")

    for phrase in SAMPLE_PHRASES:
        outcome = service.parse_text(phrase)
        status = "ok" if outcome.success else outcome.failure.value  # type: ignore[union-attr]
        table.add_row(repr(phrase), status, outcome.message)

    console.print(table)


def seed_readings(service: ReadingService, user_id: str) -> None:
    now = datetime.now(UTC)
    history = [(128, 82, 74), (132, 85, 76), (141, 91, None), (146, 94, 81), (150, 96, 79)]
    for days_ago, (sys, dia, pulse) in zip(range(len(history), 0, -1), history, strict=True):
        service.save_reading(
            user_id,
            ReadingRequest(
                systolic=sys,
                diastolic=dia,
                pulse=pulse,
                recorded_at=(now - timedelta(days=days_ago)).strftime("%Y-%m-%dT%H:%M:%S"),
            ),
        )
    service.save_from_text(user_id, "one hundred fifty two over ninety eight pulse eighty")


def demo_summary(service: ReadingService, user_id: str, range_label: str) -> None:
    console.print(Panel(f"Summary for range {range_label}", style="blue"))

    summary = service.summary_for_range(user_id, range_label)

    table = Table(title=f"{summary.total_readings} readings")
    table.add_column("Metric", style="cyan")
    table.add_column("Average", style="green")
    table.add_column("Min", style="yellow")
    table.add_column("Max", style="yellow")
    table.add_row(
        "Systolic",
        f"{summary.avg_systolic:.1f}",
        str(summary.min_systolic),
        str(summary.max_systolic),
    )
    table.add_row(
        "Diastolic",
        f"{summary.avg_diastolic:.1f}",
        str(summary.min_diastolic),
        str(summary.max_diastolic),
    )
    table.add_row(
        "Pulse", f"{summary.avg_pulse:.1f}", str(summary.min_pulse), str(summary.max_pulse)
    )
    console.print(table)

    trend = f"{summary.trend.value} {summary.trend.arrow}" if summary.trend else "n/a"
    console.print(f"Category: [bold]{summary.category.value}[/bold]")
    console.print(f"Trend: {trend}")
    console.print(f"Suggestion: {summary.suggestion}", style="italic")
    for alert in summary.alerts:
        console.print(f"  {alert}", style="red")

    points = service.graph_for_range(user_id, range_label)
    chart = Table(title="Chart points")
    chart.add_column("When", style="cyan")
    chart.add_column("BP", style="green")
    chart.add_column("Category", style="magenta")
    for point in points:
        chart.add_row(point.time_label, f"{point.systolic}/{point.diastolic}", point.category.value)
    console.print(chart)


def main() -> None:
    config = get_config()
    print_config_summary()

    service = ReadingService(InMemoryReadingStore(), config=config)
    demo_parsing(service)

    user_id = "demo-user"
    seed_readings(service, user_id)
    demo_summary(service, user_id, "7d")
    demo_summary(service, "nobody", "1m")


if __name__ == "__main__":
    main()
