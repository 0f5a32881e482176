"""
Rich formatters for displaying succession analysis results and market facts
"""

from typing import Dict, Any, List, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.box import ROUNDED

from data_models import Scenario
from succession_engine import SCENARIO_DESCRIPTIONS, SCENARIO_LABELS

PRIORITY_STYLES = {
    'high': ('HOCH', 'red'),
    'medium': ('MITTEL', 'yellow'),
    'low': ('NIEDRIG', 'green'),
}

PERSPECTIVE_TITLES = (
    ('emotional', '❤️  Emotional'),
    ('legal', '⚖️  Rechtlich'),
    ('tax', '💶 Steuerlich'),
    ('organizational', '🏢 Organisatorisch'),
)

TIMELINE_PHASES = (
    ('phase_0_2_years', '0-2 Jahre'),
    ('phase_2_5_years', '2-5 Jahre'),
    ('phase_5_plus_years', '5+ Jahre'),
)


def _section(console: Console, title: str):
    console.print()
    console.print("━" * 79)
    console.print(f"[bold blue]{title.center(79)}[/bold blue]")
    console.print("━" * 79)
    console.print()


def _print_list(console: Console, items: List[str], bullet: str = "•"):
    for item in items:
        console.print(f"  {bullet} {item}")


def format_analysis_results(console: Console, results: Dict[str, Any], analysis_time: Optional[float] = None):
    """
    Format and display a succession analysis

    Args:
        console: Rich console instance
        results: Analysis result as a dict (API response or model_dump())
        analysis_time: Time taken for analysis in seconds
    """
    scenario = results.get('scenario')
    priority = results.get('priority')

    try:
        scenario_key = Scenario(scenario)
    except ValueError:
        console.print(f"❌ [red]Unknown scenario in result: {scenario}[/red]")
        return

    _section(console, "📊 NACHFOLGE-ANALYSE")

    priority_label, priority_color = PRIORITY_STYLES.get(priority, (str(priority).upper(), 'yellow'))
    console.print(f"🧭 Szenario: [bold cyan]{SCENARIO_LABELS[scenario_key]}[/bold cyan]")
    console.print(f"   {SCENARIO_DESCRIPTIONS[scenario_key]}")
    console.print(f"⏰ Priorität: [bold {priority_color}]{priority_label}[/bold {priority_color}]")

    # Perspectives
    _section(console, "🔍 PERSPEKTIVEN")
    perspectives = results.get('perspectives', {})
    for key, title in PERSPECTIVE_TITLES:
        console.print(f"[bold]{title}[/bold]")
        _print_list(console, perspectives.get(key, []))
        console.print()

    # Next steps
    _section(console, "✅ NÄCHSTE SCHRITTE")
    for step in results.get('next_steps', []):
        console.print(f"  {step}")

    # Risks and opportunities side by side
    console.print()
    table = Table(box=ROUNDED, show_header=True, header_style="bold blue", expand=True)
    table.add_column("⚠️  Risiken", style="red", ratio=1)
    table.add_column("🌱 Chancen", style="green", ratio=1)
    risk_items = results.get('risks', [])
    opportunity_items = results.get('opportunities', [])
    for i in range(max(len(risk_items), len(opportunity_items))):
        table.add_row(
            risk_items[i] if i < len(risk_items) else "",
            opportunity_items[i] if i < len(opportunity_items) else ""
        )
    console.print(table)

    # Timeline
    _section(console, "🗓️  ZEITPLAN")
    timeline = results.get('timeline', {})
    timeline_table = Table(box=ROUNDED, show_header=True, header_style="bold blue")
    timeline_table.add_column("Phase", style="bold", width=10)
    timeline_table.add_column("Meilensteine")
    for key, label in TIMELINE_PHASES:
        timeline_table.add_row(label, "\n".join(timeline.get(key, [])))
    console.print(timeline_table)

    # Success factors
    _section(console, "🏆 ERFOLGSFAKTOREN")
    _print_list(console, results.get('success_factors', []))

    # Statistics and quotes
    console.print()
    console.print("[bold]📈 Zahlen & Fakten[/bold]")
    _print_list(console, results.get('statistics', []))

    quote_items = results.get('quotes', [])
    if quote_items:
        console.print()
        console.print(Panel(Text("\n".join(quote_items), style="italic"), title="💬 Zitate", expand=False))

    if analysis_time is not None:
        console.print()
        console.print(f"⏱️  Time: {analysis_time:.2f}s")


def format_statistics(console: Console, facts: Dict[str, Any]):
    """
    Display the market facts returned by /api/statistiken

    Args:
        console: Rich console instance
        facts: Statistics payload (title, description, facts, sources)
    """
    _section(console, f"📈 {facts.get('title', 'Statistiken').upper()}")
    if facts.get('description'):
        console.print(facts['description'])
        console.print()

    table = Table(box=ROUNDED, show_header=True, header_style="bold blue")
    table.add_column("Kennzahl", style="bold", width=28)
    table.add_column("Wert", style="cyan", width=16)
    table.add_column("Beschreibung")
    for fact in facts.get('facts', []):
        table.add_row(fact.get('label', ''), fact.get('value', ''), fact.get('description', ''))
    console.print(table)

    sources = facts.get('sources', [])
    if sources:
        console.print()
        console.print(f"[dim]Quellen: {', '.join(sources)}[/dim]")


def format_error_message(console: Console, error: str, suggestions: Optional[str] = None):
    """
    Format and display error messages with suggestions

    Args:
        console: Rich console instance
        error: Error message
        suggestions: Optional suggestions for fixing the error
    """
    console.print(f"❌ [red]Error: {error}[/red]")

    if suggestions:
        console.print(f"💡 [yellow]Suggestion: {suggestions}[/yellow]")
