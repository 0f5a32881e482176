#!/usr/bin/env python3
"""
Succession Advisor CLI - Main entry point
"""

import warnings
# Suppress urllib3 OpenSSL warnings
warnings.filterwarnings('ignore', message='urllib3.*', module='urllib3')

import click
import json
import sys
import time
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.panel import Panel
from rich.text import Text

from data_models import (
    ChatMessage, CompanySize, Industry, Level, RevenueBand, SuccessionInput, SuccessorStatus,
    SuccessorType, Timeframe, YesNo
)
from succession_engine import IncompleteInputError, assemble
from chat_sequencer import COMPLETION_MESSAGE, ChatSequencer
from cli.api_client import SuccessionAdvisorClient, APIError
from cli.formatters import format_analysis_results, format_error_message, format_statistics
from cli.utils import answers_from_options, save_results

console = Console()


def _choice(enum_cls) -> click.Choice:
    return click.Choice([member.value for member in enum_cls])


def _header(title: str):
    console.print()
    console.print(Panel(Text(title, style="bold blue"), expand=False))


def _output(results: Dict[str, Any], output_format: str, analysis_time: Optional[float] = None):
    console.print()
    if output_format == 'json':
        click.echo(json.dumps(results, indent=2, ensure_ascii=False, default=str))
    else:
        format_analysis_results(console, results, analysis_time)


def _save(results: Dict[str, Any], save: Optional[str], output_format: str, answers: Optional[Dict[str, Any]] = None):
    if not save:
        return
    try:
        saved_path = save_results(results, save, output_format, answers)
        console.print(f"✅ [green]Results saved to: {saved_path}[/green]")
    except (OSError, ValueError) as e:
        console.print(f"⚠️  [yellow]Warning: Could not save results: {e}[/yellow]")


def _api_error(e: APIError, api_url: str):
    console.print(f"❌ [red]API Error: {e}[/red]")
    if "timed out" in str(e).lower():
        console.print("💡 [yellow]Suggestion: Try increasing timeout with --timeout 60[/yellow]")
    elif "connect" in str(e).lower():
        console.print(f"💡 [yellow]Suggestion: Check if API server is running on {api_url}, or use --local[/yellow]")
    sys.exit(1)


@click.group()
@click.version_option(version='1.0.0')
def cli():
    """
    Succession Advisor CLI - Plan the handover of an owner-managed business
    """


@cli.command()
@click.option('--company-size', type=_choice(CompanySize), help='Company size')
@click.option('--industry', type=_choice(Industry), help='Industry')
@click.option('--annual-revenue', type=_choice(RevenueBand), help='Annual revenue band')
@click.option('--employee-count', type=click.IntRange(min=0), help='Current head count')
@click.option('--family-business', 'is_family_business', type=_choice(YesNo), help='Is it a family business?')
@click.option('--successor-identified', type=_choice(SuccessorStatus), help='Has a successor been identified? (required)')
@click.option('--successor-type', type=_choice(SuccessorType), help='Kind of successor, if identified')
@click.option('--timeframe', type=_choice(Timeframe), help='Planned handover timeframe (required)')
@click.option('--owner-age', type=click.IntRange(min=0), help='Age of the current owner')
@click.option('--emotional-attachment', type=_choice(Level), help='Emotional attachment to the business')
@click.option('--financial-expectations', type=_choice(Level), help='Financial expectations from the handover')
@click.option('--local', is_flag=True, help='Run the analysis in-process instead of calling the API')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table', help='Output format')
@click.option('--save', type=str, help='Save results to file (.json or .md)')
@click.option('--api-url', default='http://localhost:8000', help='FastAPI server URL')
@click.option('--timeout', type=int, default=30, help='Request timeout in seconds')
def analyse(local: bool, output_format: str, save: Optional[str], api_url: str, timeout: int, **fields):
    """
    Analyse a completed questionnaire and show the succession plan
    """
    answers = answers_from_options(**fields)

    if output_format == 'table':
        _header("SUCCESSION ADVISOR CLI")

    start_time = time.time()

    if local:
        try:
            results = assemble(SuccessionInput(**answers)).model_dump(mode='json')
        except IncompleteInputError as e:
            format_error_message(
                console, str(e),
                "Pass --successor-identified and --timeframe"
            )
            sys.exit(1)
    else:
        client = SuccessionAdvisorClient(base_url=api_url, timeout=timeout)
        try:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True
            ) as progress:
                task = progress.add_task("Analysing succession situation...", total=None)
                results = client.analyse(answers)
                progress.update(task, description="Analysis complete!")
        except APIError as e:
            _api_error(e, api_url)

    _output(results, output_format, time.time() - start_time)
    _save(results, save, output_format, answers)


@cli.command()
@click.option('--local', is_flag=True, help='Run the wizard in-process instead of calling the API')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table', help='Output format')
@click.option('--save', type=str, help='Save results to file (.json or .md)')
@click.option('--api-url', default='http://localhost:8000', help='FastAPI server URL')
@click.option('--timeout', type=int, default=30, help='Request timeout in seconds')
def wizard(local: bool, output_format: str, save: Optional[str], api_url: str, timeout: int):
    """
    Answer the questionnaire one question at a time
    """
    _header("NACHFOLGE-ASSISTENT")

    try:
        if local:
            results, answers = _run_local_wizard()
        else:
            results, answers = _run_remote_wizard(SuccessionAdvisorClient(base_url=api_url, timeout=timeout))
    except (EOFError, KeyboardInterrupt):
        console.print()
        console.print("[yellow]Wizard cancelled[/yellow]")
        sys.exit(1)
    except APIError as e:
        _api_error(e, api_url)
    except IncompleteInputError as e:
        format_error_message(console, str(e))
        sys.exit(1)

    _output(results, output_format)
    _save(results, save, output_format, answers)


def _ask(prompt: str, options: Optional[List[str]]) -> str:
    console.print()
    console.print(f"🤖 [bold]{prompt}[/bold]")
    if options:
        console.print(f"   [dim]{' | '.join(options)}[/dim]")
    return console.input("👤 ")


def _run_local_wizard():
    sequencer = ChatSequencer()
    while not sequencer.is_complete:
        question = sequencer.current_question()
        sequencer.answer(_ask(question.prompt, list(question.options)))

    console.print()
    console.print(f"🤖 {COMPLETION_MESSAGE}")
    results = assemble(sequencer.to_input()).model_dump(mode='json')
    return results, sequencer.answers


def _run_remote_wizard(client: SuccessionAdvisorClient):
    conversation: List[Dict[str, str]] = []
    while True:
        step = client.next_question(conversation)
        if step.get('done'):
            console.print()
            console.print(f"🤖 {step.get('message') or COMPLETION_MESSAGE}")
            break
        conversation.append({"role": "assistant", "content": step['question']})
        conversation.append({"role": "user", "content": _ask(step['question'], step.get('options'))})

    # The server replays the transcript itself; answers here are only kept for --save
    answers = ChatSequencer.replay([ChatMessage(**turn) for turn in conversation]).answers
    return client.finalize(conversation), answers


@cli.command()
@click.option('--local', is_flag=True, help='Read the facts in-process instead of calling the API')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']), default='table', help='Output format')
@click.option('--api-url', default='http://localhost:8000', help='FastAPI server URL')
@click.option('--timeout', type=int, default=30, help='Request timeout in seconds')
def stats(local: bool, output_format: str, api_url: str, timeout: int):
    """
    Show facts and figures on business succession
    """
    if local:
        from advisory_content import MARKET_FACTS
        facts = MARKET_FACTS
    else:
        try:
            facts = SuccessionAdvisorClient(base_url=api_url, timeout=timeout).statistics()
        except APIError as e:
            _api_error(e, api_url)

    if output_format == 'json':
        click.echo(json.dumps(facts, indent=2, ensure_ascii=False))
    else:
        format_statistics(console, facts)


if __name__ == '__main__':
    cli()
