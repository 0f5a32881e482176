"""
Utility functions for the Succession Advisor CLI
"""

import json
from typing import Dict, Any, Optional
from pathlib import Path
from datetime import datetime

from data_models import Scenario
from succession_engine import SCENARIO_LABELS

CLI_VERSION = '1.0.0'


def answers_from_options(**options: Any) -> Dict[str, Any]:
    """
    Collect questionnaire answers from CLI options

    Options left unset are dropped so the server (or engine) treats them as absent.
    """
    return {key: value for key, value in options.items() if value is not None}


def save_results(
    results: Dict[str, Any],
    filename: str,
    output_format: str = 'json',
    answers: Optional[Dict[str, Any]] = None
) -> str:
    """
    Save an analysis to file

    Args:
        results: Analysis result as a dict
        filename: Output filename (can include path)
        output_format: Output format ('json', 'markdown', 'table')
        answers: Questionnaire answers the analysis was built from

    Returns:
        Path to saved file

    Raises:
        ValueError: If there is nothing to save
        OSError: If the file cannot be written
    """
    if not results:
        raise ValueError("No data to save")

    # Determine file extension if not provided
    file_path = Path(filename)
    if not file_path.suffix:
        file_path = file_path.with_suffix('.md' if output_format == 'markdown' else '.json')

    # Create directory if it doesn't exist
    file_path.parent.mkdir(parents=True, exist_ok=True)

    if file_path.suffix.lower() == '.md':
        content = _generate_basic_markdown(results)
    else:
        save_data = {'analysis_results': results}
        if answers:
            save_data['answers'] = answers
        save_data['metadata'] = {
            'saved_at': datetime.now().isoformat(),
            'cli_version': CLI_VERSION
        }
        content = json.dumps(save_data, indent=2, ensure_ascii=False, default=str)

    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(content)

    return str(file_path.absolute())


def _generate_basic_markdown(results: Dict[str, Any]) -> str:
    """
    Generate a markdown report from an analysis

    Args:
        results: Analysis result as a dict

    Returns:
        Markdown formatted string
    """
    scenario = Scenario(results.get('scenario'))
    perspectives = results.get('perspectives', {})
    timeline = results.get('timeline', {})

    markdown = f"""# Nachfolge-Analyse: {SCENARIO_LABELS[scenario]}

- **Szenario**: {scenario.value}
- **Priorität**: {results.get('priority')}
"""

    sections = (
        ("Emotionale Perspektive", perspectives.get('emotional', [])),
        ("Rechtliche Perspektive", perspectives.get('legal', [])),
        ("Steuerliche Perspektive", perspectives.get('tax', [])),
        ("Organisatorische Perspektive", perspectives.get('organizational', [])),
        ("Nächste Schritte", results.get('next_steps', [])),
        ("Risiken", results.get('risks', [])),
        ("Chancen", results.get('opportunities', [])),
        ("Zeitplan: 0-2 Jahre", timeline.get('phase_0_2_years', [])),
        ("Zeitplan: 2-5 Jahre", timeline.get('phase_2_5_years', [])),
        ("Zeitplan: 5+ Jahre", timeline.get('phase_5_plus_years', [])),
        ("Erfolgsfaktoren", results.get('success_factors', [])),
        ("Zahlen & Fakten", results.get('statistics', [])),
    )
    for title, items in sections:
        markdown += f"\n## {title}\n\n"
        for item in items:
            markdown += f"- {item}\n"

    quote_items = results.get('quotes', [])
    if quote_items:
        markdown += "\n## Zitate\n\n"
        for quote in quote_items:
            markdown += f"> {quote}\n\n"

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    markdown += f"\n---\n*Generated by Succession Advisor CLI on {timestamp}*\n"

    return markdown
