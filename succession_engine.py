#!/usr/bin/env python3
"""
Succession Analysis Engine

Classifies an owner's questionnaire into one of four succession scenarios and
assembles the scenario-specific advice: four perspectives (emotional, legal,
tax, organizational), next steps, risks, opportunities, a three-phase timeline,
success factors, statistics and expert quotes.

Everything here is a pure function of the questionnaire answers.
"""

import logging
from typing import List, Optional

import advisory_content as content
from data_models import (
    AnalysisResult, Perspectives, Priority, Scenario, SuccessionInput,
    SuccessorStatus, SuccessorType, Timeframe, Timeline
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("successor_identified", "timeframe")

_SCENARIO_BY_SUCCESSOR = {
    SuccessorType.FAMILY: Scenario.FAMILY_SUCCESSION,
    SuccessorType.EMPLOYEE: Scenario.MANAGEMENT_BUYOUT,
    SuccessorType.EXTERNAL: Scenario.EXTERNAL_LEADERSHIP,
}


class IncompleteInputError(ValueError):
    """Raised when required questionnaire answers are missing"""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"Unvollständige Daten: {', '.join(self.missing)} fehlt")


def missing_fields(record: SuccessionInput) -> List[str]:
    return [name for name in REQUIRED_FIELDS if not getattr(record, name)]


def validate_input(record: SuccessionInput) -> None:
    missing = missing_fields(record)
    if missing:
        raise IncompleteInputError(missing)


def classify(record: SuccessionInput) -> Scenario:
    """
    Determine the succession scenario.

    Only an identified successor of a recognised type leads to one of the
    hand-over scenarios; every other combination falls back to a sale.
    """
    if record.successor_identified == SuccessorStatus.YES:
        for successor_type, scenario in _SCENARIO_BY_SUCCESSOR.items():
            if record.successor_type == successor_type:
                return scenario
    return Scenario.SALE


def classify_priority(timeframe: Optional[str]) -> Priority:
    if timeframe == Timeframe.UNDER_2_YEARS:
        return Priority.HIGH
    if timeframe == Timeframe.TWO_TO_FIVE_YEARS:
        return Priority.MEDIUM
    return Priority.LOW


# Perspectives

def emotional_perspective(scenario: Scenario, record: SuccessionInput) -> List[str]:
    return content.EMOTIONAL.render(scenario, record)

def legal_perspective(scenario: Scenario, record: SuccessionInput) -> List[str]:
    return content.LEGAL.render(scenario, record)

def tax_perspective(scenario: Scenario, record: SuccessionInput) -> List[str]:
    return content.TAX.render(scenario, record)

def organizational_perspective(scenario: Scenario, record: SuccessionInput) -> List[str]:
    return content.ORGANIZATIONAL.render(scenario, record)


# Supplementary content

def next_steps(scenario: Scenario, record: SuccessionInput) -> List[str]:
    """Urgency marker (short timeframes only) followed by the numbered checklist"""
    return content.NEXT_STEPS.render(scenario, record)

def risks(scenario: Scenario, record: SuccessionInput) -> List[str]:
    return content.RISKS.render(scenario, record)

def opportunities(scenario: Scenario, record: SuccessionInput) -> List[str]:
    return content.OPPORTUNITIES.render(scenario, record)

def timeline(scenario: Scenario, record: SuccessionInput) -> Timeline:
    # TODO: shift milestones by timeframe and owner_age once phase lengths are agreed with advisors
    return content.TIMELINE.render(scenario)

def success_factors(scenario: Scenario, record: SuccessionInput) -> List[str]:
    return content.SUCCESS_FACTORS.render(scenario, record)

def statistics(scenario: Scenario, record: SuccessionInput) -> List[str]:
    return content.STATISTICS.render(scenario, record)

def quotes(scenario: Scenario, record: SuccessionInput) -> List[str]:
    return content.QUOTES.render(scenario, record)


def assemble(record: SuccessionInput) -> AnalysisResult:
    """
    Build the complete analysis for one questionnaire.

    Args:
        record: Questionnaire answers

    Returns:
        AnalysisResult whose every section was generated from the same scenario

    Raises:
        IncompleteInputError: If a required answer is missing
    """
    validate_input(record)

    scenario = classify(record)
    priority = classify_priority(record.timeframe)
    logger.debug(f"Classified questionnaire as {scenario.value} with {priority.value} priority")

    return AnalysisResult(
        scenario=scenario,
        priority=priority,
        perspectives=Perspectives(
            emotional=emotional_perspective(scenario, record),
            legal=legal_perspective(scenario, record),
            tax=tax_perspective(scenario, record),
            organizational=organizational_perspective(scenario, record)
        ),
        next_steps=next_steps(scenario, record),
        risks=risks(scenario, record),
        opportunities=opportunities(scenario, record),
        timeline=timeline(scenario, record),
        success_factors=success_factors(scenario, record),
        statistics=statistics(scenario, record),
        quotes=quotes(scenario, record)
    )


SCENARIO_LABELS = {
    Scenario.FAMILY_SUCCESSION: "Familieninterne Nachfolge",
    Scenario.MANAGEMENT_BUYOUT: "Management-Buy-Out (MBO)",
    Scenario.EXTERNAL_LEADERSHIP: "Externe Geschäftsführung",
    Scenario.SALE: "Verkauf / M&A",
}

SCENARIO_DESCRIPTIONS = {
    Scenario.FAMILY_SUCCESSION: "Übergabe an ein Familienmitglied - mit allen emotionalen und rechtlichen Besonderheiten",
    Scenario.MANAGEMENT_BUYOUT: "Verkauf an vertraute Mitarbeiter - Finanzierung und Übergangsbegleitung im Fokus",
    Scenario.EXTERNAL_LEADERSHIP: "Eigentum behalten, Führung abgeben - neue Perspektiven nutzen",
    Scenario.SALE: "Externer Verkauf an strategischen Käufer oder Investor",
}


def _bullets(items: List[str]) -> str:
    return chr(10).join(f'• {item}' for item in items) if items else '• Keine Einträge'


def format_analysis_report(result: AnalysisResult) -> str:
    """Format an analysis into a readable plain-text report"""

    report = f"""
{'='*60}
NACHFOLGE-ANALYSE
{'='*60}

🧭 SZENARIO
{SCENARIO_LABELS[result.scenario]}
{SCENARIO_DESCRIPTIONS[result.scenario]}
Priorität: {result.priority.value.upper()}

✅ NÄCHSTE SCHRITTE
{_bullets(result.next_steps)}

❤️ EMOTIONALE PERSPEKTIVE
{_bullets(result.perspectives.emotional)}

⚖️ RECHTLICHE PERSPEKTIVE
{_bullets(result.perspectives.legal)}

💶 STEUERLICHE PERSPEKTIVE
{_bullets(result.perspectives.tax)}

🏗️ ORGANISATORISCHE PERSPEKTIVE
{_bullets(result.perspectives.organizational)}

⚠️ RISIKEN
{_bullets(result.risks)}

🚀 CHANCEN
{_bullets(result.opportunities)}

📅 ZEITPLAN
0-2 Jahre:
{_bullets(result.timeline.phase_0_2_years)}

2-5 Jahre:
{_bullets(result.timeline.phase_2_5_years)}

5+ Jahre:
{_bullets(result.timeline.phase_5_plus_years)}

🎯 ERFOLGSFAKTOREN
{_bullets(result.success_factors)}

📊 STATISTIKEN
{_bullets(result.statistics)}

💬 EXPERTENSTIMMEN
{_bullets(result.quotes)}
{'='*60}
"""
    return report


if __name__ == "__main__":
    example = SuccessionInput(
        successor_identified="yes",
        successor_type="family",
        timeframe="under_2y",
        owner_age=62,
        is_family_business="yes",
        employee_count=55,
        annual_revenue="over_10m",
        emotional_attachment="high"
    )
    print(format_analysis_report(assemble(example)))
