"""
Tests for the succession engine.

Covers scenario and priority classification, the gated advisory content,
input validation, the plain-text report and the two worked examples.
"""

import itertools

import pytest

import advisory_content as content
from data_models import AnalysisResult, Priority, Scenario, SuccessionInput
from succession_engine import (
    IncompleteInputError,
    assemble,
    classify,
    classify_priority,
    emotional_perspective,
    format_analysis_report,
    legal_perspective,
    missing_fields,
    next_steps,
    opportunities,
    organizational_perspective,
    quotes,
    success_factors,
    tax_perspective,
    timeline,
    validate_input,
)


POOL_AGREEMENT = "Familienunternehmen: Pool-Verträge oder Stimmrechtsbindungen können Zersplitterung verhindern"
WORKS_COUNCIL = "Betriebsrat informieren: Bei Betriebsübergang Informationspflichten nach BetrVG beachten"
LARGE_COMPANY_STRUCTURES = "Bei größeren Unternehmen: Professionelle Managementstrukturen aufbauen, nicht alles vom Nachfolger abhängig machen"
ADMINISTRATIVE_ASSETS_LIMIT = "Bei großen Unternehmen: Verwaltungsvermögen darf maximal 20% betragen für volle Verschonung"
BIDDING_PROCESS = "Größeres Unternehmen: Strukturierter Bieterverfahren kann Kaufpreis optimieren"


def _record(**answers) -> SuccessionInput:
    answers.setdefault("successor_identified", "yes")
    answers.setdefault("timeframe", "2to5y")
    return SuccessionInput(**answers)


# =============================================================================
# Classification
# =============================================================================

class TestClassify:
    """Tests for scenario classification."""

    @pytest.mark.parametrize("successor_type,expected", [
        ("family", Scenario.FAMILY_SUCCESSION),
        ("employee", Scenario.MANAGEMENT_BUYOUT),
        ("external", Scenario.EXTERNAL_LEADERSHIP),
    ])
    def test_identified_successor_selects_scenario(self, successor_type, expected):
        """An identified successor of a known type maps to its scenario."""
        assert classify(_record(successor_type=successor_type)) == expected

    @pytest.mark.parametrize("status", ["no", "unclear"])
    def test_no_identified_successor_is_sale(self, status):
        """Without an identified successor the type is ignored."""
        assert classify(_record(successor_identified=status, successor_type="family")) == Scenario.SALE

    def test_unrecognized_successor_type_falls_back_to_sale(self):
        """Unknown successor types never raise."""
        assert classify(_record(successor_type="unrecognized_value")) == Scenario.SALE

    def test_every_combination_yields_one_scenario(self):
        """Classification is total over statuses and types, including garbage."""
        statuses = ["yes", "no", "unclear"]
        types = ["family", "employee", "external", None, "garbage"]

        for status, successor_type in itertools.product(statuses, types):
            record = _record(successor_identified=status, successor_type=successor_type)
            assert classify(record) in set(Scenario)


class TestClassifyPriority:
    """Tests for the timeframe to priority mapping."""

    @pytest.mark.parametrize("timeframe,expected", [
        ("under_2y", Priority.HIGH),
        ("2to5y", Priority.MEDIUM),
        ("over_5y", Priority.LOW),
        ("anything_else", Priority.LOW),
        (None, Priority.LOW),
    ])
    def test_priority_boundaries(self, timeframe, expected):
        assert classify_priority(timeframe) == expected


# =============================================================================
# Validation
# =============================================================================

class TestValidation:
    """Tests for the required-answer check."""

    def test_missing_timeframe_is_reported(self):
        """An input without timeframe is rejected before any content is built."""
        record = SuccessionInput(successor_identified="yes", successor_type="family")

        with pytest.raises(IncompleteInputError) as exc_info:
            assemble(record)

        assert exc_info.value.missing == ["timeframe"]
        assert "timeframe" in str(exc_info.value)

    def test_all_missing_fields_are_listed(self):
        assert missing_fields(SuccessionInput()) == ["successor_identified", "timeframe"]

    def test_empty_string_counts_as_missing(self):
        with pytest.raises(IncompleteInputError):
            validate_input(SuccessionInput(successor_identified="", timeframe="under_2y"))

    def test_complete_input_passes(self, sale_input):
        validate_input(sale_input)
        assert missing_fields(sale_input) == []

    def test_incomplete_input_is_a_value_error(self):
        assert issubclass(IncompleteInputError, ValueError)


# =============================================================================
# Gated content
# =============================================================================

class TestConditionalContent:
    """Tests for entries that depend on individual answers."""

    def test_age_sentence_included_at_60(self):
        """The legacy sentence appears from 60 on and quotes the age."""
        record = _record(successor_type="family", owner_age=60)
        emotional = emotional_perspective(Scenario.FAMILY_SUCCESSION, record)

        age_sentences = [entry for entry in emotional if "Legacy" in entry]
        assert len(age_sentences) == 1
        assert "60" in age_sentences[0]

    def test_age_sentence_omitted_at_59(self):
        record = _record(successor_type="family", owner_age=59)
        emotional = emotional_perspective(Scenario.FAMILY_SUCCESSION, record)

        assert not any("Legacy" in entry for entry in emotional)

    def test_age_sentence_omitted_without_age(self):
        record = _record(successor_type="family")
        assert not any("Legacy" in entry for entry in emotional_perspective(Scenario.FAMILY_SUCCESSION, record))

    def test_attachment_entries_lead_the_emotional_perspective(self):
        """Scenario-invariant entries come before scenario-specific ones."""
        record = _record(successor_type="employee", emotional_attachment="very_high")
        emotional = emotional_perspective(Scenario.MANAGEMENT_BUYOUT, record)

        common = [advice.text for advice in content.EMOTIONAL.common]
        assert emotional[:2] == common
        assert emotional[2].startswith("MBO bedeutet Vertrauen")

    def test_low_attachment_skips_common_emotional_entries(self):
        record = _record(successor_type="employee", emotional_attachment="low")
        emotional = emotional_perspective(Scenario.MANAGEMENT_BUYOUT, record)

        assert emotional[0].startswith("MBO bedeutet Vertrauen")
        assert len(emotional) == 4

    def test_very_strong_attachment_adds_sale_entry(self):
        record = _record(successor_identified="no", emotional_attachment="very_high")
        emotional = emotional_perspective(Scenario.SALE, record)

        assert any("psychologische Begleitung" in entry for entry in emotional)

    def test_works_council_needs_twenty_employees(self):
        at_threshold = legal_perspective(Scenario.SALE, _record(successor_identified="no", employee_count=20))
        below = legal_perspective(Scenario.SALE, _record(successor_identified="no", employee_count=19))

        assert WORKS_COUNCIL in at_threshold
        assert WORKS_COUNCIL not in below

    def test_large_company_structures_need_more_than_50_employees(self):
        at_50 = organizational_perspective(Scenario.FAMILY_SUCCESSION, _record(successor_type="family", employee_count=50))
        at_51 = organizational_perspective(Scenario.FAMILY_SUCCESSION, _record(successor_type="family", employee_count=51))

        assert LARGE_COMPANY_STRUCTURES not in at_50
        assert at_51[-1] == LARGE_COMPANY_STRUCTURES

    def test_small_revenue_adds_house_bank_advice(self):
        record = _record(successor_type="employee", annual_revenue="500k_2m")
        organizational = organizational_perspective(Scenario.MANAGEMENT_BUYOUT, record)

        assert organizational[-1].startswith("Kleinere Unternehmen: Hausbank-Finanzierung")

    def test_large_revenue_adds_tax_and_opportunity_entries(self):
        record = _record(successor_identified="no", annual_revenue="over_10m")

        assert tax_perspective(Scenario.SALE, record)[-1].startswith("Große Transaktion")
        assert opportunities(Scenario.SALE, record)[-1].startswith("Hohe Bewertung")

    def test_large_revenue_adds_administrative_assets_limit_for_family(self):
        large = tax_perspective(Scenario.FAMILY_SUCCESSION, _record(successor_type="family", annual_revenue="over_10m"))
        smaller = tax_perspective(Scenario.FAMILY_SUCCESSION, _record(successor_type="family", annual_revenue="2m_10m"))

        assert large[-1] == ADMINISTRATIVE_ASSETS_LIMIT
        assert ADMINISTRATIVE_ASSETS_LIMIT not in smaller

    def test_large_revenue_adds_bidding_process_for_sale(self):
        large = organizational_perspective(Scenario.SALE, _record(successor_identified="no", annual_revenue="over_10m"))
        smaller = organizational_perspective(Scenario.SALE, _record(successor_identified="no", annual_revenue="2m_10m"))

        assert large[-1] == BIDDING_PROCESS
        assert BIDDING_PROCESS not in smaller

    def test_urgency_marker_only_for_short_timeframes(self):
        urgent = next_steps(Scenario.SALE, _record(successor_identified="no", timeframe="under_2y"))
        relaxed = next_steps(Scenario.SALE, _record(successor_identified="no", timeframe="2to5y"))

        assert urgent[0] == content.URGENCY_MARKER
        assert content.URGENCY_MARKER not in relaxed
        assert relaxed[0].startswith("1. ")
        assert urgent[1:] == relaxed

    def test_unrecognized_enum_values_are_tolerated(self):
        """Unknown answers fall through to default branches instead of raising."""
        record = _record(
            successor_type="family",
            emotional_attachment="enormous",
            annual_revenue="lots",
            is_family_business="perhaps",
            timeframe="someday",
        )

        result = assemble(record)

        assert result.scenario == Scenario.FAMILY_SUCCESSION
        assert result.priority == Priority.LOW
        assert POOL_AGREEMENT not in result.perspectives.legal


# =============================================================================
# Supplementary content
# =============================================================================

class TestSupplementaryContent:
    """Tests for the scenario-specific lists that accompany the perspectives."""

    @pytest.mark.parametrize("scenario", list(Scenario))
    def test_success_factors_start_with_common_entries(self, scenario):
        factors = success_factors(scenario, _record())
        common = [advice.text for advice in content.SUCCESS_FACTORS.common]

        assert factors[:len(common)] == common
        assert len(factors) > len(common)

    @pytest.mark.parametrize("scenario", list(Scenario))
    def test_timeline_has_three_filled_phases(self, scenario):
        phases = timeline(scenario, _record())

        assert len(phases.phase_0_2_years) == 5
        assert len(phases.phase_2_5_years) == 5
        assert len(phases.phase_5_plus_years) == 5

    def test_quotes_combine_common_and_scenario_voices(self):
        sale_quotes = quotes(Scenario.SALE, _record(successor_identified="no"))

        assert len(sale_quotes) == len(content.QUOTES.common) + 2
        assert sale_quotes[-1].endswith("Private Equity Investor")


# =============================================================================
# Assembly
# =============================================================================

class TestAssemble:
    """Tests for the complete analysis."""

    def test_family_example(self, family_input):
        """Worked example: urgent family handover of a large family business."""
        result = assemble(family_input)

        assert result.scenario == Scenario.FAMILY_SUCCESSION
        assert result.priority == Priority.HIGH
        assert result.next_steps[0] == content.URGENCY_MARKER

        organizational = result.perspectives.organizational
        family_base = [
            advice.text for advice in content.ORGANIZATIONAL.by_scenario[Scenario.FAMILY_SUCCESSION]
            if advice.when is None
        ]
        assert len(family_base) == 6
        assert all(entry in organizational for entry in family_base)
        assert LARGE_COMPANY_STRUCTURES in organizational

        assert POOL_AGREEMENT in result.perspectives.legal
        assert any(entry.startswith("Mit 62 Jahren") for entry in result.perspectives.emotional)

    def test_sale_example(self, sale_input):
        """Worked example: no successor, long horizon, works council applies."""
        result = assemble(sale_input)

        assert result.scenario == Scenario.SALE
        assert result.priority == Priority.LOW
        assert WORKS_COUNCIL in result.perspectives.legal
        assert content.URGENCY_MARKER not in result.next_steps

    def test_assemble_is_deterministic(self, family_input):
        first = assemble(family_input)
        second = assemble(family_input)

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_all_sections_follow_the_same_scenario(self):
        record = _record(successor_type="external")
        result = assemble(record)

        assert isinstance(result, AnalysisResult)
        assert result.scenario == Scenario.EXTERNAL_LEADERSHIP
        assert result.next_steps[0].startswith("1. Anforderungsprofil")
        assert result.risks[0].startswith("Kulturelle Passung fehlt")
        assert result.timeline.phase_0_2_years[0] == "Headhunting und Auswahlprozess"

    def test_statistics_always_lead_with_market_figures(self, sale_input, family_input):
        for record in (sale_input, family_input):
            statistics = assemble(record).statistics
            assert statistics[0].startswith("59% der Senior-Unternehmer")


class TestReport:
    """Tests for the plain-text report."""

    def test_report_contains_scenario_and_sections(self, family_input):
        report = format_analysis_report(assemble(family_input))

        assert "Familieninterne Nachfolge" in report
        assert "Priorität: HIGH" in report
        assert content.URGENCY_MARKER in report
        assert "ERFOLGSFAKTOREN" in report

    def test_report_marks_empty_sections(self):
        """An emptied section is rendered as a placeholder bullet."""
        result = assemble(_record(successor_type="employee")).model_copy(update={"quotes": []})

        assert "• Keine Einträge" in format_analysis_report(result)
