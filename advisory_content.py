"""
Advisory content tables for the four succession scenarios.

Every generator in the engine is a ContentTable: a scenario-invariant prefix
followed by exactly one scenario block. Entries may carry a guard over the
questionnaire answers; entries are emitted in declaration order.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from data_models import (
    Level, RevenueBand, Scenario, SuccessionInput, Timeframe, Timeline, YesNo
)

Guard = Callable[[SuccessionInput], bool]


@dataclass(frozen=True)
class Advice:
    """A single advisory sentence, optionally gated and templated."""
    text: str
    when: Optional[Guard] = None

    def applies(self, record: SuccessionInput) -> bool:
        return self.when is None or bool(self.when(record))

    def render(self, record: SuccessionInput) -> str:
        if '{' not in self.text:
            return self.text
        return self.text.format_map(record.model_dump())


@dataclass(frozen=True)
class ContentTable:
    common: Tuple[Advice, ...] = ()
    by_scenario: Dict[Scenario, Tuple[Advice, ...]] = field(default_factory=dict)

    def render(self, scenario: Scenario, record: SuccessionInput) -> List[str]:
        entries = self.common + self.by_scenario.get(scenario, ())
        return [entry.render(record) for entry in entries if entry.applies(record)]


@dataclass(frozen=True)
class TimelineTable:
    phases: Dict[Scenario, Tuple[Tuple[str, ...], Tuple[str, ...], Tuple[str, ...]]]

    def render(self, scenario: Scenario) -> Timeline:
        early, middle, late = self.phases.get(scenario, ((), (), ()))
        return Timeline(
            phase_0_2_years=list(early),
            phase_2_5_years=list(middle),
            phase_5_plus_years=list(late)
        )


# Guards

def strong_attachment(record: SuccessionInput) -> bool:
    return record.emotional_attachment in (Level.VERY_HIGH, Level.HIGH)

def very_strong_attachment(record: SuccessionInput) -> bool:
    return record.emotional_attachment == Level.VERY_HIGH

def owner_60_or_older(record: SuccessionInput) -> bool:
    return record.owner_age is not None and record.owner_age >= 60

def family_business(record: SuccessionInput) -> bool:
    return record.is_family_business == YesNo.YES

def revenue_over_10m(record: SuccessionInput) -> bool:
    return record.annual_revenue == RevenueBand.OVER_10M

def revenue_under_2m(record: SuccessionInput) -> bool:
    return record.annual_revenue in (RevenueBand.UNDER_500K, RevenueBand.FROM_500K_TO_2M)

def at_least_20_employees(record: SuccessionInput) -> bool:
    return record.employee_count is not None and record.employee_count >= 20

def more_than_50_employees(record: SuccessionInput) -> bool:
    return record.employee_count is not None and record.employee_count > 50

def urgent(record: SuccessionInput) -> bool:
    return record.timeframe == Timeframe.UNDER_2_YEARS


FAMILY = Scenario.FAMILY_SUCCESSION
MBO = Scenario.MANAGEMENT_BUYOUT
EXTERNAL = Scenario.EXTERNAL_LEADERSHIP
SALE = Scenario.SALE


EMOTIONAL = ContentTable(
    common=(
        Advice("Das Loslassen vom eigenen Lebenswerk ist eine der größten emotionalen Herausforderungen. Nehmen Sie sich Zeit für diesen Prozess.", strong_attachment),
        Advice("Ihre starke Bindung zum Unternehmen ist verständlich - planen Sie bewusst eine neue Lebensphase für sich selbst.", strong_attachment),
    ),
    by_scenario={
        FAMILY: (
            Advice("Familieninterne Übergaben sind emotional komplex: Es vermischen sich Rollen als Elternteil und Unternehmer."),
            Advice("'Es ist wie Familie - und das macht es nicht unbedingt leichter' - bereiten Sie sich auf mögliche Spannungen vor."),
            Advice("Geschwister-Themen: Falls mehrere Kinder vorhanden sind, beachten Sie emotionale und finanzielle Ausgleichsmechanismen."),
            Advice("Loslassen bedeutet auch, dem Nachfolger eigene Entscheidungen zuzutrauen - auch wenn Sie es anders gemacht hätten."),
            Advice("Mit {owner_age} Jahren ist es Zeit, die eigene Legacy zu definieren und den Generationenwechsel aktiv zu gestalten.", owner_60_or_older),
        ),
        MBO: (
            Advice("MBO bedeutet Vertrauen in langjährige Mitarbeiter - eine emotionale Belohnung für beide Seiten."),
            Advice("'Aus den eigenen Reihen: Vertrauen als Basis' - Sie kennen die Stärken und Schwächen Ihrer Nachfolger."),
            Advice("Der Abschied von der täglichen Führung kann erleichtert werden durch die Gewissheit, das Unternehmen in vertrauten Händen zu wissen."),
            Advice("Planen Sie eine klare Übergangsphase: Zu schnelles Loslassen kann genauso problematisch sein wie zu langes Festhalten."),
        ),
        EXTERNAL: (
            Advice("Externe Führung bedeutet: Sie behalten Eigentum, geben aber operative Kontrolle ab - ein emotionaler Balanceakt."),
            Advice("Vertrauen aufbauen mit einer Person, die Ihre Unternehmenskultur möglicherweise anders prägen wird."),
            Advice("Die Grenzen zwischen Unternehmen und Privatbereich verschieben sich - bereiten Sie sich auf eine neue Rolle als Gesellschafter vor."),
            Advice("'Frischer Wind von außen bringt neue Perspektiven' - seien Sie offen für Veränderungen, auch wenn diese zunächst ungewohnt sind."),
        ),
        SALE: (
            Advice("Ein Verkauf bedeutet endgültigen Abschied vom eigenen Lebenswerk - planen Sie bewusst die Zeit danach."),
            Advice("Emotionale Vorbereitung auf den Verlust der täglichen Routine und der Unternehmerfamilie (Mitarbeiter, Kunden, Partner)."),
            Advice("Was kommt nach dem Verkauf? Definieren Sie Ihre neue Identität jenseits der Unternehmerrolle."),
            Advice("Bedenken Sie: Nach dem Verkauf haben Sie wenig bis keinen Einfluss mehr auf die Entwicklung des Unternehmens."),
            Advice("Ihre sehr hohe emotionale Bindung spricht für intensive Vorbereitung: Ggf. psychologische Begleitung in Betracht ziehen.", very_strong_attachment),
        ),
    }
)


LEGAL = ContentTable(
    common=(
        Advice("'Gesellschaftsvertrag und Testament sollten immer aufeinander abgestimmt sein' - lassen Sie beides von einem Fachanwalt prüfen."),
        Advice("Notfallplan erstellen: Was passiert bei plötzlicher Arbeitsunfähigkeit oder Tod vor der geplanten Übergabe?"),
    ),
    by_scenario={
        FAMILY: (
            Advice("Testament: Regelung der Unternehmensanteile vs. Pflichtteilsansprüche anderer Erben"),
            Advice("Pflichtteilsverzicht durch Geschwister kann sinnvoll sein - erfordert aber notarielle Beurkundung und oft Abfindung"),
            Advice("Gesellschaftsvertrag anpassen: Nachfolgeklauseln, Abfindungsregelungen, Beiratsstrukturen"),
            Advice("Bei GmbH: Geschäftsführerbestellung und Vertretungsberechtigung schrittweise anpassen"),
            Advice("Vorweggenommene Erbfolge: Schenkungsvertrag mit Nießbrauch- oder Wohnrechten prüfen"),
            Advice("Familienunternehmen: Pool-Verträge oder Stimmrechtsbindungen können Zersplitterung verhindern", family_business),
        ),
        MBO: (
            Advice("Kaufvertrag: Asset Deal vs. Share Deal - rechtliche Unterschiede beachten (Haftung, Arbeitsverhältnisse, etc.)"),
            Advice("Earn-Out-Klauseln: Kaufpreisanteile an zukünftige Unternehmensentwicklung koppeln - präzise Berechnungsgrundlagen definieren"),
            Advice("Garantien und Gewährleistungen: Haftungsrisiken für Altlasten begrenzen (typischerweise 2-3 Jahre)"),
            Advice("Verkäuferdarlehen: Rechtliche Absicherung durch Grundschuld, Bürgschaften oder Sicherungsübereignung"),
            Advice("Wettbewerbsverbot: Geographischer und zeitlicher Umfang muss angemessen sein (typisch 2-3 Jahre)"),
            Advice("Arbeitsverhältnisse: Betriebsübergang nach § 613a BGB - Mitarbeiter haben Widerspruchsrecht"),
        ),
        EXTERNAL: (
            Advice("Geschäftsführervertrag: Aufgaben, Kompetenzen, Vergütung, Kündigungsfristen klar definieren"),
            Advice("Governance-Struktur: Beirat oder Aufsichtsgremium zur Kontrolle der Geschäftsführung einrichten"),
            Advice("Zielvereinbarungen: Messbare KPIs und Bonus-Regelungen vertraglich festlegen"),
            Advice("Vertretungsberechtigung: Einzelvertretung oder Gesamtvertretung mit Ihnen als Gesellschafter?"),
            Advice("D&O-Versicherung: Directors & Officers-Haftpflicht für Geschäftsführung abschließen"),
            Advice("Wettbewerbsverbot und Abwerbeverbot während und nach der Amtszeit regeln"),
        ),
        SALE: (
            Advice("Due Diligence vorbereiten: Alle rechtlichen Unterlagen systematisch aufbereiten (Verträge, Genehmigungen, Rechtsstreitigkeiten)"),
            Advice("Letter of Intent (LOI): Absichtserklärung regelt Exklusivität, Vertraulichkeit und Rahmenbedingungen"),
            Advice("Kaufvertrag: Asset Deal vs. Share Deal - steuerliche und haftungsrechtliche Unterschiede erheblich"),
            Advice("Garantien: Typischerweise Garantien zu Jahresabschlüssen, Verträgen, Arbeitsverhältnissen, IP-Rechten"),
            Advice("Haftungsfreistellung: Mac-Klausel (Material Adverse Change) schützt Käufer vor unvorhersehbaren Ereignissen"),
            Advice("Kartellrecht: Bei Käufen ab bestimmten Umsatzschwellen Bundeskartellamt einschalten"),
            Advice("Betriebsrat informieren: Bei Betriebsübergang Informationspflichten nach BetrVG beachten", at_least_20_employees),
        ),
    }
)


TAX = ContentTable(
    common=(
        Advice("'Frühzeitige Planung kann Hunderttausende Euro sparen' - ziehen Sie einen spezialisierten Steuerberater hinzu."),
    ),
    by_scenario={
        FAMILY: (
            Advice("Freibeträge nutzen: 400.000 € pro Kind alle 10 Jahre steuerfrei - frühzeitig schrittweise übertragen!"),
            Advice("'Freibeträge alle 10 Jahre nutzen - nicht erst beim Erbfall' - bereits mit 50-55 Jahren beginnen"),
            Advice("Verschonungsregelungen: Bis zu 85-100% Steuerbefreiung bei Betriebsvermögen möglich (Voraussetzungen: Lohnsumme, Haltefrist)"),
            Advice("Optionsverschonung vs. Regelverschonung: Je nach Unternehmensgröße unterschiedliche Vorteile"),
            Advice("Betriebsaufspaltung vermeiden: Kann Verschonungsregelungen gefährden"),
            Advice("Nießbrauchsvorbehalt: Anteile übertragen, aber Gewinnausschüttungen weiter erhalten - steuerlich komplex"),
            Advice("Bei großen Unternehmen: Verwaltungsvermögen darf maximal 20% betragen für volle Verschonung", revenue_over_10m),
        ),
        MBO: (
            Advice("Share Deal: Gewinn unterliegt Abgeltungssteuer (26,375% inkl. Soli) wenn Beteiligung < 1%"),
            Advice("Bei Beteiligung ≥ 1%: Teileinkünfteverfahren (40% steuerfrei, 60% mit persönlichem Steuersatz)"),
            Advice("Asset Deal: Einzelne Wirtschaftsgüter verkaufen - unterschiedliche steuerliche Behandlung je nach Gut"),
            Advice("Freibetrag für Veräußerungsgewinne: 45.000 € einmalig nutzbar (§ 16 Abs. 4 EStG) - Voraussetzungen prüfen"),
            Advice("Tarifbegünstigung nach § 34 EStG: Ermäßigter Steuersatz für außerordentliche Einkünfte möglich"),
            Advice("Verkäuferdarlehen: Zinserträge unterliegen Abgeltungssteuer - ggf. Ratenzahlung steuerlich optimieren"),
            Advice("Gewerbesteuer: Bei Asset Deal ggf. Gewerbesteuerpflicht - bei Share Deal idR nicht"),
        ),
        EXTERNAL: (
            Advice("Geschäftsführergehalt: Angemessenheit prüfen - zu hohe Gehälter können verdeckte Gewinnausschüttung sein"),
            Advice("Gewinnausschüttungen an Sie als Gesellschafter unterliegen Abgeltungssteuer (26,375%)"),
            Advice("Wenn externe Führung scheitert und Verkauf folgt: Steuerliche Beratung zu Veräußerungsgewinn einholen"),
            Advice("Pensionszusagen für Geschäftsführer steuerlich absetzbar - muss aber angemessen sein"),
            Advice("Bei späterer Übertragung auf Geschäftsführer: Schenkung- oder Erbschaftsteuer beachten"),
        ),
        SALE: (
            Advice("Unternehmensbewertung: Realistische Bewertung vermeidet steuerliche Probleme (verdeckte Gewinnausschüttung, Schenkung)"),
            Advice("Share Deal: Meist steuerlich vorteilhafter für Verkäufer (Abgeltungssteuer oder Teileinkünfteverfahren)"),
            Advice("Asset Deal: Meist von Käufer bevorzugt (AfA-Vorteile) - für Verkäufer oft steuerlich ungünstiger"),
            Advice("§ 34 EStG Tarifbegünstigung: Bei Betriebsveräußerung kann ermäßigter Steuersatz von ca. 56% des regulären Satzes gelten"),
            Advice("Freibetrag 45.000 € bei Veräußerung nutzen - allerdings nur wenn über 55 Jahre alt oder dauerhaft berufsunfähig"),
            Advice("Sperrfrist beachten: Verkauf innerhalb von 10 Jahren nach Erwerb kann steuerpflichtig sein"),
            Advice("Gewerbesteuer: Bei Betriebsaufgabe ggf. Gewerbesteuer auf stillen Reserven"),
            Advice("Große Transaktion: Steuergestaltung durch Earn-Out, Kaufpreisaufteilung, oder Holding-Strukturen prüfen", revenue_over_10m),
        ),
    }
)


ORGANIZATIONAL = ContentTable(
    by_scenario={
        FAMILY: (
            Advice("Einarbeitungsphase: 2-5 Jahre gemeinsame Führung empfohlen - schrittweise Verantwortung übergeben"),
            Advice("'Es geht uns ums Wollen' - Nachfolger muss intrinsisch motiviert sein, nicht nur aus Pflichtgefühl"),
            Advice("Rollenklärung: Wann ziehen Sie sich aus operativem Geschäft zurück? Beiratsrolle definieren"),
            Advice("Qualifizierung des Nachfolgers: Externe Ausbildung, Praktika in anderen Unternehmen, Mentoring"),
            Advice("Mitarbeiter-Kommunikation: Transparente Kommunikation über Nachfolge verhindert Gerüchte und Verunsicherung"),
            Advice("Kunden- und Lieferantenbeziehungen: Nachfolger frühzeitig in Netzwerk einbinden"),
            Advice("Bei größeren Unternehmen: Professionelle Managementstrukturen aufbauen, nicht alles vom Nachfolger abhängig machen", more_than_50_employees),
        ),
        MBO: (
            Advice("Finanzierung klären: 48% der Nachfolger haben Finanzierungsschwierigkeiten - frühzeitig mit Banken sprechen"),
            Advice("Finanzierungsmodelle: Eigenkapital + Bankdarlehen + Verkäuferdarlehen + ggf. Private Equity/Beteiligungsgesellschaften"),
            Advice("Realistische Unternehmensbewertung: '34% scheitern an überzogenen Kaufpreisvorstellungen' - Bewertungsgutachten einholen"),
            Advice("Bewertungsmethoden: Ertragswertverfahren, Multiplikatorverfahren (EBIT/EBITDA), oder DCF-Verfahren"),
            Advice("Earn-Out vereinbaren: Teil des Kaufpreises abhängig von zukünftiger Performance - reduziert Finanzierungsbedarf"),
            Advice("Übergangszeit: Sie bleiben 1-3 Jahre als Berater/Mentor - sichert Kontinuität und Finanzierung"),
            Advice("Due Diligence: Auch bei internem Verkauf - Käufer (Bank) will vollständige Transparenz"),
            Advice("Kleinere Unternehmen: Hausbank-Finanzierung oft ausreichend, ggf. KfW-Förderprogramme nutzen", revenue_under_2m),
        ),
        EXTERNAL: (
            Advice("Headhunter einschalten oder selbst suchen? Spezialisierte Personalberater kennen passende Kandidaten"),
            Advice("Auswahlprozess: Mehrere Kandidaten, strukturierte Interviews, Assessment Center, Referenzen prüfen"),
            Advice("Kulturelle Passung: Nicht nur fachliche Qualifikation, sondern auch Werte und Führungsstil beachten"),
            Advice("Einarbeitungsphase 6-12 Monate: Sie begleiten intensiv, danach schrittweiser Rückzug"),
            Advice("Führungsteam stärken: Externe Geschäftsführung braucht starkes Team - nicht alles auf eine Person setzen"),
            Advice("Kontrollmechanismen: Regelmäßige Reportings, Budgetkontrolle, Zielvereinbarungen"),
            Advice("Exit-Strategie: Was passiert, wenn es nicht funktioniert? Kündigungsfristen und Nachbesetzung planen"),
        ),
        SALE: (
            Advice("'Ein guter Deal erfordert realistische Bewertung und gründliche Due Diligence'"),
            Advice("M&A-Berater beauftragen: Professionelle Begleitung erhöht Verkaufspreis und Erfolgswahrscheinlichkeit"),
            Advice("Unternehmensbewertung: Ertragswert, Multiplikatorverfahren (z.B. 4-8x EBIT je nach Branche), DCF"),
            Advice("Unternehmensaufbereitung: 6-12 Monate vor Verkauf 'marktfähig' machen - Prozesse dokumentieren, Abhängigkeiten reduzieren"),
            Advice("Abhängigkeit vom Inhaber reduzieren: Unternehmen muss ohne Sie funktionieren - sonst Bewertungsabschlag"),
            Advice("Datenraum vorbereiten: Alle Unterlagen (Finanzen, Verträge, Personal, Rechte) digital aufbereitet"),
            Advice("Käuferkreis definieren: Strategische Käufer (Wettbewerber, Kunden, Lieferanten) vs. Finanzinvestoren"),
            Advice("Verkaufsprozess: 6-12 Monate einplanen - von erstem Kontakt bis Closing"),
            Advice("Vertraulichkeit wahren: Zu frühe Information kann Mitarbeiter verunsichern und Kunden abschrecken"),
            Advice("Größeres Unternehmen: Strukturierter Bieterverfahren kann Kaufpreis optimieren", revenue_over_10m),
        ),
    }
)


URGENCY_MARKER = "⚠️ DRINGEND: Bei Zeitrahmen unter 2 Jahren sofort handeln!"

NEXT_STEPS = ContentTable(
    common=(
        Advice(URGENCY_MARKER, urgent),
    ),
    by_scenario={
        FAMILY: (
            Advice("1. Familienrat einberufen: Offenes Gespräch mit allen potenziell Betroffenen"),
            Advice("2. Fachanwalt für Gesellschaftsrecht kontaktieren: Testament und Gesellschaftsvertrag prüfen"),
            Advice("3. Steuerberater mit Schwerpunkt Nachfolge beauftragen: Freibeträge und Verschonungsoptionen analysieren"),
            Advice("4. Einarbeitungsplan erstellen: Wie und wann übernimmt der Nachfolger welche Verantwortung?"),
            Advice("5. Notfallplan aufsetzen: Was passiert bei ungeplanten Ereignissen?"),
        ),
        MBO: (
            Advice("1. Gespräch mit potenziellen Nachfolgern: Interesse und Motivation klären"),
            Advice("2. Unternehmensbewertung durchführen: Realistischen Kaufpreis ermitteln"),
            Advice("3. Finanzierungsgespräche: Banken ansprechen, KfW-Programme prüfen"),
            Advice("4. Rechtsanwalt und Steuerberater hinzuziehen: Kaufvertrag und Struktur (Asset/Share Deal) klären"),
            Advice("5. Due Diligence vorbereiten: Alle Unterlagen aufbereiten"),
            Advice("6. Earn-Out-Modell entwickeln: Kaufpreis an zukünftige Entwicklung koppeln"),
        ),
        EXTERNAL: (
            Advice("1. Anforderungsprofil erstellen: Welche Qualifikationen und Erfahrungen sind nötig?"),
            Advice("2. Headhunter kontaktieren oder selbst Kandidaten suchen"),
            Advice("3. Auswahlverfahren planen: Interviews, Tests, Referenzen"),
            Advice("4. Geschäftsführervertrag entwerfen: Rechtsanwalt hinzuziehen"),
            Advice("5. Governance-Struktur aufbauen: Beirat oder Aufsichtsgremium"),
            Advice("6. Einarbeitungsplan entwickeln: Wie erfolgt die Übergabe?"),
        ),
        SALE: (
            Advice("1. M&A-Berater/Unternehmensberater beauftragen: Verkaufsprozess professionell begleiten"),
            Advice("2. Unternehmensbewertung durchführen: Realistische Preisvorstellung entwickeln"),
            Advice("3. Unternehmensaufbereitung: Abhängigkeiten reduzieren, Prozesse dokumentieren"),
            Advice("4. Datenraum vorbereiten: Alle Unterlagen systematisch aufbereiten"),
            Advice("5. Käuferkreis definieren: Strategische Käufer vs. Finanzinvestoren"),
            Advice("6. Steuerberater hinzuziehen: Optimale Verkaufsstruktur planen"),
            Advice("7. Vertraulichkeitsvereinbarungen vorbereiten: Schutz sensibler Informationen"),
        ),
    }
)


RISKS = ContentTable(
    by_scenario={
        FAMILY: (
            Advice("Familienkonflikte: Geschwisterstreit über Bewertung und Ausgleichszahlungen"),
            Advice("Unzureichende Qualifikation des Nachfolgers: 36% klagen über unzureichend vorbereitete Nachfolger"),
            Advice("Fehlende intrinsische Motivation: Nachfolger fühlt sich verpflichtet statt begeistert"),
            Advice("Zu langes Festhalten: Sie mischen sich weiter ein und blockieren Entwicklung"),
            Advice("Steuerliche Fehler: Freibeträge nicht optimal genutzt, Verschonungsvoraussetzungen nicht erfüllt"),
        ),
        MBO: (
            Advice("Finanzierung scheitert: 48% der Nachfolger haben Finanzierungsschwierigkeiten"),
            Advice("Überhöhte Kaufpreisvorstellungen: 34% scheitern an unrealistischen Preisvorstellungen"),
            Advice("Nachfolger überfordert: Fachliche Kompetenz vorhanden, aber unternehmerische Fähigkeiten fehlen"),
            Advice("Earn-Out-Konflikte: Unklare Berechnungsgrundlagen führen zu Streit"),
            Advice("Bankenkrise: Externe Schocks können Finanzierung gefährden"),
        ),
        EXTERNAL: (
            Advice("Kulturelle Passung fehlt: Externe Führung verändert Unternehmenskultur negativ"),
            Advice("Fehlende Identifikation: Externe Führung hat kein 'Eigentümer-Mindset'"),
            Advice("Abwanderung: Externe Führung nutzt Position als Sprungbrett"),
            Advice("Kontrollverlust: Sie bekommen kritische Entwicklungen zu spät mit"),
            Advice("Strategie-Konflikte: Unterschiedliche Vorstellungen über Unternehmensentwicklung"),
        ),
        SALE: (
            Advice("Käufer nicht gefunden: 59% der Senior-Unternehmer finden keinen passenden Nachfolger"),
            Advice("Kaufpreis zu niedrig: Uninformierte Verkäufer akzeptieren schlechte Angebote"),
            Advice("Due Diligence deckt Probleme auf: Unerwartete Altlasten mindern Kaufpreis oder lassen Deal platzen"),
            Advice("Garantieansprüche: Nach Verkauf Haftung für nicht offenbarte Mängel"),
            Advice("Zerschlagung: Käufer zerlegt Unternehmen und verkauft Teile - Mitarbeiter verlieren Jobs"),
            Advice("Emotionale Krise nach Verkauf: 'Post-Sale-Depression' - Leere nach Lebenswerk-Verkauf"),
        ),
    }
)


OPPORTUNITIES = ContentTable(
    by_scenario={
        FAMILY: (
            Advice("Kontinuität: Werte, Kultur und Beziehungen bleiben erhalten"),
            Advice("Vertrauen: Sie kennen Stärken und Schwächen des Nachfolgers"),
            Advice("Steuervorteile: Freibeträge und Verschonungsregelungen optimal nutzbar"),
            Advice("Legacy: Ihr Lebenswerk bleibt in der Familie und wird weitergeführt"),
            Advice("Flexibilität: Übergabe kann individuell und schrittweise gestaltet werden"),
        ),
        MBO: (
            Advice("Vertraute Gesichter: Mitarbeiter kennen Unternehmen und Kultur"),
            Advice("Mitarbeitermotivation: Team bleibt motiviert unter bekannter Führung"),
            Advice("Kontinuität für Kunden: Keine Verunsicherung durch externe Übernahme"),
            Advice("Finanzielle Absicherung: Sie erhalten Kaufpreis und ggf. Earn-Out"),
            Advice("Begleitende Rolle: Sie können als Berater/Mentor noch mitwirken"),
        ),
        EXTERNAL: (
            Advice("Frische Perspektiven: Externe bringen neue Ideen und Netzwerke"),
            Advice("Professionalisierung: Moderne Managementmethoden werden eingeführt"),
            Advice("Eigentum behalten: Sie bleiben Gesellschafter und profitieren von Wertsteigerung"),
            Advice("Entlastung: Operative Last wird abgegeben, Sie konzentrieren sich auf Strategie"),
            Advice("Flexibilität: Bei Misserfolg können Sie Führung wechseln"),
        ),
        SALE: (
            Advice("Finanzielle Unabhängigkeit: Einmaliger Geldzufluss sichert Ruhestand"),
            Advice("Neue Lebensphase: Zeit für Familie, Hobbys, neue Projekte"),
            Advice("Unternehmen kann wachsen: Käufer bringt Ressourcen und Netzwerk"),
            Advice("Klarer Schnitt: Keine emotionalen Verstrickungen mehr"),
            Advice("Mitarbeiter-Perspektiven: Größerer Konzern kann bessere Entwicklungsmöglichkeiten bieten"),
            Advice("Hohe Bewertung: Große Unternehmen erzielen attraktive Multiplikatoren", revenue_over_10m),
        ),
    }
)


TIMELINE = TimelineTable(phases={
    FAMILY: (
        (
            "Testament und Gesellschaftsvertrag finalisieren",
            "Notfallplan erstellen und kommunizieren",
            "Intensive Einarbeitung des Nachfolgers",
            "Schrittweise Verantwortungsübergabe beginnen",
            "Steueroptimierte Übertragung erster Anteile",
        ),
        (
            "Weitere Anteile übertragen (Freibeträge nutzen)",
            "Nachfolger übernimmt Hauptverantwortung",
            "Sie wechseln in Beirats-/Aufsichtsrolle",
            "Nachfolger baut eigenes Führungsteam auf",
            "Familieninterne Kommunikation und Konfliktlösung",
        ),
        (
            "Vollständige Übergabe aller Anteile",
            "Sie als Senior-Berater nur noch sporadisch aktiv",
            "Nachfolger prägt Unternehmen eigenständig",
            "Nächste Generation (Enkel) kommt ggf. ins Unternehmen",
            "Legacy-Projekte (Stiftung, Soziales Engagement)",
        ),
    ),
    MBO: (
        (
            "Unternehmensbewertung und Kaufvertrag aushandeln",
            "Finanzierung sicherstellen (Bank, Verkäuferdarlehen, Earn-Out)",
            "Due Diligence durchführen",
            "Rechtliche und steuerliche Struktur finalisieren",
            "Übergabe vollziehen, Sie als Berater 12-24 Monate aktiv",
        ),
        (
            "Earn-Out-Phase: Kaufpreis wird an Performance gekoppelt ausgezahlt",
            "Ihre Beratungsrolle endet schrittweise",
            "Nachfolger konsolidiert Führung",
            "Verkäuferdarlehen wird zurückgezahlt",
            "Sie ziehen sich vollständig zurück",
        ),
        (
            "Vollständige finanzielle Abwicklung abgeschlossen",
            "Nachfolger führt Unternehmen eigenständig",
            "Ggf. Kontakt als Elder Statesman",
            "Ihre finanzielle Absicherung ist realisiert",
            "Neue Lebensphase vollständig etabliert",
        ),
    ),
    EXTERNAL: (
        (
            "Headhunting und Auswahlprozess",
            "Geschäftsführervertrag und Governance-Struktur",
            "Einarbeitung und Übergabe operative Führung",
            "Beirat etablieren",
            "Erste Controlling-Zyklen und Zielvereinbarungen",
        ),
        (
            "Externe Führung operiert eigenständig",
            "Ihre Rolle: Strategie, Kontrolle, Beiratssitzungen",
            "Ggf. Anpassungen bei Zielvereinbarungen oder Vergütung",
            "Unternehmen entwickelt sich unter neuer Führung",
            "Entscheidung: Dauerlösung oder späterer Verkauf/Übergabe?",
        ),
        (
            "Langfristige Partnerschaft oder Wechsel",
            "Ggf. Nachfolger an Unternehmen beteiligen (Anteile verkaufen)",
            "Strategie für finale Nachfolge entwickeln (Familie, Verkauf)",
            "Sie als Senior-Gesellschafter mit reduzierter Rolle",
            "Exit-Plan für eigene Anteile definieren",
        ),
    ),
    SALE: (
        (
            "Unternehmensaufbereitung: Prozesse, Dokumentation, Abhängigkeiten reduzieren",
            "Unternehmensbewertung und M&A-Berater beauftragen",
            "Datenraum vorbereiten",
            "Käuferansprache und Verhandlungen",
            "Due Diligence, Kaufvertrag, Closing",
        ),
        (
            "Übergangsfrist (typisch 6-24 Monate): Sie unterstützen Käufer",
            "Garantiefrist läuft (typisch 2-3 Jahre)",
            "Earn-Out-Zahlungen erfolgen (falls vereinbart)",
            "Sie etablieren neue Lebensphase",
            "Investition des Verkaufserlöses (Vermögensberatung)",
        ),
        (
            "Alle rechtlichen und finanziellen Verpflichtungen beendet",
            "Unternehmen hat sich unter neuem Eigentümer entwickelt",
            "Sie haben neue Identität jenseits Unternehmerrolle gefunden",
            "Ggf. neue berufliche Projekte (Beratung, Aufsichtsrat, Ehrenamt)",
            "Legacy: Wie wird Ihr Lebenswerk erinnert?",
        ),
    ),
})


SUCCESS_FACTORS = ContentTable(
    common=(
        Advice("Frühzeitig beginnen: 5-10 Jahre Vorlauf sind ideal"),
        Advice("Professionelle Beratung: Fachanwalt, Steuerberater, ggf. M&A-Berater"),
        Advice("Offene Kommunikation: Mit Familie, Mitarbeitern, Kunden"),
        Advice("Emotionale Vorbereitung: Eigene neue Lebensphase planen"),
        Advice("Notfallplan: Was passiert bei ungeplanten Ereignissen?"),
    ),
    by_scenario={
        FAMILY: (
            Advice("Intrinsische Motivation des Nachfolgers sicherstellen"),
            Advice("Geschwister-Ausgleich fair und transparent regeln"),
            Advice("Schrittweise Einarbeitung über mehrere Jahre"),
            Advice("Klare Rollenverteilung und Abgrenzung"),
        ),
        MBO: (
            Advice("Realistische Unternehmensbewertung"),
            Advice("Kreative Finanzierungsmodelle (Earn-Out, Verkäuferdarlehen)"),
            Advice("Übergangszeit einplanen (Sie als Berater)"),
            Advice("Vertrauen in die Nachfolger"),
        ),
        EXTERNAL: (
            Advice("Kulturelle Passung sorgfältig prüfen"),
            Advice("Klare Governance und Kontrollmechanismen"),
            Advice("Starkes Führungsteam aufbauen"),
            Advice("Flexibilität bei Fehlentscheidung"),
        ),
        SALE: (
            Advice("Unternehmensaufbereitung: Unabhängigkeit vom Inhaber"),
            Advice("Professioneller M&A-Prozess"),
            Advice("Realistische Preisvorstellungen"),
            Advice("Gründliche Due Diligence vorbereiten"),
            Advice("Vertraulichkeit wahren bis zur richtigen Zeit"),
        ),
    }
)


STATISTICS = ContentTable(
    common=(
        Advice("59% der Senior-Unternehmer finden keinen passenden Nachfolger (IHK-Studie 2024)"),
        Advice("48% planen 2024 einen externen Verkauf (M&A)"),
        Advice("34% übergeben innerhalb der Familie"),
        Advice("19% übergeben an Mitarbeiter (Management-Buy-Out)"),
    ),
    by_scenario={
        FAMILY: (
            Advice("Freibetrag Schenkung/Erbschaft: 400.000 € pro Kind alle 10 Jahre"),
            Advice("Verschonungsregelungen können bis zu 100% Steuerbefreiung ermöglichen"),
            Advice("36% klagen über unzureichend vorbereitete Nachfolger"),
        ),
        MBO: (
            Advice("48% der Nachfolger haben Finanzierungsschwierigkeiten"),
            Advice("34% scheitern an überzogenen Kaufpreisvorstellungen"),
            Advice("Durchschnittliche Finanzierung: 30% Eigenkapital, 50% Bank, 20% Verkäuferdarlehen"),
        ),
        EXTERNAL: (
            Advice("Externe Geschäftsführer bleiben durchschnittlich 3-5 Jahre"),
            Advice("Erfolgsquote bei kultureller Passung: 70% vs. 30% ohne"),
        ),
        SALE: (
            Advice("Durchschnittliche Verkaufsdauer: 6-12 Monate vom ersten Kontakt bis Closing"),
            Advice("Übliche Multiplikatoren: 4-8x EBIT je nach Branche und Größe"),
            Advice("Due Diligence deckt in 60% der Fälle Kaufpreis-relevante Themen auf"),
        ),
    }
)


QUOTES = ContentTable(
    common=(
        Advice("'Die Grenzen zwischen Unternehmen und Privatbereich verschieben sich' - M&A-Berater"),
        Advice("'Gesellschaftsvertrag und Testament sollten immer aufeinander abgestimmt sein' - Fachanwalt"),
        Advice("'Frühzeitige Planung kann Hunderttausende Euro sparen' - Steuerberater"),
    ),
    by_scenario={
        FAMILY: (
            Advice("'Es ist wie Familie - und das macht es nicht unbedingt leichter' - Familienunternehmens-Berater"),
            Advice("'Es geht uns ums Wollen. Wer nicht überzeugt ist, den sollte man nicht in die Chefsessel der Eltern setzen' - Nachfolge-Coach"),
            Advice("'Freibeträge alle 10 Jahre nutzen - nicht erst beim Erbfall' - Steuerberater"),
        ),
        MBO: (
            Advice("'Aus den eigenen Reihen: Vertrauen als Basis' - M&A-Berater"),
            Advice("'Realistische Bewertung ist die Grundlage für erfolgreiche Finanzierung' - Unternehmensberater"),
        ),
        EXTERNAL: (
            Advice("'Frischer Wind von außen bringt neue Perspektiven' - Headhunter"),
            Advice("'Governance ist nicht Misstrauen, sondern professionelle Zusammenarbeit' - Rechtsanwalt"),
        ),
        SALE: (
            Advice("'Ein guter Deal erfordert realistische Bewertung und gründliche Due Diligence' - M&A-Berater"),
            Advice("'Unternehmen müssen unabhängig vom Inhaber funktionieren - sonst Bewertungsabschlag' - Private Equity Investor"),
        ),
    }
)


# Labelled facts served by the statistics endpoint; independent of any input.
MARKET_FACTS = {
    "title": "Unternehmensnachfolge in Deutschland - Fakten & Zahlen",
    "description": "Aktuelle Statistiken und Daten zur Unternehmensnachfolge basierend auf IHK-Studien und Marktanalysen",
    "facts": [
        {"label": "Senior-Unternehmer ohne Nachfolger", "value": "59%", "description": "der Senior-Unternehmer finden keinen passenden Nachfolger"},
        {"label": "Geplanter externer Verkauf", "value": "48%", "description": "planen 2024 einen externen Verkauf (M&A)"},
        {"label": "Familieninterne Übergabe", "value": "34%", "description": "übergeben innerhalb der Familie"},
        {"label": "Management-Buy-Out", "value": "19%", "description": "übergeben an Mitarbeiter (MBO)"},
        {"label": "Finanzierungsschwierigkeiten", "value": "48%", "description": "der Nachfolger haben Finanzierungsschwierigkeiten"},
        {"label": "Überzogene Kaufpreisvorstellungen", "value": "34%", "description": "scheitern an unrealistischen Preisvorstellungen"},
        {"label": "Unzureichend vorbereitet", "value": "36%", "description": "klagen über unzureichend vorbereitete Nachfolger"},
        {"label": "Anforderungen nicht erfüllt", "value": "23%", "description": "scheitern, weil Anforderungen nicht erfüllt werden"},
    ],
    "sources": [
        "IHK-Studie Unternehmensnachfolge 2024",
        "DIHK Report zur Unternehmensnachfolge",
        "Marktanalyse deutscher Mittelstand",
    ],
}
