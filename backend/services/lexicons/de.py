"""German lexicon."""

DISPLAY_NAME = "Deutsch"

STRONG_VERBS: frozenset[str] = frozenset({
    "erreicht", "geleitet", "entwickelt", "implementiert", "umgesetzt",
    "verbessert", "gesteigert", "erhöht", "reduziert", "gesenkt",
    "verwaltet", "geschaffen", "gestaltet", "konzipiert", "optimiert",
    "koordiniert", "aufgebaut", "eingeführt", "übertroffen", "transformiert",
    "gestartet", "automatisiert", "verhandelt", "gewonnen", "geführt",
})

WEAK_MARKERS: frozenset[str] = frozenset({
    "verantwortlich für", "zuständig für", "gearbeitet an", "mitgearbeitet",
    "mitgewirkt", "geholfen", "geholfen bei", "mitgeholfen", "unterstützt",
    "beteiligt an", "teilgenommen", "aufgaben umfassten",
})

FILLER_WORDS: frozenset[str] = frozenset({
    "sehr", "wirklich", "eigentlich", "ziemlich", "irgendwie", "halt",
    "eben", "usw", "einfach", "quasi", "sozusagen", "ein bisschen",
})

INDUSTRY_SKILLS: dict[str, tuple[str, ...]] = {
    "tech": (
        "javascript", "python", "react", "node.js", "aws", "docker",
        "kubernetes", "api", "datenbanken", "agile", "scrum",
    ),
    "marketing": (
        "seo", "sem", "analytics", "kampagnen", "conversion", "roi", "marke",
        "soziale medien", "content", "leadgenerierung",
    ),
    "finance": (
        "finanzanalyse", "budgetierung", "prognosen", "excel", "sql",
        "risikomanagement", "compliance", "revision",
    ),
    "healthcare": (
        "patientenversorgung", "medizin", "klinisch", "elektronische patientenakte",
        "gesundheitswesen", "diagnose", "behandlung",
    ),
    "sales": (
        "crm", "leadgenerierung", "vertriebspipeline", "quote", "umsatz",
        "kundenbeziehungen", "verhandlung", "abschluss",
    ),
}

DETECTION_WORDS: frozenset[str] = frozenset({
    "der", "die", "und", "in", "den", "von", "zu", "das", "mit", "sich",
    "für", "ist", "ein", "eine", "bei",
})

SENIORITY_MARKERS: frozenset[str] = frozenset({
    "geleitet", "geführt", "leiter", "leiterin", "senior", "direktor",
    "teamleiter", "abteilungsleiter", "geschäftsführer",
})

ELISIONS: tuple[str, ...] = ()

REWRITES: tuple[tuple[str, str], ...] = (
    ("verantwortlich für", "leitete und verantwortete"),
    ("zuständig für", "verantwortete"),
    ("gearbeitet an", "entwickelt und umgesetzt"),
    ("geholfen bei", "beigetragen zu"),
    ("beteiligt an", "mitgestaltet"),
)

METRICS_PROMPT = "• Messbare Ergebnisse erzielt und Leistungsziele übertroffen"
