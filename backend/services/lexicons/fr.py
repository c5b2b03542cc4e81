"""French lexicon."""

DISPLAY_NAME = "Français"

STRONG_VERBS: frozenset[str] = frozenset({
    "réalisé", "dirigé", "développé", "mis en œuvre", "implémenté",
    "amélioré", "augmenté", "réduit", "géré", "créé", "conçu", "optimisé",
    "piloté", "coordonné", "établi", "livré", "dépassé", "transformé",
    "lancé", "automatisé", "négocié", "obtenu", "atteint", "encadré",
    "accompli",
})

WEAK_MARKERS: frozenset[str] = frozenset({
    "responsable de", "travaillé sur", "aidé", "aidé à", "assisté",
    "participé à", "impliqué dans", "chargé de", "tâches comprenaient",
    "fonctions comprenaient", "je me suis occupé de",
})

FILLER_WORDS: frozenset[str] = frozenset({
    "très", "vraiment", "plutôt", "assez", "etc", "simplement",
    "beaucoup", "littéralement", "pratiquement", "en fait", "un peu",
})

INDUSTRY_SKILLS: dict[str, tuple[str, ...]] = {
    "tech": (
        "javascript", "python", "react", "node.js", "aws", "docker",
        "kubernetes", "api", "bases de données", "agile", "scrum",
    ),
    "marketing": (
        "seo", "sem", "analytique", "campagnes", "conversion", "roi", "marque",
        "réseaux sociaux", "contenu", "génération de leads",
    ),
    "finance": (
        "analyse financière", "budgétisation", "prévisions", "excel", "sql",
        "gestion des risques", "conformité", "audit",
    ),
    "healthcare": (
        "soins aux patients", "médical", "clinique", "dossier patient informatisé",
        "santé", "diagnostic", "traitement",
    ),
    "sales": (
        "crm", "génération de leads", "pipeline commercial", "quota",
        "chiffre d'affaires", "relation client", "négociation", "closing",
    ),
}

DETECTION_WORDS: frozenset[str] = frozenset({
    "le", "la", "de", "que", "et", "en", "un", "est", "se", "ne", "les",
    "des", "du", "avec", "pour", "dans",
})

SENIORITY_MARKERS: frozenset[str] = frozenset({
    "dirigé", "géré", "piloté", "directeur", "directrice", "senior",
    "chef de projet", "responsable d'équipe", "manager",
})

ELISIONS: tuple[str, ...] = ("qu'", "l'", "d'", "j'", "n'", "s'", "c'", "m'", "t'")

REWRITES: tuple[tuple[str, str], ...] = (
    ("responsable de", "pilotage et livraison de"),
    ("travaillé sur", "développé et mis en œuvre"),
    ("aidé à", "contribué à"),
    ("participé à", "contribué activement à"),
    ("chargé de", "piloté"),
)

METRICS_PROMPT = "• Obtenu des résultats mesurables et dépassé les objectifs de performance"
