"""Spanish lexicon."""

DISPLAY_NAME = "Español"

STRONG_VERBS: frozenset[str] = frozenset({
    "logré", "logrado", "lideré", "liderado", "desarrollé", "desarrollado",
    "implementé", "implementado", "mejoré", "mejorado", "aumenté",
    "aumentado", "incrementé", "reduje", "reducido", "gestioné",
    "gestionado", "creé", "creado", "diseñé", "diseñado", "optimicé",
    "optimizado", "dirigí", "dirigido", "coordiné", "establecí",
    "entregué", "superé", "transformé", "impulsé", "lancé", "automaticé",
    "negocié", "conseguí", "alcancé",
})

WEAK_MARKERS: frozenset[str] = frozenset({
    "responsable de", "fui responsable", "trabajé en", "ayudé",
    "ayudé a", "ayudé con", "asistí", "participé en", "involucrado en",
    "encargado de", "tareas incluían", "funciones incluían", "me encargué de",
})

FILLER_WORDS: frozenset[str] = frozenset({
    "muy", "realmente", "básicamente", "bastante", "etc", "simplemente",
    "cosas", "mucho", "literalmente", "prácticamente", "un poco",
})

INDUSTRY_SKILLS: dict[str, tuple[str, ...]] = {
    "tech": (
        "javascript", "python", "react", "node.js", "aws", "docker",
        "kubernetes", "api", "bases de datos", "agile", "scrum",
    ),
    "marketing": (
        "seo", "sem", "analítica", "campañas", "conversión", "roi", "marca",
        "redes sociales", "contenidos", "generación de leads",
    ),
    "finance": (
        "análisis financiero", "presupuestos", "previsiones", "excel", "sql",
        "gestión de riesgos", "cumplimiento normativo", "auditoría",
    ),
    "healthcare": (
        "atención al paciente", "medicina", "clínica", "historia clínica electrónica",
        "salud", "diagnóstico", "tratamiento",
    ),
    "sales": (
        "crm", "generación de leads", "embudo de ventas", "cuota", "ingresos",
        "relación con clientes", "negociación", "cierre de ventas",
    ),
}

DETECTION_WORDS: frozenset[str] = frozenset({
    "el", "la", "de", "que", "y", "en", "un", "es", "se", "no", "con",
    "para", "los", "las", "del",
})

SENIORITY_MARKERS: frozenset[str] = frozenset({
    "lideré", "dirigí", "gestioné", "director", "directora", "senior",
    "jefe de", "jefa de", "gerente", "responsable de equipo",
})

ELISIONS: tuple[str, ...] = ()

REWRITES: tuple[tuple[str, str], ...] = (
    ("fui responsable de", "gestioné y entregué"),
    ("responsable de", "gestioné y entregué"),
    ("trabajé en", "desarrollé e implementé"),
    ("ayudé con", "contribuí a"),
    ("ayudé a", "contribuí a"),
    ("participé en", "colaboré activamente en"),
    ("con experiencia en", "con sólida experiencia demostrada en"),
)

METRICS_PROMPT = "• Logré resultados medibles y superé los objetivos de rendimiento"
