"""English lexicon."""

DISPLAY_NAME = "English"

STRONG_VERBS: frozenset[str] = frozenset({
    "achieved", "accelerated", "architected", "automated", "built",
    "collaborated", "created", "decreased", "delivered", "designed",
    "developed", "directed", "drove", "engineered", "established",
    "exceeded", "expanded", "generated", "grew", "implemented",
    "improved", "increased", "initiated", "innovated", "launched",
    "led", "managed", "mentored", "negotiated", "optimized",
    "orchestrated", "pioneered", "reduced", "resolved", "scaled",
    "spearheaded", "streamlined", "transformed", "won",
})

WEAK_MARKERS: frozenset[str] = frozenset({
    "responsible for", "was responsible for", "worked on", "helped with",
    "helped", "assisted", "assisted with", "participated in", "involved in",
    "duties included", "tasks included", "was tasked with", "handled", "did",
    "tried to",
})

FILLER_WORDS: frozenset[str] = frozenset({
    "very", "really", "basically", "actually", "just", "quite", "somewhat",
    "various", "etc", "stuff", "things", "literally", "simply", "totally",
    "kind of", "sort of", "a lot",
})

INDUSTRY_SKILLS: dict[str, tuple[str, ...]] = {
    "tech": (
        "javascript", "python", "react", "node.js", "aws", "docker",
        "kubernetes", "api", "database", "agile", "scrum",
    ),
    "marketing": (
        "seo", "sem", "analytics", "campaign", "conversion", "roi", "brand",
        "social media", "content", "lead generation",
    ),
    "finance": (
        "financial analysis", "budgeting", "forecasting", "excel", "sql",
        "risk management", "compliance", "audit",
    ),
    "healthcare": (
        "patient care", "medical", "clinical", "hipaa", "emr", "healthcare",
        "diagnosis", "treatment",
    ),
    "sales": (
        "crm", "lead generation", "pipeline", "quota", "revenue",
        "client relationship", "negotiation", "closing",
    ),
}

DETECTION_WORDS: frozenset[str] = frozenset({
    "the", "and", "with", "in", "for", "of", "to", "is", "my", "on", "at",
})

SENIORITY_MARKERS: frozenset[str] = frozenset({
    "led", "managed", "director", "senior", "lead", "head of", "vp", "chief",
})

ELISIONS: tuple[str, ...] = ()

REWRITES: tuple[tuple[str, str], ...] = (
    ("responsible for", "managed and delivered"),
    ("worked on", "developed and implemented"),
    ("helped with", "contributed to"),
    ("good at", "expert in"),
    ("experienced in", "proven expertise in"),
)

METRICS_PROMPT = "• Achieved measurable results and exceeded performance targets"
