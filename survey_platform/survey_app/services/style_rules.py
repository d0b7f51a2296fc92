"""Survey option tables and the threshold rules used to turn answers into text.

Every scale dimension is a row of data: the five labels shown for values 1-5
and an ordered list of ``Rule`` objects. Rules are evaluated top-to-bottom and
the first matching predicate wins, so the tables can be read (and tested)
without following any branching code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

SCALE_MIN = 1
SCALE_MAX = 5
SCALE_DEFAULT = 3

DEFAULT_AUDIENCE_CONTEXT = "Senior executives and business leaders in technology companies"
DEFAULT_INDUSTRY = "Executive recruiting and talent acquisition"

STRUCTURAL_OPTIONS = (
    "Short paragraphs",
    "Bullet points or numbered lists",
    "Subheadings to break up text",
    "Bold text for emphasis on key phrases",
    "Occasional emojis for tone/rhythm (if appropriate for formality)",
    '"Case for / Case against" or "Pros / Cons" structure for analysis',
)

# value -> (label, description)
CTA_OPTIONS = {
    "soft": (
        "Soft & Inviting",
        'Encourages action without pressure (e.g., "Would you like to learn more?").',
    ),
    "direct": (
        "Clear & Direct",
        'Explicitly states the desired action (e.g., "Click here to proceed.").',
    ),
    "benefit": (
        "Benefit-Oriented",
        'Highlights the value of taking the action (e.g., "Sign up now to get X benefit.").',
    ),
    "minimal": (
        "Minimal/Contextual",
        "CTAs should be infrequent or very subtly integrated.",
    ),
}
CTA_STYLES = tuple(CTA_OPTIONS)

# sample type -> (entry id, entry title)
SAMPLE_SLOTS = {
    "email": ("email-samples", "Email Samples"),
    "linkedin": ("linkedin-samples", "LinkedIn Posts"),
    "article": ("article-samples", "Article Samples"),
}
SAMPLE_TYPES = tuple(SAMPLE_SLOTS)


@dataclass(frozen=True)
class Rule:
    predicate: Callable[..., bool]
    text: str

    def matches(self, *values: int) -> bool:
        return bool(self.predicate(*values))


def first_match(rules: Sequence[Rule], *values: int, default: str | None = None) -> str:
    """Return the text of the first rule whose predicate accepts ``values``."""

    for rule in rules:
        if rule.matches(*values):
            return rule.text
    if default is None:
        raise LookupError(f"No rule matched {values!r}")
    return default


def at_most(limit: int) -> Callable[[int], bool]:
    return lambda value: value <= limit


def exactly(target: int) -> Callable[[int], bool]:
    return lambda value: value == target


def at_least(limit: int) -> Callable[[int], bool]:
    return lambda value: value >= limit


def low_mid_high(low: str, mid: str, high: str) -> tuple[Rule, ...]:
    """Three-way split used by every scale: <=2, ==3, >=4."""

    return (
        Rule(at_most(2), low),
        Rule(exactly(3), mid),
        Rule(at_least(4), high),
    )


@dataclass(frozen=True)
class ScaleDimension:
    key: str
    wire_key: str
    heading: str
    labels: tuple[str, str, str, str, str]
    rules: tuple[Rule, ...]
    title: str
    question: str
    low_anchor: str
    high_anchor: str

    def label(self, value: int) -> str:
        return self.labels[value - 1]

    def guidance(self, value: int) -> str:
        return first_match(self.rules, value)


SCALE_DIMENSIONS: tuple[ScaleDimension, ...] = (
    ScaleDimension(
        key="overall_formality",
        wire_key="overallFormality",
        heading="Overall Formality Level",
        labels=("Very Casual", "Casual", "Moderate", "Formal", "Very Formal"),
        rules=low_mid_high(
            "Use conversational language, contractions, and approachable tone",
            "Balance professional language with accessible communication",
            "Maintain formal language, proper grammar, and professional tone throughout",
        ),
        title="Overall Formality",
        question="How formal or informal do you want your writing style to be?",
        low_anchor="Informal & Casual",
        high_anchor="Very Formal & Professional",
    ),
    ScaleDimension(
        key="content_pace",
        wire_key="contentPace",
        heading="Content Pace & Density",
        labels=("Very Slow", "Slow", "Moderate", "Fast", "Very Fast"),
        rules=low_mid_high(
            "Take time to explain concepts thoroughly, use detailed examples, and provide comprehensive context",
            "Balance detail with efficiency, include necessary context without over-explaining",
            "Get to the point quickly, use concise language, and focus on key information",
        ),
        title="Content Pace & Density",
        question=(
            "How would you like the information you are trying to convey to be presented "
            "in terms of pacing and density?"
        ),
        low_anchor="Quick & Skimmable",
        high_anchor="Detailed & Thorough",
    ),
    ScaleDimension(
        key="industry_jargon",
        wire_key="industryJargon",
        heading="Industry Jargon Usage",
        labels=("None", "Minimal", "Moderate", "Frequent", "Heavy"),
        rules=low_mid_high(
            "Avoid technical terms, explain any necessary industry concepts in plain language",
            "Use industry terms when appropriate but ensure clarity for broader audiences",
            "Freely use relevant industry terminology and assume familiarity with recruiting/business concepts",
        ),
        title="Use of Industry Jargon",
        question=(
            "To what extent do you usually use industry-specific terminology or jargon "
            "in social posts or emails?"
        ),
        low_anchor="Avoid Jargon Entirely",
        high_anchor="Use Freely",
    ),
    ScaleDimension(
        key="warmth_empathy",
        wire_key="warmthEmpathy",
        heading="Warmth & Empathy",
        labels=("Very Direct", "Direct", "Balanced", "Warm", "Very Warm"),
        rules=low_mid_high(
            "Focus on facts and outcomes with minimal emotional language",
            "Include appropriate personal touches while maintaining professionalism",
            "Show genuine care for recipients, acknowledge challenges, and use empathetic language",
        ),
        title="Tone: Warmth & Empathy",
        question="How much warmth and empathy do you want to convey in your communications?",
        low_anchor="Purely Objective & Factual",
        high_anchor="Warm, Encouraging & Empathetic",
    ),
    ScaleDimension(
        key="directness",
        wire_key="directness",
        heading="Directness Level",
        labels=("Very Indirect", "Indirect", "Balanced", "Direct", "Very Direct"),
        rules=low_mid_high(
            "Use diplomatic language, soften requests with context, and approach topics gently",
            "Be clear about expectations while remaining tactful",
            "State requirements and expectations clearly and directly",
        ),
        title="Approach: Directness of Communication",
        question=(
            "How direct or indirect are you usually when providing information, advice, "
            "or calls to action?"
        ),
        low_anchor="Subtle & Indirect (Implies or suggests)",
        high_anchor="Clear & Explicit (States information plainly)",
    ),
    ScaleDimension(
        key="authority_balance",
        wire_key="authorityBalance",
        heading="Authority & Confidence",
        labels=("Very Humble", "Humble", "Balanced", "Confident", "Very Confident"),
        rules=low_mid_high(
            "Use collaborative language, acknowledge limitations, and invite input from others",
            "Balance expertise with openness to feedback",
            "Position yourself as the expert, provide definitive guidance, and demonstrate deep knowledge",
        ),
        title="Balancing Authority with Approachability",
        question=(
            "How do you normally balance sounding authoritative versus approachable "
            "when speaking with a candidate?"
        ),
        low_anchor="Primarily Authoritative & Expert",
        high_anchor="Primarily Relatable & Peer-Like",
    ),
)

DIMENSIONS_BY_KEY = {dimension.key: dimension for dimension in SCALE_DIMENSIONS}


def scale_value(survey_data, key: str) -> int:
    """Read a scale answer, treating absence as the schema default."""

    value = survey_data.get(key)
    return SCALE_DEFAULT if value is None else int(value)
