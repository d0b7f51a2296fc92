"""Canned sample email assembled from the respondent's style answers."""

from __future__ import annotations

from typing import Mapping

from .style_prompt import DEFAULT_COMPANY_NAME
from .style_rules import Rule, at_least, at_most, exactly, first_match, scale_value

GREETING_RULES = (
    Rule(at_most(2), "Hi Sarah,"),
    Rule(exactly(3), "Hello Sarah,"),
    Rule(at_least(4), "Dear Sarah,"),
)

WARM_BODY = """I hope this email finds you well. I'm excited to introduce you to an exceptional candidate who I believe would be a perfect fit for your Chief Technology Officer position.

Meet Michael Chen, a visionary technology leader with over 15 years of experience scaling engineering teams at high-growth companies. His track record includes leading digital transformation initiatives that resulted in 40% revenue growth and building world-class engineering organizations from the ground up.

What makes Michael particularly compelling for your role:
• Successfully scaled engineering teams from 20 to 200+ engineers
• Led the architecture and implementation of cloud-native platforms serving millions of users
• Deep expertise in AI/ML implementation and data-driven decision making
• Proven ability to align technical strategy with business objectives

Michael is currently exploring new opportunities and would be thrilled to discuss how he can contribute to your company's continued growth. His leadership style focuses on building collaborative, high-performing teams while maintaining technical excellence."""

DIRECT_BODY = """I'm writing to introduce Michael Chen for your Chief Technology Officer position. His qualifications directly align with your requirements.

Key credentials:
• 15+ years technology leadership experience
• Successfully scaled engineering teams from 20 to 200+ engineers
• Led digital transformation initiatives resulting in 40% revenue growth
• Deep expertise in cloud architecture, AI/ML, and platform development
• Proven track record building high-performing engineering organizations

Michael is actively seeking his next leadership role and is specifically interested in your CTO opportunity. He's available for an interview at your convenience."""

BALANCED_BODY = """I wanted to reach out regarding your Chief Technology Officer search. I have an outstanding candidate who I believe merits your consideration.

Michael Chen brings over 15 years of technology leadership experience, with particular strength in scaling engineering organizations and driving technical innovation. During his tenure at his current company, he's led initiatives that directly contributed to significant business growth and operational efficiency.

His background includes expertise in cloud architecture, artificial intelligence implementation, and building collaborative engineering cultures. Michael has consistently demonstrated the ability to translate complex technical concepts into business value.

I believe his experience and leadership approach would be valuable for your organization. He's expressed strong interest in learning more about your CTO opportunity."""

# Evaluated against (warmth, directness); order matters.
BODY_RULES = (
    Rule(lambda warmth, directness: warmth >= 4 and directness <= 3, WARM_BODY),
    Rule(lambda warmth, directness: directness >= 4, DIRECT_BODY),
)

CLOSINGS = {
    "direct": (
        "Please let me know when you'd like to schedule a conversation with Michael. "
        "I can coordinate calendars and provide his full portfolio."
    ),
    "benefit": (
        "I'd be happy to arrange an introduction so you can learn more about how "
        "Michael's experience could benefit your technical roadmap."
    ),
    "soft": (
        "Would you be interested in learning more about Michael's background? "
        "I'm happy to share additional details or arrange an introduction."
    ),
    "minimal": "Michael's background speaks for itself, and his portfolio is here whenever it's useful.",
}
CLOSING_FALLBACK = (
    "Michael's full portfolio is available upon request. Feel free to reach out with any questions."
)

SIGNATURE_RULES = (
    Rule(at_most(2), "Best,\nAlex Thompson\n{company}"),
    Rule(exactly(3), "Best regards,\nAlex Thompson\nSenior Partner\n{company}"),
    Rule(
        at_least(4),
        "Sincerely,\nAlex Thompson\nSenior Partner\n{company}\n"
        "(555) 123-4567\nalex.thompson@{domain}",
    ),
)


def select_greeting(formality: int) -> str:
    return first_match(GREETING_RULES, formality)


def select_body(warmth: int, directness: int) -> str:
    return first_match(BODY_RULES, warmth, directness, default=BALANCED_BODY)


def select_closing(cta_style: str | None) -> str:
    return CLOSINGS.get(cta_style or "", CLOSING_FALLBACK)


def email_domain(company_name: str) -> str:
    """Mail domain used in the signature, e.g. diamondconsultants.com."""

    return "".join(ch for ch in company_name.lower() if ch.isalnum()) + ".com"


def select_signature(formality: int, company_name: str = DEFAULT_COMPANY_NAME) -> str:
    template = first_match(SIGNATURE_RULES, formality)
    return template.format(company=company_name, domain=email_domain(company_name))


def generate_sample_email(survey_data: Mapping, company_name: str = DEFAULT_COMPANY_NAME) -> str:
    formality = scale_value(survey_data, "overall_formality")
    warmth = scale_value(survey_data, "warmth_empathy")
    directness = scale_value(survey_data, "directness")

    greeting = select_greeting(formality)
    body = select_body(warmth, directness)
    closing = select_closing(survey_data.get("cta_style"))
    signature = select_signature(formality, company_name)
    return "\n\n".join((greeting, body, closing, signature))
