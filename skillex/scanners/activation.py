"""Activation classifier - guesses how reliably a description triggers a skill.

Directive descriptions ("ALWAYS invoke", "MUST use") are auto-activated far
more reliably than passive ones ("Use when", "Helps with").
"""

from ..models import ActivationStyle

DIRECTIVE_KEYWORDS = ("ALWAYS ", "MUST ", "NEVER ", "DO NOT ")
PASSIVE_KEYWORDS = ("USE WHEN", "HELPS ", "CAN BE USED", "USEFUL FOR", "ASSISTS ")

_LABELS = {
    ActivationStyle.DIRECTIVE: "directive",
    ActivationStyle.PASSIVE: "passive",
    ActivationStyle.NEUTRAL: "unknown",
}

_ADVICE = {
    ActivationStyle.DIRECTIVE: "Claude will almost always auto-activate this skill",
    ActivationStyle.PASSIVE: "Claude may skip this skill, use MUST/ALWAYS/NEVER",
    ActivationStyle.NEUTRAL: "No activation signals, add directive language",
}


def assess_activation_style(description: str) -> ActivationStyle:
    """Classify a description; directive keywords win over passive ones."""
    upper = description.strip().upper()
    if any(keyword in upper for keyword in DIRECTIVE_KEYWORDS):
        return ActivationStyle.DIRECTIVE
    if any(keyword in upper for keyword in PASSIVE_KEYWORDS):
        return ActivationStyle.PASSIVE
    return ActivationStyle.NEUTRAL


def activation_label(style: ActivationStyle) -> str:
    return _LABELS[style]


def activation_advice(style: ActivationStyle) -> str:
    """One-line explanation of what the activation style means."""
    return _ADVICE[style]
