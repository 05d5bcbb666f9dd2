"""Symptom checker: canned advice per known symptom.

Matching is exact on the submitted key. Anything not in the table gets
the generic fallback so every submitted symptom receives one line.
"""
from types import MappingProxyType
from typing import List, Sequence

FALLBACK_RECOMMENDATION = "Consult a healthcare provider."

SYMPTOM_RECOMMENDATIONS = MappingProxyType({
    "fever": "If you have a fever, drink plenty of fluids and rest. If it persists, consider seeing a doctor.",
    "headache": "Try drinking water and resting. If the headache continues, you may need medical advice.",
})


def recommend(symptoms: Sequence[str]) -> List[str]:
    return [SYMPTOM_RECOMMENDATIONS.get(s, FALLBACK_RECOMMENDATION) for s in symptoms]
