from __future__ import annotations

from typing import Final

__all__ = ["SUBJECT_NAMES", "subject_name"]

SUBJECT_NAMES: Final[dict[str, str]] = {
    "ACCOMPAGNEMENT PERSONNALISE": "Accompagnement personnalisé",
    "ALLEMAND LV1": "Allemand",
    "ALLEMAND LV2": "Allemand",
    "ANGLAIS LV1": "Anglais",
    "ANGLAIS LV2": "Anglais",
    "ARTS PLASTIQUES": "Arts plastiques",
    "EDUCATION MUSICALE": "Éducation musicale",
    "ED.PHYSIQUE & SPORT.": "EPS",
    "EDUCATION PHYSIQUE ET SPORTIVE": "EPS",
    "ENS. MORAL & CIVIQUE": "EMC",
    "ENSEIGNEMENT MORAL ET CIVIQUE": "EMC",
    "ENSEIGN.SCIENTIFIQUE": "Enseignement scientifique",
    "ESPAGNOL LV1": "Espagnol",
    "ESPAGNOL LV2": "Espagnol",
    "FRANCAIS": "Français",
    "HISTOIRE & GEOGRAPHIE": "Histoire-Géographie",
    "HISTOIRE-GEOGRAPHIE": "Histoire-Géographie",
    "HIST.-GEO.": "Histoire-Géographie",
    "ITALIEN LV2": "Italien",
    "LATIN": "Latin",
    "MATHEMATIQUES": "Mathématiques",
    "NUMERIQUE SC.INFORM.": "NSI",
    "PHILOSOPHIE": "Philosophie",
    "PHYSIQUE-CHIMIE": "Physique-Chimie",
    "SCIENCES ECO.& SOCIALES": "SES",
    "SCIENCES ECONOMIQUES & SOCIALES": "SES",
    "SCIENCES VIE & TERRE": "SVT",
    "SCIENCES DE LA VIE ET DE LA TERRE": "SVT",
    "TECHNOLOGIE": "Technologie",
    "VIE DE CLASSE": "Vie de classe",
}


def subject_name(raw: str | None) -> str:
    if not raw:
        return ""

    raw = raw.strip()
    return SUBJECT_NAMES.get(raw.upper(), raw)
