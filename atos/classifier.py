# atos/classifier.py
# -*- coding: utf-8 -*-
"""
Canonical organization bucket for each extracted act.

Role
----
- classify(act):
    Rule-based: decides which bucket (SAD / Atos da Governadora /
    Outros Órgãos / verbatim organization name) an act is grouped under.
- matched_rule(act):
    Same decision, but also reports which rule fired (logging / tests).

The AI extraction step regularly mislabels the organization, so support-team
and procurement-agent roles are forced into SAD before the organization name is
even looked at.

Notes
----
- Rules are evaluated in order, first match wins.
- Canonical names are fixed points: an act whose secretariat is already
  "SAD", "Atos da Governadora" or "Outros Órgãos" stays in that bucket.
- Names that differ only by accents / case / whitespace are NOT merged.
"""

from __future__ import annotations

from typing import Callable, List, NamedTuple, Tuple

from .types import Act
from .utils_text import contains_any, normalize_lower

# Canonical bucket names
SAD = "SAD"
GOVERNOR_ACTS = "Atos da Governadora"
OTHER_BODIES = "Outros Órgãos"

# Sentinel the AI uses when it could not read the organization
UNSPECIFIED_NAME = "Nome não especificado"

# ------------------------------------------------------------
# 1. Keyword lists
# ------------------------------------------------------------

# Roles that always belong to SAD, whatever organization was reported
SUPPORT_ROLE_KEYWORDS = [
    "equipe de apoio",
    "agente de contratação",
    "agente de contratacao",
]

ADMINISTRATION_KEYWORDS = [
    "administração",
]

ADMINISTRATION_FULL_NAME = "secretaria de administração"

GOVERNOR_KEYWORDS = [
    "governadora",
    "governo",
]


# ------------------------------------------------------------
# 2. Rule predicates
#    (act, working_name) -> bool
# ------------------------------------------------------------

def working_name(act: Act) -> str:
    """Organization name trimmed of surrounding whitespace (may be empty)."""
    return (act.secretariat or "").strip()


def _is_support_role(act: Act, name: str) -> bool:
    role = normalize_lower(act.role)
    desc = normalize_lower(act.description)
    return contains_any(role, SUPPORT_ROLE_KEYWORDS) or contains_any(desc, SUPPORT_ROLE_KEYWORDS)


def _is_administration(act: Act, name: str) -> bool:
    lowered = name.lower()
    return contains_any(lowered, ADMINISTRATION_KEYWORDS) or lowered == ADMINISTRATION_FULL_NAME


def _is_governor(act: Act, name: str) -> bool:
    return contains_any(name.lower(), GOVERNOR_KEYWORDS)


def _is_unspecified(act: Act, name: str) -> bool:
    return name == UNSPECIFIED_NAME or name == ""


class Rule(NamedTuple):
    name: str
    matches: Callable[[Act, str], bool]
    bucket: str


RULES: List[Rule] = [
    Rule("support_role", _is_support_role, SAD),
    Rule("administration", _is_administration, SAD),
    Rule("governor", _is_governor, GOVERNOR_ACTS),
    Rule("unspecified", _is_unspecified, OTHER_BODIES),
]

# Returned by matched_rule when no rule fired and the name is used as-is
VERBATIM = "verbatim"


# ------------------------------------------------------------
# 3. Main classification
# ------------------------------------------------------------

def matched_rule(act: Act) -> Tuple[str, str]:
    """Return (rule_name, bucket) for an act.

    Precedence
    ----------
    1) 'equipe de apoio' / 'agente de contratação' in role or description => SAD
    2) organization mentions 'administração'                               => SAD
    3) organization mentions 'governadora' / 'governo'                     => Atos da Governadora
    4) blank or 'Nome não especificado'                                    => Outros Órgãos
    5) anything else                                                       => trimmed name, verbatim
    """
    name = working_name(act)

    for rule in RULES:
        if rule.matches(act, name):
            return rule.name, rule.bucket

    return VERBATIM, name


def classify(act: Act) -> str:
    """Canonical bucket name for an act. Pure; same act always gives the same bucket."""
    return matched_rule(act)[1]
