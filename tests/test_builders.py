"""
Presentation builder tests: display fallbacks and view shapes.
"""

import pytest

from atos.builders import (
    UNIDENTIFIED_PERSON,
    build_analysis_view,
    build_group_view,
    display_person_name,
    type_label,
)
from atos.grouping import group_and_order
from atos.types import ActType, ExtractionResponse
from conftest import make_act


@pytest.mark.parametrize("person_name", ["", "   ", "Nome não especificado"])
def test_missing_person_name_falls_back(person_name):
    assert display_person_name(make_act(person_name=person_name)) == UNIDENTIFIED_PERSON


def test_person_name_kept():
    assert display_person_name(make_act(person_name="ANA SOUZA")) == "ANA SOUZA"


@pytest.mark.parametrize(
    "act_type, label",
    [
        (ActType.EXONERATION, "Exoneração"),
        (ActType.HIRING, "Nomeação"),
        (ActType.GOVERNOR_ACT, "Decreto"),
        (ActType.OTHER, "Outro"),
    ],
)
def test_type_labels(act_type, label):
    assert type_label(act_type) == label


def test_group_view_uses_json_field_names():
    act = make_act(secretariat="", role="Equipe de Apoio", type=ActType.GOVERNOR_ACT, person_name="")
    view = build_group_view(group_and_order([act])[0])

    assert view["name"] == "SAD"
    assert view["priority"] == 1
    assert view["auto_expand"] is True
    assert view["count"] == 1

    act_view = view["acts"][0]
    assert act_view["type"] == "GOVERNOR_ACT"
    assert act_view["personName"] == ""
    assert act_view["displayName"] == UNIDENTIFIED_PERSON
    assert act_view["typeLabel"] == "Decreto"


def test_analysis_view_counts():
    acts = [make_act(secretariat="Secretaria de Saúde"), make_act(secretariat="Secretaria de Saúde")]
    response = ExtractionResponse(acts=acts, summary="Dois atos.")
    view = build_analysis_view(response, group_and_order(acts))

    assert view["summary"] == "Dois atos."
    assert view["total_acts"] == 2
    assert [(g["name"], g["count"], g["auto_expand"]) for g in view["groups"]] == [
        ("Secretaria de Saúde", 2, False)
    ]
