"""
Canonical bucket classification tests.

Verifies that classify:
1. Forces support-team / procurement-agent roles into SAD whatever the organization says
2. Normalizes administration and governor organizations
3. Sends blank / unspecified organizations to 'Outros Órgãos'
4. Keeps any other organization verbatim (trimmed), without merging look-alikes
5. Treats canonical names as fixed points
"""

import pytest

from atos.classifier import (
    GOVERNOR_ACTS,
    OTHER_BODIES,
    SAD,
    UNSPECIFIED_NAME,
    VERBATIM,
    classify,
    matched_rule,
)
from atos.types import Act, ActType
from conftest import make_act


class TestSupportRoleOverride:

    @pytest.mark.parametrize("secretariat", ["", "Secretaria de Saúde", "Secretaria de Governo", "   "])
    def test_equipe_de_apoio_in_role(self, secretariat):
        act = make_act(secretariat=secretariat, role="Membro da Equipe de Apoio")
        assert classify(act) == SAD

    def test_equipe_de_apoio_in_description(self):
        act = make_act(
            secretariat="Secretaria de Saúde",
            role="Assessor",
            description="Designa para compor a EQUIPE DE APOIO do pregão eletrônico.",
        )
        assert classify(act) == SAD

    @pytest.mark.parametrize("role", ["Agente de Contratação", "AGENTE DE CONTRATACAO", "agente de contratação substituto"])
    def test_agente_de_contratacao_variants(self, role):
        act = make_act(secretariat="Secretaria de Educação", role=role)
        assert classify(act) == SAD

    def test_unaccented_agent_in_description(self):
        act = make_act(secretariat="Secretaria de Esportes", description="Nomeia agente de contratacao.")
        assert matched_rule(act) == ("support_role", SAD)

    def test_override_wins_over_governor(self):
        act = make_act(secretariat="Gabinete da Governadora", role="Agente de Contratação")
        assert matched_rule(act)[0] == "support_role"


class TestOrganizationNormalization:

    @pytest.mark.parametrize(
        "secretariat",
        ["Secretaria de Administração", "SECRETARIA DE ADMINISTRAÇÃO", "  Secretaria da Administração Penitenciária "],
    )
    def test_administration_goes_to_sad(self, secretariat):
        assert classify(make_act(secretariat=secretariat, role="Diretor")) == SAD

    @pytest.mark.parametrize(
        "secretariat",
        ["Gabinete da Governadora", "Secretaria de Governo", "GOVERNO DO ESTADO"],
    )
    def test_governor_bucket(self, secretariat):
        assert classify(make_act(secretariat=secretariat, role="Chefe de Gabinete")) == GOVERNOR_ACTS

    def test_administration_checked_before_governor(self):
        act = make_act(secretariat="Secretaria de Administração e Governo")
        assert matched_rule(act) == ("administration", SAD)

    @pytest.mark.parametrize("secretariat", ["", "   ", "\n", UNSPECIFIED_NAME, f"  {UNSPECIFIED_NAME} "])
    def test_unspecified_goes_to_other_bodies(self, secretariat):
        assert classify(make_act(secretariat=secretariat, role="Assessor")) == OTHER_BODIES

    def test_null_organization_goes_to_other_bodies(self):
        act = Act(type=ActType.HIRING, secretariat=None, personName=None, description="Nomeia servidor.")
        assert (act.secretariat, act.person_name) == ("", "")
        assert classify(act) == OTHER_BODIES

    def test_other_organization_is_trimmed_verbatim(self):
        act = make_act(secretariat="  Secretaria de Saúde  ", role="Médico")
        assert matched_rule(act) == (VERBATIM, "Secretaria de Saúde")

    def test_look_alike_names_are_not_merged(self):
        a = make_act(secretariat="Secretaria de Saúde")
        b = make_act(secretariat="Secretaria De Saude")
        assert classify(a) != classify(b)


class TestDeterminism:

    @pytest.mark.parametrize("name", [SAD, GOVERNOR_ACTS, OTHER_BODIES])
    def test_canonical_names_are_fixed_points(self, name):
        assert classify(make_act(secretariat=name)) == name

    def test_same_act_same_bucket(self):
        act = make_act(secretariat="Secretaria de Cultura", role="Gerente")
        assert classify(act) == classify(act) == "Secretaria de Cultura"

    def test_does_not_modify_act(self):
        act = make_act(secretariat="  Secretaria de Administração ", role="Agente de Contratação")
        before = act.model_dump()
        classify(act)
        assert act.model_dump() == before
