"""Tests for the multi-field resolver (condicion / requisitos / cuando / textoAplicacion)."""

import logging
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from benefit_days import (
    BenefitDayInfo,
    DayAvailability,
    contains_day_keywords,
    has_any_day_available,
    merge_day_availability,
    parse_day_availability_from_benefit,
    parse_multi_field_day_availability,
)
from benefit_days.parser import multi_field

WEEKDAYS = {"monday", "tuesday", "wednesday", "thursday", "friday"}
WEEKEND = {"saturday", "sunday"}


def _resolve(**fields):
    return parse_multi_field_day_availability(BenefitDayInfo(**fields))


# ──────────────────────────── Merge rules ────────────────────────────


class TestMergeDayAvailability:
    def test_same_field_is_union_even_for_restrictions(self):
        merged = merge_day_availability(
            DayAvailability.from_days(["saturday"]),
            DayAvailability.from_days(["sunday"]),
            True,
            True,
            same_field=True,
        )
        assert merged.days == WEEKEND

    def test_restriction_wins_over_plain(self):
        merged = merge_day_availability(
            DayAvailability.every_day(),
            DayAvailability.from_days(WEEKEND),
            False,
            True,
        )
        assert merged.days == WEEKEND
        assert merged.all_days is False

    def test_primary_restriction_wins(self):
        merged = merge_day_availability(
            DayAvailability.from_days(["tuesday"]),
            DayAvailability.every_day(),
            True,
            False,
        )
        assert merged.days == {"tuesday"}

    def test_plain_statements_union(self):
        merged = merge_day_availability(
            DayAvailability.from_days(["monday"]),
            DayAvailability.from_days(["tuesday"]),
        )
        assert merged.days == {"monday", "tuesday"}

    def test_two_restrictions_intersect(self):
        merged = merge_day_availability(
            DayAvailability.from_days(["friday", "saturday"]),
            DayAvailability.from_days(["saturday", "sunday"]),
            True,
            True,
        )
        assert merged.days == {"saturday"}

    def test_union_with_all_days_keeps_flag(self):
        merged = merge_day_availability(
            DayAvailability.every_day(), DayAvailability.from_days(["monday"])
        )
        assert merged.all_days is True

    def test_custom_text_preserved(self):
        merged = merge_day_availability(
            DayAvailability.unmatched("nota"),
            DayAvailability.from_days(WEEKEND),
            False,
            True,
        )
        assert merged.days == WEEKEND
        assert merged.custom_text == "nota"

    def test_inputs_not_mutated(self):
        primary = DayAvailability.from_days(["monday"])
        secondary = DayAvailability.from_days(["tuesday"])
        merge_day_availability(primary, secondary)
        assert primary.days == {"monday"}
        assert secondary.days == {"tuesday"}


class TestContainsDayKeywords:
    @pytest.mark.parametrize(
        "text", ["fines de semana", "todos los martes", "días hábiles", "SÁBADOS"]
    )
    def test_positive(self, text):
        assert contains_day_keywords(text) is True

    @pytest.mark.parametrize(
        "text", ["descuento del 20%", "tarjeta vigente", "", None, 42]
    )
    def test_negative(self, text):
        assert contains_day_keywords(text) is False


# ──────────────────────────── Single field ────────────────────────────


class TestSingleField:
    def test_condicion_only(self):
        result = _resolve(condicion="válido solo fines de semana")
        assert result.days == WEEKEND

    def test_cuando_only(self):
        assert _resolve(cuando="lunes a viernes").days == WEEKDAYS

    def test_requisitos_only(self):
        result = _resolve(
            requisitos=["aplicable únicamente sábados y domingos", "mínimo $1000"]
        )
        assert result.days == WEEKEND

    def test_texto_aplicacion_only(self):
        result = _resolve(textoAplicacion="válido todos los días hábiles")
        assert result.days == WEEKDAYS

    def test_matches_single_field_parser(self):
        result = _resolve(cuando="lunes a viernes")
        assert result == DayAvailability.from_days(WEEKDAYS)


# ──────────────────────────── Priority ────────────────────────────


class TestFieldPriority:
    def test_condicion_overrides_cuando(self):
        result = _resolve(condicion="válido solo fines de semana", cuando="todos los días")
        assert result.days == WEEKEND
        assert result.all_days is False

    def test_requisitos_override_cuando(self):
        result = _resolve(
            requisitos=["aplicable únicamente días hábiles"], cuando="fines de semana"
        )
        assert result.days == WEEKDAYS

    def test_condicion_overrides_requisitos(self):
        result = _resolve(
            condicion="válido solo sábados", requisitos=["aplicable todos los días"]
        )
        assert result.days == {"saturday"}

    def test_lower_fields_used_when_higher_have_no_days(self):
        result = _resolve(
            condicion="mínimo $500", requisitos=["tarjeta activa"], cuando="lunes a viernes"
        )
        assert result.days == WEEKDAYS

    def test_todos_los_martes_over_todos_los_dias(self):
        result = _resolve(condicion="todos los martes", cuando="todos los días")
        assert result.days == {"tuesday"}
        assert result.all_days is False


# ──────────────────────────── Combinations ────────────────────────────


class TestCombinations:
    def test_compatible_fields(self):
        result = _resolve(cuando="días hábiles", requisitos=["válido lunes a viernes"])
        assert result.days == WEEKDAYS

    def test_same_field_union(self):
        result = _resolve(requisitos=["válido lunes y martes", "aplicable miércoles"])
        assert result.monday is True
        assert result.tuesday is True
        assert result.wednesday is True
        assert result.thursday is False

    def test_requisitos_union_ignores_noise(self):
        result = _resolve(
            requisitos=["válido lunes y martes", "aplicable miércoles", "no relacionado"]
        )
        assert result.days == {"monday", "tuesday", "wednesday"}

    def test_plain_fields_union(self):
        result = _resolve(requisitos=["válido lunes"], cuando="válido martes")
        assert result.days == {"monday", "tuesday"}

    def test_conflicting_restrictions_intersect_to_nothing(self):
        result = _resolve(
            condicion="válido solo sábado", requisitos=["aplicable únicamente domingo"]
        )
        assert result is not None
        assert result.days == frozenset()
        assert has_any_day_available(result) is False

    def test_overlapping_restrictions_intersect(self):
        result = _resolve(
            condicion="válido solo fines de semana",
            requisitos=["aplicable únicamente sábados"],
        )
        assert result.days == {"saturday"}

    def test_negation_overrides_all_days(self):
        result = _resolve(requisitos=["excepto domingos"], cuando="todos los días")
        assert result.sunday is False
        assert result.monday is True
        assert result.saturday is True

    def test_restriction_marker_without_days_is_skipped(self):
        result = _resolve(condicion="aplicable únicamente", cuando="fines de semana")
        assert result.days == WEEKEND

    def test_restriction_beats_lower_confidence_field(self):
        result = _resolve(condicion="válido solo fines de semana", cuando="sábados")
        assert result.days == WEEKEND

    def test_complex_requisitos(self):
        result = _resolve(
            requisitos=[
                "válido solo lunes y martes",
                "compra mínima $500",
                "aplicable miércoles a viernes",
                "tarjeta vigente",
            ],
            cuando="todos los días",
        )
        assert result.days == WEEKDAYS

    def test_non_string_requisitos_are_ignored(self):
        result = _resolve(
            requisitos=["válido sábados", None, None, "", "domingos"],
            cuando="todos los días",
        )
        assert result.saturday is True
        assert result.sunday is True


# ──────────────────────────── Confidence threshold ────────────────────────────


class TestLowConfidenceSkip:
    LONG_CUANDO = "todos los días " + "en locales adheridos de la ciudad " * 3

    def test_weak_candidate_is_skipped(self):
        result = _resolve(condicion="lunes", cuando=self.LONG_CUANDO)
        assert result.days == {"monday"}

    def test_ratio_is_configurable(self, monkeypatch):
        monkeypatch.setattr(multi_field.config, "LOW_CONFIDENCE_RATIO", 0.0)
        result = _resolve(condicion="lunes", cuando=self.LONG_CUANDO)
        assert result.all_days is True


# ──────────────────────────── Pre-filter ────────────────────────────


class TestKeywordPrefilter:
    def test_fields_without_keywords_are_not_parsed(self):
        real = multi_field.parse_day_availability_enhanced
        with patch.object(
            multi_field, "parse_day_availability_enhanced", side_effect=real
        ) as parser:
            result = _resolve(
                condicion="descuento del 20%",
                requisitos=["compra mínima $100", "tarjeta vigente"],
                cuando="fines de semana",
                textoAplicacion="presentar tarjeta en caja",
            )
        assert result.days == WEEKEND
        parser.assert_called_once_with("fines de semana")

    def test_prefilter_can_be_disabled(self, monkeypatch):
        monkeypatch.setattr(multi_field.config, "DAY_KEYWORD_PREFILTER", False)
        real = multi_field.parse_day_availability_enhanced
        with patch.object(
            multi_field, "parse_day_availability_enhanced", side_effect=real
        ) as parser:
            _resolve(condicion="descuento del 20%", cuando="fines de semana")
        assert parser.call_count == 2


# ──────────────────────────── Error handling ────────────────────────────


class TestErrorHandling:
    def test_empty_info(self):
        assert parse_multi_field_day_availability(BenefitDayInfo()) is None

    def test_no_day_information(self):
        result = _resolve(
            condicion="descuento 15%",
            requisitos=["compra mínima"],
            textoAplicacion="presentar documento",
        )
        assert result is None

    def test_malformed_fields(self):
        result = parse_multi_field_day_availability(
            {
                "condicion": None,
                "requisitos": "not an array",
                "cuando": None,
                "textoAplicacion": 123,
            }
        )
        assert result is None

    def test_accepts_plain_dict(self):
        result = parse_multi_field_day_availability({"cuando": "lunes a viernes"})
        assert result.days == WEEKDAYS

    def test_none_info(self):
        assert parse_multi_field_day_availability(None) is None

    def test_failing_field_is_dropped(self, caplog):
        real = multi_field.parse_day_availability_enhanced

        def flaky(text):
            if text == "lunes a viernes":
                raise RuntimeError("boom")
            return real(text)

        with patch.object(multi_field, "parse_day_availability_enhanced", side_effect=flaky):
            with caplog.at_level(logging.WARNING, logger="benefit_days.resolver"):
                result = _resolve(condicion="martes", cuando="lunes a viernes")

        assert result.days == {"tuesday"}
        assert "cuando" in caplog.text

    def test_failing_requisito_is_dropped(self, caplog):
        real = multi_field.parse_day_availability_enhanced

        def flaky(text):
            if text == "martes":
                raise RuntimeError("boom")
            return real(text)

        with patch.object(multi_field, "parse_day_availability_enhanced", side_effect=flaky):
            with caplog.at_level(logging.WARNING, logger="benefit_days.resolver"):
                result = _resolve(requisitos=["lunes", "martes", "jueves"])

        assert result.days == {"monday", "thursday"}
        assert "Requisito descartado" in caplog.text

    def test_failing_merge_keeps_accumulated(self, caplog):
        with patch.object(multi_field, "_merge_results", side_effect=RuntimeError("boom")):
            with caplog.at_level(logging.WARNING, logger="benefit_days.resolver"):
                result = _resolve(condicion="lunes", cuando="martes")

        assert result.days == {"monday"}
        assert "cuando" in caplog.text

    def test_total_failure_falls_back_to_cuando(self, caplog):
        with patch.object(
            multi_field, "_collect_candidates", side_effect=RuntimeError("boom")
        ):
            with caplog.at_level(logging.WARNING, logger="benefit_days.resolver"):
                result = _resolve(condicion="válido solo lunes", cuando="fines de semana")

        assert result.days == WEEKEND
        assert "boom" in caplog.text

    def test_total_failure_without_cuando(self):
        with patch.object(
            multi_field, "_collect_candidates", side_effect=RuntimeError("boom")
        ):
            assert _resolve(condicion="válido solo lunes") is None


# ──────────────────────────── From benefit ────────────────────────────


class TestFromBenefit:
    def test_complete_benefit(self):
        benefit = {
            "bankName": "Test Bank",
            "cardName": "Test Card",
            "benefit": "Test Benefit",
            "rewardRate": "10%",
            "condicion": "válido solo fines de semana",
            "cuando": "todos los días",
            "requisitos": ["tarjeta activa"],
            "textoAplicacion": "presentar en caja",
        }
        result = parse_day_availability_from_benefit(benefit)
        assert result.days == WEEKEND

    def test_only_cuando(self):
        result = parse_day_availability_from_benefit(
            {"bankName": "Test Bank", "cuando": "lunes a viernes"}
        )
        assert result.days == WEEKDAYS

    def test_without_day_information(self):
        assert parse_day_availability_from_benefit({"rewardRate": "5%"}) is None

    @pytest.mark.parametrize("benefit", [None, "cuando", 42, []])
    def test_not_a_benefit(self, benefit):
        assert parse_day_availability_from_benefit(benefit) is None

    def test_malformed_fields_are_ignored(self):
        result = parse_day_availability_from_benefit(
            {"cuando": "fines de semana", "condicion": None, "requisitos": "malformed"}
        )
        assert result.days == WEEKEND

    def test_attribute_object(self):
        benefit = SimpleNamespace(
            condicion="todos los martes", cuando="todos los días", requisitos=None
        )
        assert parse_day_availability_from_benefit(benefit).days == {"tuesday"}

    def test_broken_object_falls_back_to_cuando(self, caplog):
        class BrokenBenefit:
            cuando = "fines de semana"

            @property
            def condicion(self):
                raise RuntimeError("campo roto")

        with caplog.at_level(logging.WARNING, logger="benefit_days.resolver"):
            result = parse_day_availability_from_benefit(BrokenBenefit())

        assert result.days == WEEKEND
        assert "campo roto" in caplog.text

    def test_todos_los_martes_in_requisitos(self):
        result = parse_day_availability_from_benefit(
            {"requisitos": ["todos los martes", "compra mínima $100"]}
        )
        assert result.days == {"tuesday"}
        assert result.all_days is False
