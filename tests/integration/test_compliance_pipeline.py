"""
Integration tests for the payload -> engine -> result pipeline.

Runs weigh-ticket documents through parsing, jurisdiction lookup and
evaluation, and checks the serialized results.
"""

import json

import pytest

from weighstation.compliance import (
    ComplianceEngine,
    ComplianceStatus,
    ViolationType,
    check_state_compliance,
    parse_ticket,
)


TICKETS = {
    "legal_semi": {
        "type": "5-Axle Semi",
        "axles": {
            "axleCount": 5,
            "axleSpacing": [18, 4.25, 33, 4.25],
            "axleWeights": ["12,000 lbs", "17,000 lbs", "17,000 lbs", "17,000 lbs", "17,000 lbs"],
        },
        "totalLength": 59.5,
        "grossWeight": "80,000 lbs",
    },
    "tight_semi": {
        "type": "semi",
        "axles": {
            "axle_count": 5,
            "axle_spacing": [4, 4, 4, 4],
            "axle_weights": [12000, 17000, 17000, 17000, 17000],
        },
        "total_length": 16,
        "gross_weight": 80000,
    },
    "heavy_steer": {
        "type": "3-Axle Straight Truck",
        "stateCode": "NY",
        "axles": {
            "axle_spacing": [20, 4.5],
            "axle_weights": [22000, 16000, 16000],
        },
    },
}


@pytest.fixture
def engine():
    return ComplianceEngine()


def _evaluate(engine, name, jurisdiction=None):
    vehicle, document_jurisdiction = parse_ticket(TICKETS[name])
    return engine.evaluate_jurisdiction(vehicle, jurisdiction or document_jurisdiction)


class TestTicketScenarios:
    """End-to-end weigh-ticket scenarios."""

    def test_legal_semi(self, engine):
        result = _evaluate(engine, "legal_semi")

        assert result.is_compliant is True
        assert result.status == ComplianceStatus.WARNING
        assert result.max_allowed_weight == 80000
        assert result.jurisdiction == "US"

    def test_tight_semi(self, engine):
        result = _evaluate(engine, "tight_semi")

        assert result.status == ComplianceStatus.NON_COMPLIANT
        assert [v.type for v in result.violations] == [
            ViolationType.TRIDEM_AXLE,
            ViolationType.TRIDEM_AXLE,
            ViolationType.TRIDEM_AXLE,
            ViolationType.BRIDGE_FORMULA,
        ]
        assert result.over_weight == pytest.approx(22000)

    def test_document_jurisdiction_used(self, engine):
        """Test the ticket's stateCode selects New York limits."""
        result = _evaluate(engine, "heavy_steer")

        assert result.jurisdiction == "NY"
        assert result.is_compliant is True
        # 22,000 lbs is within 95% of New York's 22,400 lb single-axle limit
        assert result.advisories[0].type == ViolationType.SINGLE_AXLE

    def test_explicit_jurisdiction_overrides_document(self, engine):
        result = _evaluate(engine, "heavy_steer", jurisdiction="US")

        assert result.jurisdiction == "US"
        assert result.violations[0].type == ViolationType.SINGLE_AXLE
        assert result.violations[0].over_weight == 2000


class TestSerializedResults:
    """Test result serialization across the pipeline."""

    def test_result_json(self, engine):
        result = _evaluate(engine, "tight_semi")
        payload = json.loads(json.dumps(result.to_dict()))

        assert payload["status"] == "Non-Compliant"
        assert payload["max_allowed_weight"] == 58000
        assert payload["details"]["bridge_formula_violation"] is True
        assert payload["violations"][0]["description"].startswith(
            "Tridem Axle group (axles 1-3) weight of 46,000 lbs"
        )

    def test_unknown_state_matches_federal(self, engine):
        vehicle, _ = parse_ticket(TICKETS["tight_semi"])
        assert (
            check_state_compliance(vehicle, "ZZ").to_dict()
            == engine.evaluate_federal(vehicle).to_dict()
        )

    @pytest.mark.parametrize("name", sorted(TICKETS))
    def test_repeat_evaluation_identical(self, engine, name):
        first = _evaluate(engine, name).to_dict()
        second = _evaluate(engine, name).to_dict()
        assert first == second


class TestStateComparison:
    """Compare one vehicle across every jurisdiction."""

    def test_only_florida_clears_tridems(self, engine):
        vehicle, _ = parse_ticket(TICKETS["tight_semi"])

        tridem_violations = {
            limits.code: len(engine.evaluate(vehicle, limits).violations_of(ViolationType.TRIDEM_AXLE))
            for limits in engine.registry
        }

        assert tridem_violations == {"US": 3, "CA": 3, "FL": 0, "NY": 3, "TX": 3}
