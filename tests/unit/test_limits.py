"""
Unit tests for the weight limit registry.
"""

import pytest

from weighstation.compliance import (
    FEDERAL,
    JURISDICTION_NAMES,
    LIMIT_REGISTRY,
    STATE_WEIGHT_LIMITS,
    LimitRegistry,
    WeightLimits,
    lookup,
)
from weighstation.errors import ErrorCategory, ErrorCode, InvalidConfigurationError


class TestFederalProfile:
    """Test federal weight limits."""

    def test_federal_values(self):
        """Test federal limits match 23 CFR 658.17."""
        assert FEDERAL.single_axle == 20000
        assert FEDERAL.tandem_axle == 34000
        assert FEDERAL.tridem_axle == 42000
        assert FEDERAL.gross_vehicle == 80000
        assert FEDERAL.bridge_formula_enabled is True
        assert FEDERAL.code == "US"

    def test_profile_is_immutable(self):
        """Test limit profiles cannot be modified."""
        with pytest.raises(AttributeError):
            FEDERAL.single_axle = 1

    def test_state_table_is_read_only(self):
        """Test the state table rejects writes."""
        with pytest.raises(TypeError):
            STATE_WEIGHT_LIMITS["ZZ"] = FEDERAL


class TestStateProfiles:
    """Test per-state limits."""

    def test_known_states(self):
        """Test all state profiles are present."""
        assert set(STATE_WEIGHT_LIMITS) == {"CA", "TX", "NY", "FL"}

    def test_new_york_limits(self):
        """Test New York allows heavier single and tandem axles."""
        ny = STATE_WEIGHT_LIMITS["NY"]
        assert ny.single_axle == 22400
        assert ny.tandem_axle == 36000
        assert ny.tridem_axle == 42000

    def test_florida_limits(self):
        """Test Florida group limits."""
        fl = STATE_WEIGHT_LIMITS["FL"]
        assert fl.single_axle == 22000
        assert fl.tandem_axle == 44000
        assert fl.tridem_axle == 66000

    def test_names(self):
        """Test jurisdiction display names."""
        assert JURISDICTION_NAMES["US"] == "Federal"
        assert JURISDICTION_NAMES["CA"] == "California"
        assert JURISDICTION_NAMES["NY"] == "New York"


class TestLookup:
    """Test lookup with federal fallback."""

    def test_lookup_none_returns_federal(self):
        assert lookup() is FEDERAL
        assert lookup(None) is FEDERAL

    def test_lookup_state(self):
        assert lookup("NY") is STATE_WEIGHT_LIMITS["NY"]

    def test_lookup_is_case_insensitive(self):
        """Test codes are normalized before lookup."""
        assert lookup("fl") is STATE_WEIGHT_LIMITS["FL"]
        assert lookup("  tx ") is STATE_WEIGHT_LIMITS["TX"]

    @pytest.mark.parametrize("code", ["ZZ", "", "   ", "California"])
    def test_unknown_code_falls_back_to_federal(self, code):
        """Test unknown codes resolve to federal limits without error."""
        assert lookup(code) is FEDERAL

    @pytest.mark.parametrize("code", ["US", "us", "FED", "federal"])
    def test_federal_aliases(self, code):
        assert lookup(code) is FEDERAL


class TestLimitRegistry:
    """Test LimitRegistry class."""

    def test_default_registry(self):
        assert len(LIMIT_REGISTRY) == 5
        assert LIMIT_REGISTRY.federal is FEDERAL
        assert LIMIT_REGISTRY.codes() == ["US", "CA", "FL", "NY", "TX"]

    def test_contains(self):
        assert "ny" in LIMIT_REGISTRY
        assert "US" in LIMIT_REGISTRY
        assert "ZZ" not in LIMIT_REGISTRY
        assert 42 not in LIMIT_REGISTRY

    def test_name_for(self):
        assert LIMIT_REGISTRY.name_for("ca") == "California"
        assert LIMIT_REGISTRY.name_for(None) == "Federal"
        assert LIMIT_REGISTRY.name_for("ZZ") == "ZZ"

    def test_iteration_starts_with_federal(self):
        profiles = list(LIMIT_REGISTRY)
        assert profiles[0] is FEDERAL
        assert [p.code for p in profiles[1:]] == ["CA", "FL", "NY", "TX"]

    def test_custom_registry(self):
        """Test a registry built from a custom table."""
        ohio = WeightLimits(
            single_axle=20000,
            tandem_axle=34000,
            tridem_axle=48000,
            gross_vehicle=80000,
            code="OH",
            name="Ohio",
        )
        registry = LimitRegistry(jurisdictions={"oh": ohio})
        assert registry.lookup("OH") is ohio
        assert registry.lookup("NY") is FEDERAL
        assert registry.codes() == ["US", "OH"]


class TestWeightLimitsValidation:
    """Test limit profile validation."""

    def test_non_positive_limit_rejected(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            WeightLimits(single_axle=0, tandem_axle=34000, tridem_axle=42000, gross_vehicle=80000)

        error = exc_info.value
        assert error.code == ErrorCode.LIM_INVALID_PROFILE
        assert error.category == ErrorCategory.LIMITS
        assert error.issues[0].field == "single_axle"

    def test_every_bad_limit_reported(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            WeightLimits(
                single_axle=-1,
                tandem_axle=float("inf"),
                tridem_axle="heavy",
                gross_vehicle=80000,
            )
        fields = [issue.field for issue in exc_info.value.issues]
        assert fields == ["single_axle", "tandem_axle", "tridem_axle"]

    def test_to_dict(self):
        d = FEDERAL.to_dict()
        assert d["code"] == "US"
        assert d["gross_vehicle"] == 80000
        assert d["bridge_formula_enabled"] is True
