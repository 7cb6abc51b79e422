"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from vectrace.config import (
    EngineConfig,
    SchedulerConfig,
    TraceSettings,
    TurnPolicy,
    VectraceSettings,
    get_default_settings,
)


class TestTraceSettings:
    """Tests for per-trace settings."""

    def test_defaults(self):
        settings = TraceSettings()

        assert settings.threshold == 128
        assert settings.turd_size == 2
        assert settings.alpha_max == 1.0
        assert settings.opt_curve is True
        assert settings.opt_tolerance == 0.2
        assert settings.turn_policy == TurnPolicy.MINORITY
        assert settings.black_on_white is True
        assert settings.color == "#00d4ff"
        assert settings.fill_color == "transparent"
        assert settings.stroke_width == 1.0

    def test_camel_case_aliases(self):
        """Editor-style names are accepted alongside field names."""
        settings = TraceSettings.model_validate(
            {
                "turdSize": 5,
                "alphaMax": 0.5,
                "optCurve": False,
                "optTolerance": 0.4,
                "turnPolicy": "black",
                "blackOnWhite": False,
                "fillColor": "#000",
                "strokeWidth": 3,
            }
        )

        assert settings.turd_size == 5
        assert settings.alpha_max == 0.5
        assert settings.opt_curve is False
        assert settings.opt_tolerance == 0.4
        assert settings.turn_policy == TurnPolicy.BLACK
        assert settings.black_on_white is False
        assert settings.fill_color == "#000"
        assert settings.stroke_width == 3.0

    def test_frozen(self):
        settings = TraceSettings()
        with pytest.raises(ValidationError):
            settings.threshold = 10  # type: ignore

    @pytest.mark.parametrize(
        "field,value",
        [
            ("threshold", -1),
            ("threshold", 256),
            ("turd_size", -1),
            ("alpha_max", 2.0),
            ("opt_tolerance", -0.1),
            ("stroke_width", -1.0),
            ("turn_policy", "random"),
        ],
    )
    def test_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            TraceSettings(**{field: value})


class TestApplicationSettings:
    """Tests for aggregate settings."""

    def test_defaults(self):
        settings = get_default_settings()

        assert isinstance(settings, VectraceSettings)
        assert settings.scheduler.binarize_batch_rows == 50
        assert settings.scheduler.scan_yield_rows == 100
        assert settings.engine.use_primary is True
        assert settings.engine.potrace_executable == "potrace"
        assert settings.logging.log_file is None

    @pytest.mark.parametrize("rows", [0, 1001])
    def test_batch_rows_bounds(self, rows):
        with pytest.raises(ValidationError):
            SchedulerConfig(binarize_batch_rows=rows)

    def test_timeout_positive(self):
        with pytest.raises(ValidationError):
            EngineConfig(potrace_timeout_s=0)
