"""
Unit Tests for Messaging Helpers
================================
Tests for segment counting, splitting and cost estimation.
"""

import pytest


class TestMessaging:
    """Tests for message segmentation helpers."""
    
    def test_calculate_segments_short(self):
        """Short message should be 1 segment."""
        from smsly_length import calculate_segments, EncodingType
        
        segments, encoding, size = calculate_segments("Hello")
        
        assert segments == 1
        assert encoding == EncodingType.GSM7
        assert size == 5
    
    def test_calculate_segments_long(self):
        """Long message should be multiple segments."""
        from smsly_length import calculate_segments
        
        long_message = "A" * 200  # Over 160 char limit
        segments, encoding, size = calculate_segments(long_message)
        
        assert segments == 2
        assert size == 200
    
    def test_calculate_segments_long_ucs2(self):
        """Unicode messages use 67-unit parts."""
        from smsly_length import calculate_segments, EncodingType
        
        segments, encoding, size = calculate_segments("你" * 71)
        
        assert segments == 2
        assert encoding == EncodingType.UCS2
        assert size == 71
    
    def test_split_message_short(self):
        from smsly_length import split_message
        
        assert split_message("Hello") == ["Hello"]
        assert split_message("") == [""]
    
    def test_split_message_keeps_surrogate_pairs(self):
        """Emoji are never cut in half."""
        from smsly_length import split_message
        
        message = "a" * 66 + "\U0001F600" * 3
        parts = split_message(message)
        
        assert parts == ["a" * 66, "\U0001F600" * 3]
        assert "".join(parts) == message
    
    def test_estimate_cost(self):
        """Should price every segment."""
        from smsly_length import estimate_cost
        
        assert estimate_cost("Hello") == pytest.approx(0.01)
        assert estimate_cost("A" * 200, cost_per_segment=0.05) == pytest.approx(0.10)


class TestValidation:
    """Tests for the part count ceiling."""
    
    def test_check_within_limit(self):
        from smsly_length import check_message_count, ValidationStatus
        
        result = check_message_count(255)
        
        assert result.ok is True
        assert result.status == ValidationStatus.OK
        assert result.message is None
    
    def test_check_over_limit(self):
        from smsly_length import check_message_count, ValidationStatus
        
        result = check_message_count(256)
        
        assert result.ok is False
        assert result.status == ValidationStatus.TOO_MANY_PARTS
        assert result.max_message_count == 255
    
    def test_raise_for_status(self):
        from smsly_length import check_message_count, TooManyPartsError
        
        check_message_count(1).raise_for_status()
        with pytest.raises(TooManyPartsError):
            check_message_count(300).raise_for_status()
    
    def test_too_many_parts_is_value_error(self):
        """Callers catching ValueError also see the failure."""
        from smsly_length import TooManyPartsError, SmsLengthError
        
        error = TooManyPartsError(256, 255)
        
        assert isinstance(error, ValueError)
        assert isinstance(error, SmsLengthError)
        assert str(error) == "Message count cannot exceed 255"
    
    def test_module_validate(self):
        from smsly_length import SmsLength, validate
        
        assert validate(SmsLength("Hello")) is True


class TestConfig:
    """Tests for configuration loading."""
    
    def test_defaults(self):
        from smsly_length import LengthConfig
        
        config = LengthConfig.from_env({})
        
        assert config.service_name == "smsly-length"
        assert config.log_level == "INFO"
        assert config.json_logs is True
        assert config.cost_per_segment == pytest.approx(0.01)
    
    def test_from_env(self):
        from smsly_length import LengthConfig
        
        config = LengthConfig.from_env({
            "SMS_LENGTH_SERVICE_NAME": "smsly-sms",
            "SMS_LENGTH_LOG_LEVEL": "debug",
            "SMS_LENGTH_LOG_JSON": "no",
            "SMS_COST_PER_SEGMENT": "0.035",
        })
        
        assert config.service_name == "smsly-sms"
        assert config.log_level == "DEBUG"
        assert config.json_logs is False
        assert config.cost_per_segment == pytest.approx(0.035)
    
    @pytest.mark.parametrize(
        "environ",
        [
            {"SMS_LENGTH_LOG_LEVEL": "LOUD"},
            {"SMS_LENGTH_LOG_JSON": "maybe"},
            {"SMS_COST_PER_SEGMENT": "cheap"},
            {"SMS_COST_PER_SEGMENT": "-1"},
        ],
    )
    def test_invalid_values(self, environ):
        from smsly_length import LengthConfig, ConfigurationError
        
        with pytest.raises(ConfigurationError):
            LengthConfig.from_env(environ)


class TestLogging:
    """Tests for logging setup."""
    
    @pytest.fixture(autouse=True)
    def reset_logging(self):
        """Restore default structlog and root handlers after each test."""
        import logging
        import structlog
        
        yield
        structlog.reset_defaults()
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.WARNING)
    
    def test_setup_logging_json(self, capsys):
        """Events are rendered as JSON with the service bound."""
        import json
        from smsly_length import setup_logging
        
        setup_logging(service_name="smsly-test", level="INFO", json_output=True)
        
        line = capsys.readouterr().out.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "logging.configured"
        assert event["service"] == "smsly-test"
        assert event["level"] == "info"
    
    def test_debug_event_on_compute(self, capsys):
        """The engine emits one debug event per computed message."""
        import json
        from smsly_length import LengthConfig, SmsLength, setup_logging_from_config
        
        setup_logging_from_config(LengthConfig(log_level="DEBUG"))
        capsys.readouterr()
        
        SmsLength("simple msg" * 50)
        
        events = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]
        computed = [e for e in events if e["event"] == "sms_length.computed"]
        assert len(computed) == 1
        assert computed[0]["message_count"] == 4
        assert computed[0]["encoding"] == "7-bit"
