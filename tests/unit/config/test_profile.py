"""Unit tests for MappingConfigProfile and option keys."""

from __future__ import annotations

from reqlog.config import ConfigProfile, MappingConfigProfile, RequestLoggerOption


class TestRequestLoggerOption:
    def test_str_is_key(self) -> None:
        assert str(RequestLoggerOption.SLOW_THRESHOLD) == "advanced.request-tracker.logs.slow.threshold"

    def test_all_keys_share_namespace(self) -> None:
        for option in RequestLoggerOption:
            assert option.value.startswith("advanced.request-tracker.logs.")


class TestMappingConfigProfile:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(MappingConfigProfile(), ConfigProfile)

    def test_absent_keys_yield_defaults(self) -> None:
        profile = MappingConfigProfile()
        assert profile.get_bool(RequestLoggerOption.SUCCESS_ENABLED, False) is False
        assert profile.get_int(RequestLoggerOption.MAX_QUERY_LENGTH, 500) == 500
        assert profile.get_duration(RequestLoggerOption.SLOW_THRESHOLD, None) is None

    def test_unparseable_values_yield_defaults(self) -> None:
        profile = MappingConfigProfile(
            {
                str(RequestLoggerOption.SUCCESS_ENABLED): "perhaps",
                str(RequestLoggerOption.MAX_VALUES): "many",
                str(RequestLoggerOption.SLOW_THRESHOLD): "soon",
            }
        )
        assert profile.get_bool(RequestLoggerOption.SUCCESS_ENABLED, True) is True
        assert profile.get_int(RequestLoggerOption.MAX_VALUES, 7) == 7
        assert profile.get_duration(RequestLoggerOption.SLOW_THRESHOLD, 5) == 5

    def test_non_finite_duration_yields_default(self) -> None:
        for raw in (float("inf"), float("nan")):
            profile = MappingConfigProfile({str(RequestLoggerOption.SLOW_THRESHOLD): raw})
            assert profile.get_duration(RequestLoggerOption.SLOW_THRESHOLD, None) is None

    def test_string_and_enum_keys_are_interchangeable(self) -> None:
        by_enum = MappingConfigProfile({RequestLoggerOption.SHOW_VALUES: True})
        by_str = MappingConfigProfile({"advanced.request-tracker.logs.show-values": True})
        assert by_enum.get_bool("advanced.request-tracker.logs.show-values", False) is True
        assert by_str.get_bool(RequestLoggerOption.SHOW_VALUES, False) is True

    def test_reads_live_mapping(self) -> None:
        values: dict[str, object] = {}
        profile = MappingConfigProfile(values)
        assert profile.get_bool(RequestLoggerOption.ERROR_ENABLED, False) is False
        values[str(RequestLoggerOption.ERROR_ENABLED)] = "true"
        assert profile.get_bool(RequestLoggerOption.ERROR_ENABLED, False) is True

    def test_set_and_unset(self) -> None:
        profile = MappingConfigProfile()
        profile.set(RequestLoggerOption.SLOW_THRESHOLD, "100 ms")
        assert profile.get_duration(RequestLoggerOption.SLOW_THRESHOLD, None) == 100_000_000
        profile.unset(RequestLoggerOption.SLOW_THRESHOLD)
        assert profile.get_duration(RequestLoggerOption.SLOW_THRESHOLD, None) is None

    def test_set_is_chainable(self) -> None:
        profile = MappingConfigProfile().set("a", 1).set("b", 2)
        assert profile.get_int("a", 0) == 1
        assert profile.get_int("b", 0) == 2
