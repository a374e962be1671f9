from datetime import timedelta

import pytest

from edgecache.config import (
    ENV_DEV,
    ENV_PROD,
    ENV_TEST,
    CacheConfig,
    ConfigError,
    parse_bool,
    parse_duration,
)


def test_empty_env_gives_zero_values():
    cfg = CacheConfig.from_env({})
    assert cfg == CacheConfig()
    assert cfg.refresh_duration_threshold == timedelta(0)


def test_fields_are_read_from_env():
    cfg = CacheConfig.from_env(
        {
            "APP_ENV": "prod",
            "APP_DEBUG": "true",
            "BACKEND_URL": "http://backend.example.com",
            "REVALIDATE_BETA": "0.5",
            "REVALIDATE_INTERVAL": "5m",
            "INIT_STORAGE_LEN_PER_SHARD": "256",
            "EVICTION_ALGO": "lru",
            "MEMORY_FILL_THRESHOLD": "0.9",
            "MEMORY_LIMIT": "1024",
            "LIVENESS_PROBE_FAILED_TIMEOUT": "5s",
        }
    )
    assert cfg.app_env == "prod"
    assert cfg.app_debug is True
    assert cfg.backend_url == "http://backend.example.com"
    assert cfg.revalidate_beta == 0.5
    assert cfg.revalidate_interval == timedelta(minutes=5)
    assert cfg.init_storage_len_per_shard == 256
    assert cfg.eviction_algo == "lru"
    assert cfg.memory_fill_threshold == 0.9
    assert cfg.memory_limit == 1024
    assert cfg.liveness_probe_timeout == timedelta(seconds=5)


def test_refresh_threshold_scales_interval_by_beta():
    cfg = CacheConfig.from_env({"REVALIDATE_INTERVAL": "1h", "REVALIDATE_BETA": "0.5"})
    assert cfg.refresh_duration_threshold * 2 == cfg.revalidate_interval


def test_empty_values_are_treated_as_unset():
    cfg = CacheConfig.from_env({"APP_DEBUG": "", "MEMORY_LIMIT": ""})
    assert cfg.app_debug is False
    assert cfg.memory_limit == 0


@pytest.mark.parametrize(
    "env",
    [
        {"APP_DEBUG": "maybe"},
        {"REVALIDATE_INTERVAL": "5 minutes"},
        {"MEMORY_LIMIT": "-1"},
        {"INIT_STORAGE_LEN_PER_SHARD": "many"},
        {"REVALIDATE_BETA": "half"},
    ],
)
def test_bad_values_raise(env):
    with pytest.raises(ConfigError):
        CacheConfig.from_env(env)


def test_error_names_the_variable():
    with pytest.raises(ConfigError, match="APP_DEBUG"):
        CacheConfig.from_env({"APP_DEBUG": "nope"})


@pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
def test_parse_bool_true(text):
    assert parse_bool(text) is True


@pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
def test_parse_bool_false(text):
    assert parse_bool(text) is False


def test_parse_duration_compound_matches_sum_of_parts():
    assert parse_duration("1h30m") == parse_duration("1h") + parse_duration("30m")


def test_parse_duration_fraction_and_sign():
    assert parse_duration("1.5h") == parse_duration("90m")
    assert parse_duration("-10s") == -parse_duration("10s")


def test_parse_duration_bare_number_is_nanoseconds():
    assert parse_duration("1000") == parse_duration("1us")
    assert parse_duration("0") == timedelta(0)


@pytest.mark.parametrize("text", ["1d", "h", "10x", "-"])
def test_parse_duration_rejects_garbage(text):
    with pytest.raises(ConfigError):
        parse_duration(text)


@pytest.mark.parametrize(
    "env_name, prod, dev, test",
    [
        (ENV_PROD, True, False, False),
        (ENV_DEV, False, True, False),
        (ENV_TEST, False, False, True),
        ("staging", False, False, False),
    ],
)
def test_env_predicates(env_name, prod, dev, test):
    cfg = CacheConfig(app_env=env_name)
    assert (cfg.is_prod_env(), cfg.is_dev_env(), cfg.is_test_env()) == (prod, dev, test)


def test_debug_flag():
    assert CacheConfig(app_debug=True).is_debug_on() is True
    assert CacheConfig().is_debug_on() is False