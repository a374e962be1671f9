# edgecache

Building blocks for an HTTP response cache service. The package has no
third-party dependencies.

- `edgecache.config` – `CacheConfig`, the cache settings read from environment
  variables, plus the parsers `parse_duration` and `parse_bool`.
- `edgecache.liveness` – a `Probe` that asks watched `Service` objects whether
  they are alive within a timeout, and a `LivenessController` that turns the
  answer into a health-check status and body.
- `edgecache.locales` – enumerations of ISO languages, countries, locales,
  translator names and web language codes, with the mappings between them.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

```python
import os
from edgecache.config import CacheConfig

config = CacheConfig.from_env(os.environ)
if config.is_debug_on():
    print(config)
```

`CacheConfig.from_env(env)` reads from the mapping it is given, or from
`os.environ` when called without one. The variables are:

| Variable | Field | Type |
| --- | --- | --- |
| `APP_ENV` | `app_env` | text (`prod`, `dev`, `test`) |
| `APP_DEBUG` | `app_debug` | boolean |
| `BACKEND_URL` | `backend_url` | text |
| `REVALIDATE_BETA` | `revalidate_beta` | number |
| `REVALIDATE_INTERVAL` | `revalidate_interval` | duration |
| `INIT_STORAGE_LEN_PER_SHARD` | `init_storage_len_per_shard` | integer |
| `EVICTION_ALGO` | `eviction_algo` | text |
| `MEMORY_FILL_THRESHOLD` | `memory_fill_threshold` | number |
| `MEMORY_LIMIT` | `memory_limit` | non-negative integer |
| `LIVENESS_PROBE_FAILED_TIMEOUT` | `liveness_probe_timeout` | duration |

Unset or empty variables keep their zero value. `refresh_duration_threshold`
is computed as `revalidate_interval * revalidate_beta`. A value that cannot be
converted raises `ConfigError` (a `ValueError`) naming the variable.

Durations are written like `"1h30m"`, `"250ms"` or `"1.5s"` (units `ns`, `us`,
`ms`, `s`, `m`, `h`); a bare number counts as nanoseconds. Booleans accept
`1`, `t`, `T`, `true`, `True`, `TRUE` and their false counterparts.

The helpers `is_prod_env()`, `is_dev_env()`, `is_test_env()` and
`is_debug_on()` report the mode. `PTR_BYTES_WEIGHT` (8) is the byte size
counted for one pointer when estimating memory use.

## Liveness probing

```python
from edgecache.liveness import LivenessController, Probe, Service

class Worker(Service):
    def is_alive(self, deadline):
        return True

with Probe(timeout=0.5) as probe:
    probe.watch(Worker())
    print(probe.is_alive())          # True

    controller = LivenessController(probe)
    status, body = controller.handle()
    print(status)                    # HTTPStatus.OK
```

`Probe(timeout)` takes seconds or a `timedelta`. A timeout shorter than one
millisecond is logged as a `TimeoutIsTooShortError` and raised to ten
milliseconds. `watch(*services)` starts a background thread that answers each
question by asking every service; `is_alive()` returns `False` when no answer
arrives in time or a service raises. `close()` (or leaving the `with` block)
stops the watcher threads.

`LivenessController.handle()` returns `(HTTPStatus.OK, SUCCESS_BODY)` or
`(HTTPStatus.SERVICE_UNAVAILABLE, FAILED_BODY)`; its `route` attribute is
`("GET", "/k8s/probe")`.

## Locales

```python
from edgecache.locales.iso import try_iso_lang_from_string

lang = try_iso_lang_from_string("en")
print(lang.locales())   # [Locale.ENGLISH_UNITED_KINGDOM, Locale.ENGLISH_CANADA, ...]
```

| Module | Enumeration | Lookups | Helpers |
| --- | --- | --- | --- |
| `edgecache.locales.iso` | `IsoLang` | `locales()` | `try_iso_lang_from_string`, `iso_list` |
| `edgecache.locales.country` | `Country` | – | `countries_list` |
| `edgecache.locales.locale` | `Locale` | `language_code()`, `iso_lang()`, `translators_name()` | `try_locale_from_string`, `locales_list` |
| `edgecache.locales.translators` | `TranslatorsName` | `locale()` | `try_translators_name_from_string`, `translators_list` |
| `edgecache.locales.webname` | `LanguageCode` | `country()`, `iso_lang()`, `locale()` | `try_language_code_from_string`, `language_code_list` |

All enumerations are string enums whose values are the codes themselves. The
`try_*_from_string` functions return `None` for codes they do not accept. The
`translators` and `webname` lists hold only the accepted codes, which are
fewer than the enumeration members.

## What this package does not do

It holds no cache storage, no HTTP server and no command to run: it provides
the configuration, the liveness probe and its response, and the locale tables
that such a service is built from.