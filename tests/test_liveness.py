import time
from datetime import timedelta
from http import HTTPStatus

import pytest

from edgecache.liveness import (
    FAILED_BODY,
    FALLBACK_TIMEOUT,
    PROBE_PATH,
    SUCCESS_BODY,
    LivenessController,
    Probe,
    Service,
    TimeoutIsTooShortError,
)


class _Fixed:
    def __init__(self, alive):
        self.alive = alive
        self.calls = 0
        self.deadlines = []

    def is_alive(self, deadline):
        self.calls += 1
        self.deadlines.append(deadline)
        return self.alive


class _Broken:
    def is_alive(self, deadline):
        raise RuntimeError("boom")


@pytest.fixture
def probe():
    p = Probe(2.0)
    yield p
    p.close()


def test_alive_service(probe):
    probe.watch(_Fixed(True))
    assert probe.is_alive() is True


def test_dead_service(probe):
    probe.watch(_Fixed(True), _Fixed(False))
    assert probe.is_alive() is False


def test_watch_without_services_is_alive(probe):
    probe.watch()
    assert probe.is_alive() is True


def test_checks_stop_at_first_dead_service(probe):
    dead, later = _Fixed(False), _Fixed(True)
    probe.watch(dead, later)
    assert probe.is_alive() is False
    assert dead.calls == 1
    assert later.calls == 0


def test_service_receives_future_deadline(probe):
    service = _Fixed(True)
    probe.watch(service)
    before = time.monotonic()
    assert probe.is_alive() is True
    assert service.deadlines[0] > before


def test_raising_service_counts_as_dead(probe):
    probe.watch(_Broken())
    assert probe.is_alive() is False


def test_without_watch_probe_times_out():
    probe = Probe(0.05)
    assert probe.is_alive() is False


def test_too_short_timeout_is_raised_to_fallback():
    assert Probe(0.0001).timeout == FALLBACK_TIMEOUT
    assert Probe(timedelta(microseconds=10)).timeout == FALLBACK_TIMEOUT


def test_timedelta_timeout_accepted():
    assert Probe(timedelta(seconds=3)).timeout == 3.0


def test_close_stops_watchers():
    probe = Probe(0.05)
    probe.watch(_Fixed(True))
    probe.close()
    assert probe.is_alive() is False


def test_context_manager_closes():
    with Probe(1.0) as probe:
        probe.watch(_Fixed(True))
        assert probe.is_alive() is True
    assert probe.is_alive() is False


def test_fixed_service_matches_protocol_and_is_watched(probe):
    service = _Fixed(True)
    assert isinstance(service, Service)
    assert not isinstance(object(), Service)
    probe.watch(service)
    assert probe.is_alive() is True
    assert service.calls == 1


def test_timeout_error_message():
    assert str(TimeoutIsTooShortError()) == "liveness probe timeout is too short"


def test_controller_success(probe):
    probe.watch(_Fixed(True))
    status, body = LivenessController(probe).handle()
    assert status == HTTPStatus.OK
    assert body == SUCCESS_BODY
    assert b'"status": 200' in body


def test_controller_failure(probe):
    probe.watch(_Fixed(False))
    status, body = LivenessController(probe).handle()
    assert status == HTTPStatus.SERVICE_UNAVAILABLE
    assert body == FAILED_BODY
    assert b'"status": 503' in body


def test_controller_route(probe):
    probe.watch(_Fixed(True))
    controller = LivenessController(probe)
    assert controller.route == ("GET", PROBE_PATH)
    assert PROBE_PATH == "/k8s/probe"
    status, _ = controller.handle()
    assert status == HTTPStatus.OK