#!filepath: tests/observability/test_instrumentation.py

import time
from spaceloop.observability.instrumentation import Instrumentation, NoOpInstrumentation


def test_instrumentation_timer_accumulates():
    inst = Instrumentation(enabled=True)

    with inst.timer("A/a"):
        time.sleep(0.01)
    first = inst.timeline["A/a"]

    with inst.timer("A/a"):
        time.sleep(0.01)

    assert first > 0
    assert inst.timeline["A/a"] > first


def test_instrumentation_parent_scope_not_recorded():
    inst = Instrumentation(enabled=True)

    with inst.timer("run", record=False):
        with inst.timer("A/a"):
            pass

    assert list(inst.timeline) == ["A/a"]


def test_instrumentation_disabled():
    inst = Instrumentation(enabled=False)

    with inst.timer("A/a"):
        pass
    inst.metrics.record("rows", 1)

    assert inst.timeline == {}
    assert inst.metrics.metrics == {}


def test_noop_instrumentation():
    inst = NoOpInstrumentation()

    with inst.timer("anything"):
        pass
    inst.metrics.incr("x")
    inst.generate_timeline_report("fixpoint")

    assert inst.timeline == {}
    assert inst.metrics.metrics == {}


def test_generate_timeline_report(capture_logs):
    inst = Instrumentation(enabled=True)

    with inst.timer("phase_X"):
        time.sleep(0.005)

    inst.generate_timeline_report("timeout")

    output = "\n".join(capture_logs)

    assert "phase_X" in output
    assert "Run timeline for timeout" in output
