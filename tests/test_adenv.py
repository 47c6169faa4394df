import pytest

from signalkit.adenv import AdEnv, AdEnvSegment


def _run_cycle(env, limit=10000):
    values = []
    env.trigger()
    values.append(env.process())
    while env.running and len(values) < limit:
        values.append(env.process())
    return values


def test_idle_outputs_minimum():
    env = AdEnv(1000.0)
    assert not env.running
    assert env.process() == 0.0
    env.minimum = 2.0
    env.maximum = 4.0
    assert env.process() == 2.0


def test_trigger_starts_attack():
    env = AdEnv(1000.0)
    env.trigger()
    env.process()
    assert env.running
    assert env.segment is AdEnvSegment.ATTACK


def test_full_cycle_rises_then_falls_to_idle():
    env = AdEnv(1000.0)
    values = _run_cycle(env)
    assert not env.running
    assert env.segment is AdEnvSegment.IDLE
    peak = values.index(max(values))
    attack = values[: peak + 1]
    decay = values[peak:]
    assert max(values) >= 1.0
    assert all(b >= a for a, b in zip(attack, attack[1:]))
    assert all(b <= a for a, b in zip(decay, decay[1:]))
    assert env.process() == 0.0


def test_longer_attack_takes_longer():
    fast = AdEnv(1000.0)
    slow = AdEnv(1000.0)
    fast.set_time(AdEnvSegment.ATTACK, 0.01)
    slow.set_time(AdEnvSegment.ATTACK, 0.1)
    assert len(_run_cycle(slow)) > len(_run_cycle(fast))


def test_curved_envelope_completes():
    env = AdEnv(1000.0)
    env.curve = -10.0
    values = _run_cycle(env)
    assert not env.running
    assert max(values) >= 1.0


def test_retrigger_continues_from_current_value():
    env = AdEnv(1000.0)
    env.trigger()
    for _ in range(80):
        env.process()
    assert env.segment is AdEnvSegment.DECAY
    current = env.value
    env.trigger()
    assert env.process() == pytest.approx(current)
    assert env.segment is AdEnvSegment.ATTACK


def test_invalid_segment_rejected():
    env = AdEnv(1000.0)
    with pytest.raises(ValueError):
        env.set_time(7, 0.1)