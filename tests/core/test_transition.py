import math

import pytest

from engine.core.config import AnimationConfig
from engine.core.phases import Phase
from engine.core.progress import progress
from engine.core.transition import detect


def test_inside_awakening_zone(default_config):
    info = detect(0.18, default_config)
    assert info.in_transition
    assert info.blend_amount == pytest.approx(0.6)
    assert info.current_phase is Phase.AWAKENING
    assert info.next_phase is Phase.ASCENSION


@pytest.mark.parametrize(
    "p, current, nxt",
    [
        (0.15, Phase.AWAKENING, Phase.ASCENSION),
        (0.56, Phase.ASCENSION, Phase.RADIANCE),
        (0.84, Phase.RADIANCE, Phase.DESCENT),
    ],
)
def test_each_internal_boundary_has_a_zone(default_config, p, current, nxt):
    info = detect(p, default_config)
    assert info.in_transition
    assert 0.0 <= info.blend_amount < 1.0
    assert (info.current_phase, info.next_phase) == (current, nxt)


@pytest.mark.parametrize("p", [0.0, 0.05, 0.20, 0.3, 0.60, 0.85, 0.95, 1.0])
def test_outside_zones(default_config, p):
    info = detect(p, default_config)
    assert not info.in_transition
    assert info.blend_amount == 0.0
    assert info.next_phase is None


def test_zone_start_is_inclusive_and_boundary_exclusive(default_config):
    assert detect(0.15, default_config).blend_amount == pytest.approx(0.0)
    assert not detect(0.20, default_config).in_transition


def test_no_zone_after_descent(default_config):
    # Descent の終端 (1.0) の直前には遷移ゾーンがない
    for p in (0.96, 0.99, 1.0):
        assert detect(p, default_config).current_phase is Phase.DESCENT
        assert not detect(p, default_config).in_transition


def test_zero_width_disables_transitions():
    cfg = AnimationConfig.from_mapping(transition_zone_width=0.0)
    assert not detect(0.1999, cfg).in_transition


def test_frame_on_zone_start_is_in_transition(default_config):
    # 3 / 20 = 0.15 は丸めると 0.2 - 0.05 をわずかに下回る
    info = detect(progress(3, 21), default_config)
    assert info.in_transition
    assert info.blend_amount == pytest.approx(0.0)
    assert (info.current_phase, info.next_phase) == (Phase.AWAKENING, Phase.ASCENSION)


def test_blend_amount_stays_below_one(default_config):
    info = detect(math.nextafter(0.2, 0.0), default_config)
    assert info.in_transition
    assert 0.0 <= info.blend_amount < 1.0


def test_zone_before_equal_boundaries_targets_the_phase_that_starts():
    cfg = AnimationConfig.from_mapping(phase_ascension_start=0.3, phase_radiance_start=0.3)
    info = detect(0.28, cfg)
    assert info.in_transition
    assert info.current_phase is Phase.AWAKENING
    # Ascension は幅 0 なので境界上で始まるのは Radiance
    assert info.next_phase is Phase.RADIANCE
