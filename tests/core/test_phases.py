import pytest

from engine.core.config import AnimationConfig
from engine.core.phases import PHASE_ORDER, Phase, PhaseBoundaries, classify, local_progress


def test_awakening_midpoint(default_config):
    phase, local = classify(0.10, default_config)
    assert phase is Phase.AWAKENING
    assert local == pytest.approx(0.50)


def test_progress_one_is_descent(default_config):
    phase, local = classify(1.0, default_config)
    assert phase is Phase.DESCENT
    assert local == pytest.approx(1.0)


@pytest.mark.parametrize(
    "p, expected",
    [
        (0.0, Phase.AWAKENING),
        (0.1999, Phase.AWAKENING),
        (0.20, Phase.ASCENSION),
        (0.5999, Phase.ASCENSION),
        (0.60, Phase.RADIANCE),
        (0.85, Phase.DESCENT),
        (0.99, Phase.DESCENT),
    ],
)
def test_boundaries_are_half_open(default_config, p, expected):
    assert classify(p, default_config)[0] is expected


def test_phase_order_and_next():
    assert [p.value for p in PHASE_ORDER] == ["awakening", "ascension", "radiance", "descent"]
    assert Phase.AWAKENING.next is Phase.ASCENSION
    assert Phase.DESCENT.next is None
    assert Phase.RADIANCE.label == "Radiance"


def test_intervals_partition_unit_range():
    b = PhaseBoundaries()
    intervals = b.intervals()
    assert intervals[Phase.AWAKENING] == (0.0, 0.20)
    assert intervals[Phase.DESCENT] == (0.85, 1.0)
    ends = [intervals[p][1] for p in PHASE_ORDER[:-1]]
    starts = [intervals[p][0] for p in PHASE_ORDER[1:]]
    assert ends == starts


def test_zero_width_phase_has_local_progress_zero():
    cfg = AnimationConfig.from_mapping(
        phase_ascension_start=0.4, phase_radiance_start=0.4, transition_zone_width=0.0
    )
    assert cfg.boundaries.span(Phase.ASCENSION) == 0.0
    assert local_progress(0.4, Phase.ASCENSION, cfg.boundaries) == 0.0
    # 幅 0 のフェーズには何も属さない
    assert classify(0.4, cfg)[0] is Phase.RADIANCE
