import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a test optional dependency")
from hypothesis import assume, given, strategies as st  # type: ignore

from engine.core.config import AnimationConfig
from engine.core.easing import OVERSHOOTING_EASINGS, lerp, list_easings
from engine.core.phases import PHASE_ORDER, classify
from engine.core.progress import progress
from engine.core.synthesis import family_value, synthesize

unit = st.floats(0.0, 1.0, allow_nan=False)


@st.composite
def boundary_configs(draw):
    a, b, c = sorted(draw(st.lists(st.floats(0.0, 0.99), min_size=3, max_size=3)))
    spans = [s for s in (a, b - a, c - b) if s > 0.0]
    limit = min(spans) if spans else 0.0
    width = limit * draw(st.floats(0.0, 0.99))
    if width >= limit:
        # 非正規化数の幅は丸めで limit と一致しうる
        width = 0.0
    return AnimationConfig.from_mapping(
        phase_ascension_start=a,
        phase_radiance_start=b,
        phase_descent_start=c,
        transition_zone_width=width,
    )


@given(total=st.integers(2, 10_000), data=st.data())
def test_progress_is_monotonic(total, data):
    i = data.draw(st.integers(0, total - 2))
    assert 0.0 <= progress(i, total) <= progress(i + 1, total) <= 1.0


@given(total=st.integers(-5, 1), frame=st.integers(0, 100))
def test_short_loops_are_zero(total, frame):
    assert progress(frame, total) == 0.0


@given(cfg=boundary_configs(), p=unit)
def test_phases_partition_the_unit_interval(cfg, p):
    phase, local = classify(p, cfg)
    start, end = cfg.boundaries.interval(phase)
    assert start <= p
    assert p < end or (phase is PHASE_ORDER[-1] and p <= 1.0)
    assert 0.0 <= local <= 1.0
    hits = [ph for ph in PHASE_ORDER if cfg.boundaries.interval(ph)[0] <= p < cfg.boundaries.interval(ph)[1]]
    assert len(hits) <= 1


@given(cfg=boundary_configs(), p=unit)
def test_synthesized_alpha_stays_in_range_for_default_curves(cfg, p):
    params = synthesize(p, cfg)
    # 既定値はオーバーシュートしないイージングのみ
    assert -1e-9 <= params.node_alpha <= 1.0 + 1e-9
    assert params.as_dict()["node_alpha"] == params.node_alpha


@given(cfg=boundary_configs())
def test_boundary_value_equals_next_phase_start(cfg):
    for boundary in cfg.boundaries.internal():
        at = synthesize(boundary, cfg)
        assert at.phase_progress == 0.0
        for family in cfg.families:
            expected = family_value(cfg, family, at.phase, at.phase_progress)
            assert at.values[family] == pytest.approx(expected)


@given(cfg=boundary_configs())
def test_value_is_continuous_where_a_zone_ends(cfg):
    width = cfg.transition_zone_width
    assume(width > 1e-6)
    for boundary in cfg.boundaries.internal():
        eps = width * 1e-4
        if boundary < eps:
            continue
        before = synthesize(boundary - eps, cfg)
        at = synthesize(boundary, cfg)
        for family in cfg.families:
            assert before.values[family] == pytest.approx(at.values[family], abs=1e-5)


@given(a=st.floats(-100, 100), b=st.floats(-100, 100), t=unit, name=st.sampled_from(list_easings()))
def test_lerp_stays_between_endpoints(a, b, t, name):
    assume(name not in OVERSHOOTING_EASINGS)
    v = lerp(a, b, t, name)
    lo, hi = min(a, b), max(a, b)
    assert lo - 1e-9 <= v <= hi + 1e-9
