import numpy as np
import pytest

from cwave.errors import InvalidTimingConfig
from cwave.timing import SAMPLE_RATE, TimingModel


def test_default_rates(timing):
    assert timing.sample_rate == SAMPLE_RATE == 11025
    assert timing.unit_samples == 13230 // 22 == 601
    assert timing.farnsworth == pytest.approx(50 * 9 / 13 / 7)


def test_no_farnsworth_when_rates_match():
    t = TimingModel.from_wpm(18, 18)
    assert t.farnsworth == 0
    assert t.unit_samples == 13230 // 18


def test_dot_duration():
    t = TimingModel.from_wpm(20, 20)
    # 1200 / wpm ms per dot
    assert t.dot_ms == pytest.approx(60.0)
    # the sample count is floored, 661 samples is a little under 60 ms
    assert t.unit_samples == 661
    assert t.unit_seconds == pytest.approx(661 / 11025)
    assert t.unit_seconds < t.dot_ms / 1000


def test_valid_rates_give_positive_timing():
    for character in range(1, 61):
        for effective in range(1, character + 1):
            t = TimingModel.from_wpm(character, effective)
            assert t.unit_samples > 0
            assert t.farnsworth >= 0


@pytest.mark.parametrize("character, effective", [
    (0, 13),
    (22, 0),
    (-5, -10),
    (10, 20),
    (20000, 20000),
])
def test_rejects_bad_rates(character, effective):
    with pytest.raises(InvalidTimingConfig):
        TimingModel.from_wpm(character, effective)


def test_is_immutable(timing):
    with pytest.raises(AttributeError):
        timing.unit_samples = 1


def test_farnsworth_is_single_precision():
    t = TimingModel.from_wpm(22, 13)
    expected = np.float32(50) * np.float32(9) / np.float32(13) / np.float32(7)
    assert t.farnsworth == float(expected)
    assert t.character_wpm == 22
