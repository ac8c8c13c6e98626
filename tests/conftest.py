import pytest

from cwave.sequencer import Sequencer
from cwave.synth import ToneSynthesizer
from cwave.timing import TimingModel


@pytest.fixture
def timing():
    # 22 wpm characters at 13 wpm effective
    return TimingModel.from_wpm(22, 13)


@pytest.fixture
def synth(timing):
    return ToneSynthesizer(timing, 660)


@pytest.fixture
def sequencer(synth):
    return Sequencer(synth)
