import math

import numpy as np

from .errors import ConfigurationError
from .timing import TimingModel

AMPLITUDE = 32766  # just under full scale for signed 16 bit
BYTES_PER_SAMPLE = 2

# rise & fall time constant in seconds
RAMP_TAU = 3.0e-3
RAMP_DELAY = 1.5 * RAMP_TAU

_erf = np.vectorize(math.erf, otypes=[float])


class ToneSynthesizer:
    """
    Renders the three clips every message is built from: a one unit tone
    (dot), a three unit tone (dash) and the standard gap of quiet that
    follows each mark. They are rendered once here and only ever read
    afterwards.
    """

    def __init__(self, timing: TimingModel, frequency: float = 660):
        if frequency <= 0 or frequency >= timing.sample_rate / 2:
            raise ConfigurationError(
                f"Tone frequency must be between 0 and {timing.sample_rate / 2:g} Hz, got {frequency:g}"
            )

        self.timing = timing
        self.frequency = frequency

        self.dot = self.tone(1)
        self.dash = self.tone(3)
        self.gap = self.quiet(2 + timing.farnsworth)

    def quiet(self, units: float) -> bytes:
        # units may be fractional because of the Farnsworth factor, kept in float32
        samples = np.float32(units) * np.float32(self.timing.unit_samples)
        return bytes(BYTES_PER_SAMPLE * int(samples))

    def tone(self, units: int) -> bytes:
        rate = self.timing.sample_rate
        unit = self.timing.unit_samples

        # one extra unit leaves room for the falling edge
        seconds = np.arange((units + 1) * unit) / rate
        tone_secs = units * unit / rate - RAMP_TAU

        carrier = np.sin(2.0 * math.pi * self.frequency * seconds)
        ramp = (_erf((seconds - RAMP_DELAY) / RAMP_TAU)
                - _erf((seconds - RAMP_DELAY - tone_secs) / RAMP_TAU)) / 2.0

        # astype truncates toward zero
        samples = (AMPLITUDE * carrier * ramp).astype(np.int16)
        return samples.astype('<i2').tobytes()
