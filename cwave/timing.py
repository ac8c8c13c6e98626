from dataclasses import dataclass

import numpy as np

from .errors import InvalidTimingConfig

SAMPLE_RATE = 11025  # samples per second

# PARIS convention: one standard word is 50 dot units
UNITS_PER_WORD = 50
# Farnsworth spacing is spread over the 7 gaps of a standard word
FARNSWORTH_GAPS = 7


@dataclass(frozen=True)
class TimingModel:
    """
    Sample-level timing for one run.

    unit_samples is the length of one dot in samples and sets the
    character speed. farnsworth is the number of extra dot units of
    quiet added to every gap between characters (twice between words).
    """

    sample_rate: int
    character_wpm: int
    unit_samples: int
    farnsworth: float

    @classmethod
    def from_wpm(cls, character_wpm: int, effective_wpm: int, sample_rate: int = SAMPLE_RATE) -> "TimingModel":
        if character_wpm <= 0 or effective_wpm <= 0:
            raise InvalidTimingConfig(
                f"Rates must be positive (character {character_wpm} wpm, effective {effective_wpm} wpm)"
            )

        if effective_wpm > character_wpm:
            raise InvalidTimingConfig(
                f"Effective rate {effective_wpm} wpm is faster than the character rate {character_wpm} wpm"
            )

        unit_samples = (sample_rate * 60) // (character_wpm * UNITS_PER_WORD)
        if unit_samples <= 0:
            raise InvalidTimingConfig(f"Character rate {character_wpm} wpm is too fast for {sample_rate} Hz")

        # float32, one operation at a time, keeps gap lengths identical to existing cw.wav files
        farnsworth = (np.float32(UNITS_PER_WORD) * np.float32(character_wpm - effective_wpm)
                      / np.float32(effective_wpm) / np.float32(FARNSWORTH_GAPS))

        return cls(sample_rate=sample_rate, character_wpm=character_wpm,
                   unit_samples=unit_samples, farnsworth=float(farnsworth))

    @property
    def unit_seconds(self) -> float:
        return self.unit_samples / self.sample_rate

    @property
    def dot_ms(self) -> float:
        # nominal PARIS dot, before unit_samples is floored
        return 1200 / self.character_wpm
