from typing import Set

from .codebook import DASH, DOT, ITU, WORD_GAP, Codebook
from .errors import UnknownCharacter, UnrenderableSymbol
from .logger import Log
from .synth import BYTES_PER_SAMPLE, ToneSynthesizer

# Every mark is followed by its own unit of quiet (the tail of the tone clip)
# and one gap clip of 2 units plus the Farnsworth factor. Every character,
# word spaces included, ends with one more gap clip.


class Sequencer:
    def __init__(self, synth: ToneSynthesizer, codebook: Codebook = ITU, strict: bool = False):
        self.synth = synth
        self.codebook = codebook
        self.strict = strict
        self.dropped: Set[str] = set()

        self._clips = {
            DOT: synth.dot,
            DASH: synth.dash,
            WORD_GAP: synth.gap,  # word space sounds as a plain gap
        }

    def render(self, text: str) -> bytes:
        """
        Turn text into one contiguous waveform.

        Unknown characters are dropped (a warning is logged the first time
        each one is seen) unless the sequencer is strict, in which case
        UnknownCharacter is raised.
        """
        gap = self.synth.gap
        wav = bytearray()

        for char in text.lower():
            pattern = self.codebook.lookup(char)

            if pattern is None:
                self._unknown(char)
                continue

            for mark in pattern:
                clip = self._clips.get(mark)
                if clip is None:
                    raise UnrenderableSymbol(char, mark)

                wav += clip
                wav += gap

            # between characters, also added after a word gap
            wav += gap

        return bytes(wav)

    def _unknown(self, char: str):
        if self.strict:
            raise UnknownCharacter(char)

        if char not in self.dropped:
            self.dropped.add(char)
            Log.warning(f"No Morse code for {char!r}, skipping it")

    def duration(self, wav: bytes) -> float:
        return len(wav) / BYTES_PER_SAMPLE / self.synth.timing.sample_rate
