from dataclasses import dataclass
from typing import Optional

from .timing import SAMPLE_RATE

DEFAULT_WPM = 22
DEFAULT_FARNSWORTH_OFFSET = 9  # effective rate sits this far below the character rate
DEFAULT_TONE = 660
DEFAULT_OUTPUT = "cw.wav"
DEFAULT_CODEBOOK = "itu"


def default_effective_wpm(character_wpm: int) -> int:
    # no Farnsworth spacing if the offset would leave nothing to send
    effective = character_wpm - DEFAULT_FARNSWORTH_OFFSET
    return effective if effective > 0 else character_wpm


@dataclass(frozen=True)
class MorseConfig:
    character_wpm: int = DEFAULT_WPM
    effective_wpm: int = DEFAULT_WPM - DEFAULT_FARNSWORTH_OFFSET
    tone_hz: float = DEFAULT_TONE
    output: str = DEFAULT_OUTPUT
    input: Optional[str] = None  # None reads stdin
    codebook: str = DEFAULT_CODEBOOK
    strict: bool = False
    pad: bool = True
    sample_rate: int = SAMPLE_RATE

    @classmethod
    def from_args(cls, args) -> "MorseConfig":
        effective = args.farnsworth
        if effective is None:
            effective = default_effective_wpm(args.wpm)

        return cls(
            character_wpm=args.wpm,
            effective_wpm=effective,
            tone_hz=args.tone,
            output=args.output,
            input=args.input,
            codebook=args.codebook,
            strict=args.strict,
            pad=not args.no_pad
        )
