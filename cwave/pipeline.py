import sys
from typing import BinaryIO, Iterator, Optional

from .codebook import get_codebook
from .config import MorseConfig
from .errors import InputReadFailure
from .logger import Log
from .sequencer import Sequencer
from .synth import ToneSynthesizer
from .timing import TimingModel
from .wav import write_wav

CHUNK_SIZE = 100


def read_chunks(stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[str]:
    # latin-1 maps every byte to one character, the codebook decides the rest
    while True:
        try:
            chunk = stream.read(chunk_size)
        except OSError as e:
            raise InputReadFailure(f"Problem reading input: {e}") from e

        if not chunk:
            return

        yield chunk.decode("latin-1")


def build_sequencer(config: MorseConfig) -> Sequencer:
    timing = TimingModel.from_wpm(config.character_wpm, config.effective_wpm, config.sample_rate)

    Log.timing(f"Farnsworth factor {timing.farnsworth:.3f}")
    Log.timing(f"Digital samples per dot {timing.unit_samples}")
    Log.timing(f"Dot duration {timing.dot_ms:.1f} ms")

    synth = ToneSynthesizer(timing, config.tone_hz)
    return Sequencer(synth, get_codebook(config.codebook), strict=config.strict)


def render_stream(sequencer: Sequencer, stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> bytes:
    wav = bytearray()
    chars = 0

    for chunk in read_chunks(stream, chunk_size):
        chars += len(chunk)
        wav += sequencer.render(chunk)

    Log.morse(f"Encoded {chars} characters to morse")
    return bytes(wav)


def run(config: MorseConfig, stream: Optional[BinaryIO] = None) -> str:
    """
    Render the whole input and write it to config.output.

    The input comes from stream if given, else config.input, else stdin.
    Returns the written path.
    """
    sequencer = build_sequencer(config)

    if stream is not None:
        wav = render_stream(sequencer, stream)
    elif config.input:
        try:
            with open(config.input, "rb") as f:
                Log.file(f"Loaded Morse text from file: {config.input}")
                wav = render_stream(sequencer, f)
        except OSError as e:
            raise InputReadFailure(f"Cannot read {config.input}: {e}") from e
    else:
        wav = render_stream(sequencer, sys.stdin.buffer)

    if not wav:
        Log.warning("No Morse to sound, writing an empty file")

    Log.morse(f"Rendered {sequencer.duration(wav):.1f} seconds of audio")
    return write_wav(config.output, wav, config.sample_rate, pad=config.pad)
