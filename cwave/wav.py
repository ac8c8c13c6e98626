import os
import struct
import tempfile
import wave
from typing import Dict

from .errors import OutputWriteFailure
from .logger import Log
from .synth import BYTES_PER_SAMPLE
from .timing import SAMPLE_RATE

PAD_BYTE = b"\x80"
HEADER_SIZE = 44


def write_wav(wav_path: str, samples: bytes, sample_rate: int = SAMPLE_RATE, pad: bool = True) -> str:
    """
    Write mono signed 16-bit little-endian samples to a WAV file.

    With pad=True one 0x80 byte is appended to the sample data before the
    size fields are filled in, which keeps files byte-identical to the ones
    cw.wav has always been. The data is written to a temp file next to the
    target and moved over it, so a failed write never leaves a partial file.
    """
    payload = samples + PAD_BYTE if pad else samples
    directory = os.path.dirname(os.path.abspath(wav_path))

    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=".cwave_", suffix=".wav", dir=directory)
        with os.fdopen(fd, "wb") as raw:
            with wave.open(raw, "wb") as f:
                f.setnchannels(1)
                f.setsampwidth(BYTES_PER_SAMPLE)
                f.setframerate(sample_rate)
                # header sizes are patched to len(payload) on close
                f.writeframesraw(payload)

        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, wav_path)
    except BaseException as e:
        # interrupted or failed, never leave the temp file behind
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)

        if isinstance(e, (OSError, wave.Error)):
            raise OutputWriteFailure(f"Cannot write {wav_path}: {e}") from e
        raise

    Log.wav(f"Wrote {len(payload)} bytes of audio to {wav_path}")
    return wav_path


def read_wav_info(wav_path: str) -> Dict:
    with wave.open(wav_path, "rb") as f:
        info = {
            'channels': f.getnchannels(),
            'sample_rate': f.getframerate(),
            'sample_width': f.getsampwidth(),
            'frames': f.getnframes(),
        }

    with open(wav_path, "rb") as f:
        header = f.read(HEADER_SIZE)

    riff_size, = struct.unpack_from("<I", header, 4)
    data_size, = struct.unpack_from("<I", header, 40)

    info['riff_size'] = riff_size
    info['data_size'] = data_size
    info['bits_per_sample'] = 8 * info['sample_width']

    return info
