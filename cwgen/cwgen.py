#!/usr/bin/env python3

# CWave - Morse code WAV generator
# Reads text from stdin (or --input) and writes cw.wav, signed 16-bit
# little endian mono at 11025 Hz.
# To get an mp3 on linux: lame cw.wav newFileName.mp3
# Licensed under GPL-v3.0 (see LICENSE)

import argparse
import os
import sys
from typing import List, Optional

# using this to access to the cwave dir files
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from cwave.codebook import CODEBOOKS
from cwave.config import DEFAULT_CODEBOOK, DEFAULT_FARNSWORTH_OFFSET, DEFAULT_OUTPUT, DEFAULT_TONE, DEFAULT_WPM, MorseConfig
from cwave.errors import MorseError
from cwave.logger import Log
from cwave.pipeline import run

EPILOG = (
    "example:\n"
    "  cwgen < textFile\n"
    "  cwgen -w 25 -f 15 -t 700 -o qso.wav < textFile\n"
    "prosigns: '=' BT, '+' AR, '&' AS, '$' SK"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cwgen',
        description='Morse code audio generator, generates a WAV file from text',
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('-w', '--wpm', type=int, default=DEFAULT_WPM,
                        help=f'Character rate, the rate at which individual characters are sent (default: {DEFAULT_WPM})')
    parser.add_argument('-f', '--farnsworth', type=int, default=None,
                        help=f'Farnsworth rate, the effective words per minute sent (default: character rate - {DEFAULT_FARNSWORTH_OFFSET})')
    parser.add_argument('-t', '--tone', type=float, default=DEFAULT_TONE,
                        help=f'Tone frequency in Hz (default: {DEFAULT_TONE})')
    parser.add_argument('-o', '--output', default=DEFAULT_OUTPUT, help=f'Output WAV file (default: {DEFAULT_OUTPUT})')
    parser.add_argument('-i', '--input', default=None, help='Read text from this file instead of stdin')
    parser.add_argument('-c', '--codebook', default=DEFAULT_CODEBOOK, choices=sorted(CODEBOOKS),
                        help=f'Character table to use (default: {DEFAULT_CODEBOOK})')
    parser.add_argument('--strict', action='store_true', help='Fail on characters that have no Morse code instead of skipping them')
    parser.add_argument('--no-pad', action='store_true', help='Do not append the trailing 0x80 byte to the sample data')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    Log.header("CWave - Morse WAV Generator")

    try:
        config = MorseConfig.from_args(args)
        path = run(config)
    except MorseError as e:
        Log.error(str(e))
        return e.exit_code
    except KeyboardInterrupt:
        Log.warning("Interrupted, nothing written")
        return 130

    Log.success(f"Morse WAV created {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
