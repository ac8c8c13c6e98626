class MorseError(Exception):
    # base for every failure that ends a run
    exit_code = 1


class ConfigurationError(MorseError):
    exit_code = 2


class InvalidTimingConfig(ConfigurationError):
    """Character/effective rates that cannot produce a valid timing model."""


class InputReadFailure(MorseError):
    exit_code = 3


class OutputWriteFailure(MorseError):
    exit_code = 4


class UnknownCharacter(MorseError):
    exit_code = 5

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"No Morse code for character {char!r}")


class UnrenderableSymbol(MorseError):
    """A codebook pattern holds something other than '.', '-' or ' '."""
    exit_code = 6

    def __init__(self, char: str, mark: str):
        self.char = char
        self.mark = mark
        super().__init__(f"Problem sounding mark {mark!r} in the pattern for {char!r}")
