from dlogger import DLogger

class Logger(DLogger):
    ICONS = {
        'success': 'OK',
        'error': 'ERR',
        'warning': 'WARN',
        'info': 'INFO',
        'morse': 'MORSE',
        'timing': 'TIME',
        'wav': 'WAV',
        'file': 'FILE'
    }

    STYLES = {
        'success': 'bright_green',
        'error': 'bright_red',
        'warning': 'bright_yellow',
        'info': 'bright_cyan',
        'morse': 'purple',
        'timing': 'cyan',
        'wav': 'bright_blue',
        'file': 'yellow'
    }

    def __init__(self):
        # one icon and colour per pipeline stage
        super().__init__(
            icons=self.ICONS,
            styles=self.STYLES
        )


Log = Logger()
