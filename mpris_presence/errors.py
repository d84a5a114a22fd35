# mpris_presence/errors.py


class AppError(Exception):
    """Base class for every failure a poll tick can end with."""


class EnvVarError(AppError):
    def __init__(self, key: str):
        super().__init__(f"Environment variable error: {key} is not set")
        self.key = key


class ParseIntError(AppError):
    def __init__(self, key: str, raw: str):
        super().__init__(f"Failed to parse integer for {key}: {raw!r}")
        self.key = key
        self.raw = raw


class TypeMismatchError(AppError):
    def __init__(self, key: str):
        super().__init__(f"Type mismatch for key {key}")
        self.key = key


class PlayerError(AppError):
    pass


class NoActivePlayersError(AppError):
    def __init__(self):
        super().__init__("No active players")


class NoSongPlayingError(AppError):
    def __init__(self):
        super().__init__("No song is playing")


class FieldNotFoundError(AppError):
    def __init__(self, field: str):
        super().__init__(f"Field not found: {field}")
        self.field = field


class CoverArtError(AppError):
    pass


class TransportError(AppError):
    pass
