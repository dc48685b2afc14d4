class StartupFatalError(Exception):
    """Raised when the store cannot be opened or its schema cannot be created."""


class SourceAbsentError(Exception):
    """Raised when the seeding source file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Source file not found: '{path}'")


class SourceFormatError(Exception):
    """Raised when the seeding source is missing columns or has blank required cells."""


class AssetReadError(Exception):
    """Raised when a file referenced by the seeding source cannot be read."""

    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading asset '{path}': {cause}")


class SeedingError(Exception):
    """Wraps any failure that aborted a seeding run."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Seeding failed: {cause}")


class InstallError(Exception):
    """Base class for failures returned by the install operations."""

    @property
    def message(self) -> str:
        return str(self)


class CompetitionNotFoundError(InstallError):
    def __init__(self, competition_id: int):
        self.competition_id = competition_id
        super().__init__(f"No competition found with ID {competition_id}")


class EmptyPayloadError(InstallError):
    def __init__(self, competition_id: int):
        self.competition_id = competition_id
        super().__init__(
            f"The stored file for competition {competition_id} is empty (0 bytes). Check the seed data."
        )


class DiskIOError(InstallError):
    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Disk write error at '{path}': {cause}")
