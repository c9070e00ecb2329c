class ElasticBackupError(Exception):
    """Base class for every failure reported by a backup run."""


class PreconditionError(ElasticBackupError):
    pass


class ConnectivityError(ElasticBackupError):
    pass


class RepositoryError(ElasticBackupError):
    pass


class SnapshotCreationError(ElasticBackupError):
    pass


class SnapshotDeletionError(ElasticBackupError):
    """Raised for a snapshot that could not be pruned. Never fatal."""


class ResponseDecodeError(ElasticBackupError):
    pass


class ApiError(ElasticBackupError):
    def __init__(self, status_code: int, error: object):
        super().__init__(f"HTTP {status_code}: {error}")
        self.status_code: int = status_code
        self.error: object = error
