class AdoprError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(AdoprError):
    pass


class SourceError(AdoprError):
    pass


class SourceAuthenticationError(SourceError):
    pass


class SourceRateLimitError(SourceError):
    pass


class SourceNotFoundError(SourceError):
    def __init__(self, message: str, resource: str) -> None:
        self.resource = resource
        super().__init__(message)


class MalformedResponseError(SourceError):
    def __init__(self, message: str, url: str, body: str) -> None:
        self.url = url
        self.body = body
        super().__init__(message)


class UnexpectedPayloadError(SourceError):
    def __init__(self, message: str, body: str) -> None:
        self.body = body
        super().__init__(message)


class RepositoryResolutionError(SourceError):
    def __init__(self, message: str, repository: str) -> None:
        self.repository = repository
        super().__init__(message)


class ReportWriteError(AdoprError):
    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message)


class ArtifactWriteError(AdoprError):
    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message)
