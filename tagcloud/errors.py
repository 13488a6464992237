"""
errors.py - Tag Cloud Error Taxonomy

Every failure aborts the run; nothing here is retried. Each exception
carries the context a caller needs to report it (offending parameter,
path or label) so launch.py can log a single actionable line.
"""


class TagCloudError(Exception):
    """Base class for all tag cloud failures."""


class InvalidArgument(TagCloudError, ValueError):
    """A parameter (N, a font bound, a config option) is out of range."""

    def __init__(self, name, reason):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid {name}: {reason}")


class SourceUnavailable(TagCloudError):
    """The input text could not be read."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read source {path}: {cause}")


class SourceEmpty(TagCloudError):
    """The input contains no words after tokenization."""

    def __init__(self, label):
        self.label = label
        super().__init__(f"Source {label} contains no words")


class DestinationUnwritable(TagCloudError):
    """The output document could not be written."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot write output {path}: {cause}")
