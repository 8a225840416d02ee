class DocDiffError(Exception):
    """Base class for errors that abort a run."""


class CorpusError(DocDiffError):
    """A corpus could not be loaded (unreadable root, bad JSON, bad query)."""


class CanonicalizationError(DocDiffError):
    """An HTML fragment could not be parsed during canonicalization."""


class ReportError(DocDiffError):
    """The report file could not be written."""
