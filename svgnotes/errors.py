"""Decode errors raised while turning SVGNotes text into a Document."""

from __future__ import annotations


class DocumentError(Exception):
    """Base class for every error that aborts a document decode."""


class MissingAttribute(DocumentError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Missing {name}")
        self.name = name


class InvalidAttribute(DocumentError):
    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Invalid {name}: `{value}`")
        self.name = name
        self.value = value


class InvalidPoint(DocumentError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid Point: `{token}`")
        self.token = token


class UnknownEvent(DocumentError):
    """Tag that is not a shape. Filtered by Document.parse, never surfaced."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Unknown Event: <{tag}>")
        self.tag = tag


class MalformedDocument(DocumentError):
    """The document text is not well-formed XML."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Malformed document: {reason}")
        self.reason = reason
