"""Exception hierarchy for rtlpdf."""


class ConverterError(Exception):
    """Base exception for all conversion errors."""


class InputUnavailableError(ConverterError, OSError):
    """A source file could not be read."""


class FontNotFoundError(ConverterError, FileNotFoundError):
    """The Unicode font file required for rendering is missing."""


class RenderError(ConverterError):
    """The rendering library failed to produce a PDF."""


class DeliveryError(ConverterError):
    """The rendered PDF could not be written to the response."""
