"""
Custom exception hierarchy for the FAQ system.

This module defines all custom exceptions used throughout the FAQ system, organized by logical error domains:

- FAQSystemError: Base for all system-level errors
- ConfigurationError: For configuration issues

Generation errors inherit from GenerationError:
- GenerationError: Base for FAQ generation failures
- InsufficientContentError: Fewer qualifying sentences than the pipeline needs
- GenerationTimeoutError: Generation exceeded the caller's time bound

Document loading errors inherit from DocumentLoadError:
- DocumentLoadError: Base for loader failures (corrupt payload, decode errors)
- UnsupportedFormatError: No loader exists for the declared format
- EmptyExtractionError: The loader produced no usable text
"""

class FAQSystemError(Exception):
    """Base exception for all FAQ system errors."""
    pass

class ConfigurationError(FAQSystemError):
    """Raised when configuration is invalid or missing."""
    pass

class GenerationError(FAQSystemError):
    """Base exception for FAQ generation failures."""
    pass

class InsufficientContentError(GenerationError):
    """Raised when a document has too few qualifying sentences to generate FAQs.

    Attributes:
        found (int): Number of qualifying sentences found in the document.
        required (int): Number of qualifying sentences the pipeline needs.
    """
    def __init__(self, found, required, message=None):
        if message is None:
            message = (
                f"Not enough valid sentences found in the document: "
                f"{found} of {required} minimum. Provide a longer document with more complete sentences."
            )
        super().__init__(message)
        self.found = found
        self.required = required

class GenerationTimeoutError(GenerationError):
    """Raised when FAQ generation does not finish within the allowed time.

    Attributes:
        timeout (float): The time bound in seconds that was exceeded.
    """
    def __init__(self, timeout):
        super().__init__(f"FAQ generation exceeded the time limit of {timeout} seconds")
        self.timeout = timeout

class DocumentLoadError(FAQSystemError):
    """Raised when a document cannot be turned into plain text."""
    pass

class UnsupportedFormatError(DocumentLoadError):
    """Raised when no loader exists for a declared document format.

    Attributes:
        declared_format (str): The format that was requested.
    """
    def __init__(self, declared_format, supported=None):
        message = f"Unsupported file format: .{declared_format}"
        if supported:
            message += f". Please use one of: {', '.join(sorted(supported))}"
        super().__init__(message)
        self.declared_format = declared_format

class EmptyExtractionError(DocumentLoadError):
    """Raised when a loader extracts no text content from a document."""
    pass
