from __future__ import annotations


class CsvValidatorError(Exception):
    """Base class for errors that halt processing of a file."""

    message = "Unexpected error while processing the file"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class InvalidFileType(CsvValidatorError):
    message = "Only CSV files are supported"


class EmptyInput(CsvValidatorError):
    message = "The file is empty"


class NormalizationFailure(CsvValidatorError):
    message = "Error while processing the file"


class SerializationFailure(CsvValidatorError):
    message = "Error while building the output file"
