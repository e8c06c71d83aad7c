class UploadValidationError(Exception):
    """Raised when an uploaded workbook cannot be classified (no file, no data rows)."""
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class WorkbookReadError(Exception):
    """Raised when a file cannot be opened as a workbook."""
    def __init__(self, message):
        super().__init__(message)
        self.message = message
