import openpyxl
from io import BytesIO
import logging
from zipfile import BadZipFile
from openpyxl.utils.exceptions import InvalidFileException
from pricing_tracker.exceptions import WorkbookReadError


# Configure logging
logger = logging.getLogger(__name__)


class OpenPyXLFileHandler:
    """
    A file handler class that abstracts reading uploaded Excel exports using openpyxl.
    """

    def __init__(self, workbook=None):
        """
        Initialize the file handler with an existing workbook.
        """
        self.workbook = workbook

    @classmethod
    def from_file(cls, file_path, data_only=True):
        """
        Initialize the file handler with an Excel file from disk.

        Args:
            file_path (str): Path to the Excel file.
            data_only (bool): Whether to read the values instead of formulas.

        Returns:
            OpenPyXLFileHandler: An initialized file handler.

        Raises:
            WorkbookReadError: If the file is not a readable workbook.
        """
        logger.debug(f"File path we're loading the excel from is {file_path}")
        try:
            workbook = openpyxl.load_workbook(file_path, data_only=data_only)
        except (InvalidFileException, BadZipFile, KeyError, OSError) as e:
            raise WorkbookReadError(f"Could not open {file_path} as a workbook: {e}") from e
        return cls(workbook=workbook)

    @classmethod
    def from_file_like(cls, file, data_only=True):
        """
        Initialize the file handler with a file-like object.

        Args:
            file: A file-like object (e.g., from `request.files`).
            data_only (bool): Whether to read the values instead of formulas.

        Returns:
            OpenPyXLFileHandler: An initialized file handler.
        """
        return cls.from_bytes(file.read(), data_only=data_only)

    @classmethod
    def from_bytes(cls, data, data_only=True):
        """Initialize the file handler from raw .xlsx bytes."""
        try:
            workbook = openpyxl.load_workbook(BytesIO(data), data_only=data_only)
        except (InvalidFileException, BadZipFile, KeyError, OSError) as e:
            raise WorkbookReadError(f"Uploaded file is not a readable workbook: {e}") from e
        return cls(workbook=workbook)

    @classmethod
    def from_sheets_data(cls, sheets_data):
        """
        Initialize the file handler with in-memory sheets.

        Args:
            sheets_data (dict): Sheet name -> (rows, headers) or (rows, headers, header_row).

        Returns:
            OpenPyXLFileHandler: An initialized file handler.
        """
        handler = cls()
        handler._create_excel_file(sheets_data)
        return handler

    def get_sheet_names(self):
        """
        Get the names of all sheets in the workbook.

        :return: List of sheet names
        :rtype: list[str]
        """
        if self.workbook is None:
            raise ValueError("Workbook is not loaded.")
        return self.workbook.sheetnames

    def get_sheet(self, sheet_name):
        """
        Get a specific sheet by name.

        :param sheet_name: Name of the sheet
        :type sheet_name: str
        :return: The sheet object
        :rtype: openpyxl.worksheet.worksheet.Worksheet
        """
        if self.workbook is None:
            raise ValueError("Workbook is not loaded.")
        return self.workbook[sheet_name]

    def get_headers(self, sheet, header_row):
        """
        Get headers from a specific row in a sheet. Blank cells come back as None.

        :param sheet: The sheet object
        :param header_row: The row number containing headers
        :type header_row: int
        :return: List of headers
        :rtype: list[str | None]
        """
        headers = []
        for value in next(sheet.iter_rows(min_row=header_row, max_row=header_row, values_only=True), ()):
            if value is None or str(value).strip() == "":
                headers.append(None)
            else:
                headers.append(str(value).strip())
        return headers

    def get_rows(self, sheet, start_row):
        """
        Get all rows starting from a specific row.

        :return: List of rows, where each row is a tuple of cell values
        :rtype: list[tuple]
        """
        return list(sheet.iter_rows(min_row=start_row, values_only=True))

    def read_records(self, sheet_name, header_row=1):
        """
        Read one sheet into dictionaries keyed by header.

        Columns without a header are dropped and rows with no values are skipped.

        :rtype: list[dict]
        """
        sheet = self.get_sheet(sheet_name)
        headers = self.get_headers(sheet, header_row)
        records = []
        for row in self.get_rows(sheet, header_row + 1):
            if not any(v not in (None, "") for v in row):
                continue
            records.append({
                header: value
                for header, value in zip(headers, row)
                if header is not None
            })
        return records

    def to_bytes(self):
        """Serialize the workbook to .xlsx bytes."""
        if self.workbook is None:
            raise ValueError("No workbook is loaded or created to save.")
        buffer = BytesIO()
        self.workbook.save(buffer)
        return buffer.getvalue()

    def _create_excel_file(self, sheets_data):
        """
        Internal method to create a new Excel workbook with multiple sheets.

        Modifies:
            self.workbook: Sets this attribute to the newly created workbook.
        """
        self.workbook = openpyxl.Workbook()

        for idx, (sheet_name, sheet_data) in enumerate(sheets_data.items(), start=1):
            rows, headers = sheet_data[0], sheet_data[1]
            header_row = sheet_data[2] if len(sheet_data) > 2 else 1

            # Add a new sheet or use the default active sheet
            if idx == 1:
                sheet = self.workbook.active
                sheet.title = sheet_name
            else:
                sheet = self.workbook.create_sheet(title=sheet_name)

            # Write headers
            for col_num, header in enumerate(headers, start=1):
                sheet.cell(row=header_row, column=col_num, value=header)

            # Write data starting below the header row
            for row_idx, row in enumerate(rows, start=header_row + 1):
                for col_idx, value in enumerate(row, start=1):
                    sheet.cell(row=row_idx, column=col_idx, value=value)
