# src/parse_kit/client/file_types.py

import mimetypes
import os

from .errors import UnsupportedFileType

DEFAULT_CONTENT_TYPE = "application/octet-stream"

SUPPORTED_FILE_TYPES = frozenset(
    {
        # Documents
        ".pdf", ".602", ".abw", ".cgm", ".cwk", ".doc", ".docx", ".docm",
        ".dot", ".dotm", ".hwp", ".key", ".lwp", ".mw", ".mcw", ".pages",
        ".pbd", ".ppt", ".pptm", ".pptx", ".pot", ".potm", ".potx", ".rtf",
        ".sda", ".sdd", ".sdp", ".sdw", ".sgl", ".sti", ".sxi", ".sxw",
        ".stw", ".sxg", ".txt", ".uof", ".uop", ".uot", ".vor", ".wpd",
        ".wps", ".xml", ".zabw", ".epub",
        # Images
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".tiff", ".webp",
        # Web
        ".htm", ".html",
        # Spreadsheets
        ".xlsx", ".xls", ".xlsm", ".xlsb", ".xlw", ".csv", ".dif", ".sylk",
        ".slk", ".prn", ".numbers", ".et", ".ods", ".fods", ".uos1", ".uos2",
        ".dbf", ".wk1", ".wk2", ".wk3", ".wk4", ".wks", ".123", ".wq1",
        ".wq2", ".wb1", ".wb2", ".wb3", ".qpw", ".xlr", ".eth", ".tsv",
    }
)  # fmt: skip


def normalize_extension(file_type: str) -> str:
    """Turn a declared type into an extension with a leading dot.

    Accepts an extension ("pdf", ".PDF") or a MIME hint ("application/pdf").

    Raises:
        UnsupportedFileType: Not a string, or a MIME type with no known extension.
    """
    if not isinstance(file_type, str):
        raise UnsupportedFileType(repr(file_type))

    file_type = file_type.strip().lower()
    if "/" in file_type:
        extension = mimetypes.guess_extension(file_type.split(";")[0].strip())
        if extension is None:
            raise UnsupportedFileType(file_type)
        return extension
    return file_type if file_type.startswith(".") else f".{file_type}"


def validate_file_type(file_path_or_extension: str) -> str:
    """Return the extension if the service accepts it.

    Accepts either a bare extension (".pdf") or a path ("reports/q3.PDF").

    Raises:
        UnsupportedFileType: Extension missing or not in SUPPORTED_FILE_TYPES.
    """
    is_bare = file_path_or_extension.startswith(".") and not any(
        sep in file_path_or_extension for sep in ("/", os.sep)
    )
    if is_bare:
        extension = file_path_or_extension.lower()
    else:
        extension = os.path.splitext(file_path_or_extension)[1].lower()

    if extension not in SUPPORTED_FILE_TYPES:
        raise UnsupportedFileType(extension)
    return extension


def detect_content_type(filename: str) -> str:
    content_type, _ = mimetypes.guess_type(filename)
    return content_type or DEFAULT_CONTENT_TYPE
