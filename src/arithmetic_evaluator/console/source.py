"""Read arithmetic expressions from a stream, a text file or an archive."""
from pathlib import Path
import sys
import tarfile
import tempfile
from typing import Iterable, Iterator, Optional, TextIO
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath

from arithmetic_evaluator.common.operations import OperationRequest


ARCHIVE_FORMATS = (".zip", ".tar.xz", ".7z")


class ExpressionSource(BaseModel):
    """
    Source of expressions, one per line.

    The source:
    - reads standard input (or any text stream) when no path is given
    - reads a plain ``.txt`` file directly
    - reads the first ``.txt`` member of a ``.zip``, ``.tar.xz`` or ``.7z`` archive
    - skips blank lines and strips surrounding whitespace
    """

    model_config = ConfigDict(frozen=True)

    path: Optional[FilePath] = Field(default=None, description="Input file or archive, stdin when omitted")

    def requests(self, stream: Optional[TextIO] = None) -> Iterator[OperationRequest]:
        """
        Yield one OperationRequest per non-blank input line.

        Line numbers refer to the physical input line, blank lines included.

        :param TextIO stream: Stream read when no path is configured, defaults to stdin

        :return: Iterator of requests
        :rtype: Iterator[OperationRequest]
        """
        if self.path is None:
            lines: Iterable[str] = stream if stream is not None else sys.stdin
        else:
            lines = self._read_file(self.path).splitlines()

        for line_number, line in enumerate(lines, start=1):
            expression = line.strip()
            if expression:
                yield OperationRequest(expression=expression, line_number=line_number)

    def _read_file(self, input_file: Path) -> str:
        """
        Return the text of a plain file or of the first text member of an archive.

        :param Path input_file: Path to the input file or archive

        :return: File content
        :rtype: str
        """
        if input_file.suffix == ".txt":
            return input_file.read_text(encoding="utf-8")
        return self._extract_archive(input_file)

    @staticmethod
    def _archive_format(archive_path: Path) -> str:
        """Return the archive suffix of ``archive_path`` or raise ValueError."""
        for archive_format in ARCHIVE_FORMATS:
            if archive_path.name.endswith(archive_format):
                return archive_format
        raise ValueError(f"📄❌ Unsupported input format: {''.join(archive_path.suffixes) or archive_path.name}")

    @staticmethod
    def _first_text_member(names: Iterable[str], archive_path: Path) -> str:
        """Pick the first member name ending in ``.txt``."""
        for name in names:
            if name.endswith(".txt"):
                return name
        raise ValueError(f"📄❌ No .txt file found in archive: {archive_path}")

    def _extract_archive(self, archive_path: Path) -> str:
        """
        Extract the first .txt member of a .zip, .tar.xz or .7z archive and return its text.

        :param Path archive_path: Path to the archive file

        :return: Content of the extracted .txt member
        :rtype: str
        :raises ValueError: If no .txt member is found or the format is unsupported
        """
        archive_format = self._archive_format(archive_path)

        with tempfile.TemporaryDirectory() as tmpdir:
            tmpdir_path = Path(tmpdir)
            if archive_format == ".zip":
                with zipfile.ZipFile(archive_path, "r") as zf:
                    member = self._first_text_member(zf.namelist(), archive_path)
                    zf.extract(member, path=tmpdir_path)
            elif archive_format == ".tar.xz":
                with tarfile.open(archive_path, "r:xz") as tf:
                    files = (info.name for info in tf.getmembers() if info.isfile())
                    member = self._first_text_member(files, archive_path)
                    tf.extract(member, path=tmpdir_path, filter="data")
            else:
                with py7zr.SevenZipFile(archive_path, mode="r") as archive:
                    member = self._first_text_member(archive.getnames(), archive_path)
                    archive.extract(path=tmpdir_path, targets=[member])

            return (tmpdir_path / member).read_text(encoding="utf-8")
