"""Batch orchestration: discover PDFs, strip them, optionally delete originals"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from structured_logging import StructuredLogger

from .detection import find_pdfs, is_pdf
from .engines.base import TextLayerStripper
from .errors import (
    ProcessingError,
    TargetNotFoundError,
    UnsupportedTargetError,
)
from .models import BatchReport, DeletionStatus, FileOutcome, TargetSpec, TargetStatus
from .transform import OUTPUT_DIR_NAME, remove_ocr

processing_logger = StructuredLogger('deocr.processing')


class BatchReporter:
    """Receives per-file events as the batch runs. All hooks are no-ops."""

    def output_dir_created(self, path: Path) -> None:
        pass

    def processed(self, outcome: FileOutcome) -> None:
        pass

    def process_failed(self, outcome: FileOutcome) -> None:
        pass

    def deleted(self, outcome: FileOutcome) -> None:
        pass

    def delete_failed(self, outcome: FileOutcome) -> None:
        pass

    def skipped(self, path: Path) -> None:
        pass

    def not_found(self, path: Path) -> None:
        pass

    def unsupported(self, path: Path) -> None:
        pass

    def no_pdfs(self, path: Path) -> None:
        pass

    def finished(self, report: BatchReport) -> None:
        pass


def classify_target(path: Path) -> TargetStatus:
    """
    Decide how a target path is handled.

    Raises:
        TargetNotFoundError: Path does not exist
        UnsupportedTargetError: Path is neither a regular file nor a directory
    """
    if not path.exists():
        raise TargetNotFoundError(path)
    if path.is_file():
        return TargetStatus.FILE
    if path.is_dir():
        return TargetStatus.DIRECTORY
    raise UnsupportedTargetError(path)


class BatchProcessor:
    """Runs one target through the configured stripping engine"""

    def __init__(
        self,
        stripper: TextLayerStripper,
        output_dir_name: str = OUTPUT_DIR_NAME,
        skip_output_dirs: bool = True,
        reporter: Optional[BatchReporter] = None,
    ):
        self.stripper = stripper
        self.output_dir_name = output_dir_name
        self.skip_output_dirs = skip_output_dirs
        self.reporter = reporter or BatchReporter()

    def collect(self, target: TargetSpec, status: TargetStatus, report: BatchReport) -> List[Path]:
        """Build the confirmed PDF set for a file or directory target"""
        if status is TargetStatus.FILE:
            if is_pdf(target.path):
                return [target.path]
            report.skipped.append(target.path)
            self.reporter.skipped(target.path)
            return []

        skip_dirs = (self.output_dir_name,) if self.skip_output_dirs else ()
        pdf_files = find_pdfs(target.path, skip_dirs=skip_dirs)
        if not pdf_files:
            self.reporter.no_pdfs(target.path)
        return pdf_files

    def run(self, target: TargetSpec) -> BatchReport:
        """Process every confirmed PDF of the target, one at a time"""
        try:
            status = classify_target(target.path)
        except TargetNotFoundError:
            report = BatchReport(target=target, status=TargetStatus.NOT_FOUND)
            self.reporter.not_found(target.path)
            return report
        except UnsupportedTargetError:
            report = BatchReport(target=target, status=TargetStatus.UNSUPPORTED)
            self.reporter.unsupported(target.path)
            return report

        report = BatchReport(target=target, status=status)
        for pdf_file in self.collect(target, status, report):
            report.outcomes.append(self.process_file(pdf_file, target.delete))

        processing_logger.log_event("batch_finished", report.to_dict())
        self.reporter.finished(report)
        return report

    def process_file(self, pdf_file: Path, delete: bool) -> FileOutcome:
        """Strip one file and, on success, optionally delete the original"""
        try:
            output_file = remove_ocr(
                pdf_file,
                self.stripper,
                self.output_dir_name,
                on_dir_created=self.reporter.output_dir_created,
            )
        except ProcessingError as e:
            processing_logger.log_error_with_context(
                e, {"operation": "process", "file": str(pdf_file)}, level=logging.WARNING
            )
            outcome = FileOutcome(
                path=pdf_file,
                processed=False,
                error=str(e),
                deletion=DeletionStatus.NOT_ATTEMPTED if delete else DeletionStatus.NOT_REQUESTED,
            )
            self.reporter.process_failed(outcome)
            return outcome

        outcome = FileOutcome(path=pdf_file, processed=True, output_path=output_file)
        self.reporter.processed(outcome)

        if delete:
            try:
                os.remove(pdf_file)
            except OSError as e:
                processing_logger.log_error_with_context(
                    e, {"operation": "delete", "file": str(pdf_file)}, level=logging.WARNING
                )
                outcome.deletion = DeletionStatus.FAILED
                outcome.delete_error = str(e)
                self.reporter.delete_failed(outcome)
            else:
                outcome.deletion = DeletionStatus.DELETED
                self.reporter.deleted(outcome)

        return outcome


def process_target(
    path,
    stripper: TextLayerStripper,
    delete: bool = False,
    reporter: Optional[BatchReporter] = None,
    output_dir_name: str = OUTPUT_DIR_NAME,
    skip_output_dirs: bool = True,
) -> BatchReport:
    """Convenience wrapper around BatchProcessor.run"""
    processor = BatchProcessor(
        stripper,
        output_dir_name=output_dir_name,
        skip_output_dirs=skip_output_dirs,
        reporter=reporter,
    )
    return processor.run(TargetSpec(path=Path(path), delete=delete))
