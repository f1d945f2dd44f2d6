"""
Main word enrichment pipeline.
Reads the vocabulary dataset, improves every entry sequentially, then writes a
backup of the source and the improved dataset.

Usage:
    python -m word_enrichment.programmatic.enrichment_pipeline
    python -m word_enrichment.programmatic.enrichment_pipeline --file data/words.json --delay 0.5
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
import time
from collections.abc import Sequence
from pathlib import Path
from types import TracebackType
from typing import Any

from pydantic import ValidationError

from word_enrichment.api_helpers.base import (
    DictionaryLookup,
    LookupService,
    TranslationLookup,
)
from word_enrichment.api_helpers.dictionary_client import DictionaryClient
from word_enrichment.api_helpers.request_pacer import RequestPacer
from word_enrichment.api_helpers.translation_client import TranslationClient
from word_enrichment.exceptions import DatasetReadError, WordEnrichmentError
from word_enrichment.models import BatchResult, VocabularyEntry, WordsDataset

from .config import EnrichmentConfig
from .dataset_writer import DatasetWriter
from .field_improver import FieldImprover

logger = logging.getLogger(__name__)


def load_dataset(file_path: str | Path) -> tuple[bytes, WordsDataset]:
    """Load the vocabulary dataset from disk.

    Args:
        file_path: Path to the `{"words": [...]}` JSON file.

    Returns:
        The raw file content (kept for the verbatim backup) and the parsed
        dataset.

    Raises:
        DatasetReadError: If the file cannot be read, is not valid JSON, or
            does not contain a valid `words` list.
    """
    path = Path(file_path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DatasetReadError(f"Cannot read source dataset {path}: {e}") from e

    try:
        document = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DatasetReadError(f"Invalid JSON in source dataset {path}: {e}") from e

    try:
        dataset = WordsDataset.model_validate(document)
    except ValidationError as e:
        raise DatasetReadError(f"Invalid dataset structure in {path}: {e}") from e

    return raw, dataset


class VocabularyEnrichmentPipeline:
    """
    Orchestrator for one enrichment run.

    Entries are processed strictly one after another: entry i, including all of
    its paced network calls, finishes before entry i+1 starts. A failure while
    improving one entry never aborts the batch; the original entry is kept.
    """

    def __init__(
        self,
        config: EnrichmentConfig | None = None,
        *,
        dictionary: DictionaryLookup | None = None,
        translator: TranslationLookup | None = None,
        pacer: RequestPacer | None = None,
        writer: DatasetWriter | None = None,
    ):
        """
        Create a pipeline for a single batch run.

        Adapters that are not injected are built from `config` and owned by the
        pipeline, which closes them on context exit.

        Parameters:
            config (Optional[EnrichmentConfig]): Pipeline configuration; defaults to a new EnrichmentConfig().
            dictionary (Optional[DictionaryLookup]): Dictionary adapter override.
            translator (Optional[TranslationLookup]): Translation adapter override.
            pacer (Optional[RequestPacer]): Pacer override; defaults to one using `config.request_delay`.
            writer (Optional[DatasetWriter]): Writer override; defaults to one using the configured paths.

        Raises:
            DatasetPathError: If the configured output or backup path collides with the source path.
        """
        self.config = config or EnrichmentConfig()
        self._owned: list[LookupService] = []

        if dictionary is None:
            dictionary = DictionaryClient(base_url=self.config.dictionary_api_url)
            self._owned.append(dictionary)
        if translator is None:
            translator = TranslationClient(
                base_url=self.config.translation_api_url,
                source_language=self.config.source_language,
                target_language=self.config.target_language,
            )
            self._owned.append(translator)

        self.pacer = pacer or RequestPacer(self.config.request_delay)
        self.improver = FieldImprover(dictionary, translator, self.pacer)
        self.writer = writer or DatasetWriter(
            self.config.source_path,
            self.config.output_path,
            self.config.backup_path,
            timestamped_backup=self.config.timestamped_backup,
        )
        self.last_result: BatchResult | None = None

        if self.config.verbose_logging:
            self.config.log_configuration()

    async def enrich_entries(self, entries: Sequence[VocabularyEntry]) -> BatchResult:
        """
        Improve every entry in order.

        Args:
            entries: Entries to improve.

        Returns:
            BatchResult whose `entries` has exactly one element per input
            entry, in input order.
        """
        result = BatchResult()
        total = len(entries)

        for index, entry in enumerate(entries, start=1):
            logger.info(f"Processing {index}/{total}: {entry.word}")
            try:
                outcome = await self.improver.improve_with_outcome(entry)
            except Exception as e:
                logger.warning(
                    f"Error improving word {entry.word}, keeping original: {e}",
                    exc_info=True,
                )
                result.entries.append(entry)
                result.failed_words.append(entry.word)
            else:
                result.entries.append(outcome.entry)
                result.outcomes.append(outcome)

            if index % self.config.progress_interval == 0:
                logger.info(f"✓ Processed {index}/{total} words")

        return result

    async def run(self) -> BatchResult:
        """
        Run the full batch: load, improve, back up, write.

        Returns:
            BatchResult: Per-entry results and run statistics.

        Raises:
            DatasetReadError: If the source dataset is unreadable or malformed.
            BackupWriteError: If the backup cannot be written.
            DatasetWriteError: If the improved dataset cannot be written; the
                backup written before it is kept.
        """
        start_time = time.time()
        logger.info("Starting words data improvement process...")

        raw, dataset = load_dataset(self.config.source_path)
        logger.info(f"Found {len(dataset.words)} words to improve")

        result = await self.enrich_entries(dataset.words)
        improved = dataset.model_copy(update={"words": result.entries})

        self.writer.write_backup(raw)
        self.writer.write_dataset(improved)

        result.elapsed_seconds = time.time() - start_time
        self.last_result = result

        summary = result.summary()
        logger.info("Words data improvement completed")
        logger.info(
            f"Total words processed: {summary['total']} "
            f"(improved: {summary['changed']}, kept original after error: {summary['failed']})"
        )
        if result.incomplete_words:
            logger.warning(
                f"{len(result.incomplete_words)} entries still have empty fields: "
                f"{', '.join(result.incomplete_words[:10])}"
            )
        return result

    def get_performance_report(self) -> str:
        """
        Produce a human-readable report for the last run.

        Returns:
            report (str): A multi-line string with the request delay and, after a run, the batch statistics.
        """
        report = ["Performance Report:"]
        report.append(f"  Request delay: {self.pacer.interval_seconds}s")

        if self.last_result is not None:
            for key, value in self.last_result.summary().items():
                report.append(f"  {key}: {value}")
            if self.last_result.failed_words:
                report.append("\nKept original after error:")
                for word in self.last_result.failed_words:
                    report.append(f"  {word}")

        return "\n".join(report)

    async def close(self) -> None:
        """Close the adapters created by this pipeline."""
        for service in self._owned:
            await service.close()

    async def __aenter__(self) -> VocabularyEnrichmentPipeline:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        """
        Close owned adapters; exceptions raised in the context are propagated.

        Returns:
            bool: `False` to indicate exceptions should be propagated.
        """
        await self.close()
        return False


async def run_enrichment(config: EnrichmentConfig) -> BatchResult:
    """Run one batch with a freshly built pipeline."""
    async with VocabularyEnrichmentPipeline(config) as pipeline:
        result = await pipeline.run()
        logger.info("\n" + pipeline.get_performance_report())
        return result


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Improve the vocabulary dataset with dictionary definitions and Turkish translations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  improve-words-data                                  # Use configured defaults
  improve-words-data --file data/words.json --delay 0.5
  improve-words-data --timestamped-backup             # Keep earlier backups

Settings can also be provided as WORD_ENRICHMENT_* environment variables.
        """,
    )
    parser.add_argument("--file", help="Source dataset path")
    parser.add_argument("--output", help="Improved dataset path")
    parser.add_argument("--backup", help="Backup path")
    parser.add_argument(
        "--delay", type=float, help="Pause in seconds before every API call"
    )
    parser.add_argument(
        "--timestamped-backup",
        action="store_true",
        default=None,
        help="Append a timestamp to the backup file name",
    )
    parser.add_argument(
        "--verbose", action="store_true", default=None, help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """
    CLI entrypoint for the enrichment batch.

    Returns:
        int: 0 on success, 1 on any fatal error.
    """
    args = _parse_args(argv)
    overrides: dict[str, Any] = {
        key: value
        for key, value in {
            "source_path": args.file,
            "output_path": args.output,
            "backup_path": args.backup,
            "request_delay": args.delay,
            "timestamped_backup": args.timestamped_backup,
            "verbose_logging": args.verbose,
        }.items()
        if value is not None
    }

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        config = EnrichmentConfig(**overrides)
        result = asyncio.run(run_enrichment(config))
    except (WordEnrichmentError, ValidationError) as e:
        logger.error(f"Words data improvement failed: {e}")
        return 1
    except Exception:
        logger.exception("Unexpected error during words data improvement")
        return 1

    logger.info(f"Script completed successfully ({result.total} words)")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
