"""Batch segmentation of text and JSONL files."""

import json
import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Iterator, Optional

import pandas as pd
from tqdm import tqdm

from .config import Config
from .dictionary import Dictionary, default_dictionary_path, load_dictionary
from .engines import SegmentationEngine, create_engine
from .models import DocumentMetadata, SegmentationResult, Token
from .utils import is_whitespace_token, sanitize_text

logger = logging.getLogger(__name__)

TOKENS_FILE = "tokens.csv"
LINES_FILE = "lines.csv"

# Per-process state for pool workers
_worker_dictionary: Optional[Dictionary] = None
_worker_engine: Optional[SegmentationEngine] = None


def _init_worker(config_data: dict) -> None:
    """Load the dictionary once per worker process."""
    global _worker_dictionary, _worker_engine
    config = Config(**config_data)
    _worker_dictionary, _worker_engine = build_engine(config)


def _process_record_worker(args: tuple) -> tuple[int, list[tuple[str, int, int]]]:
    """Worker for parallel processing. Must be module-level for pickling.

    Args:
        args: (line_num, text)

    Returns:
        (line_num, list of (token, start, end))
    """
    line_num, text = args
    return line_num, _worker_engine.segment_with_indices(text)


def build_engine(config: Config) -> tuple[Optional[Dictionary], SegmentationEngine]:
    """Load the configured dictionary and create the segmentation engine.

    Returns:
        Tuple of (dictionary or None for the tcc engine, engine)
    """
    dictionary = None
    if config.segmentation.engine == "newmm":
        source = config.dictionary.path or default_dictionary_path()
        dictionary = load_dictionary(
            source, fallback=config.dictionary.fallback_to_default
        )
        logger.info("Using %r", dictionary)
    engine = create_engine(
        config.segmentation.engine,
        dictionary,
        max_tokens=config.segmentation.max_tokens,
    )
    return dictionary, engine


class SegmentationPipeline:
    """Pipeline for segmenting Thai text files."""

    def __init__(self, config: Config):
        """Initialize segmentation pipeline.

        Args:
            config: Pipeline configuration

        Raises:
            OSError: If the word list cannot be read and fallback is disabled
        """
        self.config = config
        self.dictionary, self.segmenter = build_engine(config)

    def close(self) -> None:
        """Release the dictionary."""
        if self.dictionary is not None:
            self.dictionary.close()

    def __enter__(self) -> "SegmentationPipeline":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def process_line(
        self, text: str, metadata: DocumentMetadata
    ) -> SegmentationResult:
        """Process a single line of text.

        Args:
            text: Input text content
            metadata: Document metadata

        Returns:
            SegmentationResult with tokens and metadata
        """
        tokens = self._tokens_from_items(self.segmenter.segment_with_indices(text))
        return SegmentationResult(tokens=tokens, metadata=metadata)

    def iter_records(self, input_path: Path) -> Iterator[tuple[DocumentMetadata, str]]:
        """Yield (metadata, text) for every non-empty document in the input.

        JSONL files (``.jsonl``) hold one record per line; anything else is
        read as plain text with one document per line.
        """
        is_jsonl = input_path.suffix.lower() == ".jsonl"
        default_id = input_path.stem

        with open(input_path, "r", encoding="utf-8", errors="surrogateescape") as infile:
            for line_num, line in enumerate(infile, 1):
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                if not is_jsonl:
                    yield DocumentMetadata(default_id, line_num), line
                    continue

                try:
                    record = json.loads(line)
                except json.JSONDecodeError:
                    logger.warning("Skipping invalid JSON at line %d", line_num)
                    continue
                if not isinstance(record, dict):
                    continue

                text = next(
                    (record[f] for f in self.config.input.text_fields if record.get(f)),
                    "",
                )
                if not isinstance(text, str) or not text.strip():
                    continue
                source_id = str(record.get(self.config.input.id_field, default_id))
                yield DocumentMetadata(source_id, line_num), text

    def _token_rows(self, result: SegmentationResult) -> list[dict]:
        return [
            {
                "Token": token.text,
                "Source_ID": result.metadata.source_id,
                "Source_Line_Number": result.metadata.line_number,
                "Token_Order": idx,
                "Start_Index": token.start,
                "End_Index": token.end,
            }
            for idx, token in enumerate(result.tokens, 1)
        ]

    def _line_row(self, result: SegmentationResult) -> dict:
        return {
            "Source_ID": result.metadata.source_id,
            "Source_Line_Number": result.metadata.line_number,
            "Token_Count": len(result.tokens),
            "Segmented_Text": self.config.output.token_separator.join(result.token_texts),
        }

    def _process_sequential(self, records: list) -> list[SegmentationResult]:
        results = []
        desc_text = f"{self.config.segmentation.engine} segmentation"
        for metadata, text in tqdm(records, desc=desc_text):
            results.append(self.process_line(text, metadata))
        return results

    def _process_parallel(self, records: list) -> list[SegmentationResult]:
        """Segment records in worker processes, each with its own dictionary."""
        workers = self.config.segmentation.workers
        config_data = self.config.model_dump()
        by_line = {metadata.line_number: metadata for metadata, _ in records}
        results = {}

        desc_text = f"{self.config.segmentation.engine} segmentation ({workers} workers)"
        with ProcessPoolExecutor(
            max_workers=workers, initializer=_init_worker, initargs=(config_data,)
        ) as executor:
            futures = {
                executor.submit(_process_record_worker, (metadata.line_number, text)): metadata.line_number
                for metadata, text in records
            }
            for future in tqdm(as_completed(futures), total=len(futures), desc=desc_text):
                line_num, items = future.result()
                tokens = self._tokens_from_items(items)
                results[line_num] = SegmentationResult(tokens=tokens, metadata=by_line[line_num])

        return [results[line_num] for line_num in sorted(results)]

    def _tokens_from_items(self, items: list[tuple[str, int, int]]) -> list[Token]:
        tokens = [Token(*item) for item in items]
        if not self.config.segmentation.keep_whitespace:
            tokens = [t for t in tokens if not is_whitespace_token(t.text)]
        return tokens

    def _save_outputs(self, results: list[SegmentationResult]) -> None:
        output_dir = self.config.output.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)

        if self.config.output.save_token_rows:
            rows = [row for result in results for row in self._token_rows(result)]
            self._write_csv(rows, output_dir / TOKENS_FILE)
        if self.config.output.save_line_rows:
            rows = [self._line_row(result) for result in results]
            self._write_csv(rows, output_dir / LINES_FILE)

    @staticmethod
    def _write_csv(rows: list[dict], path: Path) -> None:
        df = pd.DataFrame(rows)
        for col in df.select_dtypes(include=["object"]).columns:
            df[col] = df[col].apply(
                lambda x: sanitize_text(x) if isinstance(x, str) else x
            )
        df.to_csv(path, index=False, encoding="utf-8", errors="surrogateescape")
        logger.info("Wrote %d rows to %s", len(df), path)

    def process_file(self, input_path: Path) -> int:
        """Segment every document in a file and write the CSV outputs.

        Args:
            input_path: Path to a text or JSONL file

        Returns:
            Number of lines processed
        """
        logger.info("Reading from: %s", input_path)
        records = list(self.iter_records(input_path))

        if self.config.segmentation.workers <= 1:
            results = self._process_sequential(records)
        else:
            results = self._process_parallel(records)

        self._save_outputs(results)
        return len(results)

    def run(self) -> int:
        """Run the segmentation pipeline.

        Returns:
            Number of lines processed
        """
        if not self.config.input_file:
            raise ValueError("Input file not specified in configuration")

        if not self.config.input_file.exists():
            raise FileNotFoundError(f"Input file not found: {self.config.input_file}")

        return self.process_file(self.config.input_file)
