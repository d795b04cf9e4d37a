"""Run orchestration: configuration, file selection, emission and output."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_CONFIG_NAME, load_config
from .engine import DeclarationEngine, merge_results
from .imports import ImportDedupIndex
from .logging import get_logger
from .models import DeclaratorConfig, RunResult
from .parser import ParseFailure, TypeScriptParser
from .selector import select_files


class DeclarationGenerator:
    """Generates one merged ambient declaration file from a configuration document."""

    def __init__(
        self,
        config_path: str | Path | None = None,
        *,
        cwd: str | Path | None = None,
        parser: TypeScriptParser | None = None,
        emit_imports: bool = False,
    ) -> None:
        self.config_path = config_path or DEFAULT_CONFIG_NAME
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.parser = parser or TypeScriptParser()
        self.emit_imports = emit_imports
        self.logger = get_logger("generator")

    def run(self) -> RunResult:
        """Execute a full generation run and write the output file."""
        self.logger.info("Reading configuration %s", self.config_path)
        config = load_config(self.config_path, cwd=self.cwd)

        out_file = config.out_file
        if out_file.is_file():
            self.logger.debug("Removing previous output %s", out_file)
            out_file.unlink()

        files = select_files(config.root_dir, config.include)
        self.logger.debug("Selected %d files under %s", len(files), config.root_dir)

        result = RunResult(out_file=out_file)
        content = merge_results(self._generate(config, files, result))

        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(content, encoding="utf-8")
        result.content = content

        self.logger.info("Done: %d files processed, %d skipped", len(result.processed), len(result.skipped))
        self.logger.info("The type file was generated in: %s", out_file)
        return result

    def _generate(
        self, config: DeclaratorConfig, files: List[str], result: RunResult
    ) -> List[Optional[str]]:
        engine = DeclarationEngine(ImportDedupIndex() if self.emit_imports else None)
        chunks: List[Optional[str]] = []
        for rel_path in files:
            file_path = config.root_dir / rel_path
            self.logger.info("Generating types for: %s", file_path)
            try:
                unit = self.parser.parse_file(file_path)
            except ParseFailure as exc:
                self.logger.warning("%s; skipping", exc)
                result.skipped.append(rel_path)
                continue
            chunks.append(engine.process_unit(unit))
            result.processed.append(rel_path)
        return chunks


__all__ = ["DeclarationGenerator"]
