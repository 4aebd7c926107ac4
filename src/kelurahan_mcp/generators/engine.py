"""TypstEngine — compiles rendered Typst source to PDF in a private scratch directory.

Each call stages its own temporary directory, writes the source, runs
``<binary> compile <input> <output>`` inside it and reads the PDF back.  The
directory is removed on every exit path.  Blocking: async callers must run it
on a worker thread.
"""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from pathlib import Path

from kelurahan_mcp.generators.common import format_indonesian_date, sanitize_filename
from kelurahan_mcp.generators.errors import (
    ArtifactReadError,
    CompilerExitError,
    CompilerLaunchError,
    CompilerTimeoutError,
    ScratchDirError,
    SourceWriteError,
)
from kelurahan_mcp.generators.models import CompilerConfig, GeneratedDocument
from kelurahan_mcp.utils.telemetry import ATTR_COMPILER_EXIT_CODE, ATTR_TEMPLATE, get_tracer

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

_STDERR_TAIL = 2000


class TypstEngine:
    """Stateless wrapper around the Typst command-line compiler."""

    def __init__(self, config: CompilerConfig | None = None) -> None:
        self._config = config or CompilerConfig()

    @property
    def config(self) -> CompilerConfig:
        return self._config

    def render(
        self,
        source: str,
        *,
        source_filename: str,
        filename_prefix: str,
        subject_name: str,
        date_label: str | None = None,
    ) -> GeneratedDocument:
        """Compile *source* and package the PDF with a user-facing filename."""
        safe_name = sanitize_filename(subject_name, "document")
        pdf = self.compile(source, source_filename=source_filename, output_stem=f"output-{safe_name}")
        return GeneratedDocument(
            filename=f"{filename_prefix}-{safe_name}.pdf",
            pdf=pdf,
            date_label=date_label or format_indonesian_date(),
        )

    def compile(self, source: str, *, source_filename: str, output_stem: str) -> bytes:
        """Run the full stage → write → invoke → harvest sequence and return PDF bytes."""
        with _tracer.start_as_current_span("typst.compile") as span:
            span.set_attribute(ATTR_TEMPLATE, source_filename)

            try:
                scratch = tempfile.TemporaryDirectory(
                    prefix="kelurahan-typst-", dir=self._config.scratch_dir
                )
            except OSError as exc:
                raise ScratchDirError(str(exc)) from exc

            with scratch as workdir:
                source_path = Path(workdir) / source_filename
                output_path = Path(workdir) / f"{output_stem}.pdf"

                try:
                    source_path.write_text(source, encoding="utf-8")
                except (OSError, UnicodeEncodeError) as exc:
                    raise SourceWriteError(str(exc)) from exc

                exit_code = self._run(source_path, output_path, Path(workdir))
                span.set_attribute(ATTR_COMPILER_EXIT_CODE, exit_code)

                try:
                    return output_path.read_bytes()
                except OSError as exc:
                    raise ArtifactReadError(str(exc)) from exc

    def _run(self, source_path: Path, output_path: Path, workdir: Path) -> int:
        command = [self._config.binary, "compile", str(source_path), str(output_path)]
        env = {**os.environ, **self._config.env} if self._config.env else None
        logger.debug("Running %s in %s", command, workdir)

        try:
            proc = subprocess.run(
                command,
                cwd=workdir,
                env=env,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                timeout=self._config.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            logger.error("Typst compile of %s timed out after %ss", source_path.name, exc.timeout)
            raise CompilerTimeoutError(exc.timeout) from exc
        except OSError as exc:
            raise CompilerLaunchError(self._config.binary, str(exc)) from exc

        if proc.returncode != 0:
            stderr = proc.stderr.decode(errors="replace")[-_STDERR_TAIL:]
            logger.error(
                "Typst compile of %s exited with %d: %s",
                source_path.name,
                proc.returncode,
                stderr.strip(),
            )
            raise CompilerExitError(proc.returncode, stderr)

        return proc.returncode
