"""Error types for the document generation pipeline.

Every failure of the compile pipeline maps to exactly one subclass of
:class:`GeneratorError`.  None of them are retried.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base error for all document generation failures."""


class TemplateLoadError(GeneratorError):
    """A template could not be read or does not satisfy its field contract."""

    def __init__(self, template: str, detail: str = "") -> None:
        self.template = template
        self.detail = detail
        msg = f"failed to load Typst template {template}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class ScratchDirError(GeneratorError):
    """The private temporary directory could not be created."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"failed to create temporary directory: {detail}")


class SourceWriteError(GeneratorError):
    """The rendered Typst source could not be written to the scratch directory."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"failed to write Typst source: {detail}")


class CompilerLaunchError(GeneratorError):
    """The compiler binary could not be started."""

    def __init__(self, binary: str, detail: str = "") -> None:
        self.binary = binary
        self.detail = detail
        super().__init__(f"Typst CLI execution failed ({binary}): {detail}")


class CompilerExitError(GeneratorError):
    """The compiler ran but exited with a non-zero status."""

    def __init__(self, exit_code: int, stderr: str = "") -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(f"Typst CLI exited with status {exit_code}")


class CompilerTimeoutError(CompilerExitError):
    """The compiler was killed after exceeding the configured timeout."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(-1)
        self.args = (f"Typst CLI killed after {timeout}s (status -1)",)


class ArtifactReadError(GeneratorError):
    """The compiled PDF could not be read back."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"failed to read generated PDF: {detail}")
