"""Input validation for document requests.

Checks never stop at the first failure: each one appends to a shared
:class:`ValidationErrors` collector so the caller (usually an AI agent
relaying for a citizen) sees every problem in one response.

Typical usage::

    errors = ValidationErrors()
    validate_required(data.nama, "data.nama", "Nama Pemohon", errors)
    validate_nik(data.nik, "data.nik", errors)
    errors.raise_if_any()
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

NIK_LENGTH = 16
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 13
PHONE_PREFIXES = ("0", "62")
GENDER_LABELS = ("Laki-laki", "Perempuan")


@dataclass(frozen=True)
class ValidationError:
    """A single failed check on one request field."""

    field: str
    message: str
    suggestion: str | None = None

    def __str__(self) -> str:
        text = f"[{self.field}] {self.message}"
        if self.suggestion:
            text += f". {self.suggestion}"
        return text

    @classmethod
    def empty_field(cls, field: str, label: str) -> ValidationError:
        return cls(
            field,
            f"{label} tidak boleh kosong",
            f"Mohon isi {label.lower()} dengan data yang valid",
        )

    @classmethod
    def invalid_nik(cls, field: str) -> ValidationError:
        return cls(
            field,
            f"NIK harus terdiri dari {NIK_LENGTH} digit angka",
            "Periksa kembali NIK sesuai KTP, contoh: 3171234567890123",
        )

    @classmethod
    def invalid_phone(cls, field: str) -> ValidationError:
        return cls(
            field,
            "Nomor telepon tidak valid",
            "Gunakan format nomor telepon Indonesia, contoh: 08123456789",
        )

    @classmethod
    def invalid_date_format(cls, field: str, value: str) -> ValidationError:
        return cls(
            field,
            f"Format tanggal '{value}' tidak valid",
            "Gunakan format: Tempat, DD Bulan YYYY (contoh: Jakarta, 15 Januari 1990)",
        )

    @classmethod
    def invalid_gender(cls, field: str, value: str) -> ValidationError:
        return cls(
            field,
            f"Jenis kelamin '{value}' tidak dikenali",
            f"Gunakan salah satu dari: {' atau '.join(GENDER_LABELS)}",
        )


class DocumentValidationError(Exception):
    """Raised by :meth:`ValidationErrors.raise_if_any` when checks failed.

    ``str(exc)`` is the full formatted message, ready to be returned to the
    caller as tool output.
    """

    def __init__(self, errors: ValidationErrors) -> None:
        self.errors = errors
        super().__init__(errors.to_message())


class ValidationErrors:
    """Ordered, append-only collection of :class:`ValidationError`."""

    def __init__(self) -> None:
        self._errors: list[ValidationError] = []

    def add(self, error: ValidationError) -> None:
        self._errors.append(error)

    def is_empty(self) -> bool:
        return not self._errors

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    @property
    def fields(self) -> list[str]:
        """Dotted field paths of every recorded error, in order."""
        return [e.field for e in self._errors]

    def to_message(self) -> str:
        """Format all errors as one numbered, multi-line message."""
        if not self._errors:
            return ""

        lines = [f"Validasi gagal: {len(self._errors)} kesalahan ditemukan", ""]
        lines.extend(f"{i}. {error}" for i, error in enumerate(self._errors, start=1))
        lines.append("")
        lines.append("Mohon perbaiki data di atas dan coba lagi.")
        return "\n".join(lines)

    def raise_if_any(self) -> None:
        """Raise :class:`DocumentValidationError` unless the collector is empty."""
        if self._errors:
            raise DocumentValidationError(self)


# ---------------------------------------------------------------------------
# Field checks
# ---------------------------------------------------------------------------


def validate_required(value: str, field: str, label: str, errors: ValidationErrors) -> None:
    """The value must not be blank."""
    if not value.strip():
        errors.add(ValidationError.empty_field(field, label))


def _is_nik(value: str) -> bool:
    return len(value) == NIK_LENGTH and value.isascii() and value.isdigit()


def validate_nik(value: str, field: str, errors: ValidationErrors) -> None:
    """The value must be exactly 16 ASCII digits."""
    trimmed = value.strip()
    if not trimmed:
        errors.add(ValidationError.empty_field(field, "NIK"))
        return
    if not _is_nik(trimmed):
        errors.add(ValidationError.invalid_nik(field))


def validate_nik_optional(value: str, field: str, errors: ValidationErrors) -> None:
    """Like :func:`validate_nik`, but an empty value is accepted."""
    trimmed = value.strip()
    if trimmed and not _is_nik(trimmed):
        errors.add(ValidationError.invalid_nik(field))


def validate_phone(value: str, field: str, errors: ValidationErrors) -> None:
    """Loose Indonesian phone check: 10-13 digits starting with 0 or 62.

    Separators such as spaces, dashes, dots, parentheses and a leading ``+``
    are ignored.
    """
    trimmed = value.strip()
    if not trimmed:
        errors.add(ValidationError.empty_field(field, "Nomor Telepon"))
        return

    digits = "".join(c for c in trimmed if c.isascii() and c.isdigit())
    if not PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS or not digits.startswith(
        PHONE_PREFIXES
    ):
        errors.add(ValidationError.invalid_phone(field))


def validate_ttl(value: str, field: str, errors: ValidationErrors) -> None:
    """Tempat, tanggal lahir: non-empty and containing a comma separator."""
    trimmed = value.strip()
    if not trimmed:
        errors.add(ValidationError.empty_field(field, "Tempat, Tanggal Lahir"))
        return
    if "," not in trimmed:
        errors.add(ValidationError.invalid_date_format(field, trimmed))


def validate_gender(value: str, field: str, errors: ValidationErrors) -> None:
    """The value must be one of :data:`GENDER_LABELS`."""
    trimmed = value.strip()
    if not trimmed:
        errors.add(ValidationError.empty_field(field, "Jenis Kelamin"))
        return
    if trimmed not in GENDER_LABELS:
        errors.add(ValidationError.invalid_gender(field, trimmed))
