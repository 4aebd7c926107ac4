"""Surat Pernyataan Tidak Mampu (SKTM).

A statement that a citizen, or a family member they sign for, comes from a
low-income household; used for social assistance, school fee relief and
health services.
"""

from __future__ import annotations

from pydantic import Field

from kelurahan_mcp.generators.base import (
    DocumentGenerator,
    DocumentRequest,
    LetterMeta,
    PersonData,
    prefixed,
)
from kelurahan_mcp.generators.validation import (
    ValidationErrors,
    validate_gender,
    validate_nik,
    validate_nik_optional,
    validate_phone,
    validate_required,
    validate_ttl,
)

_PENGISI_FIELDS = ("nama", "nik", "ttl", "jk", "agama", "pekerjaan", "alamat", "telp")
_SUBJEK_FIELDS = ("nama", "nik", "ttl", "jk", "agama", "pekerjaan", "alamat", "hubungan")


class PengisiData(PersonData):
    """The person filling in and signing the letter."""

    telp: str = ""


class SubjekData(PersonData):
    """The person the letter is about, when not the signer."""

    hubungan: str = Field(default="", description="Hubungan keluarga dengan pengisi")


class SuratTidakMampuMeta(LetterMeta):
    opsi_sendiri: bool = True
    kelurahan: str = ""


class SuratTidakMampuRequest(DocumentRequest):
    pengisi: PengisiData
    subjek: SubjekData = Field(default_factory=SubjekData)
    meta: SuratTidakMampuMeta

    def letter_meta(self) -> LetterMeta:
        return self.meta

    def subject_name(self) -> str:
        if not self.meta.opsi_sendiri and self.subjek.nama.strip():
            return self.subjek.nama
        return self.pengisi.nama

    def validate_request(self) -> None:
        errors = ValidationErrors()

        p = self.pengisi
        validate_required(p.nama, "pengisi.nama", "Nama Pengisi", errors)
        validate_nik(p.nik, "pengisi.nik", errors)
        validate_ttl(p.ttl, "pengisi.ttl", errors)
        validate_gender(p.jk, "pengisi.jk", errors)
        validate_required(p.agama, "pengisi.agama", "Agama Pengisi", errors)
        validate_required(p.pekerjaan, "pengisi.pekerjaan", "Pekerjaan Pengisi", errors)
        validate_required(p.alamat, "pengisi.alamat", "Alamat Pengisi", errors)
        validate_phone(p.telp, "pengisi.telp", errors)

        if not self.meta.opsi_sendiri:
            s = self.subjek
            validate_required(s.nama, "subjek.nama", "Nama Subjek", errors)
            validate_nik_optional(s.nik, "subjek.nik", errors)
            validate_ttl(s.ttl, "subjek.ttl", errors)
            validate_gender(s.jk, "subjek.jk", errors)
            validate_required(s.agama, "subjek.agama", "Agama Subjek", errors)
            validate_required(s.pekerjaan, "subjek.pekerjaan", "Pekerjaan Subjek", errors)
            validate_required(s.alamat, "subjek.alamat", "Alamat Subjek", errors)
            validate_required(s.hubungan, "subjek.hubungan", "Hubungan Keluarga", errors)

        validate_required(self.meta.kelurahan, "meta.kelurahan", "Nama Kelurahan", errors)

        errors.raise_if_any()


class SuratTidakMampuGenerator(DocumentGenerator[SuratTidakMampuRequest]):
    template_file = "keterangan_tidak_mampu.typ"
    filename_prefix = "sktm"
    title = "Surat Pernyataan Tidak Mampu"
    request_model = SuratTidakMampuRequest
    fields = (
        *(f"pengisi_{name}" for name in _PENGISI_FIELDS),
        *(f"subjek_{name}" for name in _SUBJEK_FIELDS),
        "meta_opsi_sendiri",
        "meta_kelurahan",
        "meta_tanggal",
    )

    def template_context(
        self, request: SuratTidakMampuRequest, date_label: str
    ) -> dict[str, str | bool]:
        return {
            **prefixed("pengisi", request.pengisi, _PENGISI_FIELDS),
            **prefixed("subjek", request.subjek, _SUBJEK_FIELDS),
            "meta_opsi_sendiri": request.meta.opsi_sendiri,
            "meta_kelurahan": request.meta.kelurahan,
            "meta_tanggal": date_label,
        }
