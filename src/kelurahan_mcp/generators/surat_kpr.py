"""Surat Pernyataan Belum Memiliki Rumah, required for KPR (mortgage) applications."""

from __future__ import annotations

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
    validate_phone,
    validate_required,
    validate_ttl,
)

_DATA_FIELDS = ("nama", "nik", "ttl", "jk", "agama", "pekerjaan", "alamat", "telp")


class KprData(PersonData):
    telp: str = ""


class SuratKprMeta(LetterMeta):
    kelurahan: str = ""
    bank_tujuan: str = ""


class SuratKprRequest(DocumentRequest):
    data: KprData
    meta: SuratKprMeta

    def letter_meta(self) -> LetterMeta:
        return self.meta

    def subject_name(self) -> str:
        return self.data.nama

    def validate_request(self) -> None:
        errors = ValidationErrors()

        d = self.data
        validate_required(d.nama, "data.nama", "Nama Pemohon", errors)
        validate_nik(d.nik, "data.nik", errors)
        validate_ttl(d.ttl, "data.ttl", errors)
        validate_gender(d.jk, "data.jk", errors)
        validate_required(d.agama, "data.agama", "Agama", errors)
        validate_required(d.pekerjaan, "data.pekerjaan", "Pekerjaan", errors)
        validate_required(d.alamat, "data.alamat", "Alamat", errors)
        validate_phone(d.telp, "data.telp", errors)

        validate_required(self.meta.kelurahan, "meta.kelurahan", "Nama Kelurahan", errors)
        validate_required(self.meta.bank_tujuan, "meta.bank_tujuan", "Bank Tujuan KPR", errors)

        errors.raise_if_any()


class SuratKprGenerator(DocumentGenerator[SuratKprRequest]):
    template_file = "kpr_belum_memiliki_rumah.typ"
    filename_prefix = "surat-kpr"
    title = "Surat Pernyataan Belum Memiliki Rumah"
    request_model = SuratKprRequest
    fields = (
        *(f"data_{name}" for name in _DATA_FIELDS),
        "meta_kelurahan",
        "meta_bank_tujuan",
        "meta_tanggal",
    )

    def template_context(self, request: SuratKprRequest, date_label: str) -> dict[str, str | bool]:
        return {
            **prefixed("data", request.data, _DATA_FIELDS),
            "meta_kelurahan": request.meta.kelurahan,
            "meta_bank_tujuan": request.meta.bank_tujuan,
            "meta_tanggal": date_label,
        }
