"""Surat Pernyataan Akan Mengurus NIB & NPWP.

Signed by business owners who do not yet hold a business registration number
(NIB) or tax number (NPWP) and commit to obtaining both within three months.
"""

from __future__ import annotations

from pydantic import Field

from kelurahan_mcp.generators.base import DocumentGenerator, DocumentRequest, LetterMeta, prefixed
from kelurahan_mcp.generators.models import ToolArguments
from kelurahan_mcp.generators.validation import ValidationErrors, validate_nik, validate_required

_DATA_FIELDS = (
    "nama",
    "nik",
    "jabatan",
    "bidang_usaha",
    "kegiatan_usaha",
    "jenis_usaha",
    "alamat_usaha",
)


class NibNpwpData(ToolArguments):
    nama: str = ""
    nik: str = ""
    jabatan: str = ""
    bidang_usaha: str = ""
    kegiatan_usaha: str = ""
    jenis_usaha: str = ""
    alamat_usaha: str = ""


class SuratNibNpwpRequest(DocumentRequest):
    data: NibNpwpData
    meta: LetterMeta = Field(default_factory=LetterMeta)

    def letter_meta(self) -> LetterMeta:
        return self.meta

    def subject_name(self) -> str:
        return self.data.nama

    def validate_request(self) -> None:
        errors = ValidationErrors()

        d = self.data
        validate_required(d.nama, "data.nama", "Nama Pelaku Usaha", errors)
        validate_nik(d.nik, "data.nik", errors)
        validate_required(d.jabatan, "data.jabatan", "Jabatan", errors)
        validate_required(d.bidang_usaha, "data.bidang_usaha", "Bidang Usaha", errors)
        validate_required(d.kegiatan_usaha, "data.kegiatan_usaha", "Kegiatan Usaha", errors)
        validate_required(d.jenis_usaha, "data.jenis_usaha", "Jenis Usaha", errors)
        validate_required(d.alamat_usaha, "data.alamat_usaha", "Alamat Usaha", errors)

        errors.raise_if_any()


class SuratNibNpwpGenerator(DocumentGenerator[SuratNibNpwpRequest]):
    template_file = "surat_pernyataan_akan_mengurus_nib_npwp.typ"
    filename_prefix = "surat-nib-npwp"
    title = "Surat Pernyataan Akan Mengurus NIB & NPWP"
    request_model = SuratNibNpwpRequest
    fields = (*(f"data_{name}" for name in _DATA_FIELDS), "meta_tanggal")

    def template_context(
        self, request: SuratNibNpwpRequest, date_label: str
    ) -> dict[str, str | bool]:
        return {
            **prefixed("data", request.data, _DATA_FIELDS),
            "meta_tanggal": date_label,
        }
