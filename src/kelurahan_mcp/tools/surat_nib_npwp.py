"""Tool definition for Surat Pernyataan Akan Mengurus NIB & NPWP."""

from __future__ import annotations

from kelurahan_mcp.tools.models import ToolDescriptor

TOOL_NAME = "generate_surat_nib_npwp"

DESCRIPTION = (
    "Membuat Surat Pernyataan Akan Mengurus NIB (Nomor Induk Berusaha) "
    "dan NPWP (Nomor Pokok Wajib Pajak) dalam format PDF. Surat ini digunakan oleh "
    "pelaku usaha yang belum memiliki NIB dan NPWP serta berkomitmen untuk mengurusnya "
    "dalam waktu maksimal 3 bulan. "
    "[PENTING] INSTRUKSI PENGGUNAAN: "
    "(1) WAJIB tanyakan semua data kepada warga SEBELUM memanggil tool ini. "
    "(2) Data yang harus dikumpulkan: nama lengkap, NIK (16 digit), jabatan dalam usaha. "
    "(3) Data usaha yang diperlukan: bidang usaha, kegiatan usaha, jenis usaha "
    "(Mikro/Kecil/Menengah), dan alamat lengkap lokasi usaha. "
    "(4) DILARANG menggunakan data contoh/dummy seperti 'John Doe' atau NIK palsu. "
    "(5) Jika data belum lengkap, minta warga melengkapinya terlebih dahulu."
)

_DATA_PROPERTIES = {
    "nama": "Nama lengkap pelaku usaha",
    "nik": "NIK (16 digit)",
    "jabatan": "Jabatan dalam usaha (mis: Pemilik, Direktur)",
    "bidang_usaha": "Bidang usaha (mis: Perdagangan, Jasa)",
    "kegiatan_usaha": "Deskripsi kegiatan usaha",
    "jenis_usaha": "Jenis usaha (Usaha Mikro/Kecil/Menengah)",
    "alamat_usaha": "Alamat lengkap lokasi usaha",
}

INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "data": {
            "type": "object",
            "description": "Data pelaku usaha",
            "properties": {
                name: {"type": "string", "description": text}
                for name, text in _DATA_PROPERTIES.items()
            },
            "required": list(_DATA_PROPERTIES),
        },
        "meta": {
            "type": "object",
            "description": "Metadata surat",
            "properties": {
                "tanggal": {
                    "type": "string",
                    "description": "Tanggal surat (opsional, default: hari ini)",
                },
            },
        },
    },
    "required": ["data"],
}


def descriptor() -> ToolDescriptor:
    return ToolDescriptor(name=TOOL_NAME, description=DESCRIPTION, input_schema=INPUT_SCHEMA)
