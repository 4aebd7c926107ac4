"""Tool definition for Surat Pernyataan Belum Memiliki Rumah (KPR)."""

from __future__ import annotations

from kelurahan_mcp.tools.models import ToolDescriptor

TOOL_NAME = "generate_surat_kpr_belum_punya_rumah"

DESCRIPTION = (
    "Membuat Surat Pernyataan Belum Memiliki Rumah dalam format PDF. "
    "Surat ini digunakan untuk keperluan pengajuan KPR (Kredit Pemilikan Rumah) di bank. "
    "[PENTING] INSTRUKSI PENGGUNAAN: "
    "(1) WAJIB tanyakan semua data kepada warga SEBELUM memanggil tool ini. "
    "(2) Data yang harus dikumpulkan: nama lengkap, NIK (16 digit), "
    "tempat/tanggal lahir, jenis kelamin, agama, pekerjaan, alamat lengkap, nomor telepon. "
    "(3) Tanyakan juga nama bank tujuan KPR (contoh: BTN, BRI, Mandiri). "
    "(4) DILARANG menggunakan data contoh/dummy seperti 'John Doe' atau NIK palsu. "
    "(5) Jika data belum lengkap, minta warga melengkapinya terlebih dahulu."
)

INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "data": {
            "type": "object",
            "description": "Data pemohon KPR",
            "properties": {
                "nama": {"type": "string", "description": "Nama lengkap pemohon"},
                "nik": {"type": "string", "description": "NIK (16 digit)"},
                "ttl": {"type": "string", "description": "Tempat, Tanggal Lahir"},
                "jk": {"type": "string", "description": "Jenis Kelamin (Laki-laki/Perempuan)"},
                "agama": {"type": "string", "description": "Agama"},
                "pekerjaan": {"type": "string", "description": "Pekerjaan"},
                "alamat": {"type": "string", "description": "Alamat lengkap"},
                "telp": {"type": "string", "description": "Nomor telepon/HP"},
            },
            "required": ["nama", "nik", "ttl", "jk", "agama", "pekerjaan", "alamat", "telp"],
        },
        "meta": {
            "type": "object",
            "description": "Metadata surat",
            "properties": {
                "kelurahan": {"type": "string", "description": "Nama kelurahan"},
                "bank_tujuan": {"type": "string", "description": "Nama bank tujuan KPR"},
                "tanggal": {
                    "type": "string",
                    "description": "Tanggal surat (opsional, default: hari ini)",
                },
            },
            "required": ["kelurahan", "bank_tujuan"],
        },
    },
    "required": ["data", "meta"],
}


def descriptor() -> ToolDescriptor:
    return ToolDescriptor(name=TOOL_NAME, description=DESCRIPTION, input_schema=INPUT_SCHEMA)
