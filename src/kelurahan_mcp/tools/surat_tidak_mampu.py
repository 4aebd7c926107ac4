"""Tool definition for Surat Pernyataan Tidak Mampu (SKTM)."""

from __future__ import annotations

from kelurahan_mcp.tools.models import ToolDescriptor

TOOL_NAME = "generate_surat_tidak_mampu"

DESCRIPTION = (
    "Membuat Surat Pernyataan Tidak Mampu (SKTM) dalam format PDF. "
    "Surat ini digunakan untuk keperluan bantuan sosial, keringanan biaya pendidikan, "
    "atau layanan kesehatan bagi warga yang berasal dari keluarga tidak mampu. "
    "[PENTING] INSTRUKSI PENGGUNAAN: "
    "(1) WAJIB tanyakan semua data kepada warga SEBELUM memanggil tool ini. "
    "(2) Data pengisi yang harus dikumpulkan: nama lengkap, NIK (16 digit), "
    "tempat/tanggal lahir, jenis kelamin, agama, pekerjaan, alamat lengkap, nomor telepon. "
    "(3) Tanyakan apakah SKTM untuk diri sendiri atau untuk orang lain (anak/keluarga). "
    "(4) Jika untuk orang lain, kumpulkan juga data subjek dan hubungan keluarga. "
    "(5) DILARANG menggunakan data contoh/dummy seperti 'John Doe' atau NIK palsu. "
    "(6) Jika data belum lengkap, minta warga melengkapinya terlebih dahulu."
)


def _string(description: str) -> dict[str, str]:
    return {"type": "string", "description": description}


INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "pengisi": {
            "type": "object",
            "description": "Data orang yang mengisi/menandatangani surat",
            "properties": {
                "nama": _string("Nama lengkap pengisi"),
                "nik": _string("NIK (16 digit)"),
                "ttl": _string("Tempat, Tanggal Lahir"),
                "jk": _string("Jenis Kelamin (Laki-laki/Perempuan)"),
                "agama": _string("Agama"),
                "pekerjaan": _string("Pekerjaan"),
                "alamat": _string("Alamat lengkap"),
                "telp": _string("Nomor telepon/HP"),
            },
            "required": ["nama", "nik", "ttl", "jk", "agama", "pekerjaan", "alamat", "telp"],
        },
        "subjek": {
            "type": "object",
            "description": "Data orang yang dibuatkan SKTM (jika berbeda dengan pengisi)",
            "properties": {
                "nama": _string("Nama lengkap subjek"),
                "nik": _string("NIK (bila ada)"),
                "ttl": _string("Tempat, Tanggal Lahir"),
                "jk": _string("Jenis Kelamin"),
                "agama": _string("Agama"),
                "pekerjaan": _string("Pekerjaan"),
                "alamat": _string("Alamat"),
                "hubungan": _string("Hubungan keluarga dengan pengisi"),
            },
        },
        "meta": {
            "type": "object",
            "description": "Metadata surat",
            "properties": {
                "opsi_sendiri": {
                    "type": "boolean",
                    "description": "True jika SKTM untuk diri sendiri, false jika untuk orang lain",
                    "default": True,
                },
                "kelurahan": _string("Nama kelurahan"),
                "tanggal": _string("Tanggal surat (opsional, default: hari ini)"),
            },
            "required": ["kelurahan"],
        },
    },
    "required": ["pengisi", "meta"],
}


def descriptor() -> ToolDescriptor:
    return ToolDescriptor(name=TOOL_NAME, description=DESCRIPTION, input_schema=INPUT_SCHEMA)
