"""Shared fixtures: fake Typst binaries and valid tool arguments."""

from __future__ import annotations

import stat
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

FAKE_PDF = b"%PDF-1.7 fake"


@pytest.fixture
def fake_typst(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing an executable ``typst`` shell script with the given body.

    The script is invoked as ``typst compile <source> <output>``.
    """

    def _make(body: str) -> Path:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        script = bin_dir / "typst"
        script.write_text("#!/bin/sh\n" + body + "\n", encoding="utf-8")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


@pytest.fixture
def typst_ok(fake_typst: Callable[[str], Path]) -> Path:
    """A fake compiler that writes :data:`FAKE_PDF` to the output path."""
    return fake_typst("printf '%%PDF-1.7 fake' > \"$3\"")


@pytest.fixture
def typst_fail(fake_typst: Callable[[str], Path]) -> Path:
    """A fake compiler that reports an error and exits with status 1."""
    return fake_typst("echo 'error: unexpected token' >&2\nexit 1")


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    path = tmp_path / "scratch"
    path.mkdir()
    return path


@pytest.fixture
def sktm_arguments() -> dict[str, Any]:
    return {
        "pengisi": {
            "nama": "Siti Aminah",
            "nik": "3175010101900001",
            "ttl": "Jakarta, 1 Januari 1990",
            "jk": "Perempuan",
            "agama": "Islam",
            "pekerjaan": "Pedagang",
            "alamat": "Jl. Cakung Barat No. 10, Jakarta Timur",
            "telp": "081234567890",
        },
        "meta": {"opsi_sendiri": True, "kelurahan": "Cakung Barat"},
    }


@pytest.fixture
def kpr_arguments() -> dict[str, Any]:
    return {
        "data": {
            "nama": "Budi Santoso",
            "nik": "3175020202880002",
            "ttl": "Bekasi, 2 Februari 1988",
            "jk": "Laki-laki",
            "agama": "Kristen",
            "pekerjaan": "Karyawan Swasta",
            "alamat": "Jl. Raya Bekasi KM 20",
            "telp": "+62 812-3456-7890",
        },
        "meta": {"kelurahan": "Cakung Barat", "bank_tujuan": "BTN"},
    }


@pytest.fixture
def nib_arguments() -> dict[str, Any]:
    return {
        "data": {
            "nama": "Dewi Lestari",
            "nik": "3175030303920003",
            "jabatan": "Pemilik",
            "bidang_usaha": "Perdagangan",
            "kegiatan_usaha": "Warung sembako",
            "jenis_usaha": "Usaha Mikro",
            "alamat_usaha": "Jl. Pulo Gadung No. 5",
        },
        "meta": {"tanggal": "17 Agustus 2026"},
    }


POSTING_IDS = (
    "6f1c1d52-8a9e-4a57-9d43-0d5a0d2f9a01",
    "6f1c1d52-8a9e-4a57-9d43-0d5a0d2f9a02",
    "6f1c1d52-8a9e-4a57-9d43-0d5a0d2f9a03",
)


@pytest.fixture
def posting_rows() -> list[dict[str, Any]]:
    return [
        {
            "id": POSTING_IDS[0],
            "title": "Kerja Bakti RW 05",
            "category": "Kegiatan",
            "date": "2026-09-01",
            "excerpt": "Kerja bakti membersihkan saluran air.",
            "image_urls": ["https://cdn.example.com/a.jpg", "https://cdn.example.com/b.jpg"],
            "created_at": "2026-09-01T08:00:00+07:00",
            "updated_at": "2026-09-02T09:30:00+07:00",
        },
        {
            "id": POSTING_IDS[1],
            "title": "Posyandu Balita",
            "category": "Kesehatan",
            "date": "2026-09-10",
            "excerpt": "Jadwal posyandu bulan September.",
        },
        {
            "id": POSTING_IDS[2],
            "title": "Lomba 17 Agustus",
            "category": "Kegiatan",
            "date": "2026-08-17",
            "excerpt": "Pemenang lomba tujuh belasan.",
        },
    ]
