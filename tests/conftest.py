"""
Pytest configuration and fixtures.
"""
from typing import Callable, List

import pytest

from hub3.config import get_settings
from hub3.schema.fields import FieldKind
from hub3.schema.registry import FORMAT_REGISTRY, RECORD_TYPE_FIELD
from hub3.services.document_decoder import get_document_decoder


def _build_line(code: str, **values) -> str:
    """Render a line of record type ``code`` with the given field values."""
    schema = FORMAT_REGISTRY[code]
    unknown = set(values) - set(schema.field_names)
    if unknown:
        raise KeyError(f"Layout {code} has no fields {sorted(unknown)}")

    parts: List[str] = []
    for spec in schema.fields:
        if spec.name == RECORD_TYPE_FIELD:
            raw = code
        else:
            value = values.get(spec.name, "")
            if spec.kind == FieldKind.NUMERIC and isinstance(value, int):
                raw = str(value).rjust(spec.length, "0")
            else:
                raw = str(value).ljust(spec.length)
        if len(raw) > spec.length:
            raise ValueError(f"{spec.name} value {raw!r} is longer than {spec.length}")
        parts.append(raw)
    return "".join(parts)


@pytest.fixture
def make_line() -> Callable[..., str]:
    """Build a fixed-width line: ``make_line("905", iznos=1250)``."""
    return _build_line


@pytest.fixture
def sample_lines() -> List[str]:
    """A valid six-line report: header, one statement with two transactions, summary."""
    return [
        _build_line(
            "900",
            VBDI="2340009",
            naziv_banke="PRIVREDNA BANKA ZAGREB d.d.",
            OIB_banke="02535697732",
            vrsta_izvatka="HRK",
            datum_obrade="20200826",
        ),
        _build_line(
            "903",
            vodeci_broj_banke="2340009",
            BIC="PBZGHR2X",
            transakcijski_racun_klijenta="HR1723400091110779471",
            valuta_transakcijskog_racuna="HRK",
            naziv_klijenta="Žitnjak d.o.o.",
            sjediste_klijenta="Čakovec",
            maticni_broj="01234567",
            OIB_klijenta="12345678901",
            redni_broj_izvatka=42,
            podbroj_izvatka=0,
            datum_izvatka="20200826",
            redni_broj_grupe_paketa=1,
            vrsta_izvatka="HRK",
        ),
        _build_line(
            "905",
            oznaka_transakcije="20",
            racun_primatelja_platitelja="HR5824020061100000001",
            naziv_primatelja_platitelja="Đurđa Šimić",
            adresa_primatelja_platitelja="Ilica 1",
            sjediste_primatelja_platitelja="Zagreb",
            datum_valute="20200826",
            datum_izvrsenja="20200826",
            valuta_pokrica="HRK",
            predznak1="+",
            predznak2="+",
            iznos=125000,
            poziv_na_broj_primatelja="HR00 2020-08",
            sifra_namjene="SUPP",
            opis_placanja="Plaćanje računa 2020-08",
        ),
        _build_line(
            "905",
            oznaka_transakcije="10",
            naziv_primatelja_platitelja="Hrvatski telekom d.d.",
            datum_valute="20200826",
            datum_izvrsenja="20200826",
            valuta_pokrica="HRK",
            predznak2="-",
            iznos=34999,
            opis_placanja="Račun za telefon",
        ),
        _build_line(
            "907",
            transakcijski_racun_klijenta="HR1723400091110779471",
            valuta_transakcijskog_racuna="HRK",
            naziv_klijenta="Žitnjak d.o.o.",
            redni_broj_izvatka=42,
            redni_broj_prethodnog_izvatka=41,
            datum_izvatka="20200826",
            datum_prethodnog_stanja="20200825",
            predznak_prethodnog_stanja="+",
            prethodno_stanje=1000000,
            predznak_novog_stanja="+",
            novo_stanje=1090001,
            predznak_ukupnog_dugovnog_prometa="+",
            ukupni_dugovni_promet=34999,
            predznak_ukupnog_potraznog_prometa="+",
            ukupni_potrazni_promet=125000,
            redni_broj_grupe_u_paketu=1,
            broj_stavaka_u_grupi=2,
        ),
        _build_line("909", datum_obrade="20200826", broj_grupa=1, broj_slogova=6),
    ]


@pytest.fixture
def sample_report(sample_lines: List[str]) -> bytes:
    """The sample report as it arrives from the bank: cp1250, CRLF terminated."""
    return "".join(line + "\r\n" for line in sample_lines).encode("cp1250")


@pytest.fixture(autouse=True)
def reset_cached_instances(monkeypatch):
    """Clear cached settings and decoder so each test sees its own environment."""
    for name in ("HUB3_ENCODING", "HUB3_LOG_LEVEL", "HUB3_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_document_decoder.cache_clear()

    yield

    get_settings.cache_clear()
    get_document_decoder.cache_clear()
