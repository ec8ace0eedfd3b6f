"""
Record layouts of the HUB3 bank statement report.

Each line of a report is exactly ``LINE_LENGTH`` characters long and ends with
a 3-digit record type code (``tip_sloga``) that selects its layout. Field
names are the ones used by the format documentation.

Reference: http://com.pbz.hr/download/Format_za_dostavu_izvadaka_klijentima_na_elektronskom_mediju.pdf
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from hub3.schema.fields import (
    FieldSpec,
    amount,
    currency,
    date,
    num,
    oib,
    record_type,
    sign,
    text,
)

LINE_LENGTH = 1000
RECORD_TYPE_LENGTH = 3
RECORD_TYPE_FIELD = "tip_sloga"
RECORD_COUNT_FIELD = "broj_slogova"


class RecordType(str, Enum):
    """Known record type codes."""
    FILE_HEADER = "900"
    STATEMENT_HEADER = "903"
    TRANSACTION = "905"
    STATEMENT_FOOTER = "907"
    CLOSING_SUMMARY = "909"
    RESERVED = "999"


@dataclass(frozen=True)
class RecordSchema:
    """Ordered field layout of one record type."""

    record_type: RecordType
    description: str
    fields: Tuple[FieldSpec, ...]

    def __post_init__(self):
        total = sum(f.length for f in self.fields)
        if total != LINE_LENGTH:
            raise ValueError(
                f"Layout {self.record_type.value} spans {total} characters, expected {LINE_LENGTH}"
            )
        last = self.fields[-1]
        if last.name != RECORD_TYPE_FIELD or last.length != RECORD_TYPE_LENGTH:
            raise ValueError(
                f"Layout {self.record_type.value} must end with the {RECORD_TYPE_FIELD} field"
            )
        names = [f.name for f in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"Layout {self.record_type.value} has duplicate field names")

    @property
    def code(self) -> str:
        return self.record_type.value

    @property
    def length(self) -> int:
        return sum(f.length for f in self.fields)

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)


FILE_HEADER = RecordSchema(
    RecordType.FILE_HEADER,
    "File header",
    (
        text("VBDI", 7),
        text("naziv_banke", 50),
        oib("OIB_banke"),
        text("vrsta_izvatka", 4),
        date("datum_obrade"),
        text("rezerva", 917),
        record_type(RECORD_TYPE_FIELD),
    ),
)

STATEMENT_HEADER = RecordSchema(
    RecordType.STATEMENT_HEADER,
    "Statement header",
    (
        text("vodeci_broj_banke", 7),
        text("BIC", 11),
        text("transakcijski_racun_klijenta", 21),
        currency("valuta_transakcijskog_racuna"),
        text("naziv_klijenta", 70),
        text("sjediste_klijenta", 35),
        text("maticni_broj", 8),
        oib("OIB_klijenta"),
        num("redni_broj_izvatka", 3),
        num("podbroj_izvatka", 3),
        date("datum_izvatka"),
        num("redni_broj_grupe_paketa", 4),
        text("vrsta_izvatka", 4),
        text("rezerva", 809),
        record_type(RECORD_TYPE_FIELD),
    ),
)

TRANSACTION = RecordSchema(
    RecordType.TRANSACTION,
    "Transaction",
    (
        text("oznaka_transakcije", 2),
        text("racun_primatelja_platitelja", 34),
        text("naziv_primatelja_platitelja", 70),
        text("adresa_primatelja_platitelja", 35),
        text("sjediste_primatelja_platitelja", 35),
        date("datum_valute"),
        date("datum_izvrsenja"),
        currency("valuta_pokrica"),
        amount("tecaj"),
        sign("predznak1"),
        amount("iznos_u_valuti_pokrica"),
        sign("predznak2"),
        amount("iznos"),
        text("poziv_na_broj_platitelja", 26),
        text("poziv_na_broj_primatelja", 26),
        text("sifra_namjene", 4),
        text("opis_placanja", 140),
        text("identifikator_transakcije1", 42),
        text("identifikator_transakcije2", 35),
        text("rezerva", 482),
        record_type(RECORD_TYPE_FIELD),
    ),
)

STATEMENT_FOOTER = RecordSchema(
    RecordType.STATEMENT_FOOTER,
    "Statement footer and balances",
    (
        text("transakcijski_racun_klijenta", 21),
        currency("valuta_transakcijskog_racuna"),
        text("naziv_klijenta", 70),
        num("redni_broj_izvatka", 3),
        num("redni_broj_prethodnog_izvatka", 3),
        date("datum_izvatka"),
        date("datum_prethodnog_stanja"),
        sign("predznak_prethodnog_stanja"),
        amount("prethodno_stanje"),
        sign("predznak_rezervacije"),
        amount("iznos_rezervacije"),
        date("datum_dozvoljenog_prekoracenja"),
        amount("dozvoljeno_prekoracenje"),
        amount("iznos_zaplijenjenih_sredstava"),
        sign("predznak_raspolozivog_stanja"),
        amount("iznos_raspolozivog_stanja"),
        sign("predznak_ukupnog_dugovnog_prometa"),
        amount("ukupni_dugovni_promet"),
        sign("predznak_ukupnog_potraznog_prometa"),
        amount("ukupni_potrazni_promet"),
        sign("predznak_novog_stanja"),
        amount("novo_stanje"),
        num("redni_broj_grupe_u_paketu", 4),
        num("broj_stavaka_u_grupi", 6),
        text("tekstualna_poruka", 420),
        text("rezerva", 317),
        record_type(RECORD_TYPE_FIELD),
    ),
)

CLOSING_SUMMARY = RecordSchema(
    RecordType.CLOSING_SUMMARY,
    "Closing batch summary",
    (
        date("datum_obrade"),
        num("broj_grupa", 5),
        num(RECORD_COUNT_FIELD, 6),
        text("rezerva", 978),
        record_type(RECORD_TYPE_FIELD),
    ),
)

RESERVED = RecordSchema(
    RecordType.RESERVED,
    "Reserved",
    (
        text("rezerva", 997),
        record_type(RECORD_TYPE_FIELD),
    ),
)


class FormatRegistry(Mapping[str, RecordSchema]):
    """
    Read-only mapping from record type code to layout.

    Lookups are keyed by the raw 3-character code found at the end of a line.
    An unknown code is a lookup miss, not an error.
    """

    def __init__(self, *schemas: RecordSchema):
        self._schemas: Mapping[str, RecordSchema] = MappingProxyType(
            {schema.code: schema for schema in schemas}
        )

    def lookup(self, code: str) -> Optional[RecordSchema]:
        return self._schemas.get(code)

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(self._schemas)

    def __getitem__(self, code: str) -> RecordSchema:
        return self._schemas[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)


FORMAT_REGISTRY = FormatRegistry(
    FILE_HEADER,
    STATEMENT_HEADER,
    TRANSACTION,
    STATEMENT_FOOTER,
    CLOSING_SUMMARY,
    RESERVED,
)
