"""CSV export parsing and bulk action building."""

from pathlib import Path

from street_archive.domain.street_fields import SEARCHABLE_FIELDS
from street_archive.infrastructure.search.loader import (
    bulk_actions,
    read_csv_records,
    record_from_row,
)

HEADER = ",".join(SEARCHABLE_FIELDS)


def test_record_from_row_trims_fills_and_flags() -> None:
    record = record_from_row({"שם ראשי": "  הרצל ", "קוד": "812", "extra": "x", None: ["y"]})
    assert list(record) == [*SEARCHABLE_FIELDS, "deleted"]
    assert record["שם ראשי"] == "הרצל"
    assert record["קוד"] == "812"
    assert record["תואר"] == ""
    assert record["deleted"] is False
    assert "extra" not in record


def test_read_csv_records_handles_bom_and_blank_rows(tmp_path: Path) -> None:
    path = tmp_path / "streets.csv"
    path.write_text(
        "\ufeff" + HEADER + "\n"
        'אוסישקין,,מנחם (מנדל),ד. הסטוריה יהודית,,רחוב,801,א\n'
        ",,,,,,,\n"
        "בלפור,לורד,ג'ימס,ג. אישים בינלאומיים,,,805,\n",
        encoding="utf-8",
    )
    records = read_csv_records(path)
    assert [r["שם ראשי"] for r in records] == ["אוסישקין", "בלפור"]
    assert records[0]["שם מישני"] == "מנחם (מנדל)"
    assert all(r["deleted"] is False for r in records)


def test_bulk_actions_target_index() -> None:
    actions = list(bulk_actions("street-names", [{"שם ראשי": "א"}]))
    assert actions == [{"_index": "street-names", "_source": {"שם ראשי": "א"}}]
