import csv
from pathlib import Path

from call_guard.domain.models import AnalysisMode, BlockReason, Verdict
from call_guard.utils import read_phone_list, write_verdicts


def test_read_phone_list(tmp_path: Path) -> None:
    file = tmp_path / "phones.txt"
    file.write_text("+123\n\nunknown\n #31#+7916 \n", encoding="utf-8")
    assert read_phone_list(file) == ["+123", "unknown", "#31#+7916"]


def test_write_verdicts(tmp_path: Path) -> None:
    file = tmp_path / "out.csv"
    verdicts = [
        ("+712345", Verdict(blocked=True, reason=BlockReason.SHORT_NUMBER)),
        ("+441234567890", Verdict(blocked=False)),
    ]
    write_verdicts(file, AnalysisMode.SMART, verdicts)
    with file.open(encoding="utf-8") as f:
        reader = list(csv.DictReader(f))
    assert reader == [
        {
            "phone_number": "+712345",
            "mode": "smart",
            "blocked": "True",
            "reason": "short_number",
            "threat_type": "Fraud",
        },
        {
            "phone_number": "+441234567890",
            "mode": "smart",
            "blocked": "False",
            "reason": "",
            "threat_type": "",
        },
    ]
