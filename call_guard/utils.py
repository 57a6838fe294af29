import csv
from pathlib import Path
from typing import Iterable, Tuple

from .domain.models import AnalysisMode, Verdict


def read_phone_list(path: Path) -> list[str]:
    """Read phone numbers from a text file, one per line."""
    return [line.strip() for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


def write_verdicts(
    path: Path, mode: AnalysisMode, verdicts: Iterable[Tuple[str, Verdict]]
) -> None:
    """Write classification verdicts to CSV."""
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(
            f, fieldnames=["phone_number", "mode", "blocked", "reason", "threat_type"]
        )
        writer.writeheader()
        for number, verdict in verdicts:
            writer.writerow(
                {
                    "phone_number": number,
                    "mode": mode.value,
                    "blocked": verdict.blocked,
                    "reason": verdict.reason.value if verdict.reason else "",
                    "threat_type": verdict.threat_type.value if verdict.blocked else "",
                }
            )
