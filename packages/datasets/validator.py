"""
Checks for the two bundled word lists.

start.txt holds the roots drawn at session start, dictionary.txt the words the
wordlist dictionary accepts. Both must be one lowercase a–z word per line;
roots must also be at least `min_length` long and must all appear in the
dictionary, otherwise a root could never be played.

    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("packages/datasets/data/start.txt",
                             "packages/datasets/data/dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Set
import hashlib


@dataclass
class FileReport:
    path: str
    exists: bool
    count: int = 0           # well-formed lines
    sha256: str = ""
    unique_count: int = 0
    invalid_lines: int = 0
    words: Set[str] = field(default_factory=set, repr=False)

    def to_dict(self) -> Dict:
        d = asdict(self)
        del d["words"]
        return d


def _well_formed(word: str, min_length: int) -> bool:
    return word.islower() and word.isalpha() and word.isascii() and len(word) >= min_length


def _check_file(path: Path, min_length: int) -> FileReport:
    if not path.exists():
        return FileReport(path=str(path), exists=False)

    raw = path.read_bytes()
    lines = [ln.strip() for ln in raw.decode("utf-8").splitlines()]
    valid = [w for w in lines if w and _well_formed(w, min_length)]
    return FileReport(
        path=str(path),
        exists=True,
        count=len(valid),
        sha256=hashlib.sha256(raw).hexdigest(),
        unique_count=len(set(valid)),
        invalid_lines=len(lines) - len(valid),
        words=set(valid),
    )


def _file_issues(label: str, rep: FileReport) -> List[str]:
    if not rep.exists:
        return [f"{label} file not found: {rep.path}"]
    issues = []
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if rep.invalid_lines:
        issues.append(f"{label} has {rep.invalid_lines} invalid line(s)")
    # reported only; duplicates don't fail the check
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return issues


def validate_wordlists(start_path: str, dictionary_path: str, min_length: int = 3) -> Dict:
    """
    Validate the start/dictionary word lists.

    Returns a JSON-serializable dict:
      min_length, start, dictionary (per-file reports), start_subset_dictionary,
      passed (strict: both files present, non-empty, no invalid lines, roots
      all in the dictionary) and issues (human-readable problems).
    """
    start = _check_file(Path(start_path), min_length)
    dictionary = _check_file(Path(dictionary_path), 1)

    issues = _file_issues("start", start) + _file_issues("dictionary", dictionary)

    both_exist = start.exists and dictionary.exists
    subset_ok = both_exist and start.words <= dictionary.words
    if both_exist and not subset_ok:
        missing = sorted(start.words - dictionary.words)[:5]
        issues.append(f"start words not subset of dictionary (e.g., {missing})")

    passed = subset_ok and all(
        r.count > 0 and r.invalid_lines == 0 for r in (start, dictionary))

    return {
        "min_length": min_length,
        "start": start.to_dict(),
        "dictionary": dictionary.to_dict(),
        "start_subset_dictionary": subset_ok,
        "passed": passed,
        "issues": issues,
    }


def pretty_summary(report: Dict) -> str:
    """
    One line for the console, e.g.
        start=30 (uniq=30, sha=abc123...) | dictionary=1491 (uniq=1491, sha=def456...) | start⊆dictionary=True | OK
    """
    parts = []
    for label in ("start", "dictionary"):
        r = report[label]
        parts.append(f"{label}={r['count']} (uniq={r['unique_count']}, sha={(r.get('sha256') or '')[:12]})")
    status = "OK" if report["passed"] else "FAIL"
    return " | ".join(parts + [f"start⊆dictionary={report['start_subset_dictionary']}", status])
