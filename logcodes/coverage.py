"""Cross-referencing catalog log codes against observed identifiers."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from logcodes.models import LogCode


def compute_uncovered(reference: Iterable[LogCode], observed: Iterable[str]) -> list[LogCode]:
    """Return the entries of ``reference`` whose human readable code is not observed.

    Matching is exact and case-sensitive. The result keeps ``reference``'s
    order and is neither reordered nor deduplicated.
    """
    seen = frozenset(observed)
    return [lc for lc in reference if lc.human_readable_code not in seen]


@dataclass(frozen=True)
class CoverageReport:
    total: int
    uncovered: tuple[LogCode, ...] = field(default_factory=tuple)

    @property
    def covered(self) -> int:
        return self.total - len(self.uncovered)

    @property
    def percent(self) -> float:
        # An empty catalog is vacuously fully covered.
        if self.total == 0:
            return 100.0
        return self.covered / self.total * 100

    @property
    def is_complete(self) -> bool:
        return not self.uncovered


def check_coverage(reference: Sequence[LogCode], observed: Iterable[str]) -> CoverageReport:
    uncovered = compute_uncovered(reference, observed)
    return CoverageReport(total=len(reference), uncovered=tuple(uncovered))


def find_mismatches(reference: Iterable[LogCode], emitted: Iterable[LogCode]) -> list[LogCode]:
    """Return catalog entries with no emitted entry equal on every field."""
    emitted_set = frozenset(emitted)
    return [lc for lc in reference if lc not in emitted_set]
