from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

@dataclass(frozen=True)
class ScoreRow:
    id: int
    class_name: str
    term: str
    average_score: Optional[float]

@dataclass(frozen=True)
class Placement:
    student_id: int
    position: int
    position_of: int

def rank_students(rows: Iterable[ScoreRow]) -> List[Placement]:
    """
    Ranks students within each (class_name, term) cohort by average score, highest first.

    Equal averages are ordered by student id so repeated runs always produce the
    same positions. A missing average ranks as 0. Every member of a cohort gets
    the cohort size as ``position_of``.
    """
    cohorts: Dict[Tuple[str, str], List[ScoreRow]] = defaultdict(list)
    for row in rows:
        cohorts[(row.class_name, row.term)].append(row)

    placements = []
    for members in cohorts.values():
        members.sort(key=lambda r: (-(r.average_score or 0), r.id))
        size = len(members)
        for index, row in enumerate(members, start=1):
            placements.append(Placement(student_id=row.id, position=index, position_of=size))
    return placements
