"""Pure transformations over template line sequences."""

import re
from collections.abc import Sequence

from doc_generator.core import TagMarkers

_TAB_STOP = re.compile(r"\$\{?(\d+)")


def _matches(pattern: re.Pattern[str], line: str) -> bool:
    return bool(pattern.match(line.strip()))


def next_tab_stop(lines: Sequence[str]) -> int:
    """One past the highest snippet tab stop used in `lines` (at least 1)."""
    highest = 0
    for line in lines:
        for match in _TAB_STOP.finditer(line):
            highest = max(highest, int(match.group(1)))
    return highest + 1


def inject_parameters(
    template: Sequence[str], generated: Sequence[str], markers: TagMarkers
) -> list[str]:
    """
    Put generated parameter lines into a template.

    The first parameter-marker line is replaced by the whole generated
    block and any further parameter-marker lines are dropped. Without a
    marker the block goes right after the first description line, or
    before the final (closing) line when there is no description either.
    """
    out: list[str] = []
    replaced = False
    for line in template:
        if _matches(markers.param, line):
            if not replaced:
                out.extend(generated)
                replaced = True
            continue
        out.append(line)
    if replaced:
        return out

    injected: list[str] = []
    done = False
    for line in out:
        injected.append(line)
        if not done and _matches(markers.description, line):
            injected.extend(generated)
            done = True
    if done:
        return injected

    close_index = max(0, len(out) - 1)
    return out[:close_index] + list(generated) + out[close_index:]


def ensure_return_tag(lines: Sequence[str], markers: TagMarkers) -> list[str]:
    """
    Make sure exactly one return-tag line exists.

    A missing return line is inserted before the first example line, or
    before the final line of the sequence.
    """
    result = list(lines)
    if any(_matches(markers.returns, line) for line in result):
        return result

    return_line = markers.return_line.format(index=next_tab_stop(result))
    for i, line in enumerate(result):
        if _matches(markers.example, line):
            result.insert(i, return_line)
            return result

    result.insert(max(0, len(result) - 1), return_line)
    return result
