from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from inquirerer.questions.models import OptionValue


def option_keys(option: OptionValue) -> set[str]:
    """Strings a raw value may use to refer to ``option``."""
    return {option.name, str(option.value)}


def find_option(options: Iterable[OptionValue], raw: Any) -> OptionValue | None:
    key = str(raw)
    for option in options:
        if key in option_keys(option):
            return option
    return None


def annotate_selection(
    options: list[OptionValue],
    raw_values: Iterable[Any],
    allow_custom: bool = False,
) -> list[OptionValue]:
    """Return copies of ``options`` with ``selected`` set from ``raw_values``.

    Raw values match an option by name or by stringified value. With
    ``allow_custom`` the unmatched values are appended as selected options.
    """
    wanted = list(raw_values)
    keys = {str(v) for v in wanted}
    annotated = [
        option.model_copy(update={"selected": bool(option_keys(option) & keys)})
        for option in options
    ]
    if allow_custom:
        known: set[str] = set()
        for option in options:
            known |= option_keys(option)
        for raw in wanted:
            if str(raw) not in known:
                annotated.append(OptionValue(name=str(raw), value=raw, selected=True))
                known.add(str(raw))
    return annotated


def selection_result(
    annotated: list[OptionValue], return_full_results: bool
) -> list[OptionValue]:
    if return_full_results:
        return annotated
    return [option for option in annotated if option.selected]


def fuzzy_match(name: str, search: str) -> bool:
    """True when every character of ``search`` appears in ``name`` in order."""
    remaining = iter(name.lower())
    return all(ch in remaining for ch in search.lower())


def fuzzy_filter_indices(options: Sequence[OptionValue], search: str) -> list[int]:
    """Positions in ``options`` that match ``search``, ordered by option name."""
    matches = [i for i, option in enumerate(options) if fuzzy_match(option.name, search)]
    return sorted(matches, key=lambda i: options[i].name)


def fuzzy_filter(options: Sequence[OptionValue], search: str) -> list[OptionValue]:
    return [options[i] for i in fuzzy_filter_indices(options, search)]
